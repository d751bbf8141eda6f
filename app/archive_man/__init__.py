"""archive-man - Photo and video archive maintenance from the command line."""

__version__ = "0.1.0"
