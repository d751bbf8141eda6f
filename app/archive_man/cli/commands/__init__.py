"""CLI commands for archive-man.

This package contains all command implementations.
"""

from archive_man.cli.commands import exif, manage, sync

__all__ = ["exif", "manage", "sync"]
