"""Exception hierarchy for archive-man.

Every error raised on purpose by the library derives from
ArchiveManError, so CLI commands can catch one base class, print the
message once and exit with status 1.
"""


class ArchiveManError(Exception):
    """Base exception for archive-man errors."""


class ArgumentError(ArchiveManError):
    """Raised when command-line input is invalid or inconsistent."""


class PathError(ArchiveManError):
    """Raised when a walk root cannot be resolved or stat'ed.

    Attributes:
        path: The path that could not be resolved.
    """

    def __init__(self, path: str, message: str) -> None:
        super().__init__(f"{message}: {path}")
        self.path = path


class TraversalError(ArchiveManError):
    """Raised when an I/O operation fails in the middle of a walk.

    The underlying OSError is chained as ``__cause__``. Side effects
    applied before the failure are not rolled back.

    Attributes:
        path: The entry being processed when the failure happened.
    """

    def __init__(self, path: str, cause: OSError) -> None:
        reason = cause.strerror or str(cause)
        super().__init__(f"{path}: {reason}")
        self.path = path


class ExternalToolError(ArchiveManError):
    """Raised when an external metadata tool is missing, fails, or emits
    output that cannot be parsed."""


class MetadataError(ArchiveManError):
    """Raised when an in-process decoder cannot read a file's metadata."""
