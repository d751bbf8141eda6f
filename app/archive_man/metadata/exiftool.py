"""External exiftool integration.

The reporter talks to exiftool through the MetadataTool protocol so
tests can inject a fake instead of spawning processes.
"""

import logging
import subprocess
from typing import Protocol

from archive_man.core.errors import ExternalToolError
from archive_man.utils.shell import run_command, run_interactive

logger = logging.getLogger(__name__)

# Extract all tags, including duplicates and unknown ones, as JSON
EXIFTOOL_ARGS: tuple[str, ...] = ("-a", "-u", "-json")


class MetadataTool(Protocol):
    """Capability for dumping a file's metadata with an external tool."""

    def dump_json(self, path: str) -> str:
        """Return the tool's JSON output for ``path``.

        Raises:
            ExternalToolError: If the tool is missing or fails.
        """
        ...

    def passthrough(self, path: str) -> None:
        """Run the tool for ``path`` with output going straight to the terminal.

        Raises:
            ExternalToolError: If the tool is missing or fails.
        """
        ...


class ExifTool:
    """MetadataTool backed by the ``exiftool`` executable.

    Example:
        >>> print(ExifTool().dump_json("IMG_0001.JPG"))
    """

    def __init__(self, executable: str = "exiftool", timeout: float | None = 60.0) -> None:
        """Initialize the ExifTool wrapper.

        Args:
            executable: Name or path of the exiftool binary.
            timeout: Maximum time in seconds for a captured run.
        """
        self._executable = executable
        self._timeout = timeout

    def dump_json(self, path: str) -> str:
        args = self._args(path)
        logger.debug("Running %s", " ".join(args))
        try:
            result = run_command(args, timeout=self._timeout)
        except FileNotFoundError as e:
            raise ExternalToolError(self._not_found_message()) from e
        except subprocess.TimeoutExpired as e:
            msg = f"{self._executable} timed out after {self._timeout}s for {path}"
            raise ExternalToolError(msg) from e
        except OSError as e:
            msg = f"Failed to run {self._executable}: {e}"
            raise ExternalToolError(msg) from e

        if not result.success:
            detail = result.stderr.strip() or f"exit status {result.returncode}"
            msg = f"{self._executable} failed for {path}: {detail}"
            raise ExternalToolError(msg)
        return result.stdout

    def passthrough(self, path: str) -> None:
        args = self._args(path)
        logger.debug("Running %s", " ".join(args))
        try:
            returncode = run_interactive(args)
        except FileNotFoundError as e:
            raise ExternalToolError(self._not_found_message()) from e
        except OSError as e:
            msg = f"Failed to run {self._executable}: {e}"
            raise ExternalToolError(msg) from e

        if returncode != 0:
            msg = f"{self._executable} exited with status {returncode}"
            raise ExternalToolError(msg)

    def _args(self, path: str) -> list[str]:
        return [self._executable, *EXIFTOOL_ARGS, path]

    def _not_found_message(self) -> str:
        # exiftool is packaged as libimage-exiftool-perl on Debian, exiftool on Homebrew
        return f"{self._executable} not found in PATH; install it to use this command"
