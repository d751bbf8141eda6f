"""Shell execution utilities.

Provides subprocess execution with proper error handling.
"""

import subprocess
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class CommandResult:
    """Result of a shell command execution.

    Attributes:
        stdout: Standard output from the command.
        stderr: Standard error from the command.
        returncode: Exit code of the command.
    """

    stdout: str
    stderr: str
    returncode: int

    @property
    def success(self) -> bool:
        """Check if command executed successfully."""
        return self.returncode == 0


def run_command(
    args: list[str],
    *,
    check: bool = False,
    timeout: float | None = 60.0,
) -> CommandResult:
    """Execute a command and capture its output.

    Args:
        args: Command and arguments to execute.
        check: If True, raise CalledProcessError on non-zero exit.
        timeout: Maximum time in seconds to wait for command.

    Returns:
        CommandResult with stdout, stderr, and returncode.

    Raises:
        subprocess.CalledProcessError: If check=True and command fails.
        subprocess.TimeoutExpired: If command exceeds timeout.
        FileNotFoundError: If command executable is not found.
    """
    result = subprocess.run(
        args,
        capture_output=True,
        text=True,
        check=check,
        timeout=timeout,
    )
    return CommandResult(
        stdout=result.stdout,
        stderr=result.stderr,
        returncode=result.returncode,
    )


def run_interactive(args: list[str]) -> int:
    """Execute a command, inheriting the terminal.

    Unlike run_command(), this does NOT capture stdout/stderr, so the
    command's output goes straight to the user's terminal.

    Args:
        args: Command and arguments to execute.

    Returns:
        Exit code of the command.

    Raises:
        FileNotFoundError: If command executable is not found.
        OSError: If command cannot be executed.
    """
    result = subprocess.run(args, check=False)
    return result.returncode
