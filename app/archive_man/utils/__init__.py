"""Utility modules for archive-man.

This module exports commonly used utility functions.
"""

from archive_man.utils.formatting import (
    err_console,
    print_error,
    print_line,
    print_warning,
)
from archive_man.utils.shell import CommandResult, run_command, run_interactive

__all__ = [
    "CommandResult",
    "err_console",
    "print_error",
    "print_line",
    "print_warning",
    "run_command",
    "run_interactive",
]
