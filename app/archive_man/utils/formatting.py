"""Rich console formatting utilities.

Provides consistent formatting for CLI output using Rich.
"""

import sys

import typer
from rich.console import Console
from rich.markup import escape

from archive_man.core.theme import get_theme


def _detect_color_system() -> str | None:
    """Detect the best color system for the current terminal.

    Returns "truecolor" for interactive terminals to enable full hex color support,
    None otherwise to let Rich auto-detect.
    """
    if sys.stderr.isatty():
        return "truecolor"
    return None


# Shared stderr console for diagnostics (theme loaded once at import)
err_console = Console(theme=get_theme(), stderr=True, color_system=_detect_color_system())


def print_line(message: str) -> None:
    """Print a plain output line.

    Used for paths and counts that scripts may parse, so no markup,
    highlighting or wrapping is applied.
    """
    typer.echo(message)


def print_warning(message: str) -> None:
    """Print a warning message."""
    err_console.print(f"[warning]Warning:[/] {escape(message)}", soft_wrap=True)


def print_error(message: str) -> None:
    """Print an error message."""
    err_console.print(f"[error]Error:[/] {escape(message)}", soft_wrap=True)
