"""CLI package for archive-man.

This package contains the Typer application and all commands.
"""

from archive_man.cli.main import app

__all__ = ["app"]
