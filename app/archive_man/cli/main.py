"""Main CLI application entry point.

Defines the Typer application and global options.
"""

from typing import Annotated, Any

import click
import typer
from typer.core import TyperGroup

from archive_man import __version__
from archive_man.cli.commands import exif, manage, sync
from archive_man.utils.logging import setup_logging

# Raised by click >= 8.2 when a group shows help for an empty command line
_NO_ARGS_HELP = getattr(click.exceptions, "NoArgsIsHelpError", ())

# Exit status for every failure, usage errors included
ERROR_EXIT_CODE = 1


class ArchiveManGroup(TyperGroup):
    """Command group that reports usage errors with exit status 1.

    Click exits with 2 on bad or missing arguments; archive-man uses a
    single failure status for usage and domain errors alike.
    """

    def make_context(
        self,
        info_name: str | None,
        args: list[str],
        parent: click.Context | None = None,
        **extra: Any,
    ) -> click.Context:
        try:
            return super().make_context(info_name, args, parent=parent, **extra)
        except click.UsageError as e:
            _set_error_exit_code(e)
            raise

    def invoke(self, ctx: click.Context) -> Any:
        try:
            return super().invoke(ctx)
        except click.UsageError as e:
            _set_error_exit_code(e)
            raise


def _set_error_exit_code(error: click.UsageError) -> None:
    if not isinstance(error, _NO_ARGS_HELP):
        error.exit_code = ERROR_EXIT_CODE


# Create main Typer app
app = typer.Typer(
    name="archive-man",
    cls=ArchiveManGroup,
    help="Maintain photo and video archive directories.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"archive-man version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Enable verbose output.",
        ),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Suppress non-essential output.",
        ),
    ] = False,
) -> None:
    """archive-man - Sync, clean up and inspect photo/video archives.

    Mirror a camera card into your archive without overwriting, find
    duplicates, prune synced files, delete junk by name prefix, and
    print EXIF dates.
    """
    setup_logging(verbose=verbose, quiet=quiet)


# Register commands
app.command("sync")(sync.sync_dirs)
app.command("inspect")(manage.inspect)
app.command("delete-files")(manage.delete_files)
app.command("delete-file", hidden=True)(manage.delete_files)
app.command("print-exif")(exif.print_exif)
app.command("print-exif-create-time")(exif.print_exif_create_time)


if __name__ == "__main__":
    app()
