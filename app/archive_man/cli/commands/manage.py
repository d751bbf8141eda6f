"""Directory inspection and cleanup commands.

Lists, counts, or deletes archive files whose names start with given
prefixes, e.g. the ``._`` resource forks macOS leaves on exFAT drives.
"""

from pathlib import Path
from typing import Annotated

import typer
from pydantic import ValidationError

from archive_man.core.errors import ArchiveManError, ArgumentError
from archive_man.filesystem.manager import DirectoryManager
from archive_man.filesystem.models import ManageAction, ManageCommand, ManageEvent, ManageOptions
from archive_man.utils.formatting import print_error, print_line

PrefixOption = Annotated[
    list[str] | None,
    typer.Option(
        "--prefix",
        "-p",
        help="Only match names starting with this prefix (repeatable).",
    ),
]

LimitOption = Annotated[
    int,
    typer.Option(
        "--limit",
        "-l",
        help="Stop after this many matching files (0 = no limit).",
    ),
]


def inspect(
    directory: Annotated[Path, typer.Argument(metavar="DIR", help="Directory to inspect.")],
    count: Annotated[
        bool,
        typer.Option("--count", help="Print only the number of matching files."),
    ] = False,
    prefix: PrefixOption = None,
    limit: LimitOption = 0,
) -> None:
    """List entries below DIR, optionally filtered by name prefix.

    Examples:
        archive-man inspect ~/Photos --prefix ._ --count
        archive-man inspect ~/Photos --prefix IMG_ --limit 10
    """
    total = _run(ManageCommand.INSPECT, directory, prefixes=prefix, limit=limit, count_only=count)

    if count:
        print_line(str(total))


def delete_files(
    directory: Annotated[Path, typer.Argument(metavar="DIR", help="Directory to clean.")],
    dry_run: Annotated[
        bool,
        typer.Option("--dry-run", help="Show what would be deleted."),
    ] = False,
    prefix: PrefixOption = None,
    limit: LimitOption = 0,
) -> None:
    """Delete files below DIR whose names match a prefix.

    Directories are never deleted, even when their names match.

    Examples:
        archive-man delete-files ~/Photos --prefix ._ --dry-run
        archive-man delete-files ~/Photos --prefix ._
    """
    total = _run(ManageCommand.DELETE, directory, prefixes=prefix, limit=limit, dry_run=dry_run)

    if dry_run:
        print_line(f"will delete: {total}")
    else:
        print_line(f"deleted: {total}")


# === Private helper functions ===


def _run(
    command: ManageCommand,
    directory: Path,
    prefixes: list[str] | None,
    limit: int,
    dry_run: bool = False,
    count_only: bool = False,
) -> int:
    """Run the directory manager and return the matching file count."""
    try:
        options = _build_options(prefixes, limit, dry_run=dry_run, count_only=count_only)
        stats = DirectoryManager(command, options, on_event=_print_event).run(directory)
    except ArchiveManError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e
    return stats.total


def _build_options(
    prefixes: list[str] | None,
    limit: int,
    dry_run: bool = False,
    count_only: bool = False,
) -> ManageOptions:
    """Validate CLI input into ManageOptions.

    Raises:
        ArgumentError: If the options fail validation.
    """
    try:
        return ManageOptions(
            prefixes=tuple(prefixes or ()),
            limit=limit,
            dry_run=dry_run,
            count_only=count_only,
        )
    except ValidationError as e:
        msg = f"--limit must be 0 or greater, got {limit}"
        raise ArgumentError(msg) from e


def _print_event(event: ManageEvent) -> None:
    """Print listed entries and dry-run deletions by relative path."""
    if event.action == ManageAction.LIST:
        print_line(event.entry.relative_path)
    elif event.dry_run:
        print_line(f"rm {event.entry.relative_path}")
