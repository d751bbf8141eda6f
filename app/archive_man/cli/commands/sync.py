"""Sync command implementation.

Mirrors a source archive tree into a destination tree, or uses the
same walk to report duplicates or prune already-synced source files.
"""

from pathlib import Path
from typing import Annotated

import typer

from archive_man.core.errors import ArchiveManError
from archive_man.filesystem.models import SyncAction, SyncEvent, SyncMode, SyncOptions, SyncStats
from archive_man.filesystem.sync import SyncEngine
from archive_man.utils.formatting import print_error, print_line, print_warning


def sync_dirs(
    src: Annotated[Path, typer.Argument(help="Source directory.")],
    dst: Annotated[Path, typer.Argument(help="Destination directory.")],
    dry_run: Annotated[
        bool,
        typer.Option("--dry-run", help="Show what would be copied or removed."),
    ] = False,
    check_duplicate: Annotated[
        bool,
        typer.Option("--check-duplicate", help="Report source files already in DST."),
    ] = False,
    remove_synced: Annotated[
        bool,
        typer.Option("--remove-synced", help="Delete source files already in DST."),
    ] = False,
) -> None:
    """Copy files from SRC to DST without overwriting.

    Files that already exist at the same relative path in DST are left
    untouched, so running sync twice copies nothing the second time.
    Modification times are preserved on copied files.

    Examples:
        archive-man sync /media/card ~/Photos
        archive-man sync --dry-run /media/card ~/Photos
        archive-man sync --check-duplicate /media/card ~/Photos
        archive-man sync --remove-synced /media/card ~/Photos
    """
    try:
        options = SyncOptions.from_flags(
            dry_run=dry_run,
            check_duplicate=check_duplicate,
            remove_synced=remove_synced,
        )
    except ArchiveManError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    if options.dry_run and options.mode == SyncMode.CHECK_DUPLICATE:
        print_warning("--dry-run has no effect with --check-duplicate")

    stats = SyncStats()
    engine = SyncEngine(src, dst, options, on_event=_print_event)

    try:
        try:
            engine.run(stats)
        finally:
            # Partial counts are reported even when the walk fails
            print_line(stats.summary())
    except ArchiveManError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e


def _print_event(event: SyncEvent) -> None:
    """Print duplicates and dry-run plans; real mutations are only logged."""
    if event.action == SyncAction.DUPLICATE:
        print_line(f"duplicate {event.source} {event.destination}")
        return
    if not event.dry_run:
        return

    if event.action == SyncAction.MKDIR:
        print_line(f"mkdir {event.destination}")
    elif event.action == SyncAction.COPY:
        print_line(f"cp {event.source} {event.destination}")
    elif event.action == SyncAction.REMOVE:
        print_line(f"rm {event.source}")
