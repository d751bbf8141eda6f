"""One-way sync between a source and a destination archive tree.

The engine walks the source tree and mirrors it into the destination
without ever overwriting: files already present at the same relative
path are left alone. Two auxiliary modes reuse the same walk to report
duplicates or to prune source files that are already synced.
"""

import logging
import os
import shutil
from collections.abc import Callable
from pathlib import Path

from archive_man.filesystem.models import (
    Decision,
    SyncAction,
    SyncEvent,
    SyncMode,
    SyncOptions,
    SyncStats,
    TraversalEntry,
)
from archive_man.filesystem.walker import walk

logger = logging.getLogger(__name__)

# Permission bits for newly created destination files
COPY_FILE_MODE = 0o755
DIR_MODE = 0o755


def path_exists(path: str) -> bool:
    """Check whether ``path`` exists.

    Only "not found" counts as absent; any other stat failure is raised.

    Raises:
        OSError: If the path cannot be stat'ed for another reason.
    """
    try:
        os.stat(path)
    except FileNotFoundError:
        return False
    return True


def copy_file(src: str, dst: str) -> None:
    """Copy file content and carry the source mtime over to ``dst``.

    The source is opened before the destination is touched, so an
    unreadable source never leaves a file behind. The destination is
    created or truncated with COPY_FILE_MODE and removed again if the
    copy fails. Its access time is left as the copy produced it.

    Raises:
        OSError: If reading, writing or updating timestamps fails.
    """
    with open(src, "rb") as src_file:
        fd = os.open(dst, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, COPY_FILE_MODE)
        try:
            with os.fdopen(fd, "wb") as dst_file:
                shutil.copyfileobj(src_file, dst_file)
        except OSError:
            _remove_partial(dst)
            raise

    src_mtime_ns = os.stat(src).st_mtime_ns
    dst_atime_ns = os.stat(dst).st_atime_ns
    os.utime(dst, ns=(dst_atime_ns, src_mtime_ns))


def _remove_partial(path: str) -> None:
    """Delete a partially written copy so later runs do not treat it as synced."""
    try:
        os.remove(path)
    except OSError as e:
        logger.warning("Could not remove partial copy %s: %s", path, e.strerror or e)


class SyncEngine:
    """Mirrors a source tree into a destination tree.

    Attributes:
        _source: Source root as given by the caller.
        _destination: Destination root as given by the caller.
        _options: Validated sync options.
        _on_event: Optional callback receiving one SyncEvent per action.
    """

    def __init__(
        self,
        source: str | Path,
        destination: str | Path,
        options: SyncOptions | None = None,
        on_event: Callable[[SyncEvent], None] | None = None,
    ) -> None:
        self._source = str(source)
        self._destination = str(destination)
        self._options = options or SyncOptions()
        self._on_event = on_event

    def run(self, stats: SyncStats | None = None) -> SyncStats:
        """Walk the source tree and apply the configured mode.

        Pass in a SyncStats to keep partial counts when the walk fails.

        Args:
            stats: Accumulator to fill. A new one is created if omitted.

        Returns:
            The accumulator with directory and file counts.

        Raises:
            PathError: If the source root cannot be resolved.
            TraversalError: If an I/O operation fails mid-walk.
        """
        if stats is None:
            stats = SyncStats()

        logger.debug(
            "Syncing %s -> %s (mode=%s, dry_run=%s)",
            self._source,
            self._destination,
            self._options.mode.value,
            self._options.dry_run,
        )

        def visit(entry: TraversalEntry) -> Decision:
            dst_path = os.path.join(self._destination, entry.relative_path)
            if entry.is_dir:
                self._handle_dir(entry, dst_path, stats)
            else:
                self._handle_file(entry, dst_path, stats)
            return Decision.CONTINUE

        walk(self._source, visit)
        return stats

    def _handle_dir(self, entry: TraversalEntry, dst_path: str, stats: SyncStats) -> None:
        if self._options.mode != SyncMode.COPY:
            return

        stats.dirs += 1
        if self._options.dry_run:
            self._emit(SyncAction.MKDIR, entry.absolute_path, dst_path, dry_run=True)
            return

        os.makedirs(dst_path, mode=DIR_MODE, exist_ok=True)
        logger.info("Ensured directory %s", dst_path)
        self._emit(SyncAction.MKDIR, entry.absolute_path, dst_path)

    def _handle_file(self, entry: TraversalEntry, dst_path: str, stats: SyncStats) -> None:
        src_path = entry.absolute_path
        dst_exists = path_exists(dst_path)
        mode = self._options.mode
        dry_run = self._options.dry_run

        if mode == SyncMode.CHECK_DUPLICATE:
            if dst_exists:
                stats.files += 1
                self._emit(SyncAction.DUPLICATE, src_path, dst_path)
            return

        if mode == SyncMode.REMOVE_SYNCED:
            if not dst_exists:
                logger.debug("Not synced yet, keeping %s", src_path)
                return
            # Only planned removals are counted
            if dry_run:
                stats.files += 1
                self._emit(SyncAction.REMOVE, src_path, dst_path, dry_run=True)
                return
            os.remove(src_path)
            logger.info("Removed synced %s", src_path)
            self._emit(SyncAction.REMOVE, src_path, dst_path)
            return

        # Copy mode never overwrites
        if dst_exists:
            logger.debug("Already exists, skipping %s", dst_path)
            return
        stats.files += 1
        if dry_run:
            self._emit(SyncAction.COPY, src_path, dst_path, dry_run=True)
            return
        copy_file(src_path, dst_path)
        logger.info("Copied %s -> %s", src_path, dst_path)
        self._emit(SyncAction.COPY, src_path, dst_path)

    def _emit(self, action: SyncAction, source: str, destination: str, dry_run: bool = False) -> None:
        if self._on_event is not None:
            self._on_event(SyncEvent(action=action, source=source, destination=destination, dry_run=dry_run))
