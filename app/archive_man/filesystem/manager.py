"""Prefix-filtered inspection and deletion of archive entries.

Walks a directory and lists, counts, or deletes the entries whose base
name starts with one of the configured prefixes. Only files are ever
deleted; directories are always descended but never removed.
"""

import logging
import os
from collections.abc import Callable
from pathlib import Path

from archive_man.filesystem.models import (
    Decision,
    ManageAction,
    ManageCommand,
    ManageEvent,
    ManageOptions,
    ManageStats,
    TraversalEntry,
)
from archive_man.filesystem.walker import walk

logger = logging.getLogger(__name__)


class DirectoryManager:
    """Inspects or deletes prefix-matching entries below a directory.

    Supports dry-run mode for deletion and a limit on the number of
    matching files processed.

    Attributes:
        _command: Whether to inspect or delete.
        _options: Validated filter and mode options.
        _on_event: Optional callback receiving one ManageEvent per action.
    """

    def __init__(
        self,
        command: ManageCommand,
        options: ManageOptions | None = None,
        on_event: Callable[[ManageEvent], None] | None = None,
    ) -> None:
        self._command = command
        self._options = options or ManageOptions()
        self._on_event = on_event

    def run(self, root: str | Path, stats: ManageStats | None = None) -> ManageStats:
        """Walk ``root`` and apply the command to every matching entry.

        Args:
            root: Directory to walk.
            stats: Accumulator to fill. A new one is created if omitted.

        Returns:
            The accumulator holding the number of matching files.

        Raises:
            PathError: If the root cannot be resolved.
            TraversalError: If reading or deleting an entry fails.
        """
        if stats is None:
            stats = ManageStats()

        limit = self._options.limit

        def visit(entry: TraversalEntry) -> Decision:
            # Filtering never prunes: non-matching directories are still descended
            if not self._options.matches(entry.name):
                return Decision.CONTINUE

            if not entry.is_dir:
                stats.total += 1

            self._process(entry)

            if limit > 0 and stats.total >= limit:
                logger.debug("Limit of %d reached at %s", limit, entry.relative_path)
                return Decision.STOP_ALL
            return Decision.CONTINUE

        walk(root, visit)
        return stats

    def _process(self, entry: TraversalEntry) -> None:
        """Apply the configured command to a single matching entry."""
        if self._command == ManageCommand.INSPECT:
            if not self._options.count_only:
                self._emit(ManageAction.LIST, entry)
            return

        # Directories are never deleted
        if entry.is_dir:
            return

        if self._options.dry_run:
            logger.debug("Dry-run: would delete %s", entry.absolute_path)
            self._emit(ManageAction.DELETE, entry, dry_run=True)
            return

        os.remove(entry.absolute_path)
        logger.info("Deleted %s", entry.absolute_path)
        self._emit(ManageAction.DELETE, entry)

    def _emit(self, action: ManageAction, entry: TraversalEntry, dry_run: bool = False) -> None:
        if self._on_event is not None:
            self._on_event(ManageEvent(action=action, entry=entry, dry_run=dry_run))
