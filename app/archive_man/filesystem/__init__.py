"""Filesystem walking, syncing and management.

This module provides the relative-path walker, the one-way sync engine
and the prefix-filtered directory manager.
"""

from archive_man.filesystem.manager import DirectoryManager
from archive_man.filesystem.models import (
    Decision,
    ManageAction,
    ManageCommand,
    ManageEvent,
    ManageOptions,
    ManageStats,
    SyncAction,
    SyncEvent,
    SyncMode,
    SyncOptions,
    SyncStats,
    TraversalEntry,
)
from archive_man.filesystem.sync import SyncEngine, copy_file, path_exists
from archive_man.filesystem.walker import list_entries, resolve_root, walk

__all__ = [
    "Decision",
    "DirectoryManager",
    "ManageAction",
    "ManageCommand",
    "ManageEvent",
    "ManageOptions",
    "ManageStats",
    "SyncAction",
    "SyncEngine",
    "SyncEvent",
    "SyncMode",
    "SyncOptions",
    "SyncStats",
    "TraversalEntry",
    "copy_file",
    "list_entries",
    "path_exists",
    "resolve_root",
    "walk",
]
