"""Filesystem domain models for walking, syncing and managing archives.

This module defines the data structures passed between the path
walker, the sync engine and the directory manager: traversal entries,
option models validated at the CLI boundary, per-action events, and
the accumulators that collect counts during a walk.
"""

import os
from dataclasses import dataclass
from enum import Enum
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field

from archive_man.core.errors import ArgumentError


class Decision(Enum):
    """What the walker should do after visiting an entry.

    Attributes:
        CONTINUE: Keep walking, descending into the entry if it is a directory.
        SKIP_SUBTREE: Do not descend into this directory; siblings are still visited.
        STOP_ALL: End the whole walk immediately without error.
    """

    CONTINUE = "continue"
    SKIP_SUBTREE = "skip_subtree"
    STOP_ALL = "stop_all"


@dataclass(frozen=True, slots=True)
class TraversalEntry:
    """A filesystem node discovered below a walk root.

    Attributes:
        absolute_path: Absolute path of the node (always starts with the root).
        relative_path: Path relative to the walk root, without a leading separator.
        is_dir: True for real directories. Symlinks are never directories.
    """

    absolute_path: str
    relative_path: str
    is_dir: bool

    def __post_init__(self) -> None:
        """Validate entry data after initialization."""
        if not self.relative_path:
            msg = "Relative path cannot be empty"
            raise ValueError(msg)

    @property
    def name(self) -> str:
        """Base name of the entry."""
        return os.path.basename(self.absolute_path)


# =============================================================================
# Sync
# =============================================================================


class SyncMode(str, Enum):
    """How the sync engine treats source entries.

    Attributes:
        COPY: Copy files missing from the destination.
        CHECK_DUPLICATE: Report source files that already exist in the destination.
        REMOVE_SYNCED: Delete source files that already exist in the destination.
    """

    COPY = "copy"
    CHECK_DUPLICATE = "check_duplicate"
    REMOVE_SYNCED = "remove_synced"


class SyncOptions(BaseModel):
    """Options for a single sync run.

    Attributes:
        mode: Which sync mode to run.
        dry_run: Report intended mutations without performing them.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    mode: Annotated[SyncMode, Field(description="Sync mode")] = SyncMode.COPY
    dry_run: Annotated[bool, Field(description="Report without mutating")] = False

    @classmethod
    def from_flags(
        cls,
        *,
        dry_run: bool = False,
        check_duplicate: bool = False,
        remove_synced: bool = False,
    ) -> "SyncOptions":
        """Build options from the independent CLI flags.

        Args:
            dry_run: Report without mutating.
            check_duplicate: Select CHECK_DUPLICATE mode.
            remove_synced: Select REMOVE_SYNCED mode.

        Returns:
            Validated SyncOptions.

        Raises:
            ArgumentError: If both mode flags are set.
        """
        if check_duplicate and remove_synced:
            msg = "--check-duplicate and --remove-synced cannot be combined"
            raise ArgumentError(msg)

        mode = SyncMode.COPY
        if check_duplicate:
            mode = SyncMode.CHECK_DUPLICATE
        elif remove_synced:
            mode = SyncMode.REMOVE_SYNCED
        return cls(mode=mode, dry_run=dry_run)


class SyncAction(Enum):
    """Action taken (or planned) by the sync engine for one entry."""

    MKDIR = "mkdir"
    COPY = "cp"
    DUPLICATE = "duplicate"
    REMOVE = "rm"


@dataclass(frozen=True, slots=True)
class SyncEvent:
    """A single sync action reported to the caller.

    Attributes:
        action: What was done or planned.
        source: Absolute source path.
        destination: Destination path mirroring the source entry.
        dry_run: True when nothing was actually changed.
    """

    action: SyncAction
    source: str
    destination: str
    dry_run: bool = False


@dataclass(slots=True)
class SyncStats:
    """Counters accumulated during one sync walk.

    Attributes:
        dirs: Directories created (or reported in dry-run).
        files: Files copied, reported as duplicates, or planned for removal in dry-run.
    """

    dirs: int = 0
    files: int = 0

    def summary(self) -> str:
        """Format the counters as the final report line."""
        return f"dirs: {self.dirs}, files: {self.files}"


# =============================================================================
# Directory management
# =============================================================================


class ManageCommand(str, Enum):
    """Directory manager commands."""

    INSPECT = "inspect"
    DELETE = "delete"


class ManageOptions(BaseModel):
    """Options for inspecting or deleting entries in a directory.

    Attributes:
        prefixes: Base-name prefixes an entry must match. Empty matches everything.
        limit: Stop after this many matching files. 0 means unlimited.
        dry_run: Delete only; report without deleting.
        count_only: Inspect only; print the total instead of each entry.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    prefixes: Annotated[tuple[str, ...], Field(description="Name prefixes to match")] = ()
    limit: Annotated[int, Field(ge=0, description="Maximum matching files (0 = unlimited)")] = 0
    dry_run: Annotated[bool, Field(description="Report deletions without deleting")] = False
    count_only: Annotated[bool, Field(description="Only print the final count")] = False

    def matches(self, name: str) -> bool:
        """Check whether a base name passes the prefix filter."""
        if not self.prefixes:
            return True
        return any(name.startswith(prefix) for prefix in self.prefixes)


class ManageAction(Enum):
    """Action taken (or planned) by the directory manager for one entry."""

    LIST = "list"
    DELETE = "rm"


@dataclass(frozen=True, slots=True)
class ManageEvent:
    """A single directory manager action reported to the caller."""

    action: ManageAction
    entry: TraversalEntry
    dry_run: bool = False


@dataclass(slots=True)
class ManageStats:
    """Counters accumulated during one directory manager walk.

    Attributes:
        total: Matching non-directory entries processed.
    """

    total: int = 0
