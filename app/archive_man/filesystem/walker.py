"""Relative-path directory walker.

Walks a directory tree depth-first in pre-order and hands every
descendant of the root to a visitor together with its path relative
to the root. The visitor steers the walk by returning a Decision.
"""

import logging
import os
import stat
from collections.abc import Callable
from pathlib import Path

from archive_man.core.errors import PathError, TraversalError
from archive_man.filesystem.models import Decision, TraversalEntry

logger = logging.getLogger(__name__)

Visitor = Callable[[TraversalEntry], Decision | None]


def resolve_root(root: str | Path) -> str:
    """Make a walk root absolute and check that it exists.

    Symlinks are not resolved, so relative paths computed against the
    returned root mirror the path the user typed.

    Args:
        root: Directory to walk.

    Returns:
        Absolute root path without a trailing separator.

    Raises:
        PathError: If the root cannot be resolved or stat'ed.
    """
    try:
        abs_root = os.path.abspath(root)
        os.stat(abs_root)
    except (OSError, ValueError) as e:
        raise PathError(str(root), f"Cannot access {getattr(e, 'strerror', None) or e}") from e
    return abs_root


def walk(root: str | Path, visit: Visitor) -> None:
    """Walk every descendant of ``root`` and call ``visit`` on each.

    Parents are visited before their children, siblings in lexical
    order. The root itself is never visited; a root that is not a
    directory yields nothing. Symlinks are reported but not followed.

    Args:
        root: Directory to walk.
        visit: Called once per entry. Returning None means CONTINUE.

    Raises:
        PathError: If the root cannot be resolved.
        TraversalError: If reading an entry fails, or ``visit`` raises OSError.
    """
    abs_root = resolve_root(root)
    if not os.path.isdir(abs_root):
        logger.debug("Walk root is not a directory: %s", abs_root)
        return
    _walk_dir(abs_root, abs_root, visit)


def list_entries(root: str | Path) -> list[TraversalEntry]:
    """Collect every descendant of ``root`` in walk order.

    Args:
        root: Directory to walk.

    Returns:
        List of TraversalEntry, parents before children.
    """
    entries: list[TraversalEntry] = []
    walk(root, entries.append)
    return entries


def _walk_dir(abs_root: str, directory: str, visit: Visitor) -> bool:
    """Visit the children of one directory, recursing into subdirectories.

    Returns:
        True if the visitor asked to stop the whole walk.
    """
    try:
        with os.scandir(directory) as it:
            children = sorted(it, key=lambda e: e.name)
    except OSError as e:
        raise TraversalError(directory, e) from e

    for child in children:
        try:
            is_dir = stat.S_ISDIR(child.stat(follow_symlinks=False).st_mode)
        except OSError as e:
            raise TraversalError(child.path, e) from e

        entry = TraversalEntry(
            absolute_path=child.path,
            relative_path=_relative_to(abs_root, child.path),
            is_dir=is_dir,
        )

        try:
            decision = visit(entry) or Decision.CONTINUE
        except OSError as e:
            raise TraversalError(child.path, e) from e

        if decision == Decision.STOP_ALL:
            logger.debug("Walk stopped at %s", entry.relative_path)
            return True
        if is_dir and decision != Decision.SKIP_SUBTREE:
            if _walk_dir(abs_root, child.path, visit):
                return True

    return False


def _relative_to(abs_root: str, path: str) -> str:
    """Strip the root prefix and the following separator from ``path``."""
    if not path.startswith(abs_root):
        msg = f"unexpected path outside walk root: {path}"
        raise ValueError(msg)
    return path[len(abs_root) :].lstrip(os.sep)
