"""Unit tests for DirectoryManager.

Tests prefix filtering, counting, listing, deletion, dry-run mode and
the file limit.
"""

from pathlib import Path

import pytest
from archive_man.core.errors import PathError
from archive_man.filesystem.manager import DirectoryManager
from archive_man.filesystem.models import ManageAction, ManageCommand, ManageEvent, ManageOptions


class TestInspect:
    """Tests for the INSPECT command."""

    def test_count_with_prefix(self, tmp_path: Path, make_tree) -> None:
        """Only files whose names match the prefix are counted."""
        root = make_tree(tmp_path / "root", ["foo1.txt", "bar.txt", "foo2.txt"])

        options = ManageOptions(prefixes=("foo",), count_only=True)
        stats = DirectoryManager(ManageCommand.INSPECT, options).run(root)

        assert stats.total == 2

    def test_count_only_emits_nothing(self, tmp_path: Path, make_tree) -> None:
        """count_only suppresses per-entry listing."""
        root = make_tree(tmp_path / "root", ["a.txt", "b.txt"])
        events: list[ManageEvent] = []

        options = ManageOptions(count_only=True)
        DirectoryManager(ManageCommand.INSPECT, options, on_event=events.append).run(root)

        assert events == []

    def test_lists_files_and_directories(self, tmp_path: Path, make_tree) -> None:
        """Listing includes matching directories, but only files are counted."""
        root = make_tree(tmp_path / "root", ["foo_dir/foo.txt", "foo_dir/other.txt", "foo.txt", "bar/"])
        events: list[ManageEvent] = []

        options = ManageOptions(prefixes=("foo",))
        stats = DirectoryManager(ManageCommand.INSPECT, options, on_event=events.append).run(root)

        assert [e.entry.relative_path for e in events] == ["foo.txt", "foo_dir", "foo_dir/foo.txt"]
        assert all(e.action == ManageAction.LIST for e in events)
        assert stats.total == 2

    def test_filter_does_not_prune(self, tmp_path: Path, make_tree) -> None:
        """Non-matching directories are still descended."""
        root = make_tree(tmp_path / "root", ["photos/2020/._IMG_1.jpg", "photos/IMG_2.jpg"])

        options = ManageOptions(prefixes=("._",), count_only=True)
        stats = DirectoryManager(ManageCommand.INSPECT, options).run(root)

        assert stats.total == 1

    def test_multiple_prefixes(self, tmp_path: Path, make_tree) -> None:
        """An entry matching any prefix is included."""
        root = make_tree(tmp_path / "root", ["a1", "b1", "c1"])

        options = ManageOptions(prefixes=("a", "c"), count_only=True)
        stats = DirectoryManager(ManageCommand.INSPECT, options).run(root)

        assert stats.total == 2

    def test_no_prefix_matches_everything(self, tmp_path: Path, make_tree) -> None:
        """Without prefixes every file is counted."""
        root = make_tree(tmp_path / "root", ["a", "d/b", "d/e/c"])

        stats = DirectoryManager(ManageCommand.INSPECT, ManageOptions()).run(root)

        assert stats.total == 3


class TestDelete:
    """Tests for the DELETE command."""

    def test_deletes_matching_files(self, tmp_path: Path, make_tree) -> None:
        """Matching files are removed; everything else stays."""
        root = make_tree(tmp_path / "root", ["tmp_a.txt", "keep.txt", "sub/tmp_b.txt"])

        stats = DirectoryManager(ManageCommand.DELETE, ManageOptions(prefixes=("tmp_",))).run(root)

        assert not (root / "tmp_a.txt").exists()
        assert not (root / "sub" / "tmp_b.txt").exists()
        assert (root / "keep.txt").exists()
        assert stats.total == 2

    def test_never_deletes_directories(self, tmp_path: Path, make_tree) -> None:
        """Directories matching the prefix are kept along with non-matching contents."""
        root = make_tree(tmp_path / "root", ["tmp_dir/inner.txt", "tmp_dir/tmp_x.txt", "tmp_empty/"])

        stats = DirectoryManager(ManageCommand.DELETE, ManageOptions(prefixes=("tmp_",))).run(root)

        assert (root / "tmp_dir").is_dir()
        assert (root / "tmp_empty").is_dir()
        assert (root / "tmp_dir" / "inner.txt").exists()
        assert not (root / "tmp_dir" / "tmp_x.txt").exists()
        assert stats.total == 1

    def test_dry_run_deletes_nothing(self, tmp_path: Path, make_tree) -> None:
        """Dry-run reports would-be deletions by relative path."""
        root = make_tree(tmp_path / "root", ["tmp_1.txt", "sub/tmp_2.txt", "other.txt"])
        events: list[ManageEvent] = []

        options = ManageOptions(prefixes=("tmp_",), dry_run=True)
        stats = DirectoryManager(ManageCommand.DELETE, options, on_event=events.append).run(root)

        assert (root / "tmp_1.txt").exists()
        assert (root / "sub" / "tmp_2.txt").exists()
        assert [e.entry.relative_path for e in events] == ["sub/tmp_2.txt", "tmp_1.txt"]
        assert all(e.dry_run and e.action == ManageAction.DELETE for e in events)
        assert stats.total == 2


class TestLimit:
    """Tests for the file limit."""

    def test_limit_stops_after_exactly_n(self, tmp_path: Path, make_tree) -> None:
        """Exactly N matching files are processed, then the walk stops."""
        root = make_tree(tmp_path / "root", [f"tmp_{i}.txt" for i in range(5)])

        options = ManageOptions(prefixes=("tmp_",), limit=3)
        stats = DirectoryManager(ManageCommand.DELETE, options).run(root)

        remaining = sorted(p.name for p in root.iterdir())
        assert stats.total == 3
        assert remaining == ["tmp_3.txt", "tmp_4.txt"]

    def test_limit_counts_files_only(self, tmp_path: Path, make_tree) -> None:
        """Matching directories do not consume the limit."""
        root = make_tree(tmp_path / "root", ["a_0dir/a_1", "a_2", "a_3"])
        events: list[ManageEvent] = []

        options = ManageOptions(prefixes=("a_",), limit=2)
        stats = DirectoryManager(ManageCommand.INSPECT, options, on_event=events.append).run(root)

        assert stats.total == 2
        assert [e.entry.relative_path for e in events] == ["a_0dir", "a_0dir/a_1", "a_2"]

    def test_limit_above_matches(self, tmp_path: Path, make_tree) -> None:
        """A limit above the number of matches processes all of them."""
        root = make_tree(tmp_path / "root", ["x1", "x2"])

        stats = DirectoryManager(ManageCommand.INSPECT, ManageOptions(limit=10, count_only=True)).run(root)

        assert stats.total == 2


class TestErrors:
    """Tests for error propagation."""

    def test_missing_root(self, tmp_path: Path) -> None:
        """A missing directory raises PathError."""
        with pytest.raises(PathError):
            DirectoryManager(ManageCommand.INSPECT).run(tmp_path / "missing")
