"""Tests for the find() scan entry point."""

import asyncio
import errno
from pathlib import Path
from unittest.mock import MagicMock, patch

from reclaimspace.scanner.finder import find
from reclaimspace.scanner.models import Category, ScanResult


def _find(roots: list[Path], ignore: list[str] | None = None, **kwargs) -> ScanResult:
    return asyncio.run(find([str(r) for r in roots], ignore or [], **kwargs))


class TestFind:
    """Tests for find()."""

    def test_mock_projects(self, project_tree: Path) -> None:
        """Targets come back ranked by category, then size."""
        result = _find([project_tree], ["ignored-folder"])

        names = [t.name for t in result.targets]
        assert names == ["node_modules", ".next", "dist", "coverage"]
        assert [t.category for t in result.targets] == [
            Category.NODE_MODULES,
            Category.BUILD,
            Category.BUILD,
            Category.TESTING,
        ]
        assert result.total_size >= 11000
        assert result.total_size == sum(t.size for t in result.targets)
        assert result.duration_seconds >= 0

    def test_ignored_folder_absent(self, project_tree: Path) -> None:
        """Ignored and non-category folders are not reported."""
        result = _find([project_tree], ["ignored-folder"])
        assert all("ignored-folder" not in t.path for t in result.targets)

    def test_ignore_removes_target(self, project_tree: Path) -> None:
        """An ignore pattern drops the matching target."""
        result = _find([project_tree], ["coverage"])
        assert "coverage" not in [t.name for t in result.targets]
        assert len(result.targets) == 3

    def test_build_patterns(self, project_tree: Path) -> None:
        """Build targets carry sniffed patterns, others do not."""
        result = _find([project_tree])
        by_name = {t.name: t for t in result.targets}
        assert "index.js" in by_name["dist"].build_patterns
        assert "index.js" in by_name[".next"].build_patterns
        assert by_name["node_modules"].build_patterns == ()

    def test_include_patterns(self, tmp_path: Path, make_dir) -> None:
        """Include patterns report only matching folders, as custom targets."""
        make_dir(tmp_path / "p" / "custom-build", 100)
        make_dir(tmp_path / "p" / "custom-dist", 300)
        make_dir(tmp_path / "p" / "node_modules", 1000)

        result = _find([tmp_path], include_patterns=["custom-build", "custom-dist"])

        assert [t.name for t in result.targets] == ["custom-dist", "custom-build"]
        assert {t.category for t in result.targets} == {Category.CUSTOM}

    def test_repeated_scans_identical(self, project_tree: Path) -> None:
        """Scanning twice yields the same paths in the same order."""
        first = _find([project_tree], concurrency_limit=1)
        second = _find([project_tree], concurrency_limit=5)
        assert [t.path for t in first.targets] == [t.path for t in second.targets]
        assert first.total_size == second.total_size

    def test_equal_sizes_tie_break_on_path(self, tmp_path: Path, make_dir) -> None:
        """Targets of the same category and size are ordered by path."""
        for name in ("c", "a", "b"):
            make_dir(tmp_path / name / "dist", 100)

        result = _find([tmp_path])

        assert [Path(t.path).parent.name for t in result.targets] == ["a", "b", "c"]

    def test_missing_root_skipped(self, project_tree: Path, tmp_path: Path) -> None:
        """A root that does not exist is skipped, others are still scanned."""
        result = _find([tmp_path / "nope", project_tree])
        assert len(result.targets) == 4

    def test_missing_root_reported(self, project_tree: Path, tmp_path: Path) -> None:
        """A missing root reaches the error callback as ENOENT."""
        on_error = MagicMock()
        missing = tmp_path / "nope"

        _find([missing, project_tree], on_error=on_error)

        on_error.assert_called_once()
        path, error = on_error.call_args.args
        assert path == str(missing)
        assert isinstance(error, FileNotFoundError)
        assert error.errno == errno.ENOENT

    def test_file_root_reported(self, tmp_path: Path) -> None:
        """A root that is a file reaches the error callback as ENOTDIR."""
        on_error = MagicMock()
        file_root = tmp_path / "notes.txt"
        file_root.write_text("x")

        result = _find([file_root], on_error=on_error)

        assert result.targets == []
        _, error = on_error.call_args.args
        assert isinstance(error, NotADirectoryError)

    def test_only_missing_roots(self, tmp_path: Path) -> None:
        """No valid roots yields an empty result."""
        result = _find([tmp_path / "nope"])
        assert result.targets == []
        assert result.total_size == 0

    def test_empty_tree(self, tmp_path: Path) -> None:
        """A tree without category folders yields nothing."""
        (tmp_path / "project" / "src").mkdir(parents=True)
        assert _find([tmp_path]).targets == []

    def test_sinks_used(self, project_tree: Path) -> None:
        """The status sink is stopped and progress covers every candidate."""
        progress = MagicMock()
        status = MagicMock()

        _find([project_tree], progress=progress, status=status)

        status.stop.assert_called_once()
        progress.start.assert_called_once_with(4, 0)
        assert progress.increment.call_count == 4

    def test_on_error_forwarded(self, project_tree: Path) -> None:
        """Enumeration errors reach the caller's error callback."""
        on_error = MagicMock()
        error = OSError(errno.EIO, "I/O error")

        with patch("reclaimspace.scanner.collector.async_scandir", side_effect=error):
            result = _find([project_tree], on_error=on_error)

        assert result.targets == []
        on_error.assert_called_once_with(str(project_tree), error)
