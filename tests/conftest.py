"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

from collections.abc import Callable
from datetime import UTC, datetime
from pathlib import Path

import pytest
from reclaimspace.scanner.models import Category, Target


def _create_dummy_dir(
    dir_path: Path, size: int = 1024, files: tuple[str, ...] = ("dummy.txt",)
) -> Path:
    """Create a directory holding files whose sizes add up to ``size``."""
    dir_path.mkdir(parents=True, exist_ok=True)
    for name in files:
        (dir_path / name).write_bytes(b"\0" * (size // len(files)))
    return dir_path


@pytest.fixture
def make_dir() -> Callable[..., Path]:
    """Factory creating a directory filled with dummy bytes."""
    return _create_dummy_dir


@pytest.fixture
def project_tree(tmp_path: Path) -> Path:
    """Two mock projects with node_modules, build and coverage folders.

    Layout:
        project1/node_modules  5000 bytes
        project1/dist          2000 bytes (index.js)
        project2/.next         3000 bytes (index.js)
        project2/coverage      1000 bytes
        project3/ignored-folder 500 bytes (not a category)
    """
    root = tmp_path / "fixtures"
    _create_dummy_dir(root / "project1" / "node_modules", 5000)
    _create_dummy_dir(root / "project1" / "dist", 2000, ("index.js",))
    _create_dummy_dir(root / "project2" / ".next", 3000, ("index.js",))
    _create_dummy_dir(root / "project2" / "coverage", 1000)
    _create_dummy_dir(root / "project3" / "ignored-folder", 500)
    return root


@pytest.fixture
def make_target() -> Callable[..., Target]:
    """Factory for Target instances with sensible defaults."""

    def _make(
        path: str = "/tmp/project/dist",
        size: int = 1024,
        category: Category = Category.BUILD,
        build_patterns: tuple[str, ...] = (),
    ) -> Target:
        return Target(
            path=path,
            size=size,
            category=category,
            name=Path(path).name,
            last_modified=datetime(2024, 1, 15, 10, 0, tzinfo=UTC),
            build_patterns=build_patterns,
        )

    return _make
