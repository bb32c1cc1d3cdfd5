"""Scanner domain models for reclaimable directory detection.

This module defines the core data structures for representing
directories discovered during a scan, the category rules used to
classify them, and the results of scan and delete operations.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum


class Category(str, Enum):
    """Classification bucket of a reclaimable directory.

    Attributes:
        NODE_MODULES: JavaScript dependency trees.
        BUILD: Build outputs and bundler caches.
        TESTING: Coverage reports and test runner caches.
        MISC: Virtualenvs, linter caches and other dependency folders.
        CUSTOM: Directories matched by user-supplied include patterns.
    """

    NODE_MODULES = "node_modules"
    BUILD = "build"
    TESTING = "testing"
    MISC = "misc"
    CUSTOM = "custom"


@dataclass(frozen=True, slots=True)
class CategoryRule:
    """Static rule mapping directory names to a category.

    Attributes:
        id: Category assigned to matching directories.
        label: Human-readable category name.
        display_order: Ranking priority (lower sorts first).
        names: Directory names or glob patterns belonging to the category.
    """

    id: Category
    label: str
    display_order: int
    names: tuple[str, ...]


@dataclass(frozen=True, slots=True)
class Candidate:
    """Directory discovered by the collector, not yet sized.

    Attributes:
        path: Absolute directory path.
        name: Directory base name.
    """

    path: str
    name: str


@dataclass(frozen=True, slots=True)
class Target:
    """A discovered, sized and categorized reclaimable directory.

    Attributes:
        path: Absolute filesystem path, unique within one scan.
        size: Total recursive size in bytes.
        category: Category the directory name resolved to.
        name: Directory base name.
        last_modified: Modification time of the directory itself.
        build_patterns: Build-artifact patterns found directly inside
            the directory (only populated for the build category).
    """

    path: str
    size: int
    category: Category
    name: str
    last_modified: datetime
    build_patterns: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        """Validate target data after initialization."""
        if not self.path:
            msg = "Path cannot be empty"
            raise ValueError(msg)
        if self.size < 0:
            msg = f"Size must be non-negative, got {self.size}"
            raise ValueError(msg)
        if self.build_patterns and self.category != Category.BUILD:
            msg = f"Build patterns are only valid for build targets, got {self.category.value}"
            raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class ScanResult:
    """Outcome of a single scan invocation.

    Attributes:
        targets: Ranked reclaimable directories.
        total_size: Sum of all target sizes in bytes.
        duration_seconds: Wall-clock time spent scanning.
    """

    targets: list[Target] = field(default_factory=list)
    total_size: int = 0
    duration_seconds: float = 0.0


@dataclass(frozen=True, slots=True)
class TargetActionResult:
    """Result of a single target deletion.

    Attributes:
        path: Absolute path that was operated on.
        success: Whether the operation completed successfully.
        error: Error message if the operation failed, None otherwise.
        errno_name: Symbolic errno of the failure (e.g. "EBUSY"), if any.
        dry_run: Whether this was a dry-run (no actual deletion).
    """

    path: str
    success: bool
    error: str | None = None
    errno_name: str | None = None
    dry_run: bool = False
