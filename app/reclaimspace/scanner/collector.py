"""Directory collector for reclaimable folder candidates.

Walks each root with an explicit stack, records every child
directory whose name matches a category rule, and stops descending
at matches so each reclaimable subtree is reported once as a whole.
No sizes are computed here.
"""

import logging
import os
from collections.abc import Callable
from dataclasses import dataclass, field

from reclaimspace.scanner.categories import classify
from reclaimspace.scanner.fsio import async_scandir
from reclaimspace.scanner.models import Candidate, CategoryRule
from reclaimspace.scanner.patterns import matches_any, normalize_path
from reclaimspace.scanner.progress import NullStatus, StatusSink

logger = logging.getLogger(__name__)

# Dependency trees are never walked, matched or not.
NEVER_DESCEND: frozenset[str] = frozenset({"node_modules"})

ErrorCallback = Callable[[str, OSError], None]


@dataclass(slots=True)
class TraversalContext:
    """Mutable state owned by a single scan invocation.

    A fresh context is created for every scan, so concurrent scans
    never share a visited set.

    Attributes:
        ignore_patterns: Globs excluding a directory and its subtree.
        rules: Category rules in effect (defaults or the custom rule).
        visited: Absolute paths already processed during discovery.
    """

    ignore_patterns: tuple[str, ...]
    rules: tuple[CategoryRule, ...]
    visited: set[str] = field(default_factory=set)

    def is_ignored(self, path: str) -> bool:
        """Check a path against the ignore patterns (basename mode)."""
        return matches_any(normalize_path(path), self.ignore_patterns, match_base=True)


class DirectoryCollector:
    """Enumerates candidate directories below a set of roots.

    Args:
        context: Traversal context for the current scan.
        status: Optional sink receiving the directory being read.
        on_error: Optional callback for unexpected enumeration errors.
            Permission errors are never reported.
    """

    def __init__(
        self,
        context: TraversalContext,
        *,
        status: StatusSink | None = None,
        on_error: ErrorCallback | None = None,
    ) -> None:
        self._context = context
        self._status = status or NullStatus()
        self._on_error = on_error

    async def collect(self, root_paths: list[str]) -> list[Candidate]:
        """Collect category-matching directories below every root.

        Args:
            root_paths: Directories to walk.

        Returns:
            Candidates in discovery order (children visited alphabetically).
        """
        candidates: list[Candidate] = []
        for root in root_paths:
            await self._walk(os.path.abspath(root), candidates)
        return candidates

    async def _walk(self, root: str, candidates: list[Candidate]) -> None:
        """Walk one root iteratively, appending candidates in place."""
        context = self._context
        stack = [root]

        while stack:
            current = stack.pop()
            if current in context.visited:
                continue
            context.visited.add(current)

            if context.is_ignored(current):
                logger.debug("Ignoring directory: %s", current)
                continue

            self._status.text = f"Collecting: {current}"

            try:
                entries = await async_scandir(current)
            except PermissionError:
                logger.debug("Permission denied reading directory: %s", current)
                continue
            except OSError as e:
                self._report(current, e)
                continue

            subdirs: list[str] = []
            for entry in sorted(entries, key=lambda e: e.name):
                try:
                    if not entry.is_dir(follow_symlinks=False):
                        continue
                except OSError:
                    continue

                if classify(entry.name, context.rules) is not None:
                    if entry.path in context.visited or context.is_ignored(entry.path):
                        continue
                    context.visited.add(entry.path)
                    candidates.append(Candidate(path=entry.path, name=entry.name))
                    continue

                if entry.name in NEVER_DESCEND:
                    continue

                subdirs.append(entry.path)

            # Reversed so the stack pops children in alphabetical order
            stack.extend(reversed(subdirs))

    def _report(self, path: str, error: OSError) -> None:
        """Send an unexpected enumeration error to the error channel."""
        logger.warning("Error collecting directories in %s: %s", path, error)
        if self._on_error is not None:
            self._on_error(path, error)
