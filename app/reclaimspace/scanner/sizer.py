"""Concurrent size aggregation for collected candidates.

Turns candidates into Targets by re-checking ignores, classifying,
sniffing build folders and measuring each subtree, with a fixed
upper bound on simultaneous size computations.
"""

import asyncio
import logging
from datetime import UTC, datetime

import aiofiles.os

from reclaimspace.scanner.artifacts import ArtifactSniffer
from reclaimspace.scanner.categories import classify
from reclaimspace.scanner.collector import TraversalContext
from reclaimspace.scanner.fsio import folder_size
from reclaimspace.scanner.models import Candidate, Category, Target
from reclaimspace.scanner.progress import NullProgress, ProgressSink

logger = logging.getLogger(__name__)

DEFAULT_CONCURRENCY_LIMIT = 5


class SizeAggregator:
    """Measures candidates with bounded concurrency.

    Candidates are pulled from a queue; whenever an in-flight
    computation finishes the next one is started, so the number of
    active computations stays at the limit until the queue drains.

    Args:
        context: Traversal context of the current scan.
        concurrency_limit: Maximum simultaneous size computations.
        sniffer: Artifact sniffer for build folders.
    """

    def __init__(
        self,
        context: TraversalContext,
        *,
        concurrency_limit: int = DEFAULT_CONCURRENCY_LIMIT,
        sniffer: ArtifactSniffer | None = None,
    ) -> None:
        if concurrency_limit < 1:
            msg = f"concurrency_limit must be >= 1, got {concurrency_limit}"
            raise ValueError(msg)
        self._context = context
        self._limit = concurrency_limit
        self._sniffer = sniffer or ArtifactSniffer()

    async def aggregate(
        self,
        candidates: list[Candidate],
        progress: ProgressSink | None = None,
    ) -> list[Target]:
        """Size every candidate and return the non-empty ones as Targets.

        Args:
            candidates: Output of the directory collector.
            progress: Sink notified once per processed candidate.

        Returns:
            Targets in completion order (unranked).
        """
        progress = progress or NullProgress()
        targets: list[Target] = []
        queue = list(candidates)
        queue.reverse()
        active: set[asyncio.Task[Target | None]] = set()
        seen: set[str] = set()

        progress.start(len(candidates), 0)
        try:
            while queue or active:
                while queue and len(active) < self._limit:
                    candidate = queue.pop()
                    active.add(asyncio.create_task(self._process(candidate, seen)))

                done, _ = await asyncio.wait(active, return_when=asyncio.FIRST_COMPLETED)
                for task in done:
                    active.remove(task)
                    progress.increment()
                    target = task.result()
                    if target is not None:
                        targets.append(target)
        finally:
            for task in active:
                task.cancel()
            progress.stop()

        return targets

    async def _process(self, candidate: Candidate, seen: set[str]) -> Target | None:
        """Turn one candidate into a Target, or None if it is skipped.

        ``seen`` belongs to the calling ``aggregate`` run, so concurrent
        runs on one aggregator never see each other's paths.
        """
        path = candidate.path
        if path in seen:
            return None
        seen.add(path)

        if self._context.is_ignored(path):
            return None

        category = classify(candidate.name, self._context.rules)
        if category is None:
            return None

        build_patterns: tuple[str, ...] = ()
        if category == Category.BUILD:
            build_patterns = await self._sniffer.sniff(path)

        size = await folder_size(path)
        if size <= 0:
            return None

        try:
            stat = await aiofiles.os.stat(path, follow_symlinks=False)
        except OSError as e:
            logger.debug("Cannot stat %s: %s", path, e)
            return None

        return Target(
            path=path,
            size=size,
            category=category,
            name=candidate.name,
            last_modified=datetime.fromtimestamp(stat.st_mtime, tz=UTC),
            build_patterns=build_patterns,
        )
