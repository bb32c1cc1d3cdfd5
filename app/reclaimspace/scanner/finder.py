"""Scan entry point tying discovery, sizing and ranking together.

Discovery runs to completion before any size is computed, and each
call works on its own traversal context, so nothing carries over
from one scan to the next.
"""

import errno
import logging
import os
import time

from reclaimspace.scanner.categories import active_rules
from reclaimspace.scanner.collector import DirectoryCollector, ErrorCallback, TraversalContext
from reclaimspace.scanner.models import ScanResult
from reclaimspace.scanner.progress import NullProgress, NullStatus, ProgressSink, StatusSink
from reclaimspace.scanner.ranking import rank
from reclaimspace.scanner.sizer import DEFAULT_CONCURRENCY_LIMIT, SizeAggregator

logger = logging.getLogger(__name__)


def _root_error(root: str) -> OSError:
    """Build the error reported for a root that cannot be walked."""
    code = errno.ENOTDIR if os.path.lexists(root) else errno.ENOENT
    return OSError(code, os.strerror(code), root)


async def find(
    root_paths: list[str],
    ignore_patterns: list[str],
    progress: ProgressSink | None = None,
    status: StatusSink | None = None,
    include_patterns: list[str] | None = None,
    *,
    concurrency_limit: int = DEFAULT_CONCURRENCY_LIMIT,
    on_error: ErrorCallback | None = None,
) -> ScanResult:
    """Find reclaimable directories below the given roots.

    Args:
        root_paths: Directories to scan. Missing roots are skipped.
        ignore_patterns: Globs excluding directories from discovery.
        progress: Sink for per-candidate sizing progress.
        status: Sink for discovery status text; stopped once
            discovery finishes.
        include_patterns: If given, only directories matching these
            names are reported, all under the custom category.
        concurrency_limit: Maximum simultaneous size computations.
        on_error: Callback for unexpected enumeration errors, including
            roots that are missing or not directories.

    Returns:
        ScanResult with ranked targets, total size and duration.
    """
    start = time.perf_counter()
    progress = progress or NullProgress()
    status = status or NullStatus()

    context = TraversalContext(
        ignore_patterns=tuple(ignore_patterns),
        rules=active_rules(include_patterns),
    )

    roots: list[str] = []
    for root in root_paths:
        if not os.path.isdir(root):
            logger.warning("Skipping missing or non-directory root: %s", root)
            if on_error is not None:
                on_error(root, _root_error(root))
            continue
        roots.append(root)

    collector = DirectoryCollector(context, status=status, on_error=on_error)
    try:
        candidates = await collector.collect(roots)
    finally:
        status.stop()
    logger.debug("Collected %d candidate directories", len(candidates))

    aggregator = SizeAggregator(context, concurrency_limit=concurrency_limit)
    targets = rank(await aggregator.aggregate(candidates, progress))

    return ScanResult(
        targets=targets,
        total_size=sum(t.size for t in targets),
        duration_seconds=time.perf_counter() - start,
    )
