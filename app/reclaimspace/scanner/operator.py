"""Target deletion with retries on transient errors.

Handles removal of selected reclaimable directories. Deletions run
one path at a time; a failure on one path never stops the others,
and errors are converted into result values at this boundary.
"""

import asyncio
import errno
import logging
from collections.abc import Callable

from reclaimspace.scanner.fsio import async_remove_tree
from reclaimspace.scanner.models import TargetActionResult

logger = logging.getLogger(__name__)

# Errors symptomatic of another process briefly holding the tree.
TRANSIENT_ERRNOS: frozenset[int] = frozenset({errno.EBUSY, errno.EPERM, errno.ENOTEMPTY})

DEFAULT_MAX_RETRIES = 3
DEFAULT_RETRY_DELAY = 0.5


def is_transient(error: OSError) -> bool:
    """Check whether a deletion error is worth retrying."""
    return error.errno in TRANSIENT_ERRNOS


class RetryingRemover:
    """Deletes a subtree, retrying a bounded number of times.

    Args:
        max_retries: Total number of removal attempts.
        delay: Seconds to wait between attempts.
    """

    def __init__(
        self,
        max_retries: int = DEFAULT_MAX_RETRIES,
        delay: float = DEFAULT_RETRY_DELAY,
    ) -> None:
        if max_retries < 1:
            msg = f"max_retries must be >= 1, got {max_retries}"
            raise ValueError(msg)
        self._max_retries = max_retries
        self._delay = delay

    async def remove(self, path: str) -> None:
        """Remove a path and everything below it.

        Args:
            path: File or directory to remove.

        Raises:
            OSError: On a non-transient error, or the last error once
                all attempts are exhausted.
        """
        for attempt in range(1, self._max_retries + 1):
            try:
                await async_remove_tree(path)
                return
            except OSError as e:
                if not is_transient(e) or attempt == self._max_retries:
                    raise
                logger.debug(
                    "Transient error removing %s (attempt %d/%d): %s",
                    path,
                    attempt,
                    self._max_retries,
                    e,
                )
                await asyncio.sleep(self._delay)


async def delete_target(path: str, remover: RetryingRemover | None = None) -> TargetActionResult:
    """Delete a single target and report the outcome instead of raising.

    Args:
        path: Absolute path of the target.
        remover: Remover to use. Defaults to RetryingRemover().

    Returns:
        TargetActionResult indicating success or failure.
    """
    remover = remover or RetryingRemover()
    try:
        await remover.remove(path)
    except OSError as e:
        logger.warning("Failed to delete %s: %s", path, e)
        return TargetActionResult(
            path=path,
            success=False,
            error=str(e),
            errno_name=errno.errorcode.get(e.errno) if e.errno is not None else None,
        )
    return TargetActionResult(path=path, success=True)


class TargetOperator:
    """Deletes selected targets one at a time.

    Attributes:
        _dry_run: If True, report what would be deleted without deleting.
        _remover: Remover used for each path.
    """

    def __init__(self, *, dry_run: bool = False, remover: RetryingRemover | None = None) -> None:
        self._dry_run = dry_run
        self._remover = remover or RetryingRemover()

    async def delete(
        self,
        paths: list[str],
        on_result: Callable[[TargetActionResult], None] | None = None,
    ) -> list[TargetActionResult]:
        """Delete multiple targets, each attempted independently.

        Args:
            paths: Absolute paths to delete.
            on_result: Called with each result as soon as it is known.

        Returns:
            One TargetActionResult per input path, in input order.
        """
        results: list[TargetActionResult] = []
        for path in paths:
            if self._dry_run:
                logger.info("Dry-run: would delete %s", path)
                result = TargetActionResult(path=path, success=True, dry_run=True)
            else:
                result = await delete_target(path, self._remover)
            results.append(result)
            if on_result is not None:
                on_result(result)
        return results
