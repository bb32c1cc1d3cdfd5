"""Ordering of scan results."""

from reclaimspace.scanner.categories import display_order
from reclaimspace.scanner.models import Target


def rank(targets: list[Target]) -> list[Target]:
    """Sort targets by category priority, then by size (largest first).

    Path is the final tie-breaker, so the order does not depend on
    the order in which sizes finished computing.

    Args:
        targets: Targets in any order.

    Returns:
        New list in display order.
    """
    return sorted(targets, key=lambda t: (display_order(t.category), -t.size, t.path))
