"""Reclaimable folder scanning and deletion module.

This module provides pattern matching, category rules, directory
discovery, concurrent size aggregation, result ranking, and the
retrying deletion used to remove selected targets.
"""

from reclaimspace.scanner.artifacts import (
    BUILD_ARTIFACT_PATTERNS,
    ArtifactSniffer,
    BuildAnalysis,
    analyze_build_patterns,
)
from reclaimspace.scanner.categories import CATEGORY_RULES, active_rules, classify, display_order
from reclaimspace.scanner.collector import DirectoryCollector, TraversalContext
from reclaimspace.scanner.finder import find
from reclaimspace.scanner.ignore import DEFAULT_IGNORE_PATTERNS, read_ignore_file
from reclaimspace.scanner.models import (
    Candidate,
    Category,
    CategoryRule,
    ScanResult,
    Target,
    TargetActionResult,
)
from reclaimspace.scanner.operator import RetryingRemover, TargetOperator, delete_target
from reclaimspace.scanner.patterns import matches
from reclaimspace.scanner.progress import NullProgress, NullStatus, ProgressSink, StatusSink
from reclaimspace.scanner.ranking import rank
from reclaimspace.scanner.sizer import SizeAggregator

__all__ = [
    "BUILD_ARTIFACT_PATTERNS",
    "CATEGORY_RULES",
    "DEFAULT_IGNORE_PATTERNS",
    "ArtifactSniffer",
    "BuildAnalysis",
    "Candidate",
    "Category",
    "CategoryRule",
    "DirectoryCollector",
    "NullProgress",
    "NullStatus",
    "ProgressSink",
    "RetryingRemover",
    "ScanResult",
    "SizeAggregator",
    "StatusSink",
    "Target",
    "TargetActionResult",
    "TargetOperator",
    "TraversalContext",
    "active_rules",
    "analyze_build_patterns",
    "classify",
    "delete_target",
    "display_order",
    "find",
    "matches",
    "rank",
    "read_ignore_file",
]
