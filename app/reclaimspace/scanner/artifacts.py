"""Build artifact detection for build-category directories.

Looks at the direct children of a build folder for well-known
bundler outputs and tool configs. The findings are used for
reporting only and never influence which targets are returned.
"""

import logging
from collections import Counter
from dataclasses import dataclass, field

import aiofiles.os

from reclaimspace.scanner.models import Category, Target
from reclaimspace.scanner.patterns import matches

logger = logging.getLogger(__name__)

BUILD_ARTIFACT_PATTERNS: tuple[str, ...] = (
    "index.js",
    "main.js",
    "bundle.js",
    "index.html",
    "assets",
    "static",
    "*.map",
    "*.css",
    "*.js",
    "*.html",
    "package.json",
    "webpack.config.js",
    "vite.config.js",
    "angular.json",
    "vue.config.js",
    "next.config.js",
    "tsconfig.json",
)

# Checked in order; the first marker found decides the project type.
PROJECT_TYPE_MARKERS: tuple[tuple[str, str], ...] = (
    ("angular.json", "angular"),
    ("next.config.js", "nextjs"),
    ("vue.config.js", "vue"),
    ("webpack.config.js", "webpack"),
    ("package.json", "javascript"),
)


class ArtifactSniffer:
    """Detects build-artifact patterns among a directory's children.

    Args:
        patterns: Exact names or globs to look for. Defaults to
            BUILD_ARTIFACT_PATTERNS.
    """

    def __init__(self, patterns: tuple[str, ...] = BUILD_ARTIFACT_PATTERNS) -> None:
        self._patterns = patterns

    async def sniff(self, directory: str) -> tuple[str, ...]:
        """Return the patterns matching at least one direct child.

        Args:
            directory: Directory whose immediate children are checked.

        Returns:
            Matching patterns in configured order. Empty if the
            directory cannot be listed.
        """
        try:
            names = await aiofiles.os.listdir(directory)
        except OSError as e:
            logger.warning("Error checking build artifacts in %s: %s", directory, e)
            return ()

        return tuple(
            pattern
            for pattern in self._patterns
            if any(matches(name, pattern) for name in names)
        )


@dataclass(slots=True)
class BuildAnalysis:
    """Summary of build patterns across all build targets.

    Attributes:
        inferred_project_types: Count of build folders per inferred tool.
        common_patterns: Patterns present in every build folder with findings.
        unique_patterns: Patterns seen in exactly one build folder.
    """

    inferred_project_types: Counter[str] = field(default_factory=Counter)
    common_patterns: set[str] = field(default_factory=set)
    unique_patterns: set[str] = field(default_factory=set)


def analyze_build_patterns(targets: list[Target]) -> BuildAnalysis:
    """Summarize the build patterns detected during a scan.

    Args:
        targets: Scan results; only build targets with findings count.

    Returns:
        BuildAnalysis with project types and pattern frequencies.
    """
    analysis = BuildAnalysis()
    builds = [t for t in targets if t.category == Category.BUILD and t.build_patterns]

    pattern_counts: Counter[str] = Counter()
    for target in builds:
        pattern_counts.update(target.build_patterns)
        for marker, project_type in PROJECT_TYPE_MARKERS:
            if marker in target.build_patterns:
                analysis.inferred_project_types[project_type] += 1
                break

    for pattern, count in pattern_counts.items():
        if count == len(builds):
            analysis.common_patterns.add(pattern)
        elif count == 1:
            analysis.unique_patterns.add(pattern)

    return analysis
