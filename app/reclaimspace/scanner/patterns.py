"""Minimal glob matcher for ignore, include and category patterns.

Supports ``*`` (any run of characters within one path segment),
``**`` (any run of characters across segments), ``?`` (any single
character, separators included) and a basename-only mode. Everything
else is literal. Paths are expected to use ``/`` as separator.
"""

import logging
import re
from functools import lru_cache

logger = logging.getLogger(__name__)

SEPARATOR = "/"


@lru_cache(maxsize=1024)
def compile_pattern(pattern: str) -> re.Pattern[str] | None:
    """Translate a glob pattern into a compiled regular expression.

    Results are cached per pattern string. Compilation is pure, so the
    cache is safe to share between concurrent callers.

    Args:
        pattern: Glob pattern to translate.

    Returns:
        Compiled regex for a full match, or None if the pattern is invalid.
    """
    parts: list[str] = []
    i = 0
    n = len(pattern)

    while i < n:
        char = pattern[i]

        if pattern.startswith("**", i):
            j = i + 2
            while j < n and pattern[j] == "*":
                j += 1
            starts_segment = i == 0 or pattern[i - 1] == SEPARATOR
            ends_segment = j == n or pattern[j] == SEPARATOR

            if starts_segment and ends_segment and j < n:
                # "**/" may match zero or more whole segments
                parts.append("(?:.*/)?")
                i = j + 1
            else:
                parts.append(".*")
                i = j
            continue

        if char == "*":
            parts.append("[^/]*")
        elif char == "?":
            parts.append(".")
        else:
            parts.append(re.escape(char))
        i += 1

    try:
        return re.compile("".join(parts), re.DOTALL)
    except re.error as e:
        logger.debug("Invalid pattern %r: %s", pattern, e)
        return None


def matches(candidate: str, pattern: str | None, *, match_base: bool = False) -> bool:
    """Check whether a path matches a glob pattern.

    Args:
        candidate: Path or name to test.
        pattern: Glob pattern. Empty or None never matches.
        match_base: If True and the pattern has no separator, match
            against the candidate's basename only.

    Returns:
        True if the whole candidate matches the pattern.
    """
    if not pattern:
        return False
    if pattern == "*":
        return True

    if match_base and SEPARATOR not in pattern:
        candidate = candidate.rsplit(SEPARATOR, 1)[-1]

    regex = compile_pattern(pattern)
    if regex is None:
        return False
    return regex.fullmatch(candidate) is not None


def matches_any(
    candidate: str,
    patterns: list[str] | tuple[str, ...],
    *,
    match_base: bool = False,
) -> bool:
    """Check whether a path matches at least one of several patterns."""
    return any(matches(candidate, pattern, match_base=match_base) for pattern in patterns)


def normalize_path(path: str) -> str:
    """Convert native separators to ``/`` for pattern matching."""
    return path.replace("\\", SEPARATOR)
