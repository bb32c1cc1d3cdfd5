"""Category rules for reclaimable directories.

This module holds the static name lists used to classify directories
into categories, together with the small helpers that apply them.
The lists are plain data so they can be extended without touching
the traversal code.
"""

from reclaimspace.scanner.models import Category, CategoryRule
from reclaimspace.scanner.patterns import matches

# Display order used for anything not covered by a rule.
UNKNOWN_DISPLAY_ORDER = 99

CUSTOM_DISPLAY_ORDER = 0

CATEGORY_RULES: tuple[CategoryRule, ...] = (
    CategoryRule(
        id=Category.NODE_MODULES,
        label="Node Modules",
        display_order=1,
        names=("node_modules",),
    ),
    CategoryRule(
        id=Category.BUILD,
        label="Build/Cache Folders",
        display_order=2,
        names=(
            ".next",
            "dist",
            "build",
            "storybook-static",
            ".nuxt",
            ".output",
            ".svelte-kit",
            ".angular",
            "out",
            ".expo",
            ".turbo",
            ".cache",
            ".shopify",
            ".react-router",
            ".tanstack",
            ".rollup.cache",
            ".parcel-cache",
            ".vite",
            ".astro",
            ".solid",
            ".remix",
            ".docusaurus",
            ".eleventy-cache",
            ".gatsby-cache",
            ".vercel",
            ".netlify",
        ),
    ),
    CategoryRule(
        id=Category.TESTING,
        label="Testing/Reporting Folders",
        display_order=3,
        names=(
            "coverage",
            ".nyc_output",
            ".pytest_cache",
            ".tox",
            "htmlcov",
        ),
    ),
    CategoryRule(
        id=Category.MISC,
        label="Miscellaneous Dev Junk",
        display_order=4,
        names=(
            ".venv",
            "venv",
            "env",
            "__pycache__",
            ".mypy_cache",
            ".ruff_cache",
            "vendor",
            ".vagrant",
            ".terraform",
        ),
    ),
)


def custom_rules(include_patterns: list[str] | tuple[str, ...]) -> tuple[CategoryRule, ...]:
    """Build the single synthetic rule used when include patterns are given.

    Args:
        include_patterns: Directory names or globs supplied by the user.

    Returns:
        A one-element tuple holding the custom rule.
    """
    return (
        CategoryRule(
            id=Category.CUSTOM,
            label="Custom Folders",
            display_order=CUSTOM_DISPLAY_ORDER,
            names=tuple(include_patterns),
        ),
    )


def active_rules(
    include_patterns: list[str] | tuple[str, ...] | None = None,
) -> tuple[CategoryRule, ...]:
    """Return the rules in effect for a scan.

    Include patterns replace the default rules entirely.
    """
    if include_patterns:
        return custom_rules(include_patterns)
    return CATEGORY_RULES


def classify(name: str, rules: tuple[CategoryRule, ...]) -> Category | None:
    """Map a directory name to the first matching category.

    Args:
        name: Directory base name.
        rules: Rules in priority order.

    Returns:
        Category of the first matching rule, or None if nothing matches.
    """
    for rule in rules:
        if any(matches(name, pattern) for pattern in rule.names):
            return rule.id
    return None


def get_label(category: Category) -> str:
    """Return the human-readable label for a category."""
    if category == Category.CUSTOM:
        return custom_rules(())[0].label
    for rule in CATEGORY_RULES:
        if rule.id == category:
            return rule.label
    return category.value


def display_order(category: Category | str) -> int:
    """Return the ranking priority of a category.

    Unknown categories sort after every known one.
    """
    if category == Category.CUSTOM:
        return CUSTOM_DISPLAY_ORDER
    for rule in CATEGORY_RULES:
        if rule.id == category:
            return rule.display_order
    return UNKNOWN_DISPLAY_ORDER
