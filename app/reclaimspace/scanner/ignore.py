"""Ignore patterns excluding directories from scanning.

This module defines the directories that are never scanned
(OS-managed trees, editor metadata, typical source folders) and
reads user patterns from a ``.reclaimspacerc`` file.
"""

from pathlib import Path

IGNORE_FILE_NAME = ".reclaimspacerc"

# Always appended after user patterns. Patterns with a "/" must
# match the full path; bare names match any directory basename.
DEFAULT_IGNORE_PATTERNS: list[str] = [
    # Windows
    "/Program Files",
    "/Program Files (x86)",
    # macOS
    "/Applications",
    "/System",
    "/Library",
    # Unix system trees
    "/usr",
    "/var",
    "/etc",
    "/opt",
    # Editor and IDE metadata
    "/.vscode",
    "/.cursor",
    "/.idea",
    "/.sublime-project",
    "/.sublime-workspace",
    "/.atom",
    "/.project",
    "/.classpath",
    "/.settings",
    "/nbproject",
    "/.editorconfig",
    # Source directories
    "src",
    "source",
    "app",
    "lib",
    "components",
    "pages",
    "styles",
    "assets",
]


def parse_ignore_lines(content: str) -> list[str]:
    """Extract patterns from ignore file content.

    Blank lines and lines starting with ``#`` are skipped.
    """
    patterns: list[str] = []
    for raw in content.splitlines():
        line = raw.strip()
        if not line or line.startswith("#"):
            continue
        patterns.append(line)
    return patterns


def read_ignore_file(base_dir: Path) -> list[str]:
    """Read ignore patterns for a scan.

    A missing ignore file is not an error; the defaults are returned
    on their own.

    Args:
        base_dir: Directory containing ``.reclaimspacerc``.

    Returns:
        User patterns followed by DEFAULT_IGNORE_PATTERNS.

    Raises:
        OSError: If the file exists but cannot be read.
    """
    ignore_path = base_dir / IGNORE_FILE_NAME
    try:
        patterns = parse_ignore_lines(ignore_path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        patterns = []

    return [*patterns, *DEFAULT_IGNORE_PATTERNS]
