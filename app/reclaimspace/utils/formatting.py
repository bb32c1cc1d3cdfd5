"""Rich console formatting utilities.

Provides consistent formatting for CLI output using Rich.
"""

from __future__ import annotations

import sys
from datetime import datetime
from typing import TYPE_CHECKING

from rich.console import Console

from reclaimspace.core.theme import get_theme

if TYPE_CHECKING:
    from reclaimspace.scanner.models import Target

_SIZE_UNITS = ("Bytes", "KB", "MB", "GB", "TB")


def _detect_color_system() -> str | None:
    """Detect the best color system for the current terminal.

    Returns "truecolor" for interactive terminals to enable full hex color support,
    None otherwise to let Rich auto-detect.
    """
    if sys.stdout.isatty():
        return "truecolor"
    return None


# Shared console instances (theme loaded once at import)
console = Console(theme=get_theme(), color_system=_detect_color_system())
err_console = Console(theme=get_theme(), stderr=True, color_system=_detect_color_system())


def format_size(size_bytes: int) -> str:
    """Format a byte count as a human-readable string.

    Args:
        size_bytes: Number of bytes.

    Returns:
        String such as "1.23 MB" or "0 Bytes".
    """
    if size_bytes <= 0:
        return "0 Bytes"
    value = float(size_bytes)
    exponent = 0
    while value >= 1024 and exponent < len(_SIZE_UNITS) - 1:
        value /= 1024
        exponent += 1
    return f"{round(value, 2):g} {_SIZE_UNITS[exponent]}"


def format_date(value: datetime) -> str:
    """Format a timestamp as YYYY-MM-DD in local time."""
    return value.astimezone().strftime("%Y-%m-%d")


def format_target_row(target: Target) -> tuple[str, str, str, str]:
    """Format a target as a table row with category styling.

    Args:
        target: The target to format.

    Returns:
        Tuple of (category, path, size, modified) with Rich markup.
    """
    style = f"category_{target.category.value}"
    return (
        f"[{style}]{target.category.value}[/]",
        f"[text]{target.path}[/]",
        f"[info]{format_size(target.size)}[/]",
        f"[muted]{format_date(target.last_modified)}[/]",
    )


def print_info(message: str) -> None:
    """Print an info message."""
    console.print(f"[info]{message}[/]")


def print_warning(message: str) -> None:
    """Print a warning message."""
    err_console.print(f"[warning]Warning:[/] {message}")


def print_error(message: str) -> None:
    """Print an error message."""
    err_console.print(f"[error]Error:[/] {message}")


def print_success(message: str) -> None:
    """Print a success message."""
    console.print(f"[success]{message}[/]")
