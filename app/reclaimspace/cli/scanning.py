"""Shared scan setup for CLI commands.

Resolves roots, merges ignore patterns from the ignore file, the
settings file and the command line, and runs the scanner with
Rich progress output.
"""

import asyncio
from pathlib import Path

import typer

from reclaimspace.cli.display import RichProgressSink, RichStatusSink
from reclaimspace.core.config import ScanSettings, SettingsError, load_settings
from reclaimspace.scanner.finder import find
from reclaimspace.scanner.ignore import read_ignore_file
from reclaimspace.scanner.models import ScanResult
from reclaimspace.utils.formatting import print_error, print_warning


def split_patterns(value: str | None) -> list[str]:
    """Split a comma-separated option value into patterns."""
    if not value:
        return []
    return [part.strip() for part in value.split(",") if part.strip()]


def resolve_roots(dirs: list[Path] | None) -> list[str]:
    """Resolve requested directories, dropping ones that do not exist.

    Args:
        dirs: Directories from the command line. Defaults to the
            current working directory.

    Returns:
        Absolute paths of existing directories.
    """
    requested = dirs or [Path.cwd()]
    roots: list[str] = []
    for directory in requested:
        if not directory.is_dir():
            print_error(f"Path does not exist or is not accessible: {directory}")
            continue
        roots.append(str(directory.resolve()))
    return roots


def get_settings() -> ScanSettings:
    """Load settings, exiting with an error message on failure."""
    try:
        return load_settings()
    except SettingsError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e


def run_scan(
    roots: list[str],
    ignore: list[str],
    include: list[str],
    settings: ScanSettings,
    *,
    quiet: bool = False,
) -> ScanResult:
    """Run a scan with patterns merged from every configuration source.

    Args:
        roots: Absolute directories to scan.
        ignore: Ignore patterns from the command line.
        include: Include patterns from the command line; settings
            supply them when none are given.
        settings: Loaded settings.
        quiet: If True, show no progress output.

    Returns:
        The ScanResult from the scanner.
    """
    try:
        ignore_patterns = [*read_ignore_file(Path.cwd()), *settings.ignore, *ignore]
    except OSError as e:
        print_error(f"Cannot read ignore file: {e}")
        raise typer.Exit(code=1) from e

    include_patterns = include or settings.include

    def _report(path: str, error: OSError) -> None:
        print_warning(f"Error collecting directories in {path}: {error}")

    return asyncio.run(
        find(
            roots,
            ignore_patterns,
            None if quiet else RichProgressSink(),
            None if quiet else RichStatusSink(),
            include_patterns or None,
            concurrency_limit=settings.concurrency_limit,
            on_error=_report,
        )
    )
