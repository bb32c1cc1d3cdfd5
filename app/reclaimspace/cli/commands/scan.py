"""Scan command implementation.

Reports reclaimable folders below the given directories without
deleting anything.
"""

import json
from enum import Enum
from pathlib import Path
from typing import Annotated

import typer

from reclaimspace.cli.display import create_targets_table, print_build_analysis, print_summary
from reclaimspace.cli.scanning import get_settings, resolve_roots, run_scan, split_patterns
from reclaimspace.scanner.artifacts import analyze_build_patterns
from reclaimspace.scanner.models import Target
from reclaimspace.utils.formatting import console, print_success


class OutputFormat(str, Enum):
    """Output format options."""

    TABLE = "table"
    JSON = "json"


def scan_folders(
    ctx: typer.Context,
    dirs: Annotated[
        list[Path] | None,
        typer.Argument(help="Directories to scan (default: current directory)."),
    ] = None,
    ignore: Annotated[
        str | None,
        typer.Option("--ignore", "-i", help="Comma-separated patterns to ignore."),
    ] = None,
    include: Annotated[
        str | None,
        typer.Option(
            "--include",
            help="Comma-separated folder names to look for instead of the defaults.",
        ),
    ] = None,
    output_format: Annotated[
        OutputFormat,
        typer.Option(
            "--format",
            "-f",
            help="Output format.",
            case_sensitive=False,
        ),
    ] = OutputFormat.TABLE,
    build_analysis: Annotated[
        bool,
        typer.Option("--build-analysis", help="Show build artifact analysis."),
    ] = False,
    limit: Annotated[
        int | None,
        typer.Option("--limit", "-l", help="Limit number of results."),
    ] = None,
) -> None:
    """Scan directories and list reclaimable folders."""
    quiet = bool(ctx.obj and ctx.obj.get("quiet"))
    roots = resolve_roots(dirs)
    if not roots:
        raise typer.Exit(code=1)

    settings = get_settings()
    result = run_scan(
        roots,
        split_patterns(ignore),
        split_patterns(include),
        settings,
        quiet=quiet or output_format == OutputFormat.JSON,
    )

    if output_format == OutputFormat.JSON:
        _print_json(result.targets[:limit] if limit else result.targets)
        return

    if not result.targets:
        print_success("No reclaimable space found. Your workspace is clean!")
        return

    display_targets = result.targets[:limit] if limit else result.targets
    console.print(create_targets_table(display_targets))
    print_summary(result.targets, result.total_size, result.duration_seconds)
    if limit and len(display_targets) < len(result.targets):
        console.print(
            f"[dim](showing {len(display_targets)} of {len(result.targets)}, "
            f"limited to {limit})[/dim]"
        )

    if build_analysis:
        print_build_analysis(analyze_build_patterns(result.targets))


def _print_json(targets: list[Target]) -> None:
    """Display targets as JSON."""
    data = [
        {
            "path": t.path,
            "name": t.name,
            "category": t.category.value,
            "size": t.size,
            "last_modified": t.last_modified.isoformat(),
            "build_patterns": list(t.build_patterns),
        }
        for t in targets
    ]
    console.print_json(json.dumps(data))
