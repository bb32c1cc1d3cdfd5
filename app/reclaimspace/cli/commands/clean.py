"""Clean command implementation.

Scans for reclaimable folders and deletes them after confirmation.
"""

import asyncio
from pathlib import Path
from typing import Annotated

import typer

from reclaimspace.cli.display import create_targets_table, print_deletion_results, print_summary
from reclaimspace.cli.scanning import get_settings, resolve_roots, run_scan, split_patterns
from reclaimspace.scanner.models import TargetActionResult
from reclaimspace.scanner.operator import RetryingRemover, TargetOperator
from reclaimspace.utils.formatting import console, format_size, print_info, print_success

# Conventional exit code after SIGINT
EXIT_INTERRUPTED = 130


def clean_folders(
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
    dry_run: Annotated[
        bool,
        typer.Option("--dry-run", "--dry", help="Show what would be deleted."),
    ] = False,
    yes: Annotated[
        bool,
        typer.Option("--yes", "-y", help="Skip confirmation prompt."),
    ] = False,
) -> None:
    """Delete reclaimable folders found below the given directories."""
    quiet = bool(ctx.obj and ctx.obj.get("quiet"))
    roots = resolve_roots(dirs)
    if not roots:
        raise typer.Exit(code=1)

    settings = get_settings()
    result = run_scan(roots, split_patterns(ignore), split_patterns(include), settings, quiet=quiet)

    if not result.targets:
        print_success("No reclaimable space found. Your workspace is clean!")
        return

    console.print(create_targets_table(result.targets, title="Planned Deletions"))
    print_summary(result.targets, result.total_size, result.duration_seconds)

    if not dry_run and not yes:
        confirmed = typer.confirm(
            f"\nDelete {len(result.targets)} folder(s) ({format_size(result.total_size)})?",
            default=False,
        )
        if not confirmed:
            print_info("Aborted.")
            raise typer.Exit(code=0)

    sizes = {t.path: t.size for t in result.targets}
    reclaimed = 0

    def _track(action: TargetActionResult) -> None:
        nonlocal reclaimed
        if action.success and not action.dry_run:
            reclaimed += sizes.get(action.path, 0)

    operator = TargetOperator(
        dry_run=dry_run,
        remover=RetryingRemover(max_retries=settings.max_retries, delay=settings.retry_delay),
    )
    try:
        results = asyncio.run(operator.delete([t.path for t in result.targets], on_result=_track))
    except KeyboardInterrupt:
        console.print(f"\n[success]Total space reclaimed: {format_size(reclaimed)}[/]")
        raise typer.Exit(code=EXIT_INTERRUPTED) from None

    print_deletion_results(results)
    if not dry_run:
        console.print(f"[success]Total space reclaimed: {format_size(reclaimed)}[/]")

    if any(not r.success for r in results):
        raise typer.Exit(code=1)
