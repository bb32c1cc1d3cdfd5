"""Shared Rich display functions for scans and deletions.

Provides the Rich-backed progress and status sinks used while
scanning, plus table builders and summary printers for targets,
deletion results and build analysis.
"""

from rich.console import Console
from rich.progress import (
    BarColumn,
    MofNCompleteColumn,
    Progress,
    SpinnerColumn,
    TaskID,
    TextColumn,
    TimeElapsedColumn,
)
from rich.table import Table

from reclaimspace.scanner.artifacts import BuildAnalysis
from reclaimspace.scanner.categories import get_label
from reclaimspace.scanner.models import Target, TargetActionResult
from reclaimspace.utils.formatting import (
    console,
    format_size,
    format_target_row,
    print_info,
    print_success,
    print_warning,
)


class RichProgressSink:
    """Progress sink rendering a Rich progress bar on the console."""

    def __init__(self, description: str = "Calculating sizes", out: Console | None = None) -> None:
        self._description = description
        self._progress = Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            BarColumn(),
            MofNCompleteColumn(),
            TimeElapsedColumn(),
            console=out or console,
            transient=True,
        )
        self._task_id: TaskID | None = None

    def start(self, total: int, start_value: int = 0) -> None:
        self._task_id = self._progress.add_task(
            self._description, total=total, completed=start_value
        )
        self._progress.start()

    def increment(self) -> None:
        if self._task_id is not None:
            self._progress.advance(self._task_id)

    def stop(self) -> None:
        self._progress.stop()


class RichStatusSink:
    """Status sink backed by a Rich spinner; started on creation."""

    def __init__(
        self, message: str = "Collecting directories...", out: Console | None = None
    ) -> None:
        self._text = message
        self._status = (out or console).status(message)
        self._status.start()

    @property
    def text(self) -> str:
        return self._text

    @text.setter
    def text(self, value: str) -> None:
        self._text = value
        self._status.update(f"[info]{value}[/]")

    def stop(self) -> None:
        self._status.stop()


def create_targets_table(targets: list[Target], title: str = "Reclaimable Folders") -> Table:
    """Create a Rich table displaying scan targets.

    Args:
        targets: Ranked targets to display.
        title: Table title.

    Returns:
        Rich Table configured for target display.
    """
    table = Table(
        title=title,
        show_header=True,
        header_style="bold_header",
        border_style="border",
    )
    table.add_column("Category", no_wrap=True)
    table.add_column("Path", overflow="fold")
    table.add_column("Size", justify="right", width=12)
    table.add_column("Modified", width=10)

    for target in targets:
        table.add_row(*format_target_row(target))

    return table


def print_summary(targets: list[Target], total_size: int, duration: float) -> None:
    """Print per-category totals and the overall scan summary."""
    by_category: dict[str, int] = {}
    for target in targets:
        label = get_label(target.category)
        by_category[label] = by_category.get(label, 0) + target.size

    for label, size in by_category.items():
        console.print(f"[muted]{label}:[/] [info]{format_size(size)}[/]")

    console.print(
        f"\n[muted]Found {len(targets)} folder(s), {format_size(total_size)} reclaimable "
        f"(scanned in {duration:.2f}s)[/muted]"
    )


def print_deletion_results(results: list[TargetActionResult]) -> None:
    """Display deletion results."""
    table = Table(title="Deletion Results", show_lines=False)
    table.add_column("Path", style="bold")
    table.add_column("Status", width=10)
    table.add_column("Details", style="dim")

    for r in results:
        if r.dry_run:
            status = "[info]dry-run[/]"
            detail = "Would delete"
        elif r.success:
            status = "[success]deleted[/]"
            detail = ""
        else:
            status = "[error]failed[/]"
            detail = r.error or "Unknown error"
        table.add_row(r.path, status, detail)

    console.print(table)

    success_count = sum(1 for r in results if r.success)
    fail_count = sum(1 for r in results if not r.success and not r.dry_run)
    dry_count = sum(1 for r in results if r.dry_run)

    if dry_count:
        print_info(f"Dry-run: {dry_count} folder(s) would be deleted.")
    elif fail_count:
        print_warning(f"{success_count} succeeded, {fail_count} failed")
    else:
        print_success(f"All {success_count} folder(s) deleted successfully.")


def print_build_analysis(analysis: BuildAnalysis) -> None:
    """Display inferred project types and pattern frequencies."""
    console.print("\n[bold_header]Build Analysis[/]")
    if not analysis.inferred_project_types:
        console.print("[muted]No project types inferred.[/muted]")
    for project_type, count in analysis.inferred_project_types.most_common():
        console.print(f"  [info]{project_type}[/]: {count}")
    if analysis.common_patterns:
        console.print(f"[muted]Common patterns:[/] {', '.join(sorted(analysis.common_patterns))}")
    if analysis.unique_patterns:
        console.print(f"[muted]Unique patterns:[/] {', '.join(sorted(analysis.unique_patterns))}")
