"""Sort command handler for the subsorter CLI."""

from __future__ import annotations

import logging
from pathlib import Path

from rich.console import Console
from rich.table import Table

from subsorter.cli.json_formatter import format_scan_report, write_json
from subsorter.config.settings import Settings
from subsorter.core.library_walker import LibraryWalker
from subsorter.core.models import ScanReport
from subsorter.shared.constants import CLIDefaults, ReportColumns

logger = logging.getLogger(__name__)


def handle_sort_command(
    root: Path,
    settings: Settings,
    *,
    json_output: bool = False,
    console: Console | None = None,
) -> int:
    """Walk the library and print the resulting report.

    Per-folder failures are part of the report and do not change the exit
    code; a root that cannot be read raises.

    Args:
        root: Library root directory
        settings: Loaded settings
        json_output: Print the report as JSON instead of a table
        console: Rich console for the human-readable report

    Returns:
        Exit code
    """
    logger.debug("Sorting subtitles under %s (json_output=%s)", root, json_output)
    walker = LibraryWalker.from_settings(settings)
    report = walker.walk(root)

    if json_output:
        write_json(format_scan_report(report))
    else:
        display_report(report, console or Console())

    return CLIDefaults.EXIT_SUCCESS


def display_report(report: ScanReport, console: Console) -> None:
    """Print a summary line and a table of failures."""
    console.print(
        f"[green]Copied {len(report.copied)} subtitle(s)[/green] "
        f"from {report.folders_scanned} folder(s) in {report.root}",
        highlight=False,
    )

    if report.entries_skipped:
        console.print(
            f"[yellow]Skipped {report.entries_skipped} non-directory entr"
            f"{'y' if report.entries_skipped == 1 else 'ies'}[/yellow]"
        )

    if not report.failures:
        return

    table = Table(title=f"{len(report.failures)} error(s)")
    for title in ReportColumns.TITLES:
        table.add_column(title, overflow="fold")
    for failure in report.failures:
        table.add_row(
            failure.folder.name,
            failure.error.code.value,
            failure.error.message,
        )
    console.print(table)
