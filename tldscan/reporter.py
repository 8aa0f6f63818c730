from __future__ import annotations

from typing import Optional

from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from tldscan.domain.models import RunConfig, RunSummary


def announce_source(console: Console, location: str, is_file: bool) -> None:
    kind = "file" if is_file else "url"
    line = Text(f"Getting TLD list from {kind} ", style="magenta")
    line.append(location, style="magenta italic")
    line.append(":", style="magenta")
    console.print(line)


def announce_header(console: Console, header: str) -> None:
    console.print(Text(header, style="magenta"))


def announce_start(console: Console, sld: str) -> None:
    line = Text("Checking all TLDs with SLD ", style="blue")
    line.append(sld, style="blue bold")
    line.append(".", style="blue")
    console.print(line)


def print_summary(
    summary: RunSummary, config: RunConfig, console: Optional[Console] = None
) -> None:
    """
    Render run counters as a rich table.

    Only rows relevant to the run are shown: outcome counts when checks ran,
    the unchecked count otherwise, and write failures when any occurred.
    """
    console = console or Console(stderr=True)

    table = Table(
        title=f"tldscan: {config.sld.strip().lower()}",
        box=box.ROUNDED,
        caption=f"Finished in {summary.duration_seconds:.2f}s",
    )
    table.add_column("Metric", style="cyan", no_wrap=True)
    table.add_column("Count", justify="right", style="magenta")

    table.add_row("Candidates", f"{summary.candidates:,}")
    if config.check_availability:
        table.add_row("Available", f"{summary.available:,}", style="green")
        table.add_row("Unavailable", f"{summary.unavailable:,}", style="red")
        if summary.errors:
            table.add_row("Lookup errors", f"{summary.errors:,}", style="yellow")
    else:
        table.add_row("Unchecked", f"{summary.unchecked:,}", style="yellow")
    table.add_row("Written", f"{summary.emitted:,}")
    if summary.write_failures:
        table.add_row("Write failures", f"{summary.write_failures:,}", style="bold red")

    console.print(table)


__all__ = ["announce_header", "announce_source", "announce_start", "print_summary"]
