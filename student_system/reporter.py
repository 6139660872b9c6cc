from __future__ import annotations

from typing import TYPE_CHECKING, Optional, Sequence

from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

if TYPE_CHECKING:
    from student_system.demo import DemoSummary


def print_heading(title: str, console: Console, underline: str = "-") -> None:
    """Print a section title followed by an underline of matching width."""
    console.print()
    console.print(title, markup=False, highlight=False)
    console.print(underline * len(title), markup=False, highlight=False)


def print_roster(total: int, lines: Sequence[str], console: Console) -> None:
    """
    Render the student count and one line per record.

    Record lines are printed verbatim: names are user data and must not be
    read as rich markup.
    """
    console.print(f"Total Students: {total}", markup=False, highlight=False)
    for line in lines:
        console.print(line, markup=False, highlight=False, soft_wrap=True)


def print_summary(summary: "DemoSummary", console: Optional[Console] = None) -> None:
    """
    Render the per-stage totals of a demo run as a rich table.
    """
    console = console or Console()

    if not summary.stages:
        console.print("[yellow]No stages to display.[/yellow]")
        return

    table = Table(
        title="Student Management Demo",
        box=box.ROUNDED,
        caption="Records listed in storage order",
    )
    table.add_column("Stage", style="cyan", no_wrap=True)
    table.add_column("Total", justify="right", style="magenta")
    table.add_column("Records", style="green")

    for stage in summary.stages:
        table.add_row(
            stage.label,
            str(stage.total),
            Text("\n".join(stage.records)) if stage.records else Text("none", style="dim"),
        )

    console.print(table)


__all__ = ["print_heading", "print_roster", "print_summary"]
