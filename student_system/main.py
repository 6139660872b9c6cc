from __future__ import annotations

import sys

import typer
from rich.console import Console

from student_system.config import get_settings
from student_system.demo import run_demo
from student_system.reporter import print_summary
from student_system.utils.logging import configure_logging

app = typer.Typer(help="Student Management System (adapter over a legacy record store).")


@app.command()
def info() -> None:
    """
    Show effective configuration values.
    """
    settings = get_settings()
    typer.echo(
        f"env={settings.app_env} | log_level={settings.log_level} | "
        f"log_json={settings.log_json}"
    )


@app.command()
def demo(
    summary: bool = typer.Option(
        False,
        "--summary/--no-summary",
        help="Print a table of per-stage totals after the demo.",
    ),
) -> None:
    """
    Run the scripted add/remove/update demo through the adapter.
    """
    settings = get_settings()
    configure_logging(level=settings.log_level, json_logs=settings.log_json)

    console = Console()
    result = run_demo(console=console)
    if summary:
        console.print()
        print_summary(result, console)


def main() -> None:
    try:
        app()
    except KeyboardInterrupt:
        typer.echo("Cancelled by user.", err=True)
        sys.exit(130)


if __name__ == "__main__":
    main()
