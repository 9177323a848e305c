"""Shared CLI app objects and helpers."""

from datetime import date

import typer
from rich.console import Console

from salesreport.config import is_verbose
from salesreport.modules.report import SalesReport
from salesreport.utils.log_setup import configure_logging

app = typer.Typer(
    name="salesreport",
    help="Sales report builder demo",
    no_args_is_help=True,
)
console = Console()


@app.callback()
def main_callback(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logging"),
) -> None:
    """Assemble and render sales reports."""
    if not verbose:
        verbose = is_verbose()
    configure_logging(verbose)


def parse_date(value: str | None, option: str) -> date | None:
    """Parse a YYYY-MM-DD option value."""
    if value is None:
        return None
    try:
        return date.fromisoformat(value)
    except ValueError as exc:
        raise typer.BadParameter(
            f"Expected YYYY-MM-DD, got {value!r}", param_hint=option
        ) from exc


def print_report(report: SalesReport) -> None:
    """Render a finished report to the CLI console."""
    report.generate(console)
