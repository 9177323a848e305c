"""Build a report from command-line options."""

import typer

from salesreport.modules.report import ReportError, SalesReportBuilder

from .shared import app, console, parse_date, print_report


@app.command()
def build(
    title: str = typer.Argument(..., help="Report title"),
    format: str = typer.Argument(..., help="Output format label, e.g. PDF or Excel"),
    start: str | None = typer.Option(None, "--start", help="Period start (YYYY-MM-DD)"),
    end: str | None = typer.Option(None, "--end", help="Period end (YYYY-MM-DD)"),
    header: str | None = typer.Option(None, "--header", help="Header text"),
    footer: str | None = typer.Option(None, "--footer", help="Footer text"),
    chart: str | None = typer.Option(None, "--chart", help="Chart type"),
    columns: list[str] | None = typer.Option(
        None, "--column", "-c", help="Column name (repeatable, order kept)"
    ),
    filters: list[str] | None = typer.Option(
        None, "--filter", "-f", help="Filter expression (repeatable)"
    ),
) -> None:
    """Build one report from options and print it."""
    start_date = parse_date(start, "--start")
    end_date = parse_date(end, "--end")

    builder = SalesReportBuilder(title, format)
    # The period is only set when both bounds are given; build() rejects the rest.
    if start_date is not None and end_date is not None:
        builder.set_period(start_date, end_date)
    if header is not None:
        builder.with_header(header)
    if chart is not None:
        builder.with_charts(chart)
    for name in columns or []:
        builder.add_column(name)
    for expr in filters or []:
        builder.add_filter(expr)
    if footer is not None:
        builder.with_footer(footer)

    try:
        report = builder.build()
    except ReportError as exc:
        console.print(f"[red]Error: {exc}[/red]")
        raise typer.Exit(1) from exc

    print_report(report)
