"""Demonstration command that walks through the builder."""

from datetime import date, timedelta

from salesreport.modules.report import SalesReport, SalesReportBuilder

from .deps import cli_module
from .shared import app, console, print_report


def monthly_sales_report() -> SalesReport:
    """The full-featured monthly PDF report."""
    builder = SalesReportBuilder("Vendas Mensais", "PDF")
    return (
        builder.set_period(date(2024, 1, 1), date(2024, 1, 31))
        .with_header("Relatório de Vendas Corporativas")
        .add_column("Produto")
        .add_column("Quantidade")
        .add_column("Valor")
        .add_filter("Status=Ativo")
        .with_charts("Bar")
        .with_footer("Confidencial - Uso Interno")
        .build()
    )


def simple_export_report(end: date, lookback_days: int) -> SalesReport:
    """A bare Excel export covering the ``lookback_days`` before ``end``."""
    return (
        SalesReportBuilder("Exportação Simples", "Excel")
        .set_period(end - timedelta(days=lookback_days), end)
        .add_column("Nome")
        .add_column("Email")
        .build()
    )


@app.command()
def demo() -> None:
    """Build and print the two sample reports."""
    cli = cli_module()
    reports = [
        monthly_sales_report(),
        simple_export_report(cli.today(), cli.get_lookback_days()),
    ]

    console.print("=== Sistema de Relatórios (Padrão Builder) ===", markup=False)
    for report in reports:
        print_report(report)
