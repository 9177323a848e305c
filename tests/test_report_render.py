"""Tests for sales report text rendering."""

import io
from datetime import date, datetime

from rich.console import Console

from salesreport.modules.report import SalesReport, SalesReportBuilder


def _monthly_report() -> SalesReport:
    return (
        SalesReportBuilder("Vendas Mensais", "PDF")
        .set_period(date(2024, 1, 1), date(2024, 1, 31))
        .with_header("Relatório de Vendas Corporativas")
        .add_column("Produto")
        .add_column("Quantidade")
        .add_column("Valor")
        .add_filter("Status=Ativo")
        .with_charts("Bar")
        .with_footer("Confidencial - Uso Interno")
        .build()
    )


class TestRenderLines:
    """Line layout of a rendered report."""

    def test_full_report_layout(self) -> None:
        assert _monthly_report().render_lines() == [
            "=== Relatório Gerado: Vendas Mensais (PDF) ===",
            "Período: 01/01/2024 a 31/01/2024",
            "[Cabeçalho] Relatório de Vendas Corporativas",
            "[Gráfico] Tipo: Bar",
            "[Colunas] Produto, Quantidade, Valor",
            "[Rodapé] Confidencial - Uso Interno",
        ]

    def test_simple_report_omits_optional_lines(self) -> None:
        report = (
            SalesReportBuilder("Exportação Simples", "Excel")
            .set_period(date(2024, 5, 3), date(2024, 5, 10))
            .add_column("Nome")
            .add_column("Email")
            .build()
        )
        assert report.render_lines() == [
            "=== Relatório Gerado: Exportação Simples (Excel) ===",
            "Período: 03/05/2024 a 10/05/2024",
            "[Colunas] Nome, Email",
        ]

    def test_columns_line_printed_when_empty(self) -> None:
        report = SalesReportBuilder("T", "PDF").set_period(date(2024, 1, 1), date(2024, 1, 2)).build()
        assert report.render_lines()[-1] == "[Colunas] "

    def test_filters_are_not_rendered(self) -> None:
        assert "Status=Ativo" not in _monthly_report().render()

    def test_chart_comes_before_columns_and_footer_last(self) -> None:
        report = (
            SalesReportBuilder("T", "PDF")
            .with_footer("fim")
            .add_column("A")
            .with_charts("Pie")
            .set_period(date(2024, 1, 1), date(2024, 1, 2))
            .build()
        )
        lines = report.render_lines()
        assert lines[2] == "[Gráfico] Tipo: Pie"
        assert lines[3] == "[Colunas] A"
        assert lines[4] == "[Rodapé] fim"

    def test_datetime_period_shows_date_only(self) -> None:
        report = (
            SalesReportBuilder("T", "PDF")
            .set_period(datetime(2024, 12, 24, 23, 59), datetime(2025, 1, 2, 0, 1))
            .build()
        )
        assert report.render_lines()[1] == "Período: 24/12/2024 a 02/01/2025"


class TestRender:
    """render() and generate() output."""

    def test_render_joins_lines(self) -> None:
        report = _monthly_report()
        assert report.render() == "\n".join(report.render_lines())

    def test_render_is_deterministic(self) -> None:
        report = _monthly_report()
        assert report.render() == report.render()

    def test_generate_prints_blank_line_then_report(self) -> None:
        buffer = io.StringIO()
        console = Console(file=buffer, width=200)

        report = _monthly_report()
        report.generate(console)

        assert buffer.getvalue() == "\n" + report.render() + "\n"

    def test_generate_keeps_bracket_labels(self) -> None:
        buffer = io.StringIO()
        _monthly_report().generate(Console(file=buffer, width=20))
        output = buffer.getvalue()
        assert "[Colunas] Produto, Quantidade, Valor" in output
        assert "[Cabeçalho] Relatório de Vendas Corporativas" in output
