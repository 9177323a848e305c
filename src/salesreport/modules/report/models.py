"""Sales report product model and text rendering."""

from dataclasses import dataclass
from datetime import date

from rich.console import Console

DATE_FORMAT = "%d/%m/%Y"


@dataclass(frozen=True)
class SalesReport:
    """A finished sales report description.

    Instances are immutable. ``SalesReportBuilder`` derives a new staged copy
    for every configuration call and hands the last one out from ``build()``.
    """

    title: str
    format: str
    start_date: date | None = None
    end_date: date | None = None
    include_header: bool = False
    header_text: str | None = None
    include_footer: bool = False
    footer_text: str | None = None
    include_charts: bool = False
    chart_type: str | None = None
    columns: tuple[str, ...] = ()
    filters: tuple[str, ...] = ()

    def render_lines(self) -> list[str]:
        """Return the report layout one line per entry."""
        lines = [
            f"=== Relatório Gerado: {self.title} ({self.format}) ===",
            f"Período: {_format_date(self.start_date)} a {_format_date(self.end_date)}",
        ]
        if self.include_header:
            lines.append(f"[Cabeçalho] {self.header_text}")
        if self.include_charts:
            lines.append(f"[Gráfico] Tipo: {self.chart_type}")
        lines.append(f"[Colunas] {', '.join(self.columns)}")
        if self.include_footer:
            lines.append(f"[Rodapé] {self.footer_text}")
        return lines

    def render(self) -> str:
        """Render the report as multi-line text."""
        return "\n".join(self.render_lines())

    def generate(self, console: Console | None = None) -> None:
        """Print the rendered report, preceded by a blank line."""
        console = console or Console()
        console.print()
        # Labels like [Colunas] must not be parsed as rich markup.
        console.print(self.render(), markup=False, highlight=False, soft_wrap=True)


def _format_date(value: date | None) -> str:
    if value is None:
        return ""
    return value.strftime(DATE_FORMAT)
