"""Fluent builder for sales reports."""

import logging
from abc import ABC, abstractmethod
from dataclasses import replace
from datetime import date
from enum import Enum
from typing import Any

from .errors import InvalidStateError, ValidationError
from .models import SalesReport

logger = logging.getLogger(__name__)


class BuilderState(Enum):
    """Builder lifecycle states."""

    CONFIGURING = "configuring"
    FINALIZED = "finalized"


class ReportBuilder(ABC):
    """Fluent contract for staged report construction.

    Every configuration method returns the builder itself so calls can be
    chained; ``build()`` hands off the finished report exactly once.
    """

    @abstractmethod
    def set_period(self, start: date, end: date) -> "ReportBuilder":
        """Set the reporting period."""

    @abstractmethod
    def with_header(self, text: str) -> "ReportBuilder":
        """Enable the header line."""

    @abstractmethod
    def with_footer(self, text: str) -> "ReportBuilder":
        """Enable the footer line."""

    @abstractmethod
    def add_column(self, name: str) -> "ReportBuilder":
        """Append a column."""

    @abstractmethod
    def add_filter(self, filter: str) -> "ReportBuilder":
        """Append a filter expression."""

    @abstractmethod
    def with_charts(self, chart_type: str) -> "ReportBuilder":
        """Enable the chart line."""

    @abstractmethod
    def build(self) -> SalesReport:
        """Validate and return the finished report."""


class SalesReportBuilder(ReportBuilder):
    """Builds a ``SalesReport`` from a required title and format."""

    def __init__(self, title: str, format: str):
        self._report: SalesReport | None = SalesReport(title=title, format=format)
        self.state = BuilderState.CONFIGURING
        logger.debug("Started report %r (%s)", title, format)

    @property
    def is_finalized(self) -> bool:
        return self.state is BuilderState.FINALIZED

    def _staged(self, operation: str) -> SalesReport:
        if self.is_finalized or self._report is None:
            raise InvalidStateError(operation)
        return self._report

    def _update(self, operation: str, **changes: Any) -> "SalesReportBuilder":
        self._report = replace(self._staged(operation), **changes)
        return self

    def set_period(self, start: date, end: date) -> "SalesReportBuilder":
        self._update("set_period", start_date=start, end_date=end)
        logger.debug("Period set: %s to %s", start, end)
        return self

    def with_header(self, text: str) -> "SalesReportBuilder":
        return self._update("with_header", include_header=True, header_text=text)

    def with_footer(self, text: str) -> "SalesReportBuilder":
        return self._update("with_footer", include_footer=True, footer_text=text)

    def add_column(self, name: str) -> "SalesReportBuilder":
        columns = self._staged("add_column").columns
        return self._update("add_column", columns=(*columns, name))

    def add_filter(self, filter: str) -> "SalesReportBuilder":
        filters = self._staged("add_filter").filters
        return self._update("add_filter", filters=(*filters, filter))

    def with_charts(self, chart_type: str) -> "SalesReportBuilder":
        return self._update("with_charts", include_charts=True, chart_type=chart_type)

    def build(self) -> SalesReport:
        """Return the staged report and retire the builder.

        Raises:
            ValidationError: The period was never set. The builder stays usable.
            InvalidStateError: ``build()`` already succeeded on this builder.
        """
        report = self._staged("build")
        if report.start_date is None:
            logger.warning("Rejected build of %r: period not set", report.title)
            raise ValidationError("period")

        self._report = None
        self.state = BuilderState.FINALIZED
        logger.debug(
            "Finalized report %r with %d column(s) and %d filter(s)",
            report.title,
            len(report.columns),
            len(report.filters),
        )
        return report
