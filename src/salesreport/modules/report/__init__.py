"""Sales report construction module."""

from .builder import BuilderState, ReportBuilder, SalesReportBuilder
from .errors import InvalidStateError, ReportError, ValidationError
from .models import DATE_FORMAT, SalesReport

__all__ = [
    "DATE_FORMAT",
    "BuilderState",
    "InvalidStateError",
    "ReportBuilder",
    "ReportError",
    "SalesReport",
    "SalesReportBuilder",
    "ValidationError",
]
