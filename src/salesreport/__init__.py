"""salesreport package."""

from salesreport.modules.report import (
    InvalidStateError,
    ReportError,
    SalesReport,
    SalesReportBuilder,
    ValidationError,
)

__all__ = [
    "InvalidStateError",
    "ReportError",
    "SalesReport",
    "SalesReportBuilder",
    "ValidationError",
    "app",
    "main",
]


def __getattr__(name: str):
    if name in ("app", "main"):
        from salesreport.cli import app, main

        return {"app": app, "main": main}[name]
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


def __dir__() -> list[str]:
    return sorted(__all__)
