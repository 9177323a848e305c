"""Report construction exceptions."""


class ReportError(Exception):
    """Base exception for report construction errors."""


class ValidationError(ReportError):
    """A required report field was missing at build time."""

    def __init__(self, field: str, message: str | None = None):
        self.field = field
        super().__init__(message or f"{field} not set")


class InvalidStateError(ReportError):
    """The builder was used after it handed off its report."""

    def __init__(self, operation: str):
        self.operation = operation
        super().__init__(f"builder already finalized; cannot call {operation}()")
