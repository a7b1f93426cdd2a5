"""Custom exceptions for the report generator."""


class LoadReportError(Exception):
    """Base exception for report generation failures."""
    pass


class UsageError(LoadReportError):
    """Exception raised when the command line is invalid."""
    pass


class ReportIOError(LoadReportError):
    """Exception raised when a file cannot be opened, read or written."""
    pass


class RecordReadError(ReportIOError):
    """Exception raised when a record log cannot be read."""
    pass


class RecordParseError(LoadReportError):
    """Exception raised when a record line is malformed."""

    def __init__(self, message: str, path=None, line_number=None):
        super().__init__(message)
        self.path = path
        self.line_number = line_number


class RenderError(LoadReportError):
    """Exception raised when a chart cannot be rendered."""
    pass


class EmptyDatasetError(LoadReportError):
    """Exception raised when statistics are requested for an empty dataset."""
    pass
