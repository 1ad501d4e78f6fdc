"""
Domain errors raised by the record sources and the report services.

The HTTP layer registers exception handlers for these classes in
``main.create_app`` so endpoints never build error bodies by hand.
"""

from typing import Optional


class ReportError(Exception):
    """Base class for errors raised while answering a report query."""


class SourceUnavailable(ReportError):
    """The backing store of a record source is missing, unreadable or malformed."""


class NotFound(ReportError):
    """No record matches the requested year.

    ``year`` is ``None`` when the request value could not be parsed as
    an integer.
    """

    def __init__(self, year: Optional[int]):
        self.year = year
        super().__init__(f"No data found for year {self.year_label}")

    @property
    def year_label(self) -> str:
        return "NaN" if self.year is None else str(self.year)


class InsightsUnavailable(Exception):
    """The insights endpoint is not configured or the upstream call failed."""

    def __init__(self, message: str, configured: bool = True):
        super().__init__(message)
        self.configured = configured
