"""
Service layer for salary reports.

``ReportService`` loads a fresh snapshot from its record source for
every query and runs the matching aggregation over it.  Errors from the
source (:class:`SourceUnavailable`) and from the aggregation
(:class:`NotFound`) propagate unchanged; the exception handlers
registered in ``main.create_app`` turn them into HTTP responses.
"""

from __future__ import annotations

import logging
import re
from typing import List, Optional

from salary_reports_api.app.schemas.report import JobTitleCount, YearSummary
from salary_reports_api.app.services.aggregation import job_title_histogram_for_year, summarize_by_year
from salary_reports_api.app.services.record_source import RecordSource

logger = logging.getLogger(__name__)

_LEADING_INT = re.compile(r"^\s*([+-]?[0-9]+)", re.ASCII)


def parse_year(value: str) -> Optional[int]:
    """Parse the leading base‑10 integer of ``value``.

    Leading whitespace and a sign are accepted and trailing characters
    are ignored (``"2023abc"`` -> ``2023``).  Only ASCII digits count.
    Returns ``None`` when ``value`` does not start with digits or the
    digits are too long to convert; ``None`` matches no record.
    """
    match = _LEADING_INT.match(value)
    if not match:
        return None
    try:
        return int(match.group(1))
    except ValueError:
        # beyond the interpreter's int string conversion limit
        return None


class ReportService:
    """Answer report queries over the records of one source."""

    def __init__(self, source: RecordSource):
        self.source = source

    def yearly_summary(self) -> List[YearSummary]:
        records = self.source.load()
        summary = summarize_by_year(records)
        logger.debug("Summarised %d records into %d years", len(records), len(summary))
        return summary

    def job_titles_for_year(self, year: Optional[int]) -> List[JobTitleCount]:
        records = self.source.load()
        return job_title_histogram_for_year(records, year)
