"""
Salary report endpoints for API v1.

``GET /reports`` returns the job count and average salary of every work
year; ``GET /reports/{year}`` returns how often each job title occurs in
one year.  The handlers are plain functions so FastAPI runs the
blocking record source I/O in its threadpool.

Failures are raised as domain errors and rendered by the handlers
registered in ``main.create_app``: a source that cannot be read becomes
``500 {"message": "Failed to process reports"}``, a year without
records becomes ``404 {"message": "No data found for year <year>"}``.
"""

from typing import List

from fastapi import APIRouter, Depends

from salary_reports_api.app.core.config import settings
from salary_reports_api.app.schemas.report import JobTitleCount, Message, YearSummary
from salary_reports_api.app.services.record_source import RecordSource, get_record_source
from salary_reports_api.app.services.report_service import ReportService, parse_year

router = APIRouter()


def record_source_dependency() -> RecordSource:
    """Build the configured record source; overridden in tests."""
    return get_record_source(settings)


def get_report_service(source: RecordSource = Depends(record_source_dependency)) -> ReportService:
    return ReportService(source)


@router.get(
    "",
    response_model=List[YearSummary],
    responses={500: {"model": Message}},
)
def list_reports(service: ReportService = Depends(get_report_service)) -> List[YearSummary]:
    """Return the job count and rounded average salary per work year."""
    return service.yearly_summary()


@router.get(
    "/{year}",
    response_model=List[JobTitleCount],
    responses={404: {"model": Message}, 500: {"model": Message}},
)
def year_report(year: str, service: ReportService = Depends(get_report_service)) -> List[JobTitleCount]:
    """Return job title counts for one work year.

    ``year`` is parsed leniently; a value that does not start with
    digits matches no record and yields 404.
    """
    return service.job_titles_for_year(parse_year(year))
