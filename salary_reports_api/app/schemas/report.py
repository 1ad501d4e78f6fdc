"""
Pydantic models for salary records and the reports derived from them.

``Record`` is the unit produced by every record source.  All three of
its fields are optional because the source data is allowed to omit
them; the aggregation engine decides which records are usable for
which report.  ``YearSummary`` and ``JobTitleCount`` are the response
items of ``GET /reports`` and ``GET /reports/{year}``.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class Record(BaseModel):
    """One employment‑salary observation."""

    work_year: Optional[int] = Field(None, example=2023)
    job_title: Optional[str] = Field(None, example="Data Scientist")
    salary: Optional[float] = Field(None, ge=0, allow_inf_nan=False, example=120000)

    model_config = ConfigDict(frozen=True, extra="ignore")


class YearSummary(BaseModel):
    """Job count and rounded average salary for one work year."""

    year: int
    total_jobs: int = Field(..., alias="totalJobs", gt=0)
    average_salary: int = Field(..., alias="averageSalary")

    model_config = ConfigDict(populate_by_name=True)


class JobTitleCount(BaseModel):
    """Number of records carrying a job title within one work year."""

    job_title: str
    count: int


class Message(BaseModel):
    """Body of error responses and of the welcome route."""

    message: str
