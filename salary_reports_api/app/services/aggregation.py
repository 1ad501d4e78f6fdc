"""
Aggregation of salary records into report views.

Both functions are pure: they never mutate their input and return the
same output for the same input.  Groups are emitted in the order their
key is first seen while traversing ``records``.

* :func:`summarize_by_year` counts the usable records per work year and
  averages their salaries.  A record is usable when both ``work_year``
  and ``salary`` are present; a salary of ``0`` is present.
* :func:`job_title_histogram_for_year` counts job titles within one work
  year and raises :class:`NotFound` when no record has that year.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Context, Decimal
from typing import Dict, Iterable, List, Optional, Union

from salary_reports_api.app.core.errors import NotFound
from salary_reports_api.app.schemas.report import JobTitleCount, Record, YearSummary

# Wide enough to hold the exact integer part of any sum of float salaries.
_CONTEXT = Context(prec=400)


def round_half_away_from_zero(value: Decimal) -> int:
    """Round to the nearest integer, ties away from zero (``2.5`` -> ``3``)."""
    return int(value.quantize(Decimal(1), rounding=ROUND_HALF_UP, context=_CONTEXT))


def average_salary(total_salary: Union[Decimal, float], total_jobs: int) -> int:
    """Rounded ``total_salary / total_jobs``; raises ``ValueError`` for a non‑finite total."""
    total = Decimal(total_salary)
    if not total.is_finite():
        raise ValueError(f"Salary total {total_salary!r} is not finite")
    return round_half_away_from_zero(_CONTEXT.divide(total, Decimal(total_jobs)))


def summarize_by_year(records: Iterable[Record]) -> List[YearSummary]:
    """Return one :class:`YearSummary` per work year found in usable records.

    Salaries are summed as exact decimals, so large totals cannot
    overflow.  An empty input yields an empty list.
    """
    totals: Dict[int, List] = {}
    for record in records:
        if record.work_year is None or record.salary is None:
            continue
        bucket = totals.setdefault(record.work_year, [0, Decimal(0)])
        bucket[0] += 1
        bucket[1] = _CONTEXT.add(bucket[1], Decimal(record.salary))

    return [
        YearSummary(
            year=year,
            total_jobs=total_jobs,
            average_salary=average_salary(total_salary, total_jobs),
        )
        for year, (total_jobs, total_salary) in totals.items()
    ]


def job_title_histogram_for_year(records: Iterable[Record], year: Optional[int]) -> List[JobTitleCount]:
    """Count job titles among the records of ``year``.

    Records without a job title are left out of the counts but still
    make the year exist.  Raises :class:`NotFound` when no record
    matches ``year``; ``None`` (an unparseable year) never matches.
    """
    matched = [record for record in records if year is not None and record.work_year == year]
    if not matched:
        raise NotFound(year)

    counts: Dict[str, int] = {}
    for record in matched:
        if record.job_title:
            counts[record.job_title] = counts.get(record.job_title, 0) + 1

    return [JobTitleCount(job_title=title, count=count) for title, count in counts.items()]
