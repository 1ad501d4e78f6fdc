import pytest
from fastapi.testclient import TestClient

from salary_reports_api.app.api.v1.endpoints.reports import record_source_dependency
from salary_reports_api.app.main import app
from salary_reports_api.app.schemas.report import Record
from salary_reports_api.app.services.record_source import LiteralRecordSource


EXAMPLE_ROWS = [
    {"work_year": 2023, "job_title": "Engineer", "salary": 100000},
    {"work_year": 2023, "job_title": "Engineer", "salary": 120000},
    {"work_year": 2023, "job_title": "Manager", "salary": 150000},
]

# Mixed data: missing salaries, missing years, empty titles and a zero salary.
MIXED_ROWS = [
    {"work_year": 2021, "job_title": "Data Analyst", "salary": 60000},
    {"work_year": 2021, "job_title": "Data Analyst", "salary": 0},
    {"work_year": 2021, "job_title": "", "salary": 70000},
    {"work_year": 2022, "job_title": "Data Engineer", "salary": 101},
    {"work_year": 2022, "job_title": "Data Engineer", "salary": 100},
    {"work_year": 2022, "job_title": None, "salary": None},
    {"work_year": 2022, "job_title": "Data Scientist"},
    {"work_year": None, "job_title": "Data Scientist", "salary": 90000},
    {"work_year": 2024, "job_title": None, "salary": None},
]


@pytest.fixture
def example_records():
    return [Record(**row) for row in EXAMPLE_ROWS]


@pytest.fixture
def mixed_records():
    return [Record(**row) for row in MIXED_ROWS]


@pytest.fixture
def make_client():
    """Return a factory building a TestClient backed by the given record source."""

    def _make(source):
        app.dependency_overrides[record_source_dependency] = lambda: source
        return TestClient(app)

    yield _make
    app.dependency_overrides.clear()


@pytest.fixture
def client(make_client):
    return make_client(LiteralRecordSource(EXAMPLE_ROWS))
