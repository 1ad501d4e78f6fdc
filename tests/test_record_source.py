"""
Tests for the literal, JSON file and spreadsheet record sources.
"""
import json

import pandas as pd
import pytest

from salary_reports_api.app.core.config import Settings
from salary_reports_api.app.core.errors import SourceUnavailable
from salary_reports_api.app.services.aggregation import job_title_histogram_for_year, summarize_by_year
from salary_reports_api.app.services.record_source import (
    JsonFileRecordSource,
    LiteralRecordSource,
    SpreadsheetRecordSource,
    get_record_source,
)
from salary_reports_api.app.services.sample_records import SAMPLE_RECORDS

from conftest import MIXED_ROWS


def _write_json(path, data):
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


def _write_workbook(path, rows):
    pd.DataFrame(rows, columns=["work_year", "job_title", "salary"]).to_excel(path, index=False)
    return path


def test_literal_source_defaults_to_sample_records():
    records = LiteralRecordSource().load()

    assert len(records) == len(SAMPLE_RECORDS)
    assert records[0].work_year == SAMPLE_RECORDS[0]["work_year"]


def test_literal_source_returns_independent_copies():
    rows = [{"work_year": 2023, "job_title": "Engineer", "salary": 100000}]
    source = LiteralRecordSource(rows)

    first = source.load()
    first.clear()
    rows[0]["salary"] = 1

    second = source.load()
    assert len(second) == 1
    assert second[0].salary == 100000


def test_json_source_loads_records(tmp_path):
    path = _write_json(tmp_path / "salaries.json", MIXED_ROWS)

    records = JsonFileRecordSource(path).load()

    assert len(records) == len(MIXED_ROWS)
    assert records[6].salary is None


def test_json_source_rereads_file(tmp_path):
    path = _write_json(tmp_path / "salaries.json", MIXED_ROWS[:1])
    source = JsonFileRecordSource(path)
    assert len(source.load()) == 1

    _write_json(path, MIXED_ROWS)
    assert len(source.load()) == len(MIXED_ROWS)


def test_json_source_missing_file(tmp_path):
    with pytest.raises(SourceUnavailable):
        JsonFileRecordSource(tmp_path / "missing.json").load()


@pytest.mark.parametrize(
    "content",
    [
        "{not json",
        '{"work_year": 2023}',
        '[1, 2, 3]',
        '[{"work_year": "twenty", "salary": 1}]',
        '[{"work_year": 2023, "salary": -5}]',
    ],
)
def test_json_source_malformed_content(tmp_path, content):
    path = tmp_path / "salaries.json"
    path.write_text(content, encoding="utf-8")

    with pytest.raises(SourceUnavailable):
        JsonFileRecordSource(path).load()


def test_spreadsheet_source_loads_records(tmp_path):
    path = _write_workbook(tmp_path / "salaries.xlsx", MIXED_ROWS)

    records = SpreadsheetRecordSource(path).load()

    assert len(records) == len(MIXED_ROWS)
    assert records[0].work_year == 2021
    assert records[0].job_title == "Data Analyst"
    assert records[5].job_title is None
    assert records[5].salary is None
    assert records[7].work_year is None


def test_spreadsheet_source_missing_file(tmp_path):
    with pytest.raises(SourceUnavailable):
        SpreadsheetRecordSource(tmp_path / "missing.xlsx").load()


def test_spreadsheet_source_unreadable_binary(tmp_path):
    path = tmp_path / "salaries.xlsx"
    path.write_bytes(b"\x00\x01 definitely not a workbook")

    with pytest.raises(SourceUnavailable):
        SpreadsheetRecordSource(path).load()


def test_spreadsheet_source_without_expected_header(tmp_path):
    path = tmp_path / "salaries.xlsx"
    pd.DataFrame([{"year": 2023, "pay": 1}]).to_excel(path, index=False)

    with pytest.raises(SourceUnavailable):
        SpreadsheetRecordSource(path).load()


def test_sources_are_equivalent(tmp_path):
    sources = [
        LiteralRecordSource(MIXED_ROWS),
        JsonFileRecordSource(_write_json(tmp_path / "salaries.json", MIXED_ROWS)),
        SpreadsheetRecordSource(_write_workbook(tmp_path / "salaries.xlsx", MIXED_ROWS)),
    ]
    snapshots = [source.load() for source in sources]

    summaries = [summarize_by_year(records) for records in snapshots]
    assert summaries[0] == summaries[1] == summaries[2]

    for year in (2021, 2022, 2024):
        histograms = [job_title_histogram_for_year(records, year) for records in snapshots]
        assert histograms[0] == histograms[1] == histograms[2]


def test_get_record_source_selects_by_config(tmp_path):
    assert isinstance(get_record_source(Settings(record_source="literal")), LiteralRecordSource)

    json_source = get_record_source(Settings(record_source="json", data_path=str(tmp_path / "a.json")))
    assert isinstance(json_source, JsonFileRecordSource)

    sheet_source = get_record_source(Settings(record_source="Spreadsheet", data_path=str(tmp_path / "a.xlsx")))
    assert isinstance(sheet_source, SpreadsheetRecordSource)


def test_get_record_source_rejects_bad_config():
    with pytest.raises(ValueError):
        get_record_source(Settings(record_source="postgres"))
    with pytest.raises(ValueError):
        get_record_source(Settings(record_source="json", data_path=""))
