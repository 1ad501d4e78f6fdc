"""
Record sources for the report services.

A record source is anything with a ``load()`` method returning the full
list of :class:`Record` objects, or raising :class:`SourceUnavailable`
when its backing store cannot be read or parsed.  There is no partial
success: either every entry loads or the call fails.

Three implementations are provided:

* :class:`LiteralRecordSource` – records held in memory; each call
  returns fresh copies so callers cannot corrupt the canonical set.
* :class:`JsonFileRecordSource` – a UTF‑8 file containing a JSON array
  of ``{work_year, job_title, salary}`` objects.
* :class:`SpreadsheetRecordSource` – the first sheet of an ``.xlsx``
  workbook whose header row names the same columns.

File based sources re‑read their file on every call, so repeated
queries observe the current contents of the file.  Use
:func:`get_record_source` to build the source selected in
``Settings``.
"""

from __future__ import annotations

import copy
import json
import logging
from pathlib import Path
from typing import Any, Iterable, List, Mapping, Optional, Protocol

import pandas as pd
from pydantic import ValidationError

from salary_reports_api.app.core.config import Settings, settings as default_settings
from salary_reports_api.app.core.errors import SourceUnavailable
from salary_reports_api.app.schemas.report import Record
from salary_reports_api.app.services.sample_records import SAMPLE_RECORDS

logger = logging.getLogger(__name__)

RECORD_COLUMNS = ("work_year", "job_title", "salary")


class RecordSource(Protocol):
    """Anything that can produce a snapshot of salary records."""

    def load(self) -> List[Record]:
        ...


def _to_records(rows: Iterable[Any], origin: str) -> List[Record]:
    """Validate raw rows into records, failing the whole load on the first bad row."""
    records: List[Record] = []
    for index, row in enumerate(rows):
        if not isinstance(row, Mapping):
            raise SourceUnavailable(f"{origin}: entry {index} is not an object")
        try:
            records.append(Record.model_validate(dict(row)))
        except ValidationError as exc:
            raise SourceUnavailable(f"{origin}: entry {index} is not a valid record: {exc}") from exc
    return records


class LiteralRecordSource:
    """Records embedded in the running process."""

    def __init__(self, rows: Optional[Iterable[Mapping[str, Any]]] = None):
        rows = SAMPLE_RECORDS if rows is None else rows
        # Snapshot the rows so later changes to the caller's list are not seen.
        self._rows = copy.deepcopy(list(rows))

    def load(self) -> List[Record]:
        return _to_records(copy.deepcopy(self._rows), "literal records")


class JsonFileRecordSource:
    """Records stored as a JSON array in a file."""

    def __init__(self, path: str | Path):
        self.path = Path(path)

    def load(self) -> List[Record]:
        try:
            content = self.path.read_text(encoding="utf-8")
        except OSError as exc:
            logger.error("Cannot read salary records from %s: %s", self.path, exc)
            raise SourceUnavailable(f"Cannot read {self.path}: {exc}") from exc
        try:
            data = json.loads(content)
        except json.JSONDecodeError as exc:
            logger.error("Malformed JSON in %s: %s", self.path, exc)
            raise SourceUnavailable(f"Malformed JSON in {self.path}: {exc}") from exc
        if not isinstance(data, list):
            raise SourceUnavailable(f"{self.path} does not contain a JSON array")
        records = _to_records(data, str(self.path))
        logger.debug("Loaded %d records from %s", len(records), self.path)
        return records


def _native(value: Any) -> Any:
    """Convert a spreadsheet cell to a plain Python value, empty cells to ``None``."""
    if value is None:
        return None
    try:
        if pd.isna(value):
            return None
    except (TypeError, ValueError):
        pass
    if hasattr(value, "item"):
        # numpy scalar
        value = value.item()
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


class SpreadsheetRecordSource:
    """Records stored in the first sheet of an Excel workbook."""

    def __init__(self, path: str | Path):
        self.path = Path(path)

    def load(self) -> List[Record]:
        if not self.path.is_file():
            logger.error("Salary workbook %s does not exist", self.path)
            raise SourceUnavailable(f"Workbook {self.path} does not exist")
        try:
            df = pd.read_excel(self.path, sheet_name=0, engine="openpyxl")
        except Exception as exc:
            # openpyxl raises a variety of errors for corrupt or non‑xlsx files
            logger.error("Cannot read workbook %s: %s", self.path, exc)
            raise SourceUnavailable(f"Cannot read workbook {self.path}: {exc}") from exc

        df = df.rename(columns=lambda c: str(c).strip())
        if "work_year" not in df.columns or "salary" not in df.columns:
            raise SourceUnavailable(f"Workbook {self.path} has no work_year/salary header")

        rows = []
        for raw in df.to_dict(orient="records"):
            row = {column: _native(raw.get(column)) for column in RECORD_COLUMNS}
            # Titles read as numbers stay text
            if row["job_title"] is not None:
                row["job_title"] = str(row["job_title"])
            rows.append(row)
        records = _to_records(rows, str(self.path))
        logger.debug("Loaded %d records from %s", len(records), self.path)
        return records


def get_record_source(config: Settings = default_settings) -> RecordSource:
    """Build the record source selected by ``config.record_source``.

    Raises ``ValueError`` for an unknown source kind or when a file
    based source has no ``data_path``.
    """
    kind = config.record_source.strip().lower()
    if kind == "literal":
        return LiteralRecordSource()
    if kind not in {"json", "spreadsheet"}:
        raise ValueError(f"Unknown record source {config.record_source!r}")
    if not config.data_path:
        raise ValueError(f"DATA_PATH must be set for the {kind} record source")
    if kind == "json":
        return JsonFileRecordSource(config.data_path)
    return SpreadsheetRecordSource(config.data_path)
