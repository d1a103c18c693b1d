from __future__ import annotations

import logging
import zipfile
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Iterable, List, Mapping, Sequence

import pandas as pd

from activity.dates import parse_date
from activity.models import InternshipRecord, ParseErr

from .constants import (
    CSV_SUFFIXES,
    END_COLUMNS,
    EXCEL_SUFFIXES,
    INSTITUTION_COLUMNS,
    LEVEL_COLUMNS,
    NAME_COLUMNS,
    START_COLUMNS,
)
from .exceptions import IngestionError

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class RowRejection:
    row_index: int
    reasons: List[str]


@dataclass(slots=True)
class IntakeResult:
    records: List[InternshipRecord] = field(default_factory=list)
    rejected: List[RowRejection] = field(default_factory=list)


def _is_blank(value: object) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    try:
        return bool(pd.isna(value))
    except (TypeError, ValueError):
        return False


def first_present(row: Mapping[str, object], keys: Sequence[str]) -> object:
    for key in keys:
        if key in row and not _is_blank(row[key]):
            return row[key]
    return None


def normalise_string(value: object) -> str:
    if _is_blank(value):
        return ""
    return str(value).strip()


def row_to_record(row: Mapping[str, object], row_index: int = 0) -> InternshipRecord | RowRejection:
    reasons: List[str] = []

    start_raw = first_present(row, START_COLUMNS)
    start = None
    if start_raw is None:
        reasons.append("Missing start date")
    else:
        parsed = parse_date(start_raw)
        if isinstance(parsed, ParseErr):
            reasons.append(f"Invalid start date: {start_raw} ({'; '.join(parsed.reasons)})")
        else:
            start = parsed.value

    end_raw = first_present(row, END_COLUMNS)
    end = None
    if end_raw is not None:
        parsed = parse_date(end_raw)
        if isinstance(parsed, ParseErr):
            reasons.append(f"Invalid end date: {end_raw} ({'; '.join(parsed.reasons)})")
        else:
            end = parsed.value

    if reasons or start is None:
        return RowRejection(row_index, reasons)

    if end is not None and end < start:
        logger.warning("Row %d ends before it starts (%s < %s); swapping dates", row_index, end, start)
        start, end = end, start

    return InternshipRecord(
        start=start,
        end=end,
        name=normalise_string(first_present(row, NAME_COLUMNS)),
        institution=normalise_string(first_present(row, INSTITUTION_COLUMNS)),
        level=normalise_string(first_present(row, LEVEL_COLUMNS)),
    )


def rows_to_records(rows: Iterable[Mapping[str, object]]) -> IntakeResult:
    """Convert raw spreadsheet rows, dropping rows without a usable start date."""
    result = IntakeResult()
    for index, row in enumerate(rows):
        outcome = row_to_record(row, index)
        if isinstance(outcome, RowRejection):
            logger.warning("Dropping row %d: %s", index, "; ".join(outcome.reasons))
            result.rejected.append(outcome)
        else:
            result.records.append(outcome)
    if not result.records:
        raise IngestionError("No valid records found in the file")
    logger.info("Loaded %d records (%d rows rejected)", len(result.records), len(result.rejected))
    return result


def read_rows(path: Path, sheet_name: int | str = 0) -> List[Dict[str, object]]:
    if not path.exists():
        raise IngestionError(f"Input file does not exist: {path}")
    suffix = path.suffix.lower()
    try:
        if suffix in EXCEL_SUFFIXES:
            frame = pd.read_excel(path, sheet_name=sheet_name)
        elif suffix in CSV_SUFFIXES:
            frame = pd.read_csv(path)
        else:
            raise IngestionError(f"Unsupported file type: {path.suffix or path.name}")
    except (ValueError, OSError, ImportError, zipfile.BadZipFile) as exc:
        raise IngestionError(f"Failed to parse {path.name}: {exc}") from exc
    frame.columns = [str(column).strip() for column in frame.columns]
    return frame.to_dict(orient="records")


def read_records(path: Path, sheet_name: int | str = 0) -> IntakeResult:
    return rows_to_records(read_rows(path, sheet_name=sheet_name))
