"""Spreadsheet intake: raw rows to internship records."""

from .exceptions import IngestionError
from .reader import IntakeResult, RowRejection, read_records, read_rows, row_to_record, rows_to_records

__all__ = [
    "IngestionError",
    "IntakeResult",
    "RowRejection",
    "read_records",
    "read_rows",
    "row_to_record",
    "rows_to_records",
]
