"""Inclusive interval overlap between records and date windows."""
from __future__ import annotations

from datetime import date
from typing import Iterable, List

from .dates import effective_end
from .models import InternshipRecord
from .months import month_bounds


def is_active(record: InternshipRecord, window_start: date, window_end: date, now: date) -> bool:
    """True when the record's [start, effective end] touches [window_start, window_end].

    Both boundaries are inclusive and an ongoing record runs through ``now``.
    """
    return record.start <= window_end and effective_end(record, now) >= window_start


def has_started(record: InternshipRecord, now: date) -> bool:
    """False for an ongoing record whose start still lies after ``now``."""
    return effective_end(record, now) >= record.start


def is_active_in_month(record: InternshipRecord, key: str, now: date) -> bool:
    month_start, month_end = month_bounds(key)
    return is_active(record, month_start, month_end, now)


def active_records(
    records: Iterable[InternshipRecord],
    window_start: date,
    window_end: date,
    now: date,
) -> List[InternshipRecord]:
    return [record for record in records if is_active(record, window_start, window_end, now)]
