"""Calendar month buckets keyed as ``YYYY-MM``."""
from __future__ import annotations

from datetime import date, timedelta
from typing import List, Optional, Tuple, Union

import pandas as pd

from .constants import MONTH_KEY, MONTH_LABEL_FORMAT, SEMESTER_MONTHS

MonthLike = Union[date, str]


def month_key(value: date) -> str:
    return f"{value.year:04d}-{value.month:02d}"


def parse_month_key(key: str) -> Tuple[int, int]:
    match = MONTH_KEY.match((key or "").strip())
    if not match:
        raise ValueError(f"Invalid month key: {key!r}")
    year, month = int(match.group(1)), int(match.group(2))
    if not 1 <= month <= 12:
        raise ValueError(f"Invalid month key: {key!r}")
    return year, month


def _first_day(value: MonthLike) -> date:
    if isinstance(value, date):
        return date(value.year, value.month, 1)
    year, month = parse_month_key(value)
    return date(year, month, 1)


def month_bounds(key: MonthLike) -> Tuple[date, date]:
    """Return the first and last calendar day of the month, both inclusive."""
    first = _first_day(key)
    next_first = (first + timedelta(days=32)).replace(day=1)
    return first, next_first - timedelta(days=1)


def enumerate_months(start: Optional[MonthLike], end: Optional[MonthLike]) -> List[str]:
    """List every month key from ``start`` to ``end`` inclusive.

    Arguments may arrive in either order; a missing endpoint yields an empty list.
    """
    if start is None or end is None:
        return []
    first, last = _first_day(start), _first_day(end)
    if first > last:
        first, last = last, first
    periods = pd.period_range(start=month_key(first), end=month_key(last), freq="M")
    return [period.strftime("%Y-%m") for period in periods]


def month_label(key: str) -> str:
    return _first_day(key).strftime(MONTH_LABEL_FORMAT)


def year_bounds(year: int) -> Tuple[str, str]:
    return f"{year:04d}-01", f"{year:04d}-12"


def semester_bounds(year: int, semester: int) -> Tuple[str, str]:
    if semester not in SEMESTER_MONTHS:
        raise ValueError(f"Semester must be 1 or 2, got {semester!r}")
    first_month, last_month = SEMESTER_MONTHS[semester]
    return f"{year:04d}-{first_month:02d}", f"{year:04d}-{last_month:02d}"
