"""Normalize heterogeneous date cells into calendar dates."""
from __future__ import annotations

import math
import numbers
from datetime import date, datetime, timedelta, timezone
from typing import Callable, List, Optional, Sequence, Tuple

import pandas as pd
from dateutil import parser as dateparser

from .constants import (
    DISPLAY_DATE_FORMAT,
    ISO_DATE,
    OPEN_END_DISPLAY,
    SERIAL_DATE_EPOCH,
)
from .exceptions import InvalidDate
from .models import InternshipRecord, ParseErr, ParseOk, ParseResult

# A strategy returns a date, None when the value is not its kind, or raises ValueError.
DateStrategy = Callable[[object], Optional[date]]

_FILL_DEFAULT = datetime(2000, 1, 1)


def _is_missing(raw: object) -> bool:
    if raw is None:
        return True
    if isinstance(raw, str):
        return not raw.strip()
    try:
        return bool(pd.isna(raw))
    except (TypeError, ValueError):
        return False


def _to_utc_date(value: datetime) -> date:
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc)
    return date(value.year, value.month, value.day)


def _from_date_object(raw: object) -> Optional[date]:
    if isinstance(raw, datetime):
        return _to_utc_date(raw)
    if isinstance(raw, date):
        return raw
    return None


def _from_iso_string(raw: object) -> Optional[date]:
    if not isinstance(raw, str):
        return None
    text = raw.strip()
    if not ISO_DATE.match(text):
        return None
    try:
        return date.fromisoformat(text)
    except ValueError as exc:
        raise ValueError(f"iso: {exc}") from exc


def _from_serial_number(raw: object) -> Optional[date]:
    if isinstance(raw, bool) or not isinstance(raw, numbers.Real):
        return None
    serial = float(raw)
    if not math.isfinite(serial):
        raise ValueError("serial: not a finite number")
    days = math.floor(serial)
    try:
        return SERIAL_DATE_EPOCH + timedelta(days=days)
    except OverflowError as exc:
        raise ValueError(f"serial: {days} days is out of range") from exc


def _from_free_text(raw: object) -> Optional[date]:
    if not isinstance(raw, str):
        return None
    try:
        parsed = dateparser.parse(raw.strip(), default=_FILL_DEFAULT)
    except (ValueError, OverflowError) as exc:
        raise ValueError(f"text: {exc}") from exc
    return _to_utc_date(parsed)


DEFAULT_STRATEGIES: Tuple[DateStrategy, ...] = (
    _from_date_object,
    _from_iso_string,
    _from_serial_number,
    _from_free_text,
)


def parse_date(raw: object, strategies: Sequence[DateStrategy] = DEFAULT_STRATEGIES) -> ParseResult:
    """Run ``raw`` through the ordered strategies and return the first date produced.

    The result is tagged: ``ParseOk`` with the date, or ``ParseErr`` listing why
    every applicable strategy rejected the value.
    """
    if _is_missing(raw):
        return ParseErr(raw, ("empty value",))
    reasons: List[str] = []
    for strategy in strategies:
        try:
            value = strategy(raw)
        except (ValueError, TypeError) as exc:
            reasons.append(str(exc))
            continue
        if value is not None:
            return ParseOk(value)
    if not reasons:
        reasons.append(f"unsupported type {type(raw).__name__}")
    return ParseErr(raw, tuple(reasons))


def require_date(raw: object) -> date:
    result = parse_date(raw)
    if isinstance(result, ParseErr):
        raise InvalidDate(raw, result.reasons)
    return result.value


def resolve_now(now: Optional[object] = None) -> date:
    """Capture the reference date for one aggregation pass."""
    if now is None:
        return datetime.now(timezone.utc).date()
    return require_date(now)


def effective_end(record: InternshipRecord, now: date) -> date:
    return record.end if record.end is not None else now


def format_display(value: Optional[date]) -> str:
    if value is None:
        return OPEN_END_DISPLAY
    return value.strftime(DISPLAY_DATE_FORMAT)
