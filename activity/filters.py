"""Filter selection state and the level -> year/period record pipeline."""
from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from datetime import date
from typing import Iterable, List, Optional, Sequence, Tuple, Union

from .dates import effective_end
from .levels import LevelClassifier, canonicalize, same_level
from .models import InternshipRecord, TemporalWindow, WindowKind
from .months import (
    enumerate_months,
    month_bounds,
    month_key,
    parse_month_key,
    semester_bounds,
    year_bounds,
)
from .overlap import has_started, is_active

logger = logging.getLogger(__name__)

MODE_YEAR = "year"
MODE_PERIOD = "period"
MODE_NONE = "none"


@dataclass(frozen=True)
class FilterSelection:
    """The user's current level and temporal window choice.

    When ``year`` is set it is authoritative for filtering and the period
    fields only mirror that year for display.
    """

    level: Optional[str] = None
    year: Optional[int] = None
    period_start: Optional[str] = None
    period_end: Optional[str] = None

    @property
    def mode(self) -> str:
        if self.year is not None:
            return MODE_YEAR
        if self.period_start is not None or self.period_end is not None:
            return MODE_PERIOD
        return MODE_NONE

    def cache_key(self) -> Tuple[Optional[str], Optional[int], Optional[str], Optional[str]]:
        level = canonicalize(self.level).casefold() if self.level else None
        return (level, self.year, self.period_start, self.period_end)


@dataclass(frozen=True)
class SelectLevel:
    level: Optional[str]


@dataclass(frozen=True)
class SelectYear:
    year: Optional[int]


@dataclass(frozen=True)
class SelectPeriodStart:
    month: Optional[str]


@dataclass(frozen=True)
class SelectPeriodEnd:
    month: Optional[str]


@dataclass(frozen=True)
class SelectSemester:
    year: int
    semester: int


@dataclass(frozen=True)
class DataLoaded:
    """The data-derived month extent changed (new file, new level, ...)."""

    months: Tuple[str, ...]


@dataclass(frozen=True)
class Reset:
    pass


SelectionEvent = Union[
    SelectLevel,
    SelectYear,
    SelectPeriodStart,
    SelectPeriodEnd,
    SelectSemester,
    DataLoaded,
    Reset,
]


def _normalize_month(value: Optional[str]) -> Optional[str]:
    if value is None or not str(value).strip():
        return None
    year, month = parse_month_key(str(value))
    return f"{year:04d}-{month:02d}"


def _clamp(month: Optional[str], first: str, last: str) -> Optional[str]:
    if month is None:
        return None
    if month < first:
        return first
    if month > last:
        return last
    return month


def available_years(months: Iterable[str]) -> List[int]:
    return sorted({parse_month_key(month)[0] for month in months})


def apply_selection(current: FilterSelection, event: SelectionEvent) -> FilterSelection:
    """Pure reducer: return the selection that results from ``event``."""
    if isinstance(event, Reset):
        return FilterSelection()

    if isinstance(event, SelectLevel):
        level = canonicalize(event.level) or None
        return replace(current, level=level)

    if isinstance(event, SelectYear):
        if event.year is None:
            return replace(current, year=None, period_start=None, period_end=None)
        start, end = year_bounds(event.year)
        return replace(current, year=int(event.year), period_start=start, period_end=end)

    if isinstance(event, SelectPeriodStart):
        return replace(current, year=None, period_start=_normalize_month(event.month))

    if isinstance(event, SelectPeriodEnd):
        return replace(current, year=None, period_end=_normalize_month(event.month))

    if isinstance(event, SelectSemester):
        start, end = semester_bounds(event.year, event.semester)
        return replace(current, year=None, period_start=start, period_end=end)

    if isinstance(event, DataLoaded):
        months = sorted(event.months)
        if not months:
            return replace(current, year=None, period_start=None, period_end=None)
        if current.year is not None:
            if current.year in available_years(months):
                return current
            logger.debug("Year %s no longer present in data; clearing", current.year)
            return replace(current, year=None, period_start=None, period_end=None)
        first, last = months[0], months[-1]
        return replace(
            current,
            period_start=_clamp(current.period_start, first, last),
            period_end=_clamp(current.period_end, first, last),
        )

    raise TypeError(f"Unsupported selection event: {event!r}")


def month_extent(records: Iterable[InternshipRecord], now: date) -> Optional[Tuple[str, str]]:
    earliest: Optional[date] = None
    latest: Optional[date] = None
    for record in records:
        if not has_started(record, now):
            continue
        end = effective_end(record, now)
        if earliest is None or record.start < earliest:
            earliest = record.start
        if latest is None or end > latest:
            latest = end
    if earliest is None or latest is None:
        return None
    return month_key(earliest), month_key(latest)


def _period_bounds(selection: FilterSelection) -> Tuple[date, date]:
    start_key, end_key = selection.period_start, selection.period_end
    if start_key is not None and end_key is not None and start_key > end_key:
        start_key, end_key = end_key, start_key
    start = month_bounds(start_key)[0] if start_key is not None else date.min
    end = month_bounds(end_key)[1] if end_key is not None else date.max
    return start, end


def filter_by_level(
    records: Sequence[InternshipRecord],
    level: Optional[str],
    classifier: LevelClassifier,
) -> List[InternshipRecord]:
    if not level:
        return list(records)
    return [record for record in records if same_level(classifier.classify(record), level)]


def filter_by_window(
    records: Sequence[InternshipRecord],
    selection: FilterSelection,
    now: date,
) -> List[InternshipRecord]:
    mode = selection.mode
    if mode == MODE_YEAR:
        start, end = date(selection.year, 1, 1), date(selection.year, 12, 31)
    elif mode == MODE_PERIOD:
        start, end = _period_bounds(selection)
    else:
        return list(records)
    return [record for record in records if is_active(record, start, end, now)]


def filter_records(
    records: Sequence[InternshipRecord],
    selection: FilterSelection,
    classifier: LevelClassifier,
    now: date,
) -> List[InternshipRecord]:
    level_filtered = filter_by_level(records, selection.level, classifier)
    filtered = filter_by_window(level_filtered, selection, now)
    logger.debug(
        "Filtered %d records -> %d after level, %d after %s window",
        len(records),
        len(level_filtered),
        len(filtered),
        selection.mode,
    )
    return filtered


def resolve_window(
    level_filtered: Sequence[InternshipRecord],
    selection: FilterSelection,
    now: date,
) -> TemporalWindow:
    """Pick the months to aggregate for ``selection``.

    Year and period modes use the selected bounds; anything left open falls
    back to the extent of the level-filtered records.
    """
    if selection.mode == MODE_YEAR:
        start, end = year_bounds(selection.year)
        return TemporalWindow(WindowKind.YEAR, start, end)

    extent = month_extent(level_filtered, now)
    if selection.mode == MODE_PERIOD:
        start = selection.period_start or (extent[0] if extent else None)
        end = selection.period_end or (extent[1] if extent else None)
        if start is not None and end is not None and start > end:
            start, end = end, start
        return TemporalWindow(WindowKind.PERIOD, start, end)

    if extent is None:
        return TemporalWindow(WindowKind.FULL)
    return TemporalWindow(WindowKind.FULL, extent[0], extent[1])


def reconcile(
    selection: FilterSelection,
    records: Sequence[InternshipRecord],
    classifier: LevelClassifier,
    now: date,
) -> FilterSelection:
    """Drop or clamp temporal choices that the current data no longer supports."""
    level_filtered = filter_by_level(records, selection.level, classifier)
    extent = month_extent(level_filtered, now)
    months = tuple(enumerate_months(*extent)) if extent else ()
    return apply_selection(selection, DataLoaded(months))
