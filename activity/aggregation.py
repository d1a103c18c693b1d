from __future__ import annotations

import logging
from collections import Counter, OrderedDict
from concurrent.futures import ThreadPoolExecutor
from datetime import date
from typing import Iterable, List, Optional, Sequence, Tuple

from .constants import DEFAULT_SAMPLE_LIMIT, UNKNOWN_INSTITUTION
from .dates import effective_end, format_display, resolve_now
from .filters import FilterSelection, filter_by_level, filter_by_window, resolve_window
from .levels import LevelClassifier
from .models import (
    ActivityReport,
    ActivitySummary,
    DistributionRow,
    InternshipRecord,
    MonthlyCount,
    MonthOption,
    SampleRow,
    TemporalWindow,
)
from .months import enumerate_months, month_bounds, month_label
from .overlap import active_records, has_started

logger = logging.getLogger(__name__)

REPORT_CACHE_SIZE = 32


def _count_active(records: Sequence[InternshipRecord], key: str, now: date) -> MonthlyCount:
    return MonthlyCount(key, len(active_in_month(records, key, now)))


def monthly_series(
    records: Sequence[InternshipRecord],
    window: TemporalWindow,
    now: date,
    workers: Optional[int] = None,
) -> List[MonthlyCount]:
    """Active-record count for every month of ``window``, zero months included."""
    if not records or window.is_empty:
        return []
    months = enumerate_months(window.start_month, window.end_month)
    if workers and workers > 1 and len(months) > 1:
        # Executor.map yields in submission order, so the series stays month-ordered.
        with ThreadPoolExecutor(max_workers=workers) as pool:
            return list(pool.map(lambda key: _count_active(records, key, now), months))
    return [_count_active(records, key, now) for key in months]


def _institution_name(record: InternshipRecord) -> str:
    name = (record.institution or "").strip()
    return name or UNKNOWN_INSTITUTION


def institution_distribution(records: Sequence[InternshipRecord]) -> List[DistributionRow]:
    total = len(records)
    if total == 0:
        return []
    counts = Counter(_institution_name(record) for record in records)
    ordered = sorted(counts.items(), key=lambda item: (-item[1], item[0]))
    return [DistributionRow(name, count, count / total * 100) for name, count in ordered]


def _sample_row(record: InternshipRecord) -> SampleRow:
    return SampleRow(
        name=(record.name or "").strip(),
        institution=_institution_name(record),
        start_display=format_display(record.start),
        end_display=format_display(record.end),
    )


def active_in_month(records: Iterable[InternshipRecord], key: str, now: date) -> List[InternshipRecord]:
    month_start, month_end = month_bounds(key)
    return active_records(records, month_start, month_end, now)


def sample_rows_for_month(
    records: Sequence[InternshipRecord],
    key: str,
    now: date,
    limit: int = DEFAULT_SAMPLE_LIMIT,
) -> List[SampleRow]:
    active = active_in_month(records, key, now)
    return [_sample_row(record) for record in active[: max(limit, 0)]]


def summarize(records: Sequence[InternshipRecord], now: date) -> ActivitySummary:
    started = [record for record in records if has_started(record, now)]
    if not started:
        return ActivitySummary(len(records), None, None)
    earliest = min(record.start for record in started)
    latest = max(effective_end(record, now) for record in started)
    return ActivitySummary(len(records), earliest, latest)


def month_options(series: Iterable[MonthlyCount]) -> List[MonthOption]:
    return [MonthOption(row.month_key, month_label(row.month_key), row.active_count) for row in series]


class ActivityAggregator:
    """Answer monthly activity questions over one immutable record snapshot.

    Every view of a report is computed from the same filtered subset, so the
    monthly counts, institution shares and sample rows always agree.
    """

    def __init__(
        self,
        records: Iterable[InternshipRecord],
        classifier: LevelClassifier | None = None,
        workers: Optional[int] = None,
    ) -> None:
        self.records: Tuple[InternshipRecord, ...] = tuple(records)
        self.classifier = classifier or LevelClassifier()
        self.workers = workers
        self._cache: OrderedDict[tuple, ActivityReport] = OrderedDict()

    def level_options(self) -> List[str]:
        return self.classifier.level_options(self.records)

    def report(
        self,
        selection: FilterSelection | None = None,
        now: object = None,
        sample_month: Optional[str] = None,
        sample_limit: int = DEFAULT_SAMPLE_LIMIT,
    ) -> ActivityReport:
        selection = selection or FilterSelection()
        reference = resolve_now(now)
        cache_key = (selection.cache_key(), reference, sample_month, sample_limit)
        cached = self._cache.get(cache_key)
        if cached is not None:
            self._cache.move_to_end(cache_key)
            return cached

        level_filtered = filter_by_level(self.records, selection.level, self.classifier)
        filtered = filter_by_window(level_filtered, selection, reference)
        window = resolve_window(level_filtered, selection, reference)
        monthly = monthly_series(filtered, window, reference, workers=self.workers)

        samples: List[SampleRow] = []
        sample_active = 0
        if sample_month:
            active = active_in_month(filtered, sample_month, reference)
            sample_active = len(active)
            samples = [_sample_row(record) for record in active[: max(sample_limit, 0)]]

        report = ActivityReport(
            reference_date=reference,
            window=window,
            monthly=tuple(monthly),
            institutions=tuple(institution_distribution(filtered)),
            summary=summarize(filtered, reference),
            sample_month=sample_month,
            samples=tuple(samples),
            sample_active_count=sample_active,
        )
        logger.info(
            "Aggregated %d of %d records over %d months (%s window)",
            len(filtered),
            len(self.records),
            len(monthly),
            window.kind.value,
        )
        self._cache[cache_key] = report
        if len(self._cache) > REPORT_CACHE_SIZE:
            self._cache.popitem(last=False)
        return report
