"""Data models for internship activity aggregation."""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import Dict, List, Optional, Tuple, Union


@dataclass(frozen=True, slots=True)
class InternshipRecord:
    start: date
    end: Optional[date] = None
    name: str = ""
    institution: str = ""
    level: str = ""

    @property
    def is_open(self) -> bool:
        return self.end is None


@dataclass(frozen=True, slots=True)
class ParseOk:
    value: date

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True, slots=True)
class ParseErr:
    raw: object
    reasons: Tuple[str, ...]

    @property
    def ok(self) -> bool:
        return False


ParseResult = Union[ParseOk, ParseErr]


class WindowKind(str, Enum):
    FULL = "full"
    YEAR = "year"
    PERIOD = "period"


@dataclass(frozen=True, slots=True)
class TemporalWindow:
    kind: WindowKind
    start_month: Optional[str] = None
    end_month: Optional[str] = None

    @property
    def is_empty(self) -> bool:
        return self.start_month is None or self.end_month is None


@dataclass(frozen=True, slots=True)
class MonthlyCount:
    month_key: str
    active_count: int

    def as_dict(self) -> Dict[str, object]:
        return {"monthKey": self.month_key, "activeCount": self.active_count}


@dataclass(frozen=True, slots=True)
class DistributionRow:
    name: str
    count: int
    percentage: float

    def as_dict(self) -> Dict[str, object]:
        return {"name": self.name, "count": self.count, "percentage": self.percentage}


@dataclass(frozen=True, slots=True)
class SampleRow:
    name: str
    institution: str
    start_display: str
    end_display: str

    def as_dict(self) -> Dict[str, str]:
        return {
            "name": self.name,
            "institution": self.institution,
            "startDisplay": self.start_display,
            "endDisplay": self.end_display,
        }


@dataclass(frozen=True, slots=True)
class MonthOption:
    month_key: str
    label: str
    count: int


@dataclass(frozen=True, slots=True)
class ActivitySummary:
    total_records: int
    earliest_start: Optional[date]
    latest_end: Optional[date]

    def as_dict(self) -> Dict[str, object]:
        return {
            "totalRecords": self.total_records,
            "earliestStart": self.earliest_start.isoformat() if self.earliest_start else None,
            "latestEnd": self.latest_end.isoformat() if self.latest_end else None,
        }


@dataclass(frozen=True, slots=True)
class ActivityReport:
    reference_date: date
    window: TemporalWindow
    monthly: Tuple[MonthlyCount, ...]
    institutions: Tuple[DistributionRow, ...]
    summary: ActivitySummary
    sample_month: Optional[str] = None
    samples: Tuple[SampleRow, ...] = field(default_factory=tuple)
    sample_active_count: int = 0

    def as_dict(self) -> Dict[str, object]:
        return {
            "referenceDate": self.reference_date.isoformat(),
            "window": {
                "kind": self.window.kind.value,
                "startMonth": self.window.start_month,
                "endMonth": self.window.end_month,
            },
            "monthly": [row.as_dict() for row in self.monthly],
            "institutions": [row.as_dict() for row in self.institutions],
            "summary": self.summary.as_dict(),
            "sampleMonth": self.sample_month,
            "sampleActiveCount": self.sample_active_count,
            "samples": [row.as_dict() for row in self.samples],
        }

    def month_counts(self) -> List[Tuple[str, int]]:
        return [(row.month_key, row.active_count) for row in self.monthly]
