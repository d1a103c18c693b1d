"""Monthly active-internship aggregation."""
from .aggregation import (
    ActivityAggregator,
    institution_distribution,
    month_options,
    monthly_series,
    sample_rows_for_month,
    summarize,
)
from .dates import effective_end, format_display, parse_date, require_date, resolve_now
from .demo import build_demo_records
from .excel import report_to_json, write_monthly_csv, write_report_workbook
from .exceptions import ActivityError, InvalidDate
from .filters import (
    DataLoaded,
    FilterSelection,
    Reset,
    SelectLevel,
    SelectPeriodEnd,
    SelectPeriodStart,
    SelectSemester,
    SelectYear,
    apply_selection,
    filter_records,
    reconcile,
    resolve_window,
)
from .levels import LevelClassifier, LevelVocabulary, load_vocabulary, sort_levels
from .models import (
    ActivityReport,
    DistributionRow,
    InternshipRecord,
    MonthlyCount,
    ParseErr,
    ParseOk,
    SampleRow,
    TemporalWindow,
    WindowKind,
)
from .months import enumerate_months, month_bounds, month_key
from .overlap import is_active, is_active_in_month

__all__ = [
    "ActivityAggregator",
    "ActivityError",
    "ActivityReport",
    "DataLoaded",
    "DistributionRow",
    "FilterSelection",
    "InternshipRecord",
    "InvalidDate",
    "LevelClassifier",
    "LevelVocabulary",
    "MonthlyCount",
    "ParseErr",
    "ParseOk",
    "Reset",
    "SampleRow",
    "SelectLevel",
    "SelectPeriodEnd",
    "SelectPeriodStart",
    "SelectSemester",
    "SelectYear",
    "TemporalWindow",
    "WindowKind",
    "apply_selection",
    "build_demo_records",
    "effective_end",
    "enumerate_months",
    "filter_records",
    "format_display",
    "institution_distribution",
    "is_active",
    "is_active_in_month",
    "load_vocabulary",
    "month_bounds",
    "month_key",
    "month_options",
    "monthly_series",
    "parse_date",
    "reconcile",
    "report_to_json",
    "require_date",
    "resolve_now",
    "resolve_window",
    "sample_rows_for_month",
    "sort_levels",
    "summarize",
    "write_monthly_csv",
    "write_report_workbook",
]
