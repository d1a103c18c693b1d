from __future__ import annotations

import json
from pathlib import Path

import pandas as pd

from .constants import MONTHLY_CSV_HEADERS
from .models import ActivityReport


SHEET_NAMES = {
    "monthly": "Monthly",
    "institutions": "Institutions",
    "samples": "Samples",
    "summary": "Summary",
}


def monthly_frame(report: ActivityReport) -> pd.DataFrame:
    rows = [(row.month_key, row.active_count) for row in report.monthly]
    return pd.DataFrame(rows, columns=list(MONTHLY_CSV_HEADERS))


def institution_frame(report: ActivityReport) -> pd.DataFrame:
    rows = [(row.name, row.count, round(row.percentage, 2)) for row in report.institutions]
    return pd.DataFrame(rows, columns=["Institusi", "Jumlah", "Persentase"])


def sample_frame(report: ActivityReport) -> pd.DataFrame:
    rows = [(row.name, row.institution, row.start_display, row.end_display) for row in report.samples]
    return pd.DataFrame(rows, columns=["Nama", "Instansi", "Mulai", "Selesai"])


def summary_frame(report: ActivityReport) -> pd.DataFrame:
    summary = report.summary
    rows = [
        ("Reference Date", report.reference_date.isoformat()),
        ("Window", report.window.kind.value),
        ("Window Start", report.window.start_month or ""),
        ("Window End", report.window.end_month or ""),
        ("Total Records", summary.total_records),
        ("Earliest Start", summary.earliest_start.isoformat() if summary.earliest_start else ""),
        ("Latest End", summary.latest_end.isoformat() if summary.latest_end else ""),
    ]
    if report.sample_month:
        rows.append(("Sample Month", report.sample_month))
        rows.append(("Sample Active Count", report.sample_active_count))
    return pd.DataFrame(rows, columns=["Field", "Value"])


def write_monthly_csv(report: ActivityReport, output_path: Path) -> None:
    output_path.parent.mkdir(parents=True, exist_ok=True)
    monthly_frame(report).to_csv(output_path, index=False, encoding="utf-8")


def write_report_workbook(report: ActivityReport, output_path: Path) -> None:
    output_path.parent.mkdir(parents=True, exist_ok=True)
    with pd.ExcelWriter(output_path, engine="xlsxwriter") as writer:
        monthly_frame(report).to_excel(writer, sheet_name=SHEET_NAMES["monthly"], index=False)
        institution_frame(report).to_excel(writer, sheet_name=SHEET_NAMES["institutions"], index=False)
        sample_frame(report).to_excel(writer, sheet_name=SHEET_NAMES["samples"], index=False)
        summary_frame(report).to_excel(writer, sheet_name=SHEET_NAMES["summary"], index=False)


def report_to_json(report: ActivityReport) -> str:
    return json.dumps(report.as_dict(), indent=2)
