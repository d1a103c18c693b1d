#!/usr/bin/env python3
"""Count active internships per month from a spreadsheet of internship records."""
from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Sequence, Tuple

from activity import (
    ActivityAggregator,
    ActivityError,
    ActivityReport,
    FilterSelection,
    LevelClassifier,
    SelectLevel,
    SelectPeriodEnd,
    SelectPeriodStart,
    SelectSemester,
    SelectYear,
    apply_selection,
    build_demo_records,
    load_vocabulary,
    reconcile,
    report_to_json,
    resolve_now,
    write_monthly_csv,
    write_report_workbook,
)
from activity.months import parse_month_key
from intake import read_records

LOG_FORMAT = "%(asctime)s - %(name)s:%(lineno)d - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

logger = logging.getLogger("internship_tracker")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Aggregate internship records into monthly active counts, institution shares and samples.",
    )
    parser.add_argument("input", nargs="?", type=Path, help="Excel (.xlsx/.xls) or CSV file with internship rows")
    parser.add_argument("--demo", action="store_true", help="Use the built-in demo records instead of a file.")
    parser.add_argument("--sheet", default=0, help="Worksheet name or index for Excel input (default: first sheet).")
    parser.add_argument("--level", help="Only count records classified under this level (e.g. SMK, Universitas).")
    parser.add_argument("--year", type=int, help="Restrict the window to one calendar year.")
    parser.add_argument("--semester", help="Restrict the window to a semester, written YYYY-S1 or YYYY-S2.")
    parser.add_argument("--start-month", dest="start_month", help="First month (YYYY-MM) of a custom period.")
    parser.add_argument("--end-month", dest="end_month", help="Last month (YYYY-MM) of a custom period.")
    parser.add_argument("--sample-month", dest="sample_month", help="List sample records active in this month (YYYY-MM).")
    parser.add_argument("--sample-limit", dest="sample_limit", type=int, default=10, help="Maximum sample rows (default: 10).")
    parser.add_argument("--now", help="Reference date for ongoing internships (default: today, UTC).")
    parser.add_argument("--vocabulary", type=Path, help="Level keyword vocabulary file (default: bundled levels.yaml).")
    parser.add_argument("--workers", type=int, default=None, help="Count months in a thread pool of this size.")
    parser.add_argument("--csv", type=Path, help="Write the monthly series to this CSV file.")
    parser.add_argument("--output", type=Path, help="Write the full report to this Excel workbook (*.xlsx).")
    parser.add_argument("--json", action="store_true", help="Print the report as JSON instead of a text table.")
    parser.add_argument("--list-levels", action="store_true", help="Print the available level labels and exit.")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity (default: WARNING).",
    )
    return parser


def configure_logging(level: str) -> None:
    logging.basicConfig(level=getattr(logging, level), format=LOG_FORMAT, datefmt=DATE_FORMAT)


def parse_semester(value: str) -> Tuple[int, int]:
    year_part, _, semester_part = value.strip().upper().partition("-S")
    if not year_part.isdigit() or semester_part not in {"1", "2"}:
        raise ActivityError(f"Invalid semester {value!r}; expected YYYY-S1 or YYYY-S2")
    return int(year_part), int(semester_part)


def build_selection(args: argparse.Namespace) -> FilterSelection:
    selection = FilterSelection()
    if args.level:
        selection = apply_selection(selection, SelectLevel(args.level))
    if args.year is not None:
        selection = apply_selection(selection, SelectYear(args.year))
    if args.semester:
        year, semester = parse_semester(args.semester)
        selection = apply_selection(selection, SelectSemester(year, semester))
    try:
        if args.start_month:
            selection = apply_selection(selection, SelectPeriodStart(args.start_month))
        if args.end_month:
            selection = apply_selection(selection, SelectPeriodEnd(args.end_month))
    except ValueError as exc:
        raise ActivityError(str(exc)) from exc
    return selection


def format_report(report: ActivityReport) -> List[str]:
    lines: List[str] = []
    window = report.window
    summary = report.summary
    lines.append(f"Reference date: {report.reference_date.isoformat()}")
    if window.is_empty:
        lines.append("No records match the current filters.")
        return lines
    lines.append(f"Window ({window.kind.value}): {window.start_month} .. {window.end_month}")
    lines.append(f"Total records: {summary.total_records}")
    lines.append("")
    lines.append("Month     Active")
    for row in report.monthly:
        lines.append(f"{row.month_key}   {row.active_count:>6}")
    if report.institutions:
        lines.append("")
        lines.append("Institution distribution:")
        for row in report.institutions:
            lines.append(f" - {row.name}: {row.count} ({row.percentage:.1f}%)")
    if report.sample_month:
        lines.append("")
        lines.append(
            f"Sample records for {report.sample_month} "
            f"(showing {len(report.samples)} of {report.sample_active_count}):"
        )
        for row in report.samples:
            lines.append(f" - {row.name or '-'} | {row.institution} | {row.start_display} -> {row.end_display}")
    return lines


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level)

    if args.demo and args.input:
        parser.error("Do not supply an input file when using --demo.")
    if not args.demo and not args.input:
        parser.error("Provide an input file or use --demo.")
    if args.year is not None and (args.semester or args.start_month or args.end_month):
        parser.error("--year cannot be combined with --semester or a custom period.")

    try:
        if args.demo:
            records = build_demo_records()
        else:
            sheet = int(args.sheet) if str(args.sheet).isdigit() else args.sheet
            records = read_records(args.input, sheet_name=sheet).records

        classifier = LevelClassifier(load_vocabulary(args.vocabulary))
        aggregator = ActivityAggregator(records, classifier, workers=args.workers)

        if args.list_levels:
            for label in aggregator.level_options():
                print(label)
            return 0

        now = resolve_now(args.now)
        requested = build_selection(args)
        selection = reconcile(requested, aggregator.records, classifier, now)
        if selection != requested:
            logger.warning("Selection adjusted to the available data: %s", selection)

        sample_month = None
        if args.sample_month:
            try:
                year, month = parse_month_key(args.sample_month)
            except ValueError as exc:
                raise ActivityError(str(exc)) from exc
            sample_month = f"{year:04d}-{month:02d}"

        report = aggregator.report(selection, now, sample_month=sample_month, sample_limit=args.sample_limit)

        if args.csv:
            write_monthly_csv(report, args.csv)
            logger.info("Wrote monthly CSV to %s", args.csv)
        if args.output:
            write_report_workbook(report, args.output)
            logger.info("Wrote report workbook to %s", args.output)

        if args.json:
            print(report_to_json(report))
        else:
            print("\n".join(format_report(report)))
        return 0
    except ActivityError as exc:
        print(json.dumps({"error": str(exc)}), file=sys.stderr)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
