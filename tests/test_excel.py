import json
from datetime import date

import pandas as pd

from activity import ActivityAggregator, FilterSelection
from activity.excel import report_to_json, write_monthly_csv, write_report_workbook


def _report(records, now):
    return ActivityAggregator(records).report(FilterSelection(), now, sample_month="2024-02")


def test_monthly_csv(tmp_path, scenario_records, scenario_now):
    path = tmp_path / "out" / "monthly.csv"
    write_monthly_csv(_report(scenario_records, scenario_now), path)
    lines = path.read_text(encoding="utf-8").splitlines()
    assert lines == [
        "Bulan (YYYY-MM),Jumlah_Aktif",
        "2024-01,1",
        "2024-02,2",
        "2024-03,2",
        "2024-04,1",
    ]


def test_report_workbook(tmp_path, scenario_records, scenario_now):
    path = tmp_path / "report.xlsx"
    write_report_workbook(_report(scenario_records, scenario_now), path)
    sheets = pd.read_excel(path, sheet_name=None)
    assert list(sheets) == ["Monthly", "Institutions", "Samples", "Summary"]
    assert sheets["Monthly"]["Jumlah_Aktif"].tolist() == [1, 2, 2, 1]
    assert sheets["Institutions"]["Jumlah"].sum() == 2
    assert sheets["Samples"]["Nama"].tolist() == ["Ayu", "Budi"]


def test_report_json(scenario_records, scenario_now):
    payload = json.loads(report_to_json(_report(scenario_records, scenario_now)))
    assert payload["referenceDate"] == "2024-04-01"
    assert payload["sampleMonth"] == "2024-02"
    assert payload["samples"][1]["endDisplay"] == "-"
