from datetime import date, datetime

import pandas as pd
import pytest

from activity import InternshipRecord
from intake import IngestionError, RowRejection, read_records, row_to_record, rows_to_records


def test_row_with_indonesian_headers():
    row = {
        "Nama Mahasiswa": "  Budi ",
        "Instansi": "Universitas Indonesia",
        "Jenjang": "S1",
        "Tanggal Mulai": "2024-02-15",
        "Tanggal Selesai": 45382,
    }
    record = row_to_record(row)
    assert record == InternshipRecord(
        start=date(2024, 2, 15),
        end=date(2024, 3, 31),
        name="Budi",
        institution="Universitas Indonesia",
        level="S1",
    )


def test_first_non_blank_alias_wins():
    row = {"Tanggal_Mulai": "", "Mulai": "2024-01-03", "Nama": None, "Student Name": "Ayu"}
    record = row_to_record(row)
    assert record.start == date(2024, 1, 3)
    assert record.name == "Ayu"
    assert record.end is None


def test_missing_and_invalid_dates_are_rejections():
    missing = row_to_record({"Nama": "x"}, row_index=4)
    assert missing == RowRejection(4, ["Missing start date"])
    invalid = row_to_record({"Start Date": "soon", "End Date": "later"}, row_index=1)
    assert isinstance(invalid, RowRejection)
    assert invalid.reasons[0].startswith("Invalid start date: soon")
    assert invalid.reasons[1].startswith("Invalid end date: later")


def test_inverted_interval_is_swapped():
    record = row_to_record({"Start Date": "2024-05-01", "End Date": "2024-03-01"})
    assert (record.start, record.end) == (date(2024, 3, 1), date(2024, 5, 1))


def test_rows_to_records_drops_invalid_rows(caplog):
    rows = [
        {"Start Date": "2024-01-01"},
        {"Start Date": "bogus"},
        {"Start Date": datetime(2024, 2, 1, 8, 30)},
    ]
    result = rows_to_records(rows)
    assert [r.start for r in result.records] == [date(2024, 1, 1), date(2024, 2, 1)]
    assert [r.row_index for r in result.rejected] == [1]
    assert len(result.records) + len(result.rejected) == 3
    assert "Dropping row 1" in caplog.text


def test_no_valid_rows_is_an_error():
    with pytest.raises(IngestionError, match="No valid records"):
        rows_to_records([{"Nama": "x"}])


def test_read_csv(tmp_path):
    path = tmp_path / "interns.csv"
    path.write_text(
        "Nama,Instansi,Jenjang,Tanggal Mulai,Tanggal Selesai\n"
        "Ayu,SMKN 1,SMK,2024-01-01,2024-03-31\n"
        "Budi,UNPAD,Universitas,2024-02-15,\n"
        "Citra,,,,\n",
        encoding="utf-8",
    )
    result = read_records(path)
    assert [r.name for r in result.records] == ["Ayu", "Budi"]
    assert result.records[1].end is None
    assert result.records[1].institution == "UNPAD"
    assert len(result.rejected) == 1


def test_read_excel(tmp_path):
    path = tmp_path / "interns.xlsx"
    frame = pd.DataFrame(
        {
            "Nama": ["Ayu", "Budi"],
            "Tanggal_Mulai": [pd.Timestamp("2024-01-01"), pd.Timestamp("2024-02-15")],
            "Tanggal_Selesai": [pd.Timestamp("2024-03-31"), pd.NaT],
        }
    )
    frame.to_excel(path, index=False)
    result = read_records(path)
    assert [(r.start, r.end) for r in result.records] == [
        (date(2024, 1, 1), date(2024, 3, 31)),
        (date(2024, 2, 15), None),
    ]


def test_unsupported_and_missing_files(tmp_path):
    with pytest.raises(IngestionError, match="does not exist"):
        read_records(tmp_path / "nope.xlsx")
    other = tmp_path / "notes.txt"
    other.write_text("hello", encoding="utf-8")
    with pytest.raises(IngestionError, match="Unsupported file type"):
        read_records(other)


def test_corrupt_workbook_is_an_ingestion_error(tmp_path):
    path = tmp_path / "broken.xlsx"
    path.write_bytes(b"PK\x03\x04" + b"garbage" * 20)
    with pytest.raises(IngestionError, match="Failed to parse broken.xlsx"):
        read_records(path)
