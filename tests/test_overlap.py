from datetime import date

from activity import InternshipRecord
from activity.months import enumerate_months
from activity.overlap import active_records, has_started, is_active, is_active_in_month


def _active_months(record, now, months):
    return [key for key in months if is_active_in_month(record, key, now)]


def test_single_day_record_is_active_in_exactly_one_month():
    record = InternshipRecord(start=date(2024, 3, 15), end=date(2024, 3, 15))
    months = enumerate_months("2023-12", "2024-06")
    assert _active_months(record, date(2024, 6, 1), months) == ["2024-03"]


def test_open_record_runs_through_now():
    record = InternshipRecord(start=date(2024, 1, 10), end=None)
    months = enumerate_months("2023-12", "2024-06")
    assert _active_months(record, date(2024, 4, 5), months) == ["2024-01", "2024-02", "2024-03", "2024-04"]


def test_boundaries_are_inclusive():
    starts_last_day = InternshipRecord(start=date(2024, 1, 31), end=date(2024, 2, 10))
    ends_first_day = InternshipRecord(start=date(2023, 12, 10), end=date(2024, 1, 1))
    now = date(2024, 6, 1)
    assert is_active_in_month(starts_last_day, "2024-01", now)
    assert is_active_in_month(ends_first_day, "2024-01", now)
    assert not is_active_in_month(ends_first_day, "2024-02", now)


def test_is_active_against_arbitrary_window():
    record = InternshipRecord(start=date(2024, 5, 1), end=date(2024, 5, 31))
    now = date(2024, 12, 1)
    assert is_active(record, date(2024, 1, 1), date(2024, 12, 31), now)
    assert not is_active(record, date(2024, 6, 1), date(2024, 12, 31), now)
    assert not is_active(record, date(2024, 1, 1), date(2024, 4, 30), now)


def test_active_records_keeps_input_order():
    a = InternshipRecord(start=date(2024, 2, 1), end=date(2024, 2, 20), name="a")
    b = InternshipRecord(start=date(2024, 1, 1), end=date(2024, 1, 20), name="b")
    c = InternshipRecord(start=date(2024, 1, 15), end=None, name="c")
    result = active_records([a, b, c], date(2024, 2, 1), date(2024, 2, 29), date(2024, 3, 1))
    assert [r.name for r in result] == ["a", "c"]


def test_has_started():
    now = date(2024, 4, 5)
    assert has_started(InternshipRecord(start=date(2024, 4, 5)), now)
    assert has_started(InternshipRecord(start=date(2024, 6, 10), end=date(2024, 7, 1)), now)
    assert not has_started(InternshipRecord(start=date(2024, 6, 10)), now)
