from datetime import date, datetime, timedelta, timezone

import pandas as pd
import pytest

from activity import InternshipRecord, InvalidDate, ParseErr, ParseOk
from activity.dates import effective_end, format_display, parse_date, require_date, resolve_now


def test_iso_string_is_returned_unchanged():
    assert parse_date("2024-03-15") == ParseOk(date(2024, 3, 15))


def test_iso_string_is_trimmed():
    assert parse_date("  2024-03-15 ") == ParseOk(date(2024, 3, 15))


def test_serial_number_uses_1899_12_30_epoch():
    assert parse_date(1) == ParseOk(date(1899, 12, 31))
    assert parse_date(45292) == ParseOk(date(2024, 1, 1))


def test_serial_number_drops_time_of_day():
    # 45292.75 is 2024-01-01 18:00
    assert parse_date(45292.75) == ParseOk(date(2024, 1, 1))


def test_datetime_objects_are_truncated_to_utc_date():
    assert parse_date(datetime(2024, 5, 1, 23, 59)) == ParseOk(date(2024, 5, 1))
    plus_seven = timezone(timedelta(hours=7))
    assert parse_date(datetime(2024, 5, 1, 3, 0, tzinfo=plus_seven)) == ParseOk(date(2024, 4, 30))
    assert parse_date(pd.Timestamp("2024-06-30")) == ParseOk(date(2024, 6, 30))


def test_free_text_goes_through_general_parser():
    assert parse_date("March 5, 2024") == ParseOk(date(2024, 3, 5))
    assert parse_date("2024/07/09") == ParseOk(date(2024, 7, 9))


def test_free_text_without_day_defaults_to_first():
    assert parse_date("March 2024") == ParseOk(date(2024, 3, 1))


@pytest.mark.parametrize("raw", [None, "", "   ", float("nan"), pd.NaT])
def test_blank_values_are_errors(raw):
    result = parse_date(raw)
    assert isinstance(result, ParseErr)
    assert result.reasons == ("empty value",)


def test_unparseable_text_reports_reasons():
    result = parse_date("not a date")
    assert isinstance(result, ParseErr)
    assert not result.ok
    assert result.reasons and result.reasons[0].startswith("text:")


def test_invalid_iso_date_reports_iso_reason():
    result = parse_date("2024-13-45")
    assert isinstance(result, ParseErr)
    assert any(reason.startswith("iso:") for reason in result.reasons)


def test_booleans_are_not_serial_dates():
    result = parse_date(True)
    assert isinstance(result, ParseErr)
    assert result.reasons == ("unsupported type bool",)


def test_require_date_raises_invalid_date():
    with pytest.raises(InvalidDate) as excinfo:
        require_date("garbage")
    assert excinfo.value.raw == "garbage"
    assert excinfo.value.reasons


def test_effective_end_uses_now_only_for_open_records():
    now = date(2024, 4, 5)
    closed = InternshipRecord(start=date(2024, 1, 1), end=date(2024, 2, 1))
    ongoing = InternshipRecord(start=date(2024, 1, 1))
    assert effective_end(closed, now) == date(2024, 2, 1)
    assert effective_end(ongoing, now) == now
    assert ongoing.is_open and not closed.is_open


def test_resolve_now_accepts_explicit_values():
    assert resolve_now("2024-04-01") == date(2024, 4, 1)
    assert resolve_now(date(2023, 1, 2)) == date(2023, 1, 2)
    assert isinstance(resolve_now(), date)


def test_format_display():
    assert format_display(date(2024, 3, 7)) == "07/03/2024"
    assert format_display(None) == "-"
