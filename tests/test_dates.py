from datetime import date, datetime, timezone, timedelta

from tripglobe.editor.dates import (
    format_date_label,
    generate_date_range,
    parse_day_key,
    trip_duration_text,
)


def test_single_day_range():
    assert generate_date_range("2024-12-22", "2024-12-22") == ["2024-12-22"]


def test_range_is_inclusive_and_zero_padded():
    assert generate_date_range(date(2024, 2, 27), date(2024, 3, 2)) == [
        "2024-02-27", "2024-02-28", "2024-02-29", "2024-03-01", "2024-03-02",
    ]


def test_range_crosses_year_boundary():
    days = generate_date_range("2024-12-30", "2025-01-02")
    assert days == ["2024-12-30", "2024-12-31", "2025-01-01", "2025-01-02"]


def test_inverted_or_missing_bounds_give_empty_range():
    assert generate_date_range("2024-12-24", "2024-12-22") == []
    assert generate_date_range(None, "2024-12-22") == []
    assert generate_date_range("2024-12-22", None) == []
    assert generate_date_range("", "") == []
    assert generate_date_range("not-a-date", "2024-12-22") == []


def test_time_of_day_and_offset_are_ignored():
    late_pacific = datetime(2024, 12, 22, 23, 30, tzinfo=timezone(timedelta(hours=-8)))
    assert generate_date_range(late_pacific, "2024-12-23T01:00:00+09:00") == ["2024-12-22", "2024-12-23"]
    assert parse_day_key("2024-12-22T23:59:59Z") == date(2024, 12, 22)


def test_format_date_label():
    assert format_date_label("2024-12-22") == "Sunday, December 22"
    assert format_date_label("someday") == "someday"


def test_trip_duration_text():
    assert trip_duration_text("2024-12-22", "2024-12-22") == "1 day"
    assert trip_duration_text("2024-12-22", "2024-12-24") == "3 days"
    assert trip_duration_text("2024-12-24", "2024-12-22") == "1 day"
    assert trip_duration_text(None, "2024-12-22") == "—"
