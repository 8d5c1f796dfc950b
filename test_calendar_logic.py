"""Tests for the pure date helpers."""

from datetime import date, datetime, timedelta

import pytest

from calendar_logic import (
    ENGLISH,
    MONDAY,
    SUNDAY,
    FormatError,
    NameTable,
    add_months,
    format_day_label,
    format_month_title,
    format_short,
    is_same_day,
    is_same_month,
    leading_offset,
    next_month,
    parse_date,
    prev_month,
    visible_days,
    weekday_headers,
)


def test_leading_offset_sunday_first_is_zero() -> None:
    assert leading_offset(date(2025, 6, 1)) == 0  # Sunday


def test_leading_offset_monday_first_steps_back_one_day() -> None:
    assert leading_offset(date(2025, 9, 1)) == 1  # Monday


def test_leading_offset_saturday_first_is_six() -> None:
    assert leading_offset(date(2025, 2, 1)) == 6  # Saturday


def test_leading_offset_april_2025() -> None:
    assert leading_offset(date(2025, 4, 1)) == 2  # Tuesday


def test_leading_offset_monday_week_start() -> None:
    assert leading_offset(date(2025, 9, 1), MONDAY) == 0
    assert leading_offset(date(2025, 6, 1), MONDAY) == 6


@pytest.mark.parametrize("year", [1999, 2024, 2025, 2100])
def test_visible_days_invariants(year: int) -> None:
    for month in range(1, 13):
        grid = visible_days(year, month)
        assert len(grid) == 42
        assert grid[0].weekday() == SUNDAY
        for a, b in zip(grid, grid[1:]):
            assert (b - a).days == 1
        in_month = [i for i, d in enumerate(grid) if d.month == month]
        first, last = in_month[0], in_month[-1]
        assert in_month == list(range(first, last + 1))
        assert grid[first].day == 1
        assert (grid[last] + timedelta(days=1)).day == 1


def test_visible_days_april_2025() -> None:
    grid = visible_days(2025, 4)
    assert grid[0] == date(2025, 3, 30)
    assert grid[2] == date(2025, 4, 1)
    assert grid[41] == date(2025, 5, 10)


def test_visible_days_february_starting_sunday_fills_six_rows() -> None:
    # February 2015: 1st is a Sunday and the month spans exactly 4 rows
    grid = visible_days(2015, 2)
    assert grid[0] == date(2015, 2, 1)
    assert grid[27] == date(2015, 2, 28)
    assert grid[41] == date(2015, 3, 14)


def test_visible_days_monday_start() -> None:
    grid = visible_days(2025, 4, MONDAY)
    assert grid[0] == date(2025, 3, 31)
    assert grid[0].weekday() == MONDAY


def test_weekday_headers() -> None:
    assert weekday_headers() == ["Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat"]
    assert weekday_headers(ENGLISH, MONDAY)[0] == "Mon"


def test_parse_date_accepts_short_and_padded_day() -> None:
    assert parse_date("2.04.2025") == date(2025, 4, 2)
    assert parse_date("02.04.2025") == date(2025, 4, 2)
    assert parse_date(" 31.12.1999 ") == date(1999, 12, 31)


@pytest.mark.parametrize("text", [
    "", "2025-04-02", "2.4.2025", "2.04.25", "31.04.2025", "30.02.2024",
    "1.13.2025", "0.01.2025", "April 2, 2025", "2.04.2025x",
])
def test_parse_date_rejects(text: str) -> None:
    with pytest.raises(FormatError):
        parse_date(text)


def test_format_error_is_value_error() -> None:
    with pytest.raises(ValueError):
        parse_date("nope")


def test_format_short_round_trip() -> None:
    for d in (date(2025, 4, 2), date(2024, 2, 29), date(1, 1, 1), date(9999, 12, 31)):
        assert parse_date(format_short(d)) == d
    assert format_short(date(2025, 4, 2)) == "02.04.2025"


def test_format_day_label() -> None:
    assert format_day_label(date(2025, 4, 7)) == "07"
    assert format_day_label(date(2025, 4, 21)) == "21"
    assert format_day_label(date(2025, 4, 1)) == "April  01"


def test_format_uses_injected_names() -> None:
    german = NameTable(
        months=("Januar", "Februar", "März", "April", "Mai", "Juni", "Juli",
                "August", "September", "Oktober", "November", "Dezember"),
        day_abbr=("Mo", "Di", "Mi", "Do", "Fr", "Sa", "So"),
    )
    assert format_month_title(date(2025, 3, 9), german) == "März 2025"
    assert format_day_label(date(2025, 5, 1), german) == "Mai  01"
    assert weekday_headers(german)[0] == "So"


def test_name_table_rejects_wrong_lengths() -> None:
    with pytest.raises(ValueError):
        NameTable(months=("Jan",), day_abbr=ENGLISH.day_abbr)


def test_format_month_title() -> None:
    assert format_month_title(date(2025, 4, 15)) == "April 2025"


def test_is_same_day_value_based() -> None:
    a = date(2025, 4, 2)
    b = date(2025, 4, 2)
    assert is_same_day(a, a)
    assert is_same_day(a, b) and is_same_day(b, a)
    assert is_same_day(a, datetime(2025, 4, 2, 15, 30))
    assert not is_same_day(a, date(2025, 4, 3))


def test_is_same_month() -> None:
    assert is_same_month(date(2025, 4, 1), date(2025, 4, 30))
    assert not is_same_month(date(2025, 4, 1), date(2024, 4, 1))


def test_month_stepping() -> None:
    assert prev_month(2025, 1) == (2024, 12)
    assert next_month(2025, 12) == (2026, 1)
    assert add_months(date(2025, 1, 31), 1) == date(2025, 2, 1)
    assert add_months(date(2025, 1, 15), -13) == date(2023, 12, 1)
    assert add_months(date(2025, 1, 15), 0) == date(2025, 1, 1)


def test_name_table_from_locale() -> None:
    names = NameTable.from_locale()
    assert len(names.months) == 12
    assert len(names.day_abbr) == 7
    assert names.month_name(4) == names.months[3]
