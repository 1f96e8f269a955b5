import calendar
from datetime import datetime

import pytest

from nldates.utils import (
    day_of_week,
    format_date,
    iter_days,
    now,
    set_day_of_week,
    shift,
    start_of_month,
    start_of_year,
    week_start_index,
)

# Wednesday
WEDNESDAY = datetime(2024, 1, 17, 10, 30, 15)


class TestShift:

    @pytest.mark.parametrize("count, unit, expected", [
        (30, "minute", datetime(2024, 1, 17, 11, 0, 15)),
        (-2, "hour", datetime(2024, 1, 17, 8, 30, 15)),
        (1, "day", datetime(2024, 1, 18, 10, 30, 15)),
        (2, "week", datetime(2024, 1, 31, 10, 30, 15)),
        (1, "month", datetime(2024, 2, 17, 10, 30, 15)),
        (-1, "year", datetime(2023, 1, 17, 10, 30, 15)),
    ])
    def test_units(self, count, unit, expected):
        assert shift(WEDNESDAY, count, unit) == expected

    def test_month_end_is_clamped(self):
        assert shift(datetime(2024, 1, 31), 1, "month") == datetime(2024, 2, 29)
        assert shift(datetime(2024, 2, 29), 1, "year") == datetime(2025, 2, 28)

    def test_invalid_unit(self):
        with pytest.raises(ValueError):
            shift(WEDNESDAY, 1, "fortnight")


class TestDayOfWeek:

    def test_sunday_is_zero(self):
        assert day_of_week(datetime(2024, 1, 14)) == 0
        assert day_of_week(WEDNESDAY) == 3
        assert day_of_week(datetime(2024, 1, 20)) == 6

    @pytest.mark.parametrize("index, day", [(0, 14), (1, 15), (3, 17), (5, 19), (6, 20)])
    def test_set_day_of_week_stays_in_the_week(self, index, day):
        assert set_day_of_week(WEDNESDAY, index) == WEDNESDAY.replace(day=day)

    def test_period_starts(self):
        assert start_of_month(WEDNESDAY) == datetime(2024, 1, 1)
        assert start_of_year(datetime(2024, 7, 4, 12)) == datetime(2024, 1, 1)

    def test_iter_days_is_inclusive(self):
        days = list(iter_days(datetime(2024, 2, 28, 9), datetime(2024, 3, 1, 8)))
        assert [d.day for d in days] == [28, 29, 1]


class TestWeekStart:

    def test_named_day(self):
        assert week_start_index("sunday") == 0
        assert week_start_index("monday") == 1
        assert week_start_index("Saturday") == 6

    def test_locale_default(self, monkeypatch):
        monkeypatch.setattr(calendar, "firstweekday", lambda: calendar.MONDAY)
        assert week_start_index("locale-default") == 1
        monkeypatch.setattr(calendar, "firstweekday", lambda: calendar.SUNDAY)
        assert week_start_index("locale-default") == 0


class TestFormatDate:

    @pytest.mark.parametrize("pattern, expected", [
        ("YYYY-MM-DD", "2024-01-17"),
        ("HH:mm", "10:30"),
        ("YYYY-MM-DD HH:mm:ss", "2024-01-17 10:30:15"),
        ("dddd, MMMM Do YYYY", "Wednesday, January 17th 2024"),
        ("ddd D MMM YY", "Wed 17 Jan 24"),
        ("[Week of] YYYY-MM-DD", "Week of 2024-01-17"),
        ("Q", "1"),
    ])
    def test_tokens(self, pattern, expected):
        assert format_date(WEDNESDAY, pattern) == expected

    @pytest.mark.parametrize("day, expected", [(1, "1st"), (2, "2nd"), (3, "3rd"), (11, "11th"), (22, "22nd")])
    def test_ordinals(self, day, expected):
        assert format_date(WEDNESDAY.replace(day=day), "Do") == expected

    def test_twelve_hour_clock(self):
        assert format_date(datetime(2024, 1, 17, 0, 5), "hh:mm A") == "12:05 AM"
        assert format_date(datetime(2024, 1, 17, 15, 5), "h A") == "3 PM"


def test_now_is_naive():
    assert now().tzinfo is None
