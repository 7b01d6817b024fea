import pytest
from datetime import date, datetime, time

from utils.time import clock_minutes, combine, parse_clock, parse_day


class TestParseClock:

    def test_midnight(self):
        assert parse_clock("00:00") == time(0, 0)

    def test_last_minute_of_day(self):
        assert parse_clock("23:59") == time(23, 59)

    def test_afternoon(self):
        assert parse_clock("14:30") == time(14, 30)

    @pytest.mark.parametrize("value", ["24:00", "12:60", "noon", "", "12-30"])
    def test_invalid_values_raise(self, value):
        with pytest.raises(ValueError):
            parse_clock(value)


class TestClockMinutes:

    def test_midnight_is_zero(self):
        assert clock_minutes("00:00") == 0

    def test_minutes_since_midnight(self):
        assert clock_minutes("08:30") == 510

    def test_end_of_day(self):
        assert clock_minutes("23:59") == 1439


class TestParseDay:

    def test_iso_date(self):
        assert parse_day("2024-02-29") == date(2024, 2, 29)

    def test_invalid_date_raises(self):
        with pytest.raises(ValueError):
            parse_day("2023-02-29")

    def test_non_iso_format_raises(self):
        with pytest.raises(ValueError):
            parse_day("29.02.2024")


class TestCombine:

    def test_combines_literally(self):
        assert combine("2024-03-04", "22:15") == datetime(2024, 3, 4, 22, 15)

    def test_early_time_stays_on_same_date(self):
        assert combine("2024-03-04", "07:00") == datetime(2024, 3, 4, 7, 0)
