"""Tests for the strftime-style date formatter"""

import pytest
from datetime import datetime, timedelta, timezone

from glog_module.formatters import DateFormatter, format_datetime
from glog_module.formatters.date_formatter import DIRECTIVES

# November 17th, 2009 :: 20:34:58.651387 UTC
THEN = datetime(2009, 11, 17, 20, 34, 58, 651387, tzinfo=timezone.utc)


class TestDirectives:
    """Test every directive against a fixed reference time."""

    @pytest.mark.parametrize("fmt,expected", [
        ("%a", "Tue"),
        ("%A", "Tuesday"),
        ("%w", "2"),
        ("%d", "17"),
        ("%b", "Nov"),
        ("%B", "November"),
        ("%m", "11"),
        ("%y", "09"),
        ("%Y", "2009"),
        ("%H", "20"),
        ("%I", "08"),
        ("%p", "PM"),
        ("%M", "34"),
        ("%S", "58"),
        ("%f", "651387"),
        ("%z", "+0000"),
        ("%Z", "UTC"),
        ("%j", "321"),
        ("%W", "47"),
    ])
    def test_reference_time(self, fmt, expected):
        assert format_datetime(THEN, fmt) == expected

    def test_directive_table_is_read_only(self):
        with pytest.raises(TypeError):
            DIRECTIVES["q"] = lambda ts: "q"

    def test_full_report(self):
        fmt = (
            "Week(Short): %a, Week(Long): %A, Week(Num): %w\n"
            "Day of month: %d, Month(Short): %b, Month(Long): %B, Month(Num): %m\n"
            "Year(Short): %y, Year(Long): %Y\n"
            "Hour(24h): %H, Hour(12h): %I, AM/PM: %p\n"
            "Minute: %M, Second: %S, Fraction: %f\n"
            "UTC Offset: %z, Timezone: %Z\n"
            "Day of the year: %j, Week of the year: %W\n"
        )
        expected = (
            "Week(Short): Tue, Week(Long): Tuesday, Week(Num): 2\n"
            "Day of month: 17, Month(Short): Nov, Month(Long): November, Month(Num): 11\n"
            "Year(Short): 09, Year(Long): 2009\n"
            "Hour(24h): 20, Hour(12h): 08, AM/PM: PM\n"
            "Minute: 34, Second: 58, Fraction: 651387\n"
            "UTC Offset: +0000, Timezone: UTC\n"
            "Day of the year: 321, Week of the year: 47\n"
        )
        assert format_datetime(THEN, fmt) == expected

    def test_same_output_twice(self):
        fmt = "%b %d %H:%M:%S.%f %z"
        assert format_datetime(THEN, fmt) == format_datetime(THEN, fmt)


class TestPadding:
    """Test width rules of individual directives."""

    def test_day_of_month_is_not_padded(self):
        assert format_datetime(datetime(2021, 3, 7), "%d") == "7"

    def test_month_is_padded(self):
        assert format_datetime(datetime(2021, 3, 7), "%m") == "03"

    def test_fraction_padded_to_six_digits(self):
        ts = datetime(2021, 3, 7, 1, 2, 3, 42)
        assert format_datetime(ts, "%f") == "000042"

    def test_fraction_zero(self):
        assert format_datetime(datetime(2021, 3, 7), "%f") == "000000"

    def test_time_fields_padded(self):
        ts = datetime(2021, 3, 7, 5, 4, 3)
        assert format_datetime(ts, "%H:%M:%S") == "05:04:03"

    def test_day_of_year_padded(self):
        assert format_datetime(datetime(2021, 1, 1), "%j") == "001"
        assert format_datetime(datetime(2021, 2, 10), "%j") == "041"

    def test_iso_week(self):
        # 2010-01-01 belongs to ISO week 53 of 2009
        assert format_datetime(datetime(2010, 1, 1), "%W") == "53"
        assert format_datetime(datetime(2010, 1, 4), "%W") == "01"

    def test_short_year_is_last_two_characters(self):
        assert format_datetime(datetime(1999, 1, 1), "%y") == "99"
        assert format_datetime(datetime(999, 1, 1), "%y") == "99"
        assert format_datetime(datetime(5, 1, 1), "%y") == "5"

    def test_weekday_number_sunday_is_zero(self):
        sunday = datetime(2009, 11, 15)
        saturday = datetime(2009, 11, 21)
        assert format_datetime(sunday, "%w %a") == "0 Sun"
        assert format_datetime(saturday, "%w %a") == "6 Sat"


class TestTwelveHourClock:
    """Test %I and %p around midnight and noon."""

    @pytest.mark.parametrize("hour,expected", [
        (0, "12 AM"),
        (1, "01 AM"),
        (11, "11 AM"),
        (12, "12 PM"),
        (13, "01 PM"),
        (23, "11 PM"),
    ])
    def test_hours(self, hour, expected):
        assert format_datetime(datetime(2021, 3, 7, hour), "%I %p") == expected


class TestTimeZones:
    """Test offset and zone rendering."""

    def test_positive_offset(self):
        tz = timezone(timedelta(hours=1), "CET")
        ts = datetime(2021, 3, 7, 12, tzinfo=tz)
        assert format_datetime(ts, "%z %Z") == "+0100 CET"

    def test_negative_offset_with_minutes(self):
        tz = timezone(-timedelta(hours=3, minutes=30), "NST")
        ts = datetime(2021, 3, 7, 12, tzinfo=tz)
        assert format_datetime(ts, "%z") == "-0330"

    def test_large_offset(self):
        tz = timezone(timedelta(hours=13, minutes=45))
        ts = datetime(2021, 3, 7, 12, tzinfo=tz)
        assert format_datetime(ts, "%z") == "+1345"

    def test_no_conversion_to_utc(self):
        tz = timezone(timedelta(hours=9), "JST")
        ts = datetime(2021, 3, 7, 1, 30, tzinfo=tz)
        assert format_datetime(ts, "%H:%M %d") == "01:30 7"

    def test_naive_timestamp(self):
        assert format_datetime(datetime(2021, 3, 7), "[%z][%Z]") == "[+0000][]"


class TestScanning:
    """Test literal passthrough rules."""

    def test_literal_text(self):
        assert format_datetime(THEN, "no directives here") == "no directives here"

    def test_empty_format(self):
        assert format_datetime(THEN, "") == ""

    def test_unknown_directive_is_literal(self):
        assert format_datetime(THEN, "%Q %Y") == "%Q 2009"

    def test_trailing_percent_is_literal(self):
        assert format_datetime(THEN, "%Y%") == "2009%"
        assert format_datetime(THEN, "%") == "%"

    def test_double_percent_is_not_an_escape(self):
        assert format_datetime(THEN, "%%") == "%%"
        assert format_datetime(THEN, "%%d") == "%17"


class TestDateFormatter:
    """Test the reusable formatter object."""

    def test_format(self):
        formatter = DateFormatter("%b %d %H:%M:%S")
        assert formatter.format(THEN) == "Nov 17 20:34:58"

    def test_callable(self):
        formatter = DateFormatter("%Y-%m")
        assert formatter(THEN) == "2009-11"

    def test_repr(self):
        assert "%Y" in repr(DateFormatter("%Y"))
