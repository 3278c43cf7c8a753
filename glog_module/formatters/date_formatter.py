"""
strftime-style date formatter

Renders a timestamp through a directive table. Unlike time.strftime the
output does not depend on the locale, and a few directives keep their
historical glog widths:

    %a  weekday, short (Tue)            %A  weekday, full (Tuesday)
    %w  weekday number, Sunday=0 (2)    %d  day of month, unpadded (7)
    %b  month, short (Nov)              %B  month, full (November)
    %m  month number, 01-12             %y  year without century (09)
    %Y  year (2009)                     %H  hour, 00-23
    %I  hour, 01-12                     %p  AM/PM
    %M  minute, 00-59                   %S  second, 00-59
    %f  sub-second, at least 6 digits   %z  UTC offset (+0100)
    %Z  zone name (UTC)                 %j  day of year, 001-366
    %W  ISO week number, 01-53

Unknown directives and a trailing ``%`` are copied through literally.
"""

from datetime import datetime
from types import MappingProxyType
from typing import Callable, Mapping

WEEKDAY_NAMES = (
    "Monday", "Tuesday", "Wednesday", "Thursday",
    "Friday", "Saturday", "Sunday",
)

MONTH_NAMES = (
    "January", "February", "March", "April", "May", "June", "July",
    "August", "September", "October", "November", "December",
)


def _pad(value: int, width: int) -> str:
    """Left-pad with zeros to a minimum width, never truncating."""
    digits = str(value)
    if len(digits) >= width:
        return digits
    return "0" * (width - len(digits)) + digits


def _weekday(ts: datetime) -> str:
    return WEEKDAY_NAMES[ts.weekday()]


def _month(ts: datetime) -> str:
    return MONTH_NAMES[ts.month - 1]


def _weekday_number(ts: datetime) -> str:
    # datetime counts from Monday=0, glog from Sunday=0
    return str((ts.weekday() + 1) % 7)


def _short_year(ts: datetime) -> str:
    return str(ts.year)[-2:]


def _hour_12(ts: datetime) -> str:
    hour = ts.hour
    if hour > 12:
        hour -= 12
    elif hour == 0:
        hour = 12
    return _pad(hour, 2)


def _am_pm(ts: datetime) -> str:
    return "AM" if ts.hour < 12 else "PM"


def _utc_offset(ts: datetime) -> str:
    offset = ts.utcoffset()
    seconds = int(offset.total_seconds()) if offset is not None else 0

    sign = "+"
    if seconds < 0:
        sign = "-"
        seconds = -seconds

    hours, remainder = divmod(seconds, 3600)
    minutes = remainder // 60
    return sign + _pad(hours, 2) + _pad(minutes, 2)


def _zone_name(ts: datetime) -> str:
    return ts.tzname() or ""


def _day_of_year(ts: datetime) -> str:
    return _pad(ts.timetuple().tm_yday, 3)


def _iso_week(ts: datetime) -> str:
    return _pad(ts.isocalendar()[1], 2)


DirectiveFn = Callable[[datetime], str]

DIRECTIVES: Mapping[str, DirectiveFn] = MappingProxyType({
    "a": lambda ts: _weekday(ts)[:3],
    "A": _weekday,
    "w": _weekday_number,
    "d": lambda ts: str(ts.day),
    "b": lambda ts: _month(ts)[:3],
    "B": _month,
    "m": lambda ts: _pad(ts.month, 2),
    "y": _short_year,
    "Y": lambda ts: str(ts.year),
    "H": lambda ts: _pad(ts.hour, 2),
    "I": _hour_12,
    "p": _am_pm,
    "M": lambda ts: _pad(ts.minute, 2),
    "S": lambda ts: _pad(ts.second, 2),
    "f": lambda ts: _pad(ts.microsecond, 6),
    "z": _utc_offset,
    "Z": _zone_name,
    "j": _day_of_year,
    "W": _iso_week,
})


def format_datetime(timestamp: datetime, fmt: str) -> str:
    """
    Render a timestamp according to a directive format string.

    Args:
        timestamp: Point in time, rendered in its own zone
        fmt: Format string mixing literal text and %-directives

    Returns:
        Rendered date/time string
    """
    out = []
    i = 0
    length = len(fmt)
    while i < length:
        char = fmt[i]
        if char == "%" and i + 1 < length:
            directive = DIRECTIVES.get(fmt[i + 1])
            if directive is not None:
                out.append(directive(timestamp))
                i += 2
                continue
        out.append(char)
        i += 1
    return "".join(out)


class DateFormatter:
    """
    Reusable date formatter bound to one format string.

    Example:
        formatter = DateFormatter("%b %d %H:%M:%S")
        formatter.format(datetime.now().astimezone())   # 'Nov 7 20:34:58'
    """

    def __init__(self, fmt: str):
        self.fmt = fmt

    def format(self, timestamp: datetime) -> str:
        """Render timestamp with this formatter's format string."""
        return format_datetime(timestamp, self.fmt)

    def __call__(self, timestamp: datetime) -> str:
        """Allow date formatters to be callable."""
        return self.format(timestamp)

    def __repr__(self) -> str:
        """String representation."""
        return f"DateFormatter(fmt={self.fmt!r})"
