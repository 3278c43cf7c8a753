"""
Layout formatter with glog field codes

Formats log entries using a printf-style layout in which each field is
named by a four character code:

    %(t)  time, rendered with the date format string
    %(n)  logger name
    %(f)  calling function
    %(l)  level name
    %(m)  message

Anything after the code is an ordinary printf conversion, so
``%(n)20s`` right-aligns the logger name in 20 columns and ``%(l)-8s``
left-aligns the level.
"""

from __future__ import annotations

import re
from datetime import datetime
from functools import lru_cache
from typing import Any, Callable, Dict, List, Tuple

from glog_module.core.log_entry import LogEntry
from glog_module.core.log_level import level_name
from glog_module.formatters.base_formatter import BaseFormatter
from glog_module.formatters.date_formatter import format_datetime

FIELD_CODE_RE = re.compile(r"%\((t|n|f|l|m)\)")

FieldResolver = Callable[[LogEntry, str], Any]

FIELD_RESOLVERS: Dict[str, FieldResolver] = {
    "t": lambda entry, date_format: format_datetime(entry.timestamp, date_format),
    "n": lambda entry, date_format: entry.logger_name,
    "f": lambda entry, date_format: entry.function_name,
    "l": lambda entry, date_format: level_name(entry.level),
    "m": lambda entry, date_format: entry.message,
}


@lru_cache(maxsize=128)
def parse_layout(template: str) -> Tuple[str, Tuple[str, ...]]:
    """
    Split a layout into a printf template and its ordered field codes.

    Args:
        template: Layout string such as "%(n)20s | %(l)8s | %(m)s"

    Returns:
        (display_template, codes) where display_template has every field
        code reduced to a bare "%" and codes lists the field letters in
        the order they appear, e.g. ("%20s | %8s | %s", ("n", "l", "m"))
    """
    codes = tuple(match.group(1) for match in FIELD_CODE_RE.finditer(template))
    display = FIELD_CODE_RE.sub("%", template)
    return display, codes


class LayoutFormatter(BaseFormatter):
    """
    Format log entries with a glog layout string.

    Example:
        formatter = LayoutFormatter("%(t)s | %(n)20s | %(l)8s | %(m)s",
                                    date_format="%b %d %H:%M:%S")
        line = formatter.format(entry)
    """

    def __init__(self, template: str, date_format: str = "%b %d %H:%M:%S"):
        """
        Initialize layout formatter.

        Args:
            template: Layout string with %(t), %(n), %(f), %(l), %(m) codes
            date_format: Directive string used for %(t)
        """
        self.template = template
        self.date_format = date_format

    @property
    def needs_caller(self) -> bool:
        """True if the layout prints the calling function."""
        return "f" in parse_layout(self.template)[1]

    def resolve_fields(self, entry: LogEntry) -> List[Any]:
        """
        Resolve the value of every field code, in layout order.

        Args:
            entry: Log entry to read values from

        Returns:
            Positional arguments for the display template
        """
        _, codes = parse_layout(self.template)
        return [FIELD_RESOLVERS[code](entry, self.date_format) for code in codes]

    def format(self, entry: LogEntry) -> str:
        """
        Format log entry using the layout.

        Args:
            entry: Log entry to format

        Returns:
            Formatted line. A layout that printf cannot apply produces a
            "[FORMAT ERROR: ...]" line instead of raising.
        """
        display, _ = parse_layout(self.template)
        args = tuple(self.resolve_fields(entry))

        try:
            return display % args
        except (TypeError, ValueError, KeyError) as e:
            return self.format_error(entry, e)

    def __repr__(self) -> str:
        """String representation."""
        return f"LayoutFormatter(template={self.template!r}, date_format={self.date_format!r})"


def render(
    logger_name: str,
    timestamp: datetime,
    message: str,
    level: int,
    template: str,
    date_format: str,
    function_name: str = "unknown",
) -> str:
    """Render one line without building a LayoutFormatter first."""
    entry = LogEntry(
        level=level,
        message=message,
        timestamp=timestamp,
        logger_name=logger_name,
        function_name=function_name,
    )
    return LayoutFormatter(template, date_format).format(entry)
