"""
Formatters module

Date rendering and layout formatting for log lines.
"""

from glog_module.formatters.base_formatter import BaseFormatter
from glog_module.formatters.date_formatter import DateFormatter, format_datetime
from glog_module.formatters.layout_formatter import LayoutFormatter, parse_layout, render

__all__ = [
    "BaseFormatter",
    "DateFormatter",
    "format_datetime",
    "LayoutFormatter",
    "parse_layout",
    "render",
]
