"""
Base formatter interface

A formatter turns one LogEntry into the exact text handed to handlers.
The Logger asks it up front whether the calling function is needed, so
the stack is only walked for layouts that print it.
"""

from abc import ABC, abstractmethod
from glog_module.core.log_entry import LogEntry


class BaseFormatter(ABC):
    """Abstract base class for line formatters."""

    @property
    def needs_caller(self) -> bool:
        """True if format() reads entry.function_name."""
        return False

    @abstractmethod
    def format(self, entry: LogEntry) -> str:
        """
        Format a log entry into a line.

        Implementations must not raise on a malformed template; use
        format_error() to build the replacement line.
        """
        pass

    def format_error(self, entry: LogEntry, error: Exception) -> str:
        """Line emitted in place of one the template could not produce."""
        return f"[FORMAT ERROR: {error}] {entry.message}"

    def __call__(self, entry: LogEntry) -> str:
        """Allow formatters to be callable."""
        return self.format(entry)
