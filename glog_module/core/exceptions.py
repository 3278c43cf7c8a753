"""Exceptions raised by the logging pipeline"""

from typing import Any


class GlogError(Exception):
    """Base class for all glog_module errors."""


class HandlerWriteError(GlogError):
    """
    A handler failed to accept a formatted line.

    The original exception is chained as ``__cause__``. Handlers after the
    failing one were not written to.
    """

    def __init__(self, handler: Any, line: str):
        self.handler = handler
        self.line = line
        super().__init__(f"Handler {handler!r} failed to write log line")
