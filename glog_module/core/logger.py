"""
Main Logger class - synchronous leveled logger

Every call formats and writes on the calling thread before returning.
"""

from __future__ import annotations
from datetime import datetime
from typing import Any, Optional

from glog_module.core.caller import UNKNOWN_CALLER, caller_function_name
from glog_module.core.log_entry import LogEntry
from glog_module.core.log_level import LogLevel
from glog_module.core.logger_config import LoggerConfig, SharedConfig
from glog_module.formatters.layout_formatter import LayoutFormatter
from glog_module.routing.level_router import select_handlers, write_to_handlers

# Frames between _log and the user's code: _log <- public method <- user
_CALLER_SKIP = 2


class Logger:
    """
    Named logger bound to a live configuration.

    Loggers are normally obtained from a LoggerRegistry, which hands every
    logger the same SharedConfig.

    Example:
        log = registry.get_logger()
        log.info("service started")
        log.warnf("queue at %d%%", 93)
    """

    def __init__(self, name: str, shared_config: Optional[SharedConfig] = None):
        self.name = name
        self.silenced = False
        self._shared_config = shared_config or SharedConfig()

    @property
    def config(self) -> LoggerConfig:
        """Configuration in effect right now."""
        return self._shared_config.get()

    def silence(self, silenced: bool = True) -> None:
        """Suppress (or restore) all output from this logger."""
        self.silenced = silenced

    def is_enabled_for(self, level: int) -> bool:
        """Check whether a call at this level would be emitted."""
        return not self.silenced and level >= self.config.level

    def _log(self, level: int, message: Any, timestamp: Optional[datetime] = None) -> None:
        """
        Filter, format and write one message.

        Must be called directly from a public logging method so the
        caller lookup lands on user code.

        Raises:
            HandlerWriteError: If a handler fails to write
        """
        if self.silenced:
            return

        # One snapshot per call, so a concurrent configure() cannot mix configs
        config = self.config
        if level < config.level:
            return

        message = str(message)
        if not message.endswith("\n"):
            message += "\n"

        formatter = LayoutFormatter(config.layout, config.date_format)
        function_name = UNKNOWN_CALLER
        if formatter.needs_caller:
            function_name = caller_function_name(_CALLER_SKIP)

        entry = LogEntry(
            level=level,
            message=message,
            timestamp=timestamp or LogEntry.now(),
            logger_name=self.name,
            function_name=function_name,
        )

        line = formatter.format(entry)
        write_to_handlers(line, select_handlers(config, level))

    def log(self, level: int, message: Any, timestamp: Optional[datetime] = None) -> None:
        """
        Log a message at an arbitrary level.

        Args:
            level: Any int; levels off the LogLevel scale print as UNKNOWN
            message: Message, converted with str()
            timestamp: Time to record instead of now
        """
        self._log(level, message, timestamp)

    def debug(self, message: Any) -> None:
        """Log debug message."""
        self._log(LogLevel.DEBUG, message)

    def info(self, message: Any) -> None:
        """Log info message."""
        self._log(LogLevel.INFO, message)

    def warn(self, message: Any) -> None:
        """Log warning message."""
        self._log(LogLevel.WARNING, message)

    def warning(self, message: Any) -> None:
        """Log warning message."""
        self._log(LogLevel.WARNING, message)

    def error(self, message: Any) -> None:
        """Log error message."""
        self._log(LogLevel.ERROR, message)

    def critical(self, message: Any) -> None:
        """Log critical message."""
        self._log(LogLevel.CRITICAL, message)

    # printf-style variants: the message is rendered before filtering

    def debugf(self, fmt: str, *args: Any) -> None:
        self._log(LogLevel.DEBUG, _printf(fmt, args))

    def infof(self, fmt: str, *args: Any) -> None:
        self._log(LogLevel.INFO, _printf(fmt, args))

    def warnf(self, fmt: str, *args: Any) -> None:
        self._log(LogLevel.WARNING, _printf(fmt, args))

    def errorf(self, fmt: str, *args: Any) -> None:
        self._log(LogLevel.ERROR, _printf(fmt, args))

    def criticalf(self, fmt: str, *args: Any) -> None:
        self._log(LogLevel.CRITICAL, _printf(fmt, args))

    def __repr__(self) -> str:
        """String representation."""
        return f"Logger(name={self.name!r}, silenced={self.silenced})"


def _printf(fmt: str, args: tuple) -> str:
    """Render a printf-style message; a bad format degrades instead of raising."""
    try:
        return fmt % args
    except (TypeError, ValueError) as e:
        return f"[FORMAT ERROR: {e}] {fmt}"
