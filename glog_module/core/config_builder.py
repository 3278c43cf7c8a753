"""Configuration builder pattern"""

from typing import Any, List, Union

from glog_module.core.log_level import LogLevel
from glog_module.core.logger_config import (
    DEFAULT_DATE_FORMAT,
    DEFAULT_LAYOUT,
    LoggerConfig,
)
from glog_module.writers.console_writer import ConsoleWriter
from glog_module.writers.file_writer import FileWriter


class ConfigBuilder:
    """
    Builder pattern for LoggerConfig construction.

    Example:
        config = (ConfigBuilder()
            .with_level(LogLevel.DEBUG)
            .with_console()
            .with_file("logs/errors.log", errors_only=True)
            .build())
        registry.configure(config)
    """

    def __init__(self):
        self._layout = DEFAULT_LAYOUT
        self._date_format = DEFAULT_DATE_FORMAT
        self._level: int = LogLevel.NOTSET
        self._handlers: List[Any] = []
        self._warning_handlers: List[Any] = []
        self._error_handlers: List[Any] = []

    def with_layout(self, layout: str) -> "ConfigBuilder":
        """Set line layout."""
        self._layout = layout
        return self

    def with_date_format(self, date_format: str) -> "ConfigBuilder":
        """Set the directive string used for %(t)."""
        self._date_format = date_format
        return self

    def with_level(self, level: Union[int, str]) -> "ConfigBuilder":
        """Set minimum log level, by value or by name."""
        if isinstance(level, str):
            level = LogLevel.from_string(level)
        self._level = level
        return self

    def with_console(self, stream=None) -> "ConfigBuilder":
        """Add a console handler (stdout unless a stream is given)."""
        self._handlers.append(ConsoleWriter(stream))
        return self

    def with_file(
        self,
        filepath: str,
        warnings_only: bool = False,
        errors_only: bool = False,
    ) -> "ConfigBuilder":
        """
        Add a file handler.

        Args:
            filepath: Path to log file
            warnings_only: Register as a warning handler
            errors_only: Register as an error handler

        Returns:
            Self for method chaining
        """
        writer = FileWriter(filepath)
        if warnings_only:
            self._warning_handlers.append(writer)
        if errors_only:
            self._error_handlers.append(writer)
        if not (warnings_only or errors_only):
            self._handlers.append(writer)
        return self

    def add_handler(self, handler: Any) -> "ConfigBuilder":
        """Add a general handler."""
        self._handlers.append(handler)
        return self

    def add_warning_handler(self, handler: Any) -> "ConfigBuilder":
        """Add a handler that receives WARNING lines."""
        self._warning_handlers.append(handler)
        return self

    def add_error_handler(self, handler: Any) -> "ConfigBuilder":
        """Add a handler that receives ERROR and CRITICAL lines."""
        self._error_handlers.append(handler)
        return self

    def build(self) -> LoggerConfig:
        """
        Build and return the configuration.

        With no general handlers added, lines go to standard output.
        """
        general = self._handlers
        if not general:
            general = [ConsoleWriter()]

        return LoggerConfig(
            layout=self._layout,
            date_format=self._date_format,
            level=self._level,
            handlers=list(general),
            warning_handlers=list(self._warning_handlers),
            error_handlers=list(self._error_handlers),
        )
