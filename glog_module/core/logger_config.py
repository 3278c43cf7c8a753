"""
Logger configuration management

A LoggerConfig is an immutable-by-convention value. Loggers never hold one
directly: they share a SharedConfig handle, so replacing the handle's
config reaches every logger at once.
"""

from dataclasses import dataclass, field, replace
from typing import Any, List, Optional
import sys
import threading

from glog_module.core.log_level import LogLevel
from glog_module.writers.console_writer import ConsoleWriter

DEFAULT_LAYOUT = "%(t)s | %(n)20s | %(f)30s() | %(l)8s | %(m)s"
DEFAULT_DATE_FORMAT = "%b %d %H:%M:%S"


@dataclass
class LoggerConfig:
    """
    Logger configuration.

    Attributes:
        layout: Line layout using %(t), %(n), %(f), %(l), %(m) field codes
        date_format: Directive string used to render %(t)
        level: Minimum level that is emitted
        handlers: General handlers, and the fallback for WARNING and above
        warning_handlers: Handlers for WARNING, when non-empty
        error_handlers: Handlers for ERROR and CRITICAL, when non-empty
    """

    # Format settings
    layout: str = DEFAULT_LAYOUT
    date_format: str = DEFAULT_DATE_FORMAT

    # Threshold
    level: int = LogLevel.NOTSET

    # Handler settings
    handlers: List[Any] = field(default_factory=lambda: [ConsoleWriter()])
    warning_handlers: List[Any] = field(default_factory=list)
    error_handlers: List[Any] = field(default_factory=list)

    def __post_init__(self):
        """Validate configuration after initialization."""
        if not isinstance(self.level, int):
            raise TypeError("level must be an int or LogLevel")
        for group in ("handlers", "warning_handlers", "error_handlers"):
            handlers = list(getattr(self, group))
            for handler in handlers:
                if not callable(getattr(handler, "write", None)):
                    raise TypeError(f"{group} entry {handler!r} has no write() method")
            setattr(self, group, handlers)

    def copy(self, **changes) -> "LoggerConfig":
        """Return a copy with the given fields replaced."""
        return replace(self, **changes)

    @classmethod
    def default(cls) -> "LoggerConfig":
        """Create default configuration."""
        return cls()

    @classmethod
    def debug_config(cls) -> "LoggerConfig":
        """Create configuration for debugging."""
        return cls(level=LogLevel.DEBUG)

    @classmethod
    def production_config(cls) -> "LoggerConfig":
        """Create configuration for production: warnings and errors on stderr."""
        stderr = ConsoleWriter(sys.stderr)
        return cls(
            level=LogLevel.INFO,
            date_format="%Y-%m-%d %H:%M:%S.%f %z",
            warning_handlers=[stderr],
            error_handlers=[stderr],
        )


class SharedConfig:
    """
    Live, lock-guarded configuration handle.

    Thread Safety:
        get() and update() may be called from any thread. A reader always
        sees one complete LoggerConfig, never a mix of old and new.
    """

    def __init__(self, config: Optional[LoggerConfig] = None):
        self._config = config or LoggerConfig.default()
        self._lock = threading.Lock()

    def get(self) -> LoggerConfig:
        """Return the current configuration."""
        with self._lock:
            return self._config

    def update(self, config: LoggerConfig) -> LoggerConfig:
        """
        Replace the configuration wholesale.

        Args:
            config: New configuration

        Returns:
            The configuration that was replaced
        """
        if not isinstance(config, LoggerConfig):
            raise TypeError("config must be a LoggerConfig")
        with self._lock:
            previous, self._config = self._config, config
        return previous

    def __repr__(self) -> str:
        """String representation."""
        return f"SharedConfig({self.get()!r})"
