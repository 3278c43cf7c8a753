"""
Logger registry

Owns the name -> Logger table and the SharedConfig every registered
logger reads from. Applications usually create one registry at startup
and pass it around; the module-level helpers at the bottom wrap a lazily
created default registry for scripts that do not care.
"""

from __future__ import annotations
import threading
from typing import Dict, List, Optional

from glog_module.core.caller import caller_module_name
from glog_module.core.logger import Logger
from glog_module.core.logger_config import LoggerConfig, SharedConfig


class LoggerRegistry:
    """
    Process-lifetime table of named loggers.

    Thread Safety:
        Lookups and inserts share one lock, so racing first-time callers
        for the same name receive the same Logger.
    """

    def __init__(self, config: Optional[LoggerConfig] = None):
        self._shared_config = SharedConfig(config)
        self._loggers: Dict[str, Logger] = {}
        self._lock = threading.Lock()

    @property
    def config(self) -> LoggerConfig:
        """Configuration in effect for every logger of this registry."""
        return self._shared_config.get()

    def configure(self, config: LoggerConfig) -> LoggerConfig:
        """
        Replace the configuration for all loggers, existing and future.

        Returns:
            The configuration that was replaced
        """
        return self._shared_config.update(config)

    def get_logger(self, name: Optional[str] = None, skip: int = 0) -> Logger:
        """
        Return the logger for a name, creating it on first use.

        Args:
            name: Logger name. When omitted, the base name of the calling
                  source file is used (``app/jobs.py`` -> ``jobs``).
            skip: Extra frames between the user and this call, for
                  wrappers that forward to get_logger

        Returns:
            The Logger registered under the name
        """
        if name is None:
            name = caller_module_name(1 + skip)

        with self._lock:
            logger = self._loggers.get(name)
            if logger is None:
                logger = Logger(name, self._shared_config)
                self._loggers[name] = logger
            return logger

    def fetch_logger(self, name: str) -> Optional[Logger]:
        """
        Get an existing logger by exact name.

        Returns:
            Logger instance or None if no logger has that name
        """
        with self._lock:
            return self._loggers.get(name)

    def names(self) -> List[str]:
        """Names of all registered loggers."""
        with self._lock:
            return list(self._loggers.keys())

    def clear(self) -> None:
        """Forget every registered logger."""
        with self._lock:
            self._loggers.clear()

    def __contains__(self, name: str) -> bool:
        with self._lock:
            return name in self._loggers

    def __repr__(self) -> str:
        """String representation."""
        with self._lock:
            return f"LoggerRegistry(loggers={list(self._loggers.keys())})"


_default_registry: Optional[LoggerRegistry] = None
_default_lock = threading.Lock()


def default_registry() -> LoggerRegistry:
    """Return the process-wide registry, creating it on first use."""
    global _default_registry
    with _default_lock:
        if _default_registry is None:
            _default_registry = LoggerRegistry()
        return _default_registry


def get_log(name: Optional[str] = None) -> Logger:
    """Obtain-or-create a logger named after the calling module."""
    return default_registry().get_logger(name, skip=1)


def fetch_log(name: str) -> Optional[Logger]:
    """Fetch an existing logger from the default registry, or None."""
    return default_registry().fetch_logger(name)


def configure(config: LoggerConfig) -> LoggerConfig:
    """Replace the default registry's configuration."""
    return default_registry().configure(config)
