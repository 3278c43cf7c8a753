"""
Level-based handler selection

Chooses which handler list receives a finished line and writes it there.
"""

from __future__ import annotations
from typing import Any, List, Sequence

from glog_module.core.exceptions import HandlerWriteError
from glog_module.core.log_level import LogLevel
from glog_module.core.logger_config import LoggerConfig


def select_handlers(config: LoggerConfig, level: int) -> List[Any]:
    """
    Pick the handler list for a level.

    WARNING goes to the warning handlers and anything above WARNING to the
    error handlers, each only when that list is non-empty. Everything else
    falls back to the general handlers.

    Args:
        config: Active configuration
        level: Level of the line being written

    Returns:
        The selected handler list
    """
    if level == LogLevel.WARNING and config.warning_handlers:
        return config.warning_handlers
    if level > LogLevel.WARNING and config.error_handlers:
        return config.error_handlers
    return config.handlers


def write_to_handlers(line: str, handlers: Sequence[Any]) -> int:
    """
    Write a line to each handler in order.

    Args:
        line: Formatted line, including its trailing newline
        handlers: Objects with a write(line) method

    Returns:
        Number of handlers written to

    Raises:
        HandlerWriteError: On the first handler that fails; the remaining
            handlers are not attempted
    """
    count = 0
    for handler in handlers:
        try:
            handler.write(line)
        except Exception as e:
            raise HandlerWriteError(handler, line) from e
        count += 1
    return count
