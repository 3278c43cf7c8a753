"""
Log level enumeration

Severity scale shared by loggers, the layout formatter and the level router.
"""

from enum import IntEnum
from typing import Dict


class LogLevel(IntEnum):
    """
    Log level enumeration.

    Values are compatible with Python's logging module.
    """

    NOTSET = 0      # Everything passes
    DEBUG = 10      # Debug information
    INFO = 20       # Informational messages
    WARNING = 30    # Warning messages
    ERROR = 40      # Error messages
    CRITICAL = 50   # Critical errors

    def __str__(self) -> str:
        """String representation of log level."""
        return self.name

    @classmethod
    def from_string(cls, level_str: str) -> "LogLevel":
        """
        Convert string to LogLevel.

        Args:
            level_str: Level name (case-insensitive), "WARN" is accepted

        Returns:
            LogLevel enum value

        Raises:
            ValueError: If level_str is not valid
        """
        level_str = level_str.upper()
        if level_str in LEVEL_FROM_NAME:
            return LEVEL_FROM_NAME[level_str]
        if level_str in cls.__members__:
            return cls[level_str]
        raise ValueError(f"Invalid log level: {level_str}")


# Mapping from log level to the names rendered by %(l)
LEVEL_NAMES: Dict[int, str] = {
    LogLevel.NOTSET: "NOTSET",
    LogLevel.DEBUG: "DEBUG",
    LogLevel.INFO: "INFO",
    LogLevel.WARNING: "WARN",
    LogLevel.ERROR: "ERROR",
    LogLevel.CRITICAL: "CRITICAL",
}

# Reverse mapping
LEVEL_FROM_NAME: Dict[str, LogLevel] = {v: k for k, v in LEVEL_NAMES.items()}


def level_name(level: int) -> str:
    """Return the display name of a level, "UNKNOWN" if it is off the scale."""
    return LEVEL_NAMES.get(level, "UNKNOWN")
