"""
Log entry data structure

One record travelling from a Logger through the layout formatter.
"""

from dataclasses import dataclass, field
from datetime import datetime


@dataclass
class LogEntry:
    """
    Log entry data structure.

    Holds exactly the values the layout field codes can print.
    """

    level: int
    message: str
    timestamp: datetime = field(default_factory=lambda: LogEntry.now())
    logger_name: str = ""
    function_name: str = "unknown"

    def __post_init__(self):
        """Coerce non-string messages."""
        if not isinstance(self.level, int):
            raise TypeError("level must be an int or LogLevel")
        if not isinstance(self.message, str):
            self.message = str(self.message)

    @staticmethod
    def now() -> datetime:
        """Current local time carrying its own zone."""
        return datetime.now().astimezone()
