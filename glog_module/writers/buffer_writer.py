"""In-memory writer"""

import threading
from typing import List


class BufferWriter:
    """
    Collect formatted lines in memory.

    Useful for capturing output in tests or for showing recent lines in
    an application's own UI.
    """

    def __init__(self):
        self._lines: List[str] = []
        self._lock = threading.Lock()

    def write(self, line: str) -> None:
        """Append one formatted line."""
        with self._lock:
            self._lines.append(line)

    @property
    def lines(self) -> List[str]:
        """Copy of the lines written so far."""
        with self._lock:
            return self._lines.copy()

    def getvalue(self) -> str:
        """All written lines concatenated."""
        with self._lock:
            return "".join(self._lines)

    def clear(self) -> None:
        """Drop all collected lines."""
        with self._lock:
            self._lines.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._lines)
