"""File writer"""

import threading
from pathlib import Path


class FileWriter:
    """Append formatted lines to a file."""

    def __init__(
        self,
        filepath: str,
        mode: str = "a",
        encoding: str = "utf-8",
    ):
        """
        Initialize file writer.

        Args:
            filepath: Path to log file
            mode: File open mode (default: 'a' for append)
            encoding: File encoding (default: 'utf-8')
        """
        self.filepath = Path(filepath)
        self.mode = mode
        self.encoding = encoding
        self._file = None
        self._lock = threading.Lock()
        self._open()

    def _open(self):
        """Open log file."""
        self.filepath.parent.mkdir(parents=True, exist_ok=True)
        self._file = open(self.filepath, self.mode, encoding=self.encoding)

    def write(self, line: str) -> None:
        """
        Write one formatted line.

        Raises:
            ValueError: If the writer has been closed
        """
        with self._lock:
            if self._file is None:
                raise ValueError(f"FileWriter for {self.filepath} is closed")
            self._file.write(line)

    def flush(self):
        """Flush file buffer."""
        with self._lock:
            if self._file:
                self._file.flush()

    def close(self):
        """Close file."""
        with self._lock:
            if self._file:
                self._file.close()
                self._file = None

    def __repr__(self) -> str:
        """String representation."""
        return f"FileWriter(filepath='{self.filepath}')"
