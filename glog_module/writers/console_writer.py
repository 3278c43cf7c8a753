"""Console writer"""

import io
import sys
import threading


class ConsoleWriter:
    """Write formatted lines to a console stream."""

    def __init__(self, stream=None, encoding: str = "utf-8"):
        """
        Initialize console writer.

        Args:
            stream: Output stream (default: sys.stdout, looked up per write)
            encoding: Encoding used when the stream is binary
        """
        self.stream = stream
        self.encoding = encoding
        self._lock = threading.Lock()

    def _target(self):
        return self.stream if self.stream is not None else sys.stdout

    def write(self, line: str) -> None:
        """Write one formatted line and flush the stream."""
        stream = self._target()
        data = line
        if isinstance(stream, (io.RawIOBase, io.BufferedIOBase)):
            data = line.encode(self.encoding)

        with self._lock:
            stream.write(data)
            stream.flush()

    def flush(self):
        """Flush stream."""
        self._target().flush()

    def __repr__(self) -> str:
        """String representation."""
        name = getattr(self._target(), "name", type(self._target()).__name__)
        return f"ConsoleWriter(stream={name})"
