"""Log handlers for chainrecord."""

import sys
from collections import deque
from typing import IO, Any, Deque, Dict, List, Optional

from .core import LogEntry, LogHandler


class ConsoleHandler(LogHandler):
    """Console log handler writing to stderr by default."""

    def __init__(self, stream: Optional[IO[str]] = None):
        super().__init__()
        self.stream = stream

    def emit(self, entry: LogEntry) -> None:
        """Emit log entry to console."""
        with self._lock:
            if self.formatter:
                formatted = self.formatter.format(entry)
            else:
                formatted = (
                    f"{entry.timestamp} [{entry.level.value.upper()}] "
                    f"{entry.logger_name}: {entry.message}"
                )

            stream = self.stream or sys.stderr
            stream.write(formatted + "\n")
            stream.flush()


class MemoryHandler(LogHandler):
    """Memory log handler keeping the most recent entries."""

    def __init__(self, max_size: int = 1000):
        super().__init__()
        self.max_size = max_size
        self.buffer: Deque[Dict[str, Any]] = deque(maxlen=max_size)

    def emit(self, entry: LogEntry) -> None:
        """Emit log entry to memory."""
        with self._lock:
            self.buffer.append(
                {
                    "timestamp": entry.timestamp,
                    "level": entry.level.value,
                    "message": entry.message,
                    "logger_name": entry.logger_name,
                    "context": entry.context.to_dict(),
                    "extra": dict(entry.extra),
                    "formatted": self.formatter.format(entry)
                    if self.formatter
                    else entry.message,
                }
            )

    def get_logs(self) -> List[Dict[str, Any]]:
        """Get all logs from memory."""
        with self._lock:
            return list(self.buffer)

    def clear_logs(self) -> None:
        """Clear all logs from memory."""
        with self._lock:
            self.buffer.clear()

    def close(self) -> None:
        """Close handler."""
        self.clear_logs()
