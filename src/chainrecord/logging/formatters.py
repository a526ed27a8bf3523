"""Log formatters for chainrecord."""

import json
import time
import traceback
from typing import Any, Dict, Optional

from .core import LogEntry, LogFormatter


class JSONFormatter(LogFormatter):
    """JSON log formatter."""

    def __init__(
        self,
        include_context: bool = True,
        include_exception: bool = True,
        include_extra: bool = True,
        include_thread: bool = False,
        timestamp_format: str = "iso",
        indent: Optional[int] = None,
    ):
        self.include_context = include_context
        self.include_exception = include_exception
        self.include_extra = include_extra
        self.include_thread = include_thread
        self.timestamp_format = timestamp_format
        self.indent = indent

    def format(self, entry: LogEntry) -> str:
        """Format log entry as JSON."""
        data: Dict[str, Any] = {
            "timestamp": self._format_timestamp(entry.timestamp),
            "level": entry.level.value,
            "logger": entry.logger_name,
        }

        if self.include_context:
            # Only the populated fields; most entries carry one or two.
            context = {
                k: v
                for k, v in entry.context.to_dict().items()
                if v is not None and v != "" and v != {}
            }
            if context:
                data["context"] = context

        if self.include_exception and entry.exception:
            data["exception"] = {
                "type": type(entry.exception).__name__,
                "message": str(entry.exception),
                "traceback": "".join(
                    traceback.format_exception(
                        type(entry.exception),
                        entry.exception,
                        entry.exception.__traceback__,
                    )
                ),
            }

        if self.include_extra and entry.extra:
            data["extra"] = entry.extra

        if self.include_thread:
            data["thread_id"] = entry.thread_id
            data["process_id"] = entry.process_id

        data["message"] = entry.message

        return json.dumps(data, indent=self.indent, ensure_ascii=False, default=str)

    def _format_timestamp(self, timestamp: float) -> str:
        if self.timestamp_format == "iso":
            return (
                time.strftime("%Y-%m-%dT%H:%M:%S", time.gmtime(timestamp))
                + f".{int((timestamp % 1) * 1000000):06d}Z"
            )
        elif self.timestamp_format == "unix":
            return str(timestamp)
        else:
            return time.strftime(self.timestamp_format, time.gmtime(timestamp))


class TextFormatter(LogFormatter):
    """Text log formatter."""

    def __init__(
        self,
        format_string: str = None,
        timestamp_format: str = "%Y-%m-%d %H:%M:%S",
    ):
        self.timestamp_format = timestamp_format
        self.format_string = (
            format_string
            or "%(timestamp)s [%(level)s] %(logger)s: %(message)s%(context)s"
        )

    def format(self, entry: LogEntry) -> str:
        """Format log entry."""
        format_data = {
            "timestamp": time.strftime(
                self.timestamp_format, time.gmtime(entry.timestamp)
            ),
            "level": entry.level.value.upper(),
            "logger": entry.logger_name,
            "message": entry.message,
            "context": self._format_context(entry),
        }

        return self.format_string % format_data

    def _format_context(self, entry: LogEntry) -> str:
        context = entry.context
        parts = []
        if context.component:
            parts.append(f"component={context.component}")
        if context.operation:
            parts.append(f"operation={context.operation}")
        if context.coin is not None:
            parts.append(f"coin={context.coin}")
        if context.transaction_id:
            parts.append(f"tx={context.transaction_id}")
        if context.address:
            parts.append(f"address={context.address}")
        for key, value in entry.extra.items():
            parts.append(f"{key}={value}")

        return " | " + " ".join(parts) if parts else ""
