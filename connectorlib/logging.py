"""Logging utilities for connectorlib with structured logging support."""

import json
import os
import sys
from datetime import datetime, UTC
from typing import Literal, Dict, Any, Optional
from enum import Enum


class LogLevel(Enum):
    """Log levels for structured logging."""
    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


class StructuredLogger:
    """Structured logger for diagnostics that should not mix with progress output."""

    _LEVEL_PRIORITY = {
        "DEBUG": 0,
        "INFO": 1,
        "WARNING": 2,
        "ERROR": 3,
    }

    def __init__(self, component: str = "connector"):
        self.component = component

    @property
    def log_format(self) -> str:
        return os.getenv("LOG_FORMAT", "text")

    @property
    def log_level(self) -> str:
        return os.getenv("LOG_LEVEL", "INFO").upper()

    def _should_log(self, level: LogLevel) -> bool:
        level_priority = self._LEVEL_PRIORITY.get(level.name, 1)
        current_priority = self._LEVEL_PRIORITY.get(self.log_level, 1)
        return level_priority >= current_priority

    def format_message(
        self,
        level: LogLevel,
        message: str,
        fields: Optional[Dict[str, Any]] = None,
        error: Optional[Exception] = None
    ) -> str:
        """Format a log record as JSON or text depending on LOG_FORMAT."""
        timestamp = datetime.now(UTC).isoformat()

        if self.log_format == "json":
            entry = {
                "timestamp": timestamp,
                "level": level.value,
                "component": self.component,
                "message": message
            }
            if fields:
                entry["fields"] = fields
            if error:
                entry["error"] = {
                    "type": type(error).__name__,
                    "message": str(error)
                }
            return json.dumps(entry, default=str)

        parts = [timestamp, f"[{level.name}]", f"[{self.component}]", message]
        if fields:
            parts.append(" ".join(f"{k}={v}" for k, v in fields.items()))
        if error:
            parts.append(f"error={type(error).__name__}: {error}")
        return " ".join(parts)

    def _log(
        self,
        level: LogLevel,
        message: str,
        fields: Optional[Dict[str, Any]] = None,
        error: Optional[Exception] = None
    ):
        if not self._should_log(level):
            return
        print(self.format_message(level, message, fields, error), file=sys.stderr)

    def debug(self, message: str, fields: Optional[Dict[str, Any]] = None):
        self._log(LogLevel.DEBUG, message, fields)

    def info(self, message: str, fields: Optional[Dict[str, Any]] = None):
        self._log(LogLevel.INFO, message, fields)

    def warning(self, message: str, fields: Optional[Dict[str, Any]] = None):
        self._log(LogLevel.WARNING, message, fields)

    def error(self, message: str, error: Optional[Exception] = None, fields: Optional[Dict[str, Any]] = None):
        self._log(LogLevel.ERROR, message, fields, error)


logger = StructuredLogger()


def log_line(message: str, stream: Literal["stdout", "stderr"] = "stdout"):
    """Write one line of operator-facing output.

    Text mode writes the message untouched so the summary block stays
    readable; JSON mode wraps it with a timestamp and the stream name.
    """
    if os.getenv("LOG_FORMAT", "text") == "json":
        output = json.dumps({
            "timestamp": datetime.now(UTC).isoformat(),
            "stream": stream,
            "message": message
        })
    else:
        output = message

    if stream == "stderr":
        print(output, file=sys.stderr, flush=True)
    else:
        print(output, flush=True)


def log_stdout(message: str):
    """Progress and status output."""
    log_line(message, "stdout")


def log_stderr(message: str):
    """Diagnostics."""
    log_line(message, "stderr")
