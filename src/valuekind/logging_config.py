"""
Logging configuration for valuekind.

The library only creates module loggers; applications (and the CLI) call
``setup_logging`` to attach handlers.

Provides:
- Colored console output
- Optional rotating file handler
- JSON structured formatting
"""

from __future__ import annotations

import json
import logging
import logging.handlers
import os
import sys
from pathlib import Path

LOG_DIR = Path(os.getenv("VALUEKIND_LOG_DIR", "logs"))
LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s:%(lineno)d | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class FlushingTimedRotatingFileHandler(logging.handlers.TimedRotatingFileHandler):
    """TimedRotatingFileHandler that flushes after every write."""

    def emit(self, record: logging.LogRecord) -> None:
        super().emit(record)
        self.flush()


class ColoredFormatter(logging.Formatter):
    """Colored console output for development."""

    COLORS = {
        "DEBUG": "\033[36m",
        "INFO": "\033[32m",
        "WARNING": "\033[33m",
        "ERROR": "\033[31m",
        "CRITICAL": "\033[35m",
        "RESET": "\033[0m",
    }

    def format(self, record: logging.LogRecord) -> str:
        levelname = record.levelname
        if levelname in self.COLORS:
            record = logging.makeLogRecord(record.__dict__)
            record.levelname = f"{self.COLORS[levelname]}{levelname}{self.COLORS['RESET']}"
        return super().format(record)


class JSONFormatter(logging.Formatter):
    """JSON formatter for structured logging."""

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": self.formatTime(record, "%Y-%m-%dT%H:%M:%S"),
            "level": record.levelname,
            "logger": record.name,
            "line": record.lineno,
            "message": record.getMessage(),
        }
        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)
        return json.dumps(log_data)


def setup_logging(
    console_level: str = "WARNING",
    *,
    file_level: str | None = None,
    json_format: bool = False,
) -> None:
    """
    Configure logging for the ``valuekind`` logger tree.

    Args:
        console_level: Console output level (DEBUG, INFO, WARNING, ERROR)
        file_level: When set, also log to LOG_DIR/valuekind.log at this level
        json_format: Use JSON format for console and file output
    """
    package_logger = logging.getLogger("valuekind")
    package_logger.setLevel(logging.DEBUG)
    package_logger.handlers.clear()
    package_logger.propagate = False

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(getattr(logging, console_level.upper(), logging.WARNING))
    if json_format:
        console_handler.setFormatter(JSONFormatter())
    elif os.getenv("VALUEKIND_NO_COLOR"):
        console_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    else:
        console_handler.setFormatter(ColoredFormatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    package_logger.addHandler(console_handler)

    if file_level is not None:
        LOG_DIR.mkdir(parents=True, exist_ok=True)
        file_handler = FlushingTimedRotatingFileHandler(
            LOG_DIR / "valuekind.log",
            when="midnight",
            interval=1,
            backupCount=30,
            encoding="utf-8",
        )
        file_handler.setLevel(getattr(logging, file_level.upper(), logging.DEBUG))
        file_handler.suffix = "%Y-%m-%d"
        if json_format:
            file_handler.setFormatter(JSONFormatter())
        else:
            file_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
        package_logger.addHandler(file_handler)

    package_logger.debug(
        "Logging configured",
        extra={"console_level": console_level, "file_level": file_level},
    )
