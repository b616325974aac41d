"""Logging configuration utilities for simpsonrule.

The library is silent by default (NullHandler on the ``simpsonrule``
logger). Callers opt in with one of the helpers below.

Example usage:
    import simpsonrule

    simpsonrule.enable_console_logging(level="DEBUG")
    simpsonrule.enable_file_logging("logs/simpson.log", max_bytes=5_000_000)
    simpsonrule.enable_json_logging()
    simpsonrule.configure_from_env()

Environment variables:
    SR_LOGGING: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    SR_LOG_FILE: Path to log file (enables rotating file logging)
    SR_LOG_JSON: Set to "1" for JSON output
"""

from __future__ import annotations

import json
import logging
import os
from datetime import UTC, datetime
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Literal

__all__ = [
    "configure_from_env",
    "disable_logging",
    "enable_console_logging",
    "enable_file_logging",
    "enable_json_file_logging",
    "enable_json_logging",
    "set_level",
    "set_module_level",
]

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DEFAULT_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

DEFAULT_MAX_BYTES = 10 * 1024 * 1024  # 10 MB
DEFAULT_BACKUP_COUNT = 5

LOGGER_NAME = "simpsonrule"

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

# Record attributes set by the engine via ``extra=``; grouped under "calculation".
CALCULATION_FIELDS = ("expression", "a", "b", "n", "error_kind")


class JsonFormatter(logging.Formatter):
    """Formats log records as one JSON object per line.

    Example output:
        {"timestamp": "2026-01-15T10:30:00.123456+00:00", "level": "INFO",
         "logger": "simpsonrule.numerics.simpson", "message": "Integrated 'x^2' ...",
         "calculation": {"expression": "x^2", "a": 0, "b": 1, "n": 4}}
    """

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": datetime.fromtimestamp(record.created, tz=UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)
        calculation = {
            key: getattr(record, key) for key in CALCULATION_FIELDS if hasattr(record, key)
        }
        if calculation:
            log_data["calculation"] = calculation
        if hasattr(record, "extra"):
            log_data["extra"] = record.extra
        return json.dumps(log_data, default=str)


def _get_level(level: str | int) -> int:
    if isinstance(level, int):
        return level
    return getattr(logging, level.upper(), logging.INFO)


def _get_logger() -> logging.Logger:
    return logging.getLogger(LOGGER_NAME)


def _clear_handlers() -> None:
    """Remove and close every non-Null handler on the simpsonrule logger."""
    logger = _get_logger()
    for handler in logger.handlers[:]:
        if not isinstance(handler, logging.NullHandler):
            logger.removeHandler(handler)
            handler.close()


def _attach(handler: logging.Handler, level: LogLevel | int, formatter: logging.Formatter):
    logger = _get_logger()
    logger.setLevel(_get_level(level))
    handler.setLevel(_get_level(level))
    handler.setFormatter(formatter)
    logger.addHandler(handler)
    return handler


def _rotating_handler(path: str | Path, max_bytes: int, backup_count: int) -> RotatingFileHandler:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    return RotatingFileHandler(path, maxBytes=max_bytes, backupCount=backup_count)


def enable_console_logging(
    level: LogLevel | int = "INFO",
    format: str = DEFAULT_FORMAT,
    date_format: str = DEFAULT_DATE_FORMAT,
) -> logging.StreamHandler:
    """Log to stderr.

    Args:
        level: Log level name or int.
        format: Log message format string.
        date_format: Date format string for %(asctime)s.

    Returns:
        The created StreamHandler.
    """
    return _attach(logging.StreamHandler(), level, logging.Formatter(format, date_format))


def enable_file_logging(
    path: str | Path,
    level: LogLevel | int = "INFO",
    max_bytes: int = DEFAULT_MAX_BYTES,
    backup_count: int = DEFAULT_BACKUP_COUNT,
    format: str = DEFAULT_FORMAT,
    date_format: str = DEFAULT_DATE_FORMAT,
) -> RotatingFileHandler:
    """Log to a size-rotated file. Parent directories are created.

    Args:
        path: Log file path.
        level: Log level name or int.
        max_bytes: Rotate once the file reaches this size. Default 10 MB.
        backup_count: Number of rotated files to keep. Default 5.
        format: Log message format string.
        date_format: Date format string for %(asctime)s.
    """
    handler = _rotating_handler(path, max_bytes, backup_count)
    return _attach(handler, level, logging.Formatter(format, date_format))


def enable_json_logging(level: LogLevel | int = "INFO") -> logging.StreamHandler:
    """Log JSON lines to stderr, for log aggregators."""
    return _attach(logging.StreamHandler(), level, JsonFormatter())


def enable_json_file_logging(
    path: str | Path,
    level: LogLevel | int = "INFO",
    max_bytes: int = DEFAULT_MAX_BYTES,
    backup_count: int = DEFAULT_BACKUP_COUNT,
) -> RotatingFileHandler:
    """Log JSON lines to a size-rotated file."""
    handler = _rotating_handler(path, max_bytes, backup_count)
    return _attach(handler, level, JsonFormatter())


def configure_from_env() -> None:
    """Configure logging from SR_LOGGING, SR_LOG_FILE and SR_LOG_JSON.

    Does nothing when neither SR_LOGGING nor SR_LOG_FILE is set.
    """
    level = os.environ.get("SR_LOGGING", "").upper()
    log_file = os.environ.get("SR_LOG_FILE", "")
    use_json = os.environ.get("SR_LOG_JSON", "") == "1"

    if not level and not log_file:
        return

    level = level or "INFO"

    if use_json:
        if log_file:
            enable_json_file_logging(log_file, level=level)
        else:
            enable_json_logging(level=level)
    elif log_file:
        enable_file_logging(log_file, level=level)
    else:
        enable_console_logging(level=level)


def set_level(level: LogLevel | int) -> None:
    """Set the level of the simpsonrule logger."""
    _get_logger().setLevel(_get_level(level))


def set_module_level(module: str, level: LogLevel | int) -> None:
    """Set the level for one submodule, e.g. ``"expression.compiler"``."""
    logging.getLogger(f"{LOGGER_NAME}.{module}").setLevel(_get_level(level))


def disable_logging() -> None:
    """Remove all handlers and silence the simpsonrule logger."""
    logger = _get_logger()
    _clear_handlers()
    logger.addHandler(logging.NullHandler())
    logger.setLevel(logging.CRITICAL + 1)
