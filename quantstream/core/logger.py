"""Logging configuration for quantstream.

All library loggers hang off the ``quantstream`` root logger. Handlers are
attached to the root once, and every record carries a ``series_id`` attribute
so that output from several independently owned indicator instances can be
told apart in a shared log stream.

The root is configured lazily from the environment:

* ``QUANTSTREAM_LOG_LEVEL``: level name, ``WARNING`` by default
* ``QUANTSTREAM_LOG_FORMAT``: ``json`` for one JSON document per record
"""

import json
import logging
import logging.handlers
import os
import sys
from datetime import datetime
from enum import StrEnum
from typing import Any

ROOT_LOGGER_NAME = "quantstream"
STANDARD_FORMAT = (
    '%(asctime)s | %(levelname)s | %(name)s | series=%(series_id)s | '
    '%(module)s:%(funcName)s:%(lineno)d | %(message)s'
)
DEFAULT_SERIES_ID = '-'


class LogLevel(StrEnum):
    """Accepted log level names."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


# Attributes every LogRecord has; anything else was supplied through ``extra``
_STANDARD_RECORD_KEYS = frozenset(logging.makeLogRecord({}).__dict__) | {'message', 'asctime'}


class StructuredFormatter(logging.Formatter):
    """Render log records as single-line JSON documents."""

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON, keeping any ``extra`` attributes."""
        payload: dict[str, Any] = {
            'timestamp': datetime.fromtimestamp(record.created).isoformat(),
            'level': record.levelname,
            'logger': record.name,
            'message': record.getMessage(),
            'location': f"{record.module}:{record.funcName}:{record.lineno}",
        }
        if record.exc_info:
            payload['exception'] = self.formatException(record.exc_info)

        payload.update(
            (key, value)
            for key, value in record.__dict__.items()
            if key not in _STANDARD_RECORD_KEYS
        )
        return json.dumps(payload, default=str)


class LoggerContextFilter(logging.Filter):
    """Ensure every record has a ``series_id`` attribute."""

    def __init__(self, series_id: str | None = None, *, is_default: bool = False) -> None:
        super().__init__()
        self.series_id = series_id
        self.is_default = is_default

    def filter(self, record: logging.LogRecord) -> bool:
        if self.series_id is not None:
            record.series_id = self.series_id
        elif getattr(record, 'series_id', None) is None:
            record.series_id = DEFAULT_SERIES_ID
        return True


_configured: dict[str, logging.Logger] = {}


def _normalized_logger_name(name: str) -> str:
    if not name or name == ROOT_LOGGER_NAME:
        return ROOT_LOGGER_NAME
    if name.startswith(f"{ROOT_LOGGER_NAME}."):
        return name
    return f"{ROOT_LOGGER_NAME}.{name}"


def _ensure_default_context(filterable: logging.Filterer) -> None:
    """Attach a default context filter so format strings can reference series_id."""
    if not any(isinstance(f, LoggerContextFilter) and f.is_default for f in filterable.filters):
        filterable.addFilter(LoggerContextFilter(is_default=True))


def configure_logger(
    name: str = ROOT_LOGGER_NAME,
    *,
    level: str = LogLevel.WARNING,
    file_path: str | None = None,
    max_file_size: int = 10485760,  # 10MB
    backup_count: int = 5,
    console: bool = True,
    structured: bool = False,
) -> logging.Logger:
    """Attach handlers to ``name`` once and return the logger.

    Later calls for an already configured name return the cached logger
    unchanged.

    Args:
        name: Logger name, placed under the ``quantstream`` root
        level: Level name, case insensitive
        file_path: Optional rotating log file
        max_file_size: Bytes before the log file rotates
        backup_count: Rotated files kept
        console: Whether to log to stdout
        structured: Emit JSON documents instead of the standard line format

    Raises:
        ValueError: If ``level`` is not a known level name
    """
    name = _normalized_logger_name(name)
    if name in _configured:
        return _configured[name]

    log_level = LogLevel(str(level).upper())
    logger = logging.getLogger(name)
    logger.setLevel(getattr(logging, log_level))
    logger.handlers.clear()

    formatter = StructuredFormatter() if structured else logging.Formatter(STANDARD_FORMAT)
    handlers: list[logging.Handler] = []
    if console:
        handlers.append(logging.StreamHandler(sys.stdout))
    if file_path:
        directory = os.path.dirname(file_path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        handlers.append(
            logging.handlers.RotatingFileHandler(
                file_path, maxBytes=max_file_size, backupCount=backup_count
            )
        )

    for handler in handlers:
        handler.setFormatter(formatter)
        _ensure_default_context(handler)
        logger.addHandler(handler)
    _ensure_default_context(logger)

    _configured[name] = logger
    return logger


def bind_logger_context(logger: logging.Logger, *, series_id: str | None = None) -> logging.Logger:
    """Bind a series identifier to an existing logger instance."""
    if series_id is None:
        return logger

    for existing in list(logger.filters):
        if isinstance(existing, LoggerContextFilter) and not existing.is_default:
            logger.removeFilter(existing)
    logger.addFilter(LoggerContextFilter(series_id=series_id))
    return logger


def get_quantstream_logger(name: str = ROOT_LOGGER_NAME, *, series_id: str | None = None) -> logging.Logger:
    """Get a logger under the ``quantstream`` root, optionally bound to a series."""
    root_logger = configure_logger(
        ROOT_LOGGER_NAME,
        level=os.environ.get('QUANTSTREAM_LOG_LEVEL', LogLevel.WARNING),
        structured=os.environ.get('QUANTSTREAM_LOG_FORMAT', '').lower() == 'json',
    )
    normalized_name = _normalized_logger_name(name)
    if normalized_name == ROOT_LOGGER_NAME:
        target_logger = root_logger
    else:
        target_logger = root_logger.getChild(normalized_name.removeprefix(f"{ROOT_LOGGER_NAME}."))
        _ensure_default_context(target_logger)
    return bind_logger_context(target_logger, series_id=series_id)
