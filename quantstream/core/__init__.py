"""Core infrastructure shared by every indicator: errors and logging."""

from .errors import ErrorKind, IndicatorError
from .logger import LogLevel, configure_logger, get_quantstream_logger

__all__ = [
    "ErrorKind",
    "IndicatorError",
    "LogLevel",
    "configure_logger",
    "get_quantstream_logger",
]
