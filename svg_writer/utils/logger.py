"""
Logging helpers for svg_writer.
Every module logs through a named logger below the ``svg_writer``
namespace; validation problems are reported as warnings on those loggers.
"""

import os
import sys
import json
import logging
import traceback
from datetime import datetime
from logging.handlers import RotatingFileHandler
from typing import Any, List, Optional

from svg_writer.core import CONFIG

# Constants
ROOT_LOGGER_NAME = "svg_writer"
MAX_LOG_SIZE = 10 * 1024 * 1024  # 10MB
BACKUP_COUNT = 5
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


class JsonFormatter(logging.Formatter):
    """Format logs as JSON for structured logging."""

    def format(self, record):
        log_data = {
            'timestamp': datetime.fromtimestamp(record.created).isoformat(),
            'level': record.levelname,
            'name': record.name,
            'message': record.getMessage(),
            'module': record.module,
            'line': record.lineno,
        }

        if record.exc_info:
            log_data['exception'] = {
                'type': record.exc_info[0].__name__,
                'message': str(record.exc_info[1]),
                'traceback': traceback.format_exception(*record.exc_info)
            }

        # Structured fields passed through ``extra=``
        for key in ('marker_id', 'shape', 'href', 'file_name'):
            if hasattr(record, key):
                log_data[key] = getattr(record, key)

        return json.dumps(log_data)


def setup_logger(
    level: Optional[str] = None,
    log_file: Optional[str] = None,
    console: bool = True,
    format_str: Optional[str] = None,
    use_json: bool = False
) -> logging.Logger:
    """
    Configure the ``svg_writer`` logger.

    Args:
        level: Logging level name, defaults to ``CONFIG["log_level"]``
        log_file: Optional file to log to
        console: Whether to log to stderr
        format_str: Optional custom format string
        use_json: Emit one JSON object per record

    Returns:
        The configured package logger
    """
    level = level or CONFIG["log_level"]
    level_value = getattr(logging, str(level).upper(), logging.WARNING)

    if use_json:
        formatter = JsonFormatter()
    else:
        formatter = logging.Formatter(format_str or LOG_FORMAT)

    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(level_value)

    # Remove existing handlers to avoid duplicates
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)

    if console:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setFormatter(formatter)
        console_handler.setLevel(level_value)
        logger.addHandler(console_handler)

    if log_file:
        log_dir = os.path.dirname(log_file)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_file,
            maxBytes=MAX_LOG_SIZE,
            backupCount=BACKUP_COUNT
        )
        file_handler.setFormatter(formatter)
        file_handler.setLevel(level_value)
        logger.addHandler(file_handler)

    return logger


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger with the given name.

    Args:
        name: Logger name

    Returns:
        Logger instance
    """
    return logging.getLogger(name)


class LogCapture:
    """Context manager to capture svg_writer diagnostics."""

    def __init__(self, logger_name: str = ROOT_LOGGER_NAME, level: int = logging.WARNING):
        self.logger_name = logger_name
        self.level = level
        self.handler = None
        self.records: List[logging.LogRecord] = []
        self._previous_level = None

    @property
    def messages(self) -> List[str]:
        return [record.getMessage() for record in self.records]

    def fields(self, key: str) -> List[Any]:
        """Values of a structured ``extra`` field across captured records."""
        return [getattr(record, key) for record in self.records if hasattr(record, key)]

    def __enter__(self):
        records = self.records

        class CaptureHandler(logging.Handler):
            def emit(self, record):
                records.append(record)

        self.handler = CaptureHandler()
        self.handler.setLevel(self.level)

        logger = logging.getLogger(self.logger_name)
        self._previous_level = logger.level
        if logger.getEffectiveLevel() > self.level:
            logger.setLevel(self.level)
        logger.addHandler(self.handler)

        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if self.handler:
            logger = logging.getLogger(self.logger_name)
            logger.removeHandler(self.handler)
            logger.setLevel(self._previous_level)
            self.handler = None

