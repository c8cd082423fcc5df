"""
svg_writer - Utilities
======================
Logging helpers and the low-level markup text builders.
"""

from svg_writer.utils.logger import JsonFormatter, LogCapture, get_logger, setup_logger
from svg_writer.utils.markup import (
    attribute, elem_end, elem_start, empty_elem_end, format_value
)

__all__ = [
    'JsonFormatter', 'LogCapture', 'get_logger', 'setup_logger',
    'attribute', 'elem_end', 'elem_start', 'empty_elem_end',
    'format_value',
]
