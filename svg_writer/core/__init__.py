"""
Core configuration for svg_writer.
Holds library/version information and the settings shared by the
serialization code.
"""

import os
import random
from typing import Any, Dict, Optional

# Version information
LIBRARY_NAME = "svg-writer"
LIBRARY_VERSION = "1.0.0"
LIBRARY_URL = "https://github.com/CodeFinder2/svg-writer"
SVG_VERSION = "1.1"

# Global configuration settings
CONFIG: Dict[str, Any] = {
    # Document header
    "generator_name": LIBRARY_NAME,
    "generator_url": LIBRARY_URL,
    "library_version": LIBRARY_VERSION,
    "svg_version": SVG_VERSION,

    # Tolerance used when comparing marker geometry
    "epsilon": 1e-10,

    # Logging
    "log_level": os.environ.get("SVG_WRITER_LOG_LEVEL", "WARNING"),
}


# Shared random source for generated ids and colors, created on first use
_random_source: Optional[random.Random] = None


class SVGWriterError(Exception):
    """Base exception for svg_writer errors."""
    pass


def get_random_source() -> random.Random:
    """
    Get the process-wide random source.

    The source is seeded from the operating system the first time it is
    requested, unless one was installed with ``set_random_source``.
    """
    global _random_source
    if _random_source is None:
        _random_source = random.Random()
    return _random_source


def set_random_source(source: Optional[random.Random]) -> None:
    """Install a random source (e.g. a seeded one in tests); None resets it."""
    global _random_source
    _random_source = source


def library_name() -> str:
    """Name written into the generator comment of every document."""
    return CONFIG["generator_name"]


def library_version() -> str:
    """Version written into the generator comment of every document."""
    return CONFIG["library_version"]


def svg_version() -> str:
    """SVG version declared by the emitted documents."""
    return CONFIG["svg_version"]


__all__ = [
    'CONFIG',
    'SVGWriterError',
    'get_random_source',
    'set_random_source',
    'LIBRARY_NAME',
    'LIBRARY_VERSION',
    'LIBRARY_URL',
    'SVG_VERSION',
    'library_name',
    'library_version',
    'svg_version',
]
