"""
Text builders for the emitted markup.

Every attribute is written as ``name="value" `` with the trailing space
kept, and every element opens with a tab, so the output of a document is
stable byte for byte.
"""

import numbers
from typing import Any


def format_value(value: Any) -> str:
    """
    Format a value the way a default C++ output stream would.

    Numbers are written as doubles with six significant digits (``%g``),
    so large integers switch to exponent notation; strings are written
    unchanged.

    Args:
        value: Number or string to format

    Returns:
        Text representation of the value
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, numbers.Real):
        return format(float(value), "g")
    return str(value)


def attribute(name: str, value: Any, unit: str = "") -> str:
    """Render ``name="value<unit>" ``."""
    return f'{name}="{format_value(value)}{unit}" '


def elem_start(name: str, single: bool = False) -> str:
    """Open an element; ``single`` closes the opening tag immediately."""
    return "\t<" + name + (">\n" if single else " ")


def elem_end(name: str) -> str:
    return "</" + name + ">\n"


def empty_elem_end() -> str:
    return "/>\n"

