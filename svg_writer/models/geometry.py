"""
Geometry value types and the document coordinate transform.

User-space coordinates are mapped into SVG space by ``transform_x``,
``transform_y`` and ``transform_scale`` according to a ``Layout``: the
origin offset is added, the result scaled, and the axes mirrored against
the document size for origins on the right and/or bottom edge.
"""

import math
from enum import Enum, auto
from typing import Iterable, List, NamedTuple, Optional, Sequence, Tuple, Union

from svg_writer.core import CONFIG
from svg_writer.utils.logger import get_logger

# Configure logger
logger = get_logger(__name__)


class Point(NamedTuple):
    """A position in user space."""
    x: float = 0.0
    y: float = 0.0

    def shifted(self, delta: 'Point') -> 'Point':
        """Return this point moved by ``delta``."""
        return Point(self.x + delta.x, self.y + delta.y)


PointLike = Union[Point, Tuple[float, float]]


def as_point(value: PointLike) -> Point:
    """Coerce a ``(x, y)`` pair into a Point."""
    if isinstance(value, Point):
        return value
    x, y = value
    return Point(x, y)


def valid_num(value: float) -> bool:
    """True unless ``value`` is NaN or infinite."""
    return not (math.isinf(value) or math.isnan(value))


def valid_point(point: Point) -> bool:
    return valid_num(point.x) and valid_num(point.y)


def almost_equal(a: float, b: float, eps: Optional[float] = None) -> bool:
    """Compare two floats with an absolute tolerance."""
    if eps is None:
        eps = CONFIG["epsilon"]
    return math.fabs(a - b) < eps


def warn_invalid(owner: str, *values: float) -> bool:
    """
    Log a warning if any value is not finite.

    Args:
        owner: Name of the constructor or method receiving the values
        *values: Numbers to check

    Returns:
        True if all values are finite
    """
    if all(valid_num(v) for v in values):
        return True
    logger.warning("Infs or NaNs provided to %s.", owner)
    return False


class Dimensions:
    """Width and height of a document or of a bounding box."""

    __slots__ = ('width', 'height')

    def __init__(self, width: float = 0.0, height: Optional[float] = None):
        """
        Initialize dimensions.

        Args:
            width: Width, or the combined value for both sides if ``height``
                is omitted
            height: Height
        """
        if height is None:
            height = width
        self.width = width
        self.height = height
        warn_invalid("Dimensions()", width, height)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Dimensions):
            return NotImplemented
        return self.width == other.width and self.height == other.height

    def __repr__(self) -> str:
        return f"Dimensions(width={self.width!r}, height={self.height!r})"


def get_min_point(points: Sequence[Point]) -> Optional[Point]:
    """Component-wise minimum of ``points``, or None if empty."""
    if not points:
        return None
    return Point(min(p.x for p in points), min(p.y for p in points))


def get_max_point(points: Sequence[Point]) -> Optional[Point]:
    """Component-wise maximum of ``points``, or None if empty."""
    if not points:
        return None
    return Point(max(p.x for p in points), max(p.y for p in points))


class Origin(Enum):
    """Corner of the document that user space is anchored to."""
    TOP_LEFT = auto()
    BOTTOM_LEFT = auto()
    TOP_RIGHT = auto()
    BOTTOM_RIGHT = auto()


_RIGHT_ORIGINS = (Origin.TOP_RIGHT, Origin.BOTTOM_RIGHT)
_BOTTOM_ORIGINS = (Origin.BOTTOM_LEFT, Origin.BOTTOM_RIGHT)


class Layout:
    """
    Dimensions, scale, origin and origin offset of a document.

    A layout is handed to every render call; shapes never emit a raw
    coordinate without passing it through the transform functions below.
    """

    __slots__ = ('dimensions', 'origin', 'scale', 'origin_offset')

    def __init__(
        self,
        dimensions: Optional[Dimensions] = None,
        origin: Origin = Origin.BOTTOM_LEFT,
        scale: float = 1.0,
        origin_offset: PointLike = Point(0, 0)
    ):
        """
        Initialize a layout.

        Args:
            dimensions: Document size, 400x300 by default
            origin: Corner the user-space origin sits in
            scale: Factor applied to every coordinate and length
            origin_offset: Offset added to user coordinates before scaling
        """
        self.dimensions = dimensions if dimensions is not None else Dimensions(400, 300)
        self.origin = origin
        self.scale = scale
        self.origin_offset = as_point(origin_offset)
        warn_invalid("Layout()", scale, self.origin_offset.x, self.origin_offset.y)

    @classmethod
    def neutral(cls) -> 'Layout':
        """A layout that leaves coordinates untouched."""
        return cls(Dimensions(), Origin.TOP_LEFT)

    def __repr__(self) -> str:
        return (
            f"Layout(dimensions={self.dimensions!r}, origin={self.origin.name}, "
            f"scale={self.scale!r}, origin_offset={self.origin_offset!r})"
        )


def transform_x(x: float, layout: Layout) -> float:
    """Map a user-space x coordinate into SVG space."""
    if layout.origin in _RIGHT_ORIGINS:
        return float(layout.dimensions.width - ((x + layout.origin_offset.x) * layout.scale))
    return float((layout.origin_offset.x + x) * layout.scale)


def transform_y(y: float, layout: Layout) -> float:
    """Map a user-space y coordinate into SVG space."""
    if layout.origin in _BOTTOM_ORIGINS:
        return float(layout.dimensions.height - ((y + layout.origin_offset.y) * layout.scale))
    return float((layout.origin_offset.y + y) * layout.scale)


def transform_scale(dimension: float, layout: Layout) -> float:
    """Scale a length (radius, width, font size ...) into SVG space."""
    return float(dimension * layout.scale)


def offset_points(points: Iterable[Point], delta: Point) -> List[Point]:
    return [p.shifted(delta) for p in points]
