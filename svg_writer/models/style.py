"""
Styling value types: fill, stroke and font.
Each renders to the attribute fragment it contributes to a shape element.
"""

from typing import List, Optional, Sequence

from svg_writer.models.color import TRANSPARENT, Color, ColorValue
from svg_writer.models.geometry import Layout, transform_scale, warn_invalid
from svg_writer.utils.logger import get_logger
from svg_writer.utils.markup import attribute

# Configure logger
logger = get_logger(__name__)

# Constants
DEFAULT_FONT_SIZE = 12
DEFAULT_FONT_FAMILY = "Verdana"
NO_STROKE = -1


def _check_opacity(owner: str, name: str, value: float) -> None:
    if value < 0 or value > 1:
        logger.warning("%s: %s=%s is out of range [0,1].", owner, name, value)


class Fill:
    """Interior paint of a surface shape."""

    __slots__ = ('_color', '_opacity')

    def __init__(self, color: ColorValue = TRANSPARENT, opacity: float = 1.0):
        """
        Initialize a fill.

        Args:
            color: Fill color, transparent by default
            opacity: Opacity in [0, 1], 1 is fully visible
        """
        self._color = Color.coerce(color)
        self._opacity = opacity
        warn_invalid("Fill()", opacity)
        _check_opacity("Fill()", "opacity", opacity)

    @property
    def color(self) -> Color:
        return self._color

    @property
    def opacity(self) -> float:
        return self._opacity

    def render(self, layout: Layout) -> str:
        parts = attribute("fill", self._color.render(layout))
        if self._opacity < 1.0:
            parts += attribute("fill-opacity", float(self._opacity))
        return parts

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Fill):
            return NotImplemented
        return self._color == other._color and self._opacity == other._opacity

    def __repr__(self) -> str:
        return f"Fill({self._color!r}, opacity={self._opacity!r})"


class Stroke:
    """
    Outline of a shape.

    A negative width means "no stroke": the stroke then contributes no
    attributes at all.
    """

    __slots__ = ('_width', '_color', '_non_scaling', '_miter_limit',
                 '_dash_array', '_dash_offset', '_opacity')

    def __init__(
        self,
        width: float = NO_STROKE,
        color: ColorValue = TRANSPARENT,
        non_scaling: bool = False,
        miter_limit: float = -1,
        dash_array: Optional[Sequence[int]] = None,
        dash_offset: int = 0,
        opacity: float = 1.0
    ):
        """
        Initialize a stroke.

        Args:
            width: Stroke width, negative for no stroke
            color: Stroke color
            non_scaling: Emit ``vector-effect="non-scaling-stroke"``
            miter_limit: Miter limit, negative to leave it unset
            dash_array: Dash and gap lengths
            dash_offset: Offset into the dash pattern
            opacity: Opacity in [0, 1]
        """
        self._width = width
        self._color = Color.coerce(color)
        self._non_scaling = non_scaling
        self._miter_limit = miter_limit
        self._dash_array: List[int] = list(dash_array or [])
        self._dash_offset = dash_offset
        self._opacity = opacity

        warn_invalid("Stroke()", width, miter_limit, opacity)
        _check_opacity("Stroke()", "opacity", opacity)
        if any(d < 0 for d in self._dash_array) or dash_offset < 0:
            logger.warning("Stroke(): dash values must not be negative.")

    @property
    def width(self) -> float:
        return self._width

    @property
    def color(self) -> Color:
        return self._color

    @property
    def non_scaling(self) -> bool:
        return self._non_scaling

    @property
    def miter_limit(self) -> float:
        return self._miter_limit

    @property
    def dash_array(self) -> List[int]:
        return list(self._dash_array)

    @property
    def dash_offset(self) -> int:
        return self._dash_offset

    @property
    def opacity(self) -> float:
        return self._opacity

    @property
    def enabled(self) -> bool:
        return self._width >= 0

    def render(self, layout: Layout) -> str:
        if self._width < 0:
            return ""

        parts = [
            attribute("stroke-width", transform_scale(self._width, layout)),
            attribute("stroke", self._color.render(layout)),
        ]
        if self._miter_limit >= 0:
            parts.append(attribute("stroke-miterlimit", transform_scale(self._miter_limit, layout)))
        parts.append(attribute("stroke-dashoffset", transform_scale(self._dash_offset, layout)))
        if self._dash_array:
            parts.append(attribute("stroke-dasharray", ",".join(str(d) for d in self._dash_array)))
        if self._opacity < 1.0:
            parts.append(attribute("stroke-opacity", float(self._opacity)))
        if self._non_scaling:
            parts.append(attribute("vector-effect", "non-scaling-stroke"))
        return "".join(parts)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Stroke):
            return NotImplemented
        return (
            self._width == other._width and
            self._color == other._color and
            self._non_scaling == other._non_scaling and
            self._miter_limit == other._miter_limit and
            self._dash_array == other._dash_array and
            self._dash_offset == other._dash_offset and
            self._opacity == other._opacity
        )

    def __repr__(self) -> str:
        return f"Stroke(width={self._width!r}, color={self._color!r})"


class Font:
    """Font size and family of a text element."""

    __slots__ = ('size', 'family')

    def __init__(self, size: float = DEFAULT_FONT_SIZE, family: str = DEFAULT_FONT_FAMILY):
        self.size = size
        self.family = family

    def render(self, layout: Layout) -> str:
        return (
            attribute("font-size", transform_scale(self.size, layout)) +
            attribute("font-family", self.family)
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Font):
            return NotImplemented
        return self.size == other.size and self.family == other.family

    def __repr__(self) -> str:
        return f"Font(size={self.size!r}, family={self.family!r})"
