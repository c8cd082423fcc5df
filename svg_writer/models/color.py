"""
Color model for SVG output.
A color is either an RGB triple, rendered as ``rgb(r,g,b)``, or the
transparent sentinel, rendered as ``none``.
"""

import random
from enum import Enum, auto
from typing import Dict, Optional, Tuple, Union

from PIL import ImageColor

from svg_writer.core import SVGWriterError, get_random_source

# Type definitions
RGB = Tuple[int, int, int]


class Defaults(Enum):
    """Predefined colors."""
    TRANSPARENT = auto()
    AQUA = auto()
    BLACK = auto()
    GRAY = auto()
    BLUE = auto()
    BROWN = auto()
    CYAN = auto()
    FUCHSIA = auto()
    GREEN = auto()
    LIME = auto()
    MAGENTA = auto()
    ORANGE = auto()
    PURPLE = auto()
    RED = auto()
    SILVER = auto()
    WHITE = auto()
    YELLOW = auto()
    RANDOM = auto()


_DEFAULT_RGB: Dict[Defaults, RGB] = {
    Defaults.AQUA: (0, 255, 255),
    Defaults.BLACK: (0, 0, 0),
    Defaults.GRAY: (127, 127, 127),
    Defaults.BLUE: (0, 0, 255),
    Defaults.BROWN: (165, 42, 42),
    Defaults.CYAN: (0, 255, 255),
    Defaults.FUCHSIA: (255, 0, 255),
    Defaults.GREEN: (0, 128, 0),
    Defaults.LIME: (0, 255, 0),
    Defaults.MAGENTA: (255, 0, 255),
    Defaults.ORANGE: (255, 165, 0),
    Defaults.PURPLE: (128, 0, 128),
    Defaults.RED: (255, 0, 0),
    Defaults.SILVER: (192, 192, 192),
    Defaults.WHITE: (255, 255, 255),
    Defaults.YELLOW: (255, 255, 0),
}


class ColorError(SVGWriterError, ValueError):
    """Raised when a color value cannot be interpreted."""
    pass


ColorValue = Union['Color', Defaults, str, RGB]


class Color:
    """
    Immutable color value.

    Construct from a ``Defaults`` member, three channel values, an
    ``(r, g, b)`` tuple or a CSS color name/hex string.
    """

    __slots__ = ('_rgb',)

    def __init__(
        self,
        value: Union[Defaults, str, RGB, int] = Defaults.TRANSPARENT,
        green: Optional[int] = None,
        blue: Optional[int] = None
    ):
        """
        Initialize a color.

        Args:
            value: Predefined color, color name, RGB tuple, or the red channel
                when ``green`` and ``blue`` are given
            green: Green channel (0-255)
            blue: Blue channel (0-255)

        Raises:
            ColorError: If the value cannot be parsed
        """
        if green is not None or blue is not None:
            if green is None or blue is None:
                raise ColorError("Color() needs all three channels")
            self._rgb: Optional[RGB] = (int(value), int(green), int(blue))
        elif isinstance(value, Defaults):
            self._rgb = self._from_default(value)
        elif isinstance(value, str):
            self._rgb = self._parse_name(value)
        elif isinstance(value, tuple) and len(value) == 3:
            self._rgb = tuple(int(c) for c in value)
        else:
            raise ColorError(f"Unsupported color value: {value!r}")

    @staticmethod
    def _from_default(default: Defaults) -> Optional[RGB]:
        if default is Defaults.TRANSPARENT:
            return None
        if default is Defaults.RANDOM:
            return Color.random()._rgb
        return _DEFAULT_RGB[default]

    @staticmethod
    def _parse_name(name: str) -> Optional[RGB]:
        if name.strip().lower() in ("none", "transparent"):
            return None
        try:
            return ImageColor.getrgb(name.strip())[:3]
        except ValueError as e:
            raise ColorError(f"Unknown color: {name!r}") from e

    @classmethod
    def from_name(cls, name: str) -> 'Color':
        """
        Create a color from a CSS color name or hex string.

        Args:
            name: Color name such as ``"steelblue"`` or ``"#ff8800"``

        Returns:
            Color instance
        """
        return cls(name)

    @classmethod
    def random(cls, rng: Optional[random.Random] = None) -> 'Color':
        """
        Create a random opaque color.

        Args:
            rng: Random source, the shared process-wide one by default

        Returns:
            Color instance
        """
        rng = rng or get_random_source()
        return cls(rng.randrange(256), rng.randrange(256), rng.randrange(256))

    @classmethod
    def coerce(cls, value: ColorValue) -> 'Color':
        """Return ``value`` as a Color, converting it if necessary."""
        if isinstance(value, Color):
            return value
        return cls(value)

    @property
    def transparent(self) -> bool:
        return self._rgb is None

    @property
    def rgb(self) -> Optional[RGB]:
        """Channel values, None for the transparent color."""
        return self._rgb

    def render(self, layout=None) -> str:
        """SVG paint value of this color."""
        if self._rgb is None:
            return "none"
        r, g, b = self._rgb
        return f"rgb({r},{g},{b})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return self._rgb == other._rgb

    def __hash__(self) -> int:
        return hash(self._rgb)

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        if self._rgb is None:
            return "Color(Defaults.TRANSPARENT)"
        return "Color(%d, %d, %d)" % self._rgb


TRANSPARENT = Color(Defaults.TRANSPARENT)
