"""
Markers: reusable groups of shapes drawn at the vertices of lines and
polylines, and the registry that collects them for a document's
``<defs>`` block.
"""

import numbers
from typing import Dict, Iterator, List, Optional, Union

from svg_writer.core import SVGWriterError
from svg_writer.models.geometry import Layout, almost_equal, warn_invalid
from svg_writer.models.shape import Identifiable, Shape
from svg_writer.utils.logger import get_logger
from svg_writer.utils.markup import attribute, elem_start

# Configure logger
logger = get_logger(__name__)

# Constants
ORIENT_KEYWORDS = ("auto", "auto-start-reverse")


class MarkerError(SVGWriterError, ValueError):
    """Raised for markers that cannot be written."""
    pass


class Marker(Identifiable):
    """
    Named bundle of shapes used as an arrow head, dot or similar decoration.

    Shapes referencing a marker do not own it: clones of such shapes point
    to the very same Marker object. Contained shapes are always rendered in
    marker space, i.e. with a neutral layout.
    """

    def __init__(
        self,
        marker_id: str,
        width: float,
        height: float,
        ref_x: float,
        ref_y: float,
        shape: Optional[Shape] = None,
        orientation: Union[str, float] = "auto"
    ):
        """
        Initialize a marker.

        Args:
            marker_id: Identifier referenced through ``url(#id)``
            width: Marker viewport width
            height: Marker viewport height
            ref_x: X coordinate of the reference point
            ref_y: Y coordinate of the reference point
            shape: Optional first shape, cloned into the marker
            orientation: "auto", "auto-start-reverse" or an angle in degrees

        Raises:
            MarkerError: If the orientation is not understood
        """
        super().__init__(marker_id)
        self._width = width
        self._height = height
        self._ref_x = ref_x
        self._ref_y = ref_y
        self._shapes: List[Shape] = []
        self._orientation = "auto"
        warn_invalid("Marker()", width, height, ref_x, ref_y)

        self.set_orientation(orientation)
        if shape is not None:
            self.add(shape)

    @property
    def width(self) -> float:
        return self._width

    @property
    def height(self) -> float:
        return self._height

    @property
    def ref_x(self) -> float:
        return self._ref_x

    @property
    def ref_y(self) -> float:
        return self._ref_y

    @property
    def orientation(self) -> str:
        return self._orientation

    def set_orientation(self, orientation: Union[str, float]) -> None:
        """
        Set the ``orient`` attribute.

        Args:
            orientation: Keyword or angle in degrees

        Raises:
            MarkerError: For strings other than the supported keywords
        """
        if isinstance(orientation, str):
            if orientation not in ORIENT_KEYWORDS:
                raise MarkerError(f"Invalid marker orientation: {orientation!r}")
            self._orientation = orientation
        elif isinstance(orientation, numbers.Real):
            warn_invalid("Marker.set_orientation()", orientation)
            self._orientation = f"{orientation:f}"
        else:
            raise MarkerError(f"Invalid marker orientation: {orientation!r}")

    def add(self, shape: Shape) -> 'Marker':
        """Clone ``shape`` into the marker."""
        self._shapes.append(shape.clone())
        return self

    def valid(self) -> bool:
        return bool(self._id)

    def render(self, layout: Optional[Layout] = None) -> str:
        """
        Render the marker definition.

        The layout is accepted for symmetry with shapes; contained shapes are
        always rendered with a neutral layout.

        Raises:
            MarkerError: If the marker has no id
        """
        if not self.valid():
            raise MarkerError("Cannot render a marker without an id")

        neutral = Layout.neutral()
        opening = (
            "\t" + elem_start("marker") + self._render_id() +
            attribute("markerWidth", self._width) +
            attribute("markerHeight", self._height) +
            attribute("refX", self._ref_x) +
            attribute("refY", self._ref_y) +
            attribute("orient", self._orientation) + ">\n"
        )
        body = "\n".join("\t\t" + shape.render(neutral) for shape in self._shapes)
        return opening + body + "\t\t</marker>\n"

    def shape_texts(self) -> List[str]:
        """Sorted texts of the contained shapes under a neutral layout."""
        neutral = Layout.neutral()
        return sorted(shape.render(neutral) for shape in self._shapes)

    def visually_equals(self, other: 'Marker') -> bool:
        """
        Check whether two markers draw the same thing.

        The id is ignored; geometry is compared within ``CONFIG["epsilon"]``
        and shapes by their rendered text regardless of insertion order.
        """
        if len(self._shapes) != len(other._shapes):
            return False
        if not (almost_equal(self._width, other._width) and
                almost_equal(self._height, other._height) and
                almost_equal(self._ref_x, other._ref_x) and
                almost_equal(self._ref_y, other._ref_y)):
            return False
        return self.shape_texts() == other.shape_texts()

    def __len__(self) -> int:
        return len(self._shapes)

    def __getitem__(self, index: int) -> Shape:
        return self._shapes[index]

    def __iter__(self) -> Iterator[Shape]:
        return iter(self._shapes)

    def __repr__(self) -> str:
        return f"Marker(id={self._id!r}, shapes={len(self._shapes)})"


class MarkerRegistry:
    """
    Markers referenced by the shapes of a document, deduplicated by id.

    The first marker seen for an id wins. A later marker with the same id
    that draws something different is reported as a collision.
    """

    def __init__(self):
        self._markers: Dict[str, Marker] = {}
        self.collisions: List[str] = []

    def collect(self, shape: Shape, layout: Optional[Layout] = None) -> None:
        """
        Register all markers used by ``shape``.

        Markers drawn inside a newly registered marker are collected as
        well, so nested references never dangle.

        Args:
            shape: Shape whose markers are collected
            layout: Layout used to describe the shape in collision reports
        """
        for marker in shape.used_markers():
            known = self._markers.get(marker.id)
            if known is None:
                self._markers[marker.id] = marker
                for inner in marker:
                    self.collect(inner, Layout.neutral())
            elif known is not marker and not known.visually_equals(marker):
                shape_text = shape.render(layout or Layout())
                self.collisions.append(marker.id)
                logger.warning(
                    "Marker collision: id '%s' is used for visually different markers "
                    "(first definition kept), offending shape: %s",
                    marker.id, shape_text.strip(),
                    extra={"marker_id": marker.id, "shape": shape_text}
                )

    def markers(self) -> List[Marker]:
        """Registered markers sorted by id."""
        return [self._markers[key] for key in sorted(self._markers)]

    def render(self) -> str:
        return "".join(marker.render() for marker in self.markers())

    def __len__(self) -> int:
        return len(self._markers)

    def __bool__(self) -> bool:
        return bool(self._markers)
