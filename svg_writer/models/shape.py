"""
Shape models for SVG generation.

Every shape renders itself against a ``Layout``, can be moved with
``offset`` and deep-copied with ``clone``. Surface shapes carry a fill in
addition to their stroke; markerable shapes (lines and polylines) may
reference start/mid/end markers, which are shared rather than owned.
"""

import copy
import random
import string
from enum import Enum
from typing import TYPE_CHECKING, Dict, Iterable, List, Optional, Sequence

from typing_extensions import Self

from svg_writer.core import get_random_source
from svg_writer.models.color import Defaults
from svg_writer.models.geometry import (
    Dimensions, Layout, Point, PointLike, as_point, get_max_point, get_min_point,
    offset_points, transform_scale, transform_x, transform_y, valid_point, warn_invalid
)
from svg_writer.models.style import Fill, Font, Stroke
from svg_writer.utils.logger import get_logger
from svg_writer.utils.markup import attribute, elem_end, elem_start, empty_elem_end

if TYPE_CHECKING:
    from svg_writer.models.marker import Marker

# Configure logger
logger = get_logger(__name__)

# Constants
ID_ALPHABET = string.digits + string.ascii_uppercase + string.ascii_lowercase
DEFAULT_ID_LENGTH = 8


class Identifiable:
    """Anything that may carry an ``id`` attribute."""

    def __init__(self, identifier: str = ""):
        self._id = identifier

    @property
    def id(self) -> str:
        return self._id

    @id.setter
    def id(self, value: str) -> None:
        self._id = value or ""

    @staticmethod
    def random(length: int = DEFAULT_ID_LENGTH, rng: Optional[random.Random] = None) -> str:
        """
        Generate a random alphanumeric identifier.

        Args:
            length: Number of characters
            rng: Random source, the shared process-wide one by default

        Returns:
            Identifier string
        """
        rng = rng or get_random_source()
        return "".join(rng.choice(ID_ALPHABET) for _ in range(length))

    def _render_id(self) -> str:
        if not self._id:
            return ""
        return attribute("id", self._id)


class Shape(Identifiable):
    """
    Base class for all shapes.

    Holds the stroke, an optional inline style, the visibility flag and the
    z order. Shapes with a smaller z are drawn first; shapes with equal z
    keep the order they were appended to a document in.
    """

    def __init__(
        self,
        stroke: Optional[Stroke] = None,
        z: int = 0,
        shape_id: str = "",
        style: str = ""
    ):
        """
        Initialize a shape.

        Args:
            stroke: Outline, none by default
            z: Paint order priority
            shape_id: Value of the ``id`` attribute, omitted if empty
            style: Inline CSS written to the ``style`` attribute
        """
        super().__init__(shape_id)
        self._stroke = stroke if stroke is not None else Stroke()
        self._style = style
        self._visible = True
        self.z = z

    @property
    def stroke(self) -> Stroke:
        return self._stroke

    @stroke.setter
    def stroke(self, value: Stroke) -> None:
        self._stroke = value

    @property
    def style(self) -> str:
        return self._style

    @style.setter
    def style(self, value: str) -> None:
        self._style = value or ""

    @property
    def visible(self) -> bool:
        return self._visible

    def hide(self) -> None:
        self._visible = False

    def show(self) -> None:
        self._visible = True

    def render(self, layout: Layout) -> str:
        """
        Render the shape element.

        Args:
            layout: Coordinate transform of the document

        Returns:
            Markup fragment for this shape
        """
        raise NotImplementedError("Subclasses must implement render")

    def offset(self, delta: PointLike) -> None:
        """Move every coordinate of the shape by ``delta``."""
        raise NotImplementedError("Subclasses must implement offset")

    def used_markers(self) -> List['Marker']:
        """Markers this shape refers to (directly or through its parts)."""
        return []

    def clone(self) -> 'Shape':
        """
        Create a deep copy of the shape.

        Referenced markers are shared with the copy, everything else is
        duplicated.
        """
        memo: Dict[int, object] = {id(m): m for m in self._shared_references()}
        return copy.deepcopy(self, memo)

    def _shared_references(self) -> Iterable[object]:
        return ()

    def _render_common(self, layout: Layout) -> str:
        parts = self._stroke.render(layout)
        if self._style:
            parts += attribute("style", self._style)
        if not self._visible:
            parts += attribute("visibility", "hidden")
        return parts

    def _checked_delta(self, delta: PointLike) -> Point:
        delta = as_point(delta)
        warn_invalid(f"{type(self).__name__}.offset()", delta.x, delta.y)
        return delta

    def __str__(self) -> str:
        return self.render(Layout())

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(id={self._id!r}, z={self.z})"


class SurfaceShape(Shape):
    """Shape with an interior that can be filled."""

    def __init__(self, fill: Optional[Fill] = None, stroke: Optional[Stroke] = None, **kwargs):
        super().__init__(stroke, **kwargs)
        self._fill = fill if fill is not None else Fill()

    @property
    def fill(self) -> Fill:
        return self._fill

    @fill.setter
    def fill(self, value: Fill) -> None:
        self._fill = value

    def _render_common(self, layout: Layout) -> str:
        return super()._render_common(layout) + self._fill.render(layout)


class Markerable:
    """Mixin for shapes that can reference start, mid and end markers."""

    _marker_start: Optional['Marker'] = None
    _marker_mid: Optional['Marker'] = None
    _marker_end: Optional['Marker'] = None

    def set_start_marker(self, marker: Optional['Marker']) -> None:
        self._marker_start = marker

    def set_mid_marker(self, marker: Optional['Marker']) -> None:
        self._marker_mid = marker

    def set_end_marker(self, marker: Optional['Marker']) -> None:
        self._marker_end = marker

    @property
    def start_marker(self) -> Optional['Marker']:
        return self._marker_start

    @property
    def mid_marker(self) -> Optional['Marker']:
        return self._marker_mid

    @property
    def end_marker(self) -> Optional['Marker']:
        return self._marker_end

    def _marker_slots(self):
        return (
            ("marker-start", self._marker_start),
            ("marker-mid", self._marker_mid),
            ("marker-end", self._marker_end),
        )

    def _render_markers(self) -> str:
        return "".join(
            f'{name}="url(#{marker.id})" '
            for name, marker in self._marker_slots()
            if marker is not None and marker.valid()
        )

    def used_markers(self) -> List['Marker']:
        return [
            marker for _, marker in self._marker_slots()
            if marker is not None and marker.valid()
        ]

    def _shared_references(self) -> Iterable[object]:
        return [marker for _, marker in self._marker_slots() if marker is not None]


class Circle(SurfaceShape):
    """Circle given by its center and diameter."""

    def __init__(
        self,
        center: PointLike,
        diameter: float,
        fill: Optional[Fill] = None,
        stroke: Optional[Stroke] = None,
        **kwargs
    ):
        super().__init__(fill, stroke, **kwargs)
        self._center = as_point(center)
        self._radius = diameter / 2
        warn_invalid("Circle()", self._center.x, self._center.y, diameter)

    @property
    def center(self) -> Point:
        return self._center

    @property
    def radius(self) -> float:
        return self._radius

    def render(self, layout: Layout) -> str:
        return (
            elem_start("circle") + self._render_id() +
            attribute("cx", transform_x(self._center.x, layout)) +
            attribute("cy", transform_y(self._center.y, layout)) +
            attribute("r", transform_scale(self._radius, layout)) +
            self._render_common(layout) + empty_elem_end()
        )

    def offset(self, delta: PointLike) -> None:
        self._center = self._center.shifted(self._checked_delta(delta))


class Ellipse(SurfaceShape):
    """Axis-aligned ellipse given by its center, width and height."""

    def __init__(
        self,
        center: PointLike,
        width: float,
        height: float,
        fill: Optional[Fill] = None,
        stroke: Optional[Stroke] = None,
        **kwargs
    ):
        super().__init__(fill, stroke, **kwargs)
        self._center = as_point(center)
        self._radius_width = width / 2.0
        self._radius_height = height / 2.0
        warn_invalid("Ellipse()", self._center.x, self._center.y, width, height)

    @property
    def center(self) -> Point:
        return self._center

    def render(self, layout: Layout) -> str:
        return (
            elem_start("ellipse") + self._render_id() +
            attribute("cx", transform_x(self._center.x, layout)) +
            attribute("cy", transform_y(self._center.y, layout)) +
            attribute("rx", transform_scale(self._radius_width, layout)) +
            attribute("ry", transform_scale(self._radius_height, layout)) +
            self._render_common(layout) + empty_elem_end()
        )

    def offset(self, delta: PointLike) -> None:
        self._center = self._center.shifted(self._checked_delta(delta))


class Rectangle(SurfaceShape):
    """Rectangle with optional rounded corners."""

    def __init__(
        self,
        corner: PointLike,
        width: float,
        height: float,
        fill: Optional[Fill] = None,
        stroke: Optional[Stroke] = None,
        rx: float = 0.0,
        ry: float = 0.0,
        **kwargs
    ):
        """
        Initialize a rectangle.

        Args:
            corner: Corner the rectangle extends from (upper left in SVG space)
            width: Width of the rectangle
            height: Height of the rectangle
            fill: Fill style of the rectangular area
            stroke: Stroke of the boundary contour
            rx: Corner radius in x direction
            ry: Corner radius in y direction
            **kwargs: Additional shape parameters
        """
        super().__init__(fill, stroke, **kwargs)
        self._corner = as_point(corner)
        self._width = width
        self._height = height
        self._rx = rx
        self._ry = ry
        warn_invalid("Rectangle()", self._corner.x, self._corner.y, width, height, rx, ry)

    @property
    def corner(self) -> Point:
        return self._corner

    @property
    def width(self) -> float:
        return self._width

    @property
    def height(self) -> float:
        return self._height

    def render(self, layout: Layout) -> str:
        parts = (
            elem_start("rect") + self._render_id() +
            attribute("x", transform_x(self._corner.x, layout)) +
            attribute("y", transform_y(self._corner.y, layout))
        )
        if self._rx > 0.0 or self._ry > 0.0:
            parts += (
                attribute("rx", transform_scale(self._rx, layout)) +
                attribute("ry", transform_scale(self._ry, layout))
            )
        return (
            parts +
            attribute("width", transform_scale(self._width, layout)) +
            attribute("height", transform_scale(self._height, layout)) +
            self._render_common(layout) + empty_elem_end()
        )

    def offset(self, delta: PointLike) -> None:
        self._corner = self._corner.shifted(self._checked_delta(delta))

    def center_at(self, position: PointLike) -> 'Rectangle':
        """
        Create a copy of this rectangle centered on ``position``.

        Args:
            position: New center

        Returns:
            New rectangle with the same size, fill, stroke and corner radii
        """
        position = as_point(position)
        warn_invalid("Rectangle.center_at()", position.x, position.y)
        return Rectangle(
            Point(position.x - self._width / 2.0, position.y - self._height / 2.0),
            self._width, self._height, self._fill, self._stroke,
            rx=self._rx, ry=self._ry
        )


class Line(Markerable, Shape):
    """Straight line segment."""

    def __init__(self, start: PointLike, end: PointLike, stroke: Optional[Stroke] = None, **kwargs):
        super().__init__(stroke, **kwargs)
        self._start = as_point(start)
        self._end = as_point(end)
        warn_invalid("Line()", self._start.x, self._start.y, self._end.x, self._end.y)

    @property
    def start(self) -> Point:
        return self._start

    @property
    def end(self) -> Point:
        return self._end

    def render(self, layout: Layout) -> str:
        return (
            elem_start("line") + self._render_id() +
            attribute("x1", transform_x(self._start.x, layout)) +
            attribute("y1", transform_y(self._start.y, layout)) +
            attribute("x2", transform_x(self._end.x, layout)) +
            attribute("y2", transform_y(self._end.y, layout)) +
            self._render_common(layout) + self._render_markers() + empty_elem_end()
        )

    def offset(self, delta: PointLike) -> None:
        delta = self._checked_delta(delta)
        self._start = self._start.shifted(delta)
        self._end = self._end.shifted(delta)


def _check_points(owner: str, points: Sequence[Point]) -> None:
    if not all(valid_point(p) for p in points):
        logger.warning("Infs or NaNs provided to %s.", owner)


def _render_point_list(points: Sequence[Point], layout: Layout) -> str:
    return "".join(
        f"{transform_x(p.x, layout):g},{transform_y(p.y, layout):g} " for p in points
    )


class Polygon(SurfaceShape):
    """Closed polygon; the element closes the outline implicitly."""

    def __init__(
        self,
        points: Optional[Iterable[PointLike]] = None,
        fill: Optional[Fill] = None,
        stroke: Optional[Stroke] = None,
        **kwargs
    ):
        super().__init__(fill, stroke, **kwargs)
        self._points: List[Point] = [as_point(p) for p in points or ()]
        _check_points("Polygon()", self._points)

    @property
    def points(self) -> List[Point]:
        return list(self._points)

    def add_point(self, point: PointLike) -> Self:
        point = as_point(point)
        warn_invalid("Polygon.add_point()", point.x, point.y)
        self._points.append(point)
        return self

    def render(self, layout: Layout) -> str:
        return (
            elem_start("polygon") + self._render_id() +
            'points="' + _render_point_list(self._points, layout) + '" ' +
            self._render_common(layout) + empty_elem_end()
        )

    def offset(self, delta: PointLike) -> None:
        self._points = offset_points(self._points, self._checked_delta(delta))


class Path(SurfaceShape):
    """
    Path made of closed subpaths, filled with the even-odd rule.

    Points are always appended to the last subpath; ``start_new_sub_path``
    only opens a new one when the current subpath already has points.
    """

    def __init__(
        self,
        points: Optional[Iterable[PointLike]] = None,
        fill: Optional[Fill] = None,
        stroke: Optional[Stroke] = None,
        **kwargs
    ):
        super().__init__(fill, stroke, **kwargs)
        self._paths: List[List[Point]] = []
        self.start_new_sub_path()
        if points is not None:
            self._paths[-1] = [as_point(p) for p in points]
            _check_points("Path()", self._paths[-1])

    @property
    def sub_paths(self) -> List[List[Point]]:
        return [list(sub_path) for sub_path in self._paths]

    def add_point(self, point: PointLike) -> Self:
        point = as_point(point)
        warn_invalid("Path.add_point()", point.x, point.y)
        self._paths[-1].append(point)
        return self

    def start_new_sub_path(self) -> Self:
        if not self._paths or self._paths[-1]:
            self._paths.append([])
        return self

    def render(self, layout: Layout) -> str:
        data = "".join(
            "M" + _render_point_list(sub_path, layout) + "z "
            for sub_path in self._paths if sub_path
        )
        return (
            elem_start("path") + self._render_id() +
            'd="' + data + '" ' + 'fill-rule="evenodd" ' +
            self._render_common(layout) + empty_elem_end()
        )

    def offset(self, delta: PointLike) -> None:
        delta = self._checked_delta(delta)
        self._paths = [offset_points(sub_path, delta) for sub_path in self._paths]


class Polyline(Markerable, Shape):
    """Open chain of line segments, never filled."""

    def __init__(self, points: Optional[Iterable[PointLike]] = None, stroke: Optional[Stroke] = None, **kwargs):
        super().__init__(stroke, **kwargs)
        self._points: List[Point] = [as_point(p) for p in points or ()]
        _check_points("Polyline()", self._points)

    @property
    def points(self) -> List[Point]:
        return list(self._points)

    def add_point(self, point: PointLike) -> Self:
        point = as_point(point)
        warn_invalid("Polyline.add_point()", point.x, point.y)
        self._points.append(point)
        return self

    def render(self, layout: Layout) -> str:
        if not self._points:
            return ""
        return (
            elem_start("polyline") + self._render_id() + attribute("fill", "none") +
            'points="' + _render_point_list(self._points, layout) + '" ' +
            self._render_common(layout) + self._render_markers() + empty_elem_end()
        )

    def used_markers(self) -> List['Marker']:
        if not self._points:
            return []
        return super().used_markers()

    def offset(self, delta: PointLike) -> None:
        self._points = offset_points(self._points, self._checked_delta(delta))


class TextAnchor(Enum):
    """Horizontal alignment; NONE writes no attribute."""
    START = "start"
    MIDDLE = "middle"
    END = "end"
    NONE = None


class DominantBaseline(Enum):
    """Vertical alignment; NONE writes no attribute (browser default "auto")."""
    TEXT_BOTTOM = "text-bottom"
    ALPHABETIC = "alphabetic"
    IDEOGRAPHIC = "ideographic"
    MIDDLE = "middle"
    CENTRAL = "central"
    MATHEMATICAL = "mathematical"
    HANGING = "hanging"
    TEXT_TOP = "text-top"
    NONE = None


class Text(SurfaceShape):
    """Single line of text, centered on its origin by default."""

    def __init__(
        self,
        origin: PointLike,
        content: str,
        fill: Optional[Fill] = None,
        font: Optional[Font] = None,
        stroke: Optional[Stroke] = None,
        anchor: TextAnchor = TextAnchor.MIDDLE,
        baseline: DominantBaseline = DominantBaseline.MIDDLE,
        **kwargs
    ):
        """
        Initialize a text element.

        Args:
            origin: Anchor position of the text
            content: Text written between the tags, unescaped
            fill: Text color
            font: Font size and family
            stroke: Outline of the glyphs
            anchor: Horizontal alignment
            baseline: Vertical alignment
            **kwargs: Additional shape parameters
        """
        super().__init__(fill, stroke, **kwargs)
        self._origin = as_point(origin)
        self._content = content
        self._font = font if font is not None else Font()
        self._anchor = anchor
        self._baseline = baseline
        warn_invalid("Text()", self._origin.x, self._origin.y)
        if not content:
            logger.warning("Empty string provided to Text().")

    @property
    def origin(self) -> Point:
        return self._origin

    @property
    def content(self) -> str:
        return self._content

    @property
    def font(self) -> Font:
        return self._font

    @font.setter
    def font(self, value: Font) -> None:
        self._font = value

    def render(self, layout: Layout) -> str:
        parts = elem_start("text") + self._render_id()
        if self._anchor.value is not None:
            parts += attribute("text-anchor", self._anchor.value)
        if self._baseline.value is not None:
            parts += attribute("dominant-baseline", self._baseline.value)
        return (
            parts +
            attribute("x", transform_x(self._origin.x, layout)) +
            attribute("y", transform_y(self._origin.y, layout)) +
            self._render_common(layout) + self._font.render(layout) +
            ">" + self._content + elem_end("text")
        )

    def offset(self, delta: PointLike) -> None:
        self._origin = self._origin.shifted(self._checked_delta(delta))


class LineChart(Shape):
    """
    Simple line chart made of polylines.

    Each series is drawn shifted by the margin, with a small black dot on
    every vertex, followed by an L-shaped axis 10% larger than the data.
    """

    def __init__(self, margin: Optional[Dimensions] = None, axis_stroke: Optional[Stroke] = None, **kwargs):
        super().__init__(**kwargs)
        self._margin = margin if margin is not None else Dimensions()
        self._axis_stroke = axis_stroke if axis_stroke is not None else Stroke(0.5, Defaults.PURPLE)
        self._polylines: List[Polyline] = []

    @property
    def polylines(self) -> List[Polyline]:
        return list(self._polylines)

    def add_polyline(self, polyline: Polyline) -> Self:
        """Add a data series; series without points are ignored."""
        if polyline.points:
            self._polylines.append(polyline.clone())
        return self

    def data_dimensions(self) -> Optional[Dimensions]:
        """Size of the bounding box of all data points, None without data."""
        points = [p for polyline in self._polylines for p in polyline._points]
        low = get_min_point(points)
        high = get_max_point(points)
        if low is None or high is None:
            return None
        return Dimensions(high.x - low.x, high.y - low.y)

    def render(self, layout: Layout) -> str:
        dimensions = self.data_dimensions()
        if dimensions is None:
            return ""
        return (
            "".join(self._render_series(polyline, dimensions, layout) for polyline in self._polylines) +
            self._render_axis(dimensions, layout)
        )

    def _render_series(self, polyline: Polyline, dimensions: Dimensions, layout: Layout) -> str:
        shifted = polyline.clone()
        shifted.offset(Point(self._margin.width, self._margin.height))
        vertex_radius = dimensions.height / 30.0
        vertices = [
            Circle(point, vertex_radius * 2, Fill(Defaults.BLACK))
            for point in shifted._points
        ]
        return shifted.render(layout) + "".join(v.render(layout) for v in vertices)

    def _render_axis(self, dimensions: Dimensions, layout: Layout) -> str:
        width = dimensions.width * 1.1
        height = dimensions.height * 1.1
        left = self._margin.width
        bottom = self._margin.height
        axis = Polyline(
            [Point(left, bottom + height), Point(left, bottom), Point(left + width, bottom)],
            self._axis_stroke
        )
        return axis.render(layout)

    def used_markers(self) -> List['Marker']:
        return [marker for polyline in self._polylines for marker in polyline.used_markers()]

    def _shared_references(self) -> Iterable[object]:
        return [ref for polyline in self._polylines for ref in polyline._shared_references()]

    def offset(self, delta: PointLike) -> None:
        delta = self._checked_delta(delta)
        for polyline in self._polylines:
            polyline.offset(delta)
