"""
Animation elements that target shapes of a document by id.
"""

import copy
from typing import Iterable, List, Optional

from svg_writer.models.geometry import Layout, Point, PointLike, as_point
from svg_writer.models.shape import Identifiable
from svg_writer.utils.logger import get_logger
from svg_writer.utils.markup import attribute, elem_start, empty_elem_end, format_value

# Configure logger
logger = get_logger(__name__)


class Animation(Identifiable):
    """
    Base class for animations.

    Every animation refers to the element it animates through ``href``;
    ``begin``, ``fill`` and ``dur`` are only written when set.
    """

    def __init__(self, href: str, begin: str = "", fill: str = "", dur: str = "", animation_id: str = ""):
        """
        Initialize an animation.

        Args:
            href: Id of the animated element (without ``#``)
            begin: Start time, e.g. ``"2s"`` or ``"click"``
            fill: Either ``"freeze"`` or ``"remove"``
            dur: Duration, e.g. ``"5s"``
            animation_id: Value of the ``id`` attribute, omitted if empty
        """
        super().__init__(animation_id)
        self.href = href
        self.begin = begin
        self.fill = fill
        self.dur = dur

    def render(self, layout: Optional[Layout] = None) -> str:
        raise NotImplementedError("Subclasses must implement render")

    def clone(self) -> 'Animation':
        return copy.deepcopy(self)

    def _render_common(self) -> str:
        if not self.href:
            logger.warning("No href given for animation with id=\"%s\".", self._id,
                           extra={"href": self.href})
        parts = self._render_id() + attribute("href", "#" + self.href)
        if self.begin:
            parts += attribute("begin", self.begin)
        if self.fill:
            parts += attribute("fill", self.fill)
        if self.dur:
            parts += attribute("dur", self.dur)
        return parts

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(href={self.href!r}, id={self._id!r})"


class SetAttributeValue(Animation):
    """Set an attribute of the target element to a fixed value."""

    def __init__(
        self,
        to: str,
        attribute_name: str,
        href: str,
        begin: str = "",
        fill: str = "",
        dur: str = "",
        attribute_type: str = "CSS",
        **kwargs
    ):
        super().__init__(href, begin, fill, dur, **kwargs)
        self.to = to
        self.attribute_name = attribute_name
        self.attribute_type = attribute_type

    def render(self, layout: Optional[Layout] = None) -> str:
        if not self.attribute_name:
            logger.warning("No attributeName given for animation with id=\"%s\".", self._id)
        return (
            elem_start("set") + self._render_common() +
            attribute("to", self.to) +
            attribute("attributeName", self.attribute_name) +
            attribute("attributeType", self.attribute_type) +
            empty_elem_end()
        )


class AnimateMotion(Animation):
    """
    Move the target element along a polyline.

    The motion path is relative to the element and is written as given,
    without applying the document layout.
    """

    def __init__(
        self,
        points: Iterable[PointLike],
        href: str,
        begin: str = "",
        fill: str = "",
        dur: str = "",
        **kwargs
    ):
        super().__init__(href, begin, fill, dur, **kwargs)
        self._points: List[Point] = [as_point(p) for p in points]

    @property
    def points(self) -> List[Point]:
        return list(self._points)

    def render(self, layout: Optional[Layout] = None) -> str:
        if not self._points:
            logger.warning("No path points given as animation path for id=\"%s\".", self._id)
        path = " ".join(
            ("M" if i == 0 else "L") + f"{format_value(p.x)},{format_value(p.y)}"
            for i, p in enumerate(self._points)
        )
        return (
            elem_start("animateMotion") + self._render_common() +
            'path="' + path + '" ' + empty_elem_end()
        )
