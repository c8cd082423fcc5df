"""
svg_writer - Data Models
========================
Geometry, colors, styles, shapes, markers, animations and the document
that serializes them.
"""

from svg_writer.models.geometry import (
    Point, Dimensions, Origin, Layout,
    transform_x, transform_y, transform_scale,
    get_min_point, get_max_point, valid_num, almost_equal
)
from svg_writer.models.color import Defaults, ColorError, Color, TRANSPARENT
from svg_writer.models.style import Fill, Stroke, Font
from svg_writer.models.shape import (
    Identifiable, Shape, SurfaceShape, Markerable,
    Circle, Ellipse, Rectangle, Line, Polygon, Path, Polyline,
    TextAnchor, DominantBaseline, Text, LineChart
)
from svg_writer.models.marker import MarkerError, Marker, MarkerRegistry
from svg_writer.models.animation import Animation, SetAttributeValue, AnimateMotion
from svg_writer.models.document import Document

__all__ = [
    'Point', 'Dimensions', 'Origin', 'Layout',
    'transform_x', 'transform_y', 'transform_scale',
    'get_min_point', 'get_max_point', 'valid_num', 'almost_equal',
    'Defaults', 'ColorError', 'Color', 'TRANSPARENT',
    'Fill', 'Stroke', 'Font',
    'Identifiable', 'Shape', 'SurfaceShape', 'Markerable',
    'Circle', 'Ellipse', 'Rectangle', 'Line', 'Polygon', 'Path', 'Polyline',
    'TextAnchor', 'DominantBaseline', 'Text', 'LineChart',
    'MarkerError', 'Marker', 'MarkerRegistry',
    'Animation', 'SetAttributeValue', 'AnimateMotion',
    'Document',
]
