"""
svg_writer Package
==================
Object model for building vector graphics and serializing them to SVG.

Example:
    >>> from svg_writer import Circle, Defaults, Dimensions, Document, Fill, Layout
    >>> doc = Document(Layout(Dimensions(400, 300)))
    >>> doc.append(Circle((50, 50), 20, Fill(Defaults.RED)))
    >>> doc.save("circle")
"""

from svg_writer.core import (
    CONFIG, SVGWriterError, get_random_source, set_random_source,
    library_name, library_version, svg_version
)
from svg_writer.models import (
    Point, Dimensions, Origin, Layout,
    Defaults, ColorError, Color,
    Fill, Stroke, Font,
    Shape, Circle, Ellipse, Rectangle, Line, Polygon, Path, Polyline,
    TextAnchor, DominantBaseline, Text, LineChart,
    MarkerError, Marker,
    SetAttributeValue, AnimateMotion,
    Document
)
from svg_writer.utils.logger import get_logger, setup_logger

__version__ = library_version()

__all__ = [
    'CONFIG', 'SVGWriterError', 'get_random_source', 'set_random_source',
    'library_name', 'library_version', 'svg_version',
    'Point', 'Dimensions', 'Origin', 'Layout',
    'Defaults', 'ColorError', 'Color',
    'Fill', 'Stroke', 'Font',
    'Shape', 'Circle', 'Ellipse', 'Rectangle', 'Line', 'Polygon', 'Path', 'Polyline',
    'TextAnchor', 'DominantBaseline', 'Text', 'LineChart',
    'MarkerError', 'Marker',
    'SetAttributeValue', 'AnimateMotion',
    'Document',
    'get_logger', 'setup_logger',
]
