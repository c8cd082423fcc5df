"""
Document model: the ordered collection of shapes and animations that is
serialized into one SVG file.
"""

from typing import List, Optional, Tuple, Union

from typing_extensions import Self

from svg_writer.core import CONFIG, library_name, library_version, svg_version
from svg_writer.models.animation import Animation
from svg_writer.models.geometry import Layout
from svg_writer.models.marker import MarkerRegistry
from svg_writer.models.shape import Identifiable, Shape
from svg_writer.utils.logger import get_logger
from svg_writer.utils.markup import attribute, elem_end, elem_start

# Configure logger
logger = get_logger(__name__)

# Constants
SVG_EXTENSION = ".svg"
HTML_EXTENSION = ".html"
SVG_NAMESPACE = "http://www.w3.org/2000/svg"
SVG_DTD = "http://www.w3.org/Graphics/SVG/1.1/DTD/svg11.dtd"


class Document(Identifiable):
    """
    SVG document.

    Appended shapes and animations are cloned, so the caller may keep
    modifying its own objects afterwards. Shapes are painted by ascending z;
    shapes with equal z keep their insertion order.
    """

    def __init__(self, layout: Optional[Layout] = None, document_id: str = ""):
        """
        Initialize a document.

        Args:
            layout: Coordinate transform, 400x300 with a bottom-left origin
                by default
            document_id: Value of the ``id`` attribute of the root element
        """
        super().__init__(document_id)
        self._layout = layout if layout is not None else Layout()
        self._shapes: List[Shape] = []
        self._animations: List[Animation] = []
        self._needs_sorting = False
        self.file_name = ""

    @property
    def layout(self) -> Layout:
        return self._layout

    @property
    def shapes(self) -> Tuple[Shape, ...]:
        """
        Owned shapes in paint order.

        These are the document's own copies; a changed ``z`` takes effect
        on the next ``render``.
        """
        return tuple(self._shapes)

    @property
    def animations(self) -> Tuple[Animation, ...]:
        return tuple(self._animations)

    def append(self, item: Union[Shape, Animation]) -> Self:
        """
        Add a copy of a shape or an animation.

        Args:
            item: Shape or animation to add

        Returns:
            Self for method chaining

        Raises:
            TypeError: If ``item`` is neither a shape nor an animation
        """
        if isinstance(item, Shape):
            shape = item.clone()
            self._shapes.append(shape)
            self._needs_sorting = self._needs_sorting or shape.z != 0
        elif isinstance(item, Animation):
            self._animations.append(item.clone())
        else:
            raise TypeError(f"Cannot append {type(item).__name__} to a Document")
        return self

    def is_animated(self) -> bool:
        return bool(self._animations)

    def render(self) -> str:
        """
        Serialize the document.

        Returns:
            Complete SVG markup
        """
        if self._needs_sorting or any(shape.z != 0 for shape in self._shapes):
            self._needs_sorting = True
            # list.sort is stable: equal z keeps insertion order
            self._shapes.sort(key=lambda shape: shape.z)

        registry = MarkerRegistry()
        for shape in self._shapes:
            registry.collect(shape, self._layout)

        parts = [self._render_header()]
        if registry:
            parts.append(elem_start("defs", True))
            parts.append(registry.render())
            parts.append("\t" + elem_end("defs"))
        parts.extend(shape.render(self._layout) for shape in self._shapes)
        parts.extend(animation.render(self._layout) for animation in self._animations)
        parts.append(elem_end("svg"))
        return "".join(parts)

    def _render_header(self) -> str:
        dimensions = self._layout.dimensions
        return (
            "<?xml " + attribute("version", "1.0") + attribute("standalone", "no") + "?>\n" +
            f"<!-- Generator: {library_name()} ({CONFIG['generator_url']}), "
            f"Version: {library_version()} -->\n" +
            f'<!DOCTYPE svg PUBLIC "-//W3C//DTD SVG {svg_version()}//EN" "{SVG_DTD}">\n' +
            "<svg " + self._render_id() +
            attribute("width", dimensions.width, "px") +
            attribute("height", dimensions.height, "px") +
            attribute("xmlns", SVG_NAMESPACE) +
            attribute("version", svg_version()) + ">\n"
        )

    def save(self, filename: str, auto_append: bool = True) -> bool:
        """
        Write the document to a file.

        Args:
            filename: Target path, may already contain the extension
            auto_append: Append ``.html`` (animated) or ``.svg`` unless the
                name already ends with it

        Returns:
            True on success, False if the file could not be written
        """
        file_name = filename
        if auto_append:
            extension = HTML_EXTENSION if self.is_animated() else SVG_EXTENSION
            if not file_name.endswith(extension):
                file_name += extension
        self.file_name = file_name

        try:
            with open(file_name, 'w', encoding='utf-8') as f:
                f.write(self.render())
        except OSError as e:
            logger.error(f"Error saving document to {file_name}: {str(e)}",
                         extra={"file_name": file_name})
            return False

        logger.info(f"Saved document to {file_name}")
        return True

    def __len__(self) -> int:
        return len(self._shapes)

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return (
            f"Document(shapes={len(self._shapes)}, animations={len(self._animations)}, "
            f"layout={self._layout!r})"
        )
