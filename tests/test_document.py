"""
Tests for the Document model.
"""

import os
import shutil
import tempfile
import unittest

from defusedxml import ElementTree

from svg_writer.models.animation import SetAttributeValue
from svg_writer.models.color import Defaults
from svg_writer.models.document import Document
from svg_writer.models.geometry import Dimensions, Layout, Origin
from svg_writer.models.marker import Marker
from svg_writer.models.shape import Circle, Line, LineChart, Polyline, Rectangle, Text
from svg_writer.models.style import Fill, Stroke
from svg_writer.utils.logger import LogCapture

HEADER = (
    '<?xml version="1.0" standalone="no" ?>\n'
    '<!-- Generator: svg-writer (https://github.com/CodeFinder2/svg-writer), Version: 1.0.0 -->\n'
    '<!DOCTYPE svg PUBLIC "-//W3C//DTD SVG 1.1//EN" '
    '"http://www.w3.org/Graphics/SVG/1.1/DTD/svg11.dtd">\n'
)


def parse(text):
    return ElementTree.fromstring(text.encode("utf-8"), forbid_dtd=False)


class TestDocumentRender(unittest.TestCase):
    """Tests for rendering documents."""

    def test_empty_document(self):
        """Test header and footer of an empty document."""
        rendered = Document().render()
        self.assertEqual(
            rendered,
            HEADER +
            '<svg width="400px" height="300px" xmlns="http://www.w3.org/2000/svg" version="1.1" >\n'
            '</svg>\n'
        )
        self.assertTrue(parse(rendered).tag.endswith("svg"))

    def test_document_id_and_size(self):
        """Test the root element attributes."""
        doc = Document(Layout(Dimensions(640, 480.5)), document_id="drawing")
        self.assertIn('<svg id="drawing" width="640px" height="480.5px" ', doc.render())

    def test_circle_end_to_end(self):
        """Test a shape placed through the default layout."""
        doc = Document(Layout(Dimensions(400, 300), Origin.BOTTOM_LEFT, 1))
        doc.append(Circle((50, 50), 20, Fill(Defaults.RED)))
        rendered = doc.render()
        self.assertIn('cx="50" cy="250" r="10" ', rendered)
        self.assertIn('fill="rgb(255,0,0)" ', rendered)
        self.assertNotIn("<defs>", rendered)

    def test_append_clones(self):
        """Test that later changes to appended shapes are not visible."""
        circle = Circle((1, 1), 2)
        doc = Document().append(circle)
        circle.offset((100, 100))
        self.assertEqual(doc.shapes[0].center, (1, 1))
        self.assertEqual(len(doc), 1)

    def test_append_rejects_other_types(self):
        """Test appending unsupported objects."""
        with self.assertRaises(TypeError):
            Document().append("circle")

    def test_equal_z_keeps_insertion_order(self):
        """Test that default z keeps the order of appends."""
        doc = Document()
        for name in ("A", "B", "C"):
            doc.append(Circle((0, 0), 1, shape_id=name))
        rendered = doc.render()
        positions = [rendered.index(f'id="{name}"') for name in ("A", "B", "C")]
        self.assertEqual(positions, sorted(positions))

    def test_z_sorting_is_stable(self):
        """Test that shapes are ordered by z, ties by insertion."""
        doc = Document()
        doc.append(Circle((0, 0), 1, shape_id="A", z=2))
        doc.append(Circle((0, 0), 1, shape_id="B", z=1))
        doc.append(Circle((0, 0), 1, shape_id="C", z=2))
        rendered = doc.render()
        order = sorted(("A", "B", "C"), key=lambda name: rendered.index(f'id="{name}"'))
        self.assertEqual(order, ["B", "A", "C"])
        self.assertEqual([s.id for s in doc.shapes], ["B", "A", "C"])

    def test_z_changed_after_append(self):
        """Test that changing z on an owned shape reorders it on render."""
        doc = Document()
        doc.append(Circle((0, 0), 1, shape_id="A"))
        doc.append(Circle((0, 0), 1, shape_id="B"))
        doc.shapes[0].z = 5
        rendered = doc.render()
        self.assertLess(rendered.index('id="B"'), rendered.index('id="A"'))
        self.assertEqual([s.id for s in doc.shapes], ["B", "A"])

    def test_large_dimensions_use_exponent(self):
        """Test that integer sizes are formatted like doubles."""
        rendered = Document(Layout(Dimensions(10000000, 2))).render()
        self.assertIn('<svg width="1e+07px" height="2px" ', rendered)

    def test_render_is_idempotent(self):
        """Test that rendering twice yields the same text."""
        doc = Document()
        doc.append(Rectangle((0, 0), 10, 10, z=3)).append(Circle((5, 5), 2, z=-1))
        doc.append(Text((1, 1), "label"))
        self.assertEqual(doc.render(), doc.render())

    def test_markers_in_defs(self):
        """Test that shared markers are written once before the shapes."""
        arrow = Marker("arrow", 10, 10, 0, 5, Circle((5, 5), 4, Fill(Defaults.BLACK)))
        first = Line((0, 0), (10, 10), Stroke(1, Defaults.BLACK))
        first.set_end_marker(arrow)
        second = Line((10, 0), (0, 10), Stroke(1, Defaults.BLACK))
        second.set_start_marker(arrow)
        doc = Document().append(first).append(second)

        rendered = doc.render()
        self.assertEqual(rendered.count("<marker "), 1)
        self.assertLess(rendered.index("\t<defs>\n"), rendered.index("<line"))
        self.assertIn("\t</defs>\n", rendered)
        parse(rendered)

    def test_nested_markers_are_defined(self):
        """Test that markers used inside markers are written as well."""
        inner = Marker("inner", 4, 4, 2, 2, Circle((2, 2), 2, Fill(Defaults.BLACK)))
        stem = Line((0, 0), (5, 5), Stroke(1, Defaults.BLACK))
        stem.set_end_marker(inner)
        outer = Marker("outer", 10, 10, 0, 5, stem)
        line = Line((0, 0), (50, 50), Stroke(1, Defaults.BLACK))
        line.set_end_marker(outer)

        rendered = Document().append(line).render()
        self.assertIn('<marker id="inner" ', rendered)
        self.assertIn('<marker id="outer" ', rendered)
        self.assertEqual(rendered.count("<marker "), 2)
        self.assertLess(rendered.index('id="inner"'), rendered.index('id="outer"'))
        parse(rendered)

    def test_self_referencing_marker(self):
        """Test that a marker drawing a line that uses itself is written once."""
        loop = Marker("loop", 4, 4, 0, 0)
        segment = Line((0, 0), (1, 1))
        segment.set_end_marker(loop)
        loop.add(segment)
        self.assertIs(loop[0].end_marker, loop)

        rendered = Document().append(segment).render()
        self.assertEqual(rendered.count("<marker "), 1)

    def test_marker_collision(self):
        """Test that a conflicting marker definition is reported."""
        first = Line((0, 0), (1, 1))
        first.set_end_marker(Marker("m", 1, 1, 0, 0))
        second = Line((0, 0), (1, 1))
        second.set_end_marker(Marker("m", 3, 3, 0, 0))
        doc = Document().append(first).append(second)
        with LogCapture() as capture:
            rendered = doc.render()
        self.assertEqual(capture.fields("marker_id"), ["m"])
        self.assertEqual(rendered.count("<marker "), 1)
        self.assertIn('markerWidth="1" ', rendered)

    def test_empty_contributions(self):
        """Test that empty polylines and charts add nothing."""
        doc = Document()
        doc.append(Polyline()).append(LineChart())
        self.assertEqual(doc.render(), Document().render())

    def test_animations_after_shapes(self):
        """Test animation placement."""
        doc = Document()
        doc.append(SetAttributeValue("hidden", "visibility", "c"))
        doc.append(Circle((0, 0), 2, shape_id="c"))
        rendered = doc.render()
        self.assertTrue(doc.is_animated())
        self.assertLess(rendered.index("<circle"), rendered.index("<set"))
        self.assertTrue(rendered.endswith("/>\n</svg>\n"))


class TestDocumentSave(unittest.TestCase):
    """Tests for writing documents to disk."""

    def setUp(self):
        """Set up test fixtures."""
        self.temp_dir = tempfile.mkdtemp()

    def tearDown(self):
        """Clean up after tests."""
        shutil.rmtree(self.temp_dir)

    def test_svg_extension(self):
        """Test that .svg is appended to static documents."""
        doc = Document().append(Circle((1, 1), 1))
        self.assertTrue(doc.save(os.path.join(self.temp_dir, "out")))
        self.assertTrue(doc.file_name.endswith("out.svg"))
        with open(doc.file_name, 'r', encoding='utf-8') as f:
            self.assertEqual(f.read(), doc.render())

    def test_html_extension(self):
        """Test that .html is appended to animated documents."""
        doc = Document().append(SetAttributeValue("red", "fill", "x"))
        self.assertTrue(doc.save(os.path.join(self.temp_dir, "anim")))
        self.assertTrue(doc.file_name.endswith("anim.html"))
        self.assertTrue(os.path.exists(doc.file_name))

    def test_existing_extension_kept(self):
        """Test names that already carry the extension."""
        doc = Document()
        target = os.path.join(self.temp_dir, "plain.svg")
        self.assertTrue(doc.save(target))
        self.assertEqual(doc.file_name, target)

    def test_auto_append_disabled(self):
        """Test saving without touching the name."""
        doc = Document()
        target = os.path.join(self.temp_dir, "raw")
        self.assertTrue(doc.save(target, auto_append=False))
        self.assertEqual(doc.file_name, target)
        self.assertTrue(os.path.exists(target))

    def test_unwritable_path(self):
        """Test that a failing write returns False and logs."""
        doc = Document()
        target = os.path.join(self.temp_dir, "missing", "dir", "out")
        with self.assertLogs("svg_writer", "ERROR"):
            self.assertFalse(doc.save(target))


if __name__ == "__main__":
    unittest.main()
