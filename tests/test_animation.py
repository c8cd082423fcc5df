"""
Tests for the animation elements.
"""

import unittest

from svg_writer.models.animation import AnimateMotion, SetAttributeValue
from svg_writer.models.geometry import Point


class TestAnimations(unittest.TestCase):
    """Tests for SetAttributeValue and AnimateMotion."""

    def test_set_attribute_value(self):
        """Test the set element."""
        animation = SetAttributeValue("red", "fill", "c1", begin="1s")
        self.assertEqual(
            animation.render(),
            '\t<set href="#c1" begin="1s" to="red" attributeName="fill" attributeType="CSS" />\n'
        )

    def test_optional_timing_attributes(self):
        """Test that fill and dur are written when set."""
        animation = SetAttributeValue("0", "opacity", "c1", fill="freeze", dur="2s",
                                      attribute_type="XML", animation_id="fade")
        self.assertEqual(
            animation.render(),
            '\t<set id="fade" href="#c1" fill="freeze" dur="2s" to="0" attributeName="opacity" '
            'attributeType="XML" />\n'
        )

    def test_animate_motion(self):
        """Test the motion path, which is not transformed."""
        animation = AnimateMotion([(0, 0), Point(10, 5), (2.5, -1)], "c1", dur="2s")
        self.assertEqual(
            animation.render(),
            '\t<animateMotion href="#c1" dur="2s" path="M0,0 L10,5 L2.5,-1" />\n'
        )

    def test_missing_values_log_warnings(self):
        """Test warnings for missing href, attribute name and points."""
        with self.assertLogs("svg_writer", "WARNING") as cm:
            SetAttributeValue("1", "", "").render()
        self.assertEqual(len(cm.output), 2)
        with self.assertLogs("svg_writer", "WARNING") as cm:
            rendered = AnimateMotion([], "c1").render()
        self.assertIn('path=""', rendered)
        self.assertIn("path points", cm.output[0])

    def test_clone_is_independent(self):
        """Test cloning an animation."""
        animation = SetAttributeValue("red", "fill", "c1")
        copy = animation.clone()
        copy.href = "c2"
        self.assertEqual(animation.href, "c1")


if __name__ == "__main__":
    unittest.main()
