"""
Demo Entry Point for svg_writer
===============================
Writes a sample document showing shapes, markers, a line chart, text and
(optionally) animations.
"""

import sys
import argparse
from typing import List, Optional

from svg_writer.core import CONFIG
from svg_writer.models import (
    AnimateMotion, Circle, Defaults, Dimensions, Document, Ellipse, Fill, Font, Layout,
    Line, LineChart, Marker, Origin, Path, Point, Polygon, Polyline, Rectangle,
    SetAttributeValue, Stroke, Text
)
from svg_writer.utils.logger import setup_logger, get_logger

# Configure logger
logger = get_logger(__name__)

# Constants
DEFAULT_OUTPUT = "svg_writer_demo"


def build_demo_document(animated: bool = False) -> Document:
    """
    Build the sample document.

    Args:
        animated: Add a couple of animations targeting the demo shapes

    Returns:
        Populated document
    """
    doc = Document(Layout(Dimensions(400, 300), Origin.BOTTOM_LEFT))

    doc.append(Rectangle((0, 0), 400, 300, Fill(Defaults.WHITE), z=-1))
    doc.append(Circle((50, 50), 20, Fill(Defaults.RED), Stroke(1, Defaults.BLACK), shape_id="dot"))
    doc.append(Ellipse((120, 50), 40, 20, Fill(Defaults.YELLOW, 0.8), Stroke(1, Defaults.ORANGE)))
    doc.append(Rectangle((160, 70), 40, 30, Fill(Defaults.SILVER), Stroke(1, Defaults.GRAY), rx=4, ry=4))
    doc.append(Rectangle((0, 0), 30, 20, Fill(Defaults.AQUA)).center_at((250, 50)))

    polygon = Polygon(fill=Fill(Defaults.LIME), stroke=Stroke(1, Defaults.GREEN))
    polygon.add_point((300, 30)).add_point((340, 30)).add_point((320, 70))
    doc.append(polygon)

    path = Path(fill=Fill(Defaults.BLUE, 0.5), stroke=Stroke(1, Defaults.BLUE))
    path.add_point((20, 120)).add_point((80, 120)).add_point((80, 180)).add_point((20, 180))
    path.start_new_sub_path()
    path.add_point((35, 135)).add_point((65, 135)).add_point((65, 165)).add_point((35, 165))
    doc.append(path)

    arrow_head = Marker("arrow", 10, 10, 0, 5, Polygon([(0, 0), (10, 5), (0, 10)], Fill(Defaults.BLACK)))
    line = Line((100, 130), (180, 170), Stroke(1.5, Defaults.BLACK))
    line.set_end_marker(arrow_head)
    doc.append(line)

    chart = LineChart(Dimensions(220, 120))
    chart.add_polyline(Polyline([(0, 0), (20, 30), (40, 20), (60, 50), (80, 40)], Stroke(1, Defaults.BLUE)))
    chart.add_polyline(Polyline([(0, 10), (20, 15), (40, 35), (60, 30), (80, 60)], Stroke(1, Defaults.RED)))
    doc.append(chart)

    doc.append(Text((200, 280), "svg_writer demo", Fill(Defaults.BLACK), Font(16)))

    if animated:
        doc.append(SetAttributeValue("hidden", "visibility", "dot", begin="3s"))
        doc.append(AnimateMotion([Point(0, 0), Point(100, 0), Point(100, -20)], "dot", dur="3s", fill="freeze"))

    return doc


def main(args: Optional[argparse.Namespace] = None) -> None:
    """
    Main entry point.

    Args:
        args: Optional parsed command line arguments
    """
    if args is None:
        args = parse_args()

    setup_logger(args.log_level or CONFIG["log_level"], use_json=args.json_logs)

    doc = build_demo_document(animated=args.animated)
    if not doc.save(args.output):
        logger.error(f"Could not write {doc.file_name}")
        sys.exit(1)

    print(doc.file_name)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(description="Write an svg_writer demo document")
    parser.add_argument("--output", "-o", default=DEFAULT_OUTPUT,
                        help="Output file; .svg or .html is appended if missing")
    parser.add_argument("--animated", "-a", action="store_true", help="Add animations (writes .html)")
    parser.add_argument("--log-level", "-l", choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                        help="Logging level (defaults to config setting)")
    parser.add_argument("--json-logs", action="store_true", help="Emit logs as JSON lines")

    return parser.parse_args(argv)


if __name__ == "__main__":
    main()
