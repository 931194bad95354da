"""
Edge geometry between a commit and its parents.

Commits in the same lane are joined by a straight segment. A lane change
(branch or merge) becomes a cubic S-curve whose control points sit halfway
across the horizontal gap, level with each endpoint, so the curve leaves and
arrives with a horizontal tangent.
"""

import math

from darkpig.graph.types import EdgeGeometry, EdgeKind, Point

DEFAULT_STROKE_WIDTH = 1.5

# Length of the segment used in place of zero-length or non-finite input
MIN_SEGMENT_LENGTH = 1.0


class EdgeBuilder:
    """Builds straight or curved connectors. Holds no per-pass state."""

    def __init__(
        self,
        stroke_width: float = DEFAULT_STROKE_WIDTH,
        straight_tolerance: float = 0.5,
    ) -> None:
        self.stroke_width = stroke_width
        self.straight_tolerance = straight_tolerance

    def build(
        self,
        parent_point: Point,
        child_point: Point,
        stroke_width: float | None = None,
    ) -> EdgeGeometry:
        """Geometry from parent_point to child_point."""
        width = self._valid_width(stroke_width)
        start, end = parent_point, child_point

        if not (start.is_finite() and end.is_finite()) or start == end:
            return self._minimal_segment(start, end, width)

        dx = end.x - start.x
        if abs(dx) <= self.straight_tolerance:
            return straight_edge(start, end, width)

        half = dx * 0.5
        return EdgeGeometry(
            start=start,
            end=end,
            kind=EdgeKind.CURVE,
            control1=Point(start.x + half, start.y),
            control2=Point(end.x - half, end.y),
            stroke_width=width,
        )

    def _valid_width(self, stroke_width: float | None) -> float:
        width = self.stroke_width if stroke_width is None else stroke_width
        if not math.isfinite(width) or width <= 0:
            return DEFAULT_STROKE_WIDTH
        return width

    def _minimal_segment(self, start: Point, end: Point, width: float) -> EdgeGeometry:
        if start.is_finite():
            anchor = start
        elif end.is_finite():
            anchor = end
        else:
            anchor = Point(0.0, 0.0)
        return straight_edge(anchor, Point(anchor.x, anchor.y + MIN_SEGMENT_LENGTH), width)


def straight_edge(start: Point, end: Point, stroke_width: float = DEFAULT_STROKE_WIDTH) -> EdgeGeometry:
    return EdgeGeometry(
        start=start,
        end=end,
        kind=EdgeKind.STRAIGHT,
        control1=start,
        control2=end,
        stroke_width=stroke_width,
    )


def node_center(node_x: float, node_y: float, node_size: float) -> Point:
    """Center of a square node whose top-left corner is (node_x, node_y)."""
    return Point(node_x + node_size / 2, node_y + node_size / 2)


def connection_point(node_x: float, node_y: float, node_size: float, angle: float) -> Point:
    """
    Point on the rim of a round node.

    The angle is in radians: 0 points right, pi/2 points down (scene y grows
    downwards).
    """
    center = node_center(node_x, node_y, node_size)
    radius = node_size / 2
    return Point(center.x + radius * math.cos(angle), center.y + radius * math.sin(angle))
