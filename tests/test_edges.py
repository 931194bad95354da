"""Tests for edge geometry."""

import math

import pytest

from darkpig.graph.edges import (
    DEFAULT_STROKE_WIDTH,
    MIN_SEGMENT_LENGTH,
    EdgeBuilder,
    connection_point,
    node_center,
    straight_edge,
)
from darkpig.graph.types import EdgeKind, Point


def is_finite_geometry(geometry):
    points = (geometry.start, geometry.end, geometry.control1, geometry.control2)
    return all(p.is_finite() for p in points) and math.isfinite(geometry.stroke_width)


class TestEdgeBuilder:
    def test_same_lane_is_straight(self):
        geometry = EdgeBuilder().build(Point(5, 69), Point(5, 5))
        assert geometry.kind is EdgeKind.STRAIGHT
        assert geometry.start == Point(5, 69)
        assert geometry.end == Point(5, 5)

    def test_within_tolerance_is_straight(self):
        geometry = EdgeBuilder(straight_tolerance=0.5).build(Point(5, 40), Point(5.4, 8))
        assert geometry.is_straight

    def test_lane_change_is_curve(self):
        geometry = EdgeBuilder().build(Point(0, 0), Point(16, 32))
        assert geometry.kind is EdgeKind.CURVE
        assert geometry.control1 == Point(8, 0)
        assert geometry.control2 == Point(8, 32)

    def test_curve_toward_left(self):
        geometry = EdgeBuilder().build(Point(32, 64), Point(0, 0))
        assert geometry.control1 == Point(16, 64)
        assert geometry.control2 == Point(16, 0)

    def test_curve_endpoints(self):
        geometry = EdgeBuilder().build(Point(0, 0), Point(16, 32))
        assert geometry.point_at(0.0) == Point(0, 0)
        assert geometry.point_at(1.0) == Point(16, 32)
        middle = geometry.point_at(0.5)
        assert middle.x == pytest.approx(8)
        assert middle.y == pytest.approx(16)

    def test_zero_length_becomes_minimal_segment(self):
        geometry = EdgeBuilder().build(Point(5, 5), Point(5, 5))
        assert geometry.is_straight
        assert geometry.start == Point(5, 5)
        assert geometry.end == Point(5, 5 + MIN_SEGMENT_LENGTH)

    def test_nan_input_becomes_minimal_segment(self):
        geometry = EdgeBuilder().build(Point(float("nan"), 0), Point(10, 10))
        assert geometry.is_straight
        assert geometry.start == Point(10, 10)
        assert is_finite_geometry(geometry)

    def test_both_points_non_finite(self):
        geometry = EdgeBuilder().build(Point(float("inf"), 0), Point(0, float("nan")))
        assert geometry.start == Point(0, 0)
        assert is_finite_geometry(geometry)

    @pytest.mark.parametrize("width", [0, -1, float("nan"), float("inf")])
    def test_invalid_stroke_width_falls_back(self, width):
        geometry = EdgeBuilder().build(Point(0, 0), Point(0, 10), stroke_width=width)
        assert geometry.stroke_width == DEFAULT_STROKE_WIDTH

    def test_stroke_width_override(self):
        builder = EdgeBuilder(stroke_width=2.0)
        assert builder.build(Point(0, 0), Point(0, 10)).stroke_width == 2.0
        assert builder.build(Point(0, 0), Point(0, 10), stroke_width=3.0).stroke_width == 3.0


class TestHelpers:
    def test_straight_edge_controls_match_endpoints(self):
        geometry = straight_edge(Point(1, 2), Point(1, 9))
        assert geometry.control1 == geometry.start
        assert geometry.control2 == geometry.end
        assert geometry.point_at(0.5) == Point(1, 5.5)

    def test_node_center(self):
        assert node_center(10, 20, 10) == Point(15, 25)

    def test_connection_point_on_rim(self):
        right = connection_point(0, 0, 10, 0)
        assert right.x == pytest.approx(10)
        assert right.y == pytest.approx(5)

        below = connection_point(0, 0, 10, math.pi / 2)
        assert below.x == pytest.approx(5)
        assert below.y == pytest.approx(10)
