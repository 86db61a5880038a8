"""Tests for shape bounds helpers."""

import math

import pytest

from sketchpad.geometry import bounding_rectangle, circle_bounds, distance
from sketchpad.types import Point, Rect


CORNER_PAIRS = [
    (Point(10, 10), Point(50, 40)),
    (Point(50, 40), Point(10, 10)),
    (Point(50, 10), Point(10, 40)),
    (Point(-5, 7), Point(3, -9)),
    (Point(0, 0), Point(0, 0)),
]


class TestBoundingRectangle:
    @pytest.mark.parametrize("p1,p2", CORNER_PAIRS)
    def test_size_and_origin(self, p1, p2):
        rect = bounding_rectangle(p1, p2)
        assert rect.width == abs(p1.x - p2.x)
        assert rect.height == abs(p1.y - p2.y)
        assert (rect.x, rect.y) == (min(p1.x, p2.x), min(p1.y, p2.y))

    def test_drag_direction_does_not_matter(self):
        assert bounding_rectangle(Point(10, 10), Point(50, 40)) == bounding_rectangle(Point(50, 40), Point(10, 10))

    def test_concrete_rectangle(self):
        assert bounding_rectangle(Point(10, 10), Point(50, 40)) == Rect(10, 10, 40, 30)

    def test_degenerate_is_zero_size(self):
        assert bounding_rectangle(Point(7, 8), Point(7, 8)) == Rect(7, 8, 0, 0)


class TestCircleBounds:
    @pytest.mark.parametrize(
        "center,edge",
        [
            (Point(100, 100), Point(100, 130)),
            (Point(0, 0), Point(3, 4)),
            (Point(20, -5), Point(21, -4)),
            (Point(5, 5), Point(5, 5)),
        ],
    )
    def test_square_centered_on_center(self, center, edge):
        rect = circle_bounds(center, edge)
        side = 2 * round(math.dist((center.x, center.y), (edge.x, edge.y)))
        assert rect.width == rect.height == side
        assert rect.x + rect.width // 2 == center.x
        assert rect.y + rect.height // 2 == center.y

    def test_concrete_circle(self):
        assert circle_bounds(Point(100, 100), Point(100, 130)) == Rect(70, 70, 60, 60)

    def test_radius_is_rounded(self):
        # distance is sqrt(2) ~ 1.41 -> 1, sqrt(8) ~ 2.83 -> 3
        assert circle_bounds(Point(0, 0), Point(1, 1)).width == 2
        assert circle_bounds(Point(0, 0), Point(2, 2)).width == 6

    def test_zero_radius(self):
        assert circle_bounds(Point(9, 9), Point(9, 9)) == Rect(9, 9, 0, 0)


def test_distance():
    assert distance(Point(0, 0), Point(3, 4)) == 5.0
    assert distance(Point(3, 4), Point(0, 0)) == 5.0
