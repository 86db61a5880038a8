"""Geometry helpers for turning two gesture points into shape bounds."""

from __future__ import annotations

import math

from .types import Point, Rect


def bounding_rectangle(p1: Point, p2: Point) -> Rect:
    """Return the rectangle spanned by two opposite corners."""
    return Rect(
        x=min(p1.x, p2.x),
        y=min(p1.y, p2.y),
        width=abs(p1.x - p2.x),
        height=abs(p1.y - p2.y),
    )


def distance(p1: Point, p2: Point) -> float:
    return math.hypot(p2.x - p1.x, p2.y - p1.y)


def circle_bounds(center: Point, radius_point: Point) -> Rect:
    """Return the square bounding a circle around ``center``.

    The radius is the distance to ``radius_point`` rounded to whole pixels.
    """
    radius = int(round(distance(center, radius_point)))
    return Rect(
        x=center.x - radius,
        y=center.y - radius,
        width=2 * radius,
        height=2 * radius,
    )
