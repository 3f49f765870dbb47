"""Leaf-node geometry helpers. No engine imports."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass

import numpy as np

Point = tuple[float, float]


@dataclass(frozen=True)
class Edge:
    """Straight edge from ``start`` to ``end``."""

    start: Point
    end: Point

    @property
    def direction(self) -> Point:
        return direction(self.start, self.end)

    @property
    def length(self) -> float:
        dx, dy = self.direction
        return math.hypot(dx, dy)


def direction(a: Point, b: Point) -> Point:
    return (b[0] - a[0], b[1] - a[1])


def cross(u: Point, v: Point) -> float:
    """z-component of the 2D cross product u x v."""
    return u[0] * v[1] - u[1] * v[0]


def is_collinear(e1: Edge, e2: Edge, tolerance: float = 0.0) -> bool:
    """True if the two edges run along parallel directions.

    With ``tolerance == 0`` this is the exact test ``dx1*dy2 - dy1*dx2 == 0``.
    Otherwise the cross product is compared against ``tolerance * |d1| * |d2|``,
    i.e. the sine of the angle between the edges.
    """
    c = cross(e1.direction, e2.direction)
    if tolerance <= 0:
        return c == 0
    return abs(c) <= tolerance * e1.length * e2.length


def extend(edge: Edge, point: Point) -> Edge:
    """Same start, new end."""
    return Edge(edge.start, point)


def scale(edge: Edge, sx: float, sy: float) -> Edge:
    """Axis-aligned scaling; keeps collinearity and winding for positive factors."""
    return Edge(
        (edge.start[0] * sx, edge.start[1] * sy),
        (edge.end[0] * sx, edge.end[1] * sy),
    )


def outward_normal(edge: Edge) -> Point:
    """Unit normal ``(dy, -dx)``.

    Points away from the interior of a polygon wound clockwise in screen space
    (y axis down), which is positive signed area in those coordinates.
    """
    dx, dy = edge.direction
    length = math.hypot(dx, dy)
    if length == 0:
        return (0.0, 0.0)
    return (dy / length, -dx / length)


def signed_area(points: Sequence[Point]) -> float:
    """Shoelace formula over a cyclic point sequence (closing segment implied).

    Positive = CCW with y up, which is clockwise on screen with y down.
    """
    pts = np.asarray(points, dtype=np.float64)
    if len(pts) < 3:
        return 0.0
    x = pts[:, 0]
    y = pts[:, 1]
    x_next = np.roll(x, -1)
    y_next = np.roll(y, -1)
    return float(0.5 * np.sum(x * y_next - x_next * y))
