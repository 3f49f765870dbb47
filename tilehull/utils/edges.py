"""Edge reduction — collapse a cyclic boundary into its minimal straight edges."""

from __future__ import annotations

from collections.abc import Sequence

from tilehull.models.polygon import PolygonEdge
from tilehull.utils.geometry import Edge, Point, extend, is_collinear, outward_normal


def boundary_segments(points: Sequence[Point]) -> list[Edge]:
    """Segments between consecutive points, closing segment included.

    Repeated consecutive points are skipped; a zero-length segment would count as
    collinear with anything.
    """
    n = len(points)
    segments: list[Edge] = []
    for i in range(n):
        a = tuple(points[i])
        b = tuple(points[(i + 1) % n])
        if a != b:
            segments.append(Edge(a, b))
    return segments


def reduce_boundary(points: Sequence[Point], tolerance: float = 0.0) -> list[Edge]:
    """Merge collinear runs of a cyclic point sequence into single edges.

    One pass grows a current edge until a corner is reached, then the first and
    last edges are merged if the sequence happened to start mid-edge. No two
    cyclically adjacent edges of the result are collinear.
    """
    segments = boundary_segments(points)
    if len(segments) < 3:
        raise ValueError(f"Boundary needs at least 3 distinct points, got {len(segments)}")

    edges: list[Edge] = []
    current = segments[0]
    for segment in segments[1:]:
        if is_collinear(current, segment, tolerance):
            current = extend(current, segment.end)
        else:
            edges.append(current)
            current = segment
    edges.append(current)

    if len(edges) > 1 and is_collinear(edges[-1], edges[0], tolerance):
        merged = Edge(edges[-1].start, edges[0].end)
        edges = [merged, *edges[1:-1]]

    return edges


def wrap_edges(edges: Sequence[Edge], polygon_id: int) -> list[PolygonEdge]:
    return [
        PolygonEdge(
            start=edge.start,
            end=edge.end,
            polygon_id=polygon_id,
            normal=outward_normal(edge),
        )
        for edge in edges
    ]
