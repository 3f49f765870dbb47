"""Hull boundaries backed by shapely/GEOS.

``tile_outline`` traces the exact outer outline of a set of unit cells and is what
the pipeline uses unless a custom provider is configured. ``concave_hull`` and
``convex_hull`` are point-set providers for callers that want a looser hull.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence

import shapely
from shapely.geometry import MultiPoint, Polygon, box
from shapely.geometry.polygon import orient

from tilehull.utils.geometry import Point

HullProvider = Callable[[Sequence[Point], float], Sequence[Point]]

# GEOS maps ratio 0 to a target edge length of 0 and then erodes through edges of
# the shortest length too. A tiny ratio keeps the target at the shortest edge.
_MIN_RATIO = 1e-6


def _ring(polygon: Polygon) -> list[Point]:
    # Positive signed area in y-down coordinates is clockwise on screen
    ring = orient(polygon, sign=1.0).exterior.coords[:-1]
    return [(float(x), float(y)) for x, y in ring]


def tile_outline(cells: Iterable[tuple[int, int]]) -> list[Point]:
    """Outer outline of the union of unit cells ``(x, y)``, in tile units.

    Enclosed holes are filled. The ring is clockwise in screen space (y down) and
    carries no repeated closing point. Cells that do not form one 4-connected
    region raise ``ValueError``.
    """
    boxes = [box(x, y, x + 1, y + 1) for x, y in cells]
    if not boxes:
        raise ValueError("Outline needs at least one cell")

    shape = shapely.unary_union(boxes)
    if not isinstance(shape, Polygon):
        raise ValueError(f"Cells form {shape.geom_type}, not one connected region")
    return _ring(Polygon(shape.exterior))


def concave_hull(points: Sequence[Point], concavity: float = 1.0) -> list[Point]:
    """Concave hull of a point set as a cyclic point list.

    ``concavity`` runs from 0 (convex hull) to 1 (maximally concave). GEOS never
    cuts into a notch whose mouth is as short as the shortest point spacing, so on
    tile corners this hull can cover empty one-tile notches.
    """
    if not 0.0 <= concavity <= 1.0:
        raise ValueError(f"concavity must be within [0, 1], got {concavity}")
    if len(points) < 3:
        raise ValueError(f"Hull needs at least 3 points, got {len(points)}")

    ratio = max(1.0 - concavity, _MIN_RATIO)
    hull = shapely.concave_hull(MultiPoint(list(points)), ratio=ratio, allow_holes=False)
    if not isinstance(hull, Polygon) or hull.is_empty:
        raise ValueError(f"Degenerate hull ({hull.geom_type}) for {len(points)} points")
    return _ring(hull)


def convex_hull(points: Sequence[Point], concavity: float = 0.0) -> list[Point]:
    """Convex hull with the same ring conventions; ``concavity`` is ignored."""
    return concave_hull(points, 0.0)
