"""T2.02 — Edge Wrapping.

Scale reduced edges from tile units to pixels and attach the polygon ID and
outward normal. Polygon IDs are consecutive over the emitted polygons.
"""

from __future__ import annotations

from tilehull.engine.context import HullContext
from tilehull.engine.registry import Layer, transform
from tilehull.models.polygon import HullPolygon
from tilehull.utils.edges import wrap_edges
from tilehull.utils.geometry import scale


@transform(
    id="T2.02",
    layer=Layer.POLYGONS,
    dependencies=["T2.01"],
    description="Attach polygon IDs and outward normals to edges",
)
def edge_wrapping(ctx: HullContext) -> None:
    sx = ctx.grid.tile_width
    sy = ctx.grid.tile_height

    polygons: list[HullPolygon] = []
    for cid in sorted(ctx.edge_sets):
        pid = len(polygons)
        edges = [scale(e, sx, sy) for e in ctx.edge_sets[cid]]
        polygons.append(
            HullPolygon(
                id=pid,
                edges=wrap_edges(edges, pid),
                tiles=ctx.clusters[cid],
            )
        )
    ctx.polygons = polygons
