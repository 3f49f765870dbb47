"""T1.01 — Corner Extraction.

Collect the distinct tile corners of each cluster, in tile units.
"""

from __future__ import annotations

from tilehull.engine.context import HullContext
from tilehull.engine.registry import Layer, transform
from tilehull.utils.clusters import cluster_corners


@transform(
    id="T1.01",
    layer=Layer.HULL,
    dependencies=["T0.01"],
    description="Extract distinct tile corners per cluster",
)
def corner_extraction(ctx: HullContext) -> None:
    for cid, cluster in enumerate(ctx.clusters):
        corners = cluster_corners(cluster)
        if len(corners) < 3:
            ctx.skip(cid)
            continue
        ctx.corner_sets[cid] = corners
