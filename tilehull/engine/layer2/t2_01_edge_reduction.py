"""T2.01 — Edge Reduction.

Collapse each hull boundary into its minimal list of straight edges, merging
collinear runs including the one that straddles the boundary's start point.
"""

from __future__ import annotations

import logging

from tilehull.engine.context import HullContext
from tilehull.engine.registry import Layer, transform
from tilehull.utils.edges import reduce_boundary

logger = logging.getLogger(__name__)


@transform(
    id="T2.01",
    layer=Layer.POLYGONS,
    dependencies=["T1.02"],
    description="Merge collinear boundary segments into minimal edges",
)
def edge_reduction(ctx: HullContext) -> None:
    tolerance = ctx.config.collinear_tolerance
    keep_degenerate = ctx.config.degenerate_policy == "keep"

    for cid, boundary in ctx.boundaries.items():
        try:
            edges = reduce_boundary(boundary, tolerance)
        except ValueError as e:
            logger.warning("Cluster %d: %s", cid, e)
            ctx.skip(cid)
            continue

        if len(edges) < 3 and not keep_degenerate:
            logger.warning("Cluster %d: dropped degenerate polygon with %d edges", cid, len(edges))
            ctx.skip(cid)
            continue

        ctx.edge_sets[cid] = edges
