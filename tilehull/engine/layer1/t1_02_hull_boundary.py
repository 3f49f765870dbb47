"""T1.02 — Hull Boundary.

Trace each cluster's tile outline, or hand its corner points to a custom hull
provider when one is configured. Either way the boundary must be a simple ring,
clockwise in screen space; that is trusted downstream. A boundary that cannot be
built costs only that cluster.
"""

from __future__ import annotations

import logging

from tilehull.engine.context import HullContext
from tilehull.engine.registry import Layer, transform
from tilehull.utils.hull import tile_outline

logger = logging.getLogger(__name__)


@transform(
    id="T1.02",
    layer=Layer.HULL,
    dependencies=["T1.01"],
    description="Compute an ordered hull boundary per cluster",
)
def hull_boundary(ctx: HullContext) -> None:
    provider = ctx.config.hull_provider
    concavity = ctx.config.concavity

    for cid, corners in ctx.corner_sets.items():
        try:
            if provider is None:
                boundary = tile_outline(ctx.clusters[cid])
            else:
                boundary = list(provider(corners, concavity))
        except ValueError as e:
            logger.warning("Cluster %d: hull failed: %s", cid, e)
            ctx.skip(cid)
            continue

        if len(boundary) < 3:
            logger.warning("Cluster %d: hull returned %d points", cid, len(boundary))
            ctx.skip(cid)
            continue

        ctx.boundaries[cid] = boundary
