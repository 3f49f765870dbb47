"""T0.01 — Tile Cluster Finding.

Partition matching tiles into 4-connected clusters. Every matching tile lands in
exactly one cluster; clusters keep discovery order, which becomes polygon order.
"""

from __future__ import annotations

import logging

from tilehull.engine.context import HullContext
from tilehull.engine.registry import Layer, transform
from tilehull.utils.clusters import find_clusters, make_tile_predicate

logger = logging.getLogger(__name__)


@transform(
    id="T0.01",
    layer=Layer.CLUSTERING,
    description="Flood-fill matching tiles into 4-connected clusters",
)
def cluster_finding(ctx: HullContext) -> None:
    predicate = make_tile_predicate(ctx.options)
    ctx.clusters = find_clusters(ctx.grid, predicate)
    logger.debug(
        "Found %d clusters covering %d tiles",
        len(ctx.clusters),
        sum(len(c) for c in ctx.clusters),
    )
