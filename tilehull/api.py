"""Library entry point — tile layer in, collision polygons out."""

from __future__ import annotations

import logging
import time

from tilehull.engine.config import HullConfig
from tilehull.engine.context import HullContext
from tilehull.engine.pipeline import create_pipeline
from tilehull.models.polygon import TileHullResult
from tilehull.models.requests import MatchOptions
from tilehull.models.tiles import TileGrid

logger = logging.getLogger(__name__)


def build_tile_hulls(
    grid: TileGrid,
    options: MatchOptions | None = None,
    config: HullConfig | None = None,
) -> TileHullResult:
    """Build one polygon per connected cluster of matching tiles.

    With no ``options`` nothing matches and the result holds no polygons.
    Polygons come back in cluster discovery order; each is a cyclic list of
    edges in pixel space with outward normals cached.
    """
    start = time.perf_counter()
    ctx = HullContext(
        grid=grid,
        options=options or MatchOptions(),
        config=config or HullConfig.from_settings(),
    )
    create_pipeline().run(ctx)

    if ctx.skipped_clusters:
        logger.info(
            "%d of %d clusters produced no polygon",
            len(ctx.skipped_clusters),
            ctx.num_clusters,
        )

    return TileHullResult(
        polygons=ctx.polygons,
        skipped_clusters=ctx.skipped_clusters,
        errors=ctx.errors,
        processing_time_ms=round((time.perf_counter() - start) * 1000, 2),
    )
