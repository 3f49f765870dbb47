"""tilehull — collision polygons from tile layers."""

from __future__ import annotations

import logging

from tilehull.api import build_tile_hulls
from tilehull.config import settings
from tilehull.engine.config import HullConfig
from tilehull.models.polygon import HullPolygon, PolygonEdge, TileHullResult
from tilehull.models.requests import MatchOptions
from tilehull.models.tiles import Tile, TileGrid

__version__ = "0.1.0"

__all__ = [
    "build_tile_hulls",
    "configure_logging",
    "HullConfig",
    "HullPolygon",
    "MatchOptions",
    "PolygonEdge",
    "Tile",
    "TileGrid",
    "TileHullResult",
]


def configure_logging(level: str | None = None) -> None:
    """Root logging setup for applications and scripts embedding the library."""
    level = level or settings.log_level
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )
