"""HullContext — the single mutable state object flowing through all hull transforms.

Per-cluster intermediate results are keyed by cluster number (discovery order).
Only ``polygons`` is meant to leave the context.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from tilehull.engine.config import HullConfig
from tilehull.models.polygon import HullPolygon
from tilehull.models.requests import MatchOptions
from tilehull.models.tiles import TileGrid
from tilehull.utils.geometry import Edge, Point


@dataclass
class HullContext:
    """Shared state for one grid → polygons run."""

    grid: TileGrid
    options: MatchOptions = field(default_factory=MatchOptions)
    config: HullConfig = field(default_factory=HullConfig)

    # --- Layer 0: clustering ---
    clusters: list[list[tuple[int, int]]] = field(default_factory=list)

    # --- Layer 1: hull (tile units) ---
    corner_sets: dict[int, list[tuple[int, int]]] = field(default_factory=dict)
    boundaries: dict[int, list[Point]] = field(default_factory=dict)

    # --- Layer 2: polygons ---
    edge_sets: dict[int, list[Edge]] = field(default_factory=dict)
    polygons: list[HullPolygon] = field(default_factory=list)

    # Clusters that produced no polygon
    skipped_clusters: list[int] = field(default_factory=list)

    # --- Pipeline metadata ---
    completed_transforms: set[str] = field(default_factory=set)
    errors: dict[str, str] = field(default_factory=dict)

    @property
    def num_clusters(self) -> int:
        return len(self.clusters)

    def skip(self, cluster_id: int) -> None:
        if cluster_id not in self.skipped_clusters:
            self.skipped_clusters.append(cluster_id)
