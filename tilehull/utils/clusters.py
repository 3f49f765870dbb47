"""Connected tile clusters — 4-connected flood fill over a tile grid."""

from __future__ import annotations

from collections import deque
from collections.abc import Callable

import numpy as np
from numpy.typing import NDArray

from tilehull.models.requests import MatchOptions
from tilehull.models.tiles import Tile, TileGrid

Cell = tuple[int, int]
TilePredicate = Callable[[Tile | None], bool]

# North, south, east, west
NEIGHBORS_4 = [(0, -1), (0, 1), (1, 0), (-1, 0)]


def make_tile_predicate(options: MatchOptions) -> TilePredicate:
    """Combine the configured matching modes with logical OR."""
    indices = options.tile_indices
    prop = options.tile_property
    check_collide = options.check_collide

    def matches(tile: Tile | None) -> bool:
        if tile is None:
            return False
        if indices and tile.index in indices:
            return True
        if prop and tile.properties.get(prop):
            return True
        if check_collide and tile.collides:
            return True
        return False

    return matches


def find_clusters(grid: TileGrid, predicate: TilePredicate) -> list[list[Cell]]:
    """Partition the matching cells of ``grid`` into 4-connected clusters.

    Cells are scanned column by column (x outer, y inner); clusters are returned
    in discovery order, each listing its cells in visit order.
    """
    assigned: set[Cell] = set()
    clusters: list[list[Cell]] = []

    for x in range(grid.width):
        for y in range(grid.height):
            if (x, y) in assigned or not predicate(grid.get(x, y)):
                continue
            clusters.append(_grow_cluster(grid, predicate, (x, y), assigned))

    return clusters


def _grow_cluster(
    grid: TileGrid,
    predicate: TilePredicate,
    seed: Cell,
    assigned: set[Cell],
) -> list[Cell]:
    cluster: list[Cell] = []
    stack: deque[Cell] = deque([seed])
    assigned.add(seed)

    while stack:
        cx, cy = stack.pop()
        cluster.append((cx, cy))
        for dx, dy in NEIGHBORS_4:
            neighbor = (cx + dx, cy + dy)
            if neighbor in assigned:
                continue
            if predicate(grid.get(*neighbor)):
                assigned.add(neighbor)
                stack.append(neighbor)

    return cluster


def label_clusters(grid: TileGrid, clusters: list[list[Cell]]) -> NDArray[np.int64]:
    """Label image of shape (height, width): cluster number per cell, -1 if unassigned."""
    labels = np.full((grid.height, grid.width), -1, dtype=np.int64)
    for label, cluster in enumerate(clusters):
        for x, y in cluster:
            labels[y, x] = label
    return labels


def cluster_corners(cluster: list[Cell]) -> list[tuple[int, int]]:
    """Corners of every cell in the cluster, in tile units, de-duplicated in first-seen order.

    Cell (x, y) spans [x, x + 1] x [y, y + 1]; scale by the tile size for pixels.
    """
    seen: dict[tuple[int, int], None] = {}
    for x, y in cluster:
        for corner in ((x, y), (x + 1, y), (x, y + 1), (x + 1, y + 1)):
            seen.setdefault(corner, None)
    return list(seen)
