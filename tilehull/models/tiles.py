"""Tile layer data model — the grid the hull pipeline scans."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

import numpy as np
from numpy.typing import NDArray

# Tile-map convention for a cell with no tile
EMPTY_INDEX = -1


@dataclass(frozen=True)
class Tile:
    """One cell of a tile layer."""

    x: int
    y: int
    index: int
    width: float = 1.0
    height: float = 1.0
    collides: bool = False
    properties: Mapping[str, Any] = field(default_factory=dict)

    @property
    def left(self) -> float:
        return self.x * self.width

    @property
    def top(self) -> float:
        return self.y * self.height

    @property
    def right(self) -> float:
        return (self.x + 1) * self.width

    @property
    def bottom(self) -> float:
        return (self.y + 1) * self.height


@dataclass
class TileGrid:
    """A width x height layer of optional tiles, addressed by zero-based (x, y)."""

    width: int
    height: int
    tile_width: float = 1.0
    tile_height: float = 1.0
    tiles: dict[tuple[int, int], Tile] = field(default_factory=dict)

    def get(self, x: int, y: int) -> Tile | None:
        if x < 0 or y < 0 or x >= self.width or y >= self.height:
            return None
        return self.tiles.get((x, y))

    def put(
        self,
        x: int,
        y: int,
        index: int,
        *,
        collides: bool = False,
        properties: Mapping[str, Any] | None = None,
    ) -> Tile:
        if x < 0 or y < 0 or x >= self.width or y >= self.height:
            raise ValueError(f"Tile ({x}, {y}) outside {self.width}x{self.height} grid")
        tile = Tile(
            x=x,
            y=y,
            index=index,
            width=self.tile_width,
            height=self.tile_height,
            collides=collides,
            properties=dict(properties or {}),
        )
        self.tiles[(x, y)] = tile
        return tile

    @classmethod
    def from_indices(
        cls,
        indices: NDArray[np.int64] | list[list[int]],
        *,
        tile_width: float = 1.0,
        tile_height: float = 1.0,
        empty_index: int = EMPTY_INDEX,
        collide_indices: set[int] | None = None,
        properties: Mapping[int, Mapping[str, Any]] | None = None,
    ) -> TileGrid:
        """Build a grid from a 2D index array laid out as ``indices[y, x]``.

        Cells equal to ``empty_index`` hold no tile. ``collide_indices`` marks
        tiles of those indices as colliding, ``properties`` maps an index to the
        property dict shared by every tile of that index.
        """
        arr = np.asarray(indices, dtype=np.int64)
        if arr.ndim != 2:
            raise ValueError(f"Expected a 2D index array, got shape {arr.shape}")

        height, width = arr.shape
        grid = cls(width=width, height=height, tile_width=tile_width, tile_height=tile_height)
        collide_indices = collide_indices or set()
        properties = properties or {}

        for y, x in zip(*np.nonzero(arr != empty_index)):
            index = int(arr[y, x])
            grid.put(
                int(x),
                int(y),
                index,
                collides=index in collide_indices,
                properties=properties.get(index),
            )
        return grid
