"""Shared test fixtures."""

from __future__ import annotations

import pytest

from tilehull.models.tiles import TileGrid


# Index layouts, indices[y][x]; -1 = no tile

SINGLE_CENTER = [
    [-1, -1, -1],
    [-1, 1, -1],
    [-1, -1, -1],
]

L_SHAPE = [
    [1, 1, -1],
    [1, -1, -1],
    [-1, -1, -1],
]

PLUS_SHAPE = [
    [-1, 1, -1],
    [1, 1, 1],
    [-1, 1, -1],
]

SOLID_BLOCK = [
    [1, 1, 1],
    [1, 1, 1],
    [1, 1, 1],
]

# One-tile-wide notch open to the top edge
U_NOTCH = [
    [1, -1, 1],
    [1, 1, 1],
]

# Ring of tiles around an empty cell
RING = [
    [1, 1, 1],
    [1, -1, 1],
    [1, 1, 1],
]

TWO_ISLANDS = [
    [1, 1, -1, -1, -1],
    [1, 1, -1, 2, 2],
    [-1, -1, -1, 2, 2],
]

# Diagonal neighbours only: three separate clusters under 4-connectivity
DIAGONAL = [
    [1, -1, -1],
    [-1, 1, -1],
    [-1, -1, 1],
]

MIXED = [
    [3, 3, -1, 5],
    [-1, 4, -1, 5],
    [7, -1, 6, 6],
]

TILE_SIZE = 32


def make_grid(layout: list[list[int]], tile_size: float = TILE_SIZE, **kwargs) -> TileGrid:
    return TileGrid.from_indices(layout, tile_width=tile_size, tile_height=tile_size, **kwargs)


@pytest.fixture
def single_center_grid() -> TileGrid:
    return make_grid(SINGLE_CENTER)


@pytest.fixture
def l_shape_grid() -> TileGrid:
    return make_grid(L_SHAPE)


@pytest.fixture
def plus_grid() -> TileGrid:
    return make_grid(PLUS_SHAPE)


@pytest.fixture
def block_grid() -> TileGrid:
    return make_grid(SOLID_BLOCK)


@pytest.fixture
def two_islands_grid() -> TileGrid:
    return make_grid(TWO_ISLANDS)


@pytest.fixture
def u_notch_grid() -> TileGrid:
    return make_grid(U_NOTCH)


@pytest.fixture
def ring_grid() -> TileGrid:
    return make_grid(RING)
