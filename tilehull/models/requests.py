"""Tile matching options."""

from __future__ import annotations

from pydantic import BaseModel, Field


class MatchOptions(BaseModel):
    """Which tiles belong to a hull. A tile has to satisfy only ONE configured mode."""

    tile_indices: set[int] | None = Field(
        default=None,
        description="Tile indices to cluster; a tile whose index is in the set matches",
    )
    tile_property: str | None = Field(
        default=None,
        description="Name of a tile property; a tile with a truthy value matches",
    )
    check_collide: bool = Field(
        default=False,
        description="If true, colliding tiles match",
    )

    @property
    def is_empty(self) -> bool:
        return not self.tile_indices and not self.tile_property and not self.check_collide
