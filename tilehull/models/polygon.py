"""Hull output models — the only values retained by callers."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from tilehull.utils.geometry import Edge, signed_area


class PolygonEdge(BaseModel):
    """A finished polygon edge with its owning polygon and cached outward normal."""

    model_config = ConfigDict(frozen=True)

    start: tuple[float, float]
    end: tuple[float, float]
    polygon_id: int
    normal: tuple[float, float] = (0.0, 0.0)

    @property
    def edge(self) -> Edge:
        return Edge(self.start, self.end)

    @property
    def direction(self) -> tuple[float, float]:
        return self.edge.direction

    @property
    def length(self) -> float:
        return self.edge.length

    @property
    def midpoint(self) -> tuple[float, float]:
        return ((self.start[0] + self.end[0]) / 2, (self.start[1] + self.end[1]) / 2)


class HullPolygon(BaseModel):
    """One polygon per tile cluster, as a cyclic list of edges."""

    model_config = ConfigDict(frozen=True)

    id: int
    edges: list[PolygonEdge] = Field(default_factory=list)
    tiles: list[tuple[int, int]] = Field(default_factory=list)

    @property
    def points(self) -> list[tuple[float, float]]:
        return [e.start for e in self.edges]

    @property
    def area(self) -> float:
        return abs(signed_area(self.points))

    @property
    def is_degenerate(self) -> bool:
        return len(self.edges) < 3


class TileHullResult(BaseModel):
    polygons: list[HullPolygon] = Field(default_factory=list)
    skipped_clusters: list[int] = Field(default_factory=list)
    errors: dict[str, str] = Field(default_factory=dict)
    processing_time_ms: float = 0.0
