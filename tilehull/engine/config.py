"""Hull pipeline configuration — per-call knobs, seeded from environment settings."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from tilehull.config import Settings, settings
from tilehull.utils.hull import HullProvider

DEGENERATE_POLICIES = ("drop", "keep")


@dataclass
class HullConfig:
    """Controls hull construction and edge reduction for one run."""

    # Passed to a custom hull provider: 0 = convex, 1 = maximally concave
    concavity: float = 1.0
    # None traces the exact tile outline of each cluster
    hull_provider: HullProvider | None = None

    # 0 = exact cross-product test
    collinear_tolerance: float = 0.0

    # What to do with a cluster whose boundary reduces below 3 edges
    degenerate_policy: Literal["drop", "keep"] = "drop"

    def __post_init__(self) -> None:
        if self.degenerate_policy not in DEGENERATE_POLICIES:
            raise ValueError(
                f"degenerate_policy must be one of {DEGENERATE_POLICIES}, "
                f"got {self.degenerate_policy!r}"
            )

    @classmethod
    def from_settings(cls, source: Settings | None = None) -> HullConfig:
        if source is None:
            source = settings
        return cls(
            concavity=source.concavity,
            collinear_tolerance=source.collinear_tolerance,
            degenerate_policy=source.degenerate_policy,
        )
