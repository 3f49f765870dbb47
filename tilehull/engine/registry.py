"""Stage registry — each hull stage is a function registered with ``@transform``.

Usage:
    @transform(id="T2.01", layer=Layer.POLYGONS, dependencies=["T1.02"])
    def edge_reduction(ctx: HullContext) -> None:
        ...

Stages live one per module under the ``layer0`` .. ``layer2`` packages;
``register_transforms()`` imports them so the decorators fire.
"""

from __future__ import annotations

import enum
import graphlib
import importlib
import logging
import pkgutil
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:
    from tilehull.engine.context import HullContext

logger = logging.getLogger(__name__)

LAYER_PACKAGES = ("layer0", "layer1", "layer2")


class Layer(enum.IntEnum):
    CLUSTERING = 0
    HULL = 1
    POLYGONS = 2


@dataclass
class TransformSpec:
    id: str
    layer: Layer
    fn: Callable[["HullContext"], None]
    dependencies: list[str] = field(default_factory=list)
    description: str = ""


class TransformRegistry:
    """Hull stages keyed by ID, handed out in dependency order."""

    def __init__(self) -> None:
        self._transforms: dict[str, TransformSpec] = {}

    def __len__(self) -> int:
        return len(self._transforms)

    def register(self, spec: TransformSpec) -> None:
        if spec.id in self._transforms:
            raise ValueError(f"Duplicate transform ID: {spec.id}")
        self._transforms[spec.id] = spec
        logger.debug("Registered transform %s (%s)", spec.id, spec.layer.name)

    def resolve_order(self) -> list[TransformSpec]:
        """Every stage after its dependencies; ties broken by (layer, id).

        Raises ``ValueError`` for a dependency on an unregistered stage or a cycle.
        """
        sorter: graphlib.TopologicalSorter[str] = graphlib.TopologicalSorter()
        for spec in self._transforms.values():
            missing = [dep for dep in spec.dependencies if dep not in self._transforms]
            if missing:
                raise ValueError(f"Transform {spec.id} depends on unknown {missing}")
            sorter.add(spec.id, *spec.dependencies)

        try:
            sorter.prepare()
        except graphlib.CycleError as e:
            raise ValueError(f"Circular dependency detected among: {e.args[1]}") from e

        ordered: list[TransformSpec] = []
        while sorter.is_active():
            ready = sorted(
                (self._transforms[tid] for tid in sorter.get_ready()),
                key=lambda s: (s.layer, s.id),
            )
            ordered.extend(ready)
            sorter.done(*(s.id for s in ready))
        return ordered


# Module-level singleton
_registry = TransformRegistry()


def get_registry() -> TransformRegistry:
    return _registry


def transform(
    *,
    id: str,
    layer: Layer,
    dependencies: list[str] | None = None,
    description: str = "",
):
    """Decorator to register a hull stage."""

    def decorator(fn: Callable[["HullContext"], None]):
        _registry.register(
            TransformSpec(
                id=id,
                layer=layer,
                fn=fn,
                dependencies=dependencies or [],
                description=description,
            )
        )
        return fn

    return decorator


def register_transforms() -> TransformRegistry:
    """Import all stage modules so ``@transform`` decorators fire.

    Safe to call repeatedly: already-imported modules are not re-executed.
    """
    for layer_name in LAYER_PACKAGES:
        package = importlib.import_module(f"tilehull.engine.{layer_name}")
        for _, module_name, _ in pkgutil.iter_modules(package.__path__):
            importlib.import_module(f"{package.__name__}.{module_name}")
    return _registry
