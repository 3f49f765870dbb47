"""Pipeline orchestrator — runs hull transforms in dependency order."""

from __future__ import annotations

import logging
import time

from tilehull.engine.context import HullContext
from tilehull.engine.registry import TransformRegistry, TransformSpec, get_registry, register_transforms

logger = logging.getLogger(__name__)


class Pipeline:
    """Orchestrates the transform pipeline."""

    def __init__(self, registry: TransformRegistry | None = None) -> None:
        self.registry = registry if registry is not None else get_registry()

    def run(self, ctx: HullContext) -> HullContext:
        """Run every stage on the given context, recording failures in ``ctx.errors``."""
        start = time.perf_counter()
        ordered = self._ordered(ctx)

        logger.info("Pipeline: %d transforms queued", len(ordered))

        for spec in ordered:
            t0 = time.perf_counter()
            if self._run_one(spec, ctx):
                elapsed = (time.perf_counter() - t0) * 1000
                logger.debug("  %s completed in %.1fms", spec.id, elapsed)

        total = (time.perf_counter() - start) * 1000
        logger.info(
            "Pipeline complete: %d/%d transforms, %d polygons in %.0fms",
            len(ctx.completed_transforms),
            len(ordered),
            len(ctx.polygons),
            total,
        )
        return ctx

    def _ordered(self, ctx: HullContext) -> list[TransformSpec]:
        if self._nothing_can_match(ctx):
            logger.debug("Skipping %d transforms: nothing can match", len(self.registry))
            return []
        return self.registry.resolve_order()

    def _run_one(self, spec: TransformSpec, ctx: HullContext) -> bool:
        try:
            spec.fn(ctx)
        except Exception as e:
            ctx.errors[spec.id] = str(e)
            logger.warning("  %s FAILED: %s", spec.id, e)
            return False
        ctx.completed_transforms.add(spec.id)
        return True

    @staticmethod
    def _nothing_can_match(ctx: HullContext) -> bool:
        return ctx.options.is_empty or ctx.grid.width == 0 or ctx.grid.height == 0


def create_pipeline(registry: TransformRegistry | None = None) -> Pipeline:
    """Factory function: a pipeline over the registry with all hull transforms loaded."""
    if registry is None:
        registry = register_transforms()
    return Pipeline(registry=registry)
