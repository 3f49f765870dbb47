"""tilehull transform engine."""

from tilehull.engine.registry import transform, Layer, get_registry, register_transforms
from tilehull.engine.config import HullConfig
from tilehull.engine.context import HullContext
from tilehull.engine.pipeline import Pipeline, create_pipeline

__all__ = [
    "transform",
    "Layer",
    "get_registry",
    "register_transforms",
    "HullConfig",
    "HullContext",
    "Pipeline",
    "create_pipeline",
]
