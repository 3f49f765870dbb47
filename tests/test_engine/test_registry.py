"""Tests for the transform registry."""

import pytest

from tilehull.engine.context import HullContext
from tilehull.engine.registry import (
    Layer,
    TransformRegistry,
    TransformSpec,
    get_registry,
    register_transforms,
)


def _noop(ctx: HullContext) -> None:
    pass


def test_register():
    reg = TransformRegistry()
    reg.register(TransformSpec(id="T0.01", layer=Layer.CLUSTERING, fn=_noop))
    assert len(reg) == 1
    assert [s.id for s in reg.resolve_order()] == ["T0.01"]


def test_duplicate_id_rejected():
    reg = TransformRegistry()
    reg.register(TransformSpec(id="T0.01", layer=Layer.CLUSTERING, fn=_noop))
    with pytest.raises(ValueError, match="Duplicate"):
        reg.register(TransformSpec(id="T0.01", layer=Layer.CLUSTERING, fn=_noop))


def test_resolve_order_with_deps():
    reg = TransformRegistry()
    # Registered out of order on purpose
    reg.register(TransformSpec(id="T2.01", layer=Layer.POLYGONS, fn=_noop, dependencies=["T1.02"]))
    reg.register(TransformSpec(id="T1.02", layer=Layer.HULL, fn=_noop))
    ids = [s.id for s in reg.resolve_order()]
    assert ids == ["T1.02", "T2.01"]


def test_independent_stages_ordered_by_layer_then_id():
    reg = TransformRegistry()
    reg.register(TransformSpec(id="T1.01", layer=Layer.HULL, fn=_noop))
    reg.register(TransformSpec(id="T0.02", layer=Layer.CLUSTERING, fn=_noop))
    reg.register(TransformSpec(id="T0.01", layer=Layer.CLUSTERING, fn=_noop))
    assert [s.id for s in reg.resolve_order()] == ["T0.01", "T0.02", "T1.01"]


def test_resolve_order_circular():
    reg = TransformRegistry()
    reg.register(TransformSpec(id="A", layer=Layer.HULL, fn=_noop, dependencies=["B"]))
    reg.register(TransformSpec(id="B", layer=Layer.HULL, fn=_noop, dependencies=["A"]))
    with pytest.raises(ValueError, match="Circular"):
        reg.resolve_order()


def test_resolve_order_unknown_dependency():
    reg = TransformRegistry()
    reg.register(TransformSpec(id="T2.01", layer=Layer.POLYGONS, fn=_noop, dependencies=["T1.99"]))
    with pytest.raises(ValueError, match="unknown"):
        reg.resolve_order()


def test_builtin_transforms_registered():
    reg = register_transforms()
    assert reg is get_registry()
    ids = [s.id for s in reg.resolve_order()]
    assert ids == ["T0.01", "T1.01", "T1.02", "T2.01", "T2.02"]


def test_register_transforms_is_idempotent():
    before = len(register_transforms())
    assert len(register_transforms()) == before == 5
