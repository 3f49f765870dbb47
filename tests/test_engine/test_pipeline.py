"""Tests for the pipeline orchestrator."""

from tilehull.engine.context import HullContext
from tilehull.engine.pipeline import Pipeline, create_pipeline
from tilehull.engine.registry import Layer, TransformRegistry, TransformSpec
from tilehull.models.requests import MatchOptions
from tilehull.models.tiles import TileGrid
from tests.conftest import L_SHAPE, U_NOTCH, make_grid

ANY = MatchOptions(tile_indices={1})


def _ctx(grid=None, options=ANY) -> HullContext:
    return HullContext(grid=grid or TileGrid(width=2, height=2), options=options)


def test_pipeline_runs_transforms():
    reg = TransformRegistry()
    results = []

    def t1(ctx: HullContext) -> None:
        results.append("t1")

    def t2(ctx: HullContext) -> None:
        results.append("t2")

    reg.register(TransformSpec(id="T0.01", layer=Layer.CLUSTERING, fn=t1))
    reg.register(TransformSpec(id="T0.02", layer=Layer.CLUSTERING, fn=t2, dependencies=["T0.01"]))

    pipeline = Pipeline(registry=reg)
    ctx = pipeline.run(_ctx())

    assert results == ["t1", "t2"]
    assert "T0.01" in ctx.completed_transforms
    assert "T0.02" in ctx.completed_transforms


def test_pipeline_handles_errors():
    reg = TransformRegistry()

    def fail(ctx: HullContext) -> None:
        raise RuntimeError("test error")

    reg.register(TransformSpec(id="T0.01", layer=Layer.CLUSTERING, fn=fail))

    ctx = Pipeline(registry=reg).run(_ctx())

    assert "T0.01" in ctx.errors
    assert "test error" in ctx.errors["T0.01"]
    assert "T0.01" not in ctx.completed_transforms


def test_pipeline_skips_everything_without_options():
    reg = TransformRegistry()
    calls = []
    reg.register(TransformSpec(id="T0.01", layer=Layer.CLUSTERING, fn=lambda ctx: calls.append(1)))

    ctx = Pipeline(registry=reg).run(_ctx(options=MatchOptions()))

    assert calls == []
    assert ctx.completed_transforms == set()


def test_failed_stage_does_not_stop_later_stages():
    reg = TransformRegistry()
    seen = []

    def fail(ctx: HullContext) -> None:
        raise RuntimeError("boom")

    reg.register(TransformSpec(id="T0.01", layer=Layer.CLUSTERING, fn=fail))
    reg.register(TransformSpec(id="T1.01", layer=Layer.HULL, fn=lambda ctx: seen.append("h")))

    ctx = Pipeline(registry=reg).run(_ctx())

    assert seen == ["h"]
    assert ctx.completed_transforms == {"T1.01"}


def test_full_pipeline_fills_context():
    ctx = create_pipeline().run(_ctx(grid=make_grid(L_SHAPE)))

    assert ctx.num_clusters == 1
    assert len(ctx.corner_sets[0]) == 8
    assert len(ctx.boundaries[0]) >= 6
    assert len(ctx.edge_sets[0]) == 6
    assert ctx.errors == {}
    assert ctx.completed_transforms == {"T0.01", "T1.01", "T1.02", "T2.01", "T2.02"}


def test_full_pipeline_traces_notch():
    ctx = create_pipeline().run(_ctx(grid=make_grid(U_NOTCH)))

    assert ctx.num_clusters == 1
    assert len(ctx.edge_sets[0]) == 8
