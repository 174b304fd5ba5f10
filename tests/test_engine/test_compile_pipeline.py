"""Tests for the pipeline orchestrator and the compile stages."""

import pytest

from svgraphics.engine.config import CompileConfig
from svgraphics.engine.context import CompileContext
from svgraphics.engine.errors import InvalidInputError
from svgraphics.engine.pipeline import Pipeline, create_pipeline
from svgraphics.engine.registry import Layer, StageRegistry, StageSpec
from svgraphics.engine.style import RGBA, WHITE
from tests.conftest import CIRCLE_SVG, GROUPED_SVG, NOT_SVG


def test_pipeline_runs_stages():
    reg = StageRegistry()
    results = []

    def s1(ctx: CompileContext) -> None:
        results.append("s1")

    def s2(ctx: CompileContext) -> None:
        results.append("s2")

    reg.register(StageSpec(id="C0.02", layer=Layer.PARSING, fn=s2, dependencies=["C0.01"]))
    reg.register(StageSpec(id="C0.01", layer=Layer.PARSING, fn=s1))

    ctx = Pipeline(registry=reg).run(CompileContext())

    assert results == ["s1", "s2"]
    assert ctx.completed_stages == {"C0.01", "C0.02"}


def test_pipeline_propagates_errors():
    reg = StageRegistry()
    results = []

    def fail(ctx: CompileContext) -> None:
        raise ValueError("test error")

    def after(ctx: CompileContext) -> None:
        results.append("after")

    reg.register(StageSpec(id="C0.01", layer=Layer.PARSING, fn=fail))
    reg.register(StageSpec(id="C0.02", layer=Layer.PARSING, fn=after, dependencies=["C0.01"]))

    ctx = CompileContext()
    with pytest.raises(ValueError, match="test error"):
        Pipeline(registry=reg).run(ctx)

    assert results == []
    assert "C0.01" not in ctx.completed_stages


def test_full_compile_populates_context():
    ctx = create_pipeline().run(CompileContext(svg_raw=CIRCLE_SVG))
    shape = ctx.shapes[0]
    assert shape.id == "E1"
    assert shape.tag == "circle"
    assert shape.path_data.startswith("M2 5 a3 3")
    assert shape.settings.fill_color == RGBA(255, 0, 0)
    assert shape.settings.line_width == 2.0
    assert len(ctx.completed_stages) == 7

    artwork = ctx.to_artwork()
    assert len(artwork.elements) == 1
    assert artwork.content_size == pytest.approx((6.0, 6.0), abs=0.2)


def test_cascade_reaches_settings():
    ctx = create_pipeline().run(CompileContext(svg_raw=GROUPED_SVG))
    rect, line = ctx.shapes
    assert rect.settings.fill_color == RGBA(255, 0, 0)
    assert rect.settings.stroke_color == RGBA(0, 0, 255)
    assert rect.settings.line_width == 3.0
    assert line.settings.stroke_color == RGBA(0, 128, 0)


def test_unrecognized_color_falls_back_to_config_default():
    svg = '<svg xmlns="http://www.w3.org/2000/svg"><rect width="4" height="4" fill="currentColor"/></svg>'
    ctx = create_pipeline().run(CompileContext(svg_raw=svg))
    assert ctx.shapes[0].settings.fill_color == WHITE

    custom = CompileConfig(default_fill_color=RGBA(9, 9, 9))
    ctx = create_pipeline().run(CompileContext(svg_raw=svg, config=custom))
    assert ctx.shapes[0].settings.fill_color == RGBA(9, 9, 9)


def test_invalid_input_produces_nothing():
    ctx = CompileContext(svg_raw=NOT_SVG)
    with pytest.raises(InvalidInputError):
        create_pipeline().run(ctx)
    assert ctx.shapes == []
    assert ctx.elements == []


def test_multiple_subpaths_become_separate_elements():
    svg = '<svg xmlns="http://www.w3.org/2000/svg"><path d="M0 0 L4 0 M0 5 L4 5 M9 9" stroke="black"/></svg>'
    ctx = create_pipeline().run(CompileContext(svg_raw=svg))
    assert len(ctx.shapes[0].subpaths) == 3
    # The lone moveTo has no length and is dropped
    assert len(ctx.elements) == 2
    assert {el.source_id for el in ctx.elements} == {"E1"}


@pytest.mark.parametrize("threshold", [0, 1.5, float("nan")])
def test_config_rejects_bad_threshold(threshold):
    with pytest.raises(ValueError):
        CompileConfig(threshold=threshold)
