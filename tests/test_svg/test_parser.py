"""Tests for the SVG document walk and compile entry point."""

import xml.etree.ElementTree as ET

import numpy as np
import pytest

from tests.conftest import (
    BAR_CHART_SVG,
    CIRCLE_SVG,
    GROUPED_SVG,
    HOME_SVG,
    MALFORMED_PATH_SVG,
    NOT_SVG,
    SMILEY_SVG,
)

from svgraphics.engine.config import CompileConfig
from svgraphics.engine.errors import InvalidInputError, MalformedPathError
from svgraphics.svg.parser import (
    INITIAL_STYLE,
    compute_style,
    declared_style,
    parse_style_attribute,
    parse_svg,
    walk_drawables,
)


def test_parse_circle():
    ctx = parse_svg(CIRCLE_SVG)
    assert ctx.canvas_width == 10.0
    assert ctx.canvas_height == 10.0
    assert ctx.num_shapes == 1
    assert len(ctx.elements) == 1
    assert ctx.shapes[0].closed
    assert ctx.elements[0].point_count > 10


def test_parse_smiley():
    ctx = parse_svg(SMILEY_SVG)
    assert ctx.num_shapes == 4  # 3 circles + 1 path
    assert len(ctx.elements) == 4


def test_parse_home():
    ctx = parse_svg(HOME_SVG)
    assert ctx.num_shapes == 2
    assert len(ctx.elements) == 2


def test_parse_bar_chart():
    ctx = parse_svg(BAR_CHART_SVG)
    assert len(ctx.elements) == 3
    for shape in ctx.shapes:
        assert not shape.closed


def test_viewbox_scales_to_viewport():
    svg = '<svg xmlns="http://www.w3.org/2000/svg" width="20" height="20" viewBox="0 0 10 10">' \
          '<line x1="0" y1="0" x2="10" y2="0" stroke="black"/></svg>'
    ctx = parse_svg(svg)
    assert ctx.content_size == pytest.approx((20.0, 0.0))


def test_non_svg_root_rejected():
    with pytest.raises(InvalidInputError):
        parse_svg(NOT_SVG)


def test_not_xml_rejected():
    with pytest.raises(InvalidInputError):
        parse_svg("<svg><path d='M0 0'></svg")


def test_empty_input_rejected():
    with pytest.raises(InvalidInputError):
        parse_svg("   ")


def test_nested_svg_root_found():
    svg = '<doc><svg xmlns="http://www.w3.org/2000/svg"><line x1="0" y1="0" x2="4" y2="0" stroke="red"/></svg></doc>'
    ctx = parse_svg(svg)
    assert len(ctx.elements) == 1


def test_svg_inside_html_page_found():
    page = '<html><body><svg><path d="M0 0 L5 0" stroke="black"/></svg><br></body></html>'
    ctx = parse_svg(page)
    assert len(ctx.elements) == 1


def test_html_entities_accepted():
    svg = '<svg xmlns="http://www.w3.org/2000/svg"><title>Home&nbsp;icon &amp; more</title>' \
          '<line x1="0" y1="0" x2="4" y2="0" stroke="red"/></svg>'
    ctx = parse_svg(svg)
    assert len(ctx.elements) == 1


def test_unknown_entity_still_rejected():
    with pytest.raises(InvalidInputError):
        parse_svg('<svg><title>&bogus;</title></svg>')


def test_malformed_path_skipped_by_default():
    ctx = parse_svg(MALFORMED_PATH_SVG)
    assert "E1" in ctx.skipped
    assert len(ctx.elements) == 1
    assert ctx.elements[0].source_id == "E2"


def test_malformed_path_aborts_when_configured():
    with pytest.raises(MalformedPathError):
        parse_svg(MALFORMED_PATH_SVG, CompileConfig(skip_malformed_paths=False))


def test_walk_skips_defs_and_hidden():
    root = ET.fromstring(GROUPED_SVG)
    walked = list(walk_drawables(root, np.eye(3)))
    assert [w.tag for w in walked] == ["rect", "line"]


def test_walk_inherits_style_and_transform():
    root = ET.fromstring(GROUPED_SVG)
    rect, line = walk_drawables(root, np.eye(3))

    assert rect.style["fill"] == "red"
    assert rect.style["stroke"] == "blue"
    assert rect.style["stroke-width"] == "3"
    assert rect.style["opacity"] == "1"
    np.testing.assert_allclose(rect.transform[:2, 2], [10, 20])

    # Inline style wins over the inherited value; opacity does not inherit
    assert line.style["stroke"] == "green"
    assert line.style["opacity"] == "1"


def test_group_opacity_not_inherited_by_children():
    declared = {"opacity": "0.5"}
    parent = compute_style(declared, INITIAL_STYLE)
    child = compute_style({}, parent)
    assert parent["opacity"] == "0.5"
    assert child["opacity"] == "1"


def test_inherit_keyword():
    parent = compute_style({"fill": "red"}, INITIAL_STYLE)
    child = compute_style({"fill": "inherit"}, parent)
    assert child["fill"] == "red"


def test_initial_style_values():
    style = compute_style({}, INITIAL_STYLE)
    assert style["fill"] == "black"
    assert style["stroke"] == "none"


def test_parse_style_attribute():
    assert parse_style_attribute("fill: red; stroke-width:2 !important;;") == {
        "fill": "red",
        "stroke-width": "2",
    }


def test_inline_style_overrides_presentation_attribute():
    el = ET.fromstring('<rect fill="red" style="fill: blue; color: green"/>')
    assert declared_style(el) == {"fill": "blue"}
