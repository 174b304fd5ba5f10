"""Tests for color decoding and style resolution."""

import pytest
from pydantic import ValidationError

from svgraphics.engine.style import (
    BLACK,
    RGBA,
    TRANSPARENT,
    WHITE,
    DrawSettings,
    StyleProperties,
    decode_color,
    resolve_settings,
)

DEFAULTS = DrawSettings(fill_color=WHITE, stroke_color=BLACK, line_width=1.0)
FALLBACK = RGBA(1, 2, 3)


def _resolve(**style: str) -> DrawSettings:
    return resolve_settings(StyleProperties.from_mapping(style), DEFAULTS)


def test_hex_shorthand_expands():
    assert decode_color("#abc", FALLBACK) == RGBA(0xAA, 0xBB, 0xCC, 255)
    assert decode_color("#abc", FALLBACK).to_hex() == "#aabbccff"


def test_hex_with_alpha():
    assert decode_color("#11223344", FALLBACK) == RGBA(0x11, 0x22, 0x33, 0x44)
    assert decode_color("#1234", FALLBACK) == RGBA(0x11, 0x22, 0x33, 0x44)


def test_malformed_hex_uses_default():
    assert decode_color("#12", FALLBACK) == FALLBACK
    assert decode_color("#ggg", FALLBACK) == FALLBACK


def test_rgba_channels():
    assert decode_color("rgba(10,20,30,128)", FALLBACK) == RGBA(10, 20, 30, 128)
    assert decode_color("rgb(10, 20, 30)", FALLBACK) == RGBA(10, 20, 30, 255)


def test_rgba_fractional_alpha_and_percentages():
    assert decode_color("rgba(0, 0, 0, 0.5)", FALLBACK) == RGBA(0, 0, 0, 127)
    assert decode_color("rgb(50%, 0%, 100%)", FALLBACK) == RGBA(127, 0, 255, 255)


def test_rgba_integer_alpha_is_eight_bit():
    assert decode_color("rgba(0,0,0,1)", FALLBACK) == RGBA(0, 0, 0, 1)
    assert decode_color("rgba(0,0,0,1.0)", FALLBACK) == RGBA(0, 0, 0, 255)
    assert decode_color("rgba(0,0,0,100%)", FALLBACK) == RGBA(0, 0, 0, 255)


def test_transparent_and_none():
    assert decode_color("transparent", FALLBACK) == TRANSPARENT
    assert decode_color("none", FALLBACK) == TRANSPARENT


def test_named_colors():
    assert decode_color("Red", FALLBACK) == RGBA(255, 0, 0)
    assert decode_color("orange", FALLBACK) == RGBA(255, 165, 0)


def test_unknown_color_uses_default():
    assert decode_color("currentColor", FALLBACK) == FALLBACK
    assert decode_color("url(#gradient)", FALLBACK) == FALLBACK


def test_transparent_fill_disables_fill():
    settings = _resolve(fill="transparent")
    assert settings.fill_color.a == 0
    assert not settings.need_fill


def test_absent_properties_keep_defaults():
    assert _resolve() == DEFAULTS


def test_opacity_narrowed_per_branch():
    settings = _resolve(fill="red", stroke="blue", opacity="0.8", **{"fill-opacity": "0.5"})
    assert settings.fill_color == RGBA(255, 0, 0, 127)
    # stroke-opacity absent, so the stroke only sees the element opacity
    assert settings.stroke_color == RGBA(0, 0, 255, 204)


def test_stroke_opacity_does_not_affect_fill():
    settings = _resolve(fill="red", stroke="blue", **{"stroke-opacity": "0"})
    assert settings.need_fill
    assert not settings.need_stroke


def test_stroke_width_requires_stroke():
    assert _resolve(**{"stroke-width": "5"}).line_width == 1.0
    assert _resolve(stroke="black", **{"stroke-width": "5"}).line_width == 5.0


def test_style_properties_parse_units_and_percentages():
    props = StyleProperties.from_mapping(
        {"stroke-width": "2px", "fill-opacity": "50%", "opacity": "1.7", "color": "red"}
    )
    assert props.stroke_width == 2.0
    assert props.fill_opacity == 0.5
    assert props.opacity == 1.0


def test_style_properties_blank_paint_is_absent():
    props = StyleProperties.from_mapping({"fill": "  ", "stroke-width": "-3"})
    assert props.fill is None
    assert props.stroke_width is None


def test_style_properties_frozen():
    props = StyleProperties(fill="red")
    with pytest.raises(ValidationError):
        props.fill = "blue"


def test_scaled_alpha_clamps():
    assert RGBA(1, 2, 3, 200).scaled_alpha(2.0).a == 255
    assert RGBA(1, 2, 3, 200).scaled_alpha(0.0).a == 0


def test_from_hex_strict():
    assert RGBA.from_hex("#000000") == BLACK
    with pytest.raises(ValueError):
        RGBA.from_hex("white")
