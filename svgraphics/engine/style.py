"""Style resolution — computed style properties → DrawSettings.

The style record is validated once at the boundary (``StyleProperties``);
resolution itself only reads typed optional fields.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

logger = logging.getLogger(__name__)

_NUMBER_RE = re.compile(r"[-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?")
_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")


def _clamp_channel(value: float) -> int:
    return int(min(255.0, max(0.0, value)))


@dataclass(frozen=True)
class RGBA:
    """8-bit color channels, alpha included."""

    r: int
    g: int
    b: int
    a: int = 255

    def scaled_alpha(self, factor: float) -> RGBA:
        return RGBA(self.r, self.g, self.b, _clamp_channel(self.a * factor))

    def to_hex(self) -> str:
        return f"#{self.r:02x}{self.g:02x}{self.b:02x}{self.a:02x}"

    @classmethod
    def from_hex(cls, text: str) -> RGBA:
        """Strict variant of hex decoding, used for configured defaults."""
        color = _decode_hex(text.lstrip("#"))
        if color is None:
            raise ValueError(f"Not a hex color: {text!r}")
        return color


TRANSPARENT = RGBA(0, 0, 0, 0)
BLACK = RGBA(0, 0, 0)
WHITE = RGBA(255, 255, 255)

NAMED_COLORS: dict[str, RGBA] = {
    "black": BLACK,
    "white": WHITE,
    "silver": RGBA(192, 192, 192),
    "gray": RGBA(128, 128, 128),
    "grey": RGBA(128, 128, 128),
    "maroon": RGBA(128, 0, 0),
    "red": RGBA(255, 0, 0),
    "purple": RGBA(128, 0, 128),
    "fuchsia": RGBA(255, 0, 255),
    "magenta": RGBA(255, 0, 255),
    "green": RGBA(0, 128, 0),
    "lime": RGBA(0, 255, 0),
    "olive": RGBA(128, 128, 0),
    "yellow": RGBA(255, 255, 0),
    "navy": RGBA(0, 0, 128),
    "blue": RGBA(0, 0, 255),
    "teal": RGBA(0, 128, 128),
    "aqua": RGBA(0, 255, 255),
    "cyan": RGBA(0, 255, 255),
    "orange": RGBA(255, 165, 0),
    "pink": RGBA(255, 192, 203),
    "brown": RGBA(165, 42, 42),
}


@dataclass(frozen=True)
class DrawSettings:
    """Authored appearance of one element. Fill/stroke flags follow the alpha."""

    fill_color: RGBA
    stroke_color: RGBA
    line_width: float

    @property
    def need_fill(self) -> bool:
        return self.fill_color.a > 0

    @property
    def need_stroke(self) -> bool:
        return self.stroke_color.a > 0


def _decode_hex(digits: str) -> RGBA | None:
    if not digits or not set(digits) <= _HEX_DIGITS:
        return None
    if len(digits) in (3, 4):
        digits = "".join(ch * 2 for ch in digits)
    if len(digits) not in (6, 8):
        return None
    channels = [int(digits[i:i + 2], 16) for i in range(0, len(digits), 2)]
    return RGBA(*channels)


def _decode_rgb(text: str) -> RGBA | None:
    open_idx = text.find("(")
    close_idx = text.rfind(")")
    if open_idx < 0 or close_idx < open_idx:
        return None
    tokens = [t for t in re.split(r"[\s,/]+", text[open_idx + 1:close_idx]) if t]
    if len(tokens) < 3:
        return None

    channels: list[int] = []
    try:
        for token in tokens[:3]:
            if token.endswith("%"):
                channels.append(_clamp_channel(float(token[:-1]) * 255 / 100))
            else:
                channels.append(_clamp_channel(float(token)))

        if len(tokens) > 3:
            alpha = tokens[3]
            if alpha.endswith("%"):
                channels.append(_clamp_channel(float(alpha[:-1]) * 255 / 100))
            elif "." in alpha:
                # Fractional alpha is on the 0..1 scale
                channels.append(_clamp_channel(float(alpha) * 255))
            else:
                channels.append(_clamp_channel(float(alpha)))
    except ValueError:
        return None

    return RGBA(*channels)


def decode_color(value: str, default: RGBA) -> RGBA:
    """Decode a color string, falling back to ``default`` when unrecognized.

    The fourth ``rgba()`` argument is read on the 0..255 scale when written as
    an integer, so ``rgba(0,0,0,1)`` is alpha 1/255 and nearly invisible. Write
    ``1.0`` or ``100%`` for opaque: alpha with a decimal point is on the 0..1
    scale, and a percentage is a share of full opacity.
    """
    text = value.strip()
    lowered = text.lower()

    if text.startswith("#"):
        color = _decode_hex(text[1:])
        if color is None:
            logger.warning("Malformed hex color %r, using default", value)
            return default
        return color

    if lowered.startswith("rgb"):
        color = _decode_rgb(text)
        if color is None:
            logger.warning("Malformed rgb() color %r, using default", value)
            return default
        return color

    if lowered in ("transparent", "none"):
        return TRANSPARENT

    if lowered in NAMED_COLORS:
        return NAMED_COLORS[lowered]

    return default


def _leading_number(text: str) -> float | None:
    m = _NUMBER_RE.search(text)
    return float(m.group(0)) if m else None


class StyleProperties(BaseModel):
    """Typed subset of computed style consumed by the resolver."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore", frozen=True)

    fill: str | None = None
    stroke: str | None = None
    opacity: float | None = None
    fill_opacity: float | None = Field(default=None, alias="fill-opacity")
    stroke_opacity: float | None = Field(default=None, alias="stroke-opacity")
    stroke_width: float | None = Field(default=None, alias="stroke-width")

    @field_validator("fill", "stroke", mode="before")
    @classmethod
    def _strip_paint(cls, v: Any) -> str | None:
        if v is None:
            return None
        text = str(v).strip()
        return text or None

    @field_validator("opacity", "fill_opacity", "stroke_opacity", mode="before")
    @classmethod
    def _parse_opacity(cls, v: Any) -> float | None:
        if v is None or isinstance(v, (int, float)):
            return None if v is None else min(1.0, max(0.0, float(v)))
        text = str(v).strip()
        number = _leading_number(text)
        if number is None:
            return None
        if text.endswith("%"):
            number /= 100
        return min(1.0, max(0.0, number))

    @field_validator("stroke_width", mode="before")
    @classmethod
    def _parse_width(cls, v: Any) -> float | None:
        if v is None:
            return None
        number = float(v) if isinstance(v, (int, float)) else _leading_number(str(v))
        if number is None or number < 0:
            return None
        return number

    @classmethod
    def from_mapping(cls, style: Mapping[str, str]) -> StyleProperties:
        return cls.model_validate(dict(style))


def resolve_settings(props: StyleProperties, defaults: DrawSettings) -> DrawSettings:
    """Compute DrawSettings from style properties, falling back to ``defaults``.

    ``opacity`` is narrowed by ``fill-opacity`` for the fill and independently
    by ``stroke-opacity`` for the stroke.
    """
    opacity = 1.0 if props.opacity is None else props.opacity

    fill_color = defaults.fill_color
    if props.fill is not None:
        fill_opacity = opacity if props.fill_opacity is None else min(opacity, props.fill_opacity)
        fill_color = decode_color(props.fill, defaults.fill_color).scaled_alpha(fill_opacity)

    stroke_color = defaults.stroke_color
    line_width = defaults.line_width
    if props.stroke is not None:
        stroke_opacity = opacity if props.stroke_opacity is None else min(opacity, props.stroke_opacity)
        stroke_color = decode_color(props.stroke, defaults.stroke_color).scaled_alpha(stroke_opacity)
        if props.stroke_width is not None:
            line_width = props.stroke_width

    return DrawSettings(fill_color=fill_color, stroke_color=stroke_color, line_width=line_width)
