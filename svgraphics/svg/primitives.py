"""Basic shape → path-data normalization.

Every non-path primitive is rewritten as an equivalent ``d`` string so the
rest of the compiler only ever deals with paths.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping

from svgraphics.svg.path_parser import format_number as _f

logger = logging.getLogger(__name__)

SHAPE_TAGS = frozenset({"rect", "circle", "ellipse", "line", "polyline", "polygon"})

# Shapes the tessellator closes back onto their first point
CLOSED_SHAPES = frozenset({"polygon", "rect", "circle", "ellipse"})

_LENGTH_RE = re.compile(r"[-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?")


def is_closed_shape(tag: str) -> bool:
    return tag in CLOSED_SHAPES


def _length(attrs: Mapping[str, str], name: str) -> float | None:
    """Leading number of a length attribute (unit suffix ignored), None if absent."""
    raw = attrs.get(name)
    if raw is None:
        return None
    m = _LENGTH_RE.match(raw.strip())
    if not m:
        logger.warning("Ignoring non-numeric %s=%r", name, raw)
        return None
    return float(m.group(0))


def _read(attrs: Mapping[str, str], names: tuple[str, ...], truncate: bool) -> list[float]:
    values = []
    for name in names:
        value = _length(attrs, name) or 0.0
        # Truncate toward zero when requested
        values.append(float(int(value)) if truncate else value)
    return values


def _rect(attrs: Mapping[str, str], truncate: bool) -> str:
    x, y, w, h = _read(attrs, ("x", "y", "width", "height"), truncate)
    if w <= 0 or h <= 0:
        logger.debug("Rect with non-positive size %sx%s renders nothing", w, h)
        return f"M{_f(x)} {_f(y)}"

    rx_raw, ry_raw = _length(attrs, "rx"), _length(attrs, "ry")
    if rx_raw is None:
        rx_raw = ry_raw
    if ry_raw is None:
        ry_raw = rx_raw
    rx = min(abs(rx_raw or 0.0), w / 2)
    ry = min(abs(ry_raw or 0.0), h / 2)
    if truncate:
        rx, ry = float(int(rx)), float(int(ry))

    side_h = w - rx * 2
    side_v = h - ry * 2
    return (
        f"M{_f(x + rx)} {_f(y)} "
        f"h{_f(side_h)} s{_f(rx)} 0 {_f(rx)} {_f(ry)} "
        f"v{_f(side_v)} s0 {_f(ry)} {_f(-rx)} {_f(ry)} "
        f"h{_f(-side_h)} s{_f(-rx)} 0 {_f(-rx)} {_f(-ry)} "
        f"v{_f(-side_v)} s0 {_f(-ry)} {_f(rx)} {_f(-ry)}"
    )


def _ellipse(cx: float, cy: float, rx: float, ry: float) -> str:
    # Two opposing half-ellipses starting from the leftmost point
    return (
        f"M{_f(cx - rx)} {_f(cy)} "
        f"a{_f(rx)} {_f(ry)} 0 1 0 {_f(rx * 2)} 0 "
        f"a{_f(rx)} {_f(ry)} 0 1 0 {_f(-rx * 2)} 0"
    )


def shape_to_path(tag: str, attrs: Mapping[str, str], truncate: bool = True) -> str:
    """Return path data equivalent to a basic shape element.

    With ``truncate`` (the default) numeric attributes are truncated toward
    zero first, matching integer-snapped output. Polygon/polyline ``points``
    are passed through untouched and are never closed here.
    """
    if tag in ("polygon", "polyline"):
        return f"M{attrs.get('points', '').strip()}"

    if tag == "circle":
        cx, cy, r = _read(attrs, ("cx", "cy", "r"), truncate)
        return _ellipse(cx, cy, r, r)

    if tag == "ellipse":
        cx, cy, rx, ry = _read(attrs, ("cx", "cy", "rx", "ry"), truncate)
        return _ellipse(cx, cy, rx, ry)

    if tag == "rect":
        return _rect(attrs, truncate)

    if tag == "line":
        x1, y1, x2, y2 = _read(attrs, ("x1", "y1", "x2", "y2"), truncate)
        return f"M{_f(x1)} {_f(y1)} L{_f(x2)} {_f(y2)}"

    raise ValueError(f"Unsupported shape element: <{tag}>")
