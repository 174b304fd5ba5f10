"""SVG document facade — tree walk, presentation-style cascade, and compile entry point.

Converts raw SVG string → CompileContext with DrawElements populated.
"""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from collections.abc import Iterator
from dataclasses import dataclass
from typing import TYPE_CHECKING

import numpy as np
from numpy.typing import NDArray

from svgraphics.svg.primitives import SHAPE_TAGS
from svgraphics.utils.geometry import parse_transform

if TYPE_CHECKING:
    from svgraphics.engine.config import CompileConfig
    from svgraphics.engine.context import CompileContext

logger = logging.getLogger(__name__)

STYLE_PROPERTIES = ("fill", "stroke", "opacity", "fill-opacity", "stroke-opacity", "stroke-width")

# Everything except opacity inherits from the parent
_INHERITED = ("fill", "stroke", "fill-opacity", "stroke-opacity", "stroke-width")

INITIAL_STYLE: dict[str, str] = {
    "fill": "black",
    "stroke": "none",
    "opacity": "1",
    "fill-opacity": "1",
    "stroke-opacity": "1",
    "stroke-width": "1",
}

DRAWABLE_TAGS = SHAPE_TAGS | {"path"}

# Containers whose children are never rendered directly
NON_RENDERED_TAGS = frozenset({
    "defs", "clipPath", "mask", "pattern", "symbol", "marker",
    "linearGradient", "radialGradient", "filter",
    "style", "script", "title", "desc", "metadata",
})


def strip_ns(tag: str) -> str:
    return tag.split("}")[-1] if "}" in tag else tag


def parse_style_attribute(value: str | None) -> dict[str, str]:
    """``"fill: red; stroke-width: 2"`` → {"fill": "red", "stroke-width": "2"}."""
    declarations: dict[str, str] = {}
    if not value:
        return declarations
    for part in value.split(";"):
        name, sep, val = part.partition(":")
        if sep and name.strip():
            declarations[name.strip().lower()] = val.replace("!important", "").strip()
    return declarations


def declared_style(element: ET.Element) -> dict[str, str]:
    """Presentation attributes, overridden by inline ``style`` declarations."""
    declared = {name: element.get(name, "") for name in STYLE_PROPERTIES if element.get(name) is not None}
    inline = parse_style_attribute(element.get("style"))
    declared.update({k: v for k, v in inline.items() if k in STYLE_PROPERTIES})
    return declared


def compute_style(declared: dict[str, str], parent: dict[str, str]) -> dict[str, str]:
    computed = {name: parent.get(name, INITIAL_STYLE[name]) for name in _INHERITED}
    computed["opacity"] = INITIAL_STYLE["opacity"]
    for name, value in declared.items():
        if value == "inherit":
            computed[name] = parent.get(name, INITIAL_STYLE[name])
        elif value:
            computed[name] = value
    return computed


def _is_hidden(element: ET.Element) -> bool:
    display = element.get("display") or parse_style_attribute(element.get("style")).get("display")
    return (display or "").strip() == "none"


@dataclass
class WalkedElement:
    element: ET.Element
    tag: str
    style: dict[str, str]
    transform: NDArray[np.float64]


def walk_drawables(root: ET.Element, root_transform: NDArray[np.float64]) -> Iterator[WalkedElement]:
    """Depth-first, document-order walk yielding drawable elements with computed state."""
    root_style = compute_style(declared_style(root), INITIAL_STYLE)
    root_matrix = root_transform @ parse_transform(root.get("transform"))
    yield from _walk(root, root_style, root_matrix)


def _walk(
    parent: ET.Element,
    parent_style: dict[str, str],
    parent_matrix: NDArray[np.float64],
) -> Iterator[WalkedElement]:
    for child in parent:
        if not isinstance(child.tag, str):
            continue
        tag = strip_ns(child.tag)
        if tag in NON_RENDERED_TAGS:
            continue
        if _is_hidden(child):
            logger.debug("Skipping hidden <%s> subtree", tag)
            continue

        style = compute_style(declared_style(child), parent_style)
        matrix = parent_matrix @ parse_transform(child.get("transform"))

        if tag in DRAWABLE_TAGS:
            yield WalkedElement(element=child, tag=tag, style=style, transform=matrix)

        yield from _walk(child, style, matrix)


def parse_svg(svg_text: str, config: CompileConfig | None = None) -> CompileContext:
    """Compile a raw SVG string into a fully populated CompileContext."""
    from svgraphics.engine.config import CompileConfig
    from svgraphics.engine.context import CompileContext
    from svgraphics.engine.pipeline import create_pipeline

    ctx = CompileContext(svg_raw=svg_text, config=config or CompileConfig())
    return create_pipeline().run(ctx)
