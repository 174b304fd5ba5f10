"""C0.01 — Document Root.

Cut the outermost <svg> element out of whatever markup surrounds it, turn
HTML named entities into character references, then parse it as XML.
Anything without an <svg> element is rejected before a single element is
compiled. Reads the viewport size and builds the viewBox → viewport mapping.
"""

from __future__ import annotations

import logging
import re
import xml.etree.ElementTree as ET
from html.entities import name2codepoint

from svgraphics.engine.context import CompileContext
from svgraphics.engine.errors import InvalidInputError
from svgraphics.engine.registry import Layer, compile_stage
from svgraphics.svg.parser import strip_ns
from svgraphics.utils.geometry import identity, viewbox_transform

logger = logging.getLogger(__name__)

_NUMBER_RE = re.compile(r"[-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?")
_SVG_OPEN_RE = re.compile(r"<svg[\s/>]")
_SVG_CLOSE_RE = re.compile(r"</svg\s*>")
_ENTITY_RE = re.compile(r"&([A-Za-z][A-Za-z0-9]*);")
_XML_ENTITIES = frozenset({"amp", "lt", "gt", "quot", "apos"})


def _length(value: str | None) -> float | None:
    if not value or value.strip().endswith("%"):
        return None
    m = _NUMBER_RE.match(value.strip())
    return float(m.group(0)) if m else None


def _viewbox(value: str | None) -> tuple[float, float, float, float] | None:
    if not value:
        return None
    parts = [float(v) for v in _NUMBER_RE.findall(value)]
    if len(parts) != 4:
        return None
    return (parts[0], parts[1], parts[2], parts[3])


def _isolate_svg(text: str) -> str:
    """Slice from the first ``<svg`` to the last ``</svg>``; the whole text when there is none."""
    opening = _SVG_OPEN_RE.search(text)
    if opening is None:
        return text
    closings = list(_SVG_CLOSE_RE.finditer(text, opening.start()))
    end = closings[-1].end() if closings else len(text)
    return text[opening.start():end]


def _entity_to_reference(match: re.Match[str]) -> str:
    name = match.group(1)
    if name in _XML_ENTITIES or name not in name2codepoint:
        return match.group(0)
    return f"&#{name2codepoint[name]};"


def _find_svg(root: ET.Element) -> ET.Element | None:
    for el in root.iter():
        if isinstance(el.tag, str) and strip_ns(el.tag) == "svg":
            return el
    return None


@compile_stage(
    id="C0.01",
    layer=Layer.PARSING,
    description="Locate the <svg> root and its viewport",
)
def document_root(ctx: CompileContext) -> None:
    if not ctx.svg_raw.strip():
        raise InvalidInputError("Empty document")

    try:
        source = _ENTITY_RE.sub(_entity_to_reference, _isolate_svg(ctx.svg_raw))
        parsed = ET.fromstring(source)
    except ET.ParseError as e:
        raise InvalidInputError(f"Not a well-formed SVG document: {e}") from e

    svg = _find_svg(parsed)
    if svg is None:
        raise InvalidInputError(f"No <svg> element found (root is <{strip_ns(parsed.tag)}>)")
    ctx.root = svg

    viewbox = _viewbox(svg.get("viewBox"))
    width = _length(svg.get("width"))
    height = _length(svg.get("height"))

    if viewbox is not None and width and height:
        ctx.root_transform = viewbox_transform(viewbox, width, height)
    else:
        ctx.root_transform = identity()

    if width and height:
        ctx.canvas_width, ctx.canvas_height = width, height
    elif viewbox is not None:
        ctx.canvas_width, ctx.canvas_height = viewbox[2], viewbox[3]

    logger.debug("SVG root: canvas %.0fx%.0f, viewBox %s", ctx.canvas_width, ctx.canvas_height, viewbox)
