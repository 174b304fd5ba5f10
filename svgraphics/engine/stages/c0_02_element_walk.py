"""C0.02 — Element Walk.

Collect drawable elements in document order, each with its computed style
and cumulative transform. <defs> and other non-rendered containers are skipped.
"""

from __future__ import annotations

from svgraphics.engine.context import CompileContext, ShapeSource
from svgraphics.engine.registry import Layer, compile_stage
from svgraphics.engine.style import StyleProperties
from svgraphics.svg.parser import walk_drawables
from svgraphics.svg.primitives import is_closed_shape


@compile_stage(
    id="C0.02",
    layer=Layer.PARSING,
    dependencies=["C0.01"],
    description="Walk the tree collecting drawables, styles and transforms",
)
def element_walk(ctx: CompileContext) -> None:
    if ctx.root is None:
        return

    for walked in walk_drawables(ctx.root, ctx.root_transform):
        ctx.shapes.append(
            ShapeSource(
                id=f"E{len(ctx.shapes) + 1}",
                tag=walked.tag,
                attributes=dict(walked.element.attrib),
                style=StyleProperties.from_mapping(walked.style),
                transform=walked.transform,
                closed=is_closed_shape(walked.tag),
            )
        )
