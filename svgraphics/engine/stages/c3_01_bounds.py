"""C3.01 — Bounds.

Turn the accumulated extents into the container's content size and anchor.
"""

from __future__ import annotations

from svgraphics.engine.context import CompileContext
from svgraphics.engine.registry import Layer, compile_stage


@compile_stage(
    id="C3.01",
    layer=Layer.LAYOUT,
    dependencies=["C2.01"],
    description="Compute content size and anchor point",
)
def bounds(ctx: CompileContext) -> None:
    ctx.content_size = ctx.limits.content_size
    ctx.anchor_point = ctx.limits.anchor_point
