"""C2.01 — Tessellation.

Sample every subpath at the configured threshold. All points feed the
pass-scoped RectLimits. Zero-length subpaths produce nothing.
"""

from __future__ import annotations

from svgraphics.engine.context import CompileContext
from svgraphics.engine.registry import Layer, compile_stage
from svgraphics.engine.tessellator import tessellate


@compile_stage(
    id="C2.01",
    layer=Layer.TESSELLATION,
    dependencies=["C0.04", "C1.01"],
    description="Tessellate subpaths into point sequences",
)
def tessellation(ctx: CompileContext) -> None:
    threshold = ctx.config.threshold
    for shape in ctx.shapes:
        if shape.settings is None:
            continue
        for subpath in shape.subpaths:
            element = tessellate(
                subpath,
                shape.settings,
                transform=shape.transform,
                close_shape=shape.closed,
                threshold=threshold,
                limits=ctx.limits,
                source_id=shape.id,
            )
            if element is not None:
                ctx.elements.append(element)
