"""C0.03 — Shape Normalization.

Rewrite every basic shape as path data; <path> elements keep their ``d``.
"""

from __future__ import annotations

from svgraphics.engine.context import CompileContext
from svgraphics.engine.registry import Layer, compile_stage
from svgraphics.svg.primitives import shape_to_path


@compile_stage(
    id="C0.03",
    layer=Layer.PARSING,
    dependencies=["C0.02"],
    description="Normalize basic shapes to path data",
)
def shape_normalization(ctx: CompileContext) -> None:
    truncate = ctx.config.truncate_shape_attributes
    for shape in ctx.shapes:
        if shape.tag == "path":
            shape.path_data = shape.attributes.get("d", "")
        else:
            shape.path_data = shape_to_path(shape.tag, shape.attributes, truncate=truncate)
