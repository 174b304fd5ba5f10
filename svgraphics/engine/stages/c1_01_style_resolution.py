"""C1.01 — Style Resolution.

Computed style → DrawSettings, falling back to the host defaults for colors
the resolver does not recognize (gradients, currentColor, ...).
"""

from __future__ import annotations

from svgraphics.engine.context import CompileContext
from svgraphics.engine.registry import Layer, compile_stage
from svgraphics.engine.style import resolve_settings


@compile_stage(
    id="C1.01",
    layer=Layer.STYLING,
    dependencies=["C0.02"],
    description="Resolve fill/stroke/opacity/width into draw settings",
)
def style_resolution(ctx: CompileContext) -> None:
    defaults = ctx.config.default_settings
    for shape in ctx.shapes:
        shape.settings = resolve_settings(shape.style, defaults)
