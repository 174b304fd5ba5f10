"""C0.04 — Path Parsing.

Parse each shape's path data and split it into independently replayable
subpaths. Malformed data either drops that one shape or aborts the compile,
depending on ``CompileConfig.skip_malformed_paths``.
"""

from __future__ import annotations

import logging

from svgraphics.engine.context import CompileContext
from svgraphics.engine.errors import MalformedPathError
from svgraphics.engine.registry import Layer, compile_stage
from svgraphics.svg.path_parser import parse_path_data, split_subpaths

logger = logging.getLogger(__name__)


@compile_stage(
    id="C0.04",
    layer=Layer.PARSING,
    dependencies=["C0.03"],
    description="Parse path data and split into subpaths",
)
def path_parsing(ctx: CompileContext) -> None:
    for shape in ctx.shapes:
        try:
            shape.subpaths = split_subpaths(parse_path_data(shape.path_data))
        except MalformedPathError as e:
            if not ctx.config.skip_malformed_paths:
                raise
            logger.warning("Skipping %s <%s>: %s", shape.id, shape.tag, e)
            ctx.skipped[shape.id] = str(e)
            shape.subpaths = []
