"""Pipeline orchestrator — runs compile stages in dependency order."""

from __future__ import annotations

import importlib
import logging
import pkgutil
import time

from svgraphics.engine.context import CompileContext
from svgraphics.engine.registry import StageRegistry, get_registry

logger = logging.getLogger(__name__)

_STAGES_PACKAGE = "svgraphics.engine.stages"


def register_stages() -> None:
    """Import all stage modules so @compile_stage decorators fire."""
    package = importlib.import_module(_STAGES_PACKAGE)
    for _, module_name, _ in pkgutil.iter_modules(package.__path__):
        importlib.import_module(f"{_STAGES_PACKAGE}.{module_name}")


class Pipeline:
    """Orchestrates the compile pipeline.

    Unlike analysis passes, compile stages feed each other, so the first
    failing stage aborts the run and its exception propagates to the caller.
    """

    def __init__(self, registry: StageRegistry | None = None) -> None:
        self.registry = registry or get_registry()

    def run(self, ctx: CompileContext) -> CompileContext:
        """Run every registered stage on the given context."""
        start = time.perf_counter()
        ordered = self.registry.resolve_order()

        logger.debug("Pipeline: %d stages queued", len(ordered))

        for spec in ordered:
            self._run_stage(spec.id, spec.fn, ctx)

        total = (time.perf_counter() - start) * 1000
        logger.info(
            "Compiled %d shapes into %d elements (%d skipped) in %.1fms",
            ctx.num_shapes,
            len(ctx.elements),
            len(ctx.skipped),
            total,
        )
        return ctx

    def _run_stage(self, stage_id, fn, ctx: CompileContext) -> None:
        t0 = time.perf_counter()
        try:
            fn(ctx)
        except Exception as e:
            logger.warning("  %s FAILED: %s", stage_id, e)
            raise
        ctx.completed_stages.add(stage_id)
        elapsed = (time.perf_counter() - t0) * 1000
        logger.debug("  %s completed in %.1fms", stage_id, elapsed)


def create_pipeline() -> Pipeline:
    """Factory function for creating a pipeline with every stage registered."""
    register_stages()
    return Pipeline()
