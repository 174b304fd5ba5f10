"""Stage registry — every compile stage is a standalone function registered via decorator.

Usage:
    @compile_stage(id="C2.01", layer=Layer.TESSELLATION, dependencies=["C0.04"])
    def tessellation(ctx: CompileContext) -> None:
        for shape in ctx.shapes:
            ...

Adding a new stage = creating one file under engine/stages with the decorator.
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:
    from svgraphics.engine.context import CompileContext

logger = logging.getLogger(__name__)


class Layer(enum.IntEnum):
    PARSING = 0
    STYLING = 1
    TESSELLATION = 2
    LAYOUT = 3


@dataclass
class StageSpec:
    id: str
    layer: Layer
    fn: Callable[["CompileContext"], None]
    dependencies: list[str] = field(default_factory=list)
    description: str = ""


class StageRegistry:
    """Singleton registry of all compile stages."""

    def __init__(self) -> None:
        self._stages: dict[str, StageSpec] = {}

    def register(self, spec: StageSpec) -> None:
        if spec.id in self._stages:
            raise ValueError(f"Duplicate stage ID: {spec.id}")
        self._stages[spec.id] = spec
        logger.debug("Registered stage %s (%s)", spec.id, spec.layer.name)

    def resolve_order(self) -> list[StageSpec]:
        """Topological sort of every registered stage, ties broken by ID."""
        pool = self._stages

        # Kahn's algorithm
        in_degree: dict[str, int] = {sid: 0 for sid in pool}
        for sid, spec in pool.items():
            for dep in spec.dependencies:
                if dep in pool:
                    in_degree[sid] += 1

        queue = sorted([sid for sid, d in in_degree.items() if d == 0])
        ordered: list[StageSpec] = []

        while queue:
            sid = queue.pop(0)
            ordered.append(pool[sid])
            for other_id, other_spec in pool.items():
                if sid in other_spec.dependencies:
                    in_degree[other_id] -= 1
                    if in_degree[other_id] == 0:
                        queue.append(other_id)
                        queue.sort()

        if len(ordered) != len(pool):
            missing = set(pool.keys()) - {s.id for s in ordered}
            raise ValueError(f"Circular dependency detected among: {missing}")

        return ordered

    @property
    def count(self) -> int:
        return len(self._stages)


# Module-level singleton
_registry = StageRegistry()


def get_registry() -> StageRegistry:
    return _registry


def compile_stage(
    *,
    id: str,
    layer: Layer,
    dependencies: list[str] | None = None,
    description: str = "",
):
    """Decorator to register a compile stage function."""

    def decorator(fn: Callable[["CompileContext"], None]):
        spec = StageSpec(
            id=id,
            layer=layer,
            fn=fn,
            dependencies=dependencies or [],
            description=description,
        )
        _registry.register(spec)
        return fn

    return decorator
