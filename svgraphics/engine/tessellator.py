"""Arc-length tessellation of a single subpath into an ordered point sequence."""

from __future__ import annotations

import logging
import math
from collections.abc import Sequence

import numpy as np
from numpy.typing import NDArray

from svgraphics.engine.bounds import RectLimits
from svgraphics.engine.context import DrawElement
from svgraphics.engine.style import DrawSettings
from svgraphics.svg.path_parser import PathCommand, Subpath, parse_path_data, split_subpaths
from svgraphics.svg.curves import build_path, sample_path
from svgraphics.utils.geometry import apply_transform

logger = logging.getLogger(__name__)

_CLOSE = PathCommand("z")


def _as_commands(path: Subpath | Sequence[PathCommand] | str) -> list[PathCommand]:
    if isinstance(path, str):
        subpaths = split_subpaths(parse_path_data(path))
        if len(subpaths) != 1:
            raise ValueError(f"Expected a single subpath, got {len(subpaths)}")
        return list(subpaths[0])
    return list(path)


def tessellate(
    path: Subpath | Sequence[PathCommand] | str,
    settings: DrawSettings,
    transform: NDArray[np.float64] | None = None,
    close_shape: bool = False,
    threshold: float = 1.0,
    limits: RectLimits | None = None,
    source_id: str = "",
) -> DrawElement | None:
    """Sample a subpath at uniform arc-length spacing.

    ``floor(length * threshold)`` steps are taken, so higher thresholds give
    denser output. Points are transformed, then y is negated to move from the
    y-down source space to the y-up drawing space. Zero-length geometry
    yields None.
    """
    if math.isnan(threshold) or threshold <= 0:
        raise ValueError(f"threshold must be positive, got {threshold}")

    commands = _as_commands(path)
    if not commands:
        return None
    if close_shape and commands[-1].kind != "z":
        commands.append(_CLOSE)

    path = build_path(commands)
    length = path.length() if path else 0.0
    if length <= 0:
        logger.debug("Dropping zero-length subpath %s", source_id or "<anonymous>")
        return None

    step_count = max(1, math.floor(length * threshold))
    samples = sample_path(path, np.linspace(0.0, length, step_count + 1))
    if close_shape:
        samples = np.vstack([samples, samples[:1]])

    points = apply_transform(samples, transform if transform is not None else np.eye(3))
    points[:, 1] = -points[:, 1]

    if limits is not None:
        limits.process_points(points)

    return DrawElement(points=points, settings=settings, source_id=source_id)
