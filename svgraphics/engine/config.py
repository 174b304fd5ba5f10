"""Compile configuration — sampling quality and author-time defaults."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from svgraphics.engine.style import BLACK, WHITE, RGBA, DrawSettings


@dataclass
class CompileConfig:
    """Controls tessellation density and the fallbacks used by style resolution."""

    # Samples per unit of arc length, in (0, 1]
    threshold: float = 1.0

    # Truncate basic-shape attributes toward zero before building path data
    truncate_shape_attributes: bool = True

    # Malformed path data: skip that element (True) or abort the compile (False)
    skip_malformed_paths: bool = True

    # Host drawing-surface defaults
    default_fill_color: RGBA = field(default_factory=lambda: WHITE)
    default_stroke_color: RGBA = field(default_factory=lambda: BLACK)
    default_line_width: float = 1.0

    def __post_init__(self) -> None:
        validate_threshold(self.threshold)

    @property
    def default_settings(self) -> DrawSettings:
        return DrawSettings(
            fill_color=self.default_fill_color,
            stroke_color=self.default_stroke_color,
            line_width=self.default_line_width,
        )


def validate_threshold(threshold: float) -> float:
    if math.isnan(threshold) or threshold <= 0 or threshold > 1:
        raise ValueError(f"threshold must be in (0, 1], got {threshold}")
    return threshold
