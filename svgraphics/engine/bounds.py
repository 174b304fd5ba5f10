"""Bounding-box accumulator used to auto-fit the container to compiled artwork."""

from __future__ import annotations

import math

import numpy as np
from numpy.typing import NDArray


class RectLimits:
    """Running extents of every sampled point in one compile pass.

    Starts inverted (+inf/-inf) so an accumulator that never saw a point
    reports a 0x0 box. Scoped to a single compile; never reuse across passes.
    """

    def __init__(self) -> None:
        self.min_x = math.inf
        self.max_x = -math.inf
        self.min_y = math.inf
        self.max_y = -math.inf

    @property
    def is_empty(self) -> bool:
        return self.min_x > self.max_x or self.min_y > self.max_y

    def process_point(self, x: float, y: float) -> None:
        self.min_x = min(self.min_x, x)
        self.max_x = max(self.max_x, x)
        self.min_y = min(self.min_y, y)
        self.max_y = max(self.max_y, y)

    def process_points(self, points: NDArray[np.float64]) -> None:
        if len(points) == 0:
            return
        self.min_x = min(self.min_x, float(np.min(points[:, 0])))
        self.max_x = max(self.max_x, float(np.max(points[:, 0])))
        self.min_y = min(self.min_y, float(np.min(points[:, 1])))
        self.max_y = max(self.max_y, float(np.max(points[:, 1])))

    @property
    def content_size(self) -> tuple[float, float]:
        if self.is_empty:
            return (0.0, 0.0)
        return (self.max_x - self.min_x, self.max_y - self.min_y)

    @property
    def center(self) -> tuple[float, float]:
        if self.is_empty:
            return (0.0, 0.0)
        return ((self.min_x + self.max_x) / 2, (self.min_y + self.max_y) / 2)

    @property
    def anchor_point(self) -> tuple[float, float]:
        """Normalized pivot that puts the container origin at drawing (0, 0).

        An axis with zero extent keeps the centered default of 0.5.
        """
        width, height = self.content_size
        cx, cy = self.center
        ax = 0.5 - cx / width if width > 0 else 0.5
        ay = 0.5 - cy / height if height > 0 else 0.5
        return (ax, ay)
