"""Leaf-node geometry helpers. No engine imports."""

from __future__ import annotations

import math
import re

import numpy as np
from numpy.typing import NDArray

_TRANSFORM_RE = re.compile(r"(matrix|translate|scale|rotate|skewX|skewY)\s*\(([^)]*)\)")
_NUMBER_RE = re.compile(r"[-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?")


def identity() -> NDArray[np.float64]:
    return np.eye(3)


def affine(a: float, b: float, c: float, d: float, e: float, f: float) -> NDArray[np.float64]:
    """3x3 matrix from SVG ``matrix(a b c d e f)`` order."""
    return np.array([[a, c, e], [b, d, f], [0.0, 0.0, 1.0]])


def translation(tx: float, ty: float = 0.0) -> NDArray[np.float64]:
    return affine(1.0, 0.0, 0.0, 1.0, tx, ty)


def scaling(sx: float, sy: float | None = None) -> NDArray[np.float64]:
    return affine(sx, 0.0, 0.0, sx if sy is None else sy, 0.0, 0.0)


def rotation(degrees: float, cx: float = 0.0, cy: float = 0.0) -> NDArray[np.float64]:
    rad = math.radians(degrees)
    cos, sin = math.cos(rad), math.sin(rad)
    rot = affine(cos, sin, -sin, cos, 0.0, 0.0)
    if cx or cy:
        return translation(cx, cy) @ rot @ translation(-cx, -cy)
    return rot


def parse_transform(value: str | None) -> NDArray[np.float64]:
    """Compose an SVG ``transform`` attribute into a single 3x3 matrix.

    Functions apply right-to-left, so ``translate(10) scale(2)`` scales first.
    Malformed functions are ignored.
    """
    matrix = identity()
    if not value:
        return matrix

    for name, raw_args in _TRANSFORM_RE.findall(value):
        args = [float(v) for v in _NUMBER_RE.findall(raw_args)]
        step: NDArray[np.float64] | None = None

        if name == "matrix" and len(args) == 6:
            step = affine(*args)
        elif name == "translate" and len(args) in (1, 2):
            step = translation(*args)
        elif name == "scale" and len(args) in (1, 2):
            step = scaling(*args)
        elif name == "rotate" and len(args) in (1, 3):
            step = rotation(*args)
        elif name == "skewX" and len(args) == 1:
            step = affine(1.0, 0.0, math.tan(math.radians(args[0])), 1.0, 0.0, 0.0)
        elif name == "skewY" and len(args) == 1:
            step = affine(1.0, math.tan(math.radians(args[0])), 0.0, 1.0, 0.0, 0.0)

        if step is not None:
            matrix = matrix @ step

    return matrix


def viewbox_transform(
    viewbox: tuple[float, float, float, float],
    width: float,
    height: float,
) -> NDArray[np.float64]:
    """Map a viewBox into a width x height viewport (uniform scale, centered)."""
    vx, vy, vw, vh = viewbox
    if vw <= 0 or vh <= 0:
        return identity()
    scale = min(width / vw, height / vh)
    offset_x = (width - vw * scale) / 2 - vx * scale
    offset_y = (height - vh * scale) / 2 - vy * scale
    return affine(scale, 0.0, 0.0, scale, offset_x, offset_y)


def apply_transform(points: NDArray[np.float64], matrix: NDArray[np.float64]) -> NDArray[np.float64]:
    """Apply a 3x3 affine matrix to an Nx2 point array."""
    if len(points) == 0:
        return points.reshape(0, 2)
    return points @ matrix[:2, :2].T + matrix[:2, 2]


def bbox(points: NDArray[np.float64]) -> tuple[float, float, float, float]:
    """Compute (xmin, ymin, xmax, ymax) bounding box."""
    if len(points) == 0:
        return (0.0, 0.0, 0.0, 0.0)
    return (
        float(np.min(points[:, 0])),
        float(np.min(points[:, 1])),
        float(np.max(points[:, 0])),
        float(np.max(points[:, 1])),
    )
