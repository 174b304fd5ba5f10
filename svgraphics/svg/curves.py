"""Build svgpathtools geometry from resolved path commands and sample it by arc length."""

from __future__ import annotations

from collections.abc import Iterable

import numpy as np
from numpy.typing import NDArray
from svgpathtools import Arc, CubicBezier, Line, Path, QuadraticBezier

from svgraphics.engine.errors import MalformedPathError
from svgraphics.svg.path_parser import PathCommand


def _reflect(control: complex, about: complex) -> complex:
    return 2 * about - control


def _is_degenerate(segment) -> bool:
    if isinstance(segment, Arc):
        return segment.start == segment.end
    return all(p == segment.start for p in segment.bpoints())


def build_path(commands: Iterable[PathCommand]) -> Path:
    """Convert a single subpath into an svgpathtools ``Path``.

    Smooth commands get their reflected control point spelled out, arcs with
    a zero radius become straight lines, and zero-length segments are left out.
    """
    segments = []
    current: complex | None = None
    start: complex | None = None
    last_control: complex | None = None
    last_kind = ""

    for cmd in commands:
        kind = cmd.kind
        a = cmd.absolute_args

        if kind == "m":
            if current is not None:
                raise MalformedPathError("build_path() expects a single subpath; split at moveTo first")
            current = start = complex(a[0], a[1])
            last_kind = kind
            continue

        if current is None or start is None:
            raise MalformedPathError(f"path data must begin with a moveTo, got {cmd.letter!r}")

        control: complex | None = None
        if kind == "z":
            segment = Line(current, start)
        elif kind == "l":
            segment = Line(current, complex(a[0], a[1]))
        elif kind == "h":
            segment = Line(current, complex(a[0], current.imag))
        elif kind == "v":
            segment = Line(current, complex(current.real, a[0]))
        elif kind == "c":
            control = complex(a[2], a[3])
            segment = CubicBezier(current, complex(a[0], a[1]), control, complex(a[4], a[5]))
        elif kind == "s":
            first = current
            if last_kind in ("c", "s") and last_control is not None:
                first = _reflect(last_control, current)
            control = complex(a[0], a[1])
            segment = CubicBezier(current, first, control, complex(a[2], a[3]))
        elif kind == "q":
            control = complex(a[0], a[1])
            segment = QuadraticBezier(current, control, complex(a[2], a[3]))
        elif kind == "t":
            control = current
            if last_kind in ("q", "t") and last_control is not None:
                control = _reflect(last_control, current)
            segment = QuadraticBezier(current, control, complex(a[0], a[1]))
        elif kind == "a":
            end = complex(a[5], a[6])
            rx, ry = abs(a[0]), abs(a[1])
            if end == current or rx == 0 or ry == 0:
                segment = Line(current, end)
            else:
                # svgpathtools scales radii that cannot span the endpoints
                segment = Arc(current, complex(rx, ry), a[2], bool(a[3]), bool(a[4]), end)
        else:
            raise MalformedPathError(f"unknown command {cmd.letter!r}")

        if not _is_degenerate(segment):
            segments.append(segment)
        current = segment.end
        last_control = control
        last_kind = kind

    return Path(*segments)


def sample_path(path: Path, offsets: NDArray[np.float64]) -> NDArray[np.float64]:
    """Nx2 points at the given arc-length offsets, clamped to the path's length."""
    length = path.length()
    points = np.empty((len(offsets), 2))
    for i, s in enumerate(offsets):
        if s <= 0:
            t = 0.0
        elif s >= length:
            t = 1.0
        else:
            t = path.ilength(s)
        pt = path.point(t)
        points[i] = (pt.real, pt.imag)
    return points
