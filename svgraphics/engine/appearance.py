"""Progressive-reveal renderer.

A single ``progress`` value in [0, 1] drives a two-phase appearance:

    0.0 - 0.5   the stroke grows along each element, drawn in the fill color
    0.5 - 1.0   the fill fades in while the stroke thins toward its authored width
    1.0         authored settings, untouched

The engine is stepped by an external tick (``update``). It only re-renders
per tick while ANIMATING; ``start_appearance``/``stop_appearance`` switch
states, and stopping reports whether the artwork ended fully erased.
"""

from __future__ import annotations

import dataclasses
import enum
import logging
import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

import numpy as np
from numpy.typing import NDArray

from svgraphics.engine.config import CompileConfig
from svgraphics.engine.context import CompileContext, CompiledArtwork
from svgraphics.engine.errors import InvalidInputError
from svgraphics.engine.events import EventEmitter, GraphicsEvent
from svgraphics.engine.style import RGBA, DrawSettings

if TYPE_CHECKING:
    from svgraphics.engine.pipeline import Pipeline

logger = logging.getLogger(__name__)

# Stroke finishes growing / fill starts fading in at this progress
_PHASE_SPLIT = 0.5


class AppearanceState(enum.Enum):
    IDLE = "idle"
    ANIMATING = "animating"


@dataclass(frozen=True)
class AppliedStyle:
    fill_color: RGBA
    stroke_color: RGBA
    line_width: float
    need_fill: bool
    need_stroke: bool


@dataclass(frozen=True)
class DrawCall:
    """What to draw for one element at one progress value."""

    stroke_points: NDArray[np.float64]
    fill_points: NDArray[np.float64]
    fill_color: RGBA
    stroke_color: RGBA
    line_width: float
    need_fill: bool
    need_stroke: bool
    source_id: str = ""


class DrawSurface(Protocol):
    """Immediate-mode 2-D surface the engine issues draw calls to."""

    def clear(self) -> None: ...

    def stroke_polyline(self, points: NDArray[np.float64], color: RGBA, width: float) -> None: ...

    def fill_polygon(self, points: NDArray[np.float64], color: RGBA) -> None: ...


def derive_style(settings: DrawSettings, progress: float, default_line_width: float) -> AppliedStyle:
    if progress >= 1:
        return AppliedStyle(
            fill_color=settings.fill_color,
            stroke_color=settings.stroke_color,
            line_width=settings.line_width,
            need_fill=settings.need_fill,
            need_stroke=settings.need_stroke,
        )

    # While revealing, the stroke always uses the target fill hue
    if progress < _PHASE_SPLIT:
        return AppliedStyle(
            fill_color=settings.fill_color,
            stroke_color=settings.fill_color,
            line_width=default_line_width,
            need_fill=False,
            need_stroke=True,
        )

    return AppliedStyle(
        fill_color=settings.fill_color.scaled_alpha(max(0.0, progress - _PHASE_SPLIT) * 2),
        stroke_color=settings.fill_color,
        line_width=max(default_line_width * (1 - progress) * 2, settings.line_width),
        need_fill=True,
        need_stroke=True,
    )


def stroke_point_count(point_count: int, progress: float) -> int:
    """Leading points connected by the growing stroke."""
    if point_count == 0:
        return 0
    fraction = min(1.0, progress * 2)
    return min(point_count, math.floor(point_count * fraction) + 1)


def build_draw_calls(
    artwork: CompiledArtwork,
    progress: float,
    default_line_width: float,
) -> list[DrawCall]:
    calls: list[DrawCall] = []
    for element in artwork.elements:
        if element.point_count == 0:
            continue
        style = derive_style(element.settings, progress, default_line_width)
        grown = stroke_point_count(element.point_count, progress)
        calls.append(
            DrawCall(
                stroke_points=element.points[:grown],
                fill_points=element.points,
                fill_color=style.fill_color,
                stroke_color=style.stroke_color,
                line_width=style.line_width,
                need_fill=style.need_fill,
                need_stroke=style.need_stroke,
                source_id=element.source_id,
            )
        )
    return calls


def _clamp_progress(value: float) -> float:
    if math.isnan(value):
        raise ValueError("progress must be a number in [0, 1]")
    return min(1.0, max(0.0, float(value)))


class AppearanceEngine:
    """Owns the compiled artwork and the appearance progress."""

    def __init__(
        self,
        config: CompileConfig | None = None,
        surface: DrawSurface | None = None,
        pipeline: Pipeline | None = None,
    ) -> None:
        self.config = config or CompileConfig()
        self.surface = surface
        self.events = EventEmitter()
        self._pipeline = pipeline
        self._artwork = CompiledArtwork()
        self._draw_calls: list[DrawCall] = []
        self._progress = 1.0
        self._state = AppearanceState.IDLE

    @property
    def pipeline(self) -> Pipeline:
        if self._pipeline is None:
            from svgraphics.engine.pipeline import create_pipeline

            self._pipeline = create_pipeline()
        return self._pipeline

    @property
    def artwork(self) -> CompiledArtwork:
        return self._artwork

    @property
    def draw_calls(self) -> list[DrawCall]:
        """Calls produced by the most recent render."""
        return self._draw_calls

    @property
    def state(self) -> AppearanceState:
        return self._state

    @property
    def progress(self) -> float:
        return self._progress

    @progress.setter
    def progress(self, value: float) -> None:
        self._progress = _clamp_progress(value)

    def recompile(self, svg_text: str, threshold: float | None = None) -> CompiledArtwork:
        """Compile ``svg_text``, clear the surface and publish, then render at the current progress.

        The previous artwork and the surface stay untouched if the compile raises.
        """
        config = self.config
        if threshold is not None:
            config = dataclasses.replace(self.config, threshold=threshold)

        ctx = CompileContext(svg_raw=svg_text, config=config)
        try:
            self.pipeline.run(ctx)
        except InvalidInputError as e:
            logger.warning("Rejected input: %s", e.reason)
            self.events.emit(GraphicsEvent.INVALID_INPUT, reason=e.reason)
            raise

        self._clear_surface()
        self._artwork = ctx.to_artwork()
        self.events.emit(GraphicsEvent.PARSED)
        self.render()
        return self._artwork

    def clear(self) -> None:
        self._artwork = CompiledArtwork()
        self._draw_calls = []
        self._clear_surface()

    def render(self, progress: float | None = None) -> list[DrawCall]:
        value = self._progress if progress is None else _clamp_progress(progress)
        self._clear_surface()

        calls = build_draw_calls(self._artwork, value, self.config.default_line_width)
        if self.surface is not None:
            # Stroke pass before fill pass, for every element and every frame
            for call in calls:
                if call.need_stroke and len(call.stroke_points) > 1:
                    self.surface.stroke_polyline(call.stroke_points, call.stroke_color, call.line_width)
                if call.need_fill:
                    self.surface.fill_polygon(call.fill_points, call.fill_color)

        self._draw_calls = calls
        self.events.emit(GraphicsEvent.RENDERED)
        return calls

    def start_appearance(self) -> None:
        self._state = AppearanceState.ANIMATING

    def stop_appearance(self) -> GraphicsEvent:
        self._state = AppearanceState.IDLE
        # Only an exact 0 counts as erased
        event = GraphicsEvent.ERASED if self._progress == 0 else GraphicsEvent.DRAWN
        self.events.emit(event)
        return event

    def update(self, dt: float = 0.0) -> list[DrawCall] | None:
        """Host tick. Re-renders only while animating."""
        if self._state is AppearanceState.ANIMATING:
            return self.render()
        return None

    def _clear_surface(self) -> None:
        if self.surface is not None:
            self.surface.clear()
        self.events.emit(GraphicsEvent.CLEARED)
