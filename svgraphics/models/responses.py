"""API response models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from svgraphics.engine.appearance import DrawCall
from svgraphics.engine.context import DrawElement
from svgraphics.engine.style import DrawSettings


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"
    stages_registered: int = 0


class SettingsModel(BaseModel):
    fill_color: str
    stroke_color: str
    line_width: float
    need_fill: bool
    need_stroke: bool

    @classmethod
    def from_settings(cls, settings: DrawSettings) -> SettingsModel:
        return cls(
            fill_color=settings.fill_color.to_hex(),
            stroke_color=settings.stroke_color.to_hex(),
            line_width=settings.line_width,
            need_fill=settings.need_fill,
            need_stroke=settings.need_stroke,
        )


class ElementModel(BaseModel):
    source_id: str = ""
    point_count: int
    points: list[tuple[float, float]]
    settings: SettingsModel

    @classmethod
    def from_element(cls, element: DrawElement) -> ElementModel:
        return cls(
            source_id=element.source_id,
            point_count=element.point_count,
            points=[(float(x), float(y)) for x, y in element.points],
            settings=SettingsModel.from_settings(element.settings),
        )


class DrawCallModel(BaseModel):
    source_id: str = ""
    stroke_points: list[tuple[float, float]]
    fill_points: list[tuple[float, float]]
    fill_color: str
    stroke_color: str
    line_width: float
    need_fill: bool
    need_stroke: bool

    @classmethod
    def from_call(cls, call: DrawCall) -> DrawCallModel:
        return cls(
            source_id=call.source_id,
            stroke_points=[(float(x), float(y)) for x, y in call.stroke_points],
            fill_points=[(float(x), float(y)) for x, y in call.fill_points],
            fill_color=call.fill_color.to_hex(),
            stroke_color=call.stroke_color.to_hex(),
            line_width=call.line_width,
            need_fill=call.need_fill,
            need_stroke=call.need_stroke,
        )


class CompileResponse(BaseModel):
    elements: list[ElementModel] = Field(default_factory=list)
    content_size: tuple[float, float] = (0.0, 0.0)
    anchor_point: tuple[float, float] = (0.5, 0.5)
    canvas_size: tuple[float, float] = (0.0, 0.0)
    draw_calls: list[DrawCallModel] = Field(default_factory=list)
    events: list[str] = Field(default_factory=list)
    processing_time_ms: float = 0.0
