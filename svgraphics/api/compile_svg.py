"""POST /api/compile — compile SVG and render it at one progress value."""

from __future__ import annotations

import time
from functools import partial
from typing import Any

from fastapi import APIRouter, Depends, HTTPException

from svgraphics.config import Settings
from svgraphics.dependencies import get_settings
from svgraphics.engine.appearance import AppearanceEngine
from svgraphics.engine.errors import InvalidInputError, MalformedPathError
from svgraphics.engine.events import GraphicsEvent
from svgraphics.models.requests import CompileRequest
from svgraphics.models.responses import CompileResponse, DrawCallModel, ElementModel

router = APIRouter()


def _append_event(sink: list[str], event: GraphicsEvent, **payload: Any) -> None:
    sink.append(event.value)


def record_events(engine: AppearanceEngine, sink: list[str]) -> None:
    for event in GraphicsEvent:
        engine.events.on(event, partial(_append_event, sink, event))


@router.post("/compile", response_model=CompileResponse)
async def compile_svg(req: CompileRequest, settings: Settings = Depends(get_settings)) -> CompileResponse:
    start = time.perf_counter()

    engine = AppearanceEngine(config=settings.compile_config(req.threshold))
    events: list[str] = []
    record_events(engine, events)
    engine.progress = req.progress

    try:
        artwork = engine.recompile(req.svg)
    except (InvalidInputError, MalformedPathError) as e:
        raise HTTPException(status_code=422, detail=str(e)) from e

    elapsed = (time.perf_counter() - start) * 1000

    return CompileResponse(
        elements=[ElementModel.from_element(el) for el in artwork.elements],
        content_size=artwork.content_size,
        anchor_point=artwork.anchor_point,
        canvas_size=artwork.canvas_size,
        draw_calls=[DrawCallModel.from_call(call) for call in engine.draw_calls],
        events=events,
        processing_time_ms=round(elapsed, 1),
    )
