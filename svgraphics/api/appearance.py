"""POST /api/appearance/stream — tick the appearance animation, one SSE frame per tick."""

from __future__ import annotations

import asyncio
import json
from collections.abc import AsyncGenerator

from fastapi import APIRouter, Depends
from fastapi.responses import StreamingResponse

from svgraphics.config import Settings
from svgraphics.dependencies import get_settings
from svgraphics.engine.appearance import AppearanceEngine
from svgraphics.engine.errors import InvalidInputError, MalformedPathError
from svgraphics.models.requests import AppearanceStreamRequest
from svgraphics.models.responses import DrawCallModel

router = APIRouter()


async def _stream_appearance(req: AppearanceStreamRequest, settings: Settings) -> AsyncGenerator[str, None]:
    """Compile once, then step the engine ``frames`` times between start and stop."""
    engine = AppearanceEngine(config=settings.compile_config(req.threshold))
    engine.progress = 1.0 if req.reverse else 0.0

    try:
        engine.recompile(req.svg)
    except (InvalidInputError, MalformedPathError) as e:
        data = json.dumps({"type": "error", "message": str(e)})
        yield f"event: error\ndata: {data}\n\n"
        return

    engine.start_appearance()
    for index in range(1, req.frames + 1):
        fraction = index / req.frames
        engine.progress = 1.0 - fraction if req.reverse else fraction
        calls = engine.update() or []
        data = json.dumps({
            "index": index,
            "progress": engine.progress,
            "draw_calls": [DrawCallModel.from_call(call).model_dump() for call in calls],
        })
        yield f"event: frame\ndata: {data}\n\n"
        # Let the event loop flush each frame
        await asyncio.sleep(0)

    terminal = engine.stop_appearance()
    yield f"event: done\ndata: {json.dumps({'type': 'done', 'event': terminal.value})}\n\n"


@router.post("/appearance/stream")
async def appearance_stream(
    req: AppearanceStreamRequest,
    settings: Settings = Depends(get_settings),
) -> StreamingResponse:
    return StreamingResponse(
        _stream_appearance(req, settings),
        media_type="text/event-stream",
        headers={
            "Cache-Control": "no-cache",
            "Connection": "keep-alive",
            "X-Accel-Buffering": "no",
        },
    )
