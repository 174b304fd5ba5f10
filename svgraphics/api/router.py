"""Master API router — mounts all endpoint routers."""

from __future__ import annotations

from fastapi import APIRouter

from svgraphics.api import appearance, compile_svg, health

api_router = APIRouter(prefix="/api")

api_router.include_router(health.router)
api_router.include_router(compile_svg.router)
api_router.include_router(appearance.router)
