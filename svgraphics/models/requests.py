"""API request models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class CompileRequest(BaseModel):
    svg: str = Field(..., description="Raw SVG code")
    threshold: float | None = Field(
        default=None,
        gt=0,
        le=1,
        description="Samples per unit of arc length (server default when omitted)",
    )
    progress: float = Field(default=1.0, ge=0, le=1, description="Appearance progress to render at")


class AppearanceStreamRequest(BaseModel):
    svg: str = Field(..., description="Raw SVG code")
    threshold: float | None = Field(default=None, gt=0, le=1)
    frames: int = Field(default=30, ge=1, le=600, description="Ticks from progress 0 to 1")
    reverse: bool = Field(default=False, description="Animate 1 → 0 (erase) instead of 0 → 1")
