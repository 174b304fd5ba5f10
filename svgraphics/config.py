"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings

from svgraphics.engine.config import CompileConfig
from svgraphics.engine.style import RGBA


class Settings(BaseSettings):
    svgraphics_env: str = "development"
    svgraphics_log_level: str = "info"

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    # Compile defaults
    svgraphics_threshold: float = Field(default=1.0, gt=0, le=1)
    svgraphics_truncate_shape_attributes: bool = True
    svgraphics_skip_malformed_paths: bool = True

    # Host drawing-surface defaults
    svgraphics_default_fill: str = "#ffffff"
    svgraphics_default_stroke: str = "#000000"
    svgraphics_default_line_width: float = Field(default=1.0, ge=0)

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}

    def compile_config(self, threshold: float | None = None) -> CompileConfig:
        return CompileConfig(
            threshold=self.svgraphics_threshold if threshold is None else threshold,
            truncate_shape_attributes=self.svgraphics_truncate_shape_attributes,
            skip_malformed_paths=self.svgraphics_skip_malformed_paths,
            default_fill_color=RGBA.from_hex(self.svgraphics_default_fill),
            default_stroke_color=RGBA.from_hex(self.svgraphics_default_stroke),
            default_line_width=self.svgraphics_default_line_width,
        )


settings = Settings()
