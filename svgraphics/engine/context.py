"""CompileContext — the single mutable state object flowing through all compile stages.

Per-element results → ShapeSource
Compile outputs → CompileContext.elements / content_size / anchor_point
"""

from __future__ import annotations

import xml.etree.ElementTree as ET
from dataclasses import dataclass, field

import numpy as np
from numpy.typing import NDArray

from svgraphics.engine.bounds import RectLimits
from svgraphics.engine.config import CompileConfig
from svgraphics.engine.style import DrawSettings, StyleProperties
from svgraphics.svg.path_parser import Subpath


@dataclass
class ShapeSource:
    """One drawable SVG element collected from the document tree."""

    id: str
    tag: str
    # Raw attributes as written in the document
    attributes: dict[str, str] = field(default_factory=dict)
    # Computed style after inheritance
    style: StyleProperties = field(default_factory=StyleProperties)
    # Cumulative 3x3 transform (ancestors + own + root viewBox)
    transform: NDArray[np.float64] = field(default_factory=lambda: np.eye(3))
    # Closed shapes get an explicit return to their first point
    closed: bool = False
    # Normalized path data ("d" for <path>, generated for basic shapes)
    path_data: str = ""
    subpaths: list[Subpath] = field(default_factory=list)
    settings: DrawSettings | None = None


@dataclass
class DrawElement:
    """Tessellated, styled point sequence. Zero points = degenerate, skipped at render."""

    points: NDArray[np.float64]
    settings: DrawSettings
    source_id: str = ""

    @property
    def point_count(self) -> int:
        return len(self.points)


@dataclass(frozen=True)
class CompiledArtwork:
    """Result of one compile pass. Replaced wholesale, never mutated."""

    elements: tuple[DrawElement, ...] = ()
    content_size: tuple[float, float] = (0.0, 0.0)
    anchor_point: tuple[float, float] = (0.5, 0.5)
    # Viewport size from the root width/height, or the viewBox when those are missing
    canvas_size: tuple[float, float] = (0.0, 0.0)

    @property
    def is_empty(self) -> bool:
        return not self.elements


@dataclass
class CompileContext:
    """Shared state flowing through the entire compile pipeline."""

    # Raw SVG source
    svg_raw: str = ""
    config: CompileConfig = field(default_factory=CompileConfig)
    # Parsed <svg> element
    root: ET.Element | None = None
    # Viewport size from width/height (or viewBox)
    canvas_width: float = 0.0
    canvas_height: float = 0.0
    # viewBox → viewport mapping applied before element transforms
    root_transform: NDArray[np.float64] = field(default_factory=lambda: np.eye(3))
    shapes: list[ShapeSource] = field(default_factory=list)
    elements: list[DrawElement] = field(default_factory=list)
    # Scoped to this pass only
    limits: RectLimits = field(default_factory=RectLimits)
    content_size: tuple[float, float] = (0.0, 0.0)
    anchor_point: tuple[float, float] = (0.5, 0.5)

    # --- Pipeline metadata ---
    completed_stages: set[str] = field(default_factory=set)
    # Shapes dropped under the skip policy: shape id → reason
    skipped: dict[str, str] = field(default_factory=dict)

    @property
    def num_shapes(self) -> int:
        return len(self.shapes)

    def to_artwork(self) -> CompiledArtwork:
        return CompiledArtwork(
            elements=tuple(self.elements),
            content_size=self.content_size,
            anchor_point=self.anchor_point,
            canvas_size=(self.canvas_width, self.canvas_height),
        )
