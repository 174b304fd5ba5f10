"""Shared test fixtures."""

from __future__ import annotations

import pytest

from svgraphics.engine.config import CompileConfig
from svgraphics.engine.style import RGBA, DrawSettings


# Sample SVGs

CIRCLE_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" width="10" height="10" viewBox="0 0 10 10">
  <circle cx="5" cy="5" r="3" fill="#ff0000" stroke="#000000" stroke-width="2"/>
</svg>'''

SMILEY_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" width="24" height="24" viewBox="0 0 24 24" fill="none" stroke="black" stroke-width="2" stroke-linecap="round" stroke-linejoin="round">
  <circle cx="12" cy="12" r="10"/>
  <circle cx="8" cy="9" r="1"/>
  <circle cx="16" cy="9" r="1"/>
  <path d="M8 14s1.5 2 4 2 4-2 4-2"/>
</svg>'''

HOME_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" width="24" height="24" viewBox="0 0 24 24" fill="none" stroke="black" stroke-width="2" stroke-linecap="round" stroke-linejoin="round">
  <path d="M15 21v-8a1 1 0 0 0-1-1h-4a1 1 0 0 0-1 1v8"/>
  <path d="M3 10a2 2 0 0 1 .709-1.528l7-5.999a2 2 0 0 1 2.582 0l7 5.999A2 2 0 0 1 21 10v9a2 2 0 0 1-2 2H5a2 2 0 0 1-2-2z"/>
</svg>'''

BAR_CHART_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" width="24" height="24" viewBox="0 0 24 24" fill="none" stroke="black" stroke-width="2">
  <line x1="18" x2="18" y1="20" y2="10"/>
  <line x1="12" x2="12" y1="20" y2="4"/>
  <line x1="6" x2="6" y1="20" y2="14"/>
</svg>'''

# Two disjoint boxes: [0,10]x[0,10] and [20,30]x[5,15]
TWO_BOXES_SVG = '''<svg xmlns="http://www.w3.org/2000/svg">
  <rect x="0" y="0" width="10" height="10" fill="blue"/>
  <rect x="20" y="5" width="10" height="10" fill="green"/>
</svg>'''

GROUPED_SVG = '''<svg xmlns="http://www.w3.org/2000/svg">
  <defs>
    <path id="hidden" d="M0 0 L100 100"/>
  </defs>
  <g fill="red" stroke="blue" stroke-width="3" transform="translate(10 20)">
    <rect x="0" y="0" width="4" height="4"/>
    <g opacity="0.5">
      <line x1="0" y1="0" x2="8" y2="0" style="stroke: green"/>
    </g>
  </g>
  <path d="M0 0 L5 0" display="none"/>
</svg>'''

MALFORMED_PATH_SVG = '''<svg xmlns="http://www.w3.org/2000/svg">
  <path d="M1 2 L3" fill="red"/>
  <path d="M0 0 L10 0" stroke="black"/>
</svg>'''

FILLED_RECT_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 100 100">
  <rect x="10" y="10" width="80" height="80" fill="#4ECDC4"/>
  <circle cx="50" cy="50" r="20" fill="#FF6B6B"/>
</svg>'''

NOT_SVG = "<html><body><p>hello</p></body></html>"

PLAIN_SETTINGS = DrawSettings(
    fill_color=RGBA(255, 0, 0),
    stroke_color=RGBA(0, 0, 0),
    line_width=2.0,
)


@pytest.fixture
def circle_svg() -> str:
    return CIRCLE_SVG


@pytest.fixture
def smiley_svg() -> str:
    return SMILEY_SVG


@pytest.fixture
def home_svg() -> str:
    return HOME_SVG


@pytest.fixture
def two_boxes_svg() -> str:
    return TWO_BOXES_SVG


@pytest.fixture
def plain_settings() -> DrawSettings:
    return PLAIN_SETTINGS


@pytest.fixture
def exact_config() -> CompileConfig:
    return CompileConfig(truncate_shape_attributes=False)
