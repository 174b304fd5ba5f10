"""svgraphics compile and appearance engine."""

from svgraphics.engine.errors import InvalidInputError, MalformedPathError
from svgraphics.engine.events import EventEmitter, GraphicsEvent
from svgraphics.engine.registry import Layer, compile_stage, get_registry

__all__ = [
    "InvalidInputError",
    "MalformedPathError",
    "EventEmitter",
    "GraphicsEvent",
    "Layer",
    "compile_stage",
    "get_registry",
]
