"""Compile/render notifications.

Each engine owns its own emitter; listeners are registered explicitly.
"""

from __future__ import annotations

import enum
import logging
from collections import defaultdict
from typing import Any, Callable

logger = logging.getLogger(__name__)


class GraphicsEvent(enum.Enum):
    CLEARED = "cleared"
    PARSED = "parsed"
    RENDERED = "rendered"
    DRAWN = "drawn"
    ERASED = "erased"
    # payload: reason: str
    INVALID_INPUT = "invalid_input"


Listener = Callable[..., None]


class EventEmitter:
    def __init__(self) -> None:
        self._listeners: dict[GraphicsEvent, list[Listener]] = defaultdict(list)

    def on(self, event: GraphicsEvent, listener: Listener) -> Listener:
        self._listeners[event].append(listener)
        return listener

    def off(self, event: GraphicsEvent, listener: Listener) -> None:
        if listener in self._listeners[event]:
            self._listeners[event].remove(listener)

    def emit(self, event: GraphicsEvent, **payload: Any) -> None:
        logger.debug("emit %s %s", event.name, payload or "")
        for listener in list(self._listeners[event]):
            listener(**payload)
