"""Single in-memory canvas shared by the API."""

import threading
from typing import Optional

from config import CANVAS_CONTAINER_WIDTH, CANVAS_MARGIN, CANVAS_ORIGIN_Y
from services.canvas import CanvasSession
from services.layout_engine import square_canvas

_canvas: Optional[CanvasSession] = None
_lock = threading.Lock()


def _new_canvas() -> CanvasSession:
    frame = square_canvas(CANVAS_CONTAINER_WIDTH, CANVAS_MARGIN, CANVAS_ORIGIN_Y)
    return CanvasSession(frame)


def init_canvas() -> CanvasSession:
    """Create (or replace) the canvas from configuration."""
    global _canvas
    with _lock:
        _canvas = _new_canvas()
        return _canvas


def get_canvas() -> CanvasSession:
    """Dependency that yields the canvas, creating it on first use."""
    global _canvas
    with _lock:
        if _canvas is None:
            _canvas = _new_canvas()
        return _canvas
