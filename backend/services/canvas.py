"""
Canvas session: the committed layout plus the state of the drag in progress.

While a widget is being dragged, every movement rebuilds a preview tree
from the committed tree.  Dropping promotes the preview; leaving the
canvas or cancelling throws it away.
"""

import logging
import threading
from dataclasses import dataclass
from typing import List, Optional

from services.layout_engine import (
    Point,
    Rect,
    RegionNode,
    RegionRect,
    flatten,
    insert_region,
    leaf_count,
    region_at,
)
from services.palette import WidgetColor

logger = logging.getLogger(__name__)


@dataclass
class DragUpdate:
    """Outcome of one drag movement."""

    is_first_move: bool
    inside_canvas: bool
    target_rect: Rect


class CanvasSession:
    """Owns the committed tree and the transient preview for one canvas."""

    def __init__(self, frame: Rect):
        self.frame = frame
        self.committed: Optional[RegionNode] = None
        self.preview: Optional[RegionNode] = None
        self.dragging_color: Optional[WidgetColor] = None
        self.drag_location: Optional[Point] = None
        self.target_rect: Rect = Rect.zero()
        self._lock = threading.Lock()

    @property
    def display_root(self) -> Optional[RegionNode]:
        """Preview while dragging over the canvas, otherwise the committed tree."""
        return self.preview if self.preview is not None else self.committed

    @property
    def is_preview(self) -> bool:
        return self.preview is not None

    @property
    def is_transforming(self) -> bool:
        """True when the dragged widget has snapped into a canvas slot."""
        return self.target_rect != Rect.zero()

    def regions(self) -> List[RegionRect]:
        return flatten(self.display_root, self.frame)

    def region_at(self, point: Point) -> Optional[RegionRect]:
        return region_at(self.display_root, self.frame, point)

    # --- drag lifecycle ---------------------------------------------------

    def drag(self, color: WidgetColor, point: Point) -> DragUpdate:
        """Move the dragged widget to *point* and rebuild the preview."""
        with self._lock:
            is_first_move = self.dragging_color is None
            self.dragging_color = color
            self.drag_location = point

            if not self.frame.contains(point):
                self.preview = None
                self.target_rect = Rect.zero()
                return DragUpdate(is_first_move, False, self.target_rect)

            self.preview = insert_region(self.committed, point, self.frame, color)
            hit = region_at(self.preview, self.frame, point)
            self.target_rect = hit.rect if hit is not None else Rect.zero()
            if logger.isEnabledFor(logging.DEBUG):
                logger.debug(
                    f"Preview {color.value} at ({point.x:.1f},{point.y:.1f}): "
                    f"{leaf_count(self.preview)} regions"
                )
            return DragUpdate(is_first_move, True, self.target_rect)

    def drop(self) -> bool:
        """End the drag; promote the preview if there is one."""
        with self._lock:
            committed = self.preview is not None
            if committed:
                self.committed = self.preview
                logger.info(f"Committed drop: {leaf_count(self.committed)} regions")
            self._clear_drag()
            return committed

    def cancel(self) -> None:
        with self._lock:
            self._clear_drag()

    def reset(self) -> None:
        """Discard the layout and any drag in progress."""
        with self._lock:
            self.committed = None
            self._clear_drag()
        logger.info("Canvas reset")

    def resize(self, frame: Rect) -> None:
        """Lay the same tree out in a new frame; drops any preview."""
        with self._lock:
            self.frame = frame
            self._clear_drag()

    def _clear_drag(self) -> None:
        self.preview = None
        self.dragging_color = None
        self.drag_location = None
        self.target_rect = Rect.zero()
