"""Canvas API routes: palette, drag preview, drop and reset."""

import logging

from fastapi import APIRouter, Depends, HTTPException, Query

from schemas import (
    CanvasOut,
    DragRequest,
    DragResponse,
    DropResponse,
    FrameRequest,
    PaletteColorOut,
    RegionOut,
)
from services.canvas import CanvasSession
from services.layout_engine import Point, RegionRect, square_canvas
from services.palette import WidgetColor
from session import get_canvas

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["canvas"])


def _region_out(region: RegionRect) -> dict:
    color = WidgetColor(region.color)
    return {
        "id": str(region.id),
        "color": color.value,
        "hex": color.hex_code,
        "rect": region.rect.to_dict(),
        "polygon": [list(c) for c in region.rect.to_polygon().exterior.coords],
    }


def _canvas_state(canvas: CanvasSession) -> dict:
    """Serialise what the front end needs to draw the canvas."""
    regions = canvas.regions()
    return {
        "frame": canvas.frame.to_dict(),
        "regions": [_region_out(r) for r in regions],
        "region_count": len(regions),
        "is_empty": canvas.committed is None,
        "is_preview": canvas.is_preview,
        "is_transforming": canvas.is_transforming,
        "dragging_color": canvas.dragging_color.value if canvas.dragging_color else None,
        "target_rect": canvas.target_rect.to_dict() if canvas.is_transforming else None,
    }


@router.get("/palette", response_model=list[PaletteColorOut])
async def get_palette():
    """List the widget colors that can be dragged onto the canvas."""
    return [c.to_dict() for c in WidgetColor]


@router.get("/canvas", response_model=CanvasOut)
async def get_canvas_state(canvas: CanvasSession = Depends(get_canvas)):
    """Current layout (the preview while a drag is over the canvas)."""
    return _canvas_state(canvas)


@router.put("/canvas/frame", response_model=CanvasOut)
async def set_frame(data: FrameRequest, canvas: CanvasSession = Depends(get_canvas)):
    """Recompute the square drop area for a new container size."""
    try:
        frame = square_canvas(data.container_width, data.margin, data.origin_y)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))
    canvas.resize(frame)
    logger.info(f"Canvas frame set to {frame.width:.1f} x {frame.height:.1f} at ({frame.x:.1f},{frame.y:.1f})")
    return _canvas_state(canvas)


@router.post("/canvas/drag", response_model=DragResponse)
async def drag(data: DragRequest, canvas: CanvasSession = Depends(get_canvas)):
    """Move the dragged widget and rebuild the preview layout."""
    try:
        color = WidgetColor.parse(data.color)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))

    update = canvas.drag(color, Point(data.x, data.y))
    return {
        **_canvas_state(canvas),
        "is_first_move": update.is_first_move,
        "inside_canvas": update.inside_canvas,
    }


@router.post("/canvas/drop", response_model=DropResponse)
async def drop(canvas: CanvasSession = Depends(get_canvas)):
    """End the drag, committing the preview if the widget is over the canvas."""
    committed = canvas.drop()
    return {**_canvas_state(canvas), "committed": committed}


@router.post("/canvas/cancel", response_model=CanvasOut)
async def cancel(canvas: CanvasSession = Depends(get_canvas)):
    """Abandon the drag without changing the layout."""
    canvas.cancel()
    return _canvas_state(canvas)


@router.post("/canvas/reset", response_model=CanvasOut)
async def reset(canvas: CanvasSession = Depends(get_canvas)):
    """Discard every region."""
    canvas.reset()
    return _canvas_state(canvas)


@router.get("/canvas/region-at", response_model=RegionOut)
async def get_region_at(
    x: float = Query(...),
    y: float = Query(...),
    canvas: CanvasSession = Depends(get_canvas),
):
    """Region under a point of the canvas."""
    region = canvas.region_at(Point(x, y))
    if region is None:
        raise HTTPException(status_code=404, detail="No region at this point")
    return _region_out(region)
