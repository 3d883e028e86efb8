"""Pydantic schemas for API request/response validation."""

from pydantic import BaseModel, Field
from typing import Optional


# ---------- Geometry ----------
class RectOut(BaseModel):
    x: float
    y: float
    width: float
    height: float


# ---------- Palette ----------
class PaletteColorOut(BaseModel):
    name: str
    hex: str
    rgb: list[float]


# ---------- Regions ----------
class RegionOut(BaseModel):
    id: str
    color: str
    hex: str
    rect: RectOut
    polygon: list[list[float]]


# ---------- Canvas ----------
class FrameRequest(BaseModel):
    container_width: float = Field(..., gt=0)
    margin: float = Field(16.0, ge=0)
    origin_y: float = 0.0


class DragRequest(BaseModel):
    color: str
    x: float
    y: float


class CanvasOut(BaseModel):
    frame: RectOut
    regions: list[RegionOut] = []
    region_count: int = 0
    is_empty: bool = True
    is_preview: bool = False
    is_transforming: bool = False
    dragging_color: Optional[str] = None
    target_rect: Optional[RectOut] = None


class DragResponse(CanvasOut):
    is_first_move: bool = False
    inside_canvas: bool = False


class DropResponse(CanvasOut):
    committed: bool = False
