"""
Layout Engine for the color canvas.

Provides the region tree and the slicing operations that grow it one
drop at a time and lay it out as rectangles.
"""

from .geometry import Axis, Point, Rect, square_canvas
from .region_model import (
    Leaf,
    RegionId,
    RegionNode,
    Split,
    depth,
    find_region,
    iter_leaves,
    leaf_count,
    new_region_id,
)
from .slicing import RegionRect, flatten, insert_region, region_at

__all__ = [
    "Axis",
    "Leaf",
    "Point",
    "Rect",
    "RegionId",
    "RegionNode",
    "RegionRect",
    "Split",
    "depth",
    "find_region",
    "flatten",
    "insert_region",
    "iter_leaves",
    "leaf_count",
    "new_region_id",
    "region_at",
    "square_canvas",
]
