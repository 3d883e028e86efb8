"""
Slicing layout engine.

Uses a slicing-tree representation where each internal node is a
horizontal or vertical 50/50 cut, and each leaf is a colored region.

  * ``insert_region`` drops a new color at a point, splitting the leaf
    under that point in two.
  * ``flatten`` walks the tree against a bounding rectangle and returns
    one rectangle per leaf, in a stable order.

Both are pure: the input tree is never modified and untouched subtrees
are shared with the result.
"""

from typing import Hashable, List, NamedTuple, Optional, Tuple

from .geometry import Axis, Point, Rect
from .region_model import Leaf, RegionId, RegionNode, Split


class RegionRect(NamedTuple):
    """A leaf placed on the canvas."""

    id: RegionId
    color: Hashable
    rect: Rect


# ── Insertion ─────────────────────────────────────────────────────────────

def _split_leaf(leaf: Leaf, point: Point, bounds: Rect, color: Hashable) -> Split:
    mid = bounds.mid
    dx = abs(point.x - mid.x)
    dy = abs(point.y - mid.y)

    # Cut across the direction the point is furthest off-centre;
    # a tie cuts horizontally.
    axis = Axis.VERTICAL if dx > dy else Axis.HORIZONTAL

    if axis is Axis.HORIZONTAL:
        new_is_second = point.y > mid.y
    else:
        new_is_second = point.x > mid.x

    kept = Leaf(color=leaf.color, id=leaf.id)
    added = Leaf(color=color)
    if new_is_second:
        return Split(axis=axis, first=kept, second=added)
    return Split(axis=axis, first=added, second=kept)


def _route(split: Split, bounds: Rect, point: Point) -> Tuple[bool, Rect, Rect]:
    """Halve *bounds* for *split*; a point on the dividing line goes second."""
    f1, f2 = bounds.halve(split.axis)
    if split.axis is Axis.HORIZONTAL:
        in_first = point.y < f2.min_y
    else:
        in_first = point.x < f2.min_x
    return in_first, f1, f2


def insert_region(
    tree: Optional[RegionNode],
    point: Point,
    bounds: Rect,
    color: Hashable,
) -> RegionNode:
    """
    Add a region of *color* at *point* and return the new tree.

    Parameters
    ----------
    tree : RegionNode or None
        Current tree; ``None`` means an empty canvas.
    point : Point
        Drop location.  Must lie inside *bounds*; this is not checked,
        and points outside still produce a valid (if arbitrary) split.
    bounds : Rect
        Rectangle the tree is laid out in.
    color : hashable
        Color of the new region.

    Returns
    -------
    RegionNode
        A tree with exactly one more leaf than *tree*.
    """
    if tree is None:
        return Leaf(color=color)

    # Walk down to the leaf under the point, remembering the way back.
    path: List[Tuple[Split, bool]] = []
    node, rect = tree, bounds
    while isinstance(node, Split):
        in_first, f1, f2 = _route(node, rect, point)
        path.append((node, in_first))
        node, rect = (node.first, f1) if in_first else (node.second, f2)

    result: RegionNode = _split_leaf(node, point, rect, color)

    # Rebuild the splits on the path; the sibling halves are reused as-is.
    for split, in_first in reversed(path):
        if in_first:
            result = Split(axis=split.axis, first=result, second=split.second, id=split.id)
        else:
            result = Split(axis=split.axis, first=split.first, second=result, id=split.id)
    return result


# ── Layout from tree ──────────────────────────────────────────────────────

def flatten(tree: Optional[RegionNode], bounds: Rect) -> List[RegionRect]:
    """
    Walk the tree and assign a rectangle to every leaf.

    Leaves of a split's first half come before those of its second half,
    so the same tree and bounds always give the same sequence.  Halving
    is plain floating point; no rounding is applied.
    """
    regions: List[RegionRect] = []
    if tree is None:
        return regions

    stack = [(tree, bounds)]
    while stack:
        node, rect = stack.pop()
        if isinstance(node, Leaf):
            regions.append(RegionRect(node.id, node.color, rect))
            continue
        f1, f2 = rect.halve(node.axis)
        stack.append((node.second, f2))
        stack.append((node.first, f1))
    return regions


def region_at(
    tree: Optional[RegionNode],
    bounds: Rect,
    point: Point,
) -> Optional[RegionRect]:
    """Return the region whose rectangle contains *point*, or None."""
    if tree is None:
        return None

    node, rect = tree, bounds
    while isinstance(node, Split):
        in_first, f1, f2 = _route(node, rect, point)
        node, rect = (node.first, f1) if in_first else (node.second, f2)

    if not rect.contains(point):
        return None
    return RegionRect(node.id, node.color, rect)
