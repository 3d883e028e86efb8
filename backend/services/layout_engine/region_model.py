"""
Region tree model.

A layout is a binary tree: each node is either a ``Leaf`` holding one
color, or a ``Split`` cutting its rectangle in half along an axis.
Nodes never store geometry; rectangles are derived from the bounding
rectangle every time the tree is walked.

Nodes are frozen, so every edit builds a new root and older trees stay
valid.
"""

import uuid
from dataclasses import dataclass, field
from typing import Hashable, Iterator, Optional, Tuple, Union

from .geometry import Axis


RegionId = uuid.UUID


def new_region_id() -> RegionId:
    """Mint a fresh, unique region identifier."""
    return uuid.uuid4()


@dataclass(frozen=True)
class Leaf:
    """A single colored region."""

    color: Hashable
    id: RegionId = field(default_factory=new_region_id)

    @property
    def is_leaf(self) -> bool:
        return True

    @property
    def is_split(self) -> bool:
        return False


@dataclass(frozen=True, eq=False, repr=False)
class Split:
    """
    A 50/50 cut: ``first`` is the top (horizontal) or left (vertical) half.

    Splits compare by identity.
    """

    axis: Axis
    first: "RegionNode"
    second: "RegionNode"
    id: RegionId = field(default_factory=new_region_id)

    @property
    def is_leaf(self) -> bool:
        return False

    @property
    def is_split(self) -> bool:
        return True

    def __repr__(self) -> str:
        return f"Split(axis={self.axis.value}, id={self.id})"


RegionNode = Union[Leaf, Split]


# ── Inspection helpers ────────────────────────────────────────────────────
# Walks keep their own stack: trees may be deeper than the recursion limit.

def _walk(node: Optional[RegionNode]) -> Iterator[Tuple[RegionNode, int]]:
    """Yield ``(node, level)`` pre-order, first half before second half."""
    if node is None:
        return
    stack = [(node, 1)]
    while stack:
        current, level = stack.pop()
        yield current, level
        if isinstance(current, Split):
            stack.append((current.second, level + 1))
            stack.append((current.first, level + 1))


def iter_leaves(node: Optional[RegionNode]) -> Iterator[Leaf]:
    """Yield leaves first-half before second-half."""
    for current, _ in _walk(node):
        if isinstance(current, Leaf):
            yield current


def leaf_count(node: Optional[RegionNode]) -> int:
    """Number of regions in the tree; an absent tree has none."""
    return sum(1 for _ in iter_leaves(node))


def depth(node: Optional[RegionNode]) -> int:
    """Levels in the tree (a single leaf is depth 1)."""
    return max((level for _, level in _walk(node)), default=0)


def find_region(node: Optional[RegionNode], region_id: RegionId) -> Optional[RegionNode]:
    """Return the node (leaf or split) carrying *region_id*, if any."""
    for current, _ in _walk(node):
        if current.id == region_id:
            return current
    return None
