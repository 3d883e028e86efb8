"""
Axis-aligned geometry for the canvas.

Points and rectangles use screen coordinates: ``y`` grows downwards, so
the "top" half of a rectangle is the one with the smaller ``y``.
Rectangles are immutable and can be turned into Shapely polygons for
serialisation and area checks.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Tuple

from shapely.geometry import Polygon, box


class Axis(str, Enum):
    """Direction of a 50/50 cut."""

    HORIZONTAL = "horizontal"   # top / bottom
    VERTICAL = "vertical"       # left / right


@dataclass(frozen=True)
class Point:
    x: float
    y: float


@dataclass(frozen=True)
class Rect:
    """Rectangle given by its top-left corner and its size."""

    x: float
    y: float
    width: float
    height: float

    @staticmethod
    def zero() -> "Rect":
        return Rect(0.0, 0.0, 0.0, 0.0)

    @property
    def min_x(self) -> float:
        return self.x

    @property
    def min_y(self) -> float:
        return self.y

    @property
    def max_x(self) -> float:
        return self.x + self.width

    @property
    def max_y(self) -> float:
        return self.y + self.height

    @property
    def mid_x(self) -> float:
        return self.x + self.width / 2

    @property
    def mid_y(self) -> float:
        return self.y + self.height / 2

    @property
    def mid(self) -> Point:
        return Point(self.mid_x, self.mid_y)

    @property
    def area(self) -> float:
        return self.width * self.height

    @property
    def is_empty(self) -> bool:
        return self.width <= 0 or self.height <= 0

    def contains(self, point: Point) -> bool:
        """Half-open containment: the max edges belong to the neighbour."""
        if self.is_empty:
            return False
        return (self.min_x <= point.x < self.max_x
                and self.min_y <= point.y < self.max_y)

    # --- splitting --------------------------------------------------------

    def halve(self, axis: Axis) -> Tuple["Rect", "Rect"]:
        """
        Cut the rectangle into two equal halves along *axis*.

        Returns ``(first, second)``: top/bottom for a horizontal cut,
        left/right for a vertical one.
        """
        if axis is Axis.HORIZONTAL:
            h = self.height / 2
            first = Rect(self.x, self.y, self.width, h)
            second = Rect(self.x, self.y + h, self.width, h)
        else:
            w = self.width / 2
            first = Rect(self.x, self.y, w, self.height)
            second = Rect(self.x + w, self.y, w, self.height)
        return first, second

    def to_polygon(self) -> Polygon:
        """Convert to a Shapely Polygon."""
        return box(self.min_x, self.min_y, self.max_x, self.max_y)

    def to_dict(self) -> dict:
        return {
            "x": self.x,
            "y": self.y,
            "width": self.width,
            "height": self.height,
        }


def square_canvas(
    container_width: float,
    margin: float = 16.0,
    origin_y: float = 0.0,
) -> Rect:
    """
    Compute the square drop area inside a container.

    Parameters
    ----------
    container_width : float
        Width of the surrounding view.
    margin : float
        Gap kept on the left and right of the square.
    origin_y : float
        Top edge of the square.

    Returns
    -------
    Rect
        A square of side ``container_width - 2 * margin``, centred
        horizontally.
    """
    side = container_width - margin * 2
    if side <= 0:
        raise ValueError(
            f"Container width {container_width} leaves no room for a "
            f"canvas with margin {margin}"
        )
    min_x = (container_width - side) / 2
    return Rect(min_x, origin_y, side, side)
