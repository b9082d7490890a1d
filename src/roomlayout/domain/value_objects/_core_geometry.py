"""Core 2D geometry value objects."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True)
class Point2D:
    """2D point in room coordinate space (millimetres).

    The room origin is the inside corner where the north and west walls
    meet; x grows east and y grows south. Negative values are valid while
    an item is being dragged outside the room.
    """

    x: float
    y: float


@dataclass(frozen=True)
class Bounds:
    """Axis-aligned bounding box of a rotated footprint.

    Attributes:
        min_x: Smallest x of the footprint.
        min_y: Smallest y of the footprint.
        max_x: Largest x of the footprint.
        max_y: Largest y of the footprint.
    """

    min_x: float
    min_y: float
    max_x: float
    max_y: float

    @property
    def width(self) -> float:
        """Horizontal extent of the box."""
        return self.max_x - self.min_x

    @property
    def height(self) -> float:
        """Vertical extent of the box."""
        return self.max_y - self.min_y

    def is_within(self, width: float, height: float) -> bool:
        """Check whether the box lies inside ``[0, width] x [0, height]``."""
        return (
            self.min_x >= 0
            and self.min_y >= 0
            and self.max_x <= width
            and self.max_y <= height
        )


Polygon = tuple[Point2D, ...]


class DisplayUnit(str, Enum):
    """Length unit shown to the user. Stored values are always millimetres."""

    MM = "mm"
    CM = "cm"
