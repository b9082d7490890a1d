"""Wall opening value objects (doors and windows)."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class WallSide(str, Enum):
    """The four walls of the room.

    North and south walls run along the x axis from the west corner; east
    and west walls run along the y axis from the north corner. Opening
    offsets are measured from that start corner.
    """

    NORTH = "north"
    EAST = "east"
    SOUTH = "south"
    WEST = "west"

    @property
    def is_horizontal(self) -> bool:
        """True for walls that run along the x axis."""
        return self in (WallSide.NORTH, WallSide.SOUTH)


class DoorHinge(str, Enum):
    """Hinge side of a swing door, seen from the side it swings towards."""

    LEFT = "left"
    RIGHT = "right"


class DoorSwing(str, Enum):
    """Whether a swing door opens into or out of the room."""

    INWARD = "inward"
    OUTWARD = "outward"


class DoorType(str, Enum):
    """Door leaf mechanism."""

    SWING = "swing"
    SLIDE = "slide"


class SlideDirection(str, Enum):
    """Direction a slide door travels along its wall."""

    LEFT = "left"
    RIGHT = "right"


@dataclass(frozen=True)
class PlacementCheck:
    """Outcome of an opening placement check.

    Attributes:
        valid: True if the opening can be placed.
        error: Human-readable reason when ``valid`` is False.
    """

    valid: bool
    error: str | None = None

    @classmethod
    def ok(cls) -> "PlacementCheck":
        return cls(valid=True)

    @classmethod
    def rejected(cls, error: str) -> "PlacementCheck":
        return cls(valid=False, error=error)


@dataclass(frozen=True)
class OpeningPlacement:
    """Anchor point and facing of an opening on its wall.

    Attributes:
        x: Room x of the opening's start point.
        y: Room y of the opening's start point.
        rotation: Orientation of the wall face in degrees.
    """

    x: float
    y: float
    rotation: float


@dataclass(frozen=True)
class DoorArc:
    """Swing arc of a door leaf in room coordinates.

    Angles are in degrees, measured from the +x axis towards +y (clockwise
    on screen, where y points down).

    Attributes:
        hinge_x: Room x of the hinge.
        hinge_y: Room y of the hinge.
        radius: Leaf length (the door width).
        start_angle: One end of the swept sector.
        end_angle: The other end; positive sweep for left hinges.
        closed_angle: Leaf direction when closed (one of the two ends).
    """

    hinge_x: float
    hinge_y: float
    radius: float
    start_angle: float
    end_angle: float
    closed_angle: float

    @property
    def sweep(self) -> float:
        """Signed sweep from start to end, in degrees."""
        return self.end_angle - self.start_angle
