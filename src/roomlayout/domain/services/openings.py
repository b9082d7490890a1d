"""Door and window placement rules along the room walls.

Openings live in one-dimensional wall coordinates: an offset from the wall
start and a width along the wall. Placement is valid when the opening fits
on its wall and does not overlap another opening on the same wall. Bounds
are always checked before overlaps, so an out-of-bounds opening reports a
boundary error even if it also overlaps something.
"""

from __future__ import annotations

from collections.abc import Iterable

from ..entities import Door, RoomSpec, Window
from ..value_objects import (
    DoorArc,
    DoorHinge,
    DoorSwing,
    DoorType,
    OpeningPlacement,
    PlacementCheck,
    SlideDirection,
    WallSide,
)

__all__ = [
    "DOOR_SWING_TABLE",
    "SLIDE_TRAVEL_RATIO",
    "constrain_offset",
    "door_arc",
    "is_in_bounds",
    "opening_position",
    "overlap",
    "slide_travel",
    "validate_door",
    "validate_window",
    "wall_length",
]

# Fraction of its width a slide door travels when open.
SLIDE_TRAVEL_RATIO: float = 0.6

# (wall, swing) -> direction a left-hinged leaf turns from closed to open
# (+1 towards increasing angles). Left hinges sit at the wall-start jamb
# with the closed leaf along +x (north/south) or +y (east/west). A right
# hinge sits at the far jamb, its closed leaf points the other way and it
# turns the other way.
DOOR_SWING_TABLE: dict[tuple[WallSide, DoorSwing], int] = {
    (WallSide.NORTH, DoorSwing.INWARD): 1,
    (WallSide.NORTH, DoorSwing.OUTWARD): -1,
    (WallSide.SOUTH, DoorSwing.INWARD): -1,
    (WallSide.SOUTH, DoorSwing.OUTWARD): 1,
    (WallSide.EAST, DoorSwing.INWARD): 1,
    (WallSide.EAST, DoorSwing.OUTWARD): -1,
    (WallSide.WEST, DoorSwing.INWARD): -1,
    (WallSide.WEST, DoorSwing.OUTWARD): 1,
}


def wall_length(wall: WallSide, room: RoomSpec) -> float:
    """Length of a wall: north/south span the width, east/west the height."""
    if wall.is_horizontal:
        return room.width
    return room.height


def is_in_bounds(wall: WallSide, offset: float, width: float, room: RoomSpec) -> bool:
    """Check that an opening lies entirely on its wall."""
    return offset >= 0 and offset + width <= wall_length(wall, room)


def constrain_offset(
    wall: WallSide, offset: float, width: float, room: RoomSpec
) -> float:
    """Clamp an opening offset into ``[0, max(0, wall_length - width)]``."""
    max_offset = max(0.0, wall_length(wall, room) - width)
    return max(0.0, min(offset, max_offset))


def overlap(offset1: float, width1: float, offset2: float, width2: float) -> bool:
    """Check whether two wall intervals overlap.

    Intervals that only touch (``offset1 + width1 == offset2``) do not
    overlap.
    """
    return not (offset1 + width1 <= offset2 or offset2 + width2 <= offset1)


def _first_overlap(
    wall: WallSide,
    offset: float,
    width: float,
    others: Iterable[Door | Window],
    self_id: str | None,
) -> bool:
    return any(
        other.id != self_id
        and other.wall == wall
        and overlap(offset, width, other.offset, other.width)
        for other in others
    )


def validate_door(
    door: Door,
    doors: Iterable[Door],
    windows: Iterable[Window],
    room: RoomSpec,
) -> PlacementCheck:
    """Check whether a door can be placed.

    Args:
        door: The door to place (an entry of ``doors`` with the same id is
            treated as this door's previous state and ignored).
        doors: Existing doors.
        windows: Existing windows.
        room: The room.

    Returns:
        PlacementCheck with the first failing reason.
    """
    if not is_in_bounds(door.wall, door.offset, door.width, room):
        return PlacementCheck.rejected("Door exceeds wall boundaries")
    if _first_overlap(door.wall, door.offset, door.width, doors, door.id):
        return PlacementCheck.rejected("Door overlaps with another door")
    if _first_overlap(door.wall, door.offset, door.width, windows, door.id):
        return PlacementCheck.rejected("Door overlaps with a window")
    return PlacementCheck.ok()


def validate_window(
    window: Window,
    doors: Iterable[Door],
    windows: Iterable[Window],
    room: RoomSpec,
) -> PlacementCheck:
    """Check whether a window can be placed.

    Args:
        window: The window to place (an entry of ``windows`` with the same
            id is ignored).
        doors: Existing doors.
        windows: Existing windows.
        room: The room.

    Returns:
        PlacementCheck with the first failing reason.
    """
    if not is_in_bounds(window.wall, window.offset, window.width, room):
        return PlacementCheck.rejected("Window exceeds wall boundaries")
    if _first_overlap(window.wall, window.offset, window.width, doors, window.id):
        return PlacementCheck.rejected("Window overlaps with a door")
    if _first_overlap(window.wall, window.offset, window.width, windows, window.id):
        return PlacementCheck.rejected("Window overlaps with another window")
    return PlacementCheck.ok()


def opening_position(wall: WallSide, offset: float, room: RoomSpec) -> OpeningPlacement:
    """Room-space start point and wall-face rotation of an opening."""
    if wall is WallSide.NORTH:
        return OpeningPlacement(x=offset, y=0.0, rotation=0.0)
    if wall is WallSide.SOUTH:
        return OpeningPlacement(x=offset, y=room.height, rotation=180.0)
    if wall is WallSide.EAST:
        return OpeningPlacement(x=room.width, y=offset, rotation=90.0)
    return OpeningPlacement(x=0.0, y=offset, rotation=270.0)


def _jamb_point(door: Door, room: RoomSpec, at_start: bool) -> tuple[float, float]:
    along = door.offset if at_start else door.offset + door.width
    anchor = opening_position(door.wall, along, room)
    return anchor.x, anchor.y


def door_arc(door: Door, room: RoomSpec) -> DoorArc | None:
    """Swing arc of a door leaf in room coordinates.

    Slide doors have no swing arc and yield None. The arc runs from
    ``start_angle`` by ``open_angle`` degrees, counter to the angle
    direction for right hinges; the closed leaf lies on one end of it.

    Args:
        door: The door.
        room: The room.

    Returns:
        DoorArc with hinge point, radius, swept sector and closed leaf angle.
    """
    if door.door_type is DoorType.SLIDE:
        return None
    turn = DOOR_SWING_TABLE[(door.wall, door.swing)]
    closed_angle = 0.0 if door.wall.is_horizontal else 90.0
    at_start = True
    direction = 1
    if door.hinge is DoorHinge.RIGHT:
        closed_angle += 180.0
        turn = -turn
        at_start = False
        direction = -1

    if turn == direction:
        start_angle = closed_angle
    else:
        start_angle = (closed_angle + door.open_angle * turn) % 360
    hinge_x, hinge_y = _jamb_point(door, room, at_start)
    return DoorArc(
        hinge_x=hinge_x,
        hinge_y=hinge_y,
        radius=door.width,
        start_angle=start_angle,
        end_angle=start_angle + door.open_angle * direction,
        closed_angle=closed_angle,
    )


def slide_travel(door: Door) -> float:
    """Signed distance along the wall a slide door travels when open."""
    if door.door_type is not DoorType.SLIDE:
        return 0.0
    travel = door.width * SLIDE_TRAVEL_RATIO
    return travel if door.slide_direction is SlideDirection.RIGHT else -travel
