"""Grid snapping and room-boundary constraints for furniture placement."""

from __future__ import annotations

import math

from ..entities import PlacedItem, RoomSpec
from ..value_objects import Point2D
from .geometry import rotated_bounds

__all__ = [
    "constrain_to_room",
    "snap_position",
    "snap_to_grid",
    "snap_wall_offset",
]


def snap_to_grid(value: float, grid_size: float) -> float:
    """Snap a value to the nearest grid line.

    Halfway values round up, towards positive infinity. A non-positive grid
    size disables snapping.
    """
    if grid_size <= 0:
        return value
    return math.floor(value / grid_size + 0.5) * grid_size


def snap_position(x: float, y: float, room: RoomSpec) -> Point2D:
    """Snap a position to the room grid if snapping is enabled."""
    if not room.snap_enabled:
        return Point2D(x, y)
    return Point2D(snap_to_grid(x, room.grid_size), snap_to_grid(y, room.grid_size))


def snap_wall_offset(offset: float, grid_size: float) -> float:
    """Snap an opening's wall offset to the grid."""
    return snap_to_grid(offset, grid_size)


def constrain_to_room(item: PlacedItem, room: RoomSpec) -> Point2D:
    """Pull an item's anchor back so its rotated footprint stays in the room.

    The four clamps run in sequence and are not mutually exclusive: when
    the rotated footprint is wider (or deeper) than the room, the max-side
    clamp overwrites the min-side one and the footprint still sticks out
    past the min side.

    Args:
        item: Item at its proposed position.
        room: The room.

    Returns:
        The constrained anchor ``(x, y)``.
    """
    bounds = rotated_bounds(item)
    offset_x = item.x - bounds.min_x
    offset_y = item.y - bounds.min_y

    x = item.x
    y = item.y

    if bounds.min_x < 0:
        x = offset_x
    if bounds.min_y < 0:
        y = offset_y
    if bounds.max_x > room.width:
        x = room.width - bounds.width + offset_x
    if bounds.max_y > room.height:
        y = room.height - bounds.height + offset_y

    return Point2D(x, y)
