"""Door and window configuration schemas."""

from pydantic import Field

from roomlayout.application.config.schemas.base import (
    HEX_COLOR_PATTERN,
    MAX_DOOR_OPEN_ANGLE,
    MIN_DOOR_HEIGHT,
    MIN_DOOR_THICKNESS,
    MIN_DOOR_WIDTH,
    MIN_WINDOW_SIZE,
    LayoutModel,
)
from roomlayout.domain.value_objects import (
    DoorHinge,
    DoorSwing,
    DoorType,
    SlideDirection,
    WallSide,
)


class DoorConfig(LayoutModel):
    """Configuration for a door.

    Attributes:
        id: Unique door identifier.
        wall: Wall holding the door.
        offset: Distance from the wall start in mm.
        width: Opening width in mm.
        height: Opening height in mm.
        door_type: Swing or slide (v1.2.0+).
        hinge: Hinge side.
        swing: Swing direction.
        slide_direction: Slide travel direction (v1.2.0+).
        open_angle: Maximum opening angle, 0-120 degrees.
        thickness: Leaf thickness in mm.
        color: Hex colour of the leaf.
    """

    id: str = Field(..., min_length=1)
    wall: WallSide
    offset: float = Field(..., ge=0)
    width: float = Field(..., ge=MIN_DOOR_WIDTH)
    height: float = Field(..., ge=MIN_DOOR_HEIGHT)
    door_type: DoorType = DoorType.SWING
    hinge: DoorHinge
    swing: DoorSwing
    slide_direction: SlideDirection = SlideDirection.RIGHT
    open_angle: float = Field(..., ge=0, le=MAX_DOOR_OPEN_ANGLE)
    thickness: float = Field(..., ge=MIN_DOOR_THICKNESS)
    color: str = Field(default="#654321", pattern=HEX_COLOR_PATTERN)


class WindowConfig(LayoutModel):
    """Configuration for a window.

    Attributes:
        id: Unique window identifier.
        wall: Wall holding the window.
        offset: Distance from the wall start in mm.
        width: Opening width in mm.
        height: Opening height in mm.
        sill_height: Sill height above the floor in mm.
    """

    id: str = Field(..., min_length=1)
    wall: WallSide
    offset: float = Field(..., ge=0)
    width: float = Field(..., ge=MIN_WINDOW_SIZE)
    height: float = Field(..., ge=MIN_WINDOW_SIZE)
    sill_height: float = Field(..., ge=0)
