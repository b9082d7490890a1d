"""Room configuration schema."""

from pydantic import Field

from roomlayout.application.config.schemas.base import (
    HEX_COLOR_PATTERN,
    MIN_CEILING_HEIGHT,
    MIN_GRID_SIZE,
    MIN_ROOM_SIZE,
    MIN_WALL_THICKNESS,
    LayoutModel,
)
from roomlayout.domain.value_objects import DisplayUnit


class RoomConfig(LayoutModel):
    """Configuration for the rectangular room.

    Attributes:
        width: Interior width in mm (north/south wall length).
        height: Interior height in mm (east/west wall length).
        wall_thickness: Wall thickness in mm.
        ceiling_height: Ceiling height in mm.
        grid_size: Snapping grid spacing in mm.
        snap_enabled: Whether positions snap to the grid.
        display_unit: Unit shown in the UI.
        wall_color: Hex colour of the walls.
        floor_color: Hex colour of the floor.
    """

    width: float = Field(..., ge=MIN_ROOM_SIZE, description="Room width in mm")
    height: float = Field(..., ge=MIN_ROOM_SIZE, description="Room height in mm")
    wall_thickness: float = Field(..., ge=MIN_WALL_THICKNESS)
    ceiling_height: float = Field(..., ge=MIN_CEILING_HEIGHT)
    grid_size: float = Field(..., ge=MIN_GRID_SIZE)
    snap_enabled: bool
    display_unit: DisplayUnit = DisplayUnit.MM
    wall_color: str = Field(default="#b0b0b0", pattern=HEX_COLOR_PATTERN)
    floor_color: str = Field(default="#c4a882", pattern=HEX_COLOR_PATTERN)
