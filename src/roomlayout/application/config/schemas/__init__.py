"""Pydantic schemas for the layout document.

Modules:
    base: Version constants, minimum dimensions, shared base model
    room_schema: RoomConfig
    furniture_schema: FurnitureConfig
    opening_schema: DoorConfig, WindowConfig
    root: LayoutDocument, LayoutMetaConfig
"""

from roomlayout.application.config.schemas.base import (
    HEX_COLOR_PATTERN,
    LATEST_VERSION,
    MAX_DOOR_OPEN_ANGLE,
    MIN_CEILING_HEIGHT,
    MIN_DOOR_HEIGHT,
    MIN_DOOR_THICKNESS,
    MIN_DOOR_WIDTH,
    MIN_FURNITURE_SIZE,
    MIN_GRID_SIZE,
    MIN_ROOM_SIZE,
    MIN_WALL_THICKNESS,
    MIN_WINDOW_SIZE,
    SUPPORTED_VERSIONS,
    LayoutModel,
)
from roomlayout.application.config.schemas.furniture_schema import FurnitureConfig
from roomlayout.application.config.schemas.opening_schema import (
    DoorConfig,
    WindowConfig,
)
from roomlayout.application.config.schemas.room_schema import RoomConfig
from roomlayout.application.config.schemas.root import (
    LayoutDocument,
    LayoutMetaConfig,
)

__all__ = [
    "DoorConfig",
    "FurnitureConfig",
    "HEX_COLOR_PATTERN",
    "LATEST_VERSION",
    "LayoutDocument",
    "LayoutMetaConfig",
    "LayoutModel",
    "MAX_DOOR_OPEN_ANGLE",
    "MIN_CEILING_HEIGHT",
    "MIN_DOOR_HEIGHT",
    "MIN_DOOR_THICKNESS",
    "MIN_DOOR_WIDTH",
    "MIN_FURNITURE_SIZE",
    "MIN_GRID_SIZE",
    "MIN_ROOM_SIZE",
    "MIN_WALL_THICKNESS",
    "MIN_WINDOW_SIZE",
    "RoomConfig",
    "SUPPORTED_VERSIONS",
    "WindowConfig",
]
