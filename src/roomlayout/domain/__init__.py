"""Domain layer - core layout geometry and rules."""

from .entities import Door, LayoutSnapshot, PlacedItem, RoomSpec, Window
from .value_objects import (
    Bounds,
    DoorHinge,
    DoorSwing,
    DoorType,
    FurnitureCategory,
    FurnitureType,
    Point2D,
    SlideDirection,
    WallSide,
)

__all__ = [
    "Bounds",
    "Door",
    "DoorHinge",
    "DoorSwing",
    "DoorType",
    "FurnitureCategory",
    "FurnitureType",
    "LayoutSnapshot",
    "PlacedItem",
    "Point2D",
    "RoomSpec",
    "SlideDirection",
    "WallSide",
    "Window",
]
