"""Value objects for the room layout domain.

This module provides immutable data types used throughout the layout
engine. All classes are re-exported from sub-modules for convenience.
"""

from __future__ import annotations

# Core geometry
from ._core_geometry import (
    Bounds,
    DisplayUnit,
    Point2D,
    Polygon,
)

# Furniture classification
from ._furniture import (
    BACKREST_DEPTH_RATIO,
    CAPABILITIES,
    CHAIR_TUCK_RATIO,
    TABLETOP_THICKNESS,
    AttachmentRole,
    FurnitureCapability,
    FurnitureCategory,
    FurnitureType,
    capability_for,
)

# Wall openings
from ._openings import (
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
    "AttachmentRole",
    "BACKREST_DEPTH_RATIO",
    "Bounds",
    "DisplayUnit",
    "CAPABILITIES",
    "CHAIR_TUCK_RATIO",
    "DoorArc",
    "DoorHinge",
    "DoorSwing",
    "DoorType",
    "FurnitureCapability",
    "FurnitureCategory",
    "FurnitureType",
    "OpeningPlacement",
    "PlacementCheck",
    "Point2D",
    "Polygon",
    "SlideDirection",
    "TABLETOP_THICKNESS",
    "WallSide",
    "capability_for",
]
