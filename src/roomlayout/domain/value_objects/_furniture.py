"""Furniture classification value objects.

Every furniture type resolves once to a ``FurnitureCapability`` which
carries the height heuristics used by collision tucking and the role used
by parent/child attachment. Adding a type means adding one table row.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable

# Tabletop thickness subtracted from a desk or table height to get the
# usable clearance beneath it.
TABLETOP_THICKNESS: float = 25.0

# Share of a chair's height taken by seat and armrests (backrest excluded).
CHAIR_TUCK_RATIO: float = 0.47

# Share of a chair's depth occupied by the backrest, measured from the back.
BACKREST_DEPTH_RATIO: float = 0.25


class FurnitureType(str, Enum):
    """Furniture types known to the layout engine."""

    BED = "bed"
    DESK = "desk"
    CHAIR = "chair"
    CLOSET = "closet"
    DISPLAY_CABINET = "display-cabinet"
    BOOKSHELF = "bookshelf"
    SOFA = "sofa"
    TABLE = "table"
    MONITOR_STAND = "monitor-stand"
    MONITOR_ARM = "monitor-arm"
    REFRIGERATOR = "refrigerator"
    WASHING_MACHINE = "washing-machine"
    TV = "tv"
    SINK = "sink"


class FurnitureCategory(str, Enum):
    """Palette grouping of furniture types."""

    FURNITURE = "furniture"
    APPLIANCE = "appliance"
    ELECTRONICS = "electronics"
    FIXTURE = "fixture"


class AttachmentRole(str, Enum):
    """Role of a furniture type in parent/child attachment.

    Attributes:
        NONE: Neither hosts nor attaches.
        PARENT: May host attachable children but never has a parent.
        ATTACHABLE: May be attached to a parent.
    """

    NONE = "none"
    PARENT = "parent"
    ATTACHABLE = "attachable"


def _no_clearance(height: float) -> float:
    return 0.0


def _tabletop_clearance(height: float) -> float:
    return height - TABLETOP_THICKNESS


def _full_height(height: float) -> float:
    return height


def _seat_height(height: float) -> float:
    return height * CHAIR_TUCK_RATIO


@dataclass(frozen=True)
class FurnitureCapability:
    """Behavioural traits of a furniture type.

    Attributes:
        category: Palette category.
        clearance: Maps item height to the free height beneath the item.
        tuck: Maps item height to the height that must fit beneath another
            item for this one to be tucked under it.
        has_backrest: True when the back strip of the footprint stays
            collidable while the item is tucked.
        role: Attachment role.
    """

    category: FurnitureCategory
    clearance: Callable[[float], float] = _no_clearance
    tuck: Callable[[float], float] = _full_height
    has_backrest: bool = False
    role: AttachmentRole = AttachmentRole.NONE


_FURNITURE = FurnitureCategory.FURNITURE

CAPABILITIES: dict[FurnitureType, FurnitureCapability] = {
    FurnitureType.BED: FurnitureCapability(_FURNITURE),
    FurnitureType.DESK: FurnitureCapability(
        _FURNITURE, clearance=_tabletop_clearance, role=AttachmentRole.PARENT
    ),
    FurnitureType.CHAIR: FurnitureCapability(
        _FURNITURE, tuck=_seat_height, has_backrest=True
    ),
    FurnitureType.CLOSET: FurnitureCapability(_FURNITURE),
    FurnitureType.DISPLAY_CABINET: FurnitureCapability(_FURNITURE),
    FurnitureType.BOOKSHELF: FurnitureCapability(_FURNITURE),
    FurnitureType.SOFA: FurnitureCapability(_FURNITURE),
    FurnitureType.TABLE: FurnitureCapability(
        _FURNITURE, clearance=_tabletop_clearance, role=AttachmentRole.PARENT
    ),
    FurnitureType.MONITOR_STAND: FurnitureCapability(
        FurnitureCategory.ELECTRONICS, role=AttachmentRole.ATTACHABLE
    ),
    FurnitureType.MONITOR_ARM: FurnitureCapability(
        FurnitureCategory.ELECTRONICS, role=AttachmentRole.ATTACHABLE
    ),
    FurnitureType.REFRIGERATOR: FurnitureCapability(FurnitureCategory.APPLIANCE),
    FurnitureType.WASHING_MACHINE: FurnitureCapability(FurnitureCategory.APPLIANCE),
    FurnitureType.TV: FurnitureCapability(FurnitureCategory.ELECTRONICS),
    FurnitureType.SINK: FurnitureCapability(FurnitureCategory.FIXTURE),
}


def capability_for(furniture_type: FurnitureType) -> FurnitureCapability:
    """Look up the capability row for a furniture type."""
    return CAPABILITIES[furniture_type]
