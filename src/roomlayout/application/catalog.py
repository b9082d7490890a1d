"""Furniture catalog, size presets and engine defaults.

Catalog entries give the default footprint of each furniture type when it
is dropped into the room without a preset. Presets are named size
variants of a type (single/queen/king beds and so on).
"""

from __future__ import annotations

from dataclasses import dataclass

from roomlayout.domain.entities import Door, RoomSpec, Window
from roomlayout.domain.services.history import DEFAULT_HISTORY_SIZE
from roomlayout.domain.value_objects import DisplayUnit, FurnitureType, WallSide


@dataclass(frozen=True)
class CatalogEntry:
    """Default label and dimensions (mm) of a furniture type."""

    label: str
    width: float
    depth: float
    height: float


@dataclass(frozen=True)
class FurniturePreset:
    """A named size variant of a furniture type.

    Attributes:
        id: Preset identifier (e.g., "bed-queen").
        label: Short label shown next to the type.
        type: Furniture type the preset applies to.
        name: Display name given to items created from the preset.
        width: Footprint width in mm.
        depth: Footprint depth in mm.
        height: Height in mm.
    """

    id: str
    label: str
    type: FurnitureType
    name: str
    width: float
    depth: float
    height: float


DEFAULT_ROOM = RoomSpec(
    width=4000.0,
    height=3000.0,
    wall_thickness=200.0,
    ceiling_height=2400.0,
    grid_size=100.0,
    snap_enabled=True,
    display_unit=DisplayUnit.MM,
)

DEFAULT_HISTORY_MAX: int = DEFAULT_HISTORY_SIZE

DEFAULT_FURNITURE_COLOR: str = "#8b7355"

FURNITURE_CATALOG: dict[FurnitureType, CatalogEntry] = {
    FurnitureType.BED: CatalogEntry("Bed", 2000, 1500, 500),
    FurnitureType.DESK: CatalogEntry("Desk", 1200, 600, 720),
    FurnitureType.CHAIR: CatalogEntry("Chair", 450, 450, 900),
    FurnitureType.CLOSET: CatalogEntry("Closet", 1200, 600, 2000),
    FurnitureType.DISPLAY_CABINET: CatalogEntry("Display cabinet", 800, 400, 1800),
    FurnitureType.BOOKSHELF: CatalogEntry("Bookshelf", 800, 300, 1800),
    FurnitureType.SOFA: CatalogEntry("Sofa", 1800, 900, 800),
    FurnitureType.TABLE: CatalogEntry("Table", 1200, 800, 750),
    FurnitureType.MONITOR_STAND: CatalogEntry("Monitor stand", 600, 250, 100),
    FurnitureType.MONITOR_ARM: CatalogEntry("Monitor arm", 150, 150, 450),
    FurnitureType.REFRIGERATOR: CatalogEntry("Refrigerator", 700, 700, 1800),
    FurnitureType.WASHING_MACHINE: CatalogEntry("Washing machine", 600, 600, 850),
    FurnitureType.TV: CatalogEntry("TV", 1400, 200, 800),
    FurnitureType.SINK: CatalogEntry("Sink", 800, 500, 850),
}

FURNITURE_PRESETS: tuple[FurniturePreset, ...] = (
    # Beds
    FurniturePreset("bed-single", "Single", FurnitureType.BED, "Single bed", 1000, 2000, 500),
    FurniturePreset("bed-super-single", "Super single", FurnitureType.BED, "Super single bed", 1100, 2000, 500),
    FurniturePreset("bed-double", "Double", FurnitureType.BED, "Double bed", 1400, 2000, 500),
    FurniturePreset("bed-queen", "Queen", FurnitureType.BED, "Queen bed", 1500, 2000, 500),
    FurniturePreset("bed-king", "King", FurnitureType.BED, "King bed", 1650, 2050, 500),
    FurniturePreset("bed-family", "Family", FurnitureType.BED, "Family bed", 1800, 2100, 500),
    # Desks
    FurniturePreset("desk-compact", "Compact", FurnitureType.DESK, "Compact desk", 1000, 600, 720),
    FurniturePreset("desk-standard", "Standard", FurnitureType.DESK, "Standard desk", 1400, 700, 720),
    FurniturePreset("desk-wide", "Wide", FurnitureType.DESK, "Wide desk", 1800, 800, 720),
    # Chairs
    FurniturePreset("chair-dining", "Dining", FurnitureType.CHAIR, "Dining chair", 450, 500, 900),
    FurniturePreset("chair-office", "Office", FurnitureType.CHAIR, "Office chair", 520, 520, 1000),
    FurniturePreset("chair-lounge", "Lounge", FurnitureType.CHAIR, "Lounge chair", 700, 800, 900),
    # Closets
    FurniturePreset("closet-single", "Single", FurnitureType.CLOSET, "Single closet", 1200, 600, 2200),
    FurniturePreset("closet-double", "Double", FurnitureType.CLOSET, "Double closet", 1800, 600, 2200),
    FurniturePreset("closet-built-in", "Built-in", FurnitureType.CLOSET, "Built-in closet", 2400, 650, 2300),
    # Sofas
    FurniturePreset("sofa-1", "1-seat", FurnitureType.SOFA, "1-seat sofa", 900, 900, 850),
    FurniturePreset("sofa-2", "2-seat", FurnitureType.SOFA, "2-seat sofa", 1600, 900, 850),
    FurniturePreset("sofa-3", "3-seat", FurnitureType.SOFA, "3-seat sofa", 2000, 950, 850),
    FurniturePreset("sofa-4", "4-seat", FurnitureType.SOFA, "4-seat sofa", 2400, 1000, 850),
    # Tables
    FurniturePreset("table-2", "2-seat", FurnitureType.TABLE, "2-seat dining table", 800, 800, 750),
    FurniturePreset("table-4", "4-seat", FurnitureType.TABLE, "4-seat dining table", 1400, 800, 750),
    FurniturePreset("table-6", "6-seat", FurnitureType.TABLE, "6-seat dining table", 1800, 850, 750),
    FurniturePreset("table-round", "Round 4-seat", FurnitureType.TABLE, "Round 4-seat table", 1100, 1100, 750),
)


def find_preset(preset_id: str) -> FurniturePreset | None:
    """Look up a preset by id."""
    return next((p for p in FURNITURE_PRESETS if p.id == preset_id), None)


def presets_for(furniture_type: FurnitureType) -> list[FurniturePreset]:
    """All presets of one furniture type, in catalog order."""
    return [p for p in FURNITURE_PRESETS if p.type == furniture_type]


def default_door(door_id: str, wall: WallSide = WallSide.NORTH, offset: float = 0.0) -> Door:
    """A door with the default dimensions and swing settings."""
    return Door(id=door_id, wall=wall, offset=offset)


def default_window(
    window_id: str, wall: WallSide = WallSide.NORTH, offset: float = 0.0
) -> Window:
    """A window with the default dimensions."""
    return Window(id=window_id, wall=wall, offset=offset)
