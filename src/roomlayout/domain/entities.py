"""Domain entities for a single-room furniture layout.

All entities are frozen; edits produce new values through
``dataclasses.replace`` so a rejected edit can never leave an entity
half-updated. Range checks (minimum room size, minimum furniture size, door
angle limits) belong to the document schema, not to these constructors:
geometry functions accept any positive values. Only a room without area is
rejected at construction.
"""

from __future__ import annotations

from dataclasses import dataclass

from .value_objects import (
    DisplayUnit,
    DoorHinge,
    DoorSwing,
    DoorType,
    FurnitureCategory,
    FurnitureType,
    Point2D,
    SlideDirection,
    WallSide,
    capability_for,
)


@dataclass(frozen=True)
class RoomSpec:
    """The rectangular room that holds the layout.

    Attributes:
        width: Interior extent along x (north/south wall length) in mm.
        height: Interior extent along y (east/west wall length) in mm.
        wall_thickness: Wall thickness in mm.
        ceiling_height: Floor-to-ceiling height in mm.
        grid_size: Grid spacing used for snapping, in mm.
        snap_enabled: Whether drag positions snap to the grid.
        display_unit: Unit used by the UI for display.
        wall_color: Hex colour of the walls.
        floor_color: Hex colour of the floor.
    """

    width: float
    height: float
    wall_thickness: float = 200.0
    ceiling_height: float = 2400.0
    grid_size: float = 100.0
    snap_enabled: bool = True
    display_unit: DisplayUnit = DisplayUnit.MM
    wall_color: str = "#b0b0b0"
    floor_color: str = "#c4a882"

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(
                f"Room dimensions must be positive, got {self.width}x{self.height}"
            )


@dataclass(frozen=True)
class PlacedItem:
    """A furniture item placed in the room.

    The footprint is a ``width`` x ``depth`` rectangle whose unrotated
    top-left corner is ``(x, y)``; ``rotation`` turns it about its own
    centre.

    Attributes:
        id: Stable unique identifier.
        type: Furniture type driving capability lookup.
        x: Anchor x (top-left before rotation).
        y: Anchor y (top-left before rotation).
        width: Footprint extent along the item's local x axis.
        depth: Footprint extent along the item's local y axis.
        height: Vertical height in mm.
        rotation: Rotation in degrees, unrestricted range.
        name: Display name.
        category: Palette category; derived from ``type`` when omitted.
        color: Optional hex colour.
        z_index: Draw order hint.
        locked: Locked items reject geometric edits.
        parent_id: Id of the hosting desk/table when attached.
        attach_offset_x: Centre offset in the parent's rotated frame.
        attach_offset_y: Centre offset in the parent's rotated frame.
    """

    id: str
    type: FurnitureType
    x: float
    y: float
    width: float
    depth: float
    height: float
    rotation: float = 0.0
    name: str = ""
    category: FurnitureCategory | None = None
    color: str | None = None
    z_index: int = 0
    locked: bool = False
    parent_id: str | None = None
    attach_offset_x: float | None = None
    attach_offset_y: float | None = None

    def __post_init__(self) -> None:
        if self.category is None:
            object.__setattr__(self, "category", capability_for(self.type).category)

    @property
    def center(self) -> Point2D:
        """Centre of the footprint (invariant under rotation)."""
        return Point2D(self.x + self.width / 2, self.y + self.depth / 2)

    @property
    def is_attached(self) -> bool:
        """True when this item hangs off a parent."""
        return self.parent_id is not None


@dataclass(frozen=True)
class Door:
    """A door cut into one of the room walls.

    Attributes:
        id: Stable unique identifier.
        wall: Wall holding the door.
        offset: Distance from the wall start to the door's near jamb.
        width: Opening width (also the swing radius).
        height: Opening height.
        door_type: Swing or slide mechanism.
        hinge: Hinge side for swing doors.
        swing: Swing direction for swing doors.
        open_angle: Maximum opening angle in degrees (0-120).
        thickness: Leaf thickness.
        slide_direction: Travel direction for slide doors.
        color: Hex colour of the leaf.
    """

    id: str
    wall: WallSide
    offset: float
    width: float = 900.0
    height: float = 2100.0
    door_type: DoorType = DoorType.SWING
    hinge: DoorHinge = DoorHinge.LEFT
    swing: DoorSwing = DoorSwing.INWARD
    open_angle: float = 90.0
    thickness: float = 40.0
    slide_direction: SlideDirection = SlideDirection.RIGHT
    color: str = "#654321"


@dataclass(frozen=True)
class Window:
    """A window cut into one of the room walls.

    Attributes:
        id: Stable unique identifier.
        wall: Wall holding the window.
        offset: Distance from the wall start to the window's near edge.
        width: Opening width.
        height: Opening height.
        sill_height: Height of the sill above the floor.
    """

    id: str
    wall: WallSide
    offset: float
    width: float = 1200.0
    height: float = 1200.0
    sill_height: float = 900.0


@dataclass(frozen=True)
class LayoutSnapshot:
    """Full value copy of a layout; the unit of undo/redo and persistence.

    Attributes:
        room: Room specification.
        furniture: Placed items in draw order.
        doors: Doors on any wall.
        windows: Windows on any wall.
        created_at: ISO 8601 creation timestamp.
        updated_at: ISO 8601 last-update timestamp.
    """

    room: RoomSpec
    furniture: tuple[PlacedItem, ...] = ()
    doors: tuple[Door, ...] = ()
    windows: tuple[Window, ...] = ()
    created_at: str = ""
    updated_at: str = ""

    def find_item(self, item_id: str) -> PlacedItem | None:
        """Return the item with ``item_id`` or None."""
        return next((f for f in self.furniture if f.id == item_id), None)
