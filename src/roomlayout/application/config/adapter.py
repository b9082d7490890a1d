"""Adapters between layout document schemas and domain entities.

The schema layer speaks camelCase JSON and Pydantic models; the domain
layer works with frozen dataclasses. These functions are the only place
where the two meet.
"""

from __future__ import annotations

from datetime import datetime, timezone

from roomlayout.application.config.schemas import (
    LATEST_VERSION,
    DoorConfig,
    FurnitureConfig,
    LayoutDocument,
    LayoutMetaConfig,
    RoomConfig,
    WindowConfig,
)
from roomlayout.domain.entities import (
    Door,
    LayoutSnapshot,
    PlacedItem,
    RoomSpec,
    Window,
)


def utc_now_iso() -> str:
    """Current UTC time as an ISO 8601 string."""
    return datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")


def config_to_room(config: RoomConfig) -> RoomSpec:
    return RoomSpec(
        width=config.width,
        height=config.height,
        wall_thickness=config.wall_thickness,
        ceiling_height=config.ceiling_height,
        grid_size=config.grid_size,
        snap_enabled=config.snap_enabled,
        display_unit=config.display_unit,
        wall_color=config.wall_color,
        floor_color=config.floor_color,
    )


def config_to_item(config: FurnitureConfig) -> PlacedItem:
    return PlacedItem(
        id=config.id,
        type=config.type,
        name=config.name,
        x=config.x,
        y=config.y,
        width=config.width,
        depth=config.depth,
        height=config.height,
        rotation=config.rotation,
        category=config.category,
        color=config.color,
        z_index=config.z_index,
        locked=config.locked,
        parent_id=config.parent_id,
        attach_offset_x=config.attach_offset_x,
        attach_offset_y=config.attach_offset_y,
    )


def config_to_door(config: DoorConfig) -> Door:
    return Door(
        id=config.id,
        wall=config.wall,
        offset=config.offset,
        width=config.width,
        height=config.height,
        door_type=config.door_type,
        hinge=config.hinge,
        swing=config.swing,
        open_angle=config.open_angle,
        thickness=config.thickness,
        slide_direction=config.slide_direction,
        color=config.color,
    )


def config_to_window(config: WindowConfig) -> Window:
    return Window(
        id=config.id,
        wall=config.wall,
        offset=config.offset,
        width=config.width,
        height=config.height,
        sill_height=config.sill_height,
    )


def document_to_snapshot(document: LayoutDocument) -> LayoutSnapshot:
    """Convert a validated document into a domain snapshot."""
    return LayoutSnapshot(
        room=config_to_room(document.room),
        furniture=tuple(config_to_item(f) for f in document.furniture),
        doors=tuple(config_to_door(d) for d in document.doors),
        windows=tuple(config_to_window(w) for w in document.windows),
        created_at=document.meta.created_at,
        updated_at=document.meta.updated_at,
    )


def room_to_config(room: RoomSpec) -> RoomConfig:
    return RoomConfig(
        width=room.width,
        height=room.height,
        wall_thickness=room.wall_thickness,
        ceiling_height=room.ceiling_height,
        grid_size=room.grid_size,
        snap_enabled=room.snap_enabled,
        display_unit=room.display_unit,
        wall_color=room.wall_color,
        floor_color=room.floor_color,
    )


def item_to_config(item: PlacedItem) -> FurnitureConfig:
    return FurnitureConfig(
        id=item.id,
        type=item.type,
        name=item.name,
        x=item.x,
        y=item.y,
        width=item.width,
        depth=item.depth,
        height=item.height,
        rotation=item.rotation,
        category=item.category,
        color=item.color,
        z_index=item.z_index,
        locked=item.locked,
        parent_id=item.parent_id,
        attach_offset_x=item.attach_offset_x,
        attach_offset_y=item.attach_offset_y,
    )


def door_to_config(door: Door) -> DoorConfig:
    return DoorConfig(
        id=door.id,
        wall=door.wall,
        offset=door.offset,
        width=door.width,
        height=door.height,
        door_type=door.door_type,
        hinge=door.hinge,
        swing=door.swing,
        slide_direction=door.slide_direction,
        open_angle=door.open_angle,
        thickness=door.thickness,
        color=door.color,
    )


def window_to_config(window: Window) -> WindowConfig:
    return WindowConfig(
        id=window.id,
        wall=window.wall,
        offset=window.offset,
        width=window.width,
        height=window.height,
        sill_height=window.sill_height,
    )


def snapshot_to_document(
    snapshot: LayoutSnapshot, now: str | None = None
) -> LayoutDocument:
    """Convert a domain snapshot into a latest-version document.

    Args:
        snapshot: The snapshot to export.
        now: Timestamp for ``updatedAt`` (and ``createdAt`` if the snapshot
            has none); defaults to the current UTC time.

    Returns:
        LayoutDocument ready for ``to_json_dict``.

    Raises:
        pydantic.ValidationError: If an entity is outside the document
            limits (e.g. a 10 mm wide item).
    """
    stamp = now or utc_now_iso()
    return LayoutDocument(
        version=LATEST_VERSION,
        room=room_to_config(snapshot.room),
        furniture=[item_to_config(f) for f in snapshot.furniture],
        doors=[door_to_config(d) for d in snapshot.doors],
        windows=[window_to_config(w) for w in snapshot.windows],
        meta=LayoutMetaConfig(
            created_at=snapshot.created_at or stamp,
            updated_at=stamp,
        ),
    )
