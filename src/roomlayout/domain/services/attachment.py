"""Parent/child attachment geometry.

Attachable items (monitor stands and arms) hang off a parent-capable item
(desk or table). A child stores its centre as an offset in the parent's
rotated frame, so moving or rotating the parent carries the child along.
Attachment is single-level: a parent never has a parent of its own.
"""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import replace

from ..entities import PlacedItem
from ..value_objects import AttachmentRole, FurnitureType, Point2D, capability_for
from .geometry import deg_to_rad, polygons_overlap, rotated_corners

__all__ = [
    "attach_offset",
    "child_world_pos",
    "children_of",
    "exclude_ids",
    "find_overlapping_parent",
    "is_attachable_type",
    "is_parent_type",
    "snap_to_parent_edge",
    "sync_children",
]


def is_attachable_type(furniture_type: FurnitureType) -> bool:
    """True for types that may be attached to a parent."""
    return capability_for(furniture_type).role is AttachmentRole.ATTACHABLE


def is_parent_type(furniture_type: FurnitureType) -> bool:
    """True for types that may host attached children."""
    return capability_for(furniture_type).role is AttachmentRole.PARENT


def _rotate(dx: float, dy: float, degrees: float) -> tuple[float, float]:
    rad = deg_to_rad(degrees)
    cos = math.cos(rad)
    sin = math.sin(rad)
    return dx * cos - dy * sin, dx * sin + dy * cos


def child_world_pos(offset_x: float, offset_y: float, parent: PlacedItem) -> Point2D:
    """World centre of a child from its parent-local offset."""
    dx, dy = _rotate(offset_x, offset_y, parent.rotation)
    center = parent.center
    return Point2D(center.x + dx, center.y + dy)


def attach_offset(child: PlacedItem, parent: PlacedItem) -> Point2D:
    """Parent-local offset of a child's centre (inverse of child_world_pos)."""
    child_center = child.center
    parent_center = parent.center
    dx, dy = _rotate(
        child_center.x - parent_center.x,
        child_center.y - parent_center.y,
        -parent.rotation,
    )
    return Point2D(dx, dy)


def children_of(parent_id: str, items: Sequence[PlacedItem]) -> list[PlacedItem]:
    """All items attached to ``parent_id``."""
    return [f for f in items if f.parent_id == parent_id]


def exclude_ids(item_id: str, items: Sequence[PlacedItem]) -> frozenset[str]:
    """Ids whose collisions with ``item_id`` are ignored while editing it.

    A child ignores its parent and its siblings; a potential parent ignores
    its own children. An unknown id yields an empty set.
    """
    item = next((f for f in items if f.id == item_id), None)
    if item is None:
        return frozenset()
    if item.parent_id is not None:
        siblings = {f.id for f in items if f.parent_id == item.parent_id}
        return frozenset({item.parent_id} | siblings)
    return frozenset(f.id for f in items if f.parent_id == item_id)


def find_overlapping_parent(
    item: PlacedItem, items: Sequence[PlacedItem]
) -> PlacedItem | None:
    """First parent-capable, unattached item whose footprint overlaps ``item``.

    Only the rotated footprints are compared: attachable items are low
    enough to tuck under any desk, so the height-aware collision rule would
    never report them. Items are scanned in order and the first hit wins,
    even if a later parent overlaps more.
    """
    footprint = rotated_corners(item)
    for candidate in items:
        if candidate.id == item.id:
            continue
        if not is_parent_type(candidate.type) or candidate.parent_id is not None:
            continue
        if polygons_overlap(footprint, rotated_corners(candidate)):
            return candidate
    return None


def snap_to_parent_edge(
    child: PlacedItem,
    parent: PlacedItem,
    child_world_cx: float,
    child_world_cy: float,
) -> Point2D:
    """Snap a child's centre onto the nearest edge of its parent.

    The centre is moved into the parent's rotated frame, pinned to the
    closest of the four edges (ties resolved top, bottom, left, right),
    clamped along that edge, and moved back to room space.

    Args:
        child: The child (only its width and depth are used).
        parent: The parent.
        child_world_cx: Proposed child centre x in room space.
        child_world_cy: Proposed child centre y in room space.

    Returns:
        The child's new top-left anchor.
    """
    parent_center = parent.center
    local_x, local_y = _rotate(
        child_world_cx - parent_center.x,
        child_world_cy - parent_center.y,
        -parent.rotation,
    )

    half_w = parent.width / 2
    half_d = parent.depth / 2
    dist_top = abs(local_y + half_d)
    dist_bottom = abs(local_y - half_d)
    dist_left = abs(local_x + half_w)
    dist_right = abs(local_x - half_w)
    nearest = min(dist_top, dist_bottom, dist_left, dist_right)

    if nearest == dist_top:
        local_y = -half_d
        local_x = max(-half_w, min(half_w, local_x))
    elif nearest == dist_bottom:
        local_y = half_d
        local_x = max(-half_w, min(half_w, local_x))
    elif nearest == dist_left:
        local_x = -half_w
        local_y = max(-half_d, min(half_d, local_y))
    else:
        local_x = half_w
        local_y = max(-half_d, min(half_d, local_y))

    world = child_world_pos(local_x, local_y, parent)
    return Point2D(world.x - child.width / 2, world.y - child.depth / 2)


def sync_children(
    parent: PlacedItem, items: Sequence[PlacedItem]
) -> list[PlacedItem]:
    """Re-derive the anchors of ``parent``'s children from their offsets.

    Items that are not children of ``parent`` are returned unchanged; a
    missing offset counts as zero.
    """
    synced: list[PlacedItem] = []
    for item in items:
        if item.parent_id != parent.id:
            synced.append(item)
            continue
        center = child_world_pos(
            item.attach_offset_x or 0.0, item.attach_offset_y or 0.0, parent
        )
        synced.append(
            replace(item, x=center.x - item.width / 2, y=center.y - item.depth / 2)
        )
    return synced
