"""Read-only placement queries over a layout snapshot.

Used by the ``check`` CLI command and the placement REST endpoint.
"""

from __future__ import annotations

from dataclasses import dataclass, replace

from roomlayout.domain.entities import LayoutSnapshot, PlacedItem
from roomlayout.domain.services import attachment, geometry, placement, polygon_clipper
from roomlayout.domain.value_objects import Polygon


@dataclass(frozen=True)
class CollisionReport:
    """A colliding pair of items and the shape of their overlap.

    Attributes:
        first_id: Id of the earlier item in draw order.
        second_id: Id of the later item.
        overlap: Intersection polygon (empty when only a backrest strip or
            other height rule makes the pair collide without a shared area).
        area: Area of ``overlap`` in mm^2.
    """

    first_id: str
    second_id: str
    overlap: Polygon
    area: float


@dataclass(frozen=True)
class PlacementReport:
    """Result of trying an item at a proposed position.

    Attributes:
        allowed: True if the item could be committed there.
        x: Anchor x after snapping and room constraint.
        y: Anchor y after snapping and room constraint.
        colliding_ids: Items the constrained footprint collides with.
        overlaps: Intersection polygons with the colliding items.
    """

    allowed: bool
    x: float
    y: float
    colliding_ids: tuple[str, ...] = ()
    overlaps: tuple[Polygon, ...] = ()


def find_collisions(snapshot: LayoutSnapshot) -> list[CollisionReport]:
    """All colliding item pairs, ignoring parent/child and sibling pairs."""
    reports: list[CollisionReport] = []
    items = snapshot.furniture
    for i, item in enumerate(items):
        excluded = attachment.exclude_ids(item.id, items)
        for other in items[i + 1 :]:
            if other.id in excluded or other.id == item.id:
                continue
            if not geometry.collides(item, other):
                continue
            overlap = polygon_clipper.intersection(item, other)
            reports.append(
                CollisionReport(
                    first_id=item.id,
                    second_id=other.id,
                    overlap=overlap,
                    area=polygon_clipper.polygon_area(overlap) if overlap else 0.0,
                )
            )
    return reports


def check_placement(
    snapshot: LayoutSnapshot, item: PlacedItem, snap: bool = True
) -> PlacementReport:
    """Snap, constrain and collision-test an item against a layout.

    An entry of the layout with the item's id is treated as the item's
    previous state and ignored.

    Args:
        snapshot: The layout the item is placed into.
        item: The item at its proposed position.
        snap: Apply grid snapping when the room has it enabled.

    Returns:
        PlacementReport with the adjusted anchor and any collisions.
    """
    room = snapshot.room
    if snap:
        snapped = placement.snap_position(item.x, item.y, room)
        item = replace(item, x=snapped.x, y=snapped.y)
    anchor = placement.constrain_to_room(item, room)
    item = replace(item, x=anchor.x, y=anchor.y)

    others = [f for f in snapshot.furniture if f.id != item.id]
    excluded = attachment.exclude_ids(item.id, snapshot.furniture)
    if item.parent_id is not None:
        excluded = excluded | {item.parent_id} | {
            f.id for f in others if f.parent_id == item.parent_id
        }

    colliding = [
        other
        for other in others
        if other.id not in excluded and geometry.collides(item, other)
    ]
    overlaps = tuple(
        polygon
        for polygon in (polygon_clipper.intersection(item, other) for other in colliding)
        if polygon
    )
    return PlacementReport(
        allowed=not colliding,
        x=anchor.x,
        y=anchor.y,
        colliding_ids=tuple(other.id for other in colliding),
        overlaps=overlaps,
    )
