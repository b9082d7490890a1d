"""Rotated-rectangle geometry and height-aware collision detection.

Every furniture footprint is a rectangle rotated about its own centre, so
the Separating Axis Theorem over the two rectangles' edge normals decides
overlap exactly. Before SAT runs, the tuck rule checks whether one item is
low enough to slide beneath the other (a chair under a desk); in that case
only the lower item's backrest strip can collide.

Corners are recomputed on every call; nothing is cached between drag
events.
"""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence
from itertools import chain

from ..entities import PlacedItem
from ..value_objects import (
    BACKREST_DEPTH_RATIO,
    Bounds,
    Point2D,
    Polygon,
    capability_for,
)

__all__ = [
    "SEPARATION_TOLERANCE",
    "backrest_zone",
    "clearance_height",
    "collides",
    "collides_with_any",
    "deg_to_rad",
    "normalize_rotation",
    "polygons_overlap",
    "rad_to_deg",
    "rotated_bounds",
    "rotated_corners",
    "tuck_height",
]

# Projections that overlap by less than this are treated as touching, and
# touching footprints do not collide.
SEPARATION_TOLERANCE: float = 1e-9


def deg_to_rad(deg: float) -> float:
    """Convert degrees to radians."""
    return deg * math.pi / 180


def rad_to_deg(rad: float) -> float:
    """Convert radians to degrees."""
    return rad * 180 / math.pi


def normalize_rotation(deg: float) -> float:
    """Map any rotation onto ``[0, 360)`` for display."""
    return deg % 360


def _rotate_local(
    item: PlacedItem, local: Iterable[tuple[float, float]]
) -> Polygon:
    """Rotate centre-relative points by the item's rotation into room space."""
    rad = deg_to_rad(item.rotation)
    cos = math.cos(rad)
    sin = math.sin(rad)
    center = item.center
    return tuple(
        Point2D(
            center.x + dx * cos - dy * sin,
            center.y + dx * sin + dy * cos,
        )
        for dx, dy in local
    )


def rotated_corners(item: PlacedItem) -> Polygon:
    """Get the four footprint corners after rotation.

    Corners are returned in the order top-left, top-right, bottom-right,
    bottom-left of the unrotated rectangle.

    Args:
        item: The placed item.

    Returns:
        Tuple of four points in room coordinates.
    """
    half_w = item.width / 2
    half_d = item.depth / 2
    return _rotate_local(
        item,
        (
            (-half_w, -half_d),
            (half_w, -half_d),
            (half_w, half_d),
            (-half_w, half_d),
        ),
    )


def rotated_bounds(item: PlacedItem) -> Bounds:
    """Get the axis-aligned bounding box of the rotated footprint."""
    corners = rotated_corners(item)
    xs = [p.x for p in corners]
    ys = [p.y for p in corners]
    return Bounds(min_x=min(xs), min_y=min(ys), max_x=max(xs), max_y=max(ys))


def clearance_height(item: PlacedItem) -> float:
    """Free height beneath the item (desks and tables only, else 0)."""
    return capability_for(item.type).clearance(item.height)


def tuck_height(item: PlacedItem) -> float:
    """Height that must fit beneath another item to tuck this one under it."""
    return capability_for(item.type).tuck(item.height)


def backrest_zone(item: PlacedItem) -> Polygon | None:
    """Get the backrest strip of a chair, or None for other types.

    The backrest covers the back quarter of the depth (the local ``+y`` end
    of the footprint) and rotates with the chair.
    """
    if not capability_for(item.type).has_backrest:
        return None
    half_w = item.width / 2
    half_d = item.depth / 2
    front = half_d - item.depth * BACKREST_DEPTH_RATIO
    return _rotate_local(
        item,
        (
            (-half_w, front),
            (half_w, front),
            (half_w, half_d),
            (-half_w, half_d),
        ),
    )


def _edge_normals(polygon: Sequence[Point2D]) -> Iterable[tuple[float, float]]:
    count = len(polygon)
    for i in range(count):
        start = polygon[i]
        end = polygon[(i + 1) % count]
        ex = end.x - start.x
        ey = end.y - start.y
        length = math.hypot(ex, ey)
        if length == 0:
            # Degenerate edge (zero-size item): no axis to test.
            continue
        yield (-ey / length, ex / length)


def _project(
    polygon: Sequence[Point2D], axis: tuple[float, float]
) -> tuple[float, float]:
    dots = [p.x * axis[0] + p.y * axis[1] for p in polygon]
    return min(dots), max(dots)


def polygons_overlap(a: Sequence[Point2D], b: Sequence[Point2D]) -> bool:
    """Separating Axis Theorem test for two convex polygons.

    Args:
        a: First polygon.
        b: Second polygon.

    Returns:
        True if no edge normal of either polygon separates them.
    """
    for axis in chain(_edge_normals(a), _edge_normals(b)):
        min_a, max_a = _project(a, axis)
        min_b, max_b = _project(b, axis)
        if (
            max_a <= min_b + SEPARATION_TOLERANCE
            or max_b <= min_a + SEPARATION_TOLERANCE
        ):
            return False
    return True


def _tucked_collision(low: PlacedItem, high: PlacedItem) -> bool:
    zone = backrest_zone(low)
    if zone is None:
        return False
    return polygons_overlap(zone, rotated_corners(high))


def collides(a: PlacedItem, b: PlacedItem) -> bool:
    """Check whether two placed items collide.

    If either item is low enough to tuck beneath the other, only its
    backrest strip is tested against the other's full footprint (an item
    without a backrest then never collides). Otherwise the full rotated
    footprints are tested with SAT.

    Args:
        a: First item.
        b: Second item.

    Returns:
        True if the items collide.
    """
    if tuck_height(a) <= clearance_height(b):
        return _tucked_collision(a, b)
    if tuck_height(b) <= clearance_height(a):
        return _tucked_collision(b, a)
    return polygons_overlap(rotated_corners(a), rotated_corners(b))


def collides_with_any(
    item: PlacedItem,
    others: Iterable[PlacedItem],
    exclude_ids: Iterable[str] = (),
) -> bool:
    """Check an item against every other item not excluded.

    Args:
        item: The item being placed or moved.
        others: Candidate obstacles; an entry with ``item``'s id is skipped.
        exclude_ids: Ids to ignore (e.g. the item's parent and siblings).

    Returns:
        True if ``item`` collides with any remaining entry.
    """
    excluded = set(exclude_ids)
    return any(
        collides(item, other)
        for other in others
        if other.id != item.id and other.id not in excluded
    )
