"""Sutherland-Hodgman intersection of rotated furniture footprints.

The intersection polygons are only used to highlight overlap regions; the
authoritative collision answer always comes from ``geometry.collides``.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from ..entities import PlacedItem
from ..value_objects import Point2D, Polygon
from .geometry import collides, rotated_corners

__all__ = [
    "INSIDE_TOLERANCE",
    "PARALLEL_TOLERANCE",
    "clip_by_edge",
    "collision_polygons",
    "intersection",
    "line_intersection",
    "polygon_area",
    "signed_area",
]

# Points this close outside a clip edge still count as inside.
INSIDE_TOLERANCE: float = 1e-9

# Line pairs whose determinant falls below this are treated as parallel.
PARALLEL_TOLERANCE: float = 1e-10


def signed_area(polygon: Sequence[Point2D]) -> float:
    """Shoelace area; positive for counter-clockwise in a y-up frame."""
    total = 0.0
    count = len(polygon)
    for i in range(count):
        p = polygon[i]
        q = polygon[(i + 1) % count]
        total += p.x * q.y - q.x * p.y
    return total / 2


def polygon_area(polygon: Sequence[Point2D]) -> float:
    """Unsigned area of a simple polygon."""
    return abs(signed_area(polygon))


def line_intersection(
    p1: Point2D, p2: Point2D, p3: Point2D, p4: Point2D
) -> Point2D | None:
    """Intersect the infinite lines through ``p1 p2`` and ``p3 p4``.

    Returns:
        The intersection point, or None for parallel or degenerate lines.
    """
    denom = (p1.x - p2.x) * (p3.y - p4.y) - (p1.y - p2.y) * (p3.x - p4.x)
    if abs(denom) < PARALLEL_TOLERANCE:
        return None
    t = ((p1.x - p3.x) * (p3.y - p4.y) - (p1.y - p3.y) * (p3.x - p4.x)) / denom
    return Point2D(p1.x + t * (p2.x - p1.x), p1.y + t * (p2.y - p1.y))


def _is_inside(
    point: Point2D, edge_start: Point2D, edge_end: Point2D, clockwise: bool
) -> bool:
    cross = (edge_end.x - edge_start.x) * (point.y - edge_start.y) - (
        edge_end.y - edge_start.y
    ) * (point.x - edge_start.x)
    if clockwise:
        cross = -cross
    return cross >= -INSIDE_TOLERANCE


def clip_by_edge(
    subject: Sequence[Point2D],
    edge: tuple[Point2D, Point2D],
    clockwise: bool,
) -> Polygon:
    """Clip a polygon against the inner half-plane of one clip edge.

    Args:
        subject: Polygon being clipped.
        edge: ``(start, end)`` of an edge of the clip polygon.
        clockwise: Winding of the clip polygon (``signed_area < 0``);
            decides which side of the edge is inside.

    Returns:
        The clipped polygon, possibly empty.
    """
    edge_start, edge_end = edge
    output: list[Point2D] = []
    count = len(subject)
    for i in range(count):
        current = subject[i]
        previous = subject[i - 1]
        current_in = _is_inside(current, edge_start, edge_end, clockwise)
        previous_in = _is_inside(previous, edge_start, edge_end, clockwise)
        if current_in:
            if not previous_in:
                crossing = line_intersection(previous, current, edge_start, edge_end)
                if crossing is not None:
                    output.append(crossing)
            output.append(current)
        elif previous_in:
            crossing = line_intersection(previous, current, edge_start, edge_end)
            if crossing is not None:
                output.append(crossing)
    return tuple(output)


def intersection(a: PlacedItem, b: PlacedItem) -> Polygon:
    """Overlap region of two rotated footprints.

    Returns:
        The intersection polygon, or an empty tuple when the footprints do
        not share any area.
    """
    subject: Polygon = rotated_corners(a)
    clip = rotated_corners(b)
    clockwise = signed_area(clip) < 0
    count = len(clip)
    for i in range(count):
        subject = clip_by_edge(subject, (clip[i], clip[(i + 1) % count]), clockwise)
        if not subject:
            return ()
    if len(subject) < 3:
        return ()
    return subject


def collision_polygons(
    item: PlacedItem, others: Iterable[PlacedItem]
) -> list[Polygon]:
    """Overlap polygons between ``item`` and every item it collides with."""
    polygons: list[Polygon] = []
    for other in others:
        if other.id == item.id or not collides(item, other):
            continue
        polygon = intersection(item, other)
        if polygon:
            polygons.append(polygon)
    return polygons
