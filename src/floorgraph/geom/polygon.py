"""Polygon geometry utilities for room calculations.

This module provides functions to reconstruct room contours from wall
cycles and calculate geometric properties like area, perimeter and center.
"""

from __future__ import annotations

from typing import Dict, List, Optional, Sequence

from shapely.geometry import Point as ShapelyPoint
from shapely.geometry import Polygon

from ..config import TOPOLOGY_TOLERANCE
from ..core.model import Point, Room, Wall
from .primitives import distance, points_equal


def _shared_corner(first: Wall, second: Wall, tolerance: float) -> Optional[Point]:
    """Return the endpoint of ``first`` that ``second`` also touches, if any."""
    for candidate in (first.start, first.end):
        if points_equal(candidate, second.start, tolerance) or points_equal(
            candidate, second.end, tolerance
        ):
            return candidate
    return None


def _next_point(current: Point, wall: Wall, tolerance: float) -> Point:
    """Leave ``wall`` through the endpoint that is not ``current``."""
    if points_equal(current, wall.start, tolerance):
        return wall.end
    if points_equal(current, wall.end, tolerance):
        return wall.start
    # Ambiguous chain: assume we arrived at the nearer endpoint.
    if distance(current, wall.start) < distance(current, wall.end):
        return wall.end
    return wall.start


def cycle_to_polygon(
    wall_ids: Sequence[str],
    walls: Sequence[Wall],
    tolerance: float = TOPOLOGY_TOLERANCE,
) -> List[Point]:
    """Convert a wall cycle into an ordered vertex loop.

    The loop starts at the corner the first wall shares with the last wall,
    then follows the walls in cycle order. The closing vertex is not
    repeated.

    Args:
        wall_ids: Wall ids in cycle order.
        walls: Snapshot containing the walls.
        tolerance: Per-axis distance under which two endpoints coincide.

    Returns:
        List of vertices; empty if the cycle is empty or references no
        known wall.
    """
    wall_map: Dict[str, Wall] = {wall.id: wall for wall in walls}
    chain = [wall_map[wall_id] for wall_id in wall_ids if wall_id in wall_map]
    if not chain:
        return []

    first = chain[0]
    current = first.start
    if len(chain) > 1:
        closing = _shared_corner(first, chain[-1], tolerance)
        if closing is not None:
            current = closing

    vertices = [current]
    for index, wall in enumerate(chain):
        current = _next_point(current, wall, tolerance)
        if index < len(chain) - 1:
            vertices.append(current)

    return vertices


def signed_area(vertices: Sequence[Point]) -> float:
    """Shoelace area; positive for counter-clockwise loops in a y-up frame."""
    if len(vertices) < 3:
        return 0.0

    total = 0.0
    count = len(vertices)
    for i in range(count):
        j = (i + 1) % count
        total += vertices[i].x * vertices[j].y
        total -= vertices[j].x * vertices[i].y
    return total / 2.0


def polygon_area(vertices: Sequence[Point]) -> float:
    return abs(signed_area(vertices))


def polygon_perimeter(vertices: Sequence[Point]) -> float:
    """Sum of edge lengths, including the closing edge."""
    if len(vertices) < 2:
        return 0.0

    count = len(vertices)
    return sum(distance(vertices[i], vertices[(i + 1) % count]) for i in range(count))


def polygon_centroid(vertices: Sequence[Point]) -> Point:
    """Arithmetic mean of the vertices.

    This is not the area-weighted centroid; for the convex and near-convex
    rooms of a floor plan it lands inside the room and is good enough for
    label placement.
    """
    if not vertices:
        return Point(0.0, 0.0)

    count = len(vertices)
    return Point(
        sum(v.x for v in vertices) / count,
        sum(v.y for v in vertices) / count,
    )


def room_outline(room: Room) -> Polygon | None:
    """Build a Shapely polygon for a room, repairing self-touching loops.

    Returns:
        Shapely Polygon representing the room outline, or None if the
        vertices do not describe a polygon with positive area.
    """
    if len(room.vertices) < 3:
        return None

    polygon = Polygon([(v.x, v.y) for v in room.vertices])
    if not polygon.is_valid:
        polygon = polygon.buffer(0)

    if polygon.is_empty or polygon.area <= 0:
        return None
    return polygon


def find_room_at(rooms: Sequence[Room], point: Point) -> Room | None:
    """Return the smallest room containing ``point`` (boundary included)."""
    probe = ShapelyPoint(point.x, point.y)
    hits = []
    for room in rooms:
        outline = room_outline(room)
        if outline is not None and outline.covers(probe):
            hits.append(room)

    if not hits:
        return None
    return min(hits, key=lambda room: room.area)
