"""Room detection from wall snapshots.

Data flows one way: walls, adjacency graph, cycles, polygons, rooms. Every
call recomputes from the snapshot it is given, so the result depends only on
the walls passed in.
"""

from __future__ import annotations

import logging
from typing import List, Sequence, Tuple

from ..config import MAX_CYCLE_LENGTH, MIN_ROOM_AREA, ROOM_COLORS, TOPOLOGY_TOLERANCE
from ..core.model import Point, Room, RoomDetectionResult, Wall
from ..core.topology import build_wall_adjacency
from ..geom.cycles import find_cycles
from ..geom.polygon import cycle_to_polygon, polygon_area, polygon_centroid, polygon_perimeter
from .validators import validate_walls

LOGGER = logging.getLogger(__name__)


def room_color(index: int) -> str:
    """Pick a display color from the palette, cycling by index."""
    return ROOM_COLORS[index % len(ROOM_COLORS)]


def detect_rooms(
    walls: Sequence[Wall],
    *,
    min_area: float = MIN_ROOM_AREA,
    tolerance: float = TOPOLOGY_TOLERANCE,
    max_cycle_length: int = MAX_CYCLE_LENGTH,
) -> RoomDetectionResult:
    """Detect the rooms enclosed by a set of walls.

    Args:
        walls: Wall snapshot; ids must be unique.
        min_area: Loops with an area at or below this are not rooms.
        tolerance: Per-axis distance under which wall ends share a corner.
        max_cycle_length: Longest wall loop searched for.

    Returns:
        RoomDetectionResult with the rooms and every closed vertex loop
        (including loops filtered out as too small).

    Raises:
        InvalidWallSnapshot: If the snapshot has non-finite coordinates or
            duplicate wall ids.
    """
    walls = list(walls)
    if len(walls) < 3:
        return RoomDetectionResult()

    validate_walls(walls)

    adjacency = build_wall_adjacency(walls, tolerance)
    cycles = find_cycles(adjacency, walls, max_cycle_length, tolerance)

    rooms: List[Room] = []
    closed_shapes: List[Tuple[Point, ...]] = []

    for index, wall_ids in enumerate(cycles):
        vertices = cycle_to_polygon(wall_ids, walls, tolerance)
        if len(vertices) < 3:
            LOGGER.warning("Discarding degenerate loop %s", wall_ids)
            continue
        closed_shapes.append(tuple(vertices))

        area = polygon_area(vertices)
        if area <= min_area:
            LOGGER.debug("Dropping loop %s: area %.2f below %.2f", wall_ids, area, min_area)
            continue

        rooms.append(
            Room(
                id=f"room-{index}",
                name=f"Room {len(rooms) + 1}",
                vertices=tuple(vertices),
                wall_ids=tuple(wall_ids),
                area=area,
                perimeter=polygon_perimeter(vertices),
                center=polygon_centroid(vertices),
                color=room_color(index),
            )
        )

    LOGGER.debug(
        "Detected %d rooms from %d walls (%d closed shapes)",
        len(rooms),
        len(walls),
        len(closed_shapes),
    )
    return RoomDetectionResult(rooms=tuple(rooms), closed_shapes=tuple(closed_shapes))


def is_closed_shape(walls: Sequence[Wall]) -> bool:
    """Check if the walls enclose at least one room."""
    return len(detect_rooms(walls).rooms) > 0


def room_summary(room: Room, units_per_foot: float = 12.0) -> str:
    """Format a room for display, converting drawing units to feet."""
    area_sq_ft = room.area / (units_per_foot**2)
    perimeter_ft = room.perimeter / units_per_foot
    return f"{room.name}\nArea: {area_sq_ft:.1f} sq ft\nPerimeter: {perimeter_ft:.1f} ft"
