"""Floorgraph - room detection and wall joining for floor-plan editors."""

__version__ = "0.1.0"

from .core.model import Point, Room, RoomDetectionResult, Wall
from .engine.detection import detect_rooms
from .geom.intersection import (
    calculate_wall_joining,
    check_wall_intersection,
    find_intersecting_walls,
    get_wall_snap_points_with_intersections,
    join_walls_at_intersection,
)

__all__ = [
    "Point",
    "Room",
    "RoomDetectionResult",
    "Wall",
    "calculate_wall_joining",
    "check_wall_intersection",
    "detect_rooms",
    "find_intersecting_walls",
    "get_wall_snap_points_with_intersections",
    "join_walls_at_intersection",
]
