"""Geometry utilities for wall networks.

This module provides the primitives, cycle search, polygon metrics and
intersection handling used to turn drawn walls into rooms.
"""

from .cycles import find_cycles
from .intersection import (
    calculate_wall_joining,
    check_wall_intersection,
    find_intersecting_walls,
    get_wall_snap_points_with_intersections,
    join_walls_at_intersection,
)
from .polygon import (
    cycle_to_polygon,
    find_room_at,
    polygon_area,
    polygon_centroid,
    polygon_perimeter,
    room_outline,
)
from .primitives import points_equal, segment_intersection

__all__ = [
    "calculate_wall_joining",
    "check_wall_intersection",
    "cycle_to_polygon",
    "find_cycles",
    "find_intersecting_walls",
    "find_room_at",
    "get_wall_snap_points_with_intersections",
    "join_walls_at_intersection",
    "points_equal",
    "polygon_area",
    "polygon_centroid",
    "polygon_perimeter",
    "room_outline",
    "segment_intersection",
]
