"""Core data models and wall topology."""

from .model import (
    NO_INTERSECTION,
    IntersectionResult,
    JoinOutcome,
    Point,
    Room,
    RoomDetectionResult,
    SnapResult,
    Wall,
    WallIntersection,
    WallJoinResult,
    WallJoint,
    WallUpdate,
)
from .topology import build_wall_adjacency, build_wall_graph

__all__ = [
    "NO_INTERSECTION",
    "IntersectionResult",
    "JoinOutcome",
    "Point",
    "Room",
    "RoomDetectionResult",
    "SnapResult",
    "Wall",
    "WallIntersection",
    "WallJoinResult",
    "WallJoint",
    "WallUpdate",
    "build_wall_adjacency",
    "build_wall_graph",
]
