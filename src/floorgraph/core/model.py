"""Core data models for room detection and wall joining.

This module defines the value types exchanged with the editing layer:
walls drawn by the user, the rooms derived from them, and the results of
intersection and joining queries.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, replace

from ..config import DEFAULT_WALL_HEIGHT, DEFAULT_WALL_THICKNESS


@dataclass(frozen=True)
class Point:
    """Represents a 2D point in drawing units.

    Attributes:
        x: The x-coordinate of the point.
        y: The y-coordinate of the point.
    """

    x: float
    y: float


@dataclass(frozen=True)
class Wall:
    """Represents a wall drawn in the editor.

    Attributes:
        id: Unique identifier for the wall within a snapshot.
        start: Starting point of the wall.
        end: Ending point of the wall.
        thickness: Wall thickness in drawing units.
        height: Wall height in drawing units.
        material: Optional material reference.
        color: Optional display color.
    """

    id: str
    start: Point
    end: Point
    thickness: float = DEFAULT_WALL_THICKNESS
    height: float = DEFAULT_WALL_HEIGHT
    material: str | None = None
    color: str | None = None

    @property
    def length(self) -> float:
        return math.hypot(self.end.x - self.start.x, self.end.y - self.start.y)

    @property
    def midpoint(self) -> Point:
        return Point((self.start.x + self.end.x) / 2, (self.start.y + self.end.y) / 2)

    def with_endpoints(
        self,
        start: Point | None = None,
        end: Point | None = None,
        id: str | None = None,
    ) -> Wall:
        """Return a copy with the given endpoints (and optionally id) replaced."""
        return replace(
            self,
            id=self.id if id is None else id,
            start=self.start if start is None else start,
            end=self.end if end is None else end,
        )


@dataclass(frozen=True)
class Room:
    """Represents a room inferred from a closed loop of walls.

    Attributes:
        id: Identifier derived from the cycle index.
        name: Human-readable name ("Room 1", "Room 2", ...).
        vertices: Ordered polygon vertices; the last connects back to the first.
        wall_ids: IDs of the walls forming the boundary, in cycle order.
        area: Polygon area in square drawing units.
        perimeter: Polygon perimeter in drawing units.
        center: Vertex mean of the polygon.
        color: Display color picked from the room palette.
    """

    id: str
    name: str
    vertices: tuple[Point, ...]
    wall_ids: tuple[str, ...]
    area: float
    perimeter: float
    center: Point
    color: str


@dataclass(frozen=True)
class RoomDetectionResult:
    """Rooms plus every closed vertex loop found, filtered or not."""

    rooms: tuple[Room, ...] = ()
    closed_shapes: tuple[tuple[Point, ...], ...] = ()


@dataclass(frozen=True)
class IntersectionResult:
    """Outcome of intersecting two segments.

    Attributes:
        intersects: Whether the segments cross.
        point: The crossing point, if any.
        t1: Parametric position of the point along the first segment.
        t2: Parametric position of the point along the second segment.
    """

    intersects: bool
    point: Point | None = None
    t1: float | None = None
    t2: float | None = None


NO_INTERSECTION = IntersectionResult(intersects=False)


@dataclass(frozen=True)
class WallIntersection:
    """An existing wall paired with where a target wall crosses it."""

    wall: Wall
    intersection: IntersectionResult


@dataclass(frozen=True)
class WallUpdate:
    """Instruction to move one or both endpoints of an existing wall."""

    wall_id: str
    start: Point | None = None
    end: Point | None = None

    def apply_to(self, wall: Wall) -> Wall:
        if wall.id != self.wall_id:
            raise ValueError(f"Update for '{self.wall_id}' applied to wall '{wall.id}'")
        return wall.with_endpoints(start=self.start, end=self.end)


@dataclass(frozen=True)
class WallJoinResult:
    """Mutations needed after a new or edited wall crosses existing walls.

    Attributes:
        should_join: Whether any existing wall is crossed.
        join_points: Crossing points in the order they were processed.
        walls_to_update: Endpoint updates for walls crossed near an end.
        new_walls: Replacement halves for walls crossed mid-segment.
        walls_to_remove: IDs of walls replaced by their halves.
    """

    should_join: bool
    join_points: tuple[Point, ...] = ()
    walls_to_update: tuple[WallUpdate, ...] = ()
    new_walls: tuple[Wall, ...] = ()
    walls_to_remove: tuple[str, ...] = ()

    @property
    def join_point(self) -> Point | None:
        return self.join_points[-1] if self.join_points else None


@dataclass(frozen=True)
class JoinOutcome:
    """Result of an explicit two-wall join."""

    success: bool
    updated_walls: tuple[Wall, ...] = ()
    error: str | None = None


@dataclass(frozen=True)
class SnapResult:
    """Where a cursor position ends up after snapping."""

    point: Point
    snapped: bool
    snap_type: str | None = None


@dataclass(frozen=True)
class WallJoint:
    """A place where two or more walls meet.

    Attributes:
        id: Joint identifier ("joint-1", ...).
        type: One of "corner", "acute", "obtuse", "butt", "tee", "cross".
        position: Where the walls meet.
        wall_ids: IDs of the walls meeting at the joint.
        angle: Angle in degrees (0 to 180) between the first two walls.
    """

    id: str
    type: str
    position: Point
    wall_ids: tuple[str, ...] = ()
    angle: float = 0.0
