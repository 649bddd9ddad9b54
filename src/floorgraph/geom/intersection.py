"""Wall intersection and joining.

This module finds where a new or edited wall crosses existing walls and
derives the instructions (endpoint updates, splits, removals) that keep the
drawing a valid planar arrangement. Nothing here mutates its inputs; the
editing layer applies the returned instructions.
"""

from __future__ import annotations

import logging
from typing import List, Sequence

from ..config import (
    ENDPOINT_SNAP_TOLERANCE,
    SEGMENT_SLACK,
    SNAP_DEDUP_TOLERANCE,
    SPLIT_BAND,
)
from ..core.model import (
    NO_INTERSECTION,
    IntersectionResult,
    JoinOutcome,
    Point,
    Wall,
    WallIntersection,
    WallJoinResult,
    WallUpdate,
)
from .primitives import distance, on_segment, points_equal, segment_intersection, wall_segment

LOGGER = logging.getLogger(__name__)


def check_wall_intersection(wall_a: Wall, wall_b: Wall) -> IntersectionResult:
    """Check if two walls cross within their bounds.

    The crossing must lie on both walls, allowing a small parametric slack so
    that walls meeting end to end still count as intersecting.

    Args:
        wall_a: First wall.
        wall_b: Second wall.

    Returns:
        The intersection (t1 along wall_a, t2 along wall_b), or
        NO_INTERSECTION for parallel walls and out-of-bounds crossings.
    """
    intersection = segment_intersection(wall_segment(wall_a), wall_segment(wall_b))
    if not intersection.intersects:
        return NO_INTERSECTION

    if on_segment(intersection.t1, SEGMENT_SLACK) and on_segment(intersection.t2, SEGMENT_SLACK):
        return intersection
    return NO_INTERSECTION


def find_intersecting_walls(target: Wall, walls: Sequence[Wall]) -> List[WallIntersection]:
    """Find all walls that the target wall crosses.

    The wall sharing the target's id (the target itself, or its previous
    state during an edit) is skipped.
    """
    hits = []
    for wall in walls:
        if wall.id == target.id:
            continue
        intersection = check_wall_intersection(target, wall)
        if intersection.intersects:
            hits.append(WallIntersection(wall=wall, intersection=intersection))
    return hits


def calculate_wall_joining(new_wall: Wall, existing_walls: Sequence[Wall]) -> WallJoinResult:
    """Calculate how existing walls must change where a new wall crosses them.

    Each crossing is classified by its position t2 along the existing wall:

    - strictly inside the split band: the existing wall is replaced by two
      walls ``<id>-split1`` (start to crossing) and ``<id>-split2``
      (crossing to end), and its id is listed for removal;
    - at or before the band's lower edge: the existing wall's start moves to
      the crossing;
    - at or after the band's upper edge: its end moves to the crossing.

    Args:
        new_wall: The wall being added or edited.
        existing_walls: The rest of the snapshot.

    Returns:
        WallJoinResult describing the updates, replacement walls and
        removals, one classification per crossed wall.
    """
    intersections = find_intersecting_walls(new_wall, existing_walls)
    if not intersections:
        return WallJoinResult(should_join=False)

    low, high = SPLIT_BAND
    join_points: List[Point] = []
    updates: List[WallUpdate] = []
    new_walls: List[Wall] = []
    removals: List[str] = []

    for hit in intersections:
        wall, point, t2 = hit.wall, hit.intersection.point, hit.intersection.t2
        join_points.append(point)

        if low < t2 < high:
            new_walls.append(wall.with_endpoints(end=point, id=f"{wall.id}-split1"))
            new_walls.append(wall.with_endpoints(start=point, id=f"{wall.id}-split2"))
            removals.append(wall.id)
        elif t2 <= low:
            updates.append(WallUpdate(wall_id=wall.id, start=point))
        else:
            updates.append(WallUpdate(wall_id=wall.id, end=point))

    LOGGER.debug(
        "Wall %s crosses %d walls: %d splits, %d endpoint updates",
        new_wall.id,
        len(intersections),
        len(removals),
        len(updates),
    )
    return WallJoinResult(
        should_join=True,
        join_points=tuple(join_points),
        walls_to_update=tuple(updates),
        new_walls=tuple(new_walls),
        walls_to_remove=tuple(removals),
    )


def _clip_to(wall: Wall, t: float, point: Point) -> Wall:
    """Move the endpoint of ``wall`` nearer to parameter ``t`` onto ``point``.

    A wall hit inside the split band keeps both endpoints.
    """
    low, high = SPLIT_BAND
    if t <= low:
        return wall.with_endpoints(start=point)
    if t >= high:
        return wall.with_endpoints(end=point)
    return wall


def join_walls_at_intersection(wall_a: Wall, wall_b: Wall) -> JoinOutcome:
    """Connect two walls at the point where their lines meet.

    Used for explicit "connect these walls" gestures. The meeting point must
    lie on both walls, allowing a small parametric slack. Each wall met near
    one of its ends has that end moved onto the point; a wall met in its
    interior is left untouched and hosts a T-junction.

    Args:
        wall_a: First wall.
        wall_b: Second wall.

    Returns:
        JoinOutcome with both walls (updated where needed, in argument
        order), or a failure explaining why the walls cannot be joined.
    """
    intersection = segment_intersection(wall_segment(wall_a), wall_segment(wall_b))
    if not intersection.intersects:
        return JoinOutcome(
            success=False,
            error=f"Walls '{wall_a.id}' and '{wall_b.id}' are parallel and cannot be joined",
        )

    t1, t2, point = intersection.t1, intersection.t2, intersection.point
    if not (on_segment(t1, SEGMENT_SLACK) and on_segment(t2, SEGMENT_SLACK)):
        return JoinOutcome(
            success=False,
            error=(
                f"Walls '{wall_a.id}' and '{wall_b.id}' do not intersect; their lines "
                f"meet at ({point.x:.2f}, {point.y:.2f})"
            ),
        )

    return JoinOutcome(
        success=True,
        updated_walls=(_clip_to(wall_a, t1, point), _clip_to(wall_b, t2, point)),
    )


def is_near_wall_endpoint(
    point: Point, wall: Wall, tolerance: float = ENDPOINT_SNAP_TOLERANCE
) -> tuple[str, Point] | None:
    """Check if a point is within snapping distance of a wall endpoint.

    Returns:
        ("start" | "end", endpoint) for the first endpoint in range, or None.
    """
    if distance(point, wall.start) <= tolerance:
        return ("start", wall.start)
    if distance(point, wall.end) <= tolerance:
        return ("end", wall.end)
    return None


def get_wall_snap_points_with_intersections(
    walls: Sequence[Wall],
    include_midpoints: bool = False,
    tolerance: float = SNAP_DEDUP_TOLERANCE,
) -> List[Point]:
    """Collect snap targets for interactive drawing.

    Candidates are every wall endpoint, optionally every wall midpoint, and
    every pairwise intersection, in that order. Points closer than the
    tolerance on both axes to an earlier point are dropped.
    """
    candidates: List[Point] = []
    for wall in walls:
        candidates.extend((wall.start, wall.end))

    if include_midpoints:
        candidates.extend(wall.midpoint for wall in walls)

    for i in range(len(walls)):
        for j in range(i + 1, len(walls)):
            intersection = check_wall_intersection(walls[i], walls[j])
            if intersection.intersects:
                candidates.append(intersection.point)

    unique: List[Point] = []
    for candidate in candidates:
        if not any(points_equal(candidate, existing, tolerance) for existing in unique):
            unique.append(candidate)
    return unique
