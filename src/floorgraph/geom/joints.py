"""Classification of the places where walls meet.

Joints drive join indicators and corner styling in the editor. Every pair
of walls that meets (end to end, end to body, or crossing) contributes a
meeting point; meeting points that coincide are merged into one joint whose
type depends on how many walls meet there and, for two walls, at what angle.
"""

from __future__ import annotations

import math
from typing import List, Sequence

from ..config import JOINT_ANGLE_THRESHOLD, JOINT_TOLERANCE
from ..core.model import Point, Wall, WallJoint
from .primitives import distance, on_segment, points_equal, segment_intersection, wall_segment

# Lines with a smaller cross-product determinant are treated as parallel here.
_PARALLEL_EPSILON = 1e-10


def _away_vector(wall: Wall, joint: Point) -> tuple[float, float]:
    far = wall.start if distance(wall.start, joint) > distance(wall.end, joint) else wall.end
    return (far.x - joint.x, far.y - joint.y)


def joint_angle(wall_a: Wall, wall_b: Wall, joint: Point) -> float:
    """Angle in degrees (0 to 180) between two walls, measured at the joint."""
    ax, ay = _away_vector(wall_a, joint)
    bx, by = _away_vector(wall_b, joint)
    norm = math.hypot(ax, ay) * math.hypot(bx, by)
    if norm == 0:
        return 0.0
    cosine = max(-1.0, min(1.0, (ax * bx + ay * by) / norm))
    return math.degrees(math.acos(cosine))


def joint_type(wall_count: int, angle: float, angle_threshold: float = JOINT_ANGLE_THRESHOLD) -> str:
    if wall_count >= 4:
        return "cross"
    if wall_count == 3:
        return "tee"
    if abs(angle - 180.0) < angle_threshold:
        return "butt"
    if abs(angle - 90.0) < angle_threshold:
        return "corner"
    if angle < 90.0:
        return "acute"
    return "obtuse"


def classify_joints(
    walls: Sequence[Wall],
    tolerance: float = JOINT_TOLERANCE,
    angle_threshold: float = JOINT_ANGLE_THRESHOLD,
) -> List[WallJoint]:
    """Find and classify every joint in a wall snapshot.

    Args:
        walls: Wall snapshot.
        tolerance: Distance under which meeting points merge; parametric
            slack on each wall is twice this value.
        angle_threshold: Degrees of slack around 90 and 180 degrees.

    Returns:
        Joints in discovery order, numbered from 1.
    """
    slack = tolerance * 2
    groups: List[dict] = []

    for i in range(len(walls)):
        for j in range(i + 1, len(walls)):
            wall_a, wall_b = walls[i], walls[j]
            hit = segment_intersection(wall_segment(wall_a), wall_segment(wall_b), _PARALLEL_EPSILON)
            if not hit.intersects:
                continue
            if not (on_segment(hit.t1, slack) and on_segment(hit.t2, slack)):
                continue

            for group in groups:
                if points_equal(group["position"], hit.point, tolerance):
                    for wall_id in (wall_a.id, wall_b.id):
                        if wall_id not in group["wall_ids"]:
                            group["wall_ids"].append(wall_id)
                    break
            else:
                groups.append(
                    {
                        "position": hit.point,
                        "wall_ids": [wall_a.id, wall_b.id],
                        "angle": joint_angle(wall_a, wall_b, hit.point),
                    }
                )

    return [
        WallJoint(
            id=f"joint-{index + 1}",
            type=joint_type(len(group["wall_ids"]), group["angle"], angle_threshold),
            position=group["position"],
            wall_ids=tuple(group["wall_ids"]),
            angle=group["angle"],
        )
        for index, group in enumerate(groups)
    ]
