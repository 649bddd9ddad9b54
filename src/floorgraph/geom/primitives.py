"""Geometry primitives shared by topology and intersection code."""

from __future__ import annotations

import math
from typing import Tuple

from ..config import PARALLEL_TOLERANCE, SEGMENT_SLACK, TOPOLOGY_TOLERANCE
from ..core.model import NO_INTERSECTION, IntersectionResult, Point, Wall

Segment = Tuple[Point, Point]


def distance(p1: Point, p2: Point) -> float:
    """Calculate Euclidean distance between two points."""
    return math.sqrt((p1.x - p2.x) ** 2 + (p1.y - p2.y) ** 2)


def points_equal(p1: Point, p2: Point, tolerance: float = TOPOLOGY_TOLERANCE) -> bool:
    """Check if two points are equal within tolerance on both axes."""
    return abs(p1.x - p2.x) < tolerance and abs(p1.y - p2.y) < tolerance


def wall_segment(wall: Wall) -> Segment:
    return (wall.start, wall.end)


def on_segment(t: float, slack: float = SEGMENT_SLACK) -> bool:
    """Check if a parametric position lies on its segment, allowing slack."""
    return -slack <= t <= 1 + slack


def segment_intersection(
    line1: Segment,
    line2: Segment,
    tolerance: float = PARALLEL_TOLERANCE,
) -> IntersectionResult:
    """Intersect the infinite lines through two segments.

    Solves both parametric line equations with the cross-product
    determinant. The returned t1 and t2 locate the point along ``line1`` and
    ``line2``; callers decide whether the point lies on the finite segments.

    Args:
        line1: First segment as (start, end).
        line2: Second segment as (start, end).
        tolerance: Determinant magnitude below which lines count as parallel.

    Returns:
        IntersectionResult with point, t1 and t2, or NO_INTERSECTION for
        parallel and coincident lines.
    """
    (p1, p2), (p3, p4) = line1, line2
    x1, y1, x2, y2 = p1.x, p1.y, p2.x, p2.y
    x3, y3, x4, y4 = p3.x, p3.y, p4.x, p4.y

    denom = (x1 - x2) * (y3 - y4) - (y1 - y2) * (x3 - x4)
    if abs(denom) < tolerance:
        return NO_INTERSECTION

    t1 = ((x1 - x3) * (y3 - y4) - (y1 - y3) * (x3 - x4)) / denom
    t2 = -((x1 - x2) * (y1 - y3) - (y1 - y2) * (x1 - x3)) / denom

    point = Point(x1 + t1 * (x2 - x1), y1 + t1 * (y2 - y1))
    return IntersectionResult(intersects=True, point=point, t1=t1, t2=t2)


def line_angle_degrees(line: Segment) -> float:
    """Direction of a segment in degrees, normalized to [0, 180)."""
    start, end = line
    angle = math.degrees(math.atan2(end.y - start.y, end.x - start.x))
    if angle < 0:
        angle += 180.0
    return angle % 180.0
