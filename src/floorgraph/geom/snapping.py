"""Cursor snapping for wall drawing."""

from __future__ import annotations

from typing import Sequence

from ..config import ENDPOINT_SNAP_TOLERANCE, GRID_SNAP_TOLERANCE
from ..core.model import Point, SnapResult
from .primitives import distance


def snap_to_grid(
    point: Point, grid_size: float, tolerance: float = GRID_SNAP_TOLERANCE
) -> SnapResult:
    """Snap to the nearest grid intersection if it is within tolerance on both axes."""
    if grid_size <= 0:
        return SnapResult(point=point, snapped=False)

    snapped = Point(round(point.x / grid_size) * grid_size, round(point.y / grid_size) * grid_size)
    if abs(point.x - snapped.x) <= tolerance and abs(point.y - snapped.y) <= tolerance:
        return SnapResult(point=snapped, snapped=True, snap_type="grid")
    return SnapResult(point=point, snapped=False)


def snap_to_points(
    point: Point, candidates: Sequence[Point], tolerance: float = ENDPOINT_SNAP_TOLERANCE
) -> SnapResult:
    """Snap to the first candidate within tolerance."""
    for candidate in candidates:
        if distance(point, candidate) <= tolerance:
            return SnapResult(point=candidate, snapped=True, snap_type="endpoint")
    return SnapResult(point=point, snapped=False)


def snap_point(
    point: Point,
    grid_size: float,
    candidates: Sequence[Point],
    grid_enabled: bool,
    tolerance: float = ENDPOINT_SNAP_TOLERANCE,
) -> SnapResult:
    """Snap a cursor position, preferring snap points over the grid.

    Args:
        point: Raw cursor position.
        grid_size: Grid spacing.
        candidates: Snap targets, usually from
            ``get_wall_snap_points_with_intersections``.
        grid_enabled: Whether grid snapping is on.
        tolerance: Distance within which both kinds of snapping apply.

    Returns:
        SnapResult with the snapped position and the kind of snap.
    """
    result = snap_to_points(point, candidates, tolerance)
    if result.snapped:
        return result

    if grid_enabled:
        return snap_to_grid(point, grid_size, tolerance)

    return SnapResult(point=point, snapped=False)
