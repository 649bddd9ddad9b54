"""Boundary validation for wall snapshots.

Detection itself is total over well-formed snapshots. These checks reject
inputs that would otherwise propagate NaN through the area and perimeter
math or make the wall-id based topology ambiguous.
"""

from __future__ import annotations

import math
from typing import Sequence, Set

from ..core.model import Wall


class InvalidWallSnapshot(ValueError):
    """Raised when a wall snapshot cannot be processed."""

    pass


def validate_wall(wall: Wall) -> None:
    """Validate a single wall.

    Raises:
        InvalidWallSnapshot: If a coordinate is NaN or infinite, or the
            thickness or height is negative.
    """
    coordinates = (wall.start.x, wall.start.y, wall.end.x, wall.end.y)
    if not all(math.isfinite(value) for value in coordinates):
        raise InvalidWallSnapshot(f"Wall '{wall.id}' has non-finite coordinates: {coordinates}")

    if wall.thickness < 0 or wall.height < 0:
        raise InvalidWallSnapshot(
            f"Wall '{wall.id}' has negative dimensions "
            f"(thickness={wall.thickness}, height={wall.height})"
        )


def validate_walls(walls: Sequence[Wall]) -> None:
    """Validate a wall snapshot.

    Args:
        walls: The snapshot to validate.

    Raises:
        InvalidWallSnapshot: If any wall is invalid or a wall id repeats.
    """
    seen: Set[str] = set()
    for wall in walls:
        if wall.id in seen:
            raise InvalidWallSnapshot(f"Duplicate wall id '{wall.id}'")
        seen.add(wall.id)
        validate_wall(wall)
