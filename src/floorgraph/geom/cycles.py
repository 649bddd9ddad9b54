"""Cycle detection over the wall adjacency graph.

Each simple cycle of walls whose endpoints chain into a closed loop is a
candidate room boundary. Cycles are enumerated with a bounded depth-first
search and deduplicated by their unordered wall-id set.
"""

from __future__ import annotations

import logging
from typing import Dict, List, Mapping, Optional, Sequence, Set, Tuple

from ..config import MAX_CYCLE_LENGTH, TOPOLOGY_TOLERANCE
from ..core.model import Point, Wall
from .primitives import distance, points_equal

LOGGER = logging.getLogger(__name__)


def _exit_point(wall: Wall, entry: Point, tolerance: float) -> Optional[Point]:
    """Return the endpoint opposite to ``entry``, or None if the wall does not touch it."""
    start_hit = points_equal(wall.start, entry, tolerance)
    end_hit = points_equal(wall.end, entry, tolerance)
    if start_hit and end_hit:
        # Shorter than the tolerance: leave through whichever end is farther.
        if distance(wall.start, entry) <= distance(wall.end, entry):
            return wall.end
        return wall.start
    if start_hit:
        return wall.end
    if end_hit:
        return wall.start
    return None


def cycle_key(wall_ids: Sequence[str]) -> Tuple[str, ...]:
    """Canonical form of a cycle, independent of direction and start wall."""
    return tuple(sorted(wall_ids))


def find_cycles(
    adjacency: Mapping[str, Sequence[str]],
    walls: Sequence[Wall],
    max_length: int = MAX_CYCLE_LENGTH,
    tolerance: float = TOPOLOGY_TOLERANCE,
) -> List[Tuple[str, ...]]:
    """Enumerate the closed wall loops of a snapshot.

    A depth-first search starts from every wall in snapshot order and leaves
    it through its end point. The walk never steps straight back to its
    predecessor, never revisits a wall or a corner, and only enters a
    neighbour through the corner it is standing on, so every recorded loop is
    a simple polygon. When the start wall can be re-entered through its start
    point after at least three walls, the path is recorded.

    Args:
        adjacency: Mapping from wall_id to adjacent wall_ids.
        walls: Wall snapshot the adjacency was built from.
        max_length: Longest cycle, in walls, that will be searched for.
        tolerance: Per-axis distance under which two endpoints coincide.

    Returns:
        Unique cycles as tuples of wall ids in traversal order, in discovery
        order. Two cycles over the same wall set are reported once.
    """
    wall_map: Dict[str, Wall] = {wall.id: wall for wall in walls}
    raw_cycles: List[Tuple[str, ...]] = []

    def dfs(
        current: str,
        corner: Point,
        path: List[str],
        on_path: Set[str],
        corners: List[Point],
        start: Wall,
    ) -> None:
        parent = path[-2] if len(path) > 1 else None
        # Back at the start corner: the loop can only close here.
        closing = points_equal(corner, start.start, tolerance)
        for neighbour in adjacency.get(current, ()):
            if neighbour == parent:
                continue
            if neighbour == start.id:
                if len(path) >= 3 and closing:
                    raw_cycles.append(tuple(path))
                continue
            if closing or neighbour in on_path or len(path) >= max_length:
                continue
            wall = wall_map.get(neighbour)
            if wall is None:
                continue
            exit_point = _exit_point(wall, corner, tolerance)
            if exit_point is None:
                continue
            if any(points_equal(exit_point, seen, tolerance) for seen in corners):
                continue
            path.append(neighbour)
            on_path.add(neighbour)
            corners.append(exit_point)
            dfs(neighbour, exit_point, path, on_path, corners, start)
            corners.pop()
            path.pop()
            on_path.discard(neighbour)

    for wall in walls:
        if wall.id not in adjacency:
            continue
        dfs(wall.id, wall.end, [wall.id], {wall.id}, [wall.end], wall)

    unique: List[Tuple[str, ...]] = []
    seen: Set[Tuple[str, ...]] = set()
    for cycle in raw_cycles:
        key = cycle_key(cycle)
        if key in seen or len(cycle) < 3:
            continue
        seen.add(key)
        unique.append(cycle)

    LOGGER.debug("Found %d cycles (%d unique)", len(raw_cycles), len(unique))
    return unique
