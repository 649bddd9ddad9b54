"""Topology analysis for wall snapshots.

This module builds the adjacency relation between walls that share an
endpoint. The relation is the input of the cycle detector, which turns
closed chains of walls into candidate rooms.
"""

from __future__ import annotations

import logging
import math
from typing import Dict, Iterable, List, Sequence, Tuple

import networkx as nx

from ..config import TOPOLOGY_TOLERANCE
from ..geom.primitives import points_equal
from .model import Point, Wall

LOGGER = logging.getLogger(__name__)

Cell = Tuple[int, int]


def _cell_of(point: Point, cell_size: float) -> Cell:
    return (math.floor(point.x / cell_size), math.floor(point.y / cell_size))


def _neighbour_cells(cell: Cell) -> Iterable[Cell]:
    cx, cy = cell
    for dx in (-1, 0, 1):
        for dy in (-1, 0, 1):
            yield (cx + dx, cy + dy)


def build_wall_graph(
    walls: Sequence[Wall], tolerance: float = TOPOLOGY_TOLERANCE
) -> nx.Graph:
    """Build a graph whose nodes are walls and whose edges are shared corners.

    Endpoints are indexed in a uniform grid with one tolerance per cell, so
    two endpoints within tolerance on both axes always sit in the same or
    neighbouring cells. Each endpoint is only compared against the points
    indexed in those nine cells.

    Args:
        walls: Wall snapshot. Wall ids are assumed unique.
        tolerance: Per-axis distance under which two endpoints coincide.

    Returns:
        Undirected NetworkX graph; every wall is a node, isolated or not.

    Raises:
        ValueError: If tolerance is not positive.
    """
    if tolerance <= 0:
        raise ValueError(f"Topology tolerance must be positive, got {tolerance}")

    G = nx.Graph()
    for wall in walls:
        G.add_node(wall.id)

    grid: Dict[Cell, List[Tuple[str, Point]]] = {}

    for wall in walls:
        for endpoint in (wall.start, wall.end):
            cell = _cell_of(endpoint, tolerance)
            for neighbour in _neighbour_cells(cell):
                for other_id, other_point in grid.get(neighbour, ()):
                    if other_id == wall.id:
                        continue
                    if points_equal(endpoint, other_point, tolerance):
                        G.add_edge(other_id, wall.id)
            grid.setdefault(cell, []).append((wall.id, endpoint))

    LOGGER.debug(
        "Wall graph: %d walls, %d shared corners", G.number_of_nodes(), G.number_of_edges()
    )
    return G


def build_wall_adjacency(
    walls: Sequence[Wall], tolerance: float = TOPOLOGY_TOLERANCE
) -> Dict[str, List[str]]:
    """Build the adjacency mapping from each wall to the walls it touches.

    The mapping is symmetric, contains every wall as a key, and lists
    neighbours in snapshot order so that repeated calls on the same snapshot
    give identical results.

    Args:
        walls: Wall snapshot.
        tolerance: Per-axis distance under which two endpoints coincide.

    Returns:
        Dictionary mapping wall_id to the list of adjacent wall_ids.
    """
    G = build_wall_graph(walls, tolerance)
    order = {wall.id: index for index, wall in enumerate(walls)}
    return {
        wall_id: sorted(G.neighbors(wall_id), key=order.__getitem__)
        for wall_id in G.nodes
    }
