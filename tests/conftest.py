"""
Pytest configuration and fixtures for floorgraph tests.
"""

import json
from pathlib import Path

import pytest

from floorgraph.core.model import Point, Wall


def _wall(wall_id: str, x1: float, y1: float, x2: float, y2: float, **kwargs) -> Wall:
    return Wall(id=wall_id, start=Point(x1, y1), end=Point(x2, y2), **kwargs)


@pytest.fixture
def make_wall():
    """Factory building a wall from raw coordinates."""
    return _wall


@pytest.fixture
def rectangle_walls():
    """A closed 200 x 100 rectangle drawn clockwise from the origin."""
    return [
        _wall("w1", 0, 0, 200, 0),
        _wall("w2", 200, 0, 200, 100),
        _wall("w3", 200, 100, 0, 100),
        _wall("w4", 0, 100, 0, 0),
    ]


@pytest.fixture
def split_rectangle_walls():
    """The 200 x 100 rectangle divided into two squares by a wall at x=100."""
    return [
        _wall("b1", 0, 0, 100, 0),
        _wall("b2", 100, 0, 200, 0),
        _wall("r", 200, 0, 200, 100),
        _wall("t1", 200, 100, 100, 100),
        _wall("t2", 100, 100, 0, 100),
        _wall("l", 0, 100, 0, 0),
        _wall("m", 100, 0, 100, 100),
    ]


@pytest.fixture
def open_walls():
    """Three walls forming a U; nothing is enclosed."""
    return [
        _wall("u1", 0, 0, 100, 0),
        _wall("u2", 100, 0, 100, 100),
        _wall("u3", 0, 100, 0, 0),
    ]


@pytest.fixture
def walls_file(tmp_path: Path, rectangle_walls) -> Path:
    """The rectangle written as an editor snapshot document."""
    records = [
        {
            "id": wall.id,
            "startX": wall.start.x,
            "startY": wall.start.y,
            "endX": wall.end.x,
            "endY": wall.end.y,
        }
        for wall in rectangle_walls
    ]
    path = tmp_path / "walls.json"
    path.write_text(json.dumps({"walls": records}), encoding="utf-8")
    return path


@pytest.fixture
def touching_squares():
    """Two 100 x 100 squares that share only the corner (100, 100)."""
    return [
        _wall("a", 0, 0, 100, 0),
        _wall("b", 100, 0, 100, 100),
        _wall("c", 100, 100, 0, 100),
        _wall("d", 0, 100, 0, 0),
        _wall("e", 100, 100, 200, 100),
        _wall("f", 200, 100, 200, 200),
        _wall("g", 200, 200, 100, 200),
        _wall("h", 100, 200, 100, 100),
    ]
