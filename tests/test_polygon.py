"""
Tests for polygon reconstruction and metrics.
"""

import math

import pytest

from floorgraph.core.model import Point
from floorgraph.engine.detection import detect_rooms
from floorgraph.geom.polygon import (
    cycle_to_polygon,
    find_room_at,
    polygon_area,
    polygon_centroid,
    polygon_perimeter,
    room_outline,
    signed_area,
)

SQUARE = [Point(0, 0), Point(10, 0), Point(10, 10), Point(0, 10)]


class TestMetrics:
    """Tests for area, perimeter and center."""

    def test_area(self):
        assert polygon_area(SQUARE) == pytest.approx(100.0)

    def test_signed_area_follows_orientation(self):
        assert signed_area(SQUARE) > 0
        assert signed_area(list(reversed(SQUARE))) < 0
        assert polygon_area(list(reversed(SQUARE))) == pytest.approx(100.0)

    def test_degenerate_area(self):
        assert polygon_area(SQUARE[:2]) == 0.0

    def test_perimeter_includes_closing_edge(self):
        assert polygon_perimeter(SQUARE) == pytest.approx(40.0)

    def test_triangle(self):
        triangle = [Point(0, 0), Point(100, 0), Point(0, 100)]

        assert polygon_area(triangle) == pytest.approx(5000.0)
        assert polygon_perimeter(triangle) == pytest.approx(200 + 100 * math.sqrt(2))

    def test_centroid_is_vertex_mean(self):
        center = polygon_centroid(SQUARE)
        assert (center.x, center.y) == (pytest.approx(5.0), pytest.approx(5.0))

    def test_centroid_of_nothing_is_origin(self):
        assert polygon_centroid([]) == Point(0.0, 0.0)


class TestCycleToPolygon:
    """Tests for cycle_to_polygon."""

    def test_rectangle_vertices_in_order(self, rectangle_walls):
        vertices = cycle_to_polygon(["w1", "w2", "w3", "w4"], rectangle_walls)

        assert vertices == [Point(0, 0), Point(200, 0), Point(200, 100), Point(0, 100)]

    def test_reversed_walls(self, make_wall):
        walls = [
            make_wall("a", 100, 0, 0, 0),
            make_wall("b", 100, 100, 100, 0),
            make_wall("c", 0, 100, 100, 100),
            make_wall("d", 0, 0, 0, 100),
        ]
        vertices = cycle_to_polygon(["a", "b", "c", "d"], walls)

        assert len(vertices) == 4
        assert polygon_area(vertices) == pytest.approx(10000.0)

    def test_unknown_walls_give_no_vertices(self, rectangle_walls):
        assert cycle_to_polygon(["x", "y", "z"], rectangle_walls) == []


class TestRoomLookup:
    """Tests for room outlines and point lookup."""

    def test_outline_matches_room(self, rectangle_walls):
        room = detect_rooms(rectangle_walls).rooms[0]
        outline = room_outline(room)

        assert outline.area == pytest.approx(room.area)

    def test_smallest_room_wins(self, split_rectangle_walls):
        rooms = detect_rooms(split_rectangle_walls).rooms

        left = find_room_at(rooms, Point(50, 50))
        right = find_room_at(rooms, Point(150, 50))

        assert left.area == pytest.approx(10000.0)
        assert right.area == pytest.approx(10000.0)
        assert left.id != right.id
        assert set(left.wall_ids) == {"b1", "m", "t2", "l"}

    def test_point_outside_every_room(self, rectangle_walls):
        rooms = detect_rooms(rectangle_walls).rooms
        assert find_room_at(rooms, Point(500, 500)) is None
