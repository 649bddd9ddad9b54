"""
Tests for room detection.

These tests verify the full pipeline from walls to rooms.
"""

import math

import pytest

from floorgraph.config import ROOM_COLORS
from floorgraph.core.model import Point
from floorgraph.engine.detection import detect_rooms, is_closed_shape, room_color, room_summary
from floorgraph.engine.validators import InvalidWallSnapshot


class TestDetectRooms:
    """Tests for detect_rooms."""

    def test_rectangle_is_one_room(self, rectangle_walls):
        result = detect_rooms(rectangle_walls)

        assert len(result.rooms) == 1
        room = result.rooms[0]
        assert room.id == "room-0"
        assert room.name == "Room 1"
        assert room.color == ROOM_COLORS[0]
        assert room.area == pytest.approx(200 * 100)
        assert room.perimeter == pytest.approx(2 * (200 + 100))
        assert room.center == Point(100.0, 50.0)
        assert set(room.wall_ids) == {"w1", "w2", "w3", "w4"}
        assert len(result.closed_shapes) == 1

    def test_fewer_than_three_walls(self, rectangle_walls):
        for count in range(3):
            result = detect_rooms(rectangle_walls[:count])
            assert result.rooms == ()
            assert result.closed_shapes == ()

    def test_open_chain(self, open_walls):
        result = detect_rooms(open_walls)
        assert result.rooms == ()
        assert result.closed_shapes == ()

    def test_disconnected_walls(self, make_wall):
        walls = [
            make_wall("a", 0, 0, 100, 0),
            make_wall("b", 200, 0, 200, 100),
            make_wall("c", 0, 300, 100, 300),
        ]
        assert detect_rooms(walls).rooms == ()

    def test_triangle(self, make_wall):
        walls = [
            make_wall("a", 0, 0, 100, 0),
            make_wall("b", 100, 0, 0, 100),
            make_wall("c", 0, 100, 0, 0),
        ]
        room = detect_rooms(walls).rooms[0]

        assert room.area == pytest.approx(5000.0)
        assert room.perimeter == pytest.approx(200 + 100 * math.sqrt(2))

    def test_split_rectangle_gives_both_halves_and_outline(self, split_rectangle_walls):
        result = detect_rooms(split_rectangle_walls)

        areas = sorted(room.area for room in result.rooms)
        assert areas == [pytest.approx(10000.0), pytest.approx(10000.0), pytest.approx(20000.0)]
        assert [room.name for room in result.rooms] == ["Room 1", "Room 2", "Room 3"]
        assert len({room.id for room in result.rooms}) == 3

    def test_rooms_touching_at_a_corner(self, touching_squares):
        result = detect_rooms(touching_squares)

        assert [room.area for room in result.rooms] == [
            pytest.approx(10000.0),
            pytest.approx(10000.0),
        ]
        assert len(result.closed_shapes) == 2

    def test_grid_of_four_cells(self, make_wall):
        walls = []
        for i in range(3):
            for j in range(2):
                walls.append(make_wall(f"h{i}{j}", j * 100, i * 100, (j + 1) * 100, i * 100))
                walls.append(make_wall(f"v{i}{j}", i * 100, j * 100, i * 100, (j + 1) * 100))
        result = detect_rooms(walls)

        # 4 cells, 4 two-cell strips, 4 three-cell L shapes and the outline.
        assert len(result.rooms) == 13
        assert max(room.area for room in result.rooms) == pytest.approx(40000.0)

    def test_small_loop_is_a_closed_shape_but_not_a_room(self, make_wall):
        walls = [
            make_wall("a", 0, 0, 5, 0),
            make_wall("b", 5, 0, 5, 5),
            make_wall("c", 5, 5, 0, 5),
            make_wall("d", 0, 5, 0, 0),
        ]
        result = detect_rooms(walls)

        assert result.rooms == ()
        assert len(result.closed_shapes) == 1

    def test_min_area_is_exclusive(self, make_wall):
        walls = [
            make_wall("a", 0, 0, 10, 0),
            make_wall("b", 10, 0, 10, 10),
            make_wall("c", 10, 10, 0, 10),
            make_wall("d", 0, 10, 0, 0),
        ]
        assert detect_rooms(walls).rooms == ()
        assert len(detect_rooms(walls, min_area=99.0).rooms) == 1

    def test_gap_within_tolerance_still_closes(self, make_wall):
        walls = [
            make_wall("a", 0, 0, 100, 0),
            make_wall("b", 101, 1, 100, 100),
            make_wall("c", 100, 100, 0, 100),
            make_wall("d", 0, 100, 0, 0),
        ]
        assert len(detect_rooms(walls).rooms) == 1

    def test_gap_beyond_tolerance_stays_open(self, make_wall):
        walls = [
            make_wall("a", 0, 0, 100, 0),
            make_wall("b", 105, 0, 100, 100),
            make_wall("c", 100, 100, 0, 100),
            make_wall("d", 0, 100, 0, 0),
        ]
        assert detect_rooms(walls).rooms == ()

    def test_deterministic(self, split_rectangle_walls):
        assert detect_rooms(split_rectangle_walls) == detect_rooms(split_rectangle_walls)

    def test_input_order_does_not_change_rooms(self, rectangle_walls):
        forward = detect_rooms(rectangle_walls).rooms
        backward = detect_rooms(list(reversed(rectangle_walls))).rooms

        assert len(backward) == 1
        assert backward[0].area == pytest.approx(forward[0].area)
        assert set(backward[0].wall_ids) == set(forward[0].wall_ids)

    def test_walls_are_not_mutated(self, rectangle_walls):
        snapshot = list(rectangle_walls)
        detect_rooms(rectangle_walls)
        assert rectangle_walls == snapshot


class TestValidation:
    """Tests for snapshot validation at the detection boundary."""

    def test_nan_coordinate(self, rectangle_walls, make_wall):
        walls = rectangle_walls + [make_wall("bad", float("nan"), 0, 10, 10)]
        with pytest.raises(InvalidWallSnapshot, match="non-finite"):
            detect_rooms(walls)

    def test_infinite_coordinate(self, rectangle_walls, make_wall):
        walls = rectangle_walls + [make_wall("bad", 0, 0, float("inf"), 10)]
        with pytest.raises(InvalidWallSnapshot):
            detect_rooms(walls)

    def test_duplicate_ids(self, rectangle_walls, make_wall):
        walls = rectangle_walls + [make_wall("w1", 0, 0, 10, 10)]
        with pytest.raises(InvalidWallSnapshot, match="Duplicate"):
            detect_rooms(walls)

    def test_negative_thickness(self, rectangle_walls, make_wall):
        walls = rectangle_walls + [make_wall("thin", 0, 0, 10, 10, thickness=-1)]
        with pytest.raises(InvalidWallSnapshot):
            detect_rooms(walls)

    def test_is_a_value_error(self, rectangle_walls, make_wall):
        walls = rectangle_walls + [make_wall("w2", 0, 0, 10, 10)]
        with pytest.raises(ValueError):
            detect_rooms(walls)


class TestHelpers:
    """Tests for the display helpers."""

    def test_is_closed_shape(self, rectangle_walls, open_walls):
        assert is_closed_shape(rectangle_walls)
        assert not is_closed_shape(open_walls)

    def test_room_color_cycles(self):
        assert room_color(0) == ROOM_COLORS[0]
        assert room_color(len(ROOM_COLORS)) == ROOM_COLORS[0]
        assert room_color(9) == ROOM_COLORS[1]

    def test_room_summary_in_feet(self, make_wall):
        walls = [
            make_wall("a", 0, 0, 120, 0),
            make_wall("b", 120, 0, 120, 120),
            make_wall("c", 120, 120, 0, 120),
            make_wall("d", 0, 120, 0, 0),
        ]
        room = detect_rooms(walls).rooms[0]

        assert room_summary(room) == "Room 1\nArea: 100.0 sq ft\nPerimeter: 40.0 ft"
