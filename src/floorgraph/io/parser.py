"""Parser for wall snapshot JSON files.

This module converts the editor's wall records into Wall objects and
serializes detection and joining results back to plain dictionaries.

A snapshot is either a list of wall records or an object with a ``walls``
list. Each record looks like::

    {"id": "w1", "startX": 0, "startY": 0, "endX": 100, "endY": 0,
     "thickness": 10, "height": 240, "material": "brick"}
"""

import json
from pathlib import Path
from typing import Any, Dict, List, Union

from ..config import DEFAULT_WALL_HEIGHT, DEFAULT_WALL_THICKNESS
from ..core.model import (
    JoinOutcome,
    Point,
    Room,
    RoomDetectionResult,
    Wall,
    WallJoinResult,
    WallJoint,
)


def parse_wall(data: Dict[str, Any]) -> Wall:
    """Build a Wall from one editor record.

    Raises:
        ValueError: If a required field is missing or not numeric.
    """
    if not isinstance(data, dict):
        raise ValueError(f"Wall record must be an object, got: {data!r}")

    wall_id = data.get("id", "<unknown>")
    try:
        return Wall(
            id=str(data["id"]),
            start=Point(float(data["startX"]), float(data["startY"])),
            end=Point(float(data["endX"]), float(data["endY"])),
            thickness=float(data.get("thickness", DEFAULT_WALL_THICKNESS)),
            height=float(data.get("height", DEFAULT_WALL_HEIGHT)),
            material=data.get("material") or data.get("materialId"),
            color=data.get("color"),
        )
    except (KeyError, TypeError, ValueError) as e:
        raise ValueError(f"Invalid wall data for {wall_id}: {e}") from e


def parse_walls(data: Union[List[Dict[str, Any]], Dict[str, Any]]) -> List[Wall]:
    """Build Walls from a snapshot list or a ``{"walls": [...]}`` document.

    Raises:
        ValueError: If the document has no wall list or a record is invalid.
    """
    if isinstance(data, dict):
        if "walls" not in data:
            raise ValueError("Wall snapshot document has no 'walls' list")
        records = data["walls"]
    else:
        records = data
    if not isinstance(records, list):
        raise ValueError("Wall snapshot must be a list of wall records")
    return [parse_wall(record) for record in records]


def load_walls(path: str) -> List[Wall]:
    """Load a wall snapshot from a JSON file.

    Args:
        path: Path to the JSON file.

    Returns:
        Walls in file order.

    Raises:
        FileNotFoundError: If the file doesn't exist.
        ValueError: If the JSON data is invalid or malformed.
    """
    file_path = Path(path)
    if not file_path.exists():
        raise FileNotFoundError(f"File not found: {path}")

    with open(file_path, encoding="utf-8") as f:
        data = json.load(f)

    return parse_walls(data)


def point_to_dict(point: Point) -> Dict[str, float]:
    return {"x": point.x, "y": point.y}


def wall_to_dict(wall: Wall) -> Dict[str, Any]:
    return {
        "id": wall.id,
        "startX": wall.start.x,
        "startY": wall.start.y,
        "endX": wall.end.x,
        "endY": wall.end.y,
        "thickness": wall.thickness,
        "height": wall.height,
        "material": wall.material,
        "color": wall.color,
    }


def room_to_dict(room: Room) -> Dict[str, Any]:
    return {
        "id": room.id,
        "name": room.name,
        "vertices": [point_to_dict(v) for v in room.vertices],
        "walls": list(room.wall_ids),
        "area": room.area,
        "perimeter": room.perimeter,
        "center": point_to_dict(room.center),
        "color": room.color,
    }


def detection_to_dict(result: RoomDetectionResult) -> Dict[str, Any]:
    return {
        "rooms": [room_to_dict(room) for room in result.rooms],
        "closedShapes": [[point_to_dict(v) for v in shape] for shape in result.closed_shapes],
    }


def join_result_to_dict(result: WallJoinResult) -> Dict[str, Any]:
    updates = []
    for update in result.walls_to_update:
        changes: Dict[str, float] = {}
        if update.start is not None:
            changes.update(startX=update.start.x, startY=update.start.y)
        if update.end is not None:
            changes.update(endX=update.end.x, endY=update.end.y)
        updates.append({"wallId": update.wall_id, "updates": changes})

    return {
        "shouldJoin": result.should_join,
        "joinPoint": point_to_dict(result.join_point) if result.join_point else None,
        "wallsToUpdate": updates,
        "newWalls": [wall_to_dict(wall) for wall in result.new_walls],
        "wallsToRemove": list(result.walls_to_remove),
    }


def join_outcome_to_dict(outcome: JoinOutcome) -> Dict[str, Any]:
    return {
        "success": outcome.success,
        "updatedWalls": [wall_to_dict(wall) for wall in outcome.updated_walls],
        "error": outcome.error,
    }


def joint_to_dict(joint: WallJoint) -> Dict[str, Any]:
    return {
        "id": joint.id,
        "type": joint.type,
        "position": point_to_dict(joint.position),
        "wallIds": list(joint.wall_ids),
        "angle": joint.angle,
    }


def save_json(data: Any, output_path: str) -> None:
    """Write a JSON document, creating parent directories as needed."""
    Path(output_path).parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2)
