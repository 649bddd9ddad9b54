"""Engine module for room detection.

This module provides the public entry points that turn a wall snapshot into
rooms, plus the validation applied at that boundary.
"""

from .detection import detect_rooms, is_closed_shape, room_summary
from .validators import InvalidWallSnapshot, validate_walls

__all__ = ["detect_rooms", "is_closed_shape", "room_summary", "InvalidWallSnapshot", "validate_walls"]
