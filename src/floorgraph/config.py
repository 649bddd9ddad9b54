"""Tunable parameters for room detection and wall joining.

All lengths are in drawing units (the editor's canvas units).
"""

# Endpoint matching
TOPOLOGY_TOLERANCE = 2.0  # Two wall ends closer than this (per axis) share a corner

# Segment intersection
PARALLEL_TOLERANCE = 0.1  # |determinant| below this means parallel or coincident
SEGMENT_SLACK = 0.1  # Parametric slack beyond [0, 1] still counted as on-segment

# Joining bands on the existing wall's parameter t2
SPLIT_BAND = (0.1, 0.9)  # Strictly inside: split. At or outside: move nearer endpoint

# Cycle search
MAX_CYCLE_LENGTH = 10  # Longest wall loop the detector will report

# Room filtering
MIN_ROOM_AREA = 100.0  # Square units; smaller loops are slivers

# Drawing aids
SNAP_DEDUP_TOLERANCE = 1.0
ENDPOINT_SNAP_TOLERANCE = 15.0
GRID_SNAP_TOLERANCE = 10.0

# Joint classification
JOINT_TOLERANCE = 0.1
JOINT_ANGLE_THRESHOLD = 5.0  # Degrees

# Wall defaults used when a snapshot omits them
DEFAULT_WALL_THICKNESS = 10.0
DEFAULT_WALL_HEIGHT = 240.0

ROOM_COLORS = (
    "#E3F2FD",  # Light Blue
    "#F3E5F5",  # Light Purple
    "#E8F5E8",  # Light Green
    "#FFF3E0",  # Light Orange
    "#FCE4EC",  # Light Pink
    "#F1F8E9",  # Light Lime
    "#E0F2F1",  # Light Teal
    "#FFF8E1",  # Light Yellow
)
