"""
Core brush functionality.

This package contains cell geometry, the in-memory tilemap, the default
stamp brush and the tiling brush that wraps it.
"""

from .geometry import BoundsInt, CellPos
from .tilemap import Tilemap
from .grid_brush import GridBrush
from .brush_state import TilingBrushState
from .snapping import axis_offset, axis_threshold, snap_position
from .tiling_brush import TilingBrush

__all__ = [
    "BoundsInt",
    "CellPos",
    "Tilemap",
    "GridBrush",
    "TilingBrushState",
    "axis_offset",
    "axis_threshold",
    "snap_position",
    "TilingBrush",
]
