"""
Tiling Brush

Grid brush that tiles a picked block of cells across the canvas instead of
stamping overlapping copies.
"""

from .core.tiling_brush import TilingBrush
from .core.brush_state import TilingBrushState

__version__ = "1.0.0"
__all__ = [
    "TilingBrush",
    "TilingBrushState",
]
