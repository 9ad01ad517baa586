"""
Tiling Brush Editor - Rendering Module

Rendering components for tiles, grid and brush overlays.
"""

from .grid_renderer import GridRenderer
from .tilemap_renderer import TilemapRenderer
from .overlay_renderer import GridBrushEditor, TilingBrushEditor

__all__ = ['GridRenderer', 'TilemapRenderer', 'GridBrushEditor', 'TilingBrushEditor']
