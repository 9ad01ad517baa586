"""
Tiling Brush Editor - Tilemap Renderer

Renders painted cells as flat colored squares.
"""

import pygame
from pygame import Surface

from editor.controllers.view_state import ViewState
from editor.core.constants import TILE_COLORS
from tiling.core.tilemap import Tilemap


class TilemapRenderer:
    """Renders tilemap cells on canvas."""

    @staticmethod
    def render(screen: Surface, view_state: ViewState, tilemap: Tilemap):
        """
        Render every visible painted cell.

        Args:
            screen: Pygame surface to draw on
            view_state: Viewport transform
            tilemap: Tiles to draw
        """
        tile_size = view_state.tile_size
        for cell, tile in tilemap.tiles.items():
            if not view_state.is_cell_visible(cell):
                continue
            x, y = view_state.cell_to_world(cell)
            color = TILE_COLORS[tile % len(TILE_COLORS)]
            pygame.draw.rect(screen, color, pygame.Rect(x, y, tile_size, tile_size))
