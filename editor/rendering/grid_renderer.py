"""
Tiling Brush Editor - Grid Renderer

Renders grid overlay on the canvas for tile alignment.
"""

import pygame
from pygame import Surface

from editor.controllers.view_state import ViewState
from editor.core.constants import COLOR_GRID


class GridRenderer:
    """Renders grid overlay on canvas."""

    @staticmethod
    def render(screen: Surface, view_state: ViewState, width: int, height: int):
        """
        Render grid overlay.

        Args:
            screen: Pygame surface to draw on
            view_state: Viewport transform
            width: Grid width in cells
            height: Grid height in cells
        """
        canvas_rect = view_state.canvas_rect
        tile_size = view_state.tile_size

        # Vertical lines
        for col in range(width + 1):
            x = canvas_rect.x + col * tile_size - view_state.offset_x
            if canvas_rect.x <= x <= canvas_rect.right:
                pygame.draw.line(screen, COLOR_GRID, (x, canvas_rect.y), (x, canvas_rect.bottom))

        # Horizontal lines
        for row in range(height + 1):
            y = canvas_rect.y + row * tile_size - view_state.offset_y
            if canvas_rect.y <= y <= canvas_rect.bottom:
                pygame.draw.line(screen, COLOR_GRID, (canvas_rect.x, y), (canvas_rect.right, y))
