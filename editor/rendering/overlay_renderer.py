"""
Tiling Brush Editor - Overlay Renderer

Per-frame scene overlays for brushes. GridBrushEditor outlines the cells
under the brush; TilingBrushEditor adds a coordinate label and records
whether the brush is executing, which the tiling brush reads to tell a
fresh stroke from a continuing one.
"""

from typing import Optional

import pygame

from editor.controllers.view_state import ViewState
from editor.core.constants import (
    COLOR_SELECTION,
    LABEL_FONT_NAME,
    LABEL_FONT_SIZE,
)
from tiling.core.brush_state import TilingBrushState
from tiling.core.geometry import BoundsInt
from tiling.core.tilemap import Tilemap

from .highlight_utils import draw_bounds_border, draw_label


class GridBrushEditor:
    """Default overlay: outline of the cells under the brush."""

    def __init__(self, screen: pygame.Surface, font: Optional[pygame.font.Font] = None):
        self.screen = screen
        self._font = font

    @property
    def font(self) -> pygame.font.Font:
        if self._font is None:
            self._font = pygame.font.SysFont(LABEL_FONT_NAME, LABEL_FONT_SIZE)
        return self._font

    def on_scene_overlay(
        self,
        grid: ViewState,
        target: Tilemap,
        bounds: BoundsInt,
        tool,
        executing: bool,
    ):
        if bounds.is_empty:
            return
        draw_bounds_border(self.screen, grid.cell_rect(bounds), COLOR_SELECTION)


class TilingBrushEditor:
    """Overlay for the tiling brush."""

    def __init__(self, state: TilingBrushState, default_editor: GridBrushEditor):
        """
        Args:
            state: Interaction state shared with the tiling brush
            default_editor: Overlay providing the standard selection outline
        """
        self.state = state
        self.default_editor = default_editor

    @staticmethod
    def label_text(bounds: BoundsInt) -> str:
        """Position label, with the size appended when the box spans more than one cell."""
        text = f"Pos: {bounds.position}"
        if bounds.size.x > 1 or bounds.size.y > 1:
            text += f" Size: {bounds.size}"
        return text

    def on_scene_overlay(
        self,
        grid: ViewState,
        target: Tilemap,
        bounds: BoundsInt,
        tool,
        executing: bool,
    ):
        """
        Draw the brush overlay and record this frame's execution state.

        Args:
            grid: Grid layout used for cell to world conversion
            target: Tilemap the brush works on
            bounds: Cells currently under the brush
            tool: Current BrushTool
            executing: Whether the brush is currently painting
        """
        self.default_editor.on_scene_overlay(grid, target, bounds, tool, executing)

        draw_label(
            self.default_editor.screen,
            self.default_editor.font,
            grid.cell_to_world(bounds.position),
            self.label_text(bounds),
        )

        self.state.update_execution(executing)
