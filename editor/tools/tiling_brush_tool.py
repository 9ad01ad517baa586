"""
Tiling brush tool - paints the picked block as non-overlapping tiles.
"""

import logging

import pygame

from editor.rendering.overlay_renderer import GridBrushEditor, TilingBrushEditor
from tiling.core.brush_state import TilingBrushState
from tiling.core.geometry import BoundsInt, CellPos
from tiling.core.grid_brush import GridBrush
from tiling.core.tiling_brush import TilingBrush

from .base_tool import BrushTool, ToolContext, ToolResult

logger = logging.getLogger(__name__)

SINGLE_CELL = CellPos(1, 1, 1)
EMPTY_BRUSH_MESSAGE = "Brush is empty, right-drag to pick a block"


class TilingBrushTool:
    """Tiling brush tool.

    Left drag paints, right drag picks a block, shift + left drag moves the
    block under the brush. The brush state lives only while the tool is
    active.
    """

    def __init__(self):
        self.state: TilingBrushState | None = None
        self.brush: TilingBrush | None = None
        self.editor: TilingBrushEditor | None = None
        self.is_painting = False
        self.last_paint_pos: CellPos | None = None
        self.hover_cell: CellPos | None = None
        self.pick_start_cell: CellPos | None = None
        self.move_start_cell: CellPos | None = None
        self.move_source: BoundsInt | None = None

    def handle_mouse_down(self, pos, button, modifiers, context):
        if self.brush is None:
            return ToolResult.not_handled()

        cell = context.view_state.screen_to_cell(pos)
        if cell is None:
            return ToolResult.not_handled()
        self.hover_cell = cell

        # Right-click starts a pick rectangle
        if button == 3:
            self.pick_start_cell = cell
            return ToolResult.handled()

        if button != 1:  # Only left click
            return ToolResult.not_handled()

        if modifiers & pygame.KMOD_SHIFT:
            self.move_source = BoundsInt(cell, self._brush_size())
            self.move_start_cell = cell
            self.brush.move_start(context.view_state, context.tilemap, self.move_source)
            return ToolResult.modified(message=f"Moving {self.move_source.size} from {cell}")

        self.is_painting = True
        return self._paint_at(cell, context)

    def handle_mouse_up(self, pos, button, context):
        if self.brush is None:
            return ToolResult.not_handled()

        cell = context.view_state.screen_to_cell(pos)

        if button == 3 and self.pick_start_cell is not None:
            end = cell if cell is not None else self.pick_start_cell
            bounds = BoundsInt.from_corners(self.pick_start_cell, end)
            pivot = self.pick_start_cell - bounds.position
            self.brush.pick(context.view_state, context.tilemap, bounds, pivot)
            self.pick_start_cell = None
            logger.info("Picked %s at %s", bounds.size, bounds.position)
            return ToolResult(handled=True, message=f"Picked {bounds.size}")

        if button == 1 and self.move_source is not None:
            end = cell if cell is not None else self.move_start_cell
            dest = BoundsInt(
                self.move_source.position + (end - self.move_start_cell),
                self.move_source.size,
            )
            self.brush.move_end(context.view_state, context.tilemap, dest)
            self.move_source = None
            self.move_start_cell = None
            return ToolResult.modified(message=f"Moved to {dest.position}")

        if button == 1:
            self.is_painting = False
            self.last_paint_pos = None
        return ToolResult.handled()

    def handle_mouse_motion(self, pos, context):
        cell = context.view_state.screen_to_cell(pos)
        if cell is not None:
            self.hover_cell = cell
        if self.is_painting and cell is not None:
            return self._paint_at(cell, context)
        return ToolResult.not_handled()

    def handle_key_down(self, key, modifiers, context):
        return ToolResult.not_handled()

    def handle_key_up(self, key, context):
        return ToolResult.not_handled()

    def set_screen(self, screen: pygame.Surface):
        """Point the overlay at a new surface, keeping all brush state."""
        if self.editor is not None:
            self.editor.default_editor.screen = screen

    def draw_overlay(self, context: ToolContext):
        """Forward the per-frame overlay callback to the tiling brush editor."""
        if self.editor is None or self.hover_cell is None:
            return

        if self.pick_start_cell is not None:
            bounds = BoundsInt.from_corners(self.pick_start_cell, self.hover_cell)
            tool = BrushTool.PICK
        elif self.move_source is not None:
            bounds = BoundsInt(
                self.move_source.position + (self.hover_cell - self.move_start_cell),
                self.move_source.size,
            )
            tool = BrushTool.MOVE
        else:
            bounds = BoundsInt(self.hover_cell, self._brush_size())
            tool = BrushTool.PAINT

        self.editor.on_scene_overlay(
            context.view_state, context.tilemap, bounds, tool, self.is_painting
        )

    def on_activated(self, context):
        self.state = TilingBrushState()
        self.brush = TilingBrush(self.state, GridBrush())
        self.editor = TilingBrushEditor(self.state, GridBrushEditor(context.screen))

    def on_deactivated(self, context):
        self.reset()
        self.state = None
        self.brush = None
        self.editor = None

    def reset(self):
        self.is_painting = False
        self.last_paint_pos = None
        self.hover_cell = None
        self.pick_start_cell = None
        self.move_start_cell = None
        self.move_source = None

    def get_hotkey(self) -> int | None:
        """Return 'B' key for Tiling Brush tool."""
        return pygame.K_b

    def _brush_size(self) -> CellPos:
        """Size of the picked block, or a single cell before anything is picked."""
        if self.state is None or not self.state.has_palette:
            return SINGLE_CELL
        return self.state.palette_position.size

    def _paint_at(self, cell: CellPos, context: ToolContext) -> ToolResult:
        """Paint at a cell once per cell entered."""
        if cell == self.last_paint_pos:
            return ToolResult.handled()
        self.last_paint_pos = cell

        revision = context.tilemap.revision
        painted = self.brush.paint(context.view_state, context.tilemap, cell)
        if painted is None:
            return ToolResult.handled()

        if context.tilemap.revision == revision:
            # A move drops the lifted cells and leaves the brush empty
            if not self.brush.default_brush.cells:
                return ToolResult(handled=True, message=EMPTY_BRUSH_MESSAGE)
            return ToolResult.handled()

        return ToolResult.modified(message=f"Painted at {painted}")
