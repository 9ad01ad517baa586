"""Unit tests for TilingBrushTool pointer handling."""

from unittest.mock import Mock

import pygame
import pytest
from pygame import Rect

from editor.controllers.view_state import ViewState
from editor.tools.base_tool import BrushTool, ToolContext
from editor.tools.tiling_brush_tool import EMPTY_BRUSH_MESSAGE, TilingBrushTool
from tiling.core.geometry import BoundsInt, CellPos


def cell_center(x, y):
    """Screen position of the center of a cell (16px cells, canvas at origin)."""
    return (x * 16 + 8, y * 16 + 8)


@pytest.fixture
def context(mock_pygame, tilemap):
    screen = pygame.Surface((640, 480))
    view_state = ViewState(Rect(0, 0, 640, 480), scale=2)
    return ToolContext(tilemap, view_state, screen)


@pytest.fixture
def tool(context):
    tool = TilingBrushTool()
    tool.on_activated(context)
    return tool


class TestLifecycle:
    """Tests for activation and reset."""

    def test_hotkey_is_b(self):
        assert TilingBrushTool().get_hotkey() == pygame.K_b

    def test_inactive_tool_ignores_input(self, context):
        tool = TilingBrushTool()
        result = tool.handle_mouse_down(cell_center(1, 1), 1, 0, context)
        assert result.handled is False

    def test_activation_creates_shared_state(self, tool):
        assert tool.brush.state is tool.state
        assert tool.editor.state is tool.state

    def test_reactivation_gives_fresh_state(self, tool, context):
        tool.state.is_moving = True
        old_state = tool.state
        tool.on_deactivated(context)
        assert tool.state is None

        tool.on_activated(context)
        assert tool.state is not old_state
        assert tool.state.is_moving is False

    def test_reset_clears_pointer_state(self, tool):
        tool.is_painting = True
        tool.last_paint_pos = CellPos(1, 1)
        tool.pick_start_cell = CellPos(0, 0)
        tool.reset()
        assert tool.is_painting is False
        assert tool.last_paint_pos is None
        assert tool.pick_start_cell is None


class TestPick:
    """Tests for right-drag picking."""

    def test_right_drag_picks_rectangle(self, tool, context):
        tool.handle_mouse_down(cell_center(0, 0), 3, 0, context)
        result = tool.handle_mouse_up(cell_center(1, 2), 3, context)

        assert result.handled
        assert tool.state.palette_position == BoundsInt(CellPos(0, 0), CellPos(2, 3, 1))
        assert tool.brush.default_brush.cells[CellPos(1, 2)] == 9

    def test_pivot_is_press_cell(self, tool, context):
        tool.handle_mouse_down(cell_center(3, 3), 3, 0, context)
        tool.handle_mouse_up(cell_center(2, 2), 3, context)

        assert tool.brush.default_brush.pivot == CellPos(1, 1)

    def test_pick_overlay_uses_pick_tool(self, tool, context):
        tool.editor = Mock()
        tool.handle_mouse_down(cell_center(0, 0), 3, 0, context)
        tool.handle_mouse_motion(cell_center(1, 1), context)
        tool.draw_overlay(context)

        args = tool.editor.on_scene_overlay.call_args[0]
        assert args[2] == BoundsInt(CellPos(0, 0), CellPos(2, 2, 1))
        assert args[3] == BrushTool.PICK


class TestPaint:
    """Tests for left-drag painting."""

    def test_click_paints_block(self, tool, context):
        tool.handle_mouse_down(cell_center(0, 0), 3, 0, context)
        tool.handle_mouse_up(cell_center(1, 1), 3, context)

        result = tool.handle_mouse_down(cell_center(10, 10), 1, 0, context)

        assert result.tiles_modified
        assert context.tilemap.get_tile(CellPos(11, 11)) == 5

    def test_same_cell_paints_once(self, tool, context):
        tool.brush = Mock(wraps=tool.brush)
        tool.handle_mouse_down(cell_center(4, 4), 1, 0, context)
        tool.handle_mouse_motion(cell_center(4, 4), context)
        assert tool.brush.paint.call_count == 1

    def test_motion_without_button_does_not_paint(self, tool, context):
        result = tool.handle_mouse_motion(cell_center(4, 4), context)
        assert result.handled is False
        assert tool.hover_cell == CellPos(4, 4)

    def test_release_stops_painting(self, tool, context):
        tool.handle_mouse_down(cell_center(4, 4), 1, 0, context)
        tool.handle_mouse_up(cell_center(4, 4), 1, context)
        assert tool.is_painting is False
        assert tool.last_paint_pos is None

    def test_overlay_reports_executing(self, tool, context):
        tool.handle_mouse_down(cell_center(4, 4), 1, 0, context)
        tool.draw_overlay(context)
        tool.draw_overlay(context)
        assert tool.state.is_held is True

        tool.handle_mouse_up(cell_center(4, 4), 1, context)
        tool.draw_overlay(context)
        assert tool.state.is_held is False

    def test_click_outside_canvas_not_handled(self, tool, context):
        result = tool.handle_mouse_down((700, 700), 1, 0, context)
        assert result.handled is False


class TestMove:
    """Tests for shift-drag moves."""

    def test_shift_drag_moves_block(self, tool, context):
        tool.handle_mouse_down(cell_center(0, 0), 3, 0, context)
        tool.handle_mouse_up(cell_center(1, 1), 3, context)

        tool.handle_mouse_down(cell_center(0, 0), 1, pygame.KMOD_SHIFT, context)
        assert tool.state.is_moving is True
        assert context.tilemap.get_tile(CellPos(0, 0)) is None

        tool.handle_mouse_up(cell_center(6, 5), 1, context)
        assert tool.state.is_moving is False
        assert context.tilemap.get_tile(CellPos(6, 5)) == 0
        assert context.tilemap.get_tile(CellPos(7, 6)) == 5

    def test_move_before_pick_moves_single_cell(self, tool, context):
        tool.handle_mouse_down(cell_center(3, 3), 1, pygame.KMOD_SHIFT, context)
        tool.handle_mouse_up(cell_center(3, 8), 1, context)

        assert context.tilemap.get_tile(CellPos(3, 8)) == 15
        assert context.tilemap.get_tile(CellPos(3, 3)) is None
        assert context.tilemap.get_tile(CellPos(2, 3)) == 14

    def test_paint_after_move_reports_empty_brush(self, tool, context):
        """A move empties the brush, so later clicks stamp nothing and say so."""
        tool.handle_mouse_down(cell_center(0, 0), 3, 0, context)
        tool.handle_mouse_up(cell_center(1, 1), 3, context)
        tool.handle_mouse_down(cell_center(0, 0), 1, pygame.KMOD_SHIFT, context)
        tool.handle_mouse_up(cell_center(6, 5), 1, context)

        result = tool.handle_mouse_down(cell_center(12, 12), 1, 0, context)

        assert result.tiles_modified is False
        assert result.message == EMPTY_BRUSH_MESSAGE
        assert context.tilemap.get_tile(CellPos(12, 12)) is None


class TestPaintResult:
    """Tests for what a paint reports back to the host."""

    def test_restamping_same_tiles_is_not_a_modification(self, tool, context):
        tool.handle_mouse_down(cell_center(0, 0), 3, 0, context)
        tool.handle_mouse_up(cell_center(1, 1), 3, context)

        result = tool.handle_mouse_down(cell_center(0, 0), 1, 0, context)

        assert result.handled
        assert result.tiles_modified is False
        assert result.message is None

    def test_click_before_pick_reports_empty_brush(self, tool, context):
        result = tool.handle_mouse_down(cell_center(9, 9), 1, 0, context)
        assert result.tiles_modified is False
        assert result.message == EMPTY_BRUSH_MESSAGE


class TestSetScreen:
    """Tests for retargeting the overlay surface."""

    def test_set_screen_keeps_brush_state(self, tool, context):
        tool.handle_mouse_down(cell_center(0, 0), 3, 0, context)
        tool.handle_mouse_up(cell_center(1, 1), 3, context)
        state = tool.state
        cells = dict(tool.brush.default_brush.cells)
        new_screen = pygame.Surface((800, 600))

        tool.set_screen(new_screen)

        assert tool.state is state
        assert tool.state.palette_position == BoundsInt(CellPos(0, 0), CellPos(2, 2, 1))
        assert tool.brush.default_brush.cells == cells
        assert tool.editor.default_editor.screen is new_screen

    def test_set_screen_while_inactive_is_noop(self):
        TilingBrushTool().set_screen(pygame.Surface((10, 10)))
