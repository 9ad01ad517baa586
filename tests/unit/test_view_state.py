"""Unit tests for ViewState coordinate transforms."""

import pytest
from pygame import Rect

from editor.controllers.view_state import ViewState
from tiling.core.geometry import BoundsInt, CellPos


@pytest.fixture
def view_state():
    """Canvas at (0, 40), 8px tiles at scale 2 -> 16px cells."""
    return ViewState(Rect(0, 40, 640, 480), offset_x=0, offset_y=0, scale=2)


class TestViewState:
    """Tests for cell/screen conversion."""

    def test_tile_size(self, view_state):
        assert view_state.tile_size == 16

    def test_screen_to_cell(self, view_state):
        assert view_state.screen_to_cell((33, 57)) == CellPos(2, 1)

    def test_screen_to_cell_outside_canvas(self, view_state):
        assert view_state.screen_to_cell((10, 10)) is None

    def test_cell_to_world(self, view_state):
        assert view_state.cell_to_world(CellPos(2, 1)) == (32, 56)

    def test_offset_applies(self):
        view_state = ViewState(Rect(0, 0, 640, 480), offset_x=16, offset_y=32, scale=2)
        assert view_state.cell_to_world(CellPos(1, 2)) == (0, 0)
        assert view_state.screen_to_cell((0, 0)) == CellPos(1, 2)

    def test_round_trip_top_left(self, view_state):
        cell = CellPos(5, 7)
        assert view_state.screen_to_cell(view_state.cell_to_world(cell)) == cell

    def test_cell_rect(self, view_state):
        rect = view_state.cell_rect(BoundsInt(CellPos(1, 1), CellPos(3, 2, 1)))
        assert rect == Rect(16, 56, 48, 32)

    def test_visibility(self, view_state):
        assert view_state.is_cell_visible(CellPos(0, 0))
        assert not view_state.is_cell_visible(CellPos(100, 0))
