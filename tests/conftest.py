"""Shared pytest fixtures for brush and editor tests."""

import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pygame
import pytest

from tiling.core.brush_state import TilingBrushState
from tiling.core.geometry import BoundsInt, CellPos
from tiling.core.grid_brush import GridBrush
from tiling.core.tilemap import Tilemap
from tiling.core.tiling_brush import TilingBrush


@pytest.fixture
def mock_pygame():
    """Initialize pygame for tests."""
    pygame.init()
    yield
    pygame.quit()


@pytest.fixture
def state():
    """Fresh interaction state."""
    return TilingBrushState()


@pytest.fixture
def tilemap():
    """Tilemap with a 4x4 block of distinct tiles at the origin."""
    tiles = Tilemap()
    for y in range(4):
        for x in range(4):
            tiles.set_tile(CellPos(x, y), y * 4 + x)
    tiles.modified = False
    return tiles


@pytest.fixture
def brush(state):
    """Tiling brush over a real GridBrush."""
    return TilingBrush(state, GridBrush())


@pytest.fixture
def picked_brush(brush, tilemap):
    """Tiling brush with the 4x4 origin block picked."""
    brush.pick(None, tilemap, BoundsInt(CellPos(0, 0), CellPos(4, 4, 1)), CellPos())
    return brush
