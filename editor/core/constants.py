"""
Tiling Brush Editor - Constants

All configuration constants for the editor including dimensions,
colors, fonts and default grid size.
"""

# Constants
TILE_SIZE = 8
DEFAULT_GRID_WIDTH = 48
DEFAULT_GRID_HEIGHT = 32
DEFAULT_SCALE = 3

# UI Layout
SCREEN_WIDTH = 1200
SCREEN_HEIGHT = 800
TOOLBAR_HEIGHT = 40
STATUS_HEIGHT = 30
CANVAS_OFFSET_X = 0
CANVAS_OFFSET_Y = TOOLBAR_HEIGHT
FPS = 60

# Colors
COLOR_BG = (48, 48, 48)
COLOR_TOOLBAR = (32, 32, 32)
COLOR_STATUS = (32, 32, 32)
COLOR_GRID = (80, 80, 80)
COLOR_SELECTION = (255, 255, 0)
COLOR_TEXT = (255, 255, 255)
COLOR_LABEL_SHADOW = (0, 0, 0)

# Overlay label
LABEL_FONT_NAME = "monospace"
LABEL_FONT_SIZE = 14

# Tile colors, indexed by tile id
TILE_COLORS = [
    (12, 147, 0),
    (0, 82, 0),
    (92, 228, 48),
    (188, 190, 0),
    (100, 176, 255),
    (200, 76, 12),
    (160, 160, 160),
    (255, 255, 255),
]
