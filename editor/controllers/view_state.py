"""
Tiling Brush Editor - View State

Manages viewport camera position, zoom, and coordinate transformations.
This is the grid layout handed to brushes: it converts cells to world
(screen) space for overlays.
"""


from pygame import Rect

from editor.core.constants import TILE_SIZE
from tiling.core.geometry import BoundsInt, CellPos


class ViewState:
    """Manages viewport camera and coordinate transformations."""

    def __init__(
        self, canvas_rect: Rect, offset_x: int = 0, offset_y: int = 0, scale: int = 4
    ):
        """
        Initialize view state.

        Args:
            canvas_rect: The canvas drawing area (screen coordinates)
            offset_x: Horizontal scroll offset in pixels
            offset_y: Vertical scroll offset in pixels
            scale: Zoom scale multiplier (1-8)
        """
        self.canvas_rect = canvas_rect
        self.offset_x = offset_x
        self.offset_y = offset_y
        self.scale = scale

    @property
    def tile_size(self) -> int:
        """Get the current tile size in pixels (based on scale)."""
        return TILE_SIZE * self.scale

    def screen_to_cell(self, screen_pos: tuple[int, int]) -> CellPos | None:
        """
        Convert screen position to cell coordinates.

        Args:
            screen_pos: Screen position (x, y) in pixels

        Returns:
            Cell coordinates, or None if outside canvas
        """
        if not self.canvas_rect.collidepoint(screen_pos):
            return None

        local_x = screen_pos[0] - self.canvas_rect.x + self.offset_x
        local_y = screen_pos[1] - self.canvas_rect.y + self.offset_y

        return CellPos(local_x // self.tile_size, local_y // self.tile_size)

    def cell_to_world(self, cell: CellPos) -> tuple[int, int]:
        """
        Convert cell coordinates to screen position (top-left corner).

        Args:
            cell: Cell coordinates

        Returns:
            Screen position (x, y) in pixels
        """
        x = self.canvas_rect.x + cell.x * self.tile_size - self.offset_x
        y = self.canvas_rect.y + cell.y * self.tile_size - self.offset_y
        return (x, y)

    def cell_rect(self, bounds: BoundsInt) -> Rect:
        """Screen rectangle covered by a box of cells."""
        x, y = self.cell_to_world(bounds.position)
        return Rect(x, y, bounds.size.x * self.tile_size, bounds.size.y * self.tile_size)

    def is_cell_visible(self, cell: CellPos) -> bool:
        """
        Check if a cell is visible in the current viewport.

        Args:
            cell: Cell coordinates

        Returns:
            True if cell is visible in viewport
        """
        x, y = self.cell_to_world(cell)
        tile_size = self.tile_size

        return not (
            x + tile_size < self.canvas_rect.x
            or x > self.canvas_rect.right
            or y + tile_size < self.canvas_rect.y
            or y > self.canvas_rect.bottom
        )
