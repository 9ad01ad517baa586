"""
Tiling Brush - Brush

Brush that tiles the picked block across grid cells instead of stamping
overlapping copies. Positions that do not line up with the block period
(relative to where the stroke started) are either snapped onto it or
skipped.
"""

import logging
from typing import Optional

from .brush_state import TilingBrushState
from .geometry import BoundsInt, CellPos
from .grid_brush import GridBrush
from .snapping import snap_position
from .tilemap import Tilemap

logger = logging.getLogger(__name__)


class TilingBrush:
    """Snapping wrapper around a default brush."""

    def __init__(self, state: TilingBrushState, default_brush: Optional[GridBrush] = None):
        """
        Args:
            state: Interaction state shared with the overlay renderer
            default_brush: Brush providing the standard behavior (default: GridBrush)
        """
        self.state = state
        self.default_brush = default_brush if default_brush is not None else GridBrush()

    def paint(self, grid, target: Tilemap, position: CellPos) -> Optional[CellPos]:
        """
        Paint the picked block at the nearest tile-aligned cell.

        Returns:
            The cell actually painted, or None if the paint was suppressed
        """
        state = self.state

        # Moved content is dropped where the user puts it
        if state.is_moving:
            self.default_brush.paint(grid, target, position)
            return position

        if not state.is_held:
            state.tile_start_position = position

        if not state.has_palette:
            logger.debug("No block picked yet, painting %s unsnapped", position)
            self.default_brush.paint(grid, target, position)
            return position

        snapped = snap_position(
            position, state.tile_start_position, state.palette_position.size
        )
        if snapped is None:
            logger.debug(
                "Skipped %s (anchor %s, block %s)",
                position,
                state.tile_start_position,
                state.palette_position.size,
            )
            return None

        self.default_brush.paint(grid, target, snapped)
        return snapped

    def pick(self, grid, target: Tilemap, bounds: BoundsInt, pick_start: CellPos):
        """Pick tiles as usual and record the box size as the tiling period."""
        self.default_brush.pick(grid, target, bounds, pick_start)
        self.state.palette_position = bounds

    def move_start(self, grid, target: Tilemap, bounds: BoundsInt):
        self.default_brush.move_start(grid, target, bounds)
        self.state.is_moving = True

    def move_end(self, grid, target: Tilemap, bounds: BoundsInt):
        self.default_brush.move_end(grid, target, bounds)
        self.state.is_moving = False
