"""
Tiling Brush - Default Grid Brush

Plain stamp brush: picks a block of cells, paints it back at the pointer,
and lifts/drops cells for move gestures. The tiling brush wraps this one
and calls it explicitly for the default behavior.
"""

import logging
from typing import Optional

from .geometry import BoundsInt, CellPos
from .tilemap import Tilemap

logger = logging.getLogger(__name__)


class GridBrush:
    """Stamp brush holding a block of picked cells."""

    def __init__(self):
        # Local cell offset (relative to the picked box origin) -> tile id, None means erase
        self.cells: dict[CellPos, Optional[int]] = {}
        self.size: CellPos = CellPos()
        self.pivot: CellPos = CellPos()

    def reset(self):
        """Empty the brush."""
        self.cells = {}
        self.size = CellPos()
        self.pivot = CellPos()

    def pick(self, grid, target: Tilemap, bounds: BoundsInt, pick_start: CellPos):
        """
        Copy the tiles inside a box into the brush.

        Args:
            grid: Grid layout the pick happened on
            target: Tilemap to pick from
            bounds: Box of cells to copy
            pick_start: Pivot of the brush, relative to the box origin
        """
        self.reset()
        self.size = bounds.size
        self.pivot = pick_start
        for cell, tile in target.cells_in(bounds):
            self.cells[cell - bounds.position] = tile
        logger.debug("Picked %d cells from %s, pivot %s", len(self.cells), bounds, pick_start)

    def paint(self, grid, target: Tilemap, position: CellPos):
        """Stamp the brush so that its pivot lands on ``position``."""
        origin = position - self.pivot
        for offset, tile in self.cells.items():
            target.set_tile(origin + offset, tile)

    def move_start(self, grid, target: Tilemap, bounds: BoundsInt):
        """Lift the tiles inside a box into the brush and erase them from the target."""
        self.pick(grid, target, bounds, CellPos())
        for cell in bounds.cells():
            target.set_tile(cell, None)

    def move_end(self, grid, target: Tilemap, bounds: BoundsInt):
        """Drop the lifted tiles at the box origin and empty the brush."""
        self.paint(grid, target, bounds.position)
        self.reset()
