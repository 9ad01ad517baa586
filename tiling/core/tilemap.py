"""
Tiling Brush - Tilemap

Sparse in-memory layer of tile ids addressed by cell coordinate.
"""

from typing import Iterator, Optional

from .geometry import BoundsInt, CellPos


class Tilemap:
    """Sparse tile layer. Cells that were never painted (or were erased) are empty."""

    def __init__(self):
        self.tiles: dict[CellPos, int] = {}
        self.modified = False
        self.revision = 0  # Bumped on every cell that actually changes

    def __len__(self) -> int:
        return len(self.tiles)

    def get_tile(self, cell: CellPos) -> Optional[int]:
        """Get the tile at a cell, or None if empty."""
        return self.tiles.get(cell)

    def set_tile(self, cell: CellPos, tile: Optional[int]):
        """
        Set the tile at a cell.

        Args:
            cell: Target cell
            tile: Tile id, or None to erase the cell
        """
        if tile is None:
            if self.tiles.pop(cell, None) is not None:
                self._mark_changed()
            return

        if self.tiles.get(cell) != tile:
            self.tiles[cell] = tile
            self._mark_changed()

    def cells_in(self, bounds: BoundsInt) -> Iterator[tuple[CellPos, Optional[int]]]:
        """Yield (cell, tile) for every cell of the box, including empty ones."""
        for cell in bounds.cells():
            yield cell, self.tiles.get(cell)

    def clear(self):
        """Erase every cell."""
        if self.tiles:
            self.tiles.clear()
            self._mark_changed()

    def _mark_changed(self):
        self.modified = True
        self.revision += 1
