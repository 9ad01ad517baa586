"""
Tiling Brush - Interaction State

State shared between the tiling brush and its overlay renderer for the
lifetime of one tool activation.
"""

from .geometry import BoundsInt, CellPos


class TilingBrushState:
    """Interaction flags, gesture anchor and last picked block."""

    def __init__(self):
        self.is_executing: bool = False  # Brush was executing last frame
        self.is_held: bool = False  # Executing this frame and the one before
        self.is_moving: bool = False  # Between move-start and move-end
        self.palette_position: BoundsInt = BoundsInt()
        self.tile_start_position: CellPos = CellPos()

    @property
    def has_palette(self) -> bool:
        """True once a block of at least 1x1 has been picked."""
        return not self.palette_position.is_empty

    def update_execution(self, executing: bool):
        """
        Record this frame's execution flag.

        ``is_held`` must be derived from the previous ``is_executing`` before
        that flag is overwritten.
        """
        self.is_held = executing and self.is_executing
        self.is_executing = executing

    def reset(self):
        """Clear all state."""
        self.__init__()
