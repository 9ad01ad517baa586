"""
Tiling Brush - Cell Geometry

Integer cell coordinates and axis-aligned cell boxes.
"""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class CellPos:
    """Integer cell coordinate. z is carried along but never snapped."""

    x: int = 0
    y: int = 0
    z: int = 0

    def __add__(self, other: "CellPos") -> "CellPos":
        return CellPos(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: "CellPos") -> "CellPos":
        return CellPos(self.x - other.x, self.y - other.y, self.z - other.z)

    def __str__(self) -> str:
        return f"({self.x}, {self.y}, {self.z})"


@dataclass(frozen=True)
class BoundsInt:
    """Axis-aligned integer box of cells (origin + size)."""

    position: CellPos = field(default_factory=CellPos)
    size: CellPos = field(default_factory=CellPos)

    @staticmethod
    def from_corners(a: CellPos, b: CellPos) -> "BoundsInt":
        """
        Build the box spanning two corner cells, both inclusive.

        The z component of the result is taken from ``a`` with a depth of 1.
        """
        x0, x1 = min(a.x, b.x), max(a.x, b.x)
        y0, y1 = min(a.y, b.y), max(a.y, b.y)
        return BoundsInt(CellPos(x0, y0, a.z), CellPos(x1 - x0 + 1, y1 - y0 + 1, 1))

    @property
    def is_empty(self) -> bool:
        return self.size.x < 1 or self.size.y < 1

    def cells(self):
        """Iterate every (x, y) cell of the box in row-major order at the box's z."""
        z = self.position.z
        for y in range(self.position.y, self.position.y + self.size.y):
            for x in range(self.position.x, self.position.x + self.size.x):
                yield CellPos(x, y, z)
