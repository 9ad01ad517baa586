"""
Tiling Brush - Snapping

Offset arithmetic that aligns a paint position to the tiling period of the
picked block, relative to the cell where the gesture started.
"""

from typing import Optional

from .geometry import CellPos


def truncated_remainder(value: int, divisor: int) -> int:
    """
    Remainder that takes the sign of the dividend.

    Python's ``%`` floors; the snapping offsets are defined on the
    truncating remainder, so ``truncated_remainder(-5, 4) == -1``.
    """
    rem = abs(value) % abs(divisor)
    return -rem if value < 0 else rem


def axis_offset(diff: int, block_size: int) -> int:
    """
    Smallest offset that moves ``diff`` onto a multiple of ``block_size``.

    Two candidates are compared: the remainder itself (stopping short of the
    boundary) and the remainder wrapped to the other side of zero (going past
    it). Ties keep the plain remainder.

    Args:
        diff: Distance from the gesture anchor along one axis
        block_size: Picked block size along that axis, must be >= 1

    Returns:
        Offset congruent to ``diff`` modulo ``block_size`` with minimal magnitude
    """
    offset1 = truncated_remainder(diff, block_size)
    offset2 = offset1 + (1 if diff < 0 else -1) * block_size
    return offset1 if abs(offset1) <= abs(offset2) else offset2


def axis_threshold(block_size: int) -> int:
    """Largest offset that still snaps: half a block for blocks over 2 cells, else exact alignment only."""
    return block_size // 2 if block_size > 2 else 0


def snap_position(
    position: CellPos, anchor: CellPos, block_size: CellPos
) -> Optional[CellPos]:
    """
    Snap a paint position to the tiling grid anchored at ``anchor``.

    Only x and y are snapped; z passes through.

    Args:
        position: Cell the pointer is over
        anchor: Cell where the current gesture started
        block_size: Size of the picked block (x and y must be >= 1)

    Returns:
        Snapped cell, or None when either axis is further from a tile
        boundary than its threshold (the paint is suppressed)

    Raises:
        ValueError: If the block size is zero or negative on x or y
    """
    if block_size.x < 1 or block_size.y < 1:
        raise ValueError(f"Block size must be at least 1x1, got {block_size}")

    diff = position - anchor
    offset_x = axis_offset(diff.x, block_size.x)
    offset_y = axis_offset(diff.y, block_size.y)

    if abs(offset_x) > axis_threshold(block_size.x):
        return None
    if abs(offset_y) > axis_threshold(block_size.y):
        return None

    return CellPos(position.x - offset_x, position.y - offset_y, position.z)
