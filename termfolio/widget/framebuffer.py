"""
Frame buffer for sprite animation.

A Frame is a fixed-size 2D grid of ANSI 256 color codes backed by a numpy
array. TRANSPARENT marks cells that were never painted so the background
shows through. Every write is clipped to the frame bounds.
"""

from __future__ import annotations

import numpy as np

# Sentinel for unpainted cells
TRANSPARENT = -1

# Default frame edge length in cells
FRAME_SIZE = 64


class Frame:
    """2D grid of color values with clipping writes."""

    def __init__(self, width: int = FRAME_SIZE, height: int = FRAME_SIZE):
        if width <= 0 or height <= 0:
            raise ValueError(f"Frame dimensions must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        self.cells = np.full((height, width), TRANSPARENT, dtype=np.int16)

    @property
    def size(self) -> tuple[int, int]:
        return self.width, self.height

    @property
    def frozen(self) -> bool:
        return not self.cells.flags.writeable

    def __getitem__(self, pos: tuple[int, int]) -> int:
        x, y = pos
        if 0 <= x < self.width and 0 <= y < self.height:
            return int(self.cells[y, x])
        return TRANSPARENT  # Out of bounds reads as unpainted

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Frame):
            return NotImplemented
        return self.size == other.size and np.array_equal(self.cells, other.cells)

    __hash__ = None  # mutable

    def __repr__(self) -> str:
        return f"Frame({self.width}x{self.height}, painted={self.painted_count()})"

    def put(self, x: int, y: int, color: int) -> None:
        """Paint a single cell. Out-of-bounds writes are ignored."""
        if 0 <= x < self.width and 0 <= y < self.height:
            self.cells[y, x] = color

    def fill(self, x: int, y: int, w: int, h: int, color: int) -> None:
        """Paint a rectangle, clipped to the frame."""
        x1, y1 = max(0, x), max(0, y)
        x2, y2 = min(self.width, x + w), min(self.height, y + h)
        if x1 < x2 and y1 < y2:
            self.cells[y1:y2, x1:x2] = color

    def clear(self) -> None:
        """Reset every cell to TRANSPARENT."""
        self.cells.fill(TRANSPARENT)

    def copy(self) -> "Frame":
        """Writable copy of this frame."""
        other = Frame(self.width, self.height)
        other.cells[:] = self.cells
        return other

    def freeze(self) -> "Frame":
        """Make the frame read-only so it can be shared between sequences."""
        self.cells.flags.writeable = False
        return self

    def painted_mask(self) -> np.ndarray:
        """Boolean array, True where a color was painted."""
        return self.cells != TRANSPARENT

    def painted_count(self) -> int:
        return int(np.count_nonzero(self.painted_mask()))

    def bbox(self) -> tuple[int, int, int, int] | None:
        """Bounding box (x1, y1, x2, y2) of painted cells, or None if empty."""
        ys, xs = np.nonzero(self.painted_mask())
        if len(xs) == 0:
            return None
        return int(xs.min()), int(ys.min()), int(xs.max()) + 1, int(ys.max()) + 1

    def to_rows(self) -> list[list[int]]:
        """Nested lists of color codes, one list per row."""
        return self.cells.tolist()
