"""Grid geometry for the snake board."""

from __future__ import annotations

from collections.abc import Iterable

import numpy as np

# An (x, y) board coordinate.
Cell = tuple[int, int]


class Grid:
    """Fixed-size integer lattice.

    Coordinates use (x, y) ordering with ``0 <= x < width`` and
    ``0 <= y < height``. Occupancy masks are NumPy arrays indexed ``[y, x]``.
    """

    def __init__(self, width: int = 10, height: int = 10) -> None:
        if width < 1 or height < 1:
            raise ValueError("Grid dimensions must be at least 1×1.")
        self.width = width
        self.height = height

    @property
    def area(self) -> int:
        """Total number of cells on the board."""
        return self.width * self.height

    def in_bounds(self, x: int, y: int) -> bool:
        """Check whether a coordinate lies within the grid."""
        return 0 <= x < self.width and 0 <= y < self.height

    def all_cells(self) -> list[Cell]:
        """Return every cell, row by row."""
        return [(x, y) for y in range(self.height) for x in range(self.width)]

    def occupancy(self, occupied: Iterable[Cell]) -> np.ndarray:
        """Build a boolean mask with ``True`` at every in-bounds occupied cell."""
        mask = np.zeros((self.height, self.width), dtype=bool)
        for x, y in occupied:
            if self.in_bounds(x, y):
                mask[y, x] = True
        return mask

    def free_cells(self, occupied: Iterable[Cell]) -> list[Cell]:
        """Return all cells not present in *occupied*."""
        ys, xs = np.where(~self.occupancy(occupied))
        return list(zip(xs.tolist(), ys.tolist(), strict=True))

    def to_dict(self) -> dict:
        """Serialize grid dimensions to a dictionary."""
        return {"width": self.width, "height": self.height}
