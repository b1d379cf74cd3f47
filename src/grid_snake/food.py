"""Food placement and eating detection."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import TYPE_CHECKING

import numpy as np

from grid_snake.entities import EntityArena, EntityKind

if TYPE_CHECKING:
    from grid_snake.grid import Cell, Grid

logger = logging.getLogger(__name__)

# Above this occupied fraction, sampling is skipped in favour of enumeration.
_DENSE_OCCUPANCY = 0.5


class FoodSpawner:
    """Places food on free cells and detects when the snake eats it.

    Uses a seeded NumPy RNG for deterministic, reproducible placement.
    Placement draws uniformly from the whole board and rejects occupied
    cells. The number of draws is bounded: once *max_attempts* is spent, or
    when the board is densely occupied, a free cell is chosen directly from
    the enumerated free cells instead.
    """

    def __init__(
        self,
        arena: EntityArena,
        grid: Grid,
        rng: np.random.Generator | None = None,
        max_attempts: int | None = None,
    ) -> None:
        if max_attempts is not None and max_attempts < 0:
            raise ValueError("max_attempts must be >= 0.")
        self.arena = arena
        self.grid = grid
        self.rng = rng if rng is not None else np.random.default_rng()
        self.max_attempts = grid.area if max_attempts is None else max_attempts

    @property
    def positions(self) -> list[Cell]:
        return self.arena.positions(EntityKind.FOOD)

    def place_food(self, occupied: Iterable[Cell]) -> Cell | None:
        """Pick a uniformly random free cell, or ``None`` if the board is full."""
        taken = set(occupied)
        if len(taken) < self.grid.area * _DENSE_OCCUPANCY:
            for _ in range(self.max_attempts):
                cell = (
                    int(self.rng.integers(self.grid.width)),
                    int(self.rng.integers(self.grid.height)),
                )
                if cell not in taken:
                    return cell

        free = self.grid.free_cells(taken)
        if not free:
            logger.warning("No free cells available for food placement.")
            return None
        return free[int(self.rng.integers(len(free)))]

    def spawn(self, occupied: Iterable[Cell]) -> Cell | None:
        """Place one food entity on a free cell and return its position."""
        cell = self.place_food(occupied)
        if cell is None:
            return None
        self.arena.spawn(EntityKind.FOOD, cell)
        logger.debug("Food spawned at %s.", cell)
        return cell

    def check_eating(self, head: Cell) -> int:
        """Remove all food at *head*; return one growth signal per item eaten."""
        eaten = 0
        for handle in self.arena.handles(EntityKind.FOOD):
            if self.arena.position(handle) == head:
                self.arena.despawn(handle)
                eaten += 1
        return eaten

    def to_dict(self) -> dict:
        """Serialize food state to a dictionary."""
        return {"positions": [list(p) for p in self.positions]}
