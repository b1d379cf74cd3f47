"""Game-over detection after a snake move."""

from __future__ import annotations

import enum
from collections.abc import Iterable

from grid_snake.grid import Cell, Grid


class CollisionKind(enum.Enum):
    """Why a move ended the round."""

    WALL = "wall"
    SELF = "self"


def detect_collision(
    grid: Grid,
    head: Cell,
    pre_move_segments: Iterable[Cell],
) -> CollisionKind | None:
    """Test a freshly moved head against the walls and the old body.

    Both checks always run. A move that fails both still yields a single
    signal, reported as :attr:`CollisionKind.WALL`.
    """
    hit_wall = not grid.in_bounds(*head)
    hit_self = head in set(pre_move_segments)
    if hit_wall:
        return CollisionKind.WALL
    if hit_self:
        return CollisionKind.SELF
    return None
