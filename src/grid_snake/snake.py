"""Snake representation and movement logic."""

from __future__ import annotations

import enum

from grid_snake.entities import EntityArena, EntityKind
from grid_snake.grid import Cell


class Direction(enum.Enum):
    """Cardinal headings with (dx, dy) board deltas.

    The board's y axis points up: UP increases y, DOWN decreases it.
    """

    LEFT = (-1, 0)
    UP = (0, 1)
    RIGHT = (1, 0)
    DOWN = (0, -1)

    def opposite(self) -> Direction:
        return _OPPOSITES[self]

    @classmethod
    def parse(cls, name: str) -> Direction:
        """Look up a direction by case-insensitive name."""
        try:
            return cls[name.strip().upper()]
        except KeyError:
            raise ValueError(f"Unknown direction: {name!r}.") from None


# Pairs that would cause an instant 180° reversal.
_OPPOSITES: dict[Direction, Direction] = {
    Direction.LEFT: Direction.RIGHT,
    Direction.UP: Direction.DOWN,
    Direction.RIGHT: Direction.LEFT,
    Direction.DOWN: Direction.UP,
}


class Snake:
    """A snake stored as entity handles in an :class:`EntityArena`.

    ``segments`` holds segment handles in insertion order: index 0 trails
    directly behind the head and the last handle is the tail. Positions are
    always read from the arena, never from list indices.
    """

    def __init__(
        self,
        arena: EntityArena,
        head: Cell = (4, 4),
        segment: Cell = (4, 5),
        direction: Direction = Direction.DOWN,
        last_tail_position: Cell = (4, 6),
    ) -> None:
        if head == segment:
            raise ValueError("Head and initial segment must not overlap.")
        self.arena = arena
        self._initial = (head, segment, direction, last_tail_position)
        self.head: int = -1
        self.segments: list[int] = []
        self.direction = direction
        self.last_tail_position = last_tail_position
        self.pre_move_segments: list[Cell] = []
        self._spawn()

    def _spawn(self) -> None:
        head, segment, direction, last_tail = self._initial
        self.head = self.arena.spawn(EntityKind.HEAD, head)
        self.segments = [self.arena.spawn(EntityKind.SEGMENT, segment)]
        self.direction = direction
        self.last_tail_position = last_tail
        self.pre_move_segments = []

    @property
    def head_position(self) -> Cell:
        return self.arena.position(self.head)

    @property
    def segment_positions(self) -> list[Cell]:
        return [self.arena.position(s) for s in self.segments]

    @property
    def cells(self) -> list[Cell]:
        """Head cell followed by every segment cell."""
        return [self.head_position, *self.segment_positions]

    @property
    def length(self) -> int:
        return 1 + len(self.segments)

    def set_heading(self, requested: Direction) -> None:
        """Change heading, ignoring 180° reversals."""
        if requested != self.direction.opposite():
            self.direction = requested

    def next_head(self) -> Cell:
        """Compute the next head position without moving."""
        dx, dy = self.direction.value
        x, y = self.head_position
        return x + dx, y + dy

    def advance(self) -> Cell:
        """Move one step in the current heading and return the new head cell.

        Each segment takes the cell vacated by the entity ahead of it. The
        tail's previous cell is kept in ``last_tail_position`` for growth and
        the pre-shift segment cells in ``pre_move_segments`` for collision.
        """
        previous = self.segment_positions
        last_head = self.head_position
        new_head = self.next_head()

        self.arena.move(self.head, new_head)
        trail = [last_head, *previous[:-1]]
        for handle, cell in zip(self.segments, trail, strict=True):
            self.arena.move(handle, cell)

        self.pre_move_segments = previous
        self.last_tail_position = previous[-1] if previous else last_head
        return new_head

    def grow(self) -> int:
        """Append one segment at the cell the tail just vacated."""
        handle = self.arena.spawn(EntityKind.SEGMENT, self.last_tail_position)
        self.segments.append(handle)
        return handle

    def occupies(self, x: int, y: int) -> bool:
        """Check whether the snake occupies a given cell."""
        return (x, y) in self.cells

    def reset(self) -> None:
        """Despawn this snake's entities and restore the spawn configuration."""
        for handle in [self.head, *self.segments]:
            if handle in self.arena:
                self.arena.despawn(handle)
        self._spawn()

    def to_dict(self) -> dict:
        """Serialize snake state to a dictionary."""
        return {
            "head": list(self.head_position),
            "segments": [list(seg) for seg in self.segment_positions],
            "direction": self.direction.name.lower(),
            "last_tail_position": list(self.last_tail_position),
        }
