"""Entity arena mapping opaque handles to board positions."""

from __future__ import annotations

import enum
from collections.abc import Iterator

from grid_snake.grid import Cell


class EntityKind(enum.IntEnum):
    """What a spawned entity represents on the board."""

    HEAD = 0
    SEGMENT = 1
    FOOD = 2


class EntityArena:
    """Owns every positioned entity in a game.

    Handles are plain integers handed out in increasing order and never
    reused, so a despawned handle stays invalid for the arena's lifetime.
    Iteration order is spawn order.
    """

    def __init__(self) -> None:
        self._positions: dict[int, Cell] = {}
        self._kinds: dict[int, EntityKind] = {}
        self._next_handle = 0

    def __len__(self) -> int:
        return len(self._positions)

    def __contains__(self, handle: object) -> bool:
        return handle in self._positions

    def __iter__(self) -> Iterator[int]:
        return iter(list(self._positions))

    def spawn(self, kind: EntityKind, position: Cell) -> int:
        """Create an entity at *position* and return its handle."""
        handle = self._next_handle
        self._next_handle += 1
        self._positions[handle] = position
        self._kinds[handle] = kind
        return handle

    def despawn(self, handle: int) -> Cell:
        """Remove an entity, returning its last position."""
        del self._kinds[handle]
        return self._positions.pop(handle)

    def position(self, handle: int) -> Cell:
        return self._positions[handle]

    def move(self, handle: int, position: Cell) -> None:
        if handle not in self._positions:
            raise KeyError(handle)
        self._positions[handle] = position

    def kind(self, handle: int) -> EntityKind:
        return self._kinds[handle]

    def handles(self, kind: EntityKind | None = None) -> list[int]:
        """Return live handles, optionally filtered by *kind*."""
        if kind is None:
            return list(self._positions)
        return [h for h, k in self._kinds.items() if k == kind]

    def positions(self, kind: EntityKind | None = None) -> list[Cell]:
        """Return positions of live entities, optionally filtered by *kind*."""
        return [self._positions[h] for h in self.handles(kind)]

    def clear(self) -> None:
        """Despawn every entity."""
        self._positions.clear()
        self._kinds.clear()
