"""Tick-driven game engine composing grid, snake, food and collision logic."""

from __future__ import annotations

import enum
import logging
from collections.abc import Callable

import numpy as np

from grid_snake.collision import CollisionKind, detect_collision
from grid_snake.config import GameConfig
from grid_snake.entities import EntityArena
from grid_snake.food import FoodSpawner
from grid_snake.grid import Cell, Grid
from grid_snake.snake import Direction, Snake

logger = logging.getLogger(__name__)

Listener = Callable[[Cell | None], None]


class EngineEvent(enum.Enum):
    """Notifications emitted to the host while a tick runs."""

    SEGMENT_ADDED = "segment_added"
    RESET = "reset"
    FOOD_SPAWNED = "food_spawned"
    FOOD_EATEN = "food_eaten"


class GameEngine:
    """Single-snake, tick-driven game engine.

    The engine owns the entity arena, snake and food spawner. The host
    calls :meth:`step` on the movement cadence and :meth:`spawn_food` on the
    slower food cadence, one call at a time. A game over never persists: it
    clears the board and respawns the snake within the same :meth:`step`.
    """

    def __init__(
        self,
        config: GameConfig | None = None,
        rng: np.random.Generator | None = None,
    ) -> None:
        self.config = config if config is not None else GameConfig()
        self.grid = Grid(width=self.config.width, height=self.config.height)
        self.rng = rng if rng is not None else np.random.default_rng(self.config.seed)
        self.arena = EntityArena()

        self.snake = Snake(
            self.arena,
            head=tuple(self.config.initial_head),
            segment=tuple(self.config.initial_segment),
            direction=self.config.initial_direction,
            last_tail_position=tuple(self.config.initial_last_tail),
        )
        self.food = FoodSpawner(
            self.arena, self.grid, rng=self.rng,
            max_attempts=self.config.placement_attempts,
        )

        self.tick = 0
        self.rounds = 0
        self.longest = self.snake.length
        self.game_over = False
        self.last_collision: CollisionKind | None = None
        self._requested_direction: Direction | None = None
        self._listeners: dict[EngineEvent, list[Listener]] = {
            event: [] for event in EngineEvent
        }

    # --- events ---

    def subscribe(self, event: EngineEvent, callback: Listener) -> None:
        """Register *callback* to be called synchronously when *event* fires."""
        self._listeners[event].append(callback)

    def unsubscribe(self, event: EngineEvent, callback: Listener) -> None:
        self._listeners[event].remove(callback)

    def _emit(self, event: EngineEvent, payload: Cell | None = None) -> None:
        for callback in list(self._listeners[event]):
            callback(payload)

    # --- input ---

    def set_direction(self, direction: Direction) -> None:
        """Record the requested heading; the latest request before a step wins."""
        self._requested_direction = direction

    # --- ticks ---

    def step(self) -> dict:
        """Advance the game by one movement tick.

        Returns the full game state as a serializable dict.
        """
        if self._requested_direction is not None:
            self.snake.set_heading(self._requested_direction)
            self._requested_direction = None

        head = self.snake.advance()

        growth = self.food.check_eating(head)
        for _ in range(growth):
            self._emit(EngineEvent.FOOD_EATEN, head)
            self.snake.grow()
            logger.debug("Snake grew to length %d.", self.snake.length)
            self._emit(EngineEvent.SEGMENT_ADDED, self.snake.last_tail_position)

        self.tick += 1
        collision = detect_collision(self.grid, head, self.snake.pre_move_segments)
        self.last_collision = collision
        self.game_over = collision is not None
        if collision is not None:
            self._reset_board(collision)
        else:
            self.longest = max(self.longest, self.snake.length)

        return self.get_state()

    def spawn_food(self) -> Cell | None:
        """Run one food tick: place a food item on a free cell, if any."""
        cell = self.food.spawn(self.occupied_cells())
        if cell is not None:
            self._emit(EngineEvent.FOOD_SPAWNED, cell)
        return cell

    def _reset_board(self, collision: CollisionKind) -> None:
        """Clear every entity and respawn the snake in its initial layout."""
        logger.info(
            "Game over (%s) at tick %d with length %d.",
            collision.value, self.tick, self.snake.length,
        )
        self.arena.clear()
        self.snake.reset()
        self.rounds += 1
        self._emit(EngineEvent.RESET)

    # --- queries ---

    @property
    def head_position(self) -> Cell:
        return self.snake.head_position

    @property
    def segment_positions(self) -> list[Cell]:
        return self.snake.segment_positions

    @property
    def food_positions(self) -> list[Cell]:
        return self.food.positions

    def occupied_cells(self) -> list[Cell]:
        """Every cell holding the snake or food."""
        return self.arena.positions()

    def get_state(self) -> dict:
        """Return the full, serializable game state."""
        return {
            "tick": self.tick,
            "rounds": self.rounds,
            "longest": self.longest,
            "game_over": self.game_over,
            "collision": (
                self.last_collision.value if self.last_collision else None
            ),
            "grid": self.grid.to_dict(),
            "snake": self.snake.to_dict(),
            "food": self.food.to_dict(),
        }
