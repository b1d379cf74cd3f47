"""Asyncio host loop driving the movement and food ticks."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable

from grid_snake.engine import GameEngine
from grid_snake.snake import Direction

logger = logging.getLogger(__name__)


class TickScheduler:
    """Runs both tick kinds of a :class:`GameEngine` on one event loop.

    Movement and food ticks have independent intervals but share one lock,
    so a tick always runs to completion before the other kind can start.
    """

    def __init__(
        self,
        engine: GameEngine,
        move_interval_ms: int | None = None,
        food_interval_ms: int | None = None,
        on_state: Callable[[dict], None] | None = None,
    ) -> None:
        self.engine = engine
        self.move_interval_ms = (
            move_interval_ms
            if move_interval_ms is not None
            else engine.config.move_interval_ms
        )
        self.food_interval_ms = (
            food_interval_ms
            if food_interval_ms is not None
            else engine.config.food_interval_ms
        )
        if self.move_interval_ms <= 0 or self.food_interval_ms <= 0:
            raise ValueError("Tick intervals must be positive.")
        self.on_state = on_state
        self.lock = asyncio.Lock()
        self._tasks: list[asyncio.Task] = []

    @property
    def running(self) -> bool:
        return any(not t.done() for t in self._tasks)

    def start(self) -> None:
        """Start both tick loops on the running event loop."""
        if self.running:
            raise RuntimeError("Scheduler is already running.")
        self._tasks = [
            asyncio.create_task(self._loop("move", self.move_interval_ms, self._move_tick)),
            asyncio.create_task(self._loop("food", self.food_interval_ms, self._food_tick)),
        ]
        logger.info(
            "Tick loops started (move=%dms, food=%dms).",
            self.move_interval_ms, self.food_interval_ms,
        )

    async def stop(self) -> None:
        """Cancel both tick loops and wait for them to finish."""
        for task in self._tasks:
            if not task.done():
                task.cancel()
        if self._tasks:
            await asyncio.gather(*self._tasks, return_exceptions=True)
        self._tasks = []

    def set_direction(self, direction: Direction) -> None:
        """Forward a heading request from the host's input layer."""
        self.engine.set_direction(direction)

    def _move_tick(self) -> None:
        state = self.engine.step()
        if self.on_state is not None:
            self.on_state(state)

    def _food_tick(self) -> None:
        self.engine.spawn_food()

    async def _loop(self, name: str, interval_ms: int, tick: Callable[[], None]) -> None:
        interval = interval_ms / 1000.0
        try:
            while True:
                await asyncio.sleep(interval)
                async with self.lock:
                    tick()
        except asyncio.CancelledError:
            logger.info("%s tick loop cancelled.", name.capitalize())
        except Exception:
            logger.exception("%s tick loop failed.", name.capitalize())
            for task in self._tasks:
                if task is not asyncio.current_task() and not task.done():
                    task.cancel()
