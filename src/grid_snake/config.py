"""Game configuration."""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass, replace
from pathlib import Path

from grid_snake.grid import Cell
from grid_snake.snake import Direction

logger = logging.getLogger(__name__)

_CELL_FIELDS = ("initial_head", "initial_segment", "initial_last_tail")


@dataclass(frozen=True)
class GameConfig:
    """Board size, spawn layout and tick cadence for one game.

    Supports JSON serialization so a run can be reproduced.
    """

    # Board
    width: int = 10
    height: int = 10

    # Spawn layout
    initial_head: Cell = (4, 4)
    initial_segment: Cell = (4, 5)
    initial_last_tail: Cell = (4, 6)
    initial_direction: Direction = Direction.DOWN

    # Cadence
    move_interval_ms: int = 150
    food_interval_ms: int = 1000

    # Food placement
    seed: int | None = None
    placement_attempts: int | None = None

    def __post_init__(self) -> None:
        if self.width < 1 or self.height < 1:
            raise ValueError("width and height must each be at least 1.")
        if self.move_interval_ms <= 0 or self.food_interval_ms <= 0:
            raise ValueError("Tick intervals must be positive.")
        if self.placement_attempts is not None and self.placement_attempts < 0:
            raise ValueError("placement_attempts must be >= 0.")
        for name in ("initial_head", "initial_segment"):
            x, y = getattr(self, name)
            if not (0 <= x < self.width and 0 <= y < self.height):
                raise ValueError(f"{name} {(x, y)} lies outside the board.")
        if tuple(self.initial_head) == tuple(self.initial_segment):
            raise ValueError("initial_head and initial_segment must differ.")

    @property
    def food_every(self) -> int:
        """Movement ticks per food tick, at least 1."""
        return max(1, round(self.food_interval_ms / self.move_interval_ms))

    def with_overrides(self, **overrides) -> GameConfig:
        """Return a copy with the non-``None`` *overrides* applied."""
        changes = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **changes) if changes else self

    def to_dict(self) -> dict:
        """Serialize to a plain dict (cells become lists, directions names)."""
        d = asdict(self)
        for name in _CELL_FIELDS:
            d[name] = list(d[name])
        d["initial_direction"] = self.initial_direction.name.lower()
        return d

    def save(self, path: str | Path) -> None:
        """Write config to a JSON file."""
        p = Path(path)
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text(json.dumps(self.to_dict(), indent=2))
        logger.info("Config saved to %s", p)

    @classmethod
    def from_dict(cls, raw: dict) -> GameConfig:
        data = dict(raw)
        for name in _CELL_FIELDS:
            if name in data:
                data[name] = tuple(data[name])
        if "initial_direction" in data:
            data["initial_direction"] = Direction.parse(data["initial_direction"])
        return cls(**data)

    @classmethod
    def load(cls, path: str | Path) -> GameConfig:
        """Load config from a JSON file."""
        return cls.from_dict(json.loads(Path(path).read_text()))
