"""Grid Snake — tick-driven snake simulation core."""

from grid_snake.collision import CollisionKind, detect_collision
from grid_snake.config import GameConfig
from grid_snake.engine import EngineEvent, GameEngine
from grid_snake.entities import EntityArena, EntityKind
from grid_snake.food import FoodSpawner
from grid_snake.grid import Grid
from grid_snake.scheduler import TickScheduler
from grid_snake.snake import Direction, Snake

__all__ = [
    "CollisionKind",
    "Direction",
    "EngineEvent",
    "EntityArena",
    "EntityKind",
    "FoodSpawner",
    "GameConfig",
    "GameEngine",
    "Grid",
    "Snake",
    "TickScheduler",
    "detect_collision",
]
