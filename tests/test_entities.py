"""Tests for the EntityArena module."""

import pytest

from grid_snake.entities import EntityArena, EntityKind


class TestArenaSpawn:
    def test_spawn_returns_distinct_handles(self):
        arena = EntityArena()
        a = arena.spawn(EntityKind.HEAD, (1, 1))
        b = arena.spawn(EntityKind.SEGMENT, (1, 2))
        assert a != b
        assert len(arena) == 2
        assert a in arena

    def test_handles_not_reused_after_despawn(self):
        arena = EntityArena()
        a = arena.spawn(EntityKind.FOOD, (0, 0))
        arena.despawn(a)
        b = arena.spawn(EntityKind.FOOD, (0, 0))
        assert b != a
        assert a not in arena

    def test_handles_not_reused_after_clear(self):
        arena = EntityArena()
        a = arena.spawn(EntityKind.FOOD, (0, 0))
        arena.clear()
        assert arena.spawn(EntityKind.FOOD, (0, 0)) != a


class TestArenaPositions:
    def test_position_and_move(self):
        arena = EntityArena()
        h = arena.spawn(EntityKind.SEGMENT, (2, 3))
        assert arena.position(h) == (2, 3)
        arena.move(h, (4, 5))
        assert arena.position(h) == (4, 5)

    def test_move_unknown_handle(self):
        arena = EntityArena()
        with pytest.raises(KeyError):
            arena.move(42, (0, 0))

    def test_position_unknown_handle(self):
        arena = EntityArena()
        with pytest.raises(KeyError):
            arena.position(7)

    def test_despawn_returns_position(self):
        arena = EntityArena()
        h = arena.spawn(EntityKind.FOOD, (3, 3))
        assert arena.despawn(h) == (3, 3)
        assert len(arena) == 0

    def test_filter_by_kind_keeps_spawn_order(self):
        arena = EntityArena()
        arena.spawn(EntityKind.HEAD, (0, 0))
        arena.spawn(EntityKind.FOOD, (5, 5))
        arena.spawn(EntityKind.SEGMENT, (1, 0))
        arena.spawn(EntityKind.FOOD, (6, 6))
        assert arena.positions(EntityKind.FOOD) == [(5, 5), (6, 6)]
        assert arena.positions() == [(0, 0), (5, 5), (1, 0), (6, 6)]

    def test_kind(self):
        arena = EntityArena()
        h = arena.spawn(EntityKind.HEAD, (0, 0))
        assert arena.kind(h) == EntityKind.HEAD

    def test_clear(self):
        arena = EntityArena()
        arena.spawn(EntityKind.HEAD, (0, 0))
        arena.spawn(EntityKind.FOOD, (1, 1))
        arena.clear()
        assert len(arena) == 0
        assert arena.positions() == []
