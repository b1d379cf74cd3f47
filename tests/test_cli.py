"""Tests for the grid-snake CLI."""

from grid_snake.cli import _build_parser, main
from grid_snake.config import GameConfig


class TestCLIParser:
    def test_no_command_returns_1(self):
        assert main([]) == 1

    def test_simulate_defaults(self):
        args = _build_parser().parse_args(["simulate"])
        assert args.command == "simulate"
        assert args.ticks == 200
        assert args.seed is None
        assert args.config is None

    def test_simulate_flags(self):
        args = _build_parser().parse_args([
            "simulate", "--ticks", "50", "--seed", "3",
            "--width", "12", "--height", "9",
        ])
        assert args.ticks == 50
        assert args.seed == 3
        assert args.width == 12
        assert args.height == 9

    def test_init_config_args(self):
        args = _build_parser().parse_args(["init-config", "game.json"])
        assert args.command == "init-config"
        assert args.path == "game.json"


class TestCLICommands:
    def test_simulate(self, capsys):
        assert main(["simulate", "--ticks", "50", "--seed", "1"]) == 0
        out = capsys.readouterr().out
        assert "ticks=50" in out

    def test_init_config_then_simulate(self, tmp_path, capsys):
        path = tmp_path / "game.json"
        assert main(["init-config", str(path)]) == 0
        assert GameConfig.load(path) == GameConfig()
        assert main(["simulate", "--config", str(path), "--ticks", "10"]) == 0
        assert "ticks=10" in capsys.readouterr().out
