"""Tests for the command line launcher and headless commands."""

import json

import pytest

from crazyeights.cli import apply_option_overrides, run_simulation
from crazyeights.games.crazyeights.game import CrazyEightsOptions
from crazyeights.main import build_parser, main


class TestOptionOverrides:
    """Applying -o name=value pairs."""

    def test_applies_pairs(self):
        options = CrazyEightsOptions()
        warnings = apply_option_overrides(
            options, ["opponent_delay_ms=0", "show_rules = off", "locale=zh"]
        )
        assert warnings == []
        assert options.opponent_delay_ms == 0
        assert options.show_rules is False
        assert options.locale == "zh"

    def test_reports_bad_pairs(self):
        options = CrazyEightsOptions()
        warnings = apply_option_overrides(
            options, ["opponent_delay_ms", "colour=red", "locale=fr"]
        )
        assert len(warnings) == 3
        assert "expected name=value" in warnings[0]
        assert "Unknown option 'colour'" in warnings[1]
        assert "Invalid value 'fr'" in warnings[2]
        assert options == CrazyEightsOptions()


class TestParser:
    """Command line parsing."""

    def test_defaults_to_play(self):
        args = build_parser().parse_args([])
        assert args.command == "play"
        assert args.seed is None
        assert args.option is None

    def test_simulate_arguments(self):
        args = build_parser().parse_args(
            ["--log-level", "debug", "simulate", "--seed", "3", "-o", "locale=zh", "--json"]
        )
        assert args.command == "simulate"
        assert args.log_level == "DEBUG"
        assert args.seed == 3
        assert args.option == ["locale=zh"]
        assert args.json is True

    def test_rejects_unknown_log_level(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args(["--log-level", "chatty"])


class TestSimulation:
    """Headless rounds with the scripted policy in both seats."""

    @pytest.mark.parametrize("seed", [1, 2, 3])
    def test_seeded_round(self, seed):
        options = CrazyEightsOptions(opponent_delay_ms=0)
        result = run_simulation(seed=seed, max_ticks=20000, options=options)

        assert result.turns > 0
        assert result.messages[0] == "Your turn. Play a card or draw."
        snapshot = result.snapshot
        cards = (
            snapshot["deck"]
            + snapshot["player_hand"]
            + snapshot["ai_hand"]
            + snapshot["discard_pile"]
        )
        assert len(cards) == 52
        if result.finished:
            assert result.winner in ("player", "ai")
            assert snapshot["phase"] == "gameOver"
            assert snapshot[f"{result.winner}_hand"] == []
        else:
            assert result.ticks == 20000

    def test_same_seed_same_round(self):
        options = CrazyEightsOptions(opponent_delay_ms=0)
        first = run_simulation(seed=9, max_ticks=5000, options=options)
        second = run_simulation(seed=9, max_ticks=5000, options=options)
        assert first.to_dict() == second.to_dict()

    def test_delay_costs_ticks(self):
        fast = run_simulation(
            seed=4, max_ticks=50000, options=CrazyEightsOptions(opponent_delay_ms=0)
        )
        slow = run_simulation(
            seed=4, max_ticks=50000, options=CrazyEightsOptions(opponent_delay_ms=500)
        )
        if fast.finished and slow.finished:
            assert slow.turns == fast.turns
            assert slow.ticks > fast.ticks
        else:
            assert slow.ticks >= fast.ticks


class TestMain:
    """The main() entry point for headless commands."""

    def test_simulate_json(self, capsys):
        assert main(["simulate", "--seed", "1", "-o", "opponent_delay_ms=0", "--json"]) in (0, 1)
        data = json.loads(capsys.readouterr().out)
        assert set(data) == {"finished", "winner", "ticks", "turns", "messages", "snapshot"}

    def test_show_options_json(self, capsys):
        assert main(["show-options", "--json"]) == 0
        data = json.loads(capsys.readouterr().out)
        names = [opt["name"] for opt in data["options"]]
        assert names == ["opponent_delay_ms", "show_rules", "locale"]

    def test_show_options_text(self, capsys):
        assert main(["show-options", "--locale", "zh"]) == 0
        out = capsys.readouterr().out
        assert "opponent_delay_ms (int)" in out
        assert "Choices: en, zh" in out
