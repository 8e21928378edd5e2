"""
Headless commands: simulate a round and list the configurable options.

Usage examples:
    # Let the scripted policy play both seats of a seeded round
    python -m crazyeights simulate --seed 7

    # Output as JSON for machine parsing
    python -m crazyeights simulate --seed 7 --json

    # Set options
    python -m crazyeights simulate -o opponent_delay_ms=0 -o locale=zh

    # Show options
    python -m crazyeights show-options
"""

import json
from dataclasses import dataclass, field
from typing import Any

from .games.base import Actor
from .games.crazyeights.bot import bot_think
from .games.crazyeights.game import CrazyEightsGame, CrazyEightsOptions, Phase
from .logging_utils import get_logger

logger = get_logger(__name__)

DEFAULT_MAX_TICKS = 200000


@dataclass
class SimulationResult:
    """Outcome of a headless round."""

    finished: bool
    winner: str | None
    ticks: int
    turns: int
    messages: list[str] = field(default_factory=list)
    snapshot: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return {
            "finished": self.finished,
            "winner": self.winner,
            "ticks": self.ticks,
            "turns": self.turns,
            "messages": self.messages,
            "snapshot": self.snapshot,
        }


def apply_option_overrides(options: CrazyEightsOptions, pairs: list[str]) -> list[str]:
    """Apply ``name=value`` pairs to ``options``.

    Returns:
        Warnings for pairs that were malformed, unknown or rejected.
    """
    warnings = []
    known = options.get_option_metas()
    for pair in pairs:
        key, sep, value = pair.partition("=")
        key = key.strip()
        if not sep:
            warnings.append(f"Ignoring '{pair}': expected name=value")
            continue
        if key not in known:
            warnings.append(f"Unknown option '{key}'")
            continue
        if not options.set_option(key, value.strip()):
            warnings.append(f"Invalid value '{value}' for option '{key}'")
    return warnings


def run_simulation(
    seed: int | None = None,
    max_ticks: int = DEFAULT_MAX_TICKS,
    options: CrazyEightsOptions | None = None,
) -> SimulationResult:
    """Play one round with the opponent's policy also driving the player's seat.

    The opponent moves through the normal tick loop, so its thinking delay
    is honoured; the player's seat acts immediately whenever it is its turn.
    """
    game = CrazyEightsGame(seed=seed, options=options or CrazyEightsOptions())
    game.init_round()
    messages = [game.message]
    turns = 0

    while game.phase != Phase.GAME_OVER and game.tick_count < max_ticks:
        if game.is_turn(Actor.PLAYER):
            action_id = bot_think(game, Actor.PLAYER)
            if action_id and game.execute_action(Actor.PLAYER, action_id):
                turns += 1
                messages.append(game.message)
                continue
        before = game.round, len(game.discard_pile), game.deck.size(), game.turn
        game.on_tick()
        if (game.round, len(game.discard_pile), game.deck.size(), game.turn) != before:
            turns += 1
            messages.append(game.message)

    finished = game.phase == Phase.GAME_OVER
    if not finished:
        logger.warning("Round did not finish within %d ticks", max_ticks)
    return SimulationResult(
        finished=finished,
        winner=game.winner.value if game.winner else None,
        ticks=game.tick_count,
        turns=turns,
        messages=messages,
        snapshot=game.snapshot().to_dict(),
    )


def cmd_simulate(args) -> int:
    options = CrazyEightsOptions()
    for warning in apply_option_overrides(options, args.option or []):
        print(f"Warning: {warning}")

    result = run_simulation(seed=args.seed, max_ticks=args.max_ticks, options=options)

    if args.json:
        print(json.dumps(result.to_dict(), indent=2, ensure_ascii=False))
        return 0 if result.finished else 1

    for text in result.messages:
        print(f"  {text}")
    if result.finished:
        print(f"\nWinner: {result.winner} after {result.turns} turns ({result.ticks} ticks)")
        return 0
    print(f"\nWarning: Round timed out after {result.ticks} ticks")
    return 1


def cmd_show_options(args) -> int:
    options = CrazyEightsOptions()
    described = options.describe(args.locale)
    if args.json:
        print(json.dumps({"options": described}, indent=2, ensure_ascii=False))
        return 0

    print("Options for crazyeights:\n")
    for opt in described:
        print(f"  {opt['name']} ({opt['type']})")
        print(f"    {opt['label']}")
        print(f"    Default: {opt['default']}")
        if "min" in opt:
            print(f"    Range: {opt['min']} - {opt['max']}")
        if "choices" in opt:
            print(f"    Choices: {', '.join(opt['choices'])}")
        print()
    return 0
