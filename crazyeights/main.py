"""Entry point for Crazy Eights."""

import argparse
import sys

from .cli import DEFAULT_MAX_TICKS, apply_option_overrides, cmd_show_options, cmd_simulate
from .games.crazyeights.game import CrazyEightsOptions
from .logging_utils import LOG_LEVEL, get_logger, setup_logging
from .messages.localization import Localization

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="crazyeights",
        description="Crazy Eights - you against the computer",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Open the game window
  python -m crazyeights

  # Faster opponent, Chinese interface
  python -m crazyeights play -o opponent_delay_ms=500 -o locale=zh

  # Watch a seeded round play itself
  python -m crazyeights simulate --seed 42
""",
    )
    parser.add_argument(
        "--log-level",
        dest="log_level",
        default=LOG_LEVEL,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        type=str.upper,
        help=f"Logging level (default: {LOG_LEVEL}, or $LOG_LEVEL)",
    )
    subparsers = parser.add_subparsers(dest="command")
    parser.set_defaults(command="play", seed=None, option=None)

    def add_common(sub: argparse.ArgumentParser) -> None:
        sub.add_argument(
            "--seed",
            type=int,
            default=None,
            help="Seed the shuffle for a reproducible round",
        )
        sub.add_argument(
            "-o",
            "--option",
            action="append",
            metavar="NAME=VALUE",
            help="Set a game option (repeatable, see show-options)",
        )

    play = subparsers.add_parser("play", help="Open the game window (default)")
    add_common(play)

    simulate = subparsers.add_parser("simulate", help="Play a round headlessly")
    add_common(simulate)
    simulate.add_argument(
        "--max-ticks",
        dest="max_ticks",
        type=int,
        default=DEFAULT_MAX_TICKS,
        help=f"Give up after this many ticks (default: {DEFAULT_MAX_TICKS})",
    )
    simulate.add_argument("--json", action="store_true", help="Output as JSON")

    show_options = subparsers.add_parser("show-options", help="List game options")
    show_options.add_argument("--locale", default="en", help="Label language (default: en)")
    show_options.add_argument("--json", action="store_true", help="Output as JSON")

    return parser


def cmd_play(args) -> int:
    options = CrazyEightsOptions()
    for warning in apply_option_overrides(options, args.option or []):
        logger.warning(warning)

    # wx is only needed for the window; headless commands work without it.
    from .ui.client import run_app

    return run_app(options=options, seed=args.seed)


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(args.log_level)
    Localization.init()

    if args.command == "simulate":
        return cmd_simulate(args)
    if args.command == "show-options":
        return cmd_show_options(args)
    return cmd_play(args)


if __name__ == "__main__":
    sys.exit(main())
