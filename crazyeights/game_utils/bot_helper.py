"""Bot helper for scheduling the computer opponent's moves.

This is a stateless helper that operates on serialized game fields:
- game.bot_think_ticks: Ticks until the bot may act
- game.bot_pending_round: Round generation the pending move was scheduled for
  (None when nothing is scheduled)
"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..games.base import Game


TICKS_PER_SECOND = 20


def ms_to_ticks(milliseconds: int) -> int:
    """Convert a delay in milliseconds to whole ticks (rounded up)."""
    if milliseconds <= 0:
        return 0
    return -(-milliseconds * TICKS_PER_SECOND // 1000)


class BotHelper:
    """
    Stateless helper for managing the bot's thinking pause.

    Usage:
        # When the human's turn ends:
        BotHelper.schedule(self, ticks=30)

        # In game on_tick:
        BotHelper.on_tick(self)

        # Implement bot_move in your game:
        def bot_move(self) -> bool:
            ...

        # When a new round starts:
        BotHelper.cancel(self)
    """

    # Default think ticks when not specified
    DEFAULT_THINK_TICKS = 30

    @staticmethod
    def schedule(game: "Game", ticks: int | None = None) -> None:
        """
        Schedule a bot move for the current round after a pause.

        Args:
            game: The game instance.
            ticks: How many ticks to pause. Uses DEFAULT_THINK_TICKS if None.
        """
        game.bot_think_ticks = ticks if ticks is not None else BotHelper.DEFAULT_THINK_TICKS
        game.bot_pending_round = game.round

    @staticmethod
    def cancel(game: "Game") -> None:
        """Drop any scheduled bot move."""
        game.bot_think_ticks = 0
        game.bot_pending_round = None

    @staticmethod
    def is_pending(game: "Game") -> bool:
        return game.bot_pending_round is not None

    @staticmethod
    def on_tick(game: "Game") -> bool:
        """
        Count down the pause and run the bot move once it expires.

        Call this from your game's on_tick() method. A move scheduled for an
        earlier round is discarded without running.

        Returns:
            True if the bot acted on this tick.
        """
        if game.bot_pending_round is None:
            return False

        if game.bot_pending_round != game.round:
            BotHelper.cancel(game)
            return False

        # Count down thinking time
        if game.bot_think_ticks > 0:
            game.bot_think_ticks -= 1
            if game.bot_think_ticks > 0:
                return False

        game.bot_pending_round = None
        return game.bot_move()
