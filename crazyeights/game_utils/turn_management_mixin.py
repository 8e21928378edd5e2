"""Mixin providing turn management functionality for two-sided games."""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..games.base import Actor


class TurnManagementMixin:
    """Mixin providing turn passing between the two sides of the table.

    Expects on the Game class:
        - self.turn: Actor
        - self.on_turn_start(actor) hook
    """

    def is_turn(self, actor: "Actor") -> bool:
        return self.turn == actor

    def advance_turn(self) -> "Actor":
        """Hand the turn to the other side.

        Returns:
            The new current side.
        """
        self.turn = self.turn.other()
        self.on_turn_start(self.turn)
        return self.turn

    def reset_turn_order(self, first: "Actor") -> None:
        """Give the turn to ``first`` without running the turn-start hook."""
        self.turn = first

    def on_turn_start(self, actor: "Actor") -> None:
        """Called whenever the turn passes. Override to react (e.g. schedule a bot)."""
        pass
