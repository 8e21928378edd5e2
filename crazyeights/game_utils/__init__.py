"""Shared game utilities."""

from .actions import Action, ActionSet, ResolvedAction, Visibility
from .bot_helper import BotHelper
from .cards import Card, Deck, DeckFactory, Rank, Suit, build_deck
from .turn_management_mixin import TurnManagementMixin
from .action_execution_mixin import ActionExecutionMixin
from .action_set_system_mixin import ActionSetSystemMixin
from .options import GameOptions

__all__ = [
    "Action",
    "ActionSet",
    "ResolvedAction",
    "Visibility",
    "BotHelper",
    "Card",
    "Deck",
    "DeckFactory",
    "Rank",
    "Suit",
    "build_deck",
    "TurnManagementMixin",
    "ActionExecutionMixin",
    "ActionSetSystemMixin",
    "GameOptions",
]
