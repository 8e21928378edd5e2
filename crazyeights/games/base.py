"""Base game class and the two sides of the table."""

from dataclasses import dataclass, field
from abc import ABC, abstractmethod
from enum import Enum
import logging
import random

from mashumaro.mixins.json import DataClassJSONMixin
from mashumaro.config import BaseConfig

from ..game_utils.actions import ActionSet
from ..game_utils.action_execution_mixin import ActionExecutionMixin
from ..game_utils.action_set_system_mixin import ActionSetSystemMixin
from ..game_utils.bot_helper import BotHelper
from ..game_utils.turn_management_mixin import TurnManagementMixin
from ..logging_utils import get_logger


class Actor(str, Enum):
    """One side of the table: the human at the keyboard or the computer."""

    PLAYER = "player"
    AI = "ai"

    def other(self) -> "Actor":
        return Actor.AI if self is Actor.PLAYER else Actor.PLAYER


@dataclass
class Game(
    TurnManagementMixin,
    ActionSetSystemMixin,
    ActionExecutionMixin,
    ABC,
    DataClassJSONMixin,
):
    """
    Abstract base class for games.

    Games are dataclasses that can be serialized with Mashumaro.
    All game state must be stored in dataclass fields; the random source is
    runtime-only and rebuilt from ``seed``.

    Games are synchronous and state-based. Commands modify state
    imperatively and report success; the bot acts from on_tick() once its
    thinking pause has run out.
    """

    class Config(BaseConfig):
        # Serialize all fields (don't omit defaults - breaks state restoration)
        serialize_by_alias = True

    round: int = 0  # Round generation counter
    turn: Actor = Actor.PLAYER
    seed: int | None = None
    tick_count: int = 0
    # Bot scheduling state (see BotHelper)
    bot_think_ticks: int = 0
    bot_pending_round: int | None = None
    # Action sets keyed by Actor value
    actor_action_sets: dict[str, list[ActionSet]] = field(default_factory=dict)

    def __post_init__(self):
        """Initialize non-serialized state."""
        self._rng = random.Random(self.seed)

    @property
    def rng(self) -> random.Random:
        return self._rng

    @property
    def logger(self) -> logging.Logger:
        return get_logger(type(self).__module__)

    # Abstract methods games must implement

    @classmethod
    @abstractmethod
    def get_name(cls) -> str:
        """Return the display name of this game (English fallback)."""
        ...

    @classmethod
    @abstractmethod
    def get_type(cls) -> str:
        """Return the type identifier for this game."""
        ...

    @classmethod
    def get_name_key(cls) -> str:
        """Return the localization key for the game name."""
        return f"game-name-{cls.get_type()}"

    def on_tick(self) -> None:
        """Called every tick (20 per second) by the front end."""
        self.tick_count += 1
        BotHelper.on_tick(self)

    def bot_move(self) -> bool:
        """Make the bot's move once its thinking pause is over."""
        return False
