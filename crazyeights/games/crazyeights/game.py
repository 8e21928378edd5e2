from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from mashumaro.mixins.json import DataClassJSONMixin

from ..base import Actor, Game
from ...game_utils.actions import Action, ActionSet, ResolvedAction, Visibility
from ...game_utils.bot_helper import BotHelper, ms_to_ticks
from ...game_utils.cards import Card, Deck, DeckFactory, SUITS, Suit
from ...game_utils.options import (
    BoolOption,
    GameOptions,
    IntOption,
    MenuOption,
    option_field,
)
from ...messages.localization import Localization
from . import bot


HAND_SIZE = 8
WIN_QUOTE_COUNT = 7
LANGUAGE_CHOICES = ["en", "zh"]
LANGUAGE_LABELS = {"en": "language-en", "zh": "language-zh"}


class Phase(str, Enum):
    """Coarse state of the round."""

    DEALING = "dealing"
    PLAYING = "playing"
    SUIT_SELECTION = "suitSelection"
    GAME_OVER = "gameOver"


@dataclass
class CrazyEightsOptions(GameOptions):
    """Options for Crazy Eights."""

    opponent_delay_ms: int = option_field(
        IntOption(
            min_val=0,
            max_val=10000,
            default=1500,
            value_key="ms",
            label="crazyeights-set-opponent-delay",
        )
    )
    show_rules: bool = option_field(
        BoolOption(
            default=True,
            label="crazyeights-toggle-rules",
        )
    )
    locale: str = option_field(
        MenuOption(
            choices=LANGUAGE_CHOICES,
            default="en",
            label="crazyeights-set-language",
            choice_labels=LANGUAGE_LABELS,
        )
    )


@dataclass
class RoundSnapshot(DataClassJSONMixin):
    """Read-only copy of the round for the front end."""

    round: int
    deck: list[Card]
    deck_count: int
    player_hand: list[Card]
    ai_hand: list[Card]
    discard_pile: list[Card]
    top_card: Card | None
    current_suit: Suit | None
    turn: Actor
    phase: Phase
    winner: Actor | None
    message: str
    win_message: str


@dataclass
class CrazyEightsGame(Game):
    """Two-handed Crazy Eights: the player against a scripted opponent.

    Commands (``init_round``, ``play_card``, ``draw_card``, ``choose_suit``)
    either apply completely and return True, or change nothing and return
    False. The opponent moves from ``on_tick`` after ``opponent_delay_ms``.
    """

    options: CrazyEightsOptions = field(default_factory=CrazyEightsOptions)

    deck: Deck = field(default_factory=Deck)
    player_hand: list[Card] = field(default_factory=list)
    ai_hand: list[Card] = field(default_factory=list)
    discard_pile: list[Card] = field(default_factory=list)
    current_suit: Suit | None = None

    phase: Phase = Phase.DEALING
    winner: Actor | None = None

    status_key: str = "crazyeights-welcome"
    status_args: dict[str, str] = field(default_factory=dict)
    win_quote_key: str | None = None

    def __post_init__(self):
        super().__post_init__()
        if not self.actor_action_sets:
            for actor in Actor:
                self.add_action_set(actor, self.create_turn_action_set(actor))
                self._sync_turn_actions(actor)

    # ==========================================================================
    # Metadata
    # ==========================================================================

    @classmethod
    def get_name(cls) -> str:
        return "Crazy Eights"

    @classmethod
    def get_type(cls) -> str:
        return "crazyeights"

    # ==========================================================================
    # State queries
    # ==========================================================================

    @property
    def top_card(self) -> Card | None:
        return self.discard_pile[-1] if self.discard_pile else None

    @property
    def is_playing(self) -> bool:
        return self.phase == Phase.PLAYING

    @property
    def awaiting_wild_suit(self) -> bool:
        return self.phase == Phase.SUIT_SELECTION

    def hand_for(self, actor: Actor) -> list[Card]:
        return self.player_hand if actor == Actor.PLAYER else self.ai_hand

    def card_count(self) -> int:
        """Cards across deck, both hands and the discard pile (52 mid-round)."""
        return (
            self.deck.size()
            + len(self.player_hand)
            + len(self.ai_hand)
            + len(self.discard_pile)
        )

    def is_card_playable(self, card: Card) -> bool:
        """The matching rule: wild, active suit, or the top card's rank."""
        if card.is_wild:
            return True
        if self.current_suit is not None and card.suit == self.current_suit:
            return True
        top = self.top_card
        if top is not None and card.rank == top.rank:
            return True
        return False

    def get_playable_cards(self, actor: Actor) -> list[Card]:
        """Legal plays in hand order."""
        return [card for card in self.hand_for(actor) if self.is_card_playable(card)]

    def _get_turn_error(self, actor: Actor) -> str | None:
        if self.phase == Phase.SUIT_SELECTION:
            return "crazyeights-choose-suit-first"
        if self.phase == Phase.GAME_OVER:
            return "crazyeights-round-over"
        if self.phase != Phase.PLAYING:
            return "action-not-playing"
        if self.turn != actor:
            return "action-not-your-turn"
        return None

    def get_play_error(self, card: Card, actor: Actor) -> str | None:
        """Why ``actor`` may not play ``card`` right now, or None if they may."""
        error = self._get_turn_error(actor)
        if error:
            return error
        if card not in self.hand_for(actor):
            return "crazyeights-card-not-in-hand"
        if not self.is_card_playable(card):
            return "crazyeights-card-not-playable"
        return None

    def get_draw_error(self, actor: Actor) -> str | None:
        """Why ``actor`` may not draw right now, or None if they may."""
        return self._get_turn_error(actor)

    # ==========================================================================
    # Commands
    # ==========================================================================

    def init_round(self, deck: Deck | None = None) -> None:
        """Deal a new round, replacing whatever was on the table.

        Args:
            deck: Draw pile to deal from. A freshly shuffled deck from the
                game's random source is used when omitted.
        """
        if deck is None:
            deck = DeckFactory.standard_deck(self.rng)
        player_hand = deck.draw(HAND_SIZE)
        ai_hand = deck.draw(HAND_SIZE)
        first_discard = deck.draw(1)[0]

        BotHelper.cancel(self)
        self.round += 1
        self.deck = deck
        self.player_hand = player_hand
        self.ai_hand = ai_hand
        self.discard_pile = [first_discard]
        self.current_suit = first_discard.suit
        self.reset_turn_order(Actor.PLAYER)
        self.phase = Phase.PLAYING
        self.winner = None
        self.win_quote_key = None
        self._set_status("crazyeights-your-turn-start")

        self.logger.info(
            "Round %d dealt, starting card %s", self.round, first_discard.short_name()
        )

    def play_card(
        self, card: Card, actor: Actor, chosen_suit: Suit | str | None = None
    ) -> bool:
        """Play ``card`` from ``actor``'s hand onto the discard pile.

        Args:
            card: The card to play.
            actor: Who is playing it.
            chosen_suit: New suit when the opponent plays an eight. Ignored
                for the player, who always goes through suit selection.

        Returns:
            True if the card was played.
        """
        error = self.get_play_error(card, actor)
        if error:
            self.logger.debug("Rejected %s from %s: %s", card.short_name(), actor.value, error)
            return False
        new_suit: Suit | None = None
        if card.is_wild and actor == Actor.AI:
            try:
                new_suit = Suit(chosen_suit) if chosen_suit is not None else None
            except ValueError:
                self.logger.debug("Rejected unknown suit %r", chosen_suit)
                return False

        hand = self.hand_for(actor)
        hand.remove(card)
        self.discard_pile.append(card)
        self.logger.debug("%s played %s", actor.value, card.short_name())

        if not card.is_wild:
            self.current_suit = card.suit
            if actor == Actor.PLAYER:
                self._set_status("crazyeights-ai-turn")
            else:
                self._set_status("crazyeights-your-turn")
            self.advance_turn()
        elif actor == Actor.PLAYER:
            # The turn and the win check wait for choose_suit().
            self.phase = Phase.SUIT_SELECTION
            self._set_status("crazyeights-pick-suit")
            return True
        else:
            self.current_suit = new_suit or bot.choose_suit(hand)
            self.logger.debug("%s switched suit to %s", actor.value, self.current_suit.value)
            self._set_status("crazyeights-ai-played-eight", suit=self.current_suit.value)
            self.advance_turn()

        self._check_for_winner()
        return True

    def draw_card(self, actor: Actor) -> bool:
        """Draw one card for ``actor``; drawing always ends the turn.

        With an empty draw pile nothing is drawn and the turn is skipped.
        """
        error = self.get_draw_error(actor)
        if error:
            self.logger.debug("Rejected draw for %s: %s", actor.value, error)
            return False

        card = self.deck.draw_one()
        if card is None:
            self.logger.debug("Draw pile empty, %s skips", actor.value)
            self._set_status("crazyeights-deck-empty")
        else:
            self.hand_for(actor).append(card)
            self.logger.debug("%s drew a card", actor.value)
            if actor == Actor.PLAYER:
                self._set_status("crazyeights-you-drew")
            else:
                self._set_status("crazyeights-ai-drew")
        self.advance_turn()
        return True

    def choose_suit(self, suit: Suit | str) -> bool:
        """Set the suit after the player's eight. Only valid during suit selection."""
        if self.phase != Phase.SUIT_SELECTION:
            self.logger.debug("Ignored suit choice outside suit selection")
            return False
        try:
            suit = Suit(suit)
        except ValueError:
            self.logger.debug("Rejected unknown suit %r", suit)
            return False

        self.current_suit = suit
        self.phase = Phase.PLAYING
        self.logger.debug("player chose %s", suit.value)
        self._set_status("crazyeights-you-chose-suit", suit=suit.value)
        self.advance_turn()
        self._check_for_winner()
        return True

    def _check_for_winner(self) -> bool:
        if self.player_hand and self.ai_hand:
            return False
        self.winner = Actor.PLAYER if not self.player_hand else Actor.AI
        self.phase = Phase.GAME_OVER
        BotHelper.cancel(self)
        if self.winner == Actor.PLAYER:
            self.win_quote_key = (
                f"crazyeights-win-quote-{self.rng.randint(1, WIN_QUOTE_COUNT)}"
            )
            self._set_status("crazyeights-you-win")
        else:
            self._set_status("crazyeights-ai-wins")
        self.logger.info("Round %d won by %s", self.round, self.winner.value)
        return True

    # ==========================================================================
    # Opponent
    # ==========================================================================

    def on_turn_start(self, actor: Actor) -> None:
        if actor == Actor.AI and self.is_playing:
            BotHelper.schedule(self, ticks=ms_to_ticks(self.options.opponent_delay_ms))

    def bot_move(self) -> bool:
        return self.run_opponent_turn()

    def run_opponent_turn(self) -> bool:
        """Let the opponent play, or draw when it has no legal card."""
        if not self.is_playing or not self.is_turn(Actor.AI):
            return False
        action_id = bot.bot_think(self, Actor.AI)
        if not action_id:
            return False
        return self.execute_action(Actor.AI, action_id)

    # ==========================================================================
    # Action sets
    # ==========================================================================

    def create_turn_action_set(self, actor: Actor) -> ActionSet:
        action_set = ActionSet(name="turn")
        action_set.add(
            Action(
                id="draw",
                label="crazyeights-draw",
                handler="_action_draw",
                is_enabled="_is_draw_enabled",
                is_hidden="_is_draw_hidden",
                get_label="_get_localized_label",
            )
        )
        for suit in SUITS:
            action_set.add(
                Action(
                    id=self.suit_action_id(suit),
                    label=f"suit-{suit.value}",
                    handler="_action_choose_suit",
                    is_enabled="_is_suit_choice_enabled",
                    is_hidden="_is_suit_choice_hidden",
                    get_label="_get_localized_label",
                )
            )
        action_set.add(
            Action(
                id="new_round",
                label="crazyeights-new-round",
                handler="_action_new_round",
                is_enabled="_is_new_round_enabled",
                is_hidden="_is_new_round_hidden",
                get_label="_get_localized_label",
            )
        )
        return action_set

    def _sync_turn_actions(self, actor: Actor) -> None:
        """Keep one play_card action per card in hand, in hand order."""
        hand_set = self.get_action_set(actor, "hand")
        if hand_set is None:
            hand_set = ActionSet(name="hand")
            self.actor_action_sets.setdefault(actor.value, []).insert(0, hand_set)
        hand_set.remove_by_prefix("play_card_")
        for card in self.hand_for(actor):
            hand_set.add(
                Action(
                    id=f"play_card_{card.id}",
                    label=card.short_name(),
                    handler="_action_play_card",
                    is_enabled="_is_play_card_enabled",
                    is_hidden="_is_play_card_hidden",
                )
            )

    def get_actions(self, actor: Actor) -> list[ResolvedAction]:
        """Resolved, visible actions for ``actor`` (cards first, then the rest)."""
        self._sync_turn_actions(actor)
        return self.get_all_visible_actions(actor)

    def execute_action(self, actor: Actor, action_id: str) -> bool:
        self._sync_turn_actions(actor)
        return super().execute_action(actor, action_id)

    @staticmethod
    def suit_action_id(suit: Suit) -> str:
        return f"suit_{suit.value}"

    def _card_from_action(self, action_id: str) -> Card | None:
        try:
            return Card.from_id(action_id.removeprefix("play_card_"))
        except ValueError:
            return None

    # Handlers

    def _action_play_card(self, actor: Actor, action_id: str) -> bool:
        card = self._card_from_action(action_id)
        if card is None:
            return False
        return self.play_card(card, actor)

    def _action_draw(self, actor: Actor, action_id: str) -> bool:
        return self.draw_card(actor)

    def _action_choose_suit(self, actor: Actor, action_id: str) -> bool:
        return self.choose_suit(action_id.removeprefix("suit_"))

    def _action_new_round(self, actor: Actor, action_id: str) -> bool:
        self.init_round()
        return True

    # State callbacks

    def _is_play_card_enabled(self, actor: Actor, *, action_id: str) -> str | None:
        card = self._card_from_action(action_id)
        if card is None:
            return "action-not-available"
        return self.get_play_error(card, actor)

    def _is_play_card_hidden(self, actor: Actor, *, action_id: str) -> Visibility:
        card = self._card_from_action(action_id)
        if card is None or card not in self.hand_for(actor):
            return Visibility.HIDDEN
        return Visibility.VISIBLE

    def _is_draw_enabled(self, actor: Actor, *, action_id: str) -> str | None:
        return self.get_draw_error(actor)

    def _is_draw_hidden(self, actor: Actor, *, action_id: str) -> Visibility:
        if self.phase in (Phase.PLAYING, Phase.SUIT_SELECTION):
            return Visibility.VISIBLE
        return Visibility.HIDDEN

    def _is_suit_choice_enabled(self, actor: Actor, *, action_id: str) -> str | None:
        if not self.awaiting_wild_suit or actor != Actor.PLAYER:
            return "crazyeights-not-choosing-suit"
        return None

    def _is_suit_choice_hidden(self, actor: Actor, *, action_id: str) -> Visibility:
        if self.awaiting_wild_suit and actor == Actor.PLAYER:
            return Visibility.VISIBLE
        return Visibility.HIDDEN

    def _is_new_round_enabled(self, actor: Actor, *, action_id: str) -> str | None:
        if actor != Actor.PLAYER:
            return "action-not-available"
        return None

    def _is_new_round_hidden(self, actor: Actor, *, action_id: str) -> Visibility:
        if actor == Actor.PLAYER and self.phase in (Phase.DEALING, Phase.GAME_OVER):
            return Visibility.VISIBLE
        return Visibility.HIDDEN

    def _get_localized_label(self, actor: Actor, action_id: str) -> str:
        action = self.find_action(actor, action_id)
        return Localization.get(self.options.locale, action.label) if action else action_id

    # ==========================================================================
    # Messages and snapshot
    # ==========================================================================

    def _set_status(self, key: str, **kwargs: str) -> None:
        self.status_key = key
        self.status_args = dict(kwargs)

    def suit_name(self, suit: Suit, locale: str | None = None) -> str:
        return Localization.get(locale or self.options.locale, f"suit-{suit.value}")

    def format_status(self, locale: str | None = None) -> str:
        locale = locale or self.options.locale
        kwargs = dict(self.status_args)
        if "suit" in kwargs:
            kwargs["suit"] = self.suit_name(Suit(kwargs["suit"]), locale)
        if self.status_key == "crazyeights-pick-suit":
            kwargs["suits"] = Localization.format_list_or(
                locale, [self.suit_name(suit, locale) for suit in SUITS]
            )
        return Localization.get(locale, self.status_key, **kwargs)

    def format_win_message(self, locale: str | None = None) -> str:
        if not self.win_quote_key:
            return ""
        return Localization.get(locale or self.options.locale, self.win_quote_key)

    @property
    def message(self) -> str:
        return self.format_status()

    @property
    def win_message(self) -> str:
        return self.format_win_message()

    def snapshot(self) -> RoundSnapshot:
        return RoundSnapshot(
            round=self.round,
            deck=list(self.deck.cards),
            deck_count=self.deck.size(),
            player_hand=list(self.player_hand),
            ai_hand=list(self.ai_hand),
            discard_pile=list(self.discard_pile),
            top_card=self.top_card,
            current_suit=self.current_suit,
            turn=self.turn,
            phase=self.phase,
            winner=self.winner,
            message=self.message,
            win_message=self.win_message,
        )
