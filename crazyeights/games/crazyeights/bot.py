from __future__ import annotations

from typing import TYPE_CHECKING

from ...game_utils.cards import Card, SUITS, Suit

if TYPE_CHECKING:
    from ..base import Actor
    from .game import CrazyEightsGame


def choose_suit(hand: list[Card]) -> Suit:
    """Most common suit among the non-wild cards; ties go to the earlier suit."""
    suit_counts = {suit: 0 for suit in SUITS}
    for card in hand:
        if card.is_wild:
            continue
        suit_counts[card.suit] += 1
    # max() keeps the first of equal keys, so SUITS order breaks ties.
    return max(SUITS, key=lambda suit: suit_counts[suit])


def choose_card(game: "CrazyEightsGame", actor: "Actor") -> Card | None:
    """First legal non-wild card in hand order, else the first legal wild."""
    playable = game.get_playable_cards(actor)
    if not playable:
        return None
    for card in playable:
        if not card.is_wild:
            return card
    return playable[0]


def bot_think(game: "CrazyEightsGame", actor: "Actor") -> str | None:
    """Pick the action id ``actor`` should take next, or None if it can't act."""
    if not game.is_turn(actor):
        return None

    if game.awaiting_wild_suit:
        return game.suit_action_id(choose_suit(game.hand_for(actor)))

    if not game.is_playing:
        return None

    card = choose_card(game, actor)
    if card is not None:
        return f"play_card_{card.id}"
    return "draw"
