"""Playing cards and the shuffled draw pile."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
import random

from mashumaro.mixins.json import DataClassJSONMixin


class Suit(str, Enum):
    """Card suits, in canonical order (used for every suit tie-break)."""

    HEARTS = "hearts"
    DIAMONDS = "diamonds"
    CLUBS = "clubs"
    SPADES = "spades"


class Rank(str, Enum):
    """Card ranks, ace low."""

    ACE = "A"
    TWO = "2"
    THREE = "3"
    FOUR = "4"
    FIVE = "5"
    SIX = "6"
    SEVEN = "7"
    EIGHT = "8"
    NINE = "9"
    TEN = "10"
    JACK = "J"
    QUEEN = "Q"
    KING = "K"


SUITS: tuple[Suit, ...] = tuple(Suit)
RANKS: tuple[Rank, ...] = tuple(Rank)
WILD_RANK = Rank.EIGHT

SUIT_SYMBOLS = {
    Suit.HEARTS: "♥",
    Suit.DIAMONDS: "♦",
    Suit.CLUBS: "♣",
    Suit.SPADES: "♠",
}


@dataclass(frozen=True)
class Card(DataClassJSONMixin):
    """A single playing card. Identity is the (suit, rank) pair."""

    suit: Suit
    rank: Rank

    @property
    def id(self) -> str:
        return f"{self.suit.value}-{self.rank.value}"

    @property
    def is_wild(self) -> bool:
        return self.rank == WILD_RANK

    def short_name(self) -> str:
        """Compact label, e.g. ``"8♠"``."""
        return f"{self.rank.value}{SUIT_SYMBOLS[self.suit]}"

    @classmethod
    def from_id(cls, card_id: str) -> "Card":
        """Parse an id produced by :attr:`id` (``"hearts-10"``).

        Raises:
            ValueError: if the suit or rank is unknown.
        """
        suit, sep, rank = card_id.partition("-")
        if not sep:
            raise ValueError(f"Malformed card id '{card_id}'")
        return cls(Suit(suit), Rank(rank))


@dataclass
class Deck(DataClassJSONMixin):
    """Draw pile. The top of the pile is the end of ``cards``."""

    cards: list[Card] = field(default_factory=list)

    def draw_one(self) -> Card | None:
        """Take the top card, or None when the pile is empty."""
        if self.is_empty():
            return None
        return self.cards.pop()

    def draw(self, count: int) -> list[Card]:
        """Take ``count`` cards from the top.

        Raises:
            ValueError: if ``count`` is negative.
            IndexError: if the pile holds fewer than ``count`` cards.
        """
        if count < 0:
            raise ValueError("count must be non-negative")
        if count > len(self.cards):
            raise IndexError("not enough cards remaining in deck")
        return [self.cards.pop() for _ in range(count)]

    def is_empty(self) -> bool:
        return not self.cards

    def size(self) -> int:
        return len(self.cards)


def build_deck(rng: random.Random | None = None) -> list[Card]:
    """Return all 52 cards in a fresh random order.

    Args:
        rng: Random source to shuffle with. The module-level generator is
            used when omitted; pass a seeded ``random.Random`` for
            reproducible orderings.
    """
    cards = [Card(suit, rank) for suit in SUITS for rank in RANKS]
    (rng or random).shuffle(cards)
    return cards


class DeckFactory:
    """Builders for ready-to-use draw piles."""

    @staticmethod
    def standard_deck(rng: random.Random | None = None) -> Deck:
        """A shuffled single 52-card deck."""
        return Deck(cards=build_deck(rng))

    @staticmethod
    def ordered_deck(cards: list[Card]) -> Deck:
        """A deck whose first card is dealt first.

        ``cards`` is read in dealing order; it is reversed so the first
        entry ends up on top of the pile.
        """
        return Deck(cards=list(reversed(cards)))
