"""Card model and the fixed Bisca rank/point tables."""

from enum import IntEnum

from pydantic import BaseModel


class Suit(IntEnum):
    """Card suit (order used when building the deck)."""

    COPAS = 0
    ESPADAS = 1
    OUROS = 2
    PAUS = 3


class Rank(IntEnum):
    """Card rank.

    Value is the rank order: position in the canonical strength sequence
    2 < 3 < 4 < 5 < 6 < Q < J < K < 7 < A, shared across suits.
    """

    TWO = 0
    THREE = 1
    FOUR = 2
    FIVE = 3
    SIX = 4
    QUEEN = 5
    JACK = 6
    KING = 7
    SEVEN = 8
    ACE = 9


RANK_NAMES = {
    Rank.TWO: "2",
    Rank.THREE: "3",
    Rank.FOUR: "4",
    Rank.FIVE: "5",
    Rank.SIX: "6",
    Rank.QUEEN: "Q",
    Rank.JACK: "J",
    Rank.KING: "K",
    Rank.SEVEN: "7",
    Rank.ACE: "A",
}

SUIT_NAMES = {
    Suit.COPAS: "copas",
    Suit.ESPADAS: "espadas",
    Suit.OUROS: "ouros",
    Suit.PAUS: "paus",
}

POINT_VALUES = {
    Rank.TWO: 0,
    Rank.THREE: 0,
    Rank.FOUR: 0,
    Rank.FIVE: 0,
    Rank.SIX: 0,
    Rank.QUEEN: 2,
    Rank.JACK: 3,
    Rank.KING: 4,
    Rank.SEVEN: 10,
    Rank.ACE: 11,
}

# Sum of every card's points in a full deck
TOTAL_POINTS = 120


class Card(BaseModel, frozen=True):
    """Single playing card."""

    rank: Rank
    suit: Suit

    @property
    def point_value(self) -> int:
        """Points this card is worth when collected in a trick."""
        return POINT_VALUES[self.rank]

    @property
    def rank_order(self) -> int:
        """Strength of the rank (0 weakest, 9 strongest)."""
        return int(self.rank)

    def __str__(self) -> str:
        return f"{RANK_NAMES[self.rank]} {SUIT_NAMES[self.suit]}"

    def __repr__(self) -> str:
        return str(self)
