"""Deck model."""

import random
from typing import Iterator

from bisca.errors import DeckStateError, EmptyDeckError

from .card import Card, Rank, Suit

DECK_SIZE = 40


class Deck:
    """Ordered stack of cards.

    Index 0 is the top of the deck (drawn first). The trump is a reference
    to the bottom card, pinned right after shuffling; the card itself stays
    in the deck and is drawn like any other.
    """

    def __init__(self, cards: list[Card] | None = None):
        """Initialize deck.

        Args:
            cards: Initial cards, top first. Empty if not provided.
        """
        self._cards: list[Card] = list(cards) if cards else []
        self._trump: Card | None = None
        self._shuffled = False
        self._drawn = 0

    @property
    def cards(self) -> list[Card]:
        """Snapshot of the undrawn cards, top first."""
        return list(self._cards)

    @property
    def trump(self) -> Card | None:
        """Trump card, or None before designation."""
        return self._trump

    def _require_no_trump(self, action: str) -> None:
        if self._trump is not None:
            raise DeckStateError(f"Cannot {action} after trump {self._trump} is pinned")

    def build(self) -> None:
        """Populate with all 40 rank/suit combinations (rank-major order).

        Raises:
            DeckStateError: If trump is already designated.
        """
        self._require_no_trump("rebuild the deck")
        self._cards = [Card(rank=rank, suit=suit) for rank in Rank for suit in Suit]
        self._shuffled = False
        self._drawn = 0

    def shuffle(self, rng: random.Random | None = None) -> None:
        """Shuffle by repeatedly moving a random remaining card to the output.

        Args:
            rng: Random source (must provide randrange). Uses a fresh
                random.Random if not provided.

        Raises:
            DeckStateError: If trump is already designated.
        """
        self._require_no_trump("shuffle")
        rng = rng or random.Random()
        remaining = self._cards
        shuffled: list[Card] = []
        while remaining:
            pos = rng.randrange(len(remaining))
            shuffled.append(remaining.pop(pos))
        self._cards = shuffled
        self._shuffled = True

    def designate_trump(self) -> Card:
        """Pin the bottom card as trump.

        Returns:
            The trump card.

        Raises:
            DeckStateError: If trump is already set, the deck was not
                shuffled, or cards were drawn.
        """
        if self._trump is not None:
            raise DeckStateError(f"Trump already designated: {self._trump}")
        if not self._shuffled:
            raise DeckStateError("Deck must be shuffled before designating trump")
        if self._drawn:
            raise DeckStateError("Trump must be designated before any draw")
        if not self._cards:
            raise EmptyDeckError("Cannot designate trump on an empty deck")

        self._trump = self._cards[-1]
        return self._trump

    def draw(self) -> Card:
        """Remove and return the top card.

        Raises:
            EmptyDeckError: If no cards remain.
        """
        if not self._cards:
            raise EmptyDeckError("No cards remaining in deck")
        self._drawn += 1
        return self._cards.pop(0)

    def remaining(self) -> int:
        """Get number of undrawn cards."""
        return len(self._cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self._cards)

    def __len__(self) -> int:
        return len(self._cards)

    def __str__(self) -> str:
        return f"Deck({len(self._cards)} cards, trump={self._trump})"


def create_deck(rng: random.Random | None = None) -> Deck:
    """Create a full deck, shuffled, with its trump pinned."""
    deck = Deck()
    deck.build()
    deck.shuffle(rng)
    deck.designate_trump()
    return deck
