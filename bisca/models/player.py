"""Player model."""

import random

from pydantic import BaseModel, Field

from bisca.errors import EmptyHandError

from .card import Card


class Player(BaseModel):
    """Player state."""

    name: str
    hand: list[Card] = Field(default_factory=list)
    score: int = 0

    def receive(self, card: Card) -> None:
        """Add a card to the hand."""
        self.hand.append(card)

    def play_random(self, rng: random.Random | None = None) -> Card:
        """Remove and return a uniformly random card from the hand.

        Raises:
            EmptyHandError: If the hand is empty.
        """
        if not self.hand:
            raise EmptyHandError(f"{self.name} has no cards to play")
        rng = rng or random.Random()
        return self.hand.pop(rng.randrange(len(self.hand)))

    def add_points(self, points: int) -> None:
        """Add trick points to the score."""
        if points < 0:
            raise ValueError(f"Points must be non-negative, got {points}")
        self.score += points

    def get_score(self) -> int:
        """Get accumulated points."""
        return self.score

    def hand_count(self) -> int:
        """Get number of cards in hand."""
        return len(self.hand)

    def __str__(self) -> str:
        return f"{self.name} ({self.score} pts)"

    def __repr__(self) -> str:
        return f"Player(name={self.name!r}, score={self.score}, hand={self.hand!r})"
