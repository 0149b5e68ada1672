"""Match models."""

from .card import Card, Rank, Suit
from .deck import Deck, create_deck
from .match_state import (
    MatchOutcome,
    MatchPhase,
    MatchResult,
    MatchState,
    Play,
    TrickRecord,
)
from .player import Player

__all__ = [
    "Card",
    "Rank",
    "Suit",
    "Deck",
    "create_deck",
    "Player",
    "MatchOutcome",
    "MatchPhase",
    "MatchResult",
    "MatchState",
    "Play",
    "TrickRecord",
]
