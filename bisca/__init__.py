"""Bisca card game engine."""

__version__ = "0.1.0"

from .errors import (
    BiscaError,
    ConfigurationError,
    DeckStateError,
    EmptyDeckError,
    EmptyHandError,
    MatchStateError,
)
from .game import Match, create_match, play_match

__all__ = [
    "BiscaError",
    "ConfigurationError",
    "DeckStateError",
    "EmptyDeckError",
    "EmptyHandError",
    "MatchStateError",
    "Match",
    "create_match",
    "play_match",
]
