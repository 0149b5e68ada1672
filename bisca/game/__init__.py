"""Game logic."""

from .engine import Match, create_match, play_match
from .trick import beats, resolve_outcome, rotate, trick_points, trick_winner

__all__ = [
    "Match",
    "create_match",
    "play_match",
    "beats",
    "resolve_outcome",
    "rotate",
    "trick_points",
    "trick_winner",
]
