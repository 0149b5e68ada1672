"""Trick resolution and scoring rules."""

from typing import Sequence, TypeVar

from bisca.models.card import Card
from bisca.models.match_state import MatchOutcome
from bisca.models.player import Player

T = TypeVar("T")


def beats(challenger: Card, best: Card, trump: Card) -> bool:
    """Check if a later card takes the trick from the current best card.

    Args:
        challenger: Card being played
        best: Best card played so far
        trump: Trump card (only its suit matters)

    Returns:
        True if challenger becomes the new best card.
    """
    if challenger.suit == best.suit:
        return challenger.rank_order > best.rank_order
    return challenger.suit == trump.suit


def trick_winner(cards: Sequence[Card], trump: Card) -> int:
    """Find the winning card of a trick.

    Scans left to right keeping a running best card. The first card leads;
    a later card replaces the best only if it is the same suit and higher
    ranked, or it is a trump and the best is not.

    Args:
        cards: Cards in play order
        trump: Trump card

    Returns:
        Index of the winning card.
    """
    if not cards:
        raise ValueError("Cannot resolve an empty trick")

    best_index = 0
    for i in range(1, len(cards)):
        if beats(cards[i], cards[best_index], trump):
            best_index = i
    return best_index


def trick_points(cards: Sequence[Card]) -> int:
    """Sum of point values of the cards in a trick."""
    return sum(card.point_value for card in cards)


def rotate(order: Sequence[T], winner_index: int) -> list[T]:
    """Rotate play order so the winner leads the next trick.

    [A, B, C, D] with winner at index 2 becomes [C, D, A, B].
    """
    if not 0 <= winner_index < len(order):
        raise IndexError(f"Winner index {winner_index} out of range")
    return list(order[winner_index:]) + list(order[:winner_index])


def team_total(team: Sequence[Player]) -> int:
    """Sum of member scores."""
    return sum(player.get_score() for player in team)


def resolve_outcome(team_a: Sequence[Player], team_b: Sequence[Player]) -> MatchOutcome:
    """Compare team totals.

    Args:
        team_a: Players seated at even positions
        team_b: Players seated at odd positions

    Returns:
        MatchOutcome; winners is empty when totals are equal.
    """
    total_a = team_total(team_a)
    total_b = team_total(team_b)

    if total_a == total_b:
        winners: list[str] = []
    elif total_a > total_b:
        winners = [p.name for p in team_a]
    else:
        winners = [p.name for p in team_b]

    return MatchOutcome(
        team_a=[p.name for p in team_a],
        team_b=[p.name for p in team_b],
        team_a_total=total_a,
        team_b_total=total_b,
        is_draw=total_a == total_b,
        winners=winners,
    )
