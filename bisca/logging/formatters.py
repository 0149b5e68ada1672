"""Formatters for game log output."""

from bisca.models.card import RANK_NAMES, Card, Suit
from bisca.models.player import Player

# Suit codes for log output
SUIT_CODES: dict[Suit, str] = {
    Suit.COPAS: "C",
    Suit.ESPADAS: "E",
    Suit.OUROS: "O",
    Suit.PAUS: "P",
}


def format_card(card: Card) -> str:
    """Format a single card to string.

    Args:
        card: Card to format.

    Returns:
        Formatted string (e.g., "AC" for A copas, "7P" for 7 paus).
    """
    return f"{RANK_NAMES[card.rank]}{SUIT_CODES[card.suit]}"


def format_cards(cards: list[Card]) -> str:
    """Format cards to a comma-separated string (empty if no cards)."""
    return ",".join(format_card(c) for c in cards)


def format_hands(players: list[Player]) -> list[dict[str, str]]:
    """Format all players' hands.

    Names are not required to be unique, so hands are a list rather than a
    dict keyed by name.

    Args:
        players: Players in current play order.

    Returns:
        One {"player", "hand"} entry per player, in the given order.
    """
    return [{"player": p.name, "hand": format_cards(p.hand)} for p in players]
