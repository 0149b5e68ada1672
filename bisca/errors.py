"""Exceptions raised by the Bisca engine."""


class BiscaError(Exception):
    """Base class for all engine errors."""


class ConfigurationError(BiscaError):
    """Invalid match setup (player count or names)."""


class EmptyDeckError(BiscaError):
    """A card was drawn from an exhausted deck."""


class EmptyHandError(BiscaError):
    """A player was asked to play with no cards in hand."""


class DeckStateError(BiscaError):
    """Trump designated twice, or after cards were drawn."""


class MatchStateError(BiscaError):
    """Match operation invoked in the wrong phase."""
