"""Match state and result models."""

from enum import Enum

from pydantic import BaseModel, Field

from .card import Card


class MatchPhase(str, Enum):
    """Lifecycle phase of a match."""

    NOT_STARTED = "not_started"
    DEALING = "dealing"
    TRICK_LOOP = "trick_loop"  # Deck still has cards, replenish after each trick
    FINAL_TRICKS = "final_tricks"  # Deck exhausted, play out the hands
    FINISHED = "finished"


class Play(BaseModel):
    """A single card played in a trick."""

    player: str
    card: Card


class TrickRecord(BaseModel):
    """Result of one resolved trick."""

    number: int
    trump: Card
    plays: list[Play]  # In play order
    winner_index: int  # Index into plays
    winner: str
    points: int


class MatchOutcome(BaseModel):
    """Final team comparison."""

    team_a: list[str]
    team_b: list[str]
    team_a_total: int
    team_b_total: int
    is_draw: bool = False
    winners: list[str] = Field(default_factory=list)  # Empty on a draw


class MatchResult(BaseModel):
    """Everything the presentation layer needs to render a match."""

    tricks: list[TrickRecord]
    outcome: MatchOutcome


class MatchState(BaseModel):
    """Progress of a match through its lifecycle."""

    phase: MatchPhase = MatchPhase.NOT_STARTED
    trick_number: int = 0
    tricks: list[TrickRecord] = Field(default_factory=list)
    outcome: MatchOutcome | None = None

    def __str__(self) -> str:
        return f"Match [{self.phase.value}], {self.trick_number} tricks played"
