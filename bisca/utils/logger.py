"""Logging utilities and match result display."""

import logging
import sys
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from bisca.models.match_state import MatchOutcome, MatchResult, TrickRecord


def setup_logging(level: str = "INFO") -> None:
    """Configure logging for the application.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR)
    """
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stdout,
    )


class MatchDisplay:
    """Display match results to stdout."""

    def print_separator(self) -> None:
        """Print a separator line."""
        print("=" * 60)

    def print_match_start(self, names: list[str], trump: str) -> None:
        """Print seating and trump."""
        self.print_separator()
        print(f"BISCA: {' x '.join(names)}")
        print(f"Trump: {trump}")
        self.print_separator()

    def print_trick(self, record: "TrickRecord") -> None:
        """Print each play of a trick and its winner."""
        print(f"\nTrick {record.number}:")
        for play in record.plays:
            print(f"{play.player}: {play.card}")
        print(f"  -> {record.winner} takes {record.points} points")

    def print_outcome(self, outcome: "MatchOutcome") -> None:
        """Print the final team comparison."""
        score = f"{outcome.team_a_total} x {outcome.team_b_total}"
        if outcome.is_draw:
            print(f"\n\nDraw! {score}")
            return
        print(f"\n\nVictory for {' and '.join(outcome.winners)}! {score}")

    def print_result(self, result: "MatchResult") -> None:
        """Print every trick followed by the outcome."""
        for record in result.tricks:
            self.print_trick(record)
        self.print_outcome(result.outcome)
