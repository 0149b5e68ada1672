"""Game logger for detailed match replay."""

import json
from datetime import datetime
from pathlib import Path
from typing import Any, TextIO

from pydantic import BaseModel

from bisca.models.card import Card
from bisca.models.match_state import MatchOutcome, MatchPhase, TrickRecord
from bisca.models.player import Player

from .formatters import format_card, format_hands


class GameLogConfig(BaseModel):
    """Configuration for game logging."""

    enabled: bool = False
    output_path: str = "game_log.jsonl"


class GameLogger:
    """Logger for match events in JSONL format.

    Each line in the output file is a JSON object representing one event,
    so a match can be replayed trick by trick.
    """

    def __init__(self, config: GameLogConfig | None = None):
        """Initialize game logger.

        Args:
            config: Logging configuration. If None, logging is disabled.
        """
        self.config = config or GameLogConfig()
        self._file: TextIO | None = None

    def __enter__(self) -> "GameLogger":
        """Context manager entry."""
        if self.config.enabled and self.config.output_path:
            path = Path(self.config.output_path)
            path.parent.mkdir(parents=True, exist_ok=True)
            self._file = open(path, "a", encoding="utf-8")
        return self

    def __exit__(self, *args: Any) -> None:
        """Context manager exit."""
        self.close()

    def close(self) -> None:
        """Close the log file."""
        if self._file:
            self._file.close()
            self._file = None

    def _write(self, event: dict[str, Any]) -> None:
        """Write an event to the log file."""
        if self._file:
            self._file.write(json.dumps(event, ensure_ascii=False) + "\n")
            self._file.flush()

    def log_match_start(
        self,
        players: list[Player],
        team_a: list[Player],
        team_b: list[Player],
        trump: Card,
    ) -> None:
        """Log match start with seating, teams and trump."""
        self._write({
            "type": "match_start",
            "timestamp": datetime.now().isoformat(),
            "players": [p.name for p in players],
            "teams": {
                "a": [p.name for p in team_a],
                "b": [p.name for p in team_b],
            },
            "trump": format_card(trump),
        })

    def log_deal(self, phase: MatchPhase, players: list[Player], remaining: int) -> None:
        """Log hands after a deal.

        Args:
            phase: Phase in which the deal happened.
            players: Players in current play order.
            remaining: Cards left in the deck afterwards.
        """
        self._write({
            "type": "deal",
            "phase": phase.value,
            "hands": format_hands(players),
            "remaining": remaining,
        })

    def log_trick(self, record: TrickRecord, players: list[Player]) -> None:
        """Log a resolved trick.

        Args:
            record: Trick result.
            players: Players after scoring (for running scores).
        """
        self._write({
            "type": "trick",
            "trick": record.number,
            "plays": [
                {"player": play.player, "card": format_card(play.card)}
                for play in record.plays
            ],
            "winner": record.winner,
            "points": record.points,
            "scores": [{"player": p.name, "score": p.score} for p in players],
        })

    def log_match_end(self, outcome: MatchOutcome) -> None:
        """Log final team totals."""
        self._write({
            "type": "match_end",
            "team_a_total": outcome.team_a_total,
            "team_b_total": outcome.team_b_total,
            "draw": outcome.is_draw,
            "winners": outcome.winners,
        })
