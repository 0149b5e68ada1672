"""Match engine for Bisca."""

from __future__ import annotations

import logging
import random

from bisca.errors import ConfigurationError, MatchStateError
from bisca.logging import GameLogger
from bisca.models.card import Card
from bisca.models.deck import Deck, create_deck
from bisca.models.match_state import (
    MatchOutcome,
    MatchPhase,
    MatchResult,
    MatchState,
    Play,
    TrickRecord,
)
from bisca.models.player import Player

from .trick import resolve_outcome, rotate, trick_points, trick_winner

logger = logging.getLogger(__name__)

HAND_SIZE = 3
VALID_PLAYER_COUNTS = (2, 4)


class Match:
    """A single Bisca match.

    Players at even seats form team A, odd seats team B. Teams are fixed at
    construction; only the play order rotates between tricks.
    """

    def __init__(
        self,
        players: list[Player],
        deck: Deck,
        rng: random.Random | None = None,
        game_logger: GameLogger | None = None,
    ):
        """Initialize match.

        Args:
            players: Players in seat order
            deck: Shuffled deck with trump designated
            rng: Random source for card choice
            game_logger: GameLogger instance for detailed logging
        """
        if len(players) not in VALID_PLAYER_COUNTS:
            raise ConfigurationError(
                f"Bisca needs 2 or 4 players, got {len(players)}"
            )
        if deck.trump is None:
            raise MatchStateError("Deck trump must be designated before the match")

        self.deck = deck
        self.players: list[Player] = list(players)
        self.team_a: list[Player] = self.players[0::2]
        self.team_b: list[Player] = self.players[1::2]
        self.rng = rng or random.Random()
        self.game_logger = game_logger
        self.state = MatchState()

    @property
    def trump(self) -> Card:
        """Trump card for the whole match."""
        if self.deck.trump is None:
            raise MatchStateError("Deck has no trump designated")
        return self.deck.trump

    @property
    def phase(self) -> MatchPhase:
        return self.state.phase

    def _require_phase(self, *phases: MatchPhase) -> None:
        if self.state.phase not in phases:
            expected = ", ".join(p.value for p in phases)
            raise MatchStateError(
                f"Match is in phase {self.state.phase.value}, expected {expected}"
            )

    def deal_round(self) -> None:
        """Deal one card from the top of the deck to each player in play order."""
        for player in self.players:
            player.receive(self.deck.draw())

    def deal_initial(self) -> None:
        """Deal the starting hands and enter the trick loop."""
        self._require_phase(MatchPhase.NOT_STARTED)
        self.state.phase = MatchPhase.DEALING

        if self.game_logger:
            self.game_logger.log_match_start(
                self.players, self.team_a, self.team_b, self.trump
            )

        for _ in range(HAND_SIZE):
            self.deal_round()

        logger.debug(f"Initial hands dealt, {self.deck.remaining()} cards left")

        if self.game_logger:
            self.game_logger.log_deal(
                self.state.phase, self.players, self.deck.remaining()
            )

        self.state.phase = MatchPhase.TRICK_LOOP

    def replenish(self) -> None:
        """Deal one card to each player if the deck still has cards."""
        self._require_phase(MatchPhase.TRICK_LOOP)
        if self.deck.remaining() == 0:
            return

        self.deal_round()

        if self.game_logger:
            self.game_logger.log_deal(
                self.state.phase, self.players, self.deck.remaining()
            )

    def play_trick(self) -> TrickRecord:
        """Every player plays a random card; the winner scores and leads next.

        Returns:
            TrickRecord for the resolved trick
        """
        self._require_phase(MatchPhase.TRICK_LOOP, MatchPhase.FINAL_TRICKS)
        self.state.trick_number += 1

        plays: list[Play] = []
        for player in self.players:
            card = player.play_random(self.rng)
            logger.debug(f"{player.name}: {card}")
            plays.append(Play(player=player.name, card=card))

        cards = [play.card for play in plays]
        winner_index = trick_winner(cards, self.trump)
        points = trick_points(cards)

        winner = self.players[winner_index]
        winner.add_points(points)

        record = TrickRecord(
            number=self.state.trick_number,
            trump=self.trump,
            plays=plays,
            winner_index=winner_index,
            winner=winner.name,
            points=points,
        )
        self.state.tricks.append(record)

        logger.info(
            f"Trick {record.number}: {winner.name} wins with "
            f"{cards[winner_index]} (+{points})"
        )

        self.players = rotate(self.players, winner_index)

        if self.game_logger:
            self.game_logger.log_trick(record, self.players)

        return record

    def finish(self) -> MatchOutcome:
        """Compare team totals and end the match."""
        self._require_phase(MatchPhase.FINAL_TRICKS)

        outcome = resolve_outcome(self.team_a, self.team_b)
        self.state.outcome = outcome
        self.state.phase = MatchPhase.FINISHED

        if outcome.is_draw:
            logger.info(f"Match drawn {outcome.team_a_total} x {outcome.team_b_total}")
        else:
            logger.info(
                f"Match won by {' and '.join(outcome.winners)} "
                f"{outcome.team_a_total} x {outcome.team_b_total}"
            )

        if self.game_logger:
            self.game_logger.log_match_end(outcome)

        return outcome

    def play(self) -> MatchResult:
        """Run the whole match from dealing to final score.

        Returns:
            MatchResult with every trick and the outcome
        """
        self.deal_initial()

        while self.deck.remaining() > 0:
            self.play_trick()
            self.replenish()

        self.state.phase = MatchPhase.FINAL_TRICKS
        for _ in range(HAND_SIZE):
            self.play_trick()

        outcome = self.finish()
        return MatchResult(tricks=list(self.state.tricks), outcome=outcome)


def create_match(
    *names: str | None,
    rng: random.Random | None = None,
    game_logger: GameLogger | None = None,
) -> Match:
    """Create a match with a freshly shuffled deck.

    Trailing None names are treated as absent, so a 2-player match can be
    created as create_match("A", "B", None, None).

    Args:
        names: Player names in seat order (2 or 4)
        rng: Random source shared by the shuffle and card choice
        game_logger: GameLogger instance for detailed logging

    Returns:
        Match ready to be played

    Raises:
        ConfigurationError: Wrong number of players or a blank name
    """
    provided = list(names)
    while provided and provided[-1] is None:
        provided.pop()

    if len(provided) not in VALID_PLAYER_COUNTS:
        raise ConfigurationError(
            f"Bisca is played by 2 or 4 players, got {len(provided)}"
        )
    for i, name in enumerate(provided, 1):
        if not isinstance(name, str) or not name.strip():
            raise ConfigurationError(f"Player {i} needs a non-empty name")

    rng = rng or random.Random()
    deck = create_deck(rng)
    players = [Player(name=name) for name in provided]

    logger.info(
        f"Match created: {', '.join(provided)} (trump: {deck.trump})"
    )

    return Match(players, deck, rng=rng, game_logger=game_logger)


def play_match(match: Match) -> MatchResult:
    """Play a match to completion."""
    return match.play()
