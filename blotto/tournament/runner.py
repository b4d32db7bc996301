"""
Tournament runner that scores every matchup and ranks the players.
"""

import sys
from collections.abc import Sized
from dataclasses import dataclass, field
from typing import Iterable, List, Optional, TextIO

from blotto.gmap import GMap, string_gmap
from blotto.tournament.errors import (
    InvalidModeError,
    InvalidWeightsError,
    InvalidPlayerError,
    EmptyMatchupFileError
)
from blotto.tournament.matchups import Matchup
from blotto.tournament.scoring import (
    MatchupResult,
    PlayerRecord,
    play_matchup,
    record_matchup
)
from blotto.tournament.display import format_tournament_header, format_matchup_result
from blotto.utils.constants import MAX_ID, MODE_SCORE, MODES


@dataclass
class TournamentConfig:
    """Configuration for a tournament run."""
    mode: str
    weights: List[float]
    max_id: int = MAX_ID

    @property
    def battlefields(self) -> int:
        return len(self.weights)

    def validate(self):
        """
        Check the mode and battlefield weights.

        Raises:
            InvalidModeError: If mode is not 'win' or 'score'
            InvalidWeightsError: If there are no weights or any is not positive
        """
        if self.mode not in MODES:
            raise InvalidModeError()
        if not self.weights:
            raise InvalidWeightsError("missing distribution")
        for w in self.weights:
            if not w > 0:
                raise InvalidWeightsError(
                    f"battlefield weights need to be positive numbers, got {w}"
                )


@dataclass
class TournamentResult:
    """Complete results of a tournament."""
    mode: str
    participants: List[PlayerRecord]
    matchups: List[MatchupResult] = field(default_factory=list)

    def metric(self, record: PlayerRecord) -> float:
        """The value players are ranked by in this tournament's mode."""
        if self.mode == MODE_SCORE:
            return record.average_score
        return record.win_rate

    def get_rankings(self) -> List[PlayerRecord]:
        """Return participants sorted by the mode metric (descending), then id."""
        return sorted(self.participants, key=lambda p: (-self.metric(p), p.participant))


class TournamentRunner:
    """
    Scores a list of matchups between players with known distributions.

    Usage:
        runner = TournamentRunner(TournamentConfig(mode="win", weights=[1, 2, 3]))
        result = runner.run(players, matchups)
    """

    def __init__(
        self,
        config: TournamentConfig,
        verbose: bool = False,
        out: Optional[TextIO] = None
    ):
        """
        Initialize the tournament runner.

        Args:
            config: Tournament configuration (validated here)
            verbose: Print a header and each matchup result
            out: Stream for verbose output (default: stdout)
        """
        config.validate()
        self.config = config
        self.verbose = verbose
        self.out = out

    def _print(self, text: str):
        print(text, file=self.out or sys.stdout)

    def _check_players(self, players: GMap, matchup: Matchup):
        for participant in (matchup.participant_a, matchup.participant_b):
            if not players.contains_key(participant):
                raise InvalidPlayerError(f"Invalid Player: {participant}")

    def run(self, players: GMap, matchups: Iterable[Matchup]) -> TournamentResult:
        """
        Score every matchup and collect per-player records.

        Args:
            players: GMap from player id to distribution
            matchups: Matchups to play, in order; may be a lazy reader, in
                which case its errors surface in file order alongside
                unknown-player errors

        Returns:
            TournamentResult holding a record for every player that played

        Raises:
            EmptyMatchupFileError: If there are no matchups
            InvalidPlayerError: If a matchup names an unknown player
        """
        total = len(matchups) if isinstance(matchups, Sized) else None

        if self.verbose:
            self._print(format_tournament_header(
                self.config.mode,
                players.size(),
                total,
                self.config.weights
            ))

        with string_gmap() as records:
            results = []
            for i, matchup in enumerate(matchups, 1):
                self._check_players(players, matchup)
                result = play_matchup(matchup, players, self.config.weights)
                record_matchup(records, result)
                results.append(result)

                if self.verbose:
                    self._print(format_matchup_result(i, total, result))

            if not results:
                raise EmptyMatchupFileError()

            return TournamentResult(
                mode=self.config.mode,
                participants=records.values(),
                matchups=results
            )
