"""
Battlefield scoring and per-player records.

A player takes a battlefield's full weight by allocating strictly more
than the opponent there; equal allocations split the weight evenly. The
player with the higher total wins the matchup, and equal totals count as
half a win for each side.
"""

from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

import numpy as np

from blotto.gmap import GMap
from blotto.tournament.errors import PlayerStorageError
from blotto.tournament.matchups import Matchup


def score_battlefields(
    dist_a: np.ndarray,
    dist_b: np.ndarray,
    weights: Sequence[float]
) -> Tuple[float, float]:
    """
    Score one matchup across all battlefields.

    Args:
        dist_a: Allocations of player A
        dist_b: Allocations of player B
        weights: Value of each battlefield

    Returns:
        (score_a, score_b)

    Raises:
        ValueError: If the three vectors differ in length
    """
    a = np.asarray(dist_a)
    b = np.asarray(dist_b)
    w = np.asarray(weights, dtype=np.float64)

    if not (a.shape == b.shape == w.shape):
        raise ValueError(
            f"Distribution lengths {a.shape} and {b.shape} do not match "
            f"{w.shape[0] if w.ndim else 0} battlefields"
        )

    half = np.where(a == b, w / 2, 0.0)
    score_a = np.where(a > b, w, 0.0) + half
    score_b = np.where(a < b, w, 0.0) + half
    return float(score_a.sum()), float(score_b.sum())


@dataclass
class MatchupResult:
    """Outcome of a single matchup."""
    participant_a: str
    participant_b: str
    score_a: float = 0.0
    score_b: float = 0.0

    @property
    def winner(self) -> Optional[str]:
        """Id of the winning participant, or None for a tie."""
        if self.score_a > self.score_b:
            return self.participant_a
        if self.score_b > self.score_a:
            return self.participant_b
        return None

    @property
    def is_tie(self) -> bool:
        return self.score_a == self.score_b


@dataclass
class PlayerRecord:
    """Aggregate results for one player."""
    participant: str
    wins: float = 0.0
    games: int = 0
    overall_score: float = 0.0

    @property
    def win_rate(self) -> float:
        if self.games == 0:
            return 0.0
        return self.wins / self.games

    @property
    def average_score(self) -> float:
        if self.games == 0:
            return 0.0
        return self.overall_score / self.games


def play_matchup(matchup: Matchup, players: GMap, weights: Sequence[float]) -> MatchupResult:
    """Score matchup using the distributions stored in players."""
    score_a, score_b = score_battlefields(
        players.get(matchup.participant_a),
        players.get(matchup.participant_b),
        weights
    )
    return MatchupResult(
        participant_a=matchup.participant_a,
        participant_b=matchup.participant_b,
        score_a=score_a,
        score_b=score_b
    )


def get_or_create_record(records: GMap, participant: str) -> PlayerRecord:
    """Return the record for participant, adding an empty one if needed."""
    record = records.get(participant)
    if record is None:
        record = PlayerRecord(participant=participant)
        if not records.put(participant, record).ok:
            raise PlayerStorageError(f"could not store player {participant}")
    return record


def record_matchup(records: GMap, result: MatchupResult):
    """
    Fold a matchup result into the per-player records.

    A player matched against itself shares one record, so it is credited
    with two games, one win and both sides of the score.

    Args:
        records: GMap from participant id to PlayerRecord
        result: The scored matchup
    """
    record_a = get_or_create_record(records, result.participant_a)
    record_b = get_or_create_record(records, result.participant_b)

    record_a.overall_score += result.score_a
    record_b.overall_score += result.score_b
    record_a.games += 1
    record_b.games += 1

    if result.is_tie:
        record_a.wins += 0.5
        record_b.wins += 0.5
    elif result.winner == result.participant_a:
        record_a.wins += 1
    else:
        record_b.wins += 1
