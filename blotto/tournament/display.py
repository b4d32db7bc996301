"""
Display formatting for tournament results.
"""

from typing import List, Optional, Sequence, TYPE_CHECKING

from blotto.tournament.scoring import MatchupResult

if TYPE_CHECKING:
    from blotto.tournament.runner import TournamentResult


def format_ranking_line(value: float, participant: str) -> str:
    """Format one ranking row: the metric in a 7-wide column, then the id."""
    return f"{value:7.3f} {participant}"


def format_rankings(result: 'TournamentResult') -> str:
    """
    Format the final standings, best player first.

    Args:
        result: Complete tournament result

    Returns:
        One line per ranked player
    """
    lines: List[str] = [
        format_ranking_line(result.metric(record), record.participant)
        for record in result.get_rankings()
    ]
    return "\n".join(lines)


def format_matchup_result(
    matchup_num: int,
    total_matchups: Optional[int],
    result: MatchupResult
) -> str:
    """Format a single matchup result line; the total is omitted when unknown."""
    outcome = "tie" if result.is_tie else f"{result.winner} wins"
    counter = f"{matchup_num}" if total_matchups is None else f"{matchup_num}/{total_matchups}"
    return (f"[{counter}] "
            f"{result.participant_a} vs {result.participant_b}: "
            f"{result.score_a:g}-{result.score_b:g} ({outcome})")


def format_tournament_header(
    mode: str,
    num_players: int,
    num_matchups: Optional[int],
    weights: Sequence[float]
) -> str:
    """Format tournament header information."""
    lines = []
    lines.append(f"Mode: {mode}")
    lines.append(f"Players: {num_players}")
    if num_matchups is not None:
        lines.append(f"Matchups: {num_matchups}")
    lines.append(f"Battlefield weights: {' '.join(f'{w:g}' for w in weights)}")
    lines.append("")
    return "\n".join(lines)
