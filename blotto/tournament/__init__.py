"""
Tournament module for scoring Colonel Blotto matchups.

Provides:
- read_entries / read_matchups: Input readers
- score_battlefields: Weighted battlefield comparison
- TournamentRunner: Scores matchups and collects player records
- format_rankings: Final standings output
"""

from blotto.tournament.entry import Entry, read_entry, read_entries
from blotto.tournament.matchups import Matchup, read_matchups, parse_matchups
from blotto.tournament.scoring import score_battlefields, PlayerRecord, MatchupResult
from blotto.tournament.runner import TournamentRunner, TournamentConfig, TournamentResult
from blotto.tournament.display import format_rankings, format_ranking_line
from blotto.tournament.errors import TournamentError

__all__ = [
    'Entry',
    'read_entry',
    'read_entries',
    'Matchup',
    'read_matchups',
    'parse_matchups',
    'score_battlefields',
    'PlayerRecord',
    'MatchupResult',
    'TournamentRunner',
    'TournamentConfig',
    'TournamentResult',
    'format_rankings',
    'format_ranking_line',
    'TournamentError',
]
