"""
Errors raised while reading tournament input and scoring matchups.

Each message is what the command line prints after the program name.
"""


class TournamentError(ValueError):
    """Base class for tournament input and configuration errors."""
    message = "Tournament error"

    def __init__(self, message: str = None):
        super().__init__(message or self.message)


class InvalidModeError(TournamentError):
    message = "missing 'win' or 'score'"


class InvalidWeightsError(TournamentError):
    message = "battlefield weights need to be positive numbers"


class InvalidDistributionError(TournamentError):
    message = "Invalid Distribution"


class DuplicatePlayerError(TournamentError):
    message = "Duplicate Player"


class EmptyDistributionError(TournamentError):
    message = "Empty Distribution File"


class InvalidMatchupFileError(TournamentError):
    message = "Invalid Matchup File"


class MalformedMatchupError(TournamentError):
    message = "Wrong Matchup File"


class EmptyMatchupFileError(TournamentError):
    message = "Empty Matchup File"


class InvalidPlayerError(TournamentError):
    message = "Invalid Player"


class IncompleteMatchupError(TournamentError):
    message = "Issue with Matchup File"


class PlayerStorageError(TournamentError):
    message = "could not store player"
