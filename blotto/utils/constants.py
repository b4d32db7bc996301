"""
Constants for the Blotto tournament scorer.
"""

# Prefix for error messages
PROGRAM_NAME = "Blotto"

# Player identifiers must be shorter than this many characters
MAX_ID = 32

# Ranking modes
MODE_WIN = "win"      # Rank by wins / games played
MODE_SCORE = "score"  # Rank by accumulated score / games played
MODES = (MODE_WIN, MODE_SCORE)

# Process exit statuses
EXIT_OK = 0
EXIT_ERROR = 1
