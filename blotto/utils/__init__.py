"""
Utilities module for the Blotto tournament scorer.
"""
from blotto.utils.constants import (
    PROGRAM_NAME, MAX_ID, MODE_WIN, MODE_SCORE, MODES,
    EXIT_OK, EXIT_ERROR
)

__all__ = [
    'PROGRAM_NAME', 'MAX_ID', 'MODE_WIN', 'MODE_SCORE', 'MODES',
    'EXIT_OK', 'EXIT_ERROR'
]
