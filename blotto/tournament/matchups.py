"""
Reading the matchup list.

Each line names two players separated by whitespace:

    P1 P2
    P1 P3
"""

from dataclasses import dataclass
from typing import Iterable, Iterator, List, TextIO

from blotto.tournament.errors import (
    InvalidMatchupFileError,
    MalformedMatchupError,
    IncompleteMatchupError
)


@dataclass
class Matchup:
    """Represents a single matchup between two participants."""
    participant_a: str
    participant_b: str

    @property
    def matchup_id(self) -> str:
        """Generate an ID for this matchup."""
        return f"{self.participant_a}_vs_{self.participant_b}"


def iter_matchups(lines: Iterable[str]) -> Iterator[Matchup]:
    """
    Yield matchups one line at a time.

    The file may not begin with whitespace. Every non-blank line must hold
    exactly two ids with nothing after the second one. Blank lines between
    matchups and at the end of the file are skipped. Errors surface when the
    offending line is reached, so matchups before it are still yielded.

    Args:
        lines: Lines of the matchup file, with or without newlines

    Yields:
        Matchups in file order

    Raises:
        InvalidMatchupFileError: If the file starts with a space or newline
        MalformedMatchupError: If a line is not a pair of ids
        IncompleteMatchupError: If the last line holds a single id
    """
    pending = None
    for line_num, raw in enumerate(lines, 1):
        if line_num == 1 and raw[:1] in (' ', '\n', '\r'):
            raise InvalidMatchupFileError()

        line = raw.rstrip('\r\n')
        if not line.strip():
            continue

        # A lone id is only an incomplete pair if nothing follows it
        if pending is not None:
            raise MalformedMatchupError(f"Wrong Matchup File: line {pending[0]}: '{pending[1]}'")

        ids = line.split()
        if len(ids) == 1 and line == line.rstrip():
            pending = (line_num, line)
            continue
        if len(ids) != 2 or line != line.rstrip():
            raise MalformedMatchupError(f"Wrong Matchup File: line {line_num}: '{line}'")

        yield Matchup(participant_a=ids[0], participant_b=ids[1])

    if pending is not None:
        raise IncompleteMatchupError(f"Issue with Matchup File: line {pending[0]}: '{pending[1]}'")


def parse_matchups(text: str) -> List[Matchup]:
    """Parse the full contents of a matchup file."""
    return list(iter_matchups(text.splitlines(keepends=True)))


def read_matchups(stream: TextIO) -> Iterator[Matchup]:
    """Lazily read matchups from stream; the stream must stay open while iterating."""
    return iter_matchups(stream)
