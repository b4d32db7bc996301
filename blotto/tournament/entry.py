"""
Reading player distributions.

Each line holds a player id followed by one non-negative integer per
battlefield, separated by commas:

    P1,10,20,30,40

A blank line or the end of the stream ends the list.
"""

from dataclasses import dataclass
from typing import Optional, TextIO

import numpy as np

from blotto.gmap import GMap, string_gmap
from blotto.tournament.errors import (
    InvalidDistributionError,
    DuplicatePlayerError,
    EmptyDistributionError,
    PlayerStorageError
)
from blotto.utils.constants import MAX_ID

# Largest allocation a distribution array can hold
MAX_ALLOCATION = int(np.iinfo(np.int64).max)


@dataclass
class Entry:
    """A player id and its distribution across battlefields."""
    id: str
    distribution: Optional[np.ndarray] = None

    @property
    def is_terminator(self) -> bool:
        """True for the empty entry that marks the end of the list."""
        return self.id == ""


def parse_entry(line: str, max_id: int, battlefields: int) -> Entry:
    """
    Parse a single distribution line.

    Args:
        line: Line text without its trailing newline
        max_id: Ids must be shorter than this many characters
        battlefields: Number of allocations expected after the id

    Returns:
        The parsed Entry

    Raises:
        InvalidDistributionError: If the line is not a valid distribution
    """
    fields = line.split(',')
    player_id, allocations = fields[0], fields[1:]

    if not player_id or len(player_id) >= max_id:
        raise InvalidDistributionError(f"Invalid Distribution: bad player id '{player_id}'")

    if len(allocations) != battlefields:
        raise InvalidDistributionError(
            f"Invalid Distribution: {player_id} has {len(allocations)} "
            f"allocations, expected {battlefields}"
        )

    values = []
    for field in allocations:
        try:
            value = int(field)
        except ValueError:
            raise InvalidDistributionError(
                f"Invalid Distribution: {player_id} has non-integer allocation '{field}'"
            )
        if value < 0:
            raise InvalidDistributionError(
                f"Invalid Distribution: {player_id} has negative allocation {value}"
            )
        if value > MAX_ALLOCATION:
            raise InvalidDistributionError(
                f"Invalid Distribution: {player_id} has oversized allocation {value}"
            )
        values.append(value)

    return Entry(id=player_id, distribution=np.array(values, dtype=np.int64))


def read_entry(stream: TextIO, max_id: int, battlefields: int) -> Entry:
    """
    Read the next entry from stream.

    Returns:
        The parsed Entry, or the terminator Entry (empty id) on a blank
        line or end of stream
    """
    line = stream.readline()
    line = line.rstrip('\r\n')
    if line == "":
        return Entry(id="")
    return parse_entry(line, max_id, battlefields)


def read_entries(stream: TextIO, battlefields: int, max_id: int = MAX_ID) -> GMap:
    """
    Read all player distributions up to the terminating blank line.

    Args:
        stream: Text stream of distribution lines
        battlefields: Number of battlefields per distribution
        max_id: Ids must be shorter than this many characters

    Returns:
        GMap from player id to distribution array

    Raises:
        InvalidDistributionError: On a malformed line
        DuplicatePlayerError: If an id appears twice
        EmptyDistributionError: If no players were read
        PlayerStorageError: If the player map could not copy an id
    """
    players = string_gmap()
    try:
        entry = read_entry(stream, max_id, battlefields)
        while not entry.is_terminator:
            if players.contains_key(entry.id):
                raise DuplicatePlayerError(f"Duplicate Player: {entry.id}")
            if not players.put(entry.id, entry.distribution).ok:
                raise PlayerStorageError(f"could not store player {entry.id}")
            entry = read_entry(stream, max_id, battlefields)

        if players.size() == 0:
            raise EmptyDistributionError()
    except Exception:
        players.destroy()
        raise

    return players
