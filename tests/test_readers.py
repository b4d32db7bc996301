"""
Tests for reading distributions and matchups.
"""

import io

import numpy as np
import pytest

from blotto.tournament.entry import parse_entry, read_entry, read_entries
from blotto.gmap import GMap, compare_keys, hash29, release_key
from blotto.tournament.matchups import Matchup, iter_matchups, parse_matchups, read_matchups
from blotto.tournament.errors import (
    InvalidDistributionError,
    DuplicatePlayerError,
    EmptyDistributionError,
    InvalidMatchupFileError,
    MalformedMatchupError,
    IncompleteMatchupError,
    PlayerStorageError,
)


class TestEntry:
    """Tests for parsing single distribution lines."""

    def test_parse_valid_line(self):
        """Test id and allocations are split on commas."""
        entry = parse_entry("P1,3,1,0", max_id=32, battlefields=3)
        assert entry.id == "P1"
        assert entry.distribution.tolist() == [3, 1, 0]
        assert not entry.is_terminator

    @pytest.mark.parametrize("line", [
        ",1,2",            # empty id
        "P1,1",            # too few allocations
        "P1,1,2,3",        # too many allocations
        "P1,1,x",          # not an integer
        "P1,1,-2",         # negative
        "P1,1,",           # missing value
        "P1,1,99999999999999999999999",  # does not fit in int64
    ])
    def test_parse_invalid_line(self, line):
        """Test malformed distribution lines are rejected."""
        with pytest.raises(InvalidDistributionError):
            parse_entry(line, max_id=32, battlefields=2)

    def test_id_length_limit(self):
        """Test ids must be shorter than max_id."""
        assert parse_entry("a" * 31 + ",1", max_id=32, battlefields=1).id == "a" * 31
        with pytest.raises(InvalidDistributionError):
            parse_entry("a" * 32 + ",1", max_id=32, battlefields=1)

    def test_read_entry_terminators(self):
        """Test a blank line and end of stream both end the list."""
        assert read_entry(io.StringIO("\nP1,1\n"), 32, 1).is_terminator
        assert read_entry(io.StringIO(""), 32, 1).is_terminator

    def test_read_entry_crlf(self):
        """Test Windows line endings are accepted."""
        entry = read_entry(io.StringIO("P1,4,5\r\n"), 32, 2)
        assert entry.id == "P1"
        assert entry.distribution.tolist() == [4, 5]


class TestReadEntries:
    """Tests for reading a whole distribution list."""

    def test_reads_until_blank_line(self):
        """Test players after the blank line are ignored."""
        stream = io.StringIO("A,3,1\nB,2,2\n\nC,0,4\n")
        players = read_entries(stream, battlefields=2)

        assert players.size() == 2
        assert np.array_equal(players.get("A"), np.array([3, 1]))
        assert players.get("C") is None
        players.destroy()

    def test_reads_until_eof(self):
        """Test the list may end without a blank line."""
        players = read_entries(io.StringIO("A,3,1\nB,2,2"), battlefields=2)
        assert sorted(players.keys()) == ["A", "B"]
        players.destroy()

    def test_duplicate_player(self):
        """Test an id may only appear once."""
        with pytest.raises(DuplicatePlayerError):
            read_entries(io.StringIO("A,1\nA,2\n"), battlefields=1)

    def test_empty_file(self):
        """Test at least one player is required."""
        with pytest.raises(EmptyDistributionError):
            read_entries(io.StringIO(""), battlefields=1)

    def test_invalid_line_propagates(self):
        """Test a bad line anywhere in the list fails the read."""
        with pytest.raises(InvalidDistributionError):
            read_entries(io.StringIO("A,1\nB\n"), battlefields=1)

    def test_failed_id_copy(self, monkeypatch):
        """Test a player the map cannot store fails the read."""
        failing = GMap(lambda key: None, compare_keys, hash29, release_key)
        monkeypatch.setattr('blotto.tournament.entry.string_gmap', lambda: failing)

        with pytest.raises(PlayerStorageError):
            read_entries(io.StringIO("A,1\n"), battlefields=1)
        assert failing.destroyed


class TestMatchups:
    """Tests for reading the matchup list."""

    def test_parse_pairs(self):
        """Test each line becomes a Matchup in order."""
        matchups = parse_matchups("A B\nA C\n")
        assert matchups == [Matchup("A", "B"), Matchup("A", "C")]

    def test_matchup_id(self):
        """Test the matchup id names both participants."""
        assert Matchup("A", "B").matchup_id == "A_vs_B"

    def test_no_trailing_newline(self):
        """Test the last line may end at end of file."""
        assert parse_matchups("A B") == [Matchup("A", "B")]

    def test_blank_lines_skipped(self):
        """Test blank lines between and after matchups are ignored."""
        assert len(parse_matchups("A B\n\nB C\n\n")) == 2

    def test_empty_file(self):
        """Test an empty file yields no matchups."""
        assert parse_matchups("") == []

    @pytest.mark.parametrize("text", [" A B\n", "\nA B\n"])
    def test_leading_whitespace(self, text):
        """Test the file may not start with a space or a newline."""
        with pytest.raises(InvalidMatchupFileError):
            parse_matchups(text)

    @pytest.mark.parametrize("text", [
        "A B C\n",    # three ids
        "A B \n",     # trailing space
        "A\nB C\n",   # lone id followed by more matchups
        "A \n",       # lone id with trailing space
    ])
    def test_malformed_lines(self, text):
        """Test each line must be exactly two ids."""
        with pytest.raises(MalformedMatchupError):
            parse_matchups(text)

    def test_read_matchups_from_stream(self):
        """Test reading from a file-like object."""
        assert list(read_matchups(io.StringIO("A B\n"))) == [Matchup("A", "B")]

    @pytest.mark.parametrize("text", ["A\n", "A B\nC\n", "A B\nC"])
    def test_incomplete_last_line(self, text):
        """Test a lone id on the last line is an incomplete pair."""
        with pytest.raises(IncompleteMatchupError):
            parse_matchups(text)

    def test_matchups_before_bad_line_are_yielded(self):
        """Test errors are raised only when the bad line is reached."""
        matchups = iter_matchups(["A B\n", "A C\n", "A B C\n"])
        assert next(matchups) == Matchup("A", "B")
        assert next(matchups) == Matchup("A", "C")
        with pytest.raises(MalformedMatchupError):
            next(matchups)
