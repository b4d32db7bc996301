"""
Score a Colonel Blotto tournament.

Usage:
    python main.py MATCHUPS {win,score} W1 [W2 ...] < distributions.txt

Examples:
    # Rank by win rate across four equally weighted battlefields
    python main.py matchups.txt win 1 1 1 1 < players.txt

    # Rank by average score, reading distributions from a file
    python main.py matchups.txt score 1 2 3 4 --distributions players.txt
"""

import argparse
import sys

from blotto.gmap import gmap_destroy
from blotto.tournament.entry import read_entries
from blotto.tournament.matchups import read_matchups
from blotto.tournament.runner import TournamentRunner, TournamentConfig
from blotto.tournament.display import format_rankings
from blotto.tournament.errors import TournamentError
from blotto.utils.constants import PROGRAM_NAME, MODES, EXIT_OK, EXIT_ERROR


def parse_args(argv=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description='Score a round-robin Colonel Blotto tournament.',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog='''
Distribution format (one player per line, blank line or EOF ends the list):
  P1,10,20,30,40

Matchup format (one matchup per line):
  P1 P2

Examples:
  python main.py matchups.txt win 1 1 1 1 < players.txt
  python main.py matchups.txt score 1 2 3 4 --distributions players.txt
'''
    )

    parser.add_argument(
        'matchups',
        type=str,
        help='File listing the matchups to play'
    )
    parser.add_argument(
        'mode',
        type=str, choices=MODES,
        help="Rank by 'win' rate or average 'score'"
    )
    parser.add_argument(
        'weights',
        type=float, nargs='+',
        help='Value of each battlefield; one per battlefield, all positive'
    )
    parser.add_argument(
        '--distributions', '-d',
        type=str, default=None,
        help='File of player distributions (default: standard input)'
    )
    parser.add_argument(
        '--verbose', '-v',
        action='store_true',
        help='Print a header and each matchup result before the rankings'
    )

    return parser.parse_args(argv)


def report_error(message: str):
    """Print an error message to stderr."""
    print(f"{PROGRAM_NAME}: {message}", file=sys.stderr)


def run_tournament(args, stdin=None, stdout=None) -> int:
    """
    Read the input files, score the tournament and print the rankings.

    Returns:
        Process exit status
    """
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout

    config = TournamentConfig(mode=args.mode, weights=args.weights)
    players = None

    try:
        runner = TournamentRunner(config, verbose=args.verbose, out=stdout)

        try:
            matchup_file = open(args.matchups, 'r')
        except OSError:
            report_error(f"could not open {args.matchups}")
            return EXIT_ERROR

        with matchup_file:
            if args.distributions:
                try:
                    with open(args.distributions, 'r') as f:
                        players = read_entries(f, config.battlefields, config.max_id)
                except OSError:
                    report_error(f"could not open {args.distributions}")
                    return EXIT_ERROR
            else:
                players = read_entries(stdin, config.battlefields, config.max_id)

            result = runner.run(players, read_matchups(matchup_file))
    except TournamentError as e:
        report_error(str(e))
        return EXIT_ERROR
    finally:
        gmap_destroy(players)

    print(format_rankings(result), file=stdout)
    return EXIT_OK


def main(argv=None) -> int:
    """Main entry point."""
    args = parse_args(argv)
    return run_tournament(args)


if __name__ == "__main__":
    sys.exit(main())
