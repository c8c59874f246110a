"""
protmatch command line.

Usage:
    protmatch proteins.txt
    protmatch proteins.txt -q MYPEPTIDE -q PIEPCMGA -m blosum62.txt
    protmatch proteins.txt -o matches.txt --legacy-window

For each query, prints the best-matching reference label, the aligned
reference and query strings, the score and the elapsed time.
"""

import argparse
import logging
import sys
import time
from typing import List, Optional

from .config import SearchConfig
from .io import FormatError, load_penalty_table, load_proteins, save_proteins
from .logging_utils import LOG_LEVELS, init_logger
from .penalty import PenaltyTableError
from .search import NoAlignmentFoundError, SearchError, find_best, rank_references
from .sequence import SequenceError, alphabet_of

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='protmatch',
        description='Find the best-matching reference protein for each query'
    )
    parser.add_argument('proteins',
                        help='Reference protein records file')
    parser.add_argument('-m', '--matrix', default=None,
                        help='Penalty matrix file (default: bundled BLOSUM62)')
    parser.add_argument('-q', '--query', action='append',
                        help='Query sequence; repeat for several (default: built-in set)')
    parser.add_argument('-o', '--output', default=None,
                        help='Write the matched reference records to this file')
    parser.add_argument('--legacy-window', action='store_true',
                        help='Write only symbols 10..19 of each matched sequence')
    parser.add_argument('--top', type=int, default=1,
                        help='Also list the next best references, up to this many in total')
    parser.add_argument('--stop-at-zero', action='store_true',
                        help='End each traceback at the first zero-score cell')
    parser.add_argument('--log-level', default='WARNING', choices=LOG_LEVELS,
                        type=str.upper, help='Logging level (default: WARNING)')
    parser.add_argument('--log-file', default=None,
                        help='Also write the log to this file')
    return parser


def run(config: SearchConfig) -> int:
    """Run every query of config; return the process exit status."""
    try:
        proteins = load_proteins(config.proteins_path)
        table = load_penalty_table(config.matrix_path)
    except (OSError, FormatError, SequenceError) as e:
        logger.error("Cannot load inputs: %s", e)
        return 2

    missing = table.missing_pairs(alphabet_of(proteins))
    if missing:
        logger.warning(
            "Penalty matrix lacks %d pairs used by the references, e.g. %s",
            len(missing), missing[0]
        )

    matches = []
    failures = 0

    print("------------------- Dynamic Programming ------------------")
    for query in config.queries:
        print(f"String to Match = {query}")
        start = time.perf_counter()
        try:
            if config.top > 1:
                ranked = rank_references(query, proteins, table, config.top, config.mode)
                if not ranked:
                    raise NoAlignmentFoundError(query, len(proteins))
                best = ranked[0]
            else:
                ranked = []
                best = find_best(query, proteins, table, config.mode)
        except (SearchError, PenaltyTableError) as e:
            logger.error("%s: %s", query, e)
            failures += 1
            continue
        elapsed = (time.perf_counter() - start) * 1000

        print(best.format())
        for match in ranked[1:]:
            print(f"  also: {match.reference.description} (score {match.score})")
        print(f"Elapsed: {elapsed:.2f}ms")
        matches.append(best.reference)

    if config.output_path is not None:
        try:
            save_proteins(matches, config.output_path, config.window)
        except (OSError, SequenceError) as e:
            logger.error("Cannot write %s: %s", config.output_path, e)
            return 1

    return 1 if failures else 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = SearchConfig.from_args(args)
    except ValueError as e:
        parser.error(str(e))

    log = init_logger(config.log_level, config.log_file)
    log.info(
        "Searching %d queries in %s with matrix %s",
        len(config.queries), config.proteins_path, config.matrix_path
    )
    return run(config)


if __name__ == '__main__':
    sys.exit(main())
