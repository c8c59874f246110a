"""
protmatch - Run Configuration

Settings for one command-line search run, validated on construction.
"""

import argparse
from pathlib import Path
from typing import List, Optional, Tuple
from dataclasses import dataclass, field

from .alignment import TracebackMode
from .io import LEGACY_WINDOW
from .logging_utils import LOG_LEVELS
from .penalty import BLOSUM62_PATH

# Queries searched when none are given
DEFAULT_QUERIES = (
    "PIEPCMGA",
    "TQGASNIGE",
    "ALAKLIRYGG",
    "CSNPNLSDFGR",
    "MYPEPTIDE",
)


@dataclass
class SearchConfig:
    """
    Configuration for a search run.

    Attributes:
        proteins_path: Reference protein records
        matrix_path: Penalty matrix (bundled BLOSUM62 by default)
        queries: Query sequences, searched in order
        output_path: Where to write the matched references, if anywhere
        window: (offset, length) slice applied when writing output
        top: How many ranked references to report per query
        mode: Traceback mode for every alignment
        log_level: Root logger level name
        log_file: Optional file receiving a copy of the log
    """
    proteins_path: Path
    matrix_path: Path = BLOSUM62_PATH
    queries: List[str] = field(default_factory=lambda: list(DEFAULT_QUERIES))
    output_path: Optional[Path] = None
    window: Optional[Tuple[int, int]] = None
    top: int = 1
    mode: TracebackMode = TracebackMode.LEGACY
    log_level: str = "WARNING"
    log_file: Optional[Path] = None

    def __post_init__(self):
        """Validate configuration values."""
        self.proteins_path = Path(self.proteins_path)
        self.matrix_path = Path(self.matrix_path)
        if self.output_path is not None:
            self.output_path = Path(self.output_path)

        if len(self.queries) == 0:
            raise ValueError("At least one query is required")
        for query in self.queries:
            if len(query) == 0:
                raise ValueError("Queries cannot be empty")

        if self.top <= 0:
            raise ValueError("top must be positive")

        self.log_level = self.log_level.upper()
        if self.log_level not in LOG_LEVELS:
            raise ValueError(
                f"Unknown log level {self.log_level!r}. Allowed: {list(LOG_LEVELS)}"
            )

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> 'SearchConfig':
        """Create a configuration from parsed command-line arguments."""
        return cls(
            proteins_path=args.proteins,
            matrix_path=args.matrix or BLOSUM62_PATH,
            queries=list(args.query) if args.query else list(DEFAULT_QUERIES),
            output_path=args.output,
            window=LEGACY_WINDOW if args.legacy_window else None,
            top=args.top,
            mode=TracebackMode.STOP_AT_ZERO if args.stop_at_zero else TracebackMode.LEGACY,
            log_level=args.log_level,
            log_file=args.log_file,
        )
