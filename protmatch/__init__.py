"""
protmatch - Query-Anchored Protein Alignment Search

Finds, for a query sequence, the reference protein whose query-anchored
local alignment scores highest under a substitution/penalty matrix.

Modules:
    - sequence: Labelled protein records
    - penalty: Symbol-pair penalty table with a '*' gap symbol
    - alignment: Score/move matrix fill and traceback for one pair
    - search: Best-match search across a reference collection
    - io: Protein record and penalty matrix files
    - config, cli: Command-line search runs
"""

from .sequence import Protein, SequenceError, EmptySequenceError
from .penalty import (
    GAP, PenaltyTable, PenaltyTableError, UnknownPairError, FrozenTableError
)
from .alignment import (
    Alignment, Move, TracebackMode,
    align, align_query_anchored, align_score_only
)
from .search import (
    BestMatch, SearchError, EmptyCollectionError, NoAlignmentFoundError,
    find_best, rank_references
)
from .io import load_proteins, save_proteins, load_penalty_table

__version__ = "0.1.0"
__all__ = [
    "Protein",
    "SequenceError",
    "EmptySequenceError",
    "GAP",
    "PenaltyTable",
    "PenaltyTableError",
    "UnknownPairError",
    "FrozenTableError",
    "Alignment",
    "Move",
    "TracebackMode",
    "align",
    "align_query_anchored",
    "align_score_only",
    "BestMatch",
    "SearchError",
    "EmptyCollectionError",
    "NoAlignmentFoundError",
    "find_best",
    "rank_references",
    "load_proteins",
    "save_proteins",
    "load_penalty_table",
]
