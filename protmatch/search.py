"""
protmatch - Best-Match Search

Aligns one query against every protein of a reference collection and keeps
the best-scoring one.

Each reference is the anchored operand of align_query_anchored: its last
symbol is always part of the alignment, while the query's span is free.
Ties go to the reference that appears first in the collection.
"""

import logging
from typing import Iterator, List, Sequence, Tuple
from dataclasses import dataclass

from .alignment import Alignment, TracebackMode, align_query_anchored
from .penalty import PenaltyTable
from .sequence import Protein

logger = logging.getLogger(__name__)


class SearchError(Exception):
    """Error types for best-match search."""
    pass


class EmptyCollectionError(SearchError):
    """Raised when there are no references to search."""
    pass


class NoAlignmentFoundError(SearchError):
    """Raised when no reference scores above zero."""
    def __init__(self, query: str, searched: int):
        self.query = query
        self.searched = searched
        super().__init__(
            f"No reference out of {searched} aligned to '{query}' with a positive score"
        )


@dataclass(frozen=True)
class BestMatch:
    """
    Winning reference of a search and its alignment.

    Unpacks as (reference, score, aligned_query, aligned_reference).
    """
    reference: Protein
    index: int
    alignment: Alignment

    @property
    def score(self) -> int:
        return self.alignment.score

    @property
    def aligned_query(self) -> str:
        return self.alignment.aligned_b

    @property
    def aligned_reference(self) -> str:
        return self.alignment.aligned_a

    def __iter__(self):
        return iter((
            self.reference,
            self.score,
            self.aligned_query,
            self.aligned_reference,
        ))

    def format(self) -> str:
        """Format the match as label, aligned reference, aligned query, score."""
        return '\n'.join([
            self.reference.description,
            self.aligned_reference,
            self.aligned_query,
            f"Score: {self.score}",
        ])


def align_against_all(
    query: str,
    references: Sequence[Protein],
    table: PenaltyTable,
    mode: TracebackMode = TracebackMode.LEGACY
) -> Iterator[Tuple[int, Alignment]]:
    """
    Yield (index, alignment) for each reference, in collection order.

    Raises:
        UnknownPairError: the table lacks a pair needed by some alignment
    """
    for i, reference in enumerate(references):
        alignment = align_query_anchored(reference.sequence, query, table, mode)
        logger.debug(
            "query %s vs %s: score %d", query, reference.description, alignment.score
        )
        yield i, alignment


def find_best(
    query: str,
    references: Sequence[Protein],
    table: PenaltyTable,
    mode: TracebackMode = TracebackMode.LEGACY
) -> BestMatch:
    """
    Find the reference that aligns best to query.

    Args:
        query: Query symbols
        references: Ordered reference collection
        table: Scores for symbol pairs, including the '*' gap symbol
        mode: Traceback mode passed to every alignment

    Returns:
        BestMatch for the first reference with the strictly highest score

    Raises:
        EmptyCollectionError: references is empty
        NoAlignmentFoundError: no reference scores above zero
        UnknownPairError: the table lacks a pair needed by some alignment
    """
    if len(references) == 0:
        raise EmptyCollectionError("Reference collection cannot be empty")

    best_index = -1
    best_alignment = None

    for i, alignment in align_against_all(query, references, table, mode):
        if best_alignment is None or alignment.score > best_alignment.score:
            best_index = i
            best_alignment = alignment

    if best_alignment is None or best_alignment.score <= 0:
        raise NoAlignmentFoundError(query, len(references))

    best = BestMatch(references[best_index], best_index, best_alignment)
    logger.info(
        "%s: best score %d from %s (#%d of %d)",
        query, best.score, best.reference.description, best_index, len(references)
    )
    return best


def rank_references(
    query: str,
    references: Sequence[Protein],
    table: PenaltyTable,
    top: int = 5,
    mode: TracebackMode = TracebackMode.LEGACY
) -> List[BestMatch]:
    """
    Return up to top references with a positive score, best first.

    Equal scores keep collection order, so rank_references(...)[0] is the
    same reference find_best returns.
    """
    if top <= 0:
        raise ValueError("top must be positive")
    if len(references) == 0:
        raise EmptyCollectionError("Reference collection cannot be empty")

    scored = [
        BestMatch(references[i], i, alignment)
        for i, alignment in align_against_all(query, references, table, mode)
        if alignment.score > 0
    ]
    # sorted() is stable, ties stay in collection order
    scored = sorted(scored, key=lambda match: match.score, reverse=True)
    return scored[:top]
