"""
protmatch - Penalty Table

Substitution scores for aligning one symbol against another.

The table maps an ordered pair of symbols to an integer score. The reserved
gap symbol '*' may appear as either operand to score an insertion or
deletion:

    table.get('A', 'R')   # substitution of R for A
    table.get('A', '*')   # A aligned against a gap
    table.get('*', 'R')   # gap aligned against R

There is no default score. Looking up a pair that was never registered
raises UnknownPairError, so a matrix that does not cover an input alphabet
fails loudly instead of scoring silently as zero.
"""

from pathlib import Path
from typing import Dict, Iterable, List, Mapping, Optional, Sequence, Tuple


GAP = '*'

BLOSUM62_PATH = Path(__file__).parent / "data" / "blosum62.txt"


class PenaltyTableError(Exception):
    """Error types for penalty table operations."""
    pass


class UnknownPairError(PenaltyTableError, KeyError):
    """Raised when a symbol pair has no registered score."""
    def __init__(self, a: str, b: str):
        self.pair = (a, b)
        super().__init__(f"No score registered for pair ('{a}', '{b}')")

    def __str__(self) -> str:
        return self.args[0]


class FrozenTableError(PenaltyTableError):
    """Raised when modifying a frozen table."""
    pass


class PenaltyTable:
    """
    Lookup from (symbol, symbol) to an integer score.

    Not assumed symmetric: get(a, b) and get(b, a) are independent entries.
    Symbols are used exactly as given, with no case normalisation.
    """

    def __init__(self, scores: Optional[Mapping[Tuple[str, str], int]] = None):
        self._scores: Dict[Tuple[str, str], int] = {}
        self._frozen = False
        if scores:
            for (a, b), score in scores.items():
                self.set(a, b, score)

    @classmethod
    def from_rows(
        cls,
        alphabet: Sequence[str],
        rows: Mapping[str, Sequence[int]]
    ) -> 'PenaltyTable':
        """
        Build a table from column symbols and score rows.

        Args:
            alphabet: Column symbols, in column order
            rows: Row symbol -> scores positionally aligned to alphabet

        A row may be shorter than the alphabet (only its leading columns
        are registered) but never longer.
        """
        table = cls()
        for row_symbol, scores in rows.items():
            if len(scores) > len(alphabet):
                raise ValueError(
                    f"Row '{row_symbol}' has {len(scores)} scores for "
                    f"{len(alphabet)} columns"
                )
            for column_symbol, score in zip(alphabet, scores):
                table.set(row_symbol, column_symbol, score)
        return table

    @classmethod
    def blosum62(cls) -> 'PenaltyTable':
        """Return the bundled BLOSUM62 table, frozen."""
        # imported here, io depends on this module
        from .io import load_penalty_table
        return load_penalty_table(BLOSUM62_PATH)

    def get(self, a: str, b: str) -> int:
        """Return the score for aligning a against b."""
        try:
            return self._scores[(a, b)]
        except KeyError:
            raise UnknownPairError(a, b) from None

    def set(self, a: str, b: str, score: int) -> None:
        """Register or overwrite the score for the ordered pair (a, b)."""
        if self._frozen:
            raise FrozenTableError("Cannot modify a frozen penalty table")
        self._scores[(a, b)] = int(score)

    def freeze(self) -> 'PenaltyTable':
        """Make the table read-only and return it."""
        self._frozen = True
        return self

    @property
    def frozen(self) -> bool:
        return self._frozen

    def alphabet(self) -> List[str]:
        """Return every symbol used as either operand, sorted."""
        symbols = set()
        for a, b in self._scores:
            symbols.add(a)
            symbols.add(b)
        return sorted(symbols)

    def is_symmetric(self) -> bool:
        """Check that every registered (a, b) has an equal (b, a)."""
        for (a, b), score in self._scores.items():
            if self._scores.get((b, a)) != score:
                return False
        return True

    def missing_pairs(self, sequence: Iterable[str]) -> List[Tuple[str, str]]:
        """
        List the pairs an alignment over these symbols needs but lacks.

        For every distinct symbol s this checks (s, s), (s, '*') and
        ('*', s). Cross-symbol pairs are not checked since which of them
        are needed depends on the other sequence.
        """
        missing = []
        for symbol in sorted(set(sequence)):
            for pair in ((symbol, symbol), (symbol, GAP), (GAP, symbol)):
                if pair not in self._scores:
                    missing.append(pair)
        return missing

    def require_coverage(self, sequence: Iterable[str]) -> None:
        """Raise UnknownPairError for the first pair missing_pairs reports."""
        missing = self.missing_pairs(sequence)
        if missing:
            raise UnknownPairError(*missing[0])

    def __contains__(self, pair: Tuple[str, str]) -> bool:
        return pair in self._scores

    def __len__(self) -> int:
        return len(self._scores)

    def __repr__(self) -> str:
        state = "frozen" if self._frozen else "mutable"
        return f"PenaltyTable({len(self._scores)} pairs, {state})"
