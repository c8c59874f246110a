"""
protmatch - Query-Anchored Local Alignment

Dynamic-programming alignment of one sequence pair under a PenaltyTable.

The scoring follows Smith-Waterman with linear, symbol-driven gap costs:
every cell is floored at zero so an alignment may restart anywhere. Two
things differ from textbook local alignment:

    - Only the final row is searched for the best score, so the last
      symbol of sequence A is always part of the alignment. Sequence B's
      span is free on both ends.
    - In LEGACY traceback mode (the default) the backtrace follows the
      recorded moves all the way to row 0 or column 0, even through cells
      whose clamped score is zero. The move in each cell is chosen from
      up/left/diag before the zero floor is applied.

STOP_AT_ZERO mode ends the backtrace at the first zero-score cell instead,
which gives the standard Smith-Waterman termination.
"""

from typing import List, Tuple
from dataclasses import dataclass, field
from enum import Enum

from .penalty import GAP, PenaltyTable


class Move(Enum):
    """Predecessor direction recorded in the move matrix."""
    DIAGONAL = 1  # Consume one symbol from each sequence
    UP = 2        # Consume from A, gap in B
    LEFT = 3      # Consume from B, gap in A
    STOP = 0      # Boundary cell, no move recorded


class TracebackMode(Enum):
    """Where the backtrace ends."""
    LEGACY = "legacy"              # Run to row 0 or column 0
    STOP_AT_ZERO = "stop_at_zero"  # Stop at the first zero-score cell


@dataclass(frozen=True)
class Alignment:
    """
    Alignment result between two sequences.

    aligned_a and aligned_b have equal length and use '*' for gaps. The
    start/end offsets are half-open positions of the aligned span in the
    original sequences A and B.

    Unpacks as (score, aligned_a, aligned_b).
    """
    score: int
    aligned_a: str
    aligned_b: str
    start_a: int = 0
    end_a: int = 0
    start_b: int = 0
    end_b: int = 0
    identity: float = field(init=False)

    def __post_init__(self):
        """Validate alignment and calculate identity."""
        if len(self.aligned_a) != len(self.aligned_b):
            raise ValueError("Aligned sequences must have equal length")
        if self.score < 0:
            raise ValueError("Alignment score cannot be negative")

        object.__setattr__(self, 'identity', self._calculate_identity())

    @classmethod
    def empty(cls) -> 'Alignment':
        """Return the zero-score alignment with no aligned symbols."""
        return cls(score=0, aligned_a="", aligned_b="")

    def _calculate_identity(self) -> float:
        if len(self.aligned_a) == 0:
            return 0.0
        return self.match_count() / len(self.aligned_a)

    def __iter__(self):
        return iter((self.score, self.aligned_a, self.aligned_b))

    def alignment_length(self) -> int:
        """Return the length of the alignment."""
        return len(self.aligned_a)

    def match_count(self) -> int:
        """Count the number of identical, non-gap columns."""
        return sum(
            1 for a, b in zip(self.aligned_a, self.aligned_b)
            if a == b and a != GAP
        )

    def mismatch_count(self) -> int:
        """Count the number of substitution columns."""
        return sum(
            1 for a, b in zip(self.aligned_a, self.aligned_b)
            if a != b and a != GAP and b != GAP
        )

    def gaps_a(self) -> int:
        """Count gaps in aligned A."""
        return self.aligned_a.count(GAP)

    def gaps_b(self) -> int:
        """Count gaps in aligned B."""
        return self.aligned_b.count(GAP)

    def total_gaps(self) -> int:
        return self.gaps_a() + self.gaps_b()

    def to_cigar(self) -> str:
        """
        Generate a CIGAR string with A as the reference.

        M = match, X = mismatch, I = gap in A, D = gap in B.
        """
        cigar = ""
        current_op = ""
        count = 0

        for a, b in zip(self.aligned_a, self.aligned_b):
            if a == GAP:
                op = 'I'
            elif b == GAP:
                op = 'D'
            elif a == b:
                op = 'M'
            else:
                op = 'X'

            if op == current_op:
                count += 1
            else:
                if count > 0:
                    cigar += f"{count}{current_op}"
                current_op = op
                count = 1

        if count > 0:
            cigar += f"{count}{current_op}"

        return cigar

    def format(self) -> str:
        """Format alignment for display."""
        match_line = ""
        for a, b in zip(self.aligned_a, self.aligned_b):
            if a == b and a != GAP:
                match_line += '|'
            elif a == GAP or b == GAP:
                match_line += ' '
            else:
                match_line += '.'

        lines = [
            f"Seq1: {self.aligned_a}",
            f"      {match_line}",
            f"Seq2: {self.aligned_b}",
            f"Score: {self.score}",
            f"Identity: {self.identity * 100:.1f}%",
            f"CIGAR: {self.to_cigar()}"
        ]
        return '\n'.join(lines)

    def __str__(self) -> str:
        return f"Alignment {{ score: {self.score}, identity: {self.identity * 100:.1f}%, length: {self.alignment_length()} }}"


def fill_matrices(
    seq_a: str,
    seq_b: str,
    table: PenaltyTable
) -> Tuple[List[List[int]], List[List[Move]]]:
    """
    Fill the score and move matrices for seq_a (rows) against seq_b (columns).

    Both matrices are (len(seq_a) + 1) x (len(seq_b) + 1). Row 0 and
    column 0 hold score 0 and Move.STOP.

    Ties are broken diagonal > up > left: left is compared with up first
    and only wins when strictly greater, then the winner is compared with
    diag, which wins ties. The move is chosen before the zero floor.

    Raises:
        UnknownPairError: a symbol pair needed by the fill is not in table
    """
    m, n = len(seq_a), len(seq_b)

    scores = [[0] * (n + 1) for _ in range(m + 1)]
    moves = [[Move.STOP] * (n + 1) for _ in range(m + 1)]

    if m == 0 or n == 0:
        return scores, moves

    gap_after_a = [table.get(a, GAP) for a in seq_a]
    gap_before_b = [table.get(GAP, b) for b in seq_b]

    for i in range(1, m + 1):
        a = seq_a[i - 1]
        a_gap = gap_after_a[i - 1]
        prev_row = scores[i - 1]
        row = scores[i]
        move_row = moves[i]

        for j in range(1, n + 1):
            up = prev_row[j] + a_gap
            left = row[j - 1] + gap_before_b[j - 1]
            diag = prev_row[j - 1] + table.get(a, seq_b[j - 1])

            if left > up:
                move_row[j] = Move.LEFT if left > diag else Move.DIAGONAL
            else:
                move_row[j] = Move.UP if up > diag else Move.DIAGONAL

            row[j] = max(0, up, left, diag)

    return scores, moves


def best_in_final_row(scores: List[List[int]]) -> Tuple[int, int]:
    """
    Return (best_score, best_j) over the last row, columns 1..n.

    The first column reaching the maximum wins. An all-zero row gives
    (0, 0).
    """
    final_row = scores[-1]
    best_score = 0
    best_j = 0
    for j in range(1, len(final_row)):
        if final_row[j] > best_score:
            best_score = final_row[j]
            best_j = j
    return best_score, best_j


def _traceback(
    seq_a: str,
    seq_b: str,
    scores: List[List[int]],
    moves: List[List[Move]],
    start_i: int,
    start_j: int,
    mode: TracebackMode
) -> Tuple[str, str, int, int]:
    """Follow the move matrix back from (start_i, start_j)."""
    aligned_a = []
    aligned_b = []
    i, j = start_i, start_j

    while i > 0 and j > 0:
        if mode is TracebackMode.STOP_AT_ZERO and scores[i][j] == 0:
            break

        move = moves[i][j]

        if move is Move.DIAGONAL:
            aligned_a.append(seq_a[i - 1])
            aligned_b.append(seq_b[j - 1])
            i -= 1
            j -= 1
        elif move is Move.UP:
            aligned_a.append(seq_a[i - 1])
            aligned_b.append(GAP)
            i -= 1
        elif move is Move.LEFT:
            aligned_a.append(GAP)
            aligned_b.append(seq_b[j - 1])
            j -= 1
        else:
            break

    # built backward
    aligned_a.reverse()
    aligned_b.reverse()
    return ''.join(aligned_a), ''.join(aligned_b), i, j


def align_query_anchored(
    seq_a: str,
    seq_b: str,
    table: PenaltyTable,
    mode: TracebackMode = TracebackMode.LEGACY
) -> Alignment:
    """
    Align seq_a against seq_b, anchored on the end of seq_a.

    The best score is taken from the final row of the score matrix only,
    so the alignment always ends at the last symbol of seq_a while its end
    in seq_b is free. A final row that is entirely zero (or an empty
    input) gives Alignment.empty().

    Args:
        seq_a: Anchored sequence (the reference, in a best-match search)
        seq_b: Free-span sequence (the query, in a best-match search)
        table: Scores for symbol pairs, including the '*' gap symbol
        mode: Where the backtrace ends

    Returns:
        Alignment; unpacks as (score, aligned_a, aligned_b)

    Raises:
        UnknownPairError: the table lacks a pair needed by the fill
    """
    m, n = len(seq_a), len(seq_b)
    if m == 0 or n == 0:
        return Alignment.empty()

    scores, moves = fill_matrices(seq_a, seq_b, table)
    best_score, best_j = best_in_final_row(scores)

    if best_score == 0:
        return Alignment.empty()

    aligned_a, aligned_b, start_a, start_b = _traceback(
        seq_a, seq_b, scores, moves, m, best_j, mode
    )

    return Alignment(
        score=best_score,
        aligned_a=aligned_a,
        aligned_b=aligned_b,
        start_a=start_a,
        end_a=m,
        start_b=start_b,
        end_b=best_j,
    )


align = align_query_anchored


def align_score_only(seq_a: str, seq_b: str, table: PenaltyTable) -> int:
    """
    Return the anchored alignment score without a traceback.

    Keeps two rows instead of the full matrix. The result always equals
    align_query_anchored(seq_a, seq_b, table).score.
    """
    m, n = len(seq_a), len(seq_b)
    if m == 0 or n == 0:
        return 0

    gap_after_a = [table.get(a, GAP) for a in seq_a]
    gap_before_b = [table.get(GAP, b) for b in seq_b]

    prev_row = [0] * (n + 1)

    for i in range(1, m + 1):
        a = seq_a[i - 1]
        a_gap = gap_after_a[i - 1]
        curr_row = [0] * (n + 1)

        for j in range(1, n + 1):
            up = prev_row[j] + a_gap
            left = curr_row[j - 1] + gap_before_b[j - 1]
            diag = prev_row[j - 1] + table.get(a, seq_b[j - 1])
            curr_row[j] = max(0, up, left, diag)

        prev_row = curr_row

    return max(prev_row[1:])

