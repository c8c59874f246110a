"""
Tests for the Alignment module.
"""

import pytest
from protmatch.penalty import GAP, PenaltyTable, UnknownPairError
from protmatch.alignment import (
    Alignment, Move, TracebackMode,
    align, align_query_anchored, align_score_only,
    best_in_final_row, fill_matrices
)


def single_cell_table(up, left, diag):
    """Table scoring X against Y so cell (1, 1) sees the given candidates."""
    return PenaltyTable({('X', GAP): up, (GAP, 'Y'): left, ('X', 'Y'): diag})


class TestFillMatrices:
    """Tests for the score and move matrix fill."""

    def test_matrix_shape_and_borders(self, dna_table):
        """Test matrix size and the zero/STOP borders."""
        scores, moves = fill_matrices("ACG", "AC", dna_table)

        assert len(scores) == 4 and len(scores[0]) == 3
        assert all(v == 0 for v in scores[0])
        assert all(row[0] == 0 for row in scores)
        assert all(m is Move.STOP for m in moves[0])
        assert all(row[0] is Move.STOP for row in moves)

    def test_identical_diagonal(self, dna_table):
        """Test that matching symbols accumulate along the diagonal."""
        scores, moves = fill_matrices("AAAA", "AAAA", dna_table)
        assert [scores[i][i] for i in range(5)] == [0, 2, 4, 6, 8]
        assert all(moves[i][i] is Move.DIAGONAL for i in range(1, 5))

    def test_up_beats_left_on_tie(self):
        """Test that up wins an up/left tie when diag is lower."""
        _, moves = fill_matrices("X", "Y", single_cell_table(-1, -1, -3))
        assert moves[1][1] is Move.UP

    def test_left_when_strictly_greater(self):
        """Test that left wins only when strictly better than up and diag."""
        _, moves = fill_matrices("X", "Y", single_cell_table(-3, -1, -3))
        assert moves[1][1] is Move.LEFT

    def test_diag_beats_up_on_tie(self):
        """Test that diag wins a tie with up."""
        _, moves = fill_matrices("X", "Y", single_cell_table(-1, -3, -1))
        assert moves[1][1] is Move.DIAGONAL

    def test_diag_beats_left_on_tie(self):
        """Test that diag wins a tie with left."""
        _, moves = fill_matrices("X", "Y", single_cell_table(-3, -1, -1))
        assert moves[1][1] is Move.DIAGONAL

    def test_move_recorded_before_zero_floor(self):
        """Test that a clamped zero cell still carries a move."""
        scores, moves = fill_matrices("X", "Y", single_cell_table(-1, -1, -3))
        assert scores[1][1] == 0
        assert moves[1][1] is not Move.STOP

    def test_unknown_symbol_raises(self, dna_table):
        """Test that a symbol missing from the table stops the fill."""
        with pytest.raises(UnknownPairError):
            fill_matrices("ACGT", "ACXT", dna_table)


class TestAlignQueryAnchored:
    """Tests for the anchored local alignment."""

    def test_identical_sequences(self, dna_table):
        """Test AAAA against AAAA scores 4 matches of 2."""
        score, aligned_a, aligned_b = align("AAAA", "AAAA", dna_table)

        assert score == 8
        assert aligned_a == "AAAA"
        assert aligned_b == "AAAA"

    def test_unknown_symbol_raises(self, dna_table):
        """Test that an unregistered symbol fails the alignment."""
        with pytest.raises(UnknownPairError) as exc_info:
            align("GATTACA", "GCATGCU", dna_table)

        assert 'U' in exc_info.value.pair

    def test_embedded_match_positions(self, dna_table):
        """Test that B's span is free on both ends."""
        alignment = align_query_anchored("ACGT", "TTACGTTT", dna_table)

        assert alignment.score == 8
        assert alignment.aligned_a == "ACGT"
        assert alignment.aligned_b == "ACGT"
        assert (alignment.start_a, alignment.end_a) == (0, 4)
        assert (alignment.start_b, alignment.end_b) == (2, 6)

    def test_end_of_a_is_anchored(self, dna_table):
        """Test that trailing symbols of A are forced into the alignment."""
        alignment = align("ACGTAA", "ACGT", dna_table)

        assert alignment.score == 4
        assert alignment.aligned_a == "ACGTAA"
        assert alignment.aligned_b == "ACGT" + GAP * 2
        assert alignment.gaps_b() == 2

    def test_operand_order_matters(self, dna_table):
        """Test that swapping operands changes which end is anchored."""
        assert align("ACGTAA", "ACGT", dna_table).score == 4
        assert align("ACGT", "ACGTAA", dna_table).score == 8

    def test_legacy_traceback_runs_through_zero_cells(self, dna_table):
        """Test that the legacy backtrace continues to the matrix border."""
        alignment = align("CCACGT", "GGACGT", dna_table)

        assert alignment.score == 8
        assert alignment.aligned_a == "CCACGT"
        assert alignment.aligned_b == "GGACGT"
        assert alignment.start_a == 0
        assert alignment.mismatch_count() == 2

    def test_stop_at_zero_traceback(self, dna_table):
        """Test that STOP_AT_ZERO ends at the first zero-score cell."""
        alignment = align(
            "CCACGT", "GGACGT", dna_table, mode=TracebackMode.STOP_AT_ZERO
        )

        assert alignment.score == 8
        assert alignment.aligned_a == "ACGT"
        assert alignment.aligned_b == "ACGT"
        assert (alignment.start_a, alignment.start_b) == (2, 2)

    def test_no_positive_score(self, dna_table):
        """Test that an all-zero final row gives an empty alignment."""
        alignment = align("AAAA", "TTTT", dna_table)

        assert alignment.score == 0
        assert alignment.aligned_a == ""
        assert alignment.aligned_b == ""

    def test_empty_inputs(self, dna_table):
        """Test that empty sequences give an empty alignment."""
        assert align("", "ACGT", dna_table) == Alignment.empty()
        assert align("ACGT", "", dna_table) == Alignment.empty()

    def test_score_matches_final_row(self, blosum62):
        """Test that the score is S[|A|][best_j] and within the bound."""
        seq_a, seq_b = "MYPEPTIDE", "KMYPEQTIDEWL"

        alignment = align(seq_a, seq_b, blosum62)
        scores, _ = fill_matrices(seq_a, seq_b, blosum62)
        best_score, best_j = best_in_final_row(scores)

        assert alignment.score == best_score == scores[len(seq_a)][best_j]
        assert alignment.end_b == best_j
        assert alignment.score <= sum(blosum62.get(a, a) for a in seq_a)

    def test_aligned_lengths_equal(self, blosum62):
        """Test that aligned strings always have equal length."""
        pairs = [
            ("PIEPCMGA", "MPIEPCMGAWWK"),
            ("TQGASNIGE", "TQGSNIGEE"),
            ("ALAKLIRYGG", "GGALAKLRY"),
        ]
        for seq_a, seq_b in pairs:
            alignment = align(seq_a, seq_b, blosum62)
            assert len(alignment.aligned_a) == len(alignment.aligned_b)

    def test_deterministic(self, blosum62):
        """Test that repeated calls give identical results."""
        first = align("CSNPNLSDFGR", "CSNPNLWDFGRK", blosum62)
        second = align("CSNPNLSDFGR", "CSNPNLWDFGRK", blosum62)
        assert first == second


class TestAlignScoreOnly:
    """Tests for align_score_only."""

    def test_score_only_matches_full(self, dna_table, blosum62):
        """Test that the two-row score equals the full alignment score."""
        assert align_score_only("ACGTAA", "ACGT", dna_table) == 4
        assert align_score_only("CCACGT", "GGACGT", dna_table) == 8
        assert (align_score_only("MYPEPTIDE", "KMYPEQTIDEWL", blosum62)
                == align("MYPEPTIDE", "KMYPEQTIDEWL", blosum62).score)

    def test_empty_inputs(self, dna_table):
        """Test that empty sequences score zero."""
        assert align_score_only("", "ACGT", dna_table) == 0


class TestAlignment:
    """Tests for the Alignment result class."""

    def test_unequal_lengths_rejected(self):
        """Test that aligned strings must have equal length."""
        with pytest.raises(ValueError):
            Alignment(score=1, aligned_a="AC", aligned_b="A")

    def test_negative_score_rejected(self):
        """Test that scores cannot be negative."""
        with pytest.raises(ValueError):
            Alignment(score=-1, aligned_a="A", aligned_b="A")

    def test_counts(self):
        """Test match, mismatch and gap counts."""
        alignment = Alignment(score=3, aligned_a="AC*GT", aligned_b="ATCG*")
        assert alignment.match_count() == 2
        assert alignment.mismatch_count() == 1
        assert alignment.gaps_a() == 1
        assert alignment.gaps_b() == 1
        assert alignment.total_gaps() == 2
        assert alignment.identity == 0.4

    def test_cigar(self):
        """Test CIGAR string generation."""
        alignment = Alignment(score=3, aligned_a="AAC*GT", aligned_b="AATCG*")
        assert alignment.to_cigar() == "2M1X1I1M1D"
        assert Alignment.empty().to_cigar() == ""

    def test_empty_identity(self):
        """Test that an empty alignment has zero identity."""
        assert Alignment.empty().identity == 0.0

    def test_format_output(self):
        """Test formatted alignment output."""
        formatted = Alignment(score=8, aligned_a="ACGT", aligned_b="ACGT").format()
        assert "Seq1: ACGT" in formatted
        assert "||||" in formatted
        assert "Score: 8" in formatted

