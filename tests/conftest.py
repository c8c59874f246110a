"""
Shared fixtures for protmatch tests.
"""

import pytest
from protmatch.penalty import GAP, PenaltyTable

DNA = "ACGT"

DNA_MATRIX_TEXT = """\
$  A  C  G  T  *
A  2 -1 -1 -1 -2
C -1  2 -1 -1 -2
G -1 -1  2 -1 -2
T -1 -1 -1  2 -2
* -2 -2 -2 -2  1
"""


def build_dna_table(match=2, mismatch=-1, gap=-2) -> PenaltyTable:
    table = PenaltyTable()
    for x in DNA:
        for y in DNA:
            table.set(x, y, match if x == y else mismatch)
        table.set(x, GAP, gap)
        table.set(GAP, x, gap)
    return table.freeze()


@pytest.fixture
def dna_table():
    """Match 2, mismatch -1, gap -2 over A, C, G, T."""
    return build_dna_table()


@pytest.fixture
def blosum62():
    return PenaltyTable.blosum62()


@pytest.fixture
def dna_matrix_file(tmp_path):
    path = tmp_path / "dna.txt"
    path.write_text(DNA_MATRIX_TEXT)
    return path


@pytest.fixture
def proteins_file(tmp_path):
    path = tmp_path / "proteins.txt"
    path.write_text(
        ">ref one\n"
        "CCCCCC\n"
        "\n"
        ">ref two\n"
        "GGACGT\n"
        ">ref three\n"
        "ACGTAA\n"
    )
    return path
