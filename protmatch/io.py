"""
protmatch - Flat File I/O

Readers and writers for the two input formats and the result records.

Protein records:

    >label one
    MKTAYIAKQRQISFVKSHFSRQ

    >label two
    MSDNELQRLSAQTGLSPEQA

    A label line starts with '>' and is followed by exactly one sequence
    line. Blank lines are ignored. A label with no sequence before the next
    label is dropped.

Penalty matrix:

    $  A  R  *
    A  4 -1 -4
    R -1  5 -4
    * -4 -4  1

    The '$' line lists the column symbols. Every other line is a row symbol
    followed by scores in column order. Lines starting with '#' are
    comments.
"""

import logging
from pathlib import Path
from typing import Iterable, List, Optional, Tuple, Union

from .penalty import PenaltyTable
from .sequence import Protein

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]

ALPHABET_MARKER = '$'
COMMENT_MARKER = '#'
LABEL_MARKER = '>'

# offset 10, length 10: the fixed window older result files stored
LEGACY_WINDOW = (10, 10)


class FormatError(ValueError):
    """Error types for malformed input files."""
    def __init__(self, path: PathLike, line_number: int, message: str):
        self.path = str(path)
        self.line_number = line_number
        super().__init__(f"{path}:{line_number}: {message}")


class RecordFormatError(FormatError):
    """Raised when a protein records file cannot be parsed."""
    pass


class MatrixFormatError(FormatError):
    """Raised when a penalty matrix file cannot be parsed."""
    pass


def load_proteins(path: PathLike) -> List[Protein]:
    """
    Load protein records, one sequence line per record.

    Raises:
        FileNotFoundError: path does not exist
        RecordFormatError: a sequence line contains whitespace
    """
    proteins = []
    description = None
    dropped = 0

    with open(path) as f:
        for line_number, line in enumerate(f, start=1):
            line = line.strip()
            if not line:
                continue

            if line.startswith(LABEL_MARKER):
                if description is not None:
                    logger.debug("Dropping '%s': no sequence line", description)
                    dropped += 1
                description = line[1:]
            elif description is not None:
                if len(line.split()) > 1:
                    raise RecordFormatError(
                        path, line_number,
                        f"Sequence of '{description}' contains whitespace"
                    )
                proteins.append(Protein(description, line))
                description = None

    if description is not None:
        logger.debug("Dropping '%s': no sequence line", description)
        dropped += 1

    logger.info("Loaded %d proteins from %s (%d dropped)", len(proteins), path, dropped)
    return proteins


def save_proteins(
    proteins: Iterable[Protein],
    path: PathLike,
    window: Optional[Tuple[int, int]] = None
) -> int:
    """
    Write protein records in the format load_proteins reads.

    Args:
        proteins: Records to write
        path: Destination file, overwritten
        window: Optional (offset, length); only that slice of each
            sequence is written. LEGACY_WINDOW matches older result files.

    Returns:
        Number of records written

    Raises:
        EmptySequenceError: the window lands past the end of a sequence;
            path is left untouched
    """
    if window is not None:
        records = [protein.window(*window) for protein in proteins]
    else:
        records = list(proteins)

    with open(path, 'w') as f:
        for protein in records:
            f.write(protein.to_record())

    logger.info("Saved %d proteins to %s", len(records), path)
    return len(records)


def _parse_scores(path: PathLike, line_number: int, fields: List[str]) -> List[int]:
    try:
        return [int(value) for value in fields]
    except ValueError:
        raise MatrixFormatError(
            path, line_number, f"Scores must be integers, got {fields}"
        ) from None


def load_penalty_table(path: PathLike) -> PenaltyTable:
    """
    Load a penalty matrix file into a frozen PenaltyTable.

    Raises:
        FileNotFoundError: path does not exist
        MatrixFormatError: rows before the '$' line, non-integer scores,
            or a row with more scores than columns
    """
    table = PenaltyTable()
    alphabet: List[str] = []

    with open(path) as f:
        for line_number, line in enumerate(f, start=1):
            line = line.strip()
            if not line or line.startswith(COMMENT_MARKER):
                continue

            if line.startswith(ALPHABET_MARKER):
                alphabet = [token[0] for token in line[1:].split()]
                continue

            if not alphabet:
                raise MatrixFormatError(
                    path, line_number, f"Row before the '{ALPHABET_MARKER}' alphabet line"
                )

            row_symbol = line[0]
            scores = _parse_scores(path, line_number, line[1:].split())
            if len(scores) > len(alphabet):
                raise MatrixFormatError(
                    path, line_number,
                    f"Row '{row_symbol}' has {len(scores)} scores for {len(alphabet)} columns"
                )

            for column_symbol, score in zip(alphabet, scores):
                table.set(row_symbol, column_symbol, score)

    logger.info("Loaded %d symbol pairs from %s", len(table), path)
    return table.freeze()
