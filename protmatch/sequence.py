"""
protmatch - Protein Records

Labelled protein sequences as read from a records file.

A record is a label plus a string of amino-acid symbols. Records are
immutable once built; the label is not required to be unique across a
collection and no alphabet is enforced here. Symbol coverage is the
penalty table's concern, checked when a sequence is aligned.
"""

from typing import Iterable, List
from dataclasses import dataclass


class SequenceError(Exception):
    """Error types for protein record operations."""
    pass


class EmptySequenceError(SequenceError):
    """Raised when a record has no symbols."""
    pass


@dataclass(frozen=True)
class Protein:
    """
    A labelled protein sequence.

    Attributes:
        description: Identifying label (the header line without '>')
        sequence: Amino-acid symbols, exactly as read
    """
    description: str
    sequence: str

    def __post_init__(self):
        if len(self.sequence) == 0:
            raise EmptySequenceError(
                f"Protein '{self.description}' has an empty sequence"
            )

    def __len__(self) -> int:
        return len(self.sequence)

    def window(self, offset: int, length: int) -> 'Protein':
        """
        Return a copy holding only sequence[offset:offset + length].

        Slicing past the end is clamped like a string slice; a window that
        lands entirely past the end raises EmptySequenceError.
        """
        if offset < 0 or length <= 0:
            raise ValueError("Window offset must be >= 0 and length > 0")
        return Protein(self.description, self.sequence[offset:offset + length])

    def to_record(self) -> str:
        """Return the record in '>label' / sequence form."""
        return f">{self.description}\n{self.sequence}\n"

    def __str__(self) -> str:
        return f">{self.description}\n{self.sequence}"


def alphabet_of(proteins: Iterable[Protein]) -> List[str]:
    """Return the sorted set of symbols used across a collection."""
    symbols = set()
    for protein in proteins:
        symbols.update(protein.sequence)
    return sorted(symbols)
