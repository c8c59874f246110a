#!/usr/bin/env python3
"""
protmatch Demo

Walks through the penalty table, a single anchored alignment and a
best-match search over a small in-memory collection.

Usage:
    python demo.py
"""

import sys

from protmatch import (
    PenaltyTable, Protein, TracebackMode,
    align_query_anchored, find_best, rank_references,
    UnknownPairError, NoAlignmentFoundError
)


REFERENCES = [
    Protein("sp|DEMO1| kinase fragment", "MKTAYIAKQRQISFVKSHFSRQ"),
    Protein("sp|DEMO2| carrier", "GGSLKRMYPEPTIDE"),
    Protein("sp|DEMO3| carrier, shorter", "RMYPEPTIDE"),
    Protein("sp|DEMO4| unrelated", "WWCCWWCC"),
]


def main():
    """Main entry point."""
    print("protmatch Demo")
    print("==============\n")

    table = PenaltyTable.blosum62()

    example_table(table)
    example_alignment(table)
    example_search(table)
    example_errors(table)

    return 0


def example_table(table):
    """Example 1: Penalty Table"""
    print("Example 1: Penalty Table")
    print("------------------------")
    print(f"Table: {table!r}")
    print(f"W/W: {table.get('W', 'W')}  A/*: {table.get('A', '*')}  I/V: {table.get('I', 'V')}")
    print(f"Symmetric: {table.is_symmetric()}")
    print()


def example_alignment(table):
    """Example 2: Anchored Alignment"""
    print("Example 2: Anchored Alignment")
    print("-----------------------------")

    for mode in TracebackMode:
        alignment = align_query_anchored("CSNPNLWDFGR", "MCSNPNLSDFGRK", table, mode)
        print(f"Mode: {mode.value}")
        print(alignment.format())
        print()


def example_search(table):
    """Example 3: Best-Match Search"""
    print("Example 3: Best-Match Search")
    print("----------------------------")

    best = find_best("MYPEPTIDE", REFERENCES, table)
    print(best.format())

    print("\nRanking:")
    for match in rank_references("MYPEPTIDE", REFERENCES, table, top=3):
        print(f"  {match.score:4d}  {match.reference.description}")
    print()


def example_errors(table):
    """Example 4: Typed Errors"""
    print("Example 4: Typed Errors")
    print("-----------------------")

    try:
        find_best("MYPEPTIDE", [Protein("lowercase", "mypeptide")], table)
    except UnknownPairError as e:
        print(f"UnknownPairError: {e}")

    try:
        find_best("WWW", [Protein("acidic", "DDDEEE")], table)
    except NoAlignmentFoundError as e:
        print(f"NoAlignmentFoundError: {e}")

    print()


if __name__ == '__main__':
    sys.exit(main())
