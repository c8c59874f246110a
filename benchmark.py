#!/usr/bin/env python3
"""
protmatch Benchmark Script

Times the alignment engine and the best-match search.

Usage:
    python benchmark.py
    python benchmark.py --numpy  # Include NumPy comparison
"""

import time
import argparse
import random
import sys
from typing import Callable

from protmatch.penalty import PenaltyTable
from protmatch.sequence import Protein
from protmatch.alignment import align_query_anchored, align_score_only, fill_matrices
from protmatch.search import find_best

AMINO_ACIDS = "ARNDCQEGHILKMFPSTWYV"


def time_function(func: Callable, *args, iterations: int = 1, **kwargs) -> float:
    """Time a function over multiple iterations."""
    start = time.perf_counter()
    for _ in range(iterations):
        func(*args, **kwargs)
    end = time.perf_counter()
    return (end - start) * 1000  # Return milliseconds


def random_protein(rng: random.Random, length: int) -> str:
    return ''.join(rng.choice(AMINO_ACIDS) for _ in range(length))


def benchmark_alignment(table: PenaltyTable, rng: random.Random):
    """Benchmark single-pair alignment."""
    print("\n=== Anchored Alignment Benchmark ===")

    test_cases = [
        (100, 10),
        (500, 10),
        (1000, 50),
        (1000, 200),
    ]

    for len_a, len_b in test_cases:
        seq_a = random_protein(rng, len_a)
        seq_b = random_protein(rng, len_b)

        # Warm up
        _ = align_query_anchored(seq_a, seq_b, table)

        full_elapsed = time_function(align_query_anchored, seq_a, seq_b, table, iterations=1)
        score_elapsed = time_function(align_score_only, seq_a, seq_b, table, iterations=1)

        print(f"  {len_a} x {len_b}:")
        print(f"    Full (matrices + traceback): {full_elapsed:.2f}ms")
        print(f"    Score-only (two rows): {score_elapsed:.2f}ms")


def benchmark_search(table: PenaltyTable, rng: random.Random):
    """Benchmark best-match search over growing collections."""
    print("\n=== Best-Match Search Benchmark ===")

    query = "MYPEPTIDE"
    for count in [10, 100, 500]:
        references = [
            Protein(f"ref{i}", random_protein(rng, 300)) for i in range(count)
        ]
        references.append(Protein("planted", random_protein(rng, 100) + query))

        elapsed = time_function(find_best, query, references, table, iterations=1)
        print(f"  {count + 1} references x 300 aa: {elapsed:.2f}ms")


def benchmark_with_numpy(table: PenaltyTable, rng: random.Random):
    """Benchmark the score fill with NumPy arrays."""
    print("\n=== NumPy Comparison Benchmark ===")

    try:
        import numpy as np

        print("  NumPy is available - running comparison...")

        seq_a = random_protein(rng, 1000)
        seq_b = random_protein(rng, 50)

        pure = time_function(fill_matrices, seq_a, seq_b, table, iterations=1)
        print(f"    Pure Python lists: {pure:.2f}ms")

        # Substitution rows are looked up once per symbol of seq_a
        gap_b = np.array([table.get('*', b) for b in seq_b], dtype=np.int32)
        sub_rows = {
            a: np.array([table.get(a, b) for b in seq_b], dtype=np.int32)
            for a in set(seq_a)
        }

        def numpy_fill():
            m, n = len(seq_a), len(seq_b)
            H = np.zeros((m + 1, n + 1), dtype=np.int32)
            for i in range(1, m + 1):
                a = seq_a[i - 1]
                up = H[i - 1, 1:] + table.get(a, '*')
                diag = H[i - 1, :-1] + sub_rows[a]
                row = np.maximum(0, np.maximum(up, diag))
                # left depends on the cell just computed, so it stays a loop
                for j in range(1, n + 1):
                    left = H[i, j - 1] + gap_b[j - 1]
                    H[i, j] = max(row[j - 1], left)
            return H

        vectorised = time_function(numpy_fill, iterations=1)
        print(f"    NumPy rows: {vectorised:.2f}ms")
        print(f"    Speedup: {pure/vectorised:.1f}x (left dependency limits it)")

    except ImportError:
        print("  NumPy not available - skipping NumPy comparison")
        print("  Install with: pip install protmatch[numpy]")


def run_all_benchmarks(include_numpy: bool = False, seed: int = 0):
    """Run all benchmarks."""
    print("=" * 60)
    print("protmatch Benchmark Suite")
    print("=" * 60)

    table = PenaltyTable.blosum62()
    rng = random.Random(seed)

    benchmark_alignment(table, rng)
    benchmark_search(table, rng)

    if include_numpy:
        benchmark_with_numpy(table, rng)


def main():
    """Main entry point."""
    parser = argparse.ArgumentParser(description='protmatch Benchmarks')
    parser.add_argument('--numpy', action='store_true',
                        help='Include NumPy comparison benchmarks')
    parser.add_argument('--seed', type=int, default=0,
                        help='Random seed for generated sequences')
    args = parser.parse_args()

    run_all_benchmarks(include_numpy=args.numpy, seed=args.seed)
    return 0


if __name__ == '__main__':
    sys.exit(main())
