"""
Matrix multiply microbenchmark.
Generates two N x N matrices, multiplies them with the baseline kernel,
prints the product row by row and the elapsed run time.
Usage: python src/matbench/bench/run_matmul.py
"""

import sys
from pathlib import Path

# Add src/ to path (two levels up from this file)
src_root = Path(__file__).parent.parent.parent
sys.path.insert(0, str(src_root))

from matbench.kernels.generate import generate_matrix
from matbench.kernels.matmul_baseline import matmul_baseline
from matbench.timing import timestamp, elapsed

N = 50


def format_row(row):
    """Render one matrix row as [v0, v1, ...] with round-trip float text."""
    return "[" + ", ".join(repr(float(v)) for v in row) + "]"


def run_matmul(n=N, multiply=matmul_baseline):
    """
    Generate A and B, compute C = multiply(A, B) and time the whole pipeline.

    Args:
        n: matrix dimension
        multiply: kernel taking (A, B) and returning C

    Returns:
        (C, elapsed_seconds)
    """
    start = timestamp()

    A = generate_matrix(n)
    B = generate_matrix(n)
    C = multiply(A, B)

    return C, elapsed(start)


def main():
    start = timestamp()

    A = generate_matrix(N)
    B = generate_matrix(N)
    C = matmul_baseline(A, B)

    for row in C:
        print(format_row(row))

    print(f"Finished. Run time = {elapsed(start):.6f} seconds.")


if __name__ == "__main__":
    main()
