"""
Deterministic test-matrix generator.
M[i, j] = scale * (i - j) * (i + j), with scale = 1 / n / n.
"""

import numpy as np

from matbench.kernels.matrix import create_matrix


def generate_matrix(n):
    """
    Build the n x n benchmark matrix with pure Python loops.

    The difference/sum factorisation is evaluated left to right
    ((scale * (i - j)) * (i + j)), never as i*i - j*j, so the output is
    reproducible bit for bit.

    Args:
        n: matrix dimension (> 0)

    Returns:
        M: numpy array of shape (n, n), dtype float64
    """
    scale = 1.0 / float(n) / float(n)
    M = create_matrix(n, n)

    for i in range(n):
        fi = float(i)
        for j in range(n):
            fj = float(j)
            M[i, j] = scale * (fi - fj) * (fi + fj)

    return M


def generate_matrix_numpy(n):
    """Vectorized generate_matrix; same operation order, identical output."""
    scale = 1.0 / float(n) / float(n)
    i = np.arange(n, dtype=np.float64)[:, np.newaxis]
    j = np.arange(n, dtype=np.float64)[np.newaxis, :]
    return np.ascontiguousarray(scale * (i - j) * (i + j), dtype=np.float64)


if __name__ == "__main__":
    M = generate_matrix(4)
    print(M)

    if np.array_equal(M, generate_matrix_numpy(4)) and np.array_equal(M, -M.T):
        print("✓ Generator check passed!")
    else:
        print("✗ Generator check failed!")
