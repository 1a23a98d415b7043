"""
Numba JIT version of the transpose-then-accumulate GEMM.
Features:
- B matrix transposed once for cache-friendly row-major access
- Local accumulator per output element
- Single-threaded, no fastmath: summation order matches matmul_baseline
"""

import numpy as np
from numba import njit


@njit(cache=True)
def transpose_numba(B):
    """Return B2 with B2[j, i] = B[i, j] (float64, contiguous)."""
    K, N = B.shape
    B2 = np.zeros((N, K), dtype=np.float64)

    for i in range(K):
        for j in range(N):
            B2[j, i] = B[i, j]

    return B2


@njit(cache=True)
def matmul_numba(A, B):
    """
    Compute matrix multiplication C = A @ B using Numba JIT.

    Cache strategy:
    - B is transposed to B2, so B2[j, k] = B[k, j]
    - Both A[i, k] and B2[j, k] are row-major walks (cache-friendly)
    - k runs strictly increasing, left-to-right summation

    Args:
        A: numpy array of shape (M, K), dtype float64, contiguous
        B: numpy array of shape (K, N), dtype float64, contiguous

    Returns:
        C: numpy array of shape (M, N), dtype float64
    """
    M, K = A.shape
    K2, N = B.shape

    if K != K2:
        raise ValueError("Dimension mismatch: A.shape[1] != B.shape[0]")

    B2 = transpose_numba(B)
    C = np.zeros((M, N), dtype=np.float64)

    for i in range(M):
        for j in range(N):
            acc = 0.0
            for k in range(K):
                acc += A[i, k] * B2[j, k]
            C[i, j] = acc

    return C


def verify_correctness(A, B, C_result, rtol=1e-9):
    """Verify that C_result matches A @ B (reference implementation)."""
    C_ref = A @ B
    return np.allclose(C_result, C_ref, rtol=rtol)


if __name__ == "__main__":
    # Test with small matrices
    np.random.seed(42)
    M, K, N = 128, 256, 64
    A = np.ascontiguousarray(np.random.randn(M, K), dtype=np.float64)
    B = np.ascontiguousarray(np.random.randn(K, N), dtype=np.float64)

    print("Running Numba matmul (B transposed)...")
    # Warmup
    _ = matmul_numba(A, B)

    C = matmul_numba(A, B)

    if verify_correctness(A, B, C):
        print("Correctness check passed!")
    else:
        print("Correctness check failed!")
        print(f"Max diff: {np.max(np.abs(C - A @ B)):.6e}")
