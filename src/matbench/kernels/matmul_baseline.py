"""
Baseline GEMM implementation using pure Python loops.
B is transposed first so that the inner product walks both operands
along their rows.
"""

import numpy as np

from matbench.kernels.matrix import create_matrix


def transpose_matrix(B):
    """
    Return B2 with B2[j, i] = B[i, j].

    Args:
        B: numpy array of shape (K, N), dtype float64

    Returns:
        B2: numpy array of shape (N, K), dtype float64
    """
    K, N = B.shape
    B2 = create_matrix(N, K)

    for i in range(K):
        for j in range(N):
            B2[j, i] = B[i, j]

    return B2


def matmul_baseline(A, B):
    """
    Compute matrix multiplication C = A @ B using pure Python loops.

    Accumulation runs over k in increasing order, one dot product of
    A[i, :] and B2[j, :] per output element.

    Args:
        A: numpy array of shape (M, K), dtype float64
        B: numpy array of shape (K, N), dtype float64

    Returns:
        C: numpy array of shape (M, N), dtype float64
    """
    M, K = A.shape
    K_check, N = B.shape

    if K != K_check:
        raise ValueError(f"Dimension mismatch: A.shape[1]={K} != B.shape[0]={K_check}")

    B2 = transpose_matrix(B)
    C = create_matrix(M, N)

    for i in range(M):
        for j in range(N):
            C[i, j] = 0.0
            for k in range(K):
                C[i, j] += A[i, k] * B2[j, k]

    return C


def verify_correctness(A, B, C_result, rtol=1e-9):
    """Verify that C_result matches A @ B (reference implementation)."""
    C_ref = A @ B
    return np.allclose(C_result, C_ref, rtol=rtol)


if __name__ == "__main__":
    # Test with small matrices
    np.random.seed(42)
    M, K, N = 32, 48, 16
    A = np.random.randn(M, K)
    B = np.random.randn(K, N)

    print("Running baseline matmul...")
    C = matmul_baseline(A, B)

    if verify_correctness(A, B, C):
        print("✓ Correctness check passed!")
    else:
        print("✗ Correctness check failed!")
