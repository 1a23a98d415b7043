"""
NumPy vectorized GEMM implementation.
Uses @ operator (BLAS-backed); serves as the reference result.
"""

import numpy as np


def matmul_numpy(A, B):
    """
    Compute matrix multiplication C = A @ B using NumPy vectorization.

    Args:
        A: numpy array of shape (M, K), dtype float64
        B: numpy array of shape (K, N), dtype float64

    Returns:
        C: numpy array of shape (M, N), dtype float64
    """
    if A.shape[1] != B.shape[0]:
        raise ValueError(f"Dimension mismatch: A.shape[1]={A.shape[1]} != B.shape[0]={B.shape[0]}")
    return A @ B
