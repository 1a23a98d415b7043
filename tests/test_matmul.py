import numpy as np
import pytest

from matbench.kernels.generate import generate_matrix
from matbench.kernels.matmul_baseline import matmul_baseline, transpose_matrix, verify_correctness
from matbench.kernels.matmul_numba import matmul_numba, transpose_numba
from matbench.kernels.matmul_numpy import matmul_numpy


def test_transpose():
    np.random.seed(42)
    B = np.random.randn(4, 6)
    np.testing.assert_array_equal(transpose_matrix(B), B.T)
    np.testing.assert_array_equal(transpose_numba(B), B.T)


def test_one_by_one():
    C = matmul_baseline(np.array([[1.0]]), np.array([[1.0]]))
    np.testing.assert_array_equal(C, np.array([[1.0]]))


def test_rectangular_shape():
    np.random.seed(42)
    A = np.random.randn(3, 5)
    B = np.random.randn(5, 7)
    C = matmul_baseline(A, B)
    assert C.shape == (3, 7)
    assert verify_correctness(A, B, C)


def test_identity():
    np.random.seed(42)
    A = np.random.randn(6, 6)
    C = matmul_baseline(A, np.eye(6))
    np.testing.assert_array_equal(C, A)


def test_associative():
    np.random.seed(42)
    A = np.random.randn(4, 5)
    B = np.random.randn(5, 3)
    C = np.random.randn(3, 6)
    left = matmul_baseline(matmul_baseline(A, B), C)
    right = matmul_baseline(A, matmul_baseline(B, C))
    np.testing.assert_allclose(left, right, rtol=1e-9, atol=1e-12)


def test_accumulation_order():
    np.random.seed(42)
    A = np.random.randn(3, 8)
    B = np.random.randn(8, 2)
    C = matmul_baseline(A, B)
    for i in range(3):
        for j in range(2):
            acc = 0.0
            for k in range(8):
                acc += A[i, k] * B[k, j]
            assert C[i, j] == acc


def test_dimension_mismatch():
    with pytest.raises(ValueError, match="Dimension mismatch"):
        matmul_baseline(np.zeros((2, 3)), np.zeros((2, 3)))
    with pytest.raises(ValueError):
        matmul_numpy(np.zeros((2, 3)), np.zeros((2, 3)))


def test_generated_product_matches_reference():
    A = generate_matrix(20)
    B = generate_matrix(20)
    C = matmul_baseline(A, B)
    np.testing.assert_allclose(C, A @ B, rtol=1e-9, atol=1e-12)


def test_numba_matches_baseline():
    np.random.seed(42)
    A = np.random.randn(9, 13)
    B = np.random.randn(13, 5)
    np.testing.assert_allclose(matmul_numba(A, B), matmul_baseline(A, B), rtol=1e-12, atol=1e-14)

    A = generate_matrix(50)
    np.testing.assert_allclose(matmul_numba(A, A), matmul_baseline(A, A), rtol=1e-12, atol=1e-14)


def test_numpy_reference():
    np.random.seed(42)
    A = np.random.randn(4, 4)
    B = np.random.randn(4, 4)
    np.testing.assert_allclose(matmul_numpy(A, B), matmul_baseline(A, B), rtol=1e-9, atol=1e-12)
