"""
Matrix allocation shared by every kernel.
A matrix is a C-contiguous float64 numpy array (flat row-major buffer).
"""

import numpy as np


def create_matrix(rows, cols):
    """
    Allocate a zero-initialized matrix.

    Args:
        rows: number of rows (> 0)
        cols: number of columns (> 0)

    Returns:
        numpy array of shape (rows, cols), dtype float64
    """
    return np.zeros((rows, cols), dtype=np.float64)
