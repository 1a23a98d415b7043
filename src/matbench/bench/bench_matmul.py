"""
Benchmark script for GEMM (Matrix Multiply) kernels.
Tests baseline, Numba and NumPy implementations on the generated
benchmark matrices.
"""

import sys
import os
import time
from pathlib import Path

# Set thread limits BEFORE importing NumPy to prevent BLAS thread contention
# This ensures fair comparison and stable results
os.environ["OMP_NUM_THREADS"] = "1"
os.environ["MKL_NUM_THREADS"] = "1"
os.environ["OPENBLAS_NUM_THREADS"] = "1"
os.environ["NUMEXPR_NUM_THREADS"] = "1"

import numpy as np
import pandas as pd

# Add src/ to path (two levels up from this file)
src_root = Path(__file__).parent.parent.parent
sys.path.insert(0, str(src_root))

from matbench.kernels.generate import generate_matrix
from matbench.kernels.matmul_baseline import matmul_baseline
from matbench.kernels.matmul_numba import matmul_numba
from matbench.kernels.matmul_numpy import matmul_numpy

DEFAULT_SIZES = [16, 32, 50, 64, 128, 256]

# Pure Python is only timed below this many multiply-adds
BASELINE_MAX_PROBLEM = 1_000_000

results_dir = Path(__file__).parent.parent.parent.parent / "results"


def _runs_for(problem_size, num_runs):
    """Scale run count with problem size; small problems need more samples."""
    if problem_size < 100_000:
        return max(num_runs, 100)
    elif problem_size < 1_000_000:
        return max(num_runs, 30)
    elif problem_size < 100_000_000:
        return num_runs
    return max(3, num_runs // 2)


def time_kernel(kernel, A, B, num_warmup, num_runs):
    """
    Time kernel(A, B) after warmup.

    Returns:
        (last result, numpy array of per-run seconds)
    """
    for _ in range(num_warmup):
        _ = kernel(A, B)

    times = []
    C = None
    for _ in range(num_runs):
        t_start = time.perf_counter()
        C = kernel(A, B)
        t_end = time.perf_counter()
        times.append(t_end - t_start)

    return C, np.array(times)


def summarize(kernel_name, n, times):
    """Build one result row from per-run timings."""
    flops = 2 * n ** 3
    bytes_moved = 3 * n * n * 8  # float64 = 8 bytes

    return {
        'kernel': kernel_name,
        'n': n,
        'flops': flops,
        'bytes_moved': bytes_moved,
        # Median is the primary metric (robust to outliers)
        'latency_ms': np.median(times) * 1000,
        'latency_p50_ms': np.percentile(times, 50) * 1000,
        'latency_p95_ms': np.percentile(times, 95) * 1000,
        'latency_p99_ms': np.percentile(times, 99) * 1000,
        'throughput_gflops': (flops / 1e9) / np.median(times),
    }


def check_result(kernel_name, C, C_ref, rtol=1e-9, atol=1e-10):
    if not np.allclose(C, C_ref, rtol=rtol, atol=atol):
        max_diff = np.max(np.abs(C - C_ref))
        raise AssertionError(f"{kernel_name} correctness check failed: max_diff={max_diff:.6e}")


def benchmark_matmul(sizes, num_warmup=3, num_runs=10, adaptive_runs=True):
    """
    Benchmark matrix multiplication kernels on generated n x n matrices.

    Args:
        sizes: list of matrix dimensions n
        num_warmup: number of warmup runs (also triggers Numba JIT compilation)
        num_runs: number of timed runs
        adaptive_runs: raise run count for small problems

    Returns:
        DataFrame with benchmark results
    """
    results = []

    for n in sizes:
        print(f"\nBenchmarking GEMM: n={n}")

        problem_size = n ** 3
        actual_runs = _runs_for(problem_size, num_runs) if adaptive_runs else num_runs

        A = generate_matrix(n)
        B = generate_matrix(n)

        # Reference for correctness check
        C_ref = A @ B

        # 1. Baseline (pure Python)
        print("  Testing baseline (pure Python)...")
        if problem_size < BASELINE_MAX_PROBLEM:
            C, times = time_kernel(matmul_baseline, A, B, min(num_warmup, 1), actual_runs)
            check_result('baseline', C, C_ref)
            results.append(summarize('baseline', n, times))
        else:
            print(f"    Skipping baseline (problem too large)")

        # 2. Numba
        print("  Testing Numba (JIT compiled)...")
        C, times = time_kernel(matmul_numba, A, B, num_warmup, actual_runs)
        check_result('numba', C, C_ref)
        results.append(summarize('numba', n, times))

        # 3. NumPy
        print("  Testing NumPy (BLAS)...")
        C, times = time_kernel(matmul_numpy, A, B, num_warmup, actual_runs)
        check_result('numpy', C, C_ref)
        results.append(summarize('numpy', n, times))

    return pd.DataFrame(results)


def main(argv=None):
    import argparse

    parser = argparse.ArgumentParser(description='Benchmark GEMM kernels')
    parser.add_argument('--sizes', type=int, nargs='+', default=DEFAULT_SIZES,
                        help='Matrix dimensions to benchmark')
    parser.add_argument('--runs', type=int, default=10,
                        help='Number of timed runs per kernel')
    parser.add_argument('--warmup', type=int, default=3,
                        help='Number of warmup runs per kernel')
    parser.add_argument('--output', type=Path, default=results_dir / "matmul_results.csv",
                        help='CSV file to write results to')
    args = parser.parse_args(argv)

    print("=" * 70)
    print("GEMM Benchmark Suite - SINGLE-THREADED MODE")
    print("=" * 70)
    print("  - NumPy BLAS: 1 thread (limited via env vars set before import)")
    print("  - Numba: single-threaded kernel, no fastmath")
    print("  - Baseline: pure Python, transpose-then-accumulate")
    print("=" * 70)

    df = benchmark_matmul(args.sizes, num_warmup=args.warmup, num_runs=args.runs)
    df['mode'] = 'single_threaded'

    args.output.parent.mkdir(parents=True, exist_ok=True)
    df.to_csv(args.output, index=False)
    print(f"\nResults saved to: {args.output}")

    print("\n" + "=" * 60)
    print("Summary")
    print("=" * 60)
    print(df.to_string(index=False))


if __name__ == "__main__":
    main()
