"""
Utility script to plot benchmark results from CSV files.
Usage: python src/matbench/bench/plot_results.py
"""

import sys
import pandas as pd
import matplotlib.pyplot as plt
from pathlib import Path

# Add src/ to path (two levels up from this file)
src_root = Path(__file__).parent.parent.parent
sys.path.insert(0, str(src_root))

results_dir = Path(__file__).parent.parent.parent.parent / "results"
plots_dir = results_dir / "plots"

MARKERS = {'baseline': 'o', 'numba': '^', 'numpy': 's'}


def plot_matmul_results(csv_path=None, out_dir=None):
    """
    Plot GEMM benchmark results.

    Returns:
        Path of the saved figure, or None if the results file is missing.
    """
    csv_path = Path(csv_path) if csv_path is not None else results_dir / "matmul_results.csv"
    out_dir = Path(out_dir) if out_dir is not None else plots_dir

    if not csv_path.exists():
        print(f"Results file not found: {csv_path}")
        return None

    df = pd.read_csv(csv_path)
    out_dir.mkdir(parents=True, exist_ok=True)

    fig, axes = plt.subplots(1, 2, figsize=(14, 5))

    for kernel, data in df.groupby('kernel'):
        data = data.sort_values('n')
        marker = MARKERS.get(kernel, 'd')
        axes[0].semilogy(data['n'], data['latency_ms'], '-', label=kernel, marker=marker)
        axes[1].plot(data['n'], data['throughput_gflops'], '-', label=kernel, marker=marker)

    # Latency comparison
    axes[0].set_xlabel('Matrix Dimension (n)')
    axes[0].set_ylabel('Latency (ms)')
    axes[0].set_title('GEMM Latency Comparison')
    axes[0].legend()
    axes[0].grid(True, alpha=0.3)

    # Throughput comparison
    axes[1].set_xlabel('Matrix Dimension (n)')
    axes[1].set_ylabel('Throughput (GFLOPS)')
    axes[1].set_title('GEMM Throughput Comparison')
    axes[1].legend()
    axes[1].grid(True, alpha=0.3)

    plt.tight_layout()
    out_path = out_dir / "matmul_results.png"
    plt.savefig(out_path, dpi=150)
    print(f"Saved plot: {out_path}")
    plt.close(fig)

    return out_path


def main():
    print("Generating plots from benchmark results...")
    plot_matmul_results()
    print("Plot generation complete!")


if __name__ == "__main__":
    main()
