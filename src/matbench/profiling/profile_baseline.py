"""
Profiling script for the baseline matmul pipeline.
Uses cProfile to identify bottlenecks in the pure Python implementation.
"""

import sys
import cProfile
import pstats
from pathlib import Path

# Add src/ to path (two levels up from this file)
src_root = Path(__file__).parent.parent.parent
sys.path.insert(0, str(src_root))

from matbench.bench.run_matmul import N, run_matmul


def profile_matmul(n=N, top=10):
    """Profile generate + baseline matmul for an n x n problem."""
    print(f"Profiling baseline matmul (n={n})...")

    profiler = cProfile.Profile()
    profiler.enable()
    C, run_time = run_matmul(n)
    profiler.disable()

    print(f"Run time = {run_time:.6f} seconds (profiled)")

    stats = pstats.Stats(profiler)
    stats.sort_stats('cumulative')
    print(f"\nTop {top} functions by cumulative time:")
    stats.print_stats(top)

    return stats


def main():
    print("=" * 60)
    print("Baseline Kernel Profiling")
    print("=" * 60)

    profile_matmul()

    print("\n" + "=" * 60)
    print("Profiling complete!")
    print("=" * 60)


if __name__ == "__main__":
    main()
