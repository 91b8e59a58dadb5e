"""Benchmarks for dense linear algebra.

Compares torchdense decompositions and solvers against scipy.linalg.
"""

from __future__ import annotations

from typing import Callable

import numpy as np
import torch

try:
    import scipy.linalg

    SCIPY_AVAILABLE = True
except ImportError:
    SCIPY_AVAILABLE = False

import torchdense.linear_algebra as LA
from torchdense.linear_algebra import decomposition, solve

from benchmarks._timing import benchmark, print_comparison


def bench_pair(
    name: str,
    td_func: Callable,
    scipy_func: Callable | None,
    a: torch.Tensor,
    baseline_name: str = "scipy",
) -> None:
    td_time = benchmark(td_func, a, warmup=2, iterations=5)

    scipy_time = None
    if scipy_func is not None:
        scipy_time = benchmark(scipy_func, a.numpy(), warmup=2, iterations=5)

    print_comparison(name, td_time, scipy_time, baseline_name)


def run_decompositions(n: int) -> None:
    """Benchmark every decomposition on an n x n matrix."""
    torch.manual_seed(0)
    a = torch.randn(n, n, dtype=torch.float64)
    spd = a @ a.T + n * torch.eye(n, dtype=torch.float64)
    symmetric = a + a.T

    bench_pair(
        f"lu_decomposition ({n}x{n})",
        decomposition.lu_decomposition,
        scipy.linalg.lu if SCIPY_AVAILABLE else None,
        a,
    )
    bench_pair(
        f"qr_decomposition ({n}x{n})",
        decomposition.qr_decomposition,
        scipy.linalg.qr if SCIPY_AVAILABLE else None,
        a,
    )
    bench_pair(
        f"cholesky_decomposition ({n}x{n})",
        decomposition.cholesky_decomposition,
        scipy.linalg.cholesky if SCIPY_AVAILABLE else None,
        spd,
    )
    bench_pair(
        f"eigenvalue_decomposition, symmetric ({n}x{n})",
        decomposition.eigenvalue_decomposition,
        scipy.linalg.eigh if SCIPY_AVAILABLE else None,
        symmetric,
    )
    bench_pair(
        f"eigenvalue_decomposition, general ({n}x{n})",
        decomposition.eigenvalue_decomposition,
        scipy.linalg.eig if SCIPY_AVAILABLE else None,
        a,
    )
    bench_pair(
        f"singular_value_decomposition ({n}x{n})",
        decomposition.singular_value_decomposition,
        scipy.linalg.svd if SCIPY_AVAILABLE else None,
        a,
    )


def run_solvers(n: int) -> None:
    """Benchmark the solvers and scalar properties on an n x n matrix."""
    torch.manual_seed(1)
    a = torch.randn(n, n, dtype=torch.float64)
    b = torch.randn(n, dtype=torch.float64)
    b_np = b.numpy()

    bench_pair(
        f"solve ({n}x{n})",
        lambda x: solve.solve(x, b),
        (lambda x: scipy.linalg.solve(x, b_np)) if SCIPY_AVAILABLE else None,
        a,
    )
    bench_pair(
        f"inverse ({n}x{n})",
        solve.inverse,
        scipy.linalg.inv if SCIPY_AVAILABLE else None,
        a,
    )
    bench_pair(
        f"pseudo_inverse ({n}x{n})",
        solve.pseudo_inverse,
        scipy.linalg.pinv if SCIPY_AVAILABLE else None,
        a,
    )
    bench_pair(
        f"determinant ({n}x{n})",
        LA.determinant,
        scipy.linalg.det if SCIPY_AVAILABLE else None,
        a,
    )
    bench_pair(
        f"rank ({n}x{n})", LA.rank, np.linalg.matrix_rank, a, "numpy"
    )


if __name__ == "__main__":
    print("=" * 60)
    print("LINEAR ALGEBRA BENCHMARKS")
    print("=" * 60)

    for size in [16, 64, 128]:
        print(f"\n--- Decompositions, n={size} ---")
        run_decompositions(size)

    for size in [16, 64, 128]:
        print(f"\n--- Solvers, n={size} ---")
        run_solvers(size)
