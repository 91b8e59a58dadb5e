"""Benchmarks for dense linear algebra."""

from .bench_linear_algebra import run_decompositions, run_solvers

__all__ = [
    "run_decompositions",
    "run_solvers",
]
