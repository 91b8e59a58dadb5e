"""Benchmarks for Fourier transform functions."""

from .bench_transforms import BenchTransforms

__all__ = [
    "BenchTransforms",
]
