"""Benchmarks comparing torchdense against numpy and scipy.

Run a suite as a module from the repository root, e.g.
``python -m benchmarks.transform.bench_transforms``.
"""
