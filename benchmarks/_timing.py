"""Timing helpers shared by the benchmark scripts."""

from __future__ import annotations

import time
from typing import Any, Callable

import numpy as np


def benchmark(
    func: Callable,
    *args: Any,
    warmup: int = 3,
    iterations: int = 10,
    **kwargs: Any,
) -> dict[str, float]:
    """Run a simple benchmark on a function.

    Parameters
    ----------
    func : callable
        Function to benchmark.
    *args : Any
        Positional arguments to pass to func.
    warmup : int, optional
        Number of warmup iterations. Default is 3.
    iterations : int, optional
        Number of timed iterations. Default is 10.
    **kwargs : Any
        Keyword arguments to pass to func.

    Returns
    -------
    dict
        Dictionary with timing statistics:
        - 'mean': Mean time in seconds
        - 'std': Standard deviation in seconds
        - 'min': Minimum time in seconds
        - 'max': Maximum time in seconds
    """
    for _ in range(warmup):
        func(*args, **kwargs)

    times = []
    for _ in range(iterations):
        start = time.perf_counter()
        func(*args, **kwargs)
        times.append(time.perf_counter() - start)

    return {
        "mean": np.mean(times),
        "std": np.std(times),
        "min": np.min(times),
        "max": np.max(times),
    }


def format_time(seconds: float) -> str:
    """Format time in appropriate units."""
    if seconds < 1e-6:
        return f"{seconds * 1e9:.3f}ns"
    elif seconds < 1e-3:
        return f"{seconds * 1e6:.3f}us"
    elif seconds < 1:
        return f"{seconds * 1e3:.3f}ms"
    else:
        return f"{seconds:.3f}s"


def print_comparison(
    name: str,
    td_time: dict[str, float],
    baseline_time: dict[str, float] | None = None,
    baseline_name: str = "scipy",
) -> None:
    """Print benchmark comparison results."""
    print(f"\n{name}")
    print("-" * len(name))
    print(
        f"  torchdense: {format_time(td_time['mean'])} +/- {format_time(td_time['std'])}"
    )
    if baseline_time is not None:
        label = f"{baseline_name}:".ljust(11)
        print(
            f"  {label} {format_time(baseline_time['mean'])} +/- {format_time(baseline_time['std'])}"
        )
        speedup = baseline_time["mean"] / td_time["mean"]
        if speedup >= 1:
            print(f"  Speedup:    {speedup:.2f}x faster")
        else:
            print(f"  Speedup:    {1 / speedup:.2f}x slower")
