"""Benchmarks for Fourier transform functions.

This module benchmarks torchdense transforms and compares against
numpy/scipy baselines.
"""

from __future__ import annotations

from typing import Any, Callable

import numpy as np
import torch

# scipy imports - handle optional dependency
try:
    from scipy import fft as scipy_fft

    SCIPY_FFT_AVAILABLE = True
except ImportError:
    SCIPY_FFT_AVAILABLE = False

import torchdense.transform as T

from benchmarks._timing import benchmark, print_comparison


class BenchTransforms:
    """Benchmarks for Fourier transform functions."""

    def __init__(self, warmup: int = 3, iterations: int = 10):
        """Initialize benchmark runner.

        Parameters
        ----------
        warmup : int, optional
            Number of warmup iterations. Default is 3.
        iterations : int, optional
            Number of timed iterations. Default is 10.
        """
        self.warmup = warmup
        self.iterations = iterations

    def _bench(
        self, func: Callable, *args: Any, **kwargs: Any
    ) -> dict[str, float]:
        """Run benchmark with configured settings."""
        return benchmark(
            func,
            *args,
            warmup=self.warmup,
            iterations=self.iterations,
            **kwargs,
        )

    # ============== One-Dimensional ==============

    def bench_fourier_transform_1d(self, n: int = 1024) -> None:
        """Benchmark fourier_transform_1d vs scipy.fft.fft.

        Parameters
        ----------
        n : int, optional
            Signal length. Default is 1024.
        """
        x = torch.randn(n, dtype=torch.float64)

        td_time = self._bench(T.fourier_transform_1d, x)

        scipy_time = None
        if SCIPY_FFT_AVAILABLE:
            scipy_time = self._bench(scipy_fft.fft, x.numpy())

        print_comparison(f"fourier_transform_1d (n={n})", td_time, scipy_time)

    def bench_paired_fourier_transform_1d(self, n: int = 1024) -> None:
        """Benchmark the paired transform against two single transforms.

        Parameters
        ----------
        n : int, optional
            Signal length. Default is 1024.
        """
        a = torch.randn(n, dtype=torch.float64)
        b = torch.randn(n, dtype=torch.float64)

        td_time = self._bench(T.paired_fourier_transform_1d, a, b)

        def two_transforms():
            T.fourier_transform_1d(a)
            T.fourier_transform_1d(b)

        print_comparison(
            f"paired_fourier_transform_1d (n={n})",
            td_time,
            self._bench(two_transforms),
            "2 x 1d",
        )

    # ============== Two-Dimensional ==============

    def bench_fourier_transform_2d(self, m: int = 128, n: int = 128) -> None:
        """Benchmark fourier_transform_2d vs numpy.fft.fft2.

        Parameters
        ----------
        m, n : int, optional
            Matrix shape. Default is 128 x 128.
        """
        x = torch.randn(m, n, dtype=torch.float64)

        td_time = self._bench(T.fourier_transform_2d, x)
        numpy_time = self._bench(np.fft.fft2, x.numpy())

        print_comparison(
            f"fourier_transform_2d ({m}x{n})", td_time, numpy_time, "numpy"
        )

    def bench_paired_fourier_transform_2d(
        self, m: int = 128, n: int = 128
    ) -> None:
        """Benchmark paired_fourier_transform_2d vs two numpy.fft.fft2 calls.

        Parameters
        ----------
        m, n : int, optional
            Matrix shape. Default is 128 x 128.
        """
        a = torch.randn(m, n, dtype=torch.float64)
        b = torch.randn(m, n, dtype=torch.float64)
        a_np, b_np = a.numpy(), b.numpy()

        td_time = self._bench(T.paired_fourier_transform_2d, a, b)

        def numpy_pair():
            np.fft.fft2(a_np)
            np.fft.fft2(b_np)

        print_comparison(
            f"paired_fourier_transform_2d ({m}x{n})",
            td_time,
            self._bench(numpy_pair),
            "numpy",
        )

    def bench_inverse_fourier_transform_2d(
        self, m: int = 128, n: int = 128
    ) -> None:
        """Benchmark inverse_fourier_transform_2d vs numpy.fft.ifft2.

        Parameters
        ----------
        m, n : int, optional
            Matrix shape. Default is 128 x 128.
        """
        spectrum = T.fourier_transform_2d(torch.randn(m, n, dtype=torch.float64))

        td_time = self._bench(T.inverse_fourier_transform_2d, spectrum)
        numpy_time = self._bench(np.fft.ifft2, spectrum.to_complex().numpy())

        print_comparison(
            f"inverse_fourier_transform_2d ({m}x{n})",
            td_time,
            numpy_time,
            "numpy",
        )

    # ============== Run All ==============

    def run_all(self) -> None:
        """Run all transform benchmarks."""
        print("=" * 60)
        print("TRANSFORM BENCHMARKS")
        print("=" * 60)

        print("\n--- One-Dimensional ---")
        self.bench_fourier_transform_1d()
        self.bench_paired_fourier_transform_1d()

        print("\n--- Two-Dimensional ---")
        self.bench_fourier_transform_2d()
        self.bench_paired_fourier_transform_2d()
        self.bench_inverse_fourier_transform_2d()

    def run_scaling(self) -> None:
        """Run scaling benchmarks over the radix-2, mixed-radix and
        Bluestein paths."""
        print("=" * 60)
        print("SCALING BENCHMARKS")
        print("=" * 60)

        print("\n--- Power-of-Two Length Scaling ---")
        for n in [256, 1024, 4096, 16384]:
            self.bench_fourier_transform_1d(n=n)

        print("\n--- Composite Length Scaling ---")
        for n in [240, 1000, 3600, 15000]:
            self.bench_fourier_transform_1d(n=n)

        print("\n--- Prime Length Scaling ---")
        for n in [257, 1021, 4093]:
            self.bench_fourier_transform_1d(n=n)

        print("\n--- 2D Size Scaling ---")
        for size in [32, 64, 128, 256]:
            self.bench_paired_fourier_transform_2d(m=size, n=size)


if __name__ == "__main__":
    bench = BenchTransforms(warmup=5, iterations=20)
    bench.run_all()
    print("\n")
    bench.run_scaling()
