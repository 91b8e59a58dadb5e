"""Unnormalized discrete Fourier transform of any length.

All functions act on the last dimension of a complex128 tensor and are
batched over the leading dimensions. Nothing is cached between calls.
"""

import math

import torch
from torch import Tensor

# Prime lengths up to this size use the direct DFT matrix; larger primes
# use Bluestein's algorithm.
DIRECT_DFT_MAX_PRIME = 32


def _twiddle(numerator: Tensor, n: int) -> Tensor:
    """``exp(-2 pi i numerator / n)`` for integer ``numerator``."""
    angle = (-2.0 * math.pi / n) * torch.remainder(numerator, n).to(
        torch.float64
    )
    return torch.polar(torch.ones_like(angle), angle)


def _smallest_prime_factor(n: int) -> int:
    if n % 2 == 0:
        return 2
    f = 3
    while f * f <= n:
        if n % f == 0:
            return f
        f += 2
    return n


def _bit_reversal_permutation(n: int) -> Tensor:
    bits = n.bit_length() - 1
    index = torch.arange(n)
    reversed_index = torch.zeros_like(index)
    for b in range(bits):
        reversed_index |= ((index >> b) & 1) << (bits - 1 - b)
    return reversed_index


def _radix2(x: Tensor) -> Tensor:
    """Iterative decimation-in-time transform for a power-of-two length."""
    n = x.shape[-1]
    batch = x.shape[:-1]
    x = x[..., _bit_reversal_permutation(n)]

    size = 2
    while size <= n:
        half = size // 2
        w = _twiddle(torch.arange(half), size)
        blocks = x.reshape(*batch, n // size, size)
        even = blocks[..., :half]
        odd = blocks[..., half:] * w
        x = torch.cat([even + odd, even - odd], dim=-1).reshape(*batch, n)
        size *= 2

    return x


def _direct(x: Tensor) -> Tensor:
    """Transform by multiplication with the DFT matrix."""
    n = x.shape[-1]
    k = torch.arange(n)
    return x @ _twiddle(torch.outer(k, k), n)


def _bluestein(x: Tensor) -> Tensor:
    """Chirp-z transform through a power-of-two circular convolution."""
    n = x.shape[-1]
    length = 1 << (2 * n - 2).bit_length()

    k = torch.arange(n)
    # exp(-pi i k^2 / n) == exp(-2 pi i k^2 / (2n)).
    chirp = _twiddle(k * k, 2 * n)

    a = torch.zeros(*x.shape[:-1], length, dtype=torch.complex128)
    a[..., :n] = x * chirp

    b = torch.zeros(length, dtype=torch.complex128)
    b[:n] = torch.conj_physical(chirp)
    b[length - n + 1 :] = torch.conj_physical(chirp[1:]).flip(0)

    product = _radix2(a) * _radix2(b)
    convolution = torch.conj_physical(_radix2(torch.conj_physical(product)))
    convolution = convolution / length

    return chirp * convolution[..., :n]


def fft(x: Tensor) -> Tensor:
    r"""Unnormalized DFT along the last dimension.

    .. math::

        X_k = \sum_{j=0}^{n-1} x_j e^{-2\pi i jk/n}

    Parameters
    ----------
    x : Tensor
        Complex128 tensor of shape (..., n) with n >= 1.

    Returns
    -------
    Tensor
        New complex128 tensor of the same shape.

    Notes
    -----
    Powers of two use the iterative radix-2 algorithm. Other composite
    lengths split off their smallest prime factor p: the p decimated
    subsequences of length n / p are transformed recursively and combined
    with twiddle factors by length-p transforms. Prime lengths use the DFT
    matrix up to 32 points and Bluestein's algorithm beyond.
    """
    n = x.shape[-1]

    if n == 1:
        return x.clone()
    if n & (n - 1) == 0:
        return _radix2(x)

    p = _smallest_prime_factor(n)
    if p == n:
        if n <= DIRECT_DFT_MAX_PRIME:
            return _direct(x)
        return _bluestein(x)

    q = n // p
    batch = x.shape[:-1]

    # Row r of y is the transform of x[r::p].
    y = fft(x.reshape(*batch, q, p).transpose(-1, -2))
    y = y * _twiddle(torch.outer(torch.arange(p), torch.arange(q)), n)

    # Length-p transforms across the rows give X[k1 + q * k2] at [k1, k2].
    z = fft(y.transpose(-1, -2))

    return z.transpose(-1, -2).reshape(*batch, n)


def ifft(x: Tensor) -> Tensor:
    """Inverse DFT along the last dimension, ``conj(fft(conj(x))) / n``."""
    return torch.conj_physical(fft(torch.conj_physical(x))) / x.shape[-1]


def fft2(x: Tensor) -> Tensor:
    """Unnormalized 2D DFT of a complex128 matrix: rows first, then columns."""
    rows = fft(x)
    return fft(rows.transpose(-1, -2)).transpose(-1, -2)


def ifft2(x: Tensor) -> Tensor:
    """Inverse 2D DFT, ``conj(fft2(conj(x))) / (m n)``."""
    m, n = x.shape[-2:]
    return torch.conj_physical(fft2(torch.conj_physical(x))) / (m * n)
