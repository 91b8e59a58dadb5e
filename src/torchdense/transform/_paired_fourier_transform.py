"""Two real transforms for the price of one complex transform.

For real sequences ``a`` and ``b`` the spectrum of ``z = a + ib`` is
``Z = A + iB`` with Hermitian-symmetric ``A`` and ``B``, so

    A(u) = (Z(u) + conj(Z(-u))) / 2
    B(u) = (Z(u) - conj(Z(-u))) / (2i)

where ``-u`` is taken modulo the transform length along every axis.
"""

from typing import Sequence, Tuple

import torch
from torch import Tensor

from torchdense._exceptions import InvalidArgumentError
from torchdense.transform._fft_engine import fft, fft2, ifft, ifft2
from torchdense.transform._input import as_complex128, to_split_complex
from torchdense.transform._split_complex import SplitComplex


def _mirror(z: Tensor, dims: Sequence[int]) -> Tensor:
    """``z`` at the negated indices, ``z[(-u) % n]`` along each of ``dims``.

    Index 0 maps to itself and, for even n, so does n / 2.
    """
    return torch.roll(torch.flip(z, dims), shifts=[1] * len(dims), dims=dims)


def _split(z: Tensor, dims: Sequence[int]) -> Tuple[Tensor, Tensor]:
    mirrored = torch.conj_physical(_mirror(z, dims))
    return (z + mirrored) / 2, (z - mirrored) / 2j


def _real_pair(a, b, dim: int, name: str) -> Tuple[Tensor, torch.dtype]:
    x, a_dtype = as_complex128(a, dim=dim, name=f"{name}: a", real=True)
    y, b_dtype = as_complex128(b, dim=dim, name=f"{name}: b", real=True)
    if x.shape != y.shape:
        raise InvalidArgumentError(
            f"{name}: a and b must have the same shape, got "
            f"{tuple(x.shape)} and {tuple(y.shape)}"
        )
    return torch.complex(x.real, y.real), torch.promote_types(a_dtype, b_dtype)


def _spectrum_pair(fa, fb, dim: int, name: str) -> Tuple[Tensor, torch.dtype]:
    za, a_dtype = as_complex128(fa, dim=dim, name=f"{name}: fa")
    zb, b_dtype = as_complex128(fb, dim=dim, name=f"{name}: fb")
    if za.shape != zb.shape:
        raise InvalidArgumentError(
            f"{name}: fa and fb must have the same shape, got "
            f"{tuple(za.shape)} and {tuple(zb.shape)}"
        )
    return za + 1j * zb, torch.promote_types(a_dtype, b_dtype)


def paired_fourier_transform_1d(
    a, b
) -> Tuple[SplitComplex, SplitComplex]:
    """Spectra of two real sequences from a single complex transform.

    Parameters
    ----------
    a, b : Tensor or array_like
        Real sequences of the same length.

    Returns
    -------
    tuple of SplitComplex
        ``(fourier_transform_1d(a), fourier_transform_1d(b))`` up to
        rounding.

    Raises
    ------
    InvalidArgumentError
        If the sequences differ in length or either one is complex.
    """
    z, dtype = _real_pair(a, b, 1, "paired_fourier_transform_1d")
    fa, fb = _split(fft(z), dims=[-1])
    return to_split_complex(fa, dtype), to_split_complex(fb, dtype)


def inverse_paired_fourier_transform_1d(fa, fb) -> Tuple[Tensor, Tensor]:
    """Two real sequences from their spectra with one inverse transform.

    ``fa + i fb`` is inverted once; the real part of the result is ``a`` and
    the imaginary part is ``b``.
    """
    z, dtype = _spectrum_pair(fa, fb, 1, "inverse_paired_fourier_transform_1d")
    x = ifft(z)
    return x.real.to(dtype), x.imag.to(dtype)


def paired_fourier_transform_2d(
    a, b
) -> Tuple[SplitComplex, SplitComplex]:
    r"""
    Two-dimensional spectra of two real matrices from one complex transform.

    The matrices are packed as :math:`z = a + ib`, transformed once, and
    separated with the Hermitian symmetry of real spectra:

    .. math::

        F_a(u, v) = \frac{Z(u, v) + \overline{Z(-u, -v)}}{2}, \qquad
        F_b(u, v) = \frac{Z(u, v) - \overline{Z(-u, -v)}}{2i}

    with indices taken modulo the matrix shape.

    Parameters
    ----------
    a, b : DenseMatrix, Tensor or array_like
        Real matrices of the same shape (m, n).

    Returns
    -------
    tuple of SplitComplex
        ``(fourier_transform_2d(a), fourier_transform_2d(b))`` up to
        rounding.

    Raises
    ------
    InvalidArgumentError
        If the matrices differ in shape or either one is complex.

    Examples
    --------
    >>> import torch
    >>> a = torch.rand(4, 6, dtype=torch.float64)
    >>> b = torch.rand(4, 6, dtype=torch.float64)
    >>> fa, fb = paired_fourier_transform_2d(a, b)
    >>> torch.allclose(fa.to_complex(), torch.fft.fft2(a))
    True
    """
    z, dtype = _real_pair(a, b, 2, "paired_fourier_transform_2d")
    fa, fb = _split(fft2(z), dims=[-2, -1])
    return to_split_complex(fa, dtype), to_split_complex(fb, dtype)


def inverse_paired_fourier_transform_2d(fa, fb) -> Tuple[Tensor, Tensor]:
    """Two real matrices from their spectra with one inverse transform.

    Parameters
    ----------
    fa, fb : SplitComplex, Tensor or array_like
        Spectra of the same shape (m, n), each Hermitian symmetric.

    Returns
    -------
    tuple of Tensor
        ``(a, b)``, the real and imaginary parts of the inverse transform of
        ``fa + i fb``.
    """
    z, dtype = _spectrum_pair(fa, fb, 2, "inverse_paired_fourier_transform_2d")
    x = ifft2(z)
    return x.real.to(dtype), x.imag.to(dtype)
