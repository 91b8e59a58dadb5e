"""Two-dimensional discrete Fourier transform."""

from torch import Tensor

from torchdense.transform._fft_engine import fft2, ifft2
from torchdense.transform._input import as_complex128, to_split_complex
from torchdense.transform._split_complex import SplitComplex


def fourier_transform_2d(x) -> SplitComplex:
    r"""
    Two-dimensional discrete Fourier transform.

    .. math::

        F(u, v) = \sum_{r=0}^{m-1} \sum_{c=0}^{n-1} x_{rc}
            e^{-2\pi i (ur/m + vc/n)}

    Every row is transformed first, then every column of the result. The
    transform is unnormalized and supports any shape.

    Parameters
    ----------
    x : DenseMatrix, Tensor, SplitComplex or array_like
        Real or complex matrix of shape (m, n).

    Returns
    -------
    SplitComplex
        Spectrum of shape (m, n) in the real dtype of ``x``.

    Raises
    ------
    InvalidArgumentError
        If ``x`` is not a non-empty finite 2D matrix.

    Examples
    --------
    >>> import torch
    >>> spectrum = fourier_transform_2d(torch.full((2, 3), 2.0))
    >>> spectrum.real_part[0, 0].item()
    12.0
    >>> bool(spectrum.magnitude()[1:].abs().max() < 1e-5)
    True
    """
    z, dtype = as_complex128(x, dim=2, name="fourier_transform_2d: x")

    return to_split_complex(fft2(z), dtype)


def inverse_fourier_transform_2d(spectrum) -> Tensor:
    """Real part of the inverse two-dimensional Fourier transform.

    The spectrum is conjugated, transformed forward, conjugated again and
    divided by ``m * n``.

    Parameters
    ----------
    spectrum : SplitComplex, Tensor or array_like
        Spectrum of shape (m, n).

    Returns
    -------
    Tensor
        Real matrix of shape (m, n).
    """
    z, dtype = as_complex128(
        spectrum, dim=2, name="inverse_fourier_transform_2d: spectrum"
    )
    return ifft2(z).real.to(dtype)


def inverse_fourier_transform_2d_complex(spectrum) -> SplitComplex:
    """Inverse two-dimensional Fourier transform keeping both parts."""
    z, dtype = as_complex128(
        spectrum, dim=2, name="inverse_fourier_transform_2d_complex: spectrum"
    )
    return to_split_complex(ifft2(z), dtype)
