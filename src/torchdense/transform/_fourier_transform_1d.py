"""One-dimensional discrete Fourier transform."""

from typing import Optional

import torch
from torch import Tensor

from torchdense._exceptions import InvalidArgumentError
from torchdense.transform._fft_engine import fft, ifft
from torchdense.transform._input import as_complex128, to_split_complex
from torchdense.transform._split_complex import SplitComplex


def fourier_transform_1d(x, *, n: Optional[int] = None) -> SplitComplex:
    r"""
    Discrete Fourier transform of a sequence.

    .. math::

        X_k = \sum_{j=0}^{n-1} x_j e^{-2\pi i jk/n}

    The transform is unnormalized. Every length is supported: powers of two
    take the radix-2 path, other lengths the mixed-radix or Bluestein path.

    Parameters
    ----------
    x : Tensor, SplitComplex or array_like
        Real or complex sequence of shape (length,).
    n : int, optional
        Transform length. The sequence is zero-padded to ``n``, which must
        not be smaller than its length. Default: the sequence length.

    Returns
    -------
    SplitComplex
        Spectrum of shape (n,), in the real dtype of ``x`` (float32 for
        integer input).

    Raises
    ------
    InvalidArgumentError
        If ``x`` is not a non-empty 1D sequence or ``n`` is too small.

    Examples
    --------
    >>> import torch
    >>> spectrum = fourier_transform_1d(torch.tensor([1., 1., 1., 1.]))
    >>> torch.allclose(spectrum.to_complex(), torch.fft.fft(torch.ones(4)))
    True
    """
    z, dtype = as_complex128(x, dim=1, name="fourier_transform_1d: x")

    if n is not None:
        if n < z.shape[0]:
            raise InvalidArgumentError(
                f"fourier_transform_1d: n must be >= the sequence length "
                f"{z.shape[0]}, got {n}"
            )
        z = torch.nn.functional.pad(z, (0, n - z.shape[0]))

    return to_split_complex(fft(z), dtype)


def inverse_fourier_transform_1d(spectrum) -> Tensor:
    r"""
    Real part of the inverse discrete Fourier transform.

    .. math::

        x_j = \frac{1}{n} \sum_{k=0}^{n-1} X_k e^{2\pi i jk/n}

    computed as the conjugate of the forward transform of the conjugate,
    divided by n. Use :func:`inverse_fourier_transform_1d_complex` to keep
    the imaginary part.

    Parameters
    ----------
    spectrum : SplitComplex, Tensor or array_like
        Spectrum of shape (n,).

    Returns
    -------
    Tensor
        Real sequence of shape (n,).
    """
    z, dtype = as_complex128(
        spectrum, dim=1, name="inverse_fourier_transform_1d: spectrum"
    )
    return ifft(z).real.to(dtype)


def inverse_fourier_transform_1d_complex(spectrum) -> SplitComplex:
    """Inverse discrete Fourier transform keeping both parts.

    Parameters
    ----------
    spectrum : SplitComplex, Tensor or array_like
        Spectrum of shape (n,).

    Returns
    -------
    SplitComplex
        Complex sequence of shape (n,).
    """
    z, dtype = as_complex128(
        spectrum, dim=1, name="inverse_fourier_transform_1d_complex: spectrum"
    )
    return to_split_complex(ifft(z), dtype)
