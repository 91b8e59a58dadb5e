"""Discrete Fourier transforms of vectors and matrices.

Transforms are unnormalized in the forward direction and divide by the
number of samples in the inverse direction. Spectra are returned as
``SplitComplex`` pairs of real tensors. Any length is supported.

Transforms
----------
fourier_transform_1d, inverse_fourier_transform_1d
    Discrete Fourier transform of a sequence, with optional zero padding.
inverse_fourier_transform_1d_complex
    Inverse transform keeping the imaginary part.
fourier_transform_2d, inverse_fourier_transform_2d
    Two-dimensional transform: rows first, then columns.
inverse_fourier_transform_2d_complex
    Inverse two-dimensional transform keeping the imaginary part.
paired_fourier_transform_1d, inverse_paired_fourier_transform_1d
    Two real sequences through one complex transform.
paired_fourier_transform_2d, inverse_paired_fourier_transform_2d
    Two real matrices through one complex transform.
centre_spectrum
    Circular shift placing the zero frequency in the middle.

Types
-----
SplitComplex
    Complex data as separate real and imaginary tensors.
split_complex
    Build a ``SplitComplex`` from a complex tensor.
"""

from ._centre_spectrum import centre_spectrum
from ._fourier_transform_1d import (
    fourier_transform_1d,
    inverse_fourier_transform_1d,
    inverse_fourier_transform_1d_complex,
)
from ._fourier_transform_2d import (
    fourier_transform_2d,
    inverse_fourier_transform_2d,
    inverse_fourier_transform_2d_complex,
)
from ._paired_fourier_transform import (
    inverse_paired_fourier_transform_1d,
    inverse_paired_fourier_transform_2d,
    paired_fourier_transform_1d,
    paired_fourier_transform_2d,
)
from ._split_complex import SplitComplex, split_complex

__all__ = [
    "SplitComplex",
    "centre_spectrum",
    "fourier_transform_1d",
    "fourier_transform_2d",
    "inverse_fourier_transform_1d",
    "inverse_fourier_transform_1d_complex",
    "inverse_fourier_transform_2d",
    "inverse_fourier_transform_2d_complex",
    "inverse_paired_fourier_transform_1d",
    "inverse_paired_fourier_transform_2d",
    "paired_fourier_transform_1d",
    "paired_fourier_transform_2d",
    "split_complex",
]
