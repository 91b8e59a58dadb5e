from typing import Union

import torch
from torch import Tensor

from torchdense._exceptions import InvalidArgumentError
from torchdense.transform._split_complex import SplitComplex


def _centre(x: Tensor) -> Tensor:
    if x.dim() not in (1, 2):
        raise InvalidArgumentError(
            f"centre_spectrum: spectrum must be 1D or 2D, got {x.dim()}D"
        )
    dims = list(range(x.dim()))
    shifts = [size // 2 for size in x.shape]
    return torch.roll(x, shifts=shifts, dims=dims)


def centre_spectrum(
    spectrum: Union[SplitComplex, Tensor],
) -> Union[SplitComplex, Tensor]:
    """Circularly shift a spectrum so the zero frequency is in the middle.

    Index ``0`` along each axis moves to ``size // 2``, placing the DC term
    of an ``(m, n)`` spectrum at ``(m // 2, n // 2)``. Real, complex and
    split complex input are supported; the result has the same type.

    Parameters
    ----------
    spectrum : SplitComplex or Tensor
        Spectrum of shape (n,) or (m, n).

    Returns
    -------
    SplitComplex or Tensor
        Shifted copy.
    """
    if isinstance(spectrum, SplitComplex):
        return SplitComplex(
            real_part=_centre(spectrum.real_part),
            imaginary_part=_centre(spectrum.imaginary_part),
            batch_size=spectrum.batch_size,
        )
    if not isinstance(spectrum, Tensor):
        raise InvalidArgumentError(
            f"centre_spectrum: spectrum must be a SplitComplex or Tensor, got "
            f"{type(spectrum).__name__}"
        )
    return _centre(spectrum)
