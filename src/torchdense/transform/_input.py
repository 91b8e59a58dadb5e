from typing import Tuple

import torch
from torch import Tensor

from torchdense._exceptions import InvalidArgumentError
from torchdense.matrix import DenseMatrix
from torchdense.transform._split_complex import SplitComplex


def as_complex128(
    x, *, dim: int, name: str, real: bool = False
) -> Tuple[Tensor, torch.dtype]:
    """Complex128 copy of a real, complex or split complex input.

    Returns the copy and the real dtype the result is handed back in. With
    ``real=True`` complex and split complex inputs are rejected.

    Raises
    ------
    InvalidArgumentError
        If the input does not have ``dim`` dimensions, has an empty
        dimension, contains NaN or Inf, or is complex when ``real`` is set.
    """
    if real and isinstance(x, SplitComplex):
        raise InvalidArgumentError(f"{name} must be real, got SplitComplex")

    if isinstance(x, SplitComplex):
        dtype = x.real_part.dtype
        z = torch.complex(
            x.real_part.to(torch.float64), x.imaginary_part.to(torch.float64)
        )
    else:
        if isinstance(x, DenseMatrix):
            x = x.to_tensor()
        elif not isinstance(x, Tensor):
            try:
                x = torch.as_tensor(x)
            except (TypeError, ValueError) as error:
                raise InvalidArgumentError(
                    f"{name} is not a rectangular array ({error})"
                ) from error

        if real and x.is_complex():
            raise InvalidArgumentError(f"{name} must be real, got {x.dtype}")

        if x.is_complex():
            dtype = x.real.dtype
        elif x.is_floating_point():
            dtype = x.dtype
        else:
            dtype = torch.float32
        z = x.detach().to(dtype=torch.complex128, copy=True)

    if z.dim() != dim:
        raise InvalidArgumentError(f"{name} must be {dim}D, got {z.dim()}D")
    if z.numel() == 0:
        raise InvalidArgumentError(
            f"{name} must not be empty, got shape {tuple(z.shape)}"
        )
    if not torch.all(torch.isfinite(z)):
        raise InvalidArgumentError(f"{name} must not contain NaN or Inf")

    return z.to("cpu"), dtype


def to_split_complex(z: Tensor, dtype: torch.dtype) -> SplitComplex:
    """Complex128 result as a ``SplitComplex`` in the real ``dtype``."""
    return SplitComplex(
        real_part=z.real.to(dtype=dtype, copy=True),
        imaginary_part=z.imag.to(dtype=dtype, copy=True),
        batch_size=list(z.shape),
    )
