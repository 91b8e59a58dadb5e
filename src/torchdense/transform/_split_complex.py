"""Complex data stored as a pair of real tensors."""

from typing import Optional

import torch
from tensordict.tensorclass import tensorclass
from torch import Tensor

from torchdense._exceptions import InvalidArgumentError


@tensorclass
class SplitComplex:
    """Complex vector or matrix held as separate real and imaginary parts.

    Spectra produced by the Fourier transforms in this package are returned
    in this form. The batch size is the shape of the data, so indexing a
    ``SplitComplex`` indexes both parts together.

    Attributes
    ----------
    real_part : Tensor
        Real parts, shape (n,) or (m, n).
    imaginary_part : Tensor
        Imaginary parts, same shape and dtype as ``real_part``.
    """

    real_part: Tensor
    imaginary_part: Tensor

    def to_complex(self) -> Tensor:
        """Complex tensor ``real_part + 1j * imaginary_part``."""
        return torch.complex(self.real_part, self.imaginary_part)

    def conjugated(self) -> "SplitComplex":
        """Complex conjugate."""
        return SplitComplex(
            real_part=self.real_part.clone(),
            imaginary_part=-self.imaginary_part,
            batch_size=self.batch_size,
        )

    def magnitude(self) -> Tensor:
        """Element-wise modulus."""
        return torch.hypot(self.real_part, self.imaginary_part)

    def phase(self) -> Tensor:
        """Element-wise argument in ``(-pi, pi]``."""
        return torch.atan2(self.imaginary_part, self.real_part)


def split_complex(
    z: Tensor, *, dtype: Optional[torch.dtype] = None
) -> SplitComplex:
    """Split a complex (or real) tensor into a :class:`SplitComplex`.

    Parameters
    ----------
    z : Tensor
        Complex or real tensor. A real tensor gets a zero imaginary part.
    dtype : torch.dtype, optional
        Real dtype of the parts. Default: the real counterpart of ``z``.
    """
    if not isinstance(z, Tensor):
        raise InvalidArgumentError(
            f"split_complex: z must be a Tensor, got {type(z).__name__}"
        )

    if z.is_complex():
        real_part, imaginary_part = z.real, z.imag
    else:
        real_part, imaginary_part = z, torch.zeros_like(z)

    if dtype is None:
        dtype = real_part.dtype if real_part.is_floating_point() else torch.float32

    return SplitComplex(
        real_part=real_part.to(dtype=dtype, copy=True),
        imaginary_part=imaginary_part.to(dtype=dtype, copy=True),
        batch_size=list(z.shape),
    )
