"""Matrix constructors."""

from typing import Optional

import torch
from torch import Tensor

from torchdense._exceptions import InvalidArgumentError


def _check_size(name: str, rows: int, cols: int) -> None:
    if rows < 1 or cols < 1:
        raise InvalidArgumentError(
            f"{name}: rows and cols must be >= 1, got ({rows}, {cols})"
        )


def random_matrix(
    rows: int,
    cols: int,
    *,
    generator: Optional[torch.Generator] = None,
    dtype: torch.dtype = torch.float32,
) -> Tensor:
    """Matrix of independent samples from the uniform distribution on [0, 1).

    Parameters
    ----------
    rows, cols : int
        Shape of the matrix. Both must be at least 1.
    generator : torch.Generator, optional
        Source of randomness. Default: the global generator.
    dtype : torch.dtype, optional
        Floating dtype. Default: ``torch.float32``.
    """
    _check_size("random_matrix", rows, cols)
    return torch.rand(rows, cols, generator=generator, dtype=dtype)


def uniform_matrix(
    rows: int,
    cols: int,
    value: float,
    *,
    dtype: torch.dtype = torch.float32,
) -> Tensor:
    """Matrix with every element equal to ``value``."""
    _check_size("uniform_matrix", rows, cols)
    return torch.full((rows, cols), value, dtype=dtype)
