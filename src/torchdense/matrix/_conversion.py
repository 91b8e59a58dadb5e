"""Conversions between user inputs and the float64 working buffers."""

from __future__ import annotations

from typing import Any, Union

import torch
from torch import Tensor

from torchdense._exceptions import InvalidArgumentError
from torchdense.matrix._dense_matrix import DenseMatrix

MatrixLike = Union[DenseMatrix, Tensor, Any]


def _as_tensor(input: MatrixLike, name: str) -> Tensor:
    if isinstance(input, DenseMatrix):
        return input.to_tensor()
    if isinstance(input, Tensor):
        return input.detach()
    try:
        return torch.as_tensor(input)
    except (TypeError, ValueError) as error:
        raise InvalidArgumentError(
            f"{name} is not a rectangular matrix ({error})"
        ) from error


def as_float64(input: MatrixLike, *, name: str = "input") -> Tensor:
    r"""Independent float64 copy of a 2D real matrix.

    Every algorithm in torchdense runs on the buffer returned here, so the
    caller's data is never aliased or modified.

    Parameters
    ----------
    input : DenseMatrix, Tensor or array_like
        Matrix with at least one row and one column.
    name : str, optional
        Name used in error messages, e.g. ``"lu_decomposition: a"``.

    Returns
    -------
    Tensor
        Contiguous float64 tensor of shape ``(m, n)``.

    Raises
    ------
    InvalidArgumentError
        If the input is complex, not 2D, has an empty dimension or contains
        NaN or Inf.
    """
    tensor = _as_tensor(input, name)

    if tensor.is_complex():
        raise InvalidArgumentError(f"{name} must be real, got {tensor.dtype}")
    if tensor.dim() != 2:
        raise InvalidArgumentError(
            f"{name} must be 2D, got {tensor.dim()}D"
        )
    if tensor.shape[0] < 1 or tensor.shape[1] < 1:
        raise InvalidArgumentError(
            f"{name} must have at least one row and one column, got shape "
            f"{tuple(tensor.shape)}"
        )

    scratch = tensor.to(dtype=torch.float64, device="cpu", copy=True)

    if not torch.all(torch.isfinite(scratch)):
        raise InvalidArgumentError(f"{name} must not contain NaN or Inf")

    return scratch.contiguous()


def result_dtype(input: MatrixLike) -> torch.dtype:
    """Floating dtype results are handed back in.

    Floating inputs keep their dtype; anything else (integers, bools,
    nested Python sequences) comes back as ``torch.float32``.
    """
    if isinstance(input, DenseMatrix):
        return input.dtype
    if isinstance(input, Tensor) and input.dtype.is_floating_point:
        return input.dtype
    return torch.float32


def to_dense_matrix(tensor: Tensor) -> DenseMatrix:
    """Wrap a 2D real tensor in a new ``DenseMatrix`` of the same dtype."""
    if tensor.is_complex():
        raise InvalidArgumentError(
            "to_dense_matrix: tensor must be real, got a complex tensor"
        )
    dtype = tensor.dtype if tensor.dtype.is_floating_point else torch.float32
    return DenseMatrix(tensor, dtype=dtype)
