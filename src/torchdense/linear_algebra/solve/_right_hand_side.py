from typing import Tuple

import torch
from torch import Tensor

from torchdense._exceptions import DimensionMismatchError
from torchdense.matrix import MatrixLike, as_float64, result_dtype
from torchdense.matrix._conversion import _as_tensor


def as_right_hand_side(
    b: MatrixLike, rows: int, *, name: str
) -> Tuple[Tensor, bool]:
    """Float64 copy of ``b`` as an ``(rows, k)`` matrix.

    A 1D ``b`` is read as a single column; the returned flag tells the
    caller to squeeze the solution back to 1D.
    """
    tensor = _as_tensor(b, name)
    is_vector = tensor.dim() == 1
    if is_vector:
        tensor = tensor.unsqueeze(-1)

    rhs = as_float64(tensor, name=name)

    if rhs.shape[0] != rows:
        raise DimensionMismatchError(
            f"{name} must have {rows} rows, got {rhs.shape[0]}"
        )

    return rhs, is_vector


def solution_dtype(a: MatrixLike, b: MatrixLike) -> torch.dtype:
    """Floating dtype of the solution of ``a x = b``."""
    return torch.promote_types(result_dtype(a), result_dtype(b))
