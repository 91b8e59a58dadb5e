"""Row and column rearrangements."""

from torch import Tensor

from torchdense._exceptions import InvalidArgumentError
from torchdense.matrix._conversion import MatrixLike, as_float64, result_dtype


def transpose(a: MatrixLike) -> Tensor:
    """New ``(n, m)`` tensor holding the transpose of ``a``."""
    return as_float64(a, name="transpose: a").T.contiguous().to(
        result_dtype(a)
    )


def flip_rows(a: MatrixLike) -> Tensor:
    """Reverse the order of the rows (upside-down flip)."""
    return as_float64(a, name="flip_rows: a").flip(0).to(result_dtype(a))


def flip_columns(a: MatrixLike) -> Tensor:
    """Reverse the order of the columns (left-right flip)."""
    return as_float64(a, name="flip_columns: a").flip(1).to(result_dtype(a))


def swap_rows(a: MatrixLike, i: int, j: int) -> Tensor:
    """Copy of ``a`` with rows ``i`` and ``j`` exchanged.

    Raises
    ------
    InvalidArgumentError
        If ``i`` or ``j`` is outside ``[0, rows)``.
    """
    x = as_float64(a, name="swap_rows: a")
    rows = x.shape[0]
    for index in (i, j):
        if not 0 <= index < rows:
            raise InvalidArgumentError(
                f"swap_rows: row {index} out of range [0, {rows})"
            )
    x[[i, j]] = x[[j, i]]
    return x.to(result_dtype(a))


def swap_columns(a: MatrixLike, i: int, j: int) -> Tensor:
    """Copy of ``a`` with columns ``i`` and ``j`` exchanged.

    Raises
    ------
    InvalidArgumentError
        If ``i`` or ``j`` is outside ``[0, cols)``.
    """
    x = as_float64(a, name="swap_columns: a")
    cols = x.shape[1]
    for index in (i, j):
        if not 0 <= index < cols:
            raise InvalidArgumentError(
                f"swap_columns: column {index} out of range [0, {cols})"
            )
    x[:, [i, j]] = x[:, [j, i]]
    return x.to(result_dtype(a))
