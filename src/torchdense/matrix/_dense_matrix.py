"""Dense real matrix container."""

from __future__ import annotations

from typing import Any

import torch
from torch import Tensor

from torchdense._exceptions import InvalidArgumentError, MatrixIndexError


class DenseMatrix:
    """Mutable ``rows x cols`` grid of real numbers.

    The matrix owns its buffer: construction copies the input and every
    accessor that hands out a tensor hands out a copy.

    Parameters
    ----------
    data : array_like or Tensor
        Nested sequences, an array or a tensor with exactly two dimensions
        and at least one row and one column.
    dtype : torch.dtype, optional
        Floating dtype of the buffer. Default: ``torch.float32``.

    Raises
    ------
    InvalidArgumentError
        If ``data`` is ragged, complex, not 2D or has an empty dimension.

    Examples
    --------
    >>> m = DenseMatrix([[1.0, 2.0], [3.0, 4.0]])
    >>> m.get(1, 0)
    3.0
    >>> m.transpose().get(0, 1)
    3.0
    """

    __slots__ = ("_data",)

    def __init__(self, data: Any, *, dtype: torch.dtype = torch.float32):
        if not dtype.is_floating_point:
            raise InvalidArgumentError(
                f"DenseMatrix: dtype must be a floating dtype, got {dtype}"
            )

        if isinstance(data, DenseMatrix):
            data = data._data

        try:
            tensor = torch.as_tensor(data)
        except (TypeError, ValueError) as error:
            raise InvalidArgumentError(
                f"DenseMatrix: data is not a rectangular matrix ({error})"
            ) from error

        if tensor.is_complex():
            raise InvalidArgumentError(
                "DenseMatrix: data must be real, got a complex tensor"
            )
        if tensor.dim() != 2:
            raise InvalidArgumentError(
                f"DenseMatrix: data must be 2D, got {tensor.dim()}D"
            )
        if tensor.shape[0] < 1 or tensor.shape[1] < 1:
            raise InvalidArgumentError(
                f"DenseMatrix: data must have at least one row and one "
                f"column, got shape {tuple(tensor.shape)}"
            )

        self._data = tensor.detach().to(dtype=dtype, copy=True).contiguous()

    @classmethod
    def zeros(
        cls, rows: int, cols: int, *, dtype: torch.dtype = torch.float32
    ) -> DenseMatrix:
        """Matrix of zeros."""
        if rows < 1 or cols < 1:
            raise InvalidArgumentError(
                f"DenseMatrix.zeros: rows and cols must be >= 1, got "
                f"({rows}, {cols})"
            )
        return cls(torch.zeros(rows, cols, dtype=dtype), dtype=dtype)

    @classmethod
    def identity(
        cls, n: int, *, dtype: torch.dtype = torch.float32
    ) -> DenseMatrix:
        """``n x n`` identity matrix."""
        if n < 1:
            raise InvalidArgumentError(
                f"DenseMatrix.identity: n must be >= 1, got {n}"
            )
        return cls(torch.eye(n, dtype=dtype), dtype=dtype)

    @property
    def rows(self) -> int:
        return self._data.shape[0]

    @property
    def cols(self) -> int:
        return self._data.shape[1]

    @property
    def shape(self) -> tuple[int, int]:
        return (self.rows, self.cols)

    @property
    def dtype(self) -> torch.dtype:
        return self._data.dtype

    def _check_row(self, row: int) -> None:
        if not 0 <= row < self.rows:
            raise MatrixIndexError(
                f"row index {row} out of range [0, {self.rows})"
            )

    def _check_col(self, col: int) -> None:
        if not 0 <= col < self.cols:
            raise MatrixIndexError(
                f"column index {col} out of range [0, {self.cols})"
            )

    def get(self, row: int, col: int) -> float:
        """Element at ``(row, col)``."""
        self._check_row(row)
        self._check_col(col)
        return self._data[row, col].item()

    def set(self, row: int, col: int, value: float) -> None:
        """Overwrite the element at ``(row, col)``."""
        self._check_row(row)
        self._check_col(col)
        self._data[row, col] = value

    def row(self, index: int) -> Tensor:
        """Copy of row ``index``."""
        self._check_row(index)
        return self._data[index].clone()

    def column(self, index: int) -> Tensor:
        """Copy of column ``index``."""
        self._check_col(index)
        return self._data[:, index].clone()

    def transpose(self) -> DenseMatrix:
        return DenseMatrix(self._data.T, dtype=self.dtype)

    def clone(self) -> DenseMatrix:
        return DenseMatrix(self._data, dtype=self.dtype)

    def to_tensor(self, dtype: torch.dtype | None = None) -> Tensor:
        """Independent tensor copy of the buffer."""
        return self._data.to(dtype=dtype or self.dtype, copy=True)

    def is_square(self) -> bool:
        return self.rows == self.cols

    def has_same_dimensions(self, other: DenseMatrix) -> bool:
        return self.shape == other.shape

    def __repr__(self) -> str:
        return (
            f"DenseMatrix(rows={self.rows}, cols={self.cols}, "
            f"dtype={self.dtype}, data={self._data.tolist()})"
        )
