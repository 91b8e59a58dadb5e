"""Triangular solves by substitution."""

import torch
from torch import Tensor

from torchdense._exceptions import InvalidArgumentError, SingularMatrixError
from torchdense.linear_algebra.solve._right_hand_side import (
    as_right_hand_side,
    solution_dtype,
)
from torchdense.matrix import MatrixLike, as_float64


def _forward(L: Tensor, b: Tensor, unit_diagonal: bool) -> Tensor:
    n = L.shape[0]
    x = b.clone()
    for i in range(n):
        x[i] -= L[i, :i] @ x[:i]
        if not unit_diagonal:
            x[i] /= L[i, i]
    return x


def _backward(U: Tensor, b: Tensor) -> Tensor:
    n = U.shape[0]
    x = b.clone()
    for i in range(n - 1, -1, -1):
        x[i] -= U[i, i + 1 :] @ x[i + 1 :]
        x[i] /= U[i, i]
    return x


def _square_triangular(t: MatrixLike, name: str, unit_diagonal: bool) -> Tensor:
    x = as_float64(t, name=name)
    if x.shape[0] != x.shape[1]:
        raise InvalidArgumentError(
            f"{name} must be square, got shape {tuple(x.shape)}"
        )
    if not unit_diagonal and torch.any(torch.diagonal(x) == 0):
        raise SingularMatrixError(f"{name} has a zero on its diagonal")
    return x


def forward_substitution(
    L: MatrixLike, b: MatrixLike, *, unit_diagonal: bool = False
) -> Tensor:
    r"""
    Solve :math:`Lx = b` for lower triangular :math:`L`.

    Only the lower triangle of ``L`` is read.

    Parameters
    ----------
    L : DenseMatrix, Tensor or array_like
        Lower triangular matrix of shape (n, n).
    b : DenseMatrix, Tensor or array_like
        Right-hand side of shape (n,) or (n, k).
    unit_diagonal : bool, optional
        Treat the diagonal of ``L`` as ones without reading it.

    Returns
    -------
    Tensor
        Solution with the shape of ``b``.

    Raises
    ------
    SingularMatrixError
        If ``unit_diagonal`` is False and the diagonal has an exact zero.
    DimensionMismatchError
        If ``b`` does not have n rows.
    """
    x = _square_triangular(L, "forward_substitution: L", unit_diagonal)
    rhs, is_vector = as_right_hand_side(
        b, x.shape[0], name="forward_substitution: b"
    )

    solution = _forward(x, rhs, unit_diagonal).to(solution_dtype(L, b))

    return solution.squeeze(-1) if is_vector else solution


def back_substitution(U: MatrixLike, b: MatrixLike) -> Tensor:
    r"""
    Solve :math:`Ux = b` for upper triangular :math:`U`.

    Only the upper triangle of ``U`` is read.

    Parameters
    ----------
    U : DenseMatrix, Tensor or array_like
        Upper triangular matrix of shape (n, n).
    b : DenseMatrix, Tensor or array_like
        Right-hand side of shape (n,) or (n, k).

    Returns
    -------
    Tensor
        Solution with the shape of ``b``.

    Raises
    ------
    SingularMatrixError
        If the diagonal of ``U`` has an exact zero.
    DimensionMismatchError
        If ``b`` does not have n rows.
    """
    x = _square_triangular(U, "back_substitution: U", False)
    rhs, is_vector = as_right_hand_side(
        b, x.shape[0], name="back_substitution: b"
    )

    solution = _backward(x, rhs).to(solution_dtype(U, b))

    return solution.squeeze(-1) if is_vector else solution
