import torch
from torch import Tensor

from torchdense._exceptions import SingularMatrixError
from torchdense.linear_algebra.decomposition import CholeskyDecompositionResult
from torchdense.linear_algebra.solve._right_hand_side import (
    as_right_hand_side,
    solution_dtype,
)
from torchdense.linear_algebra.solve._triangular import _backward, _forward
from torchdense.matrix import MatrixLike


def cholesky_solve(
    cholesky: CholeskyDecompositionResult, b: MatrixLike
) -> Tensor:
    r"""
    Solve :math:`Ax = b` for symmetric positive definite :math:`A = LL^T`.

    Parameters
    ----------
    cholesky : CholeskyDecompositionResult
        Result of :func:`cholesky_decomposition`.
    b : DenseMatrix, Tensor or array_like
        Right-hand side of shape (n,) or (n, k).

    Returns
    -------
    Tensor
        Solution with the shape of ``b``.

    Raises
    ------
    SingularMatrixError
        If the decomposed matrix is not symmetric positive definite.
    DimensionMismatchError
        If ``b`` does not have n rows.
    """
    if not cholesky.is_spd:
        raise SingularMatrixError(
            "cholesky_solve: matrix is not symmetric positive definite"
        )

    L = cholesky.L.to(torch.float64)
    rhs, is_vector = as_right_hand_side(
        b, L.shape[0], name="cholesky_solve: b"
    )

    y = _forward(L, rhs, unit_diagonal=False)
    x = _backward(L.T, y).to(solution_dtype(cholesky.L, b))

    return x.squeeze(-1) if is_vector else x
