import torch
from torch import Tensor

from torchdense._exceptions import SingularMatrixError
from torchdense.linear_algebra.decomposition import QRDecompositionResult
from torchdense.linear_algebra.solve._right_hand_side import (
    as_right_hand_side,
    solution_dtype,
)
from torchdense.linear_algebra.solve._triangular import _backward
from torchdense.matrix import MatrixLike


def qr_solve(qr: QRDecompositionResult, b: MatrixLike) -> Tensor:
    r"""
    Least squares solution of :math:`Ax = b` from the QR decomposition.

    Minimizes :math:`\|Ax - b\|_2` for a full rank :math:`A` with
    :math:`m \ge n` by applying the Householder reflectors to :math:`b` and
    back-substituting through :math:`R`.

    Parameters
    ----------
    qr : QRDecompositionResult
        Result of :func:`qr_decomposition`.
    b : DenseMatrix, Tensor or array_like
        Right-hand side of shape (m,) or (m, k).

    Returns
    -------
    Tensor
        Solution of shape (n,) or (n, k).

    Raises
    ------
    SingularMatrixError
        If the decomposed matrix is rank deficient.
    DimensionMismatchError
        If ``b`` does not have m rows.
    """
    if not qr.is_full_rank:
        raise SingularMatrixError("qr_solve: matrix is rank deficient")

    m, n = qr.householder.shape
    y, is_vector = as_right_hand_side(b, m, name="qr_solve: b")

    householder = qr.householder.to(torch.float64)
    for k in range(n):
        v = householder[k:, k]
        y[k:] -= 2.0 * torch.outer(v, v @ y[k:])

    x = _backward(qr.R.to(torch.float64), y[:n]).to(
        solution_dtype(qr.R, b)
    )

    return x.squeeze(-1) if is_vector else x
