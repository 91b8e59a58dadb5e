import torch
from torch import Tensor

from torchdense._exceptions import SingularMatrixError
from torchdense.linear_algebra.decomposition import LUDecompositionResult
from torchdense.linear_algebra.solve._right_hand_side import (
    as_right_hand_side,
    solution_dtype,
)
from torchdense.linear_algebra.solve._triangular import _backward, _forward
from torchdense.matrix import MatrixLike


def lu_solve(lu: LUDecompositionResult, b: MatrixLike) -> Tensor:
    r"""
    Solve :math:`Ax = b` from the LU decomposition of a square :math:`A`.

    Parameters
    ----------
    lu : LUDecompositionResult
        Result of :func:`lu_decomposition`.
    b : DenseMatrix, Tensor or array_like
        Right-hand side of shape (n,) or (n, k).

    Returns
    -------
    Tensor
        Solution with the shape of ``b``.

    Raises
    ------
    SingularMatrixError
        If the decomposed matrix is singular or not square.
    DimensionMismatchError
        If ``b`` does not have n rows.

    Examples
    --------
    >>> import torch
    >>> from torchdense.linear_algebra.decomposition import lu_decomposition
    >>> a = torch.tensor([[2., 1.], [1., 3.]], dtype=torch.float64)
    >>> lu_solve(lu_decomposition(a), torch.tensor([3., 5.], dtype=torch.float64))
    tensor([0.8000, 1.4000], dtype=torch.float64)
    """
    if not lu.is_nonsingular:
        raise SingularMatrixError("lu_solve: matrix is singular")

    rhs, is_vector = as_right_hand_side(
        b, lu.L.shape[0], name="lu_solve: b"
    )

    L = lu.L.to(torch.float64)
    U = lu.U.to(torch.float64)

    y = _forward(L, rhs[lu.pivots], unit_diagonal=True)
    x = _backward(U, y).to(solution_dtype(lu.L, b))

    return x.squeeze(-1) if is_vector else x
