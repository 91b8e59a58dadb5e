"""LU decomposition with partial pivoting."""

from typing import Optional

import torch

from torchdense.linear_algebra.decomposition._result_types import (
    LUDecompositionResult,
)
from torchdense.matrix import (
    MatrixLike,
    as_float64,
    default_tolerance,
    result_dtype,
)


def lu_decomposition(
    a: MatrixLike, *, tol: Optional[float] = None
) -> LUDecompositionResult:
    r"""
    LU decomposition with partial (row) pivoting.

    Computes the factorization

    .. math::

        A[\text{pivots}, :] = LU

    where :math:`L` is unit lower triangular and :math:`U` is upper
    triangular, by Gaussian elimination: at column :math:`k` the row with the
    largest :math:`|a_{ik}|` among rows :math:`i \ge k` is swapped into
    place before the entries below the pivot are eliminated.

    The factorization always exists, so this function never fails for
    singular input; consult ``is_nonsingular`` before solving with it.

    Parameters
    ----------
    a : DenseMatrix, Tensor or array_like
        Real matrix of shape (m, n).
    tol : float, optional
        A diagonal entry of :math:`U` with magnitude ``<= tol`` counts as
        zero. Default: ``max(m, n) * eps * max|a_ij|`` with ``eps = 2**-52``.

    Returns
    -------
    LUDecompositionResult
        A named tuple containing:

        - **L** (*Tensor*) - Unit lower triangular matrix of shape (m, k)
          where k = min(m, n).
        - **U** (*Tensor*) - Upper triangular matrix of shape (k, n).
        - **pivots** (*Tensor*) - int64 permutation of ``range(m)``.
        - **pivot_sign** (*int*) - Sign of the permutation, +1 or -1.
        - **is_nonsingular** (*bool*) - True when ``a`` is square and no
          diagonal entry of ``U`` counts as zero.

    Raises
    ------
    InvalidArgumentError
        If ``a`` is not a finite 2D real matrix.

    Examples
    --------
    >>> import torch
    >>> a = torch.tensor([[1., 2.], [3., 4.]], dtype=torch.float64)
    >>> result = lu_decomposition(a)
    >>> result.pivots
    tensor([1, 0])
    >>> torch.allclose(result.L @ result.U, a[result.pivots])
    True
    """
    lu = as_float64(a, name="lu_decomposition: a")
    dtype = result_dtype(a)
    m, n = lu.shape
    k = min(m, n)

    if tol is None:
        tol = default_tolerance(lu)

    pivots = torch.arange(m)
    pivot_sign = 1

    for j in range(k):
        p = j + torch.argmax(torch.abs(lu[j:, j])).item()
        if p != j:
            lu[[p, j]] = lu[[j, p]]
            pivots[[p, j]] = pivots[[j, p]]
            pivot_sign = -pivot_sign

        pivot = lu[j, j].item()
        if pivot != 0.0:
            lu[j + 1 :, j] /= pivot
            lu[j + 1 :, j + 1 :] -= torch.outer(lu[j + 1 :, j], lu[j, j + 1 :])

    L = torch.tril(lu[:, :k], diagonal=-1)
    L[range(k), range(k)] = 1.0
    U = torch.triu(lu[:k, :])

    diagonal = torch.abs(torch.diagonal(U))
    is_nonsingular = m == n and bool(torch.all(diagonal > tol))

    return LUDecompositionResult(
        L=L.to(dtype),
        U=U.to(dtype),
        pivots=pivots,
        pivot_sign=pivot_sign,
        is_nonsingular=is_nonsingular,
    )
