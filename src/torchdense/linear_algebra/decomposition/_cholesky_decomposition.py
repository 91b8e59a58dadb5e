"""Cholesky decomposition."""

import math
from typing import Optional

import torch

from torchdense._exceptions import InvalidArgumentError
from torchdense.linear_algebra.decomposition._result_types import (
    CholeskyDecompositionResult,
)
from torchdense.matrix import (
    MatrixLike,
    as_float64,
    default_tolerance,
    result_dtype,
)


def cholesky_decomposition(
    a: MatrixLike, *, tol: Optional[float] = None
) -> CholeskyDecompositionResult:
    r"""
    Cholesky decomposition.

    Computes the lower triangular :math:`L` with :math:`A = LL^T` row by
    row, reading only the lower triangle of :math:`A`:

    .. math::

        L_{jk} = \frac{A_{jk} - \sum_{i<k} L_{ji} L_{ki}}{L_{kk}}, \qquad
        L_{jj} = \sqrt{A_{jj} - \sum_{k<j} L_{jk}^2}.

    The input is reported as symmetric positive definite only if it is
    symmetric within ``tol`` and every pivot under the square root is
    strictly positive. Factorization stops at the first non-positive pivot,
    leaving that row and all later rows of :math:`L` zero.

    Parameters
    ----------
    a : DenseMatrix, Tensor or array_like
        Square real matrix of shape (n, n).
    tol : float, optional
        Symmetry tolerance. Default: ``n * eps * max|a_ij|``.

    Returns
    -------
    CholeskyDecompositionResult
        A named tuple containing:

        - **L** (*Tensor*) - Lower triangular factor of shape (n, n).
        - **is_spd** (*bool*) - True when ``a`` is symmetric positive
          definite.

    Raises
    ------
    InvalidArgumentError
        If ``a`` is not a finite square real matrix.

    Examples
    --------
    >>> import torch
    >>> result = cholesky_decomposition(
    ...     torch.tensor([[4., 2.], [2., 3.]], dtype=torch.float64)
    ... )
    >>> result.L
    tensor([[2.0000, 0.0000],
            [1.0000, 1.4142]], dtype=torch.float64)
    >>> result.is_spd
    True
    """
    x = as_float64(a, name="cholesky_decomposition: a")
    dtype = result_dtype(a)
    m, n = x.shape

    if m != n:
        raise InvalidArgumentError(
            f"cholesky_decomposition: a must be square, got shape ({m}, {n})"
        )

    if tol is None:
        tol = default_tolerance(x)

    is_spd = bool(torch.all(torch.abs(x - x.T) <= tol))

    L = torch.zeros(n, n, dtype=torch.float64)

    for j in range(n):
        if j > 0:
            # Solve L[:j, :j] L[j, :j]^T = A[j, :j] by forward substitution.
            for k in range(j):
                s = x[j, k].item() - torch.dot(L[k, :k], L[j, :k]).item()
                L[j, k] = s / L[k, k].item()
        pivot = x[j, j].item() - torch.dot(L[j, :j], L[j, :j]).item()
        if pivot <= 0.0:
            L[j, :] = 0.0
            is_spd = False
            break
        L[j, j] = math.sqrt(pivot)

    return CholeskyDecompositionResult(L=L.to(dtype), is_spd=is_spd)
