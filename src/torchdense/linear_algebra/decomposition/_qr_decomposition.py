"""QR decomposition by Householder reflections."""

from typing import Optional

import torch

from torchdense._exceptions import InvalidArgumentError
from torchdense.linear_algebra.decomposition._householder import (
    householder_vector,
    reflect_rows,
)
from torchdense.linear_algebra.decomposition._result_types import (
    QRDecompositionResult,
)
from torchdense.matrix import (
    MatrixLike,
    as_float64,
    default_tolerance,
    result_dtype,
)


def qr_decomposition(
    a: MatrixLike, *, tol: Optional[float] = None
) -> QRDecompositionResult:
    r"""
    QR decomposition.

    Computes :math:`A = QR` where :math:`Q` has orthonormal columns and
    :math:`R` is upper triangular. Column :math:`k` is annihilated below the
    diagonal by the reflector :math:`I - 2 v_k v_k^T`; the reflector vectors
    are returned instead of :math:`Q`, which is formed on request through the
    ``Q`` property of the result.

    Parameters
    ----------
    a : DenseMatrix, Tensor or array_like
        Real matrix of shape (m, n) with m >= n.
    tol : float, optional
        A diagonal entry of :math:`R` with magnitude ``<= tol`` counts as
        zero. Default: ``max(m, n) * eps * max|a_ij|``.

    Returns
    -------
    QRDecompositionResult
        A named tuple containing:

        - **householder** (*Tensor*) - Lower trapezoidal (m, n) matrix whose
          column k holds the unit reflector vector v_k in rows k..m-1.
          A zero column means no reflection was needed.
        - **R** (*Tensor*) - Upper triangular matrix of shape (n, n).
        - **is_full_rank** (*bool*) - True when no diagonal entry of ``R``
          counts as zero.

    Raises
    ------
    InvalidArgumentError
        If ``a`` is not a finite 2D real matrix or has fewer rows than
        columns.

    Examples
    --------
    >>> import torch
    >>> a = torch.tensor([[12., -51.], [6., 167.], [-4., 24.]], dtype=torch.float64)
    >>> result = qr_decomposition(a)
    >>> torch.allclose(result.Q @ result.R, a)
    True
    """
    r = as_float64(a, name="qr_decomposition: a")
    dtype = result_dtype(a)
    m, n = r.shape

    if m < n:
        raise InvalidArgumentError(
            f"qr_decomposition: a must have rows >= cols, got shape ({m}, {n})"
        )

    if tol is None:
        tol = default_tolerance(r)

    householder = torch.zeros(m, n, dtype=torch.float64)

    for k in range(n):
        v, alpha = householder_vector(r[k:, k])
        if v is None:
            continue
        householder[k:, k] = v
        reflect_rows(r[:, k + 1 :], v, k)
        r[k, k] = alpha
        r[k + 1 :, k] = 0.0

    R = torch.triu(r[:n, :])
    is_full_rank = bool(torch.all(torch.abs(torch.diagonal(R)) > tol))

    return QRDecompositionResult(
        householder=householder.to(dtype),
        R=R.to(dtype),
        is_full_rank=is_full_rank,
    )
