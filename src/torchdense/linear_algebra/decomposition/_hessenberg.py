"""Hessenberg decomposition."""

from typing import Tuple

import torch
from torch import Tensor

from torchdense._exceptions import InvalidArgumentError
from torchdense.linear_algebra.decomposition._householder import (
    householder_vector,
    reflect_columns,
    reflect_rows,
)
from torchdense.linear_algebra.decomposition._result_types import (
    HessenbergResult,
)
from torchdense.matrix import MatrixLike, as_float64, result_dtype


def reduce_to_hessenberg(h: Tensor) -> Tuple[Tensor, Tensor]:
    """In-place Householder reduction of a float64 square matrix.

    Returns ``(h, q)`` with ``a = q @ h @ q.T``.
    """
    n = h.shape[0]
    q = torch.eye(n, dtype=torch.float64)

    for k in range(n - 2):
        v, alpha = householder_vector(h[k + 1 :, k])
        if v is None:
            continue
        reflect_rows(h, v, k + 1)
        reflect_columns(h, v, k + 1)
        reflect_columns(q, v, k + 1)
        h[k + 1, k] = alpha
        h[k + 2 :, k] = 0.0

    return h, q


def hessenberg(a: MatrixLike) -> HessenbergResult:
    r"""
    Hessenberg decomposition.

    Computes :math:`A = QHQ^T` where :math:`H` is upper Hessenberg (zeros
    below the first subdiagonal) and :math:`Q` is orthogonal. The
    decomposition preserves eigenvalues and is the first stage of the
    non-symmetric eigenvalue decomposition.

    Parameters
    ----------
    a : DenseMatrix, Tensor or array_like
        Square real matrix of shape (n, n).

    Returns
    -------
    HessenbergResult
        A named tuple containing:

        - **H** (*Tensor*) - Upper Hessenberg matrix of shape (n, n).
        - **Q** (*Tensor*) - Orthogonal matrix of shape (n, n).

    Raises
    ------
    InvalidArgumentError
        If ``a`` is not a finite square real matrix.

    Notes
    -----
    For an :math:`n \times n` matrix, :math:`n - 2` Householder reflections
    are applied from both sides, each annihilating one column below the
    subdiagonal.

    Examples
    --------
    >>> import torch
    >>> a = torch.tensor([[1., 2., 3.], [4., 5., 6.], [7., 8., 10.]], dtype=torch.float64)
    >>> result = hessenberg(a)
    >>> torch.allclose(result.Q @ result.H @ result.Q.T, a)
    True
    """
    h = as_float64(a, name="hessenberg: a")
    dtype = result_dtype(a)

    if h.shape[0] != h.shape[1]:
        raise InvalidArgumentError(
            f"hessenberg: a must be square, got shape {tuple(h.shape)}"
        )

    H, Q = reduce_to_hessenberg(h)

    return HessenbergResult(H=H.to(dtype), Q=Q.to(dtype))
