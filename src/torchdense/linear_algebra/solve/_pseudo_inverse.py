from typing import Optional

import torch
from torch import Tensor

from torchdense.linear_algebra.decomposition import (
    singular_value_decomposition,
)
from torchdense.matrix import MatrixLike, as_float64, result_dtype
from torchdense.matrix._tolerance import EPS


def _pseudo_inverse(x: Tensor, tol: Optional[float]) -> Tensor:
    m, n = x.shape
    if m < n:
        return _pseudo_inverse(x.T.contiguous(), tol).T

    svd = singular_value_decomposition(x)
    s = svd.singular_values

    if tol is None:
        tol = max(m, n) * s[0].item() * EPS

    keep = s > tol
    s_inverse = torch.zeros_like(s)
    s_inverse[keep] = 1.0 / s[keep]

    return (svd.V * s_inverse) @ svd.U.T


def pseudo_inverse(a: MatrixLike, *, tol: Optional[float] = None) -> Tensor:
    r"""
    Moore-Penrose pseudo-inverse.

    Computed from the singular value decomposition
    :math:`A = USV^T` as :math:`A^+ = V S^+ U^T`, where :math:`S^+` inverts
    the singular values above ``tol`` and zeroes the rest. Wide matrices go
    through their transpose, :math:`A^+ = ((A^T)^+)^T`.

    Parameters
    ----------
    a : DenseMatrix, Tensor or array_like
        Real matrix of shape (m, n).
    tol : float, optional
        Singular values ``<= tol`` are treated as zero.
        Default: ``max(m, n) * s_max * eps``.

    Returns
    -------
    Tensor
        Pseudo-inverse of shape (n, m).

    Examples
    --------
    >>> import torch
    >>> pseudo_inverse(torch.tensor([[1., 0.], [0., 0.]], dtype=torch.float64))
    tensor([[1., 0.],
            [0., 0.]], dtype=torch.float64)
    """
    x = as_float64(a, name="pseudo_inverse: a")

    return _pseudo_inverse(x, tol).to(result_dtype(a))
