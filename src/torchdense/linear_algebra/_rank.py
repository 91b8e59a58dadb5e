from typing import Optional

import torch

from torchdense.linear_algebra._singular_values import singular_values
from torchdense.matrix import MatrixLike, as_float64
from torchdense.matrix._tolerance import EPS


def rank(a: MatrixLike, *, tol: Optional[float] = None) -> int:
    r"""
    Numerical rank.

    Counts the singular values strictly greater than ``tol``.

    Parameters
    ----------
    a : DenseMatrix, Tensor or array_like
        Real matrix of shape (m, n).
    tol : float, optional
        Default: :math:`\max(m, n) \cdot \sigma_{\max} \cdot \varepsilon`
        with :math:`\varepsilon = 2^{-52}`.

    Returns
    -------
    int
        Rank between 0 and ``min(m, n)``.

    Examples
    --------
    >>> rank([[1., 2.], [2., 4.]])
    1
    """
    x = as_float64(a, name="rank: a")
    s = singular_values(x)

    if tol is None:
        tol = max(x.shape) * s[0].item() * EPS

    return int(torch.sum(s > tol).item())
