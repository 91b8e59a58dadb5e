"""Exact and tolerance-based matrix comparisons."""

from typing import Optional

import torch

from torchdense.matrix._conversion import MatrixLike, as_float64
from torchdense.matrix._tolerance import default_tolerance


def is_equal(a: MatrixLike, b: MatrixLike) -> bool:
    """``True`` when ``a`` and ``b`` have the same shape and elements."""
    x = as_float64(a, name="is_equal: a")
    y = as_float64(b, name="is_equal: b")
    return x.shape == y.shape and bool(torch.equal(x, y))


def is_symmetric(a: MatrixLike, *, tol: Optional[float] = None) -> bool:
    r"""Tolerance-based symmetry test.

    A square matrix is symmetric when
    :math:`|a_{ij} - a_{ji}| \le \text{tol}` for every :math:`i, j`.
    Non-square matrices are never symmetric.

    Parameters
    ----------
    a : DenseMatrix, Tensor or array_like
        Matrix to test.
    tol : float, optional
        Absolute tolerance. Default: ``default_tolerance(a)``.
    """
    x = as_float64(a, name="is_symmetric: a")
    if x.shape[0] != x.shape[1]:
        return False
    if tol is None:
        tol = default_tolerance(x)
    return bool(torch.all(torch.abs(x - x.T) <= tol))
