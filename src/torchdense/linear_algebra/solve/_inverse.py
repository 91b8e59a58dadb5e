from typing import Optional

import torch
from torch import Tensor

from torchdense.linear_algebra.solve._solve import _solve
from torchdense.matrix import MatrixLike, as_float64, result_dtype


def inverse(a: MatrixLike, *, tol: Optional[float] = None) -> Tensor:
    r"""
    Matrix inverse, computed as the solution of :math:`AX = I`.

    A non-singular square matrix gets its exact inverse through the LU
    decomposition. Tall matrices get their least squares left inverse and
    wide ones their pseudo-inverse. A singular matrix does not raise: a
    :class:`SingularMatrixWarning` is issued and the pseudo-inverse is
    returned.

    Parameters
    ----------
    a : DenseMatrix, Tensor or array_like
        Real matrix of shape (m, n).
    tol : float, optional
        Pivot tolerance, as in :func:`solve`.

    Returns
    -------
    Tensor
        Matrix of shape (n, m).

    Warns
    -----
    SingularMatrixWarning
        When the pseudo-inverse fallback is taken.

    Examples
    --------
    >>> import torch
    >>> inverse(torch.tensor([[2., 0.], [0., 4.]], dtype=torch.float64))
    tensor([[0.5000, 0.0000],
            [0.0000, 0.2500]], dtype=torch.float64)
    """
    x = as_float64(a, name="inverse: a")
    identity = torch.eye(x.shape[0], dtype=torch.float64)

    return _solve(x, identity, tol, "inverse").to(result_dtype(a))
