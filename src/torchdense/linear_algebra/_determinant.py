import math

import torch

from torchdense._exceptions import InvalidArgumentError
from torchdense.linear_algebra.decomposition import lu_decomposition
from torchdense.matrix import MatrixLike, as_float64


def determinant(a: MatrixLike) -> float:
    r"""
    Determinant of a square matrix.

    Computed from the LU decomposition as
    :math:`\det A = \sigma \prod_j U_{jj}` where :math:`\sigma` is the sign
    of the row permutation.

    Parameters
    ----------
    a : DenseMatrix, Tensor or array_like
        Square real matrix of shape (n, n).

    Returns
    -------
    float
        The determinant. Singular matrices give ``0.0`` or a value within
        rounding of it.

    Raises
    ------
    InvalidArgumentError
        If ``a`` is not a finite square real matrix.

    Examples
    --------
    >>> determinant([[4., 3.], [6., 3.]])
    -6.0
    """
    x = as_float64(a, name="determinant: a")
    if x.shape[0] != x.shape[1]:
        raise InvalidArgumentError(
            f"determinant: a must be square, got shape {tuple(x.shape)}"
        )

    lu = lu_decomposition(x)

    return lu.pivot_sign * math.prod(torch.diagonal(lu.U).tolist())
