from typing import Optional

from torchdense.linear_algebra.decomposition import (
    cholesky_decomposition,
    lu_decomposition,
)
from torchdense.matrix import MatrixLike


def is_nonsingular(a: MatrixLike, *, tol: Optional[float] = None) -> bool:
    """Whether ``a`` is square and its LU factor has no zero pivot.

    Non-square matrices are always reported singular.
    """
    return lu_decomposition(a, tol=tol).is_nonsingular


def is_symmetric_positive_definite(
    a: MatrixLike, *, tol: Optional[float] = None
) -> bool:
    """Whether ``a`` is symmetric within ``tol`` and its Cholesky factor
    exists.

    Raises
    ------
    InvalidArgumentError
        If ``a`` is not square.
    """
    return cholesky_decomposition(a, tol=tol).is_spd
