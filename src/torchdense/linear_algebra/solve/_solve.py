"""Linear solve with a pseudo-inverse fallback."""

import warnings
from typing import Optional

from torch import Tensor

from torchdense._exceptions import InvalidArgumentError, SingularMatrixWarning
from torchdense.linear_algebra.decomposition import (
    lu_decomposition,
    qr_decomposition,
)
from torchdense.linear_algebra.solve._lu_solve import lu_solve
from torchdense.linear_algebra.solve._pseudo_inverse import _pseudo_inverse
from torchdense.linear_algebra.solve._qr_solve import qr_solve
from torchdense.linear_algebra.solve._right_hand_side import (
    as_right_hand_side,
    solution_dtype,
)
from torchdense.matrix import MatrixLike, as_float64
from torchdense.matrix._conversion import _as_tensor


def _solve(x: Tensor, rhs: Tensor, tol: Optional[float], name: str) -> Tensor:
    # tol is an absolute pivot threshold for LU and QR only; the
    # pseudo-inverse keeps its own relative singular value cutoff.
    m, n = x.shape

    if m < n:
        return _pseudo_inverse(x, None) @ rhs

    if m == n:
        lu = lu_decomposition(x, tol=tol)
        if lu.is_nonsingular:
            return lu_solve(lu, rhs)
        reason = "singular"
    else:
        qr = qr_decomposition(x, tol=tol)
        if qr.is_full_rank:
            return qr_solve(qr, rhs)
        reason = "rank deficient"

    warnings.warn(
        f"{name}: matrix of shape ({m}, {n}) is {reason} to working "
        f"precision; returning the pseudo-inverse solution.",
        SingularMatrixWarning,
        stacklevel=3,
    )

    return _pseudo_inverse(x, None) @ rhs


def solve(
    a: MatrixLike, b: MatrixLike, *, tol: Optional[float] = None
) -> Tensor:
    r"""
    Solve :math:`Ax = b`.

    The method depends on the shape of :math:`A`:

    - square: LU decomposition with partial pivoting,
    - tall (:math:`m > n`): least squares through the QR decomposition,
    - wide (:math:`m < n`): minimum-norm solution :math:`A^+ b`.

    If the LU or QR path finds :math:`A` singular or rank deficient, a
    :class:`SingularMatrixWarning` is issued and the pseudo-inverse solution
    :math:`A^+ b` is returned instead of raising.

    Parameters
    ----------
    a : DenseMatrix, Tensor or array_like
        Real matrix of shape (m, n).
    b : DenseMatrix, Tensor or array_like
        Right-hand side of shape (m,) or (m, k).
    tol : float, optional
        Absolute pivot tolerance for the LU and QR paths: a diagonal entry
        of :math:`U` or :math:`R` with magnitude ``<= tol`` marks :math:`A`
        singular or rank deficient.
        Default: ``max(m, n) * eps * max|a_ij|``. The pseudo-inverse path
        always uses the default singular value cutoff of
        :func:`pseudo_inverse`, ``max(m, n) * s_max * eps``.

    Returns
    -------
    Tensor
        Solution of shape (n,) or (n, k).

    Raises
    ------
    InvalidArgumentError
        If ``a`` or ``b`` is not a finite real matrix.
    DimensionMismatchError
        If ``b`` does not have m rows.

    Warns
    -----
    SingularMatrixWarning
        When the pseudo-inverse fallback is taken.

    Examples
    --------
    >>> import torch
    >>> a = torch.tensor([[2., 1.], [1., 3.]], dtype=torch.float64)
    >>> solve(a, torch.tensor([3., 5.], dtype=torch.float64))
    tensor([0.8000, 1.4000], dtype=torch.float64)
    """
    x = as_float64(a, name="solve: a")
    rhs, is_vector = as_right_hand_side(b, x.shape[0], name="solve: b")

    solution = _solve(x, rhs, tol, "solve").to(solution_dtype(a, b))

    return solution.squeeze(-1) if is_vector else solution


def solve_transpose(
    a: MatrixLike, b: MatrixLike, *, tol: Optional[float] = None
) -> Tensor:
    r"""
    Solve :math:`XA = B`, i.e. :math:`A^T X^T = B^T`.

    Parameters
    ----------
    a : DenseMatrix, Tensor or array_like
        Real matrix of shape (m, n).
    b : DenseMatrix, Tensor or array_like
        Right-hand side of shape (n,) or (k, n).
    tol : float, optional
        Pivot tolerance, as in :func:`solve`.

    Returns
    -------
    Tensor
        Solution of shape (m,) or (k, m).

    Raises
    ------
    DimensionMismatchError
        If ``b`` does not have n columns.

    Warns
    -----
    SingularMatrixWarning
        When the pseudo-inverse fallback is taken.
    """
    x = as_float64(a, name="solve_transpose: a")

    tensor = _as_tensor(b, "solve_transpose: b")
    if tensor.dim() not in (1, 2):
        raise InvalidArgumentError(
            f"solve_transpose: b must be 1D or 2D, got {tensor.dim()}D"
        )
    is_vector = tensor.dim() == 1
    rhs, _ = as_right_hand_side(
        tensor if is_vector else tensor.T,
        x.shape[1],
        name="solve_transpose: b",
    )

    solution = _solve(x.T.contiguous(), rhs, tol, "solve_transpose")
    solution = solution.to(solution_dtype(a, b))

    return solution.squeeze(-1) if is_vector else solution.T
