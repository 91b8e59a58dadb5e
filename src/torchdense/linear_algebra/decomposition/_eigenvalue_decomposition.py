"""Real eigenvalue decomposition."""

from typing import Optional

import torch

from torchdense._exceptions import (
    InternalInvariantViolation,
    InvalidArgumentError,
)
from torchdense.linear_algebra.decomposition._real_schur import (
    real_schur_eigenvalue,
)
from torchdense.linear_algebra.decomposition._result_types import (
    EigenvalueDecompositionResult,
)
from torchdense.linear_algebra.decomposition._symmetric_eigenvalue import (
    symmetric_eigenvalue,
)
from torchdense.matrix import (
    MatrixLike,
    as_float64,
    default_tolerance,
    result_dtype,
)


def eigenvalue_decomposition(
    a: MatrixLike,
    *,
    tol: Optional[float] = None,
    max_iterations: int = 30,
) -> EigenvalueDecompositionResult:
    r"""
    Eigenvalue decomposition of a real square matrix.

    Computes real matrices :math:`V` and :math:`D` with

    .. math::

        A V = V D.

    Symmetric matrices (:math:`|a_{ij} - a_{ji}| \le \text{tol}`) take the
    tridiagonal QL path: :math:`D` is diagonal with ascending eigenvalues
    and :math:`V` is orthogonal, so :math:`A = VDV^T`.

    Other matrices take the Hessenberg / real Schur path. :math:`D` is
    block diagonal: a real eigenvalue sits on the diagonal and a complex
    pair :math:`\lambda \pm i\mu` occupies the block

    .. math::

        \begin{pmatrix} \lambda & \mu \\ -\mu & \lambda \end{pmatrix}

    with the real and imaginary parts of the eigenvector of
    :math:`\lambda + i\mu` in the two matching columns of :math:`V`.
    :math:`V` may be ill-conditioned or singular for defective matrices.

    Parameters
    ----------
    a : DenseMatrix, Tensor or array_like
        Square real matrix of shape (n, n).
    tol : float, optional
        Symmetry tolerance. Default: ``n * eps * max|a_ij|``.
    max_iterations : int, optional
        Iterations allowed per deflated eigenvalue. Default: 30.

    Returns
    -------
    EigenvalueDecompositionResult
        A named tuple containing:

        - **V** (*Tensor*) - Eigenvector matrix of shape (n, n).
        - **D** (*Tensor*) - Diagonal or 2x2 block diagonal (n, n) matrix.
        - **eigenvalues_real** (*Tensor*) - Real parts, shape (n,).
        - **eigenvalues_imag** (*Tensor*) - Imaginary parts, shape (n,).
        - **is_symmetric** (*bool*) - Which path was taken.

    Raises
    ------
    InvalidArgumentError
        If ``a`` is not a finite square real matrix or ``max_iterations``
        is not positive.
    NumericalNonConvergenceError
        If an eigenvalue fails to converge within ``max_iterations``.

    Examples
    --------
    >>> import torch
    >>> result = eigenvalue_decomposition(
    ...     torch.tensor([[0., 1.], [1., 0.]], dtype=torch.float64)
    ... )
    >>> result.eigenvalues_real
    tensor([-1.,  1.], dtype=torch.float64)
    >>> result = eigenvalue_decomposition(
    ...     torch.tensor([[0., 1.], [-1., 0.]], dtype=torch.float64)
    ... )
    >>> result.eigenvalues_imag
    tensor([ 1., -1.], dtype=torch.float64)
    """
    x = as_float64(a, name="eigenvalue_decomposition: a")
    dtype = result_dtype(a)
    m, n = x.shape

    if m != n:
        raise InvalidArgumentError(
            f"eigenvalue_decomposition: a must be square, got shape ({m}, {n})"
        )
    if max_iterations < 1:
        raise InvalidArgumentError(
            f"eigenvalue_decomposition: max_iterations must be positive, "
            f"got {max_iterations}"
        )

    if tol is None:
        tol = default_tolerance(x)

    is_symmetric = bool(torch.all(torch.abs(x - x.T) <= tol))

    if is_symmetric:
        eigenvalues_real, V = symmetric_eigenvalue(
            (x + x.T) / 2.0, max_iterations
        )
        eigenvalues_imag = torch.zeros(n, dtype=torch.float64)
        D = torch.diag(eigenvalues_real)
    else:
        eigenvalues_real, eigenvalues_imag, V = real_schur_eigenvalue(
            x, max_iterations
        )
        D = torch.diag(eigenvalues_real)
        imag = eigenvalues_imag.tolist()
        for i in range(n):
            if imag[i] > 0:
                # A pair is stored as (mu, -mu) in adjacent slots.
                if i + 1 == n or imag[i + 1] != -imag[i]:
                    raise InternalInvariantViolation(
                        f"eigenvalue_decomposition: eigenvalue {i} has no "
                        f"conjugate partner"
                    )
                D[i, i + 1] = imag[i]
            elif imag[i] < 0:
                D[i, i - 1] = imag[i]

    return EigenvalueDecompositionResult(
        V=V.to(dtype),
        D=D.to(dtype),
        eigenvalues_real=eigenvalues_real.to(dtype),
        eigenvalues_imag=eigenvalues_imag.to(dtype),
        is_symmetric=is_symmetric,
    )
