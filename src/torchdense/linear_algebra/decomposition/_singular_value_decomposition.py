"""Singular value decomposition."""

import math
from typing import List, Tuple

import torch
from torch import Tensor

from torchdense._exceptions import (
    InvalidArgumentError,
    NumericalNonConvergenceError,
)
from torchdense.linear_algebra.decomposition._givens import rotate_columns
from torchdense.linear_algebra.decomposition._householder import (
    householder_vector,
    reflect_columns,
    reflect_rows,
)
from torchdense.linear_algebra.decomposition._result_types import (
    SingularValueDecompositionResult,
)
from torchdense.matrix import MatrixLike, as_float64, result_dtype
from torchdense.matrix._tolerance import EPS

# Entries below this are flushed to zero in the deflation tests.
TINY = 2.0**-966


def _bidiagonalize(
    a: Tensor,
) -> Tuple[List[float], List[float], Tensor, Tensor]:
    """Householder reduction ``a = U B V^T`` with ``B`` upper bidiagonal.

    Returns the diagonal ``s`` and superdiagonal ``e`` of ``B`` (with a
    trailing zero so ``len(e) == n``) and the factors ``U`` (m, n) and
    ``V`` (n, n).
    """
    m, n = a.shape
    s = [0.0] * n
    e = [0.0] * n
    left = []
    right = []

    for k in range(n):
        v, alpha = householder_vector(a[k:, k])
        if v is not None:
            reflect_rows(a[:, k + 1 :], v, k)
        left.append(v)
        s[k] = alpha if v is not None else 0.0

        if k < n - 2:
            w, beta = householder_vector(a[k, k + 1 :])
            if w is not None:
                reflect_columns(a[k + 1 :, :], w, k + 1)
            right.append(w)
            e[k] = beta if w is not None else 0.0
        elif k == n - 2:
            e[k] = a[k, k + 1].item()

    U = torch.eye(m, n, dtype=torch.float64)
    for k in range(len(left) - 1, -1, -1):
        if left[k] is not None:
            reflect_rows(U, left[k], k)

    V = torch.eye(n, dtype=torch.float64)
    for k in range(len(right) - 1, -1, -1):
        if right[k] is not None:
            reflect_rows(V, right[k], k + 1)

    return s, e, U, V


def _golub_kahan(
    s: List[float],
    e: List[float],
    U: Tensor,
    V: Tensor,
    max_iterations: int,
) -> None:
    """Diagonalize the bidiagonal ``(s, e)`` in place.

    Implicit-shift QR steps chase the bulge down the bidiagonal; negligible
    superdiagonal entries split the problem and negligible diagonal entries
    are rotated out. Rotations are accumulated into ``U`` and ``V``.
    """
    p = len(s)
    iteration = 0

    while p > 0:
        # Find the largest k < p - 1 with a negligible e[k].
        k = p - 2
        while k >= 0:
            if abs(e[k]) <= TINY + EPS * (abs(s[k]) + abs(s[k + 1])):
                e[k] = 0.0
                break
            k -= 1

        if k == p - 2:
            # s[p - 1] has converged.
            kase = 4
        else:
            ks = p - 1
            while ks > k:
                t = abs(e[ks]) if ks != p else 0.0
                if ks != k + 1:
                    t += abs(e[ks - 1])
                if abs(s[ks]) <= TINY + EPS * t:
                    s[ks] = 0.0
                    break
                ks -= 1
            if ks == k:
                kase = 3
            elif ks == p - 1:
                kase = 1
            else:
                kase = 2
                k = ks
        k += 1

        if kase == 1:
            # Deflate negligible s[p - 1].
            f = e[p - 2]
            e[p - 2] = 0.0
            for j in range(p - 2, k - 1, -1):
                t = math.hypot(s[j], f)
                cs = s[j] / t
                sn = f / t
                s[j] = t
                if j != k:
                    f = -sn * e[j - 1]
                    e[j - 1] = cs * e[j - 1]
                rotate_columns(V, j, p - 1, cs, sn)

        elif kase == 2:
            # Split at negligible s[k - 1].
            f = e[k - 1]
            e[k - 1] = 0.0
            for j in range(k, p):
                t = math.hypot(s[j], f)
                cs = s[j] / t
                sn = f / t
                s[j] = t
                f = -sn * e[j]
                e[j] = cs * e[j]
                rotate_columns(U, j, k - 1, cs, sn)

        elif kase == 3:
            if iteration == max_iterations:
                raise NumericalNonConvergenceError(
                    "Golub-Kahan SVD iteration", p - 1, max_iterations
                )
            iteration += 1

            # Shift from the trailing 2x2 block of B^T B.
            scale = max(
                abs(s[p - 1]), abs(s[p - 2]), abs(e[p - 2]), abs(s[k]), abs(e[k])
            )
            sp = s[p - 1] / scale
            spm1 = s[p - 2] / scale
            epm1 = e[p - 2] / scale
            sk = s[k] / scale
            ek = e[k] / scale
            b = ((spm1 + sp) * (spm1 - sp) + epm1 * epm1) / 2.0
            c = (sp * epm1) * (sp * epm1)
            shift = 0.0
            if b != 0.0 or c != 0.0:
                shift = math.sqrt(b * b + c)
                if b < 0.0:
                    shift = -shift
                shift = c / (b + shift)
            f = (sk + sp) * (sk - sp) + shift
            g = sk * ek

            # Chase the bulge.
            for j in range(k, p - 1):
                t = math.hypot(f, g)
                cs = f / t
                sn = g / t
                if j != k:
                    e[j - 1] = t
                f = cs * s[j] + sn * e[j]
                e[j] = cs * e[j] - sn * s[j]
                g = sn * s[j + 1]
                s[j + 1] = cs * s[j + 1]
                rotate_columns(V, j, j + 1, cs, sn)

                t = math.hypot(f, g)
                cs = f / t
                sn = g / t
                s[j] = t
                f = cs * e[j] + sn * s[j + 1]
                s[j + 1] = -sn * e[j] + cs * s[j + 1]
                g = sn * e[j + 1]
                e[j + 1] = cs * e[j + 1]
                rotate_columns(U, j, j + 1, cs, sn)
            e[p - 2] = f

        else:
            # Make the converged singular value non-negative.
            if s[k] <= 0.0:
                s[k] = -s[k] if s[k] < 0.0 else 0.0
                V[:, k] = -V[:, k]
            iteration = 0
            p -= 1


def singular_value_decomposition(
    a: MatrixLike, *, max_iterations: int = 75
) -> SingularValueDecompositionResult:
    r"""
    Singular value decomposition.

    Computes :math:`A = USV^T` for a real :math:`m \times n` matrix with
    :math:`m \ge n`, where :math:`U` has orthonormal columns, :math:`V` is
    orthogonal and :math:`S` is diagonal with non-negative entries in
    descending order.

    Parameters
    ----------
    a : DenseMatrix, Tensor or array_like
        Real matrix of shape (m, n) with m >= n.
    max_iterations : int, optional
        QR sweeps allowed per converged singular value. Default: 75.

    Returns
    -------
    SingularValueDecompositionResult
        A named tuple containing:

        - **S** (*Tensor*) - Diagonal matrix of shape (n, n).
        - **U** (*Tensor*) - Left singular vectors, shape (m, n).
        - **V** (*Tensor*) - Right singular vectors, shape (n, n).
        - **singular_values** (*Tensor*) - Shape (n,), descending.

    Raises
    ------
    InvalidArgumentError
        If ``a`` is not a finite 2D real matrix, has fewer rows than
        columns, or ``max_iterations`` is not positive.
    NumericalNonConvergenceError
        If a singular value fails to converge within ``max_iterations``.

    Notes
    -----
    The matrix is first reduced to upper bidiagonal form by alternating
    left and right Householder reflections. The bidiagonal is then
    diagonalized by the implicit-shift Golub-Kahan iteration. Finally the
    singular values are sorted by a stable descending sort and the columns
    of :math:`U` and :math:`V` are permuted to match, so equal singular
    values keep the order in which they converged.

    Wide matrices can be decomposed through their transpose: if
    :math:`A^T = USV^T` then :math:`A = VSU^T`.

    Examples
    --------
    >>> import torch
    >>> a = torch.tensor([[3., 0.], [0., -4.], [0., 0.]], dtype=torch.float64)
    >>> singular_value_decomposition(a).singular_values
    tensor([4., 3.], dtype=torch.float64)
    """
    x = as_float64(a, name="singular_value_decomposition: a")
    dtype = result_dtype(a)
    m, n = x.shape

    if m < n:
        raise InvalidArgumentError(
            f"singular_value_decomposition: a must have rows >= cols, got "
            f"shape ({m}, {n})"
        )
    if max_iterations < 1:
        raise InvalidArgumentError(
            f"singular_value_decomposition: max_iterations must be positive, "
            f"got {max_iterations}"
        )

    s, e, U, V = _bidiagonalize(x)
    _golub_kahan(s, e, U, V, max_iterations)

    singular_values = torch.tensor(s, dtype=torch.float64)
    order = torch.argsort(singular_values, descending=True, stable=True)
    singular_values = singular_values[order]

    return SingularValueDecompositionResult(
        S=torch.diag(singular_values).to(dtype),
        U=U[:, order].to(dtype),
        V=V[:, order].to(dtype),
        singular_values=singular_values.to(dtype),
    )
