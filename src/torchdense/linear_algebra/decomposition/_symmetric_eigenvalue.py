"""Symmetric eigenvalue problem: tridiagonal reduction and QL iteration."""

import math
from typing import Tuple

import torch
from torch import Tensor

from torchdense._exceptions import NumericalNonConvergenceError
from torchdense.linear_algebra.decomposition._givens import rotate_columns
from torchdense.linear_algebra.decomposition._hessenberg import (
    reduce_to_hessenberg,
)
from torchdense.matrix._tolerance import EPS


def symmetric_eigenvalue(
    a: Tensor, max_iterations: int
) -> Tuple[Tensor, Tensor]:
    r"""Eigenvalues and eigenvectors of a symmetric float64 matrix.

    The matrix is reduced to tridiagonal form :math:`T = Q^T A Q` by
    Householder reflections (the Hessenberg form of a symmetric matrix),
    then diagonalized by the implicit-shift QL iteration with Wilkinson
    shifts, accumulating the plane rotations into :math:`Q`.

    Parameters
    ----------
    a : Tensor
        Symmetric float64 matrix of shape (n, n). Overwritten.
    max_iterations : int
        QL sweeps allowed for each eigenvalue before giving up.

    Returns
    -------
    eigenvalues : Tensor
        Shape (n,), ascending.
    eigenvectors : Tensor
        Orthogonal (n, n) matrix whose column i belongs to eigenvalue i.

    Raises
    ------
    NumericalNonConvergenceError
        If an eigenvalue does not deflate within ``max_iterations`` sweeps.
    """
    n = a.shape[0]
    t, V = reduce_to_hessenberg(a)

    d = torch.diagonal(t).tolist()
    # e[i] couples d[i] and d[i + 1]; e[n - 1] is a sentinel zero.
    e = torch.diagonal(t, -1).tolist() + [0.0]

    f = 0.0
    tst1 = 0.0
    for l in range(n):
        tst1 = max(tst1, abs(d[l]) + abs(e[l]))
        m = l
        while abs(e[m]) > EPS * tst1:
            m += 1

        if m > l:
            iteration = 0
            while True:
                if iteration == max_iterations:
                    raise NumericalNonConvergenceError(
                        "symmetric QL iteration", l, max_iterations
                    )
                iteration += 1

                # Wilkinson shift from the leading 2x2 block.
                g = d[l]
                p = (d[l + 1] - g) / (2.0 * e[l])
                r = math.hypot(p, 1.0)
                if p < 0:
                    r = -r
                d[l] = e[l] / (p + r)
                d[l + 1] = e[l] * (p + r)
                dl1 = d[l + 1]
                h = g - d[l]
                for i in range(l + 2, n):
                    d[i] -= h
                f += h

                # Implicit QL transformation.
                p = d[m]
                c = c2 = c3 = 1.0
                el1 = e[l + 1]
                s = s2 = 0.0
                for i in range(m - 1, l - 1, -1):
                    c3 = c2
                    c2 = c
                    s2 = s
                    g = c * e[i]
                    h = c * p
                    r = math.hypot(p, e[i])
                    e[i + 1] = s * r
                    s = e[i] / r
                    c = p / r
                    p = c * d[i] - s * g
                    d[i + 1] = h + s * (c * g + s * d[i])
                    rotate_columns(V, i, i + 1, c, -s)

                p = -s * s2 * c3 * el1 * e[l] / dl1
                e[l] = s * p
                d[l] = c * p

                if abs(e[l]) <= EPS * tst1:
                    break

        d[l] += f
        e[l] = 0.0

    eigenvalues = torch.tensor(d, dtype=torch.float64)
    order = torch.argsort(eigenvalues, stable=True)

    return eigenvalues[order], V[:, order]
