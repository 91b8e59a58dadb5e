"""Non-symmetric eigenvalue problem: real Schur form and back-substitution."""

import math
from typing import List, Tuple

import torch
from torch import Tensor

from torchdense._exceptions import NumericalNonConvergenceError
from torchdense.linear_algebra.decomposition._hessenberg import (
    reduce_to_hessenberg,
)
from torchdense.matrix._tolerance import EPS


def _cdiv(xr: float, xi: float, yr: float, yi: float) -> Tuple[float, float]:
    z = complex(xr, xi) / complex(yr, yi)
    return z.real, z.imag


def _francis_qr(
    H: List[List[float]], V: List[List[float]], max_iterations: int
) -> Tuple[List[float], List[float], float]:
    """Reduce upper Hessenberg ``H`` to real Schur form in place.

    Returns the real and imaginary parts of the eigenvalues and the norm of
    the input used by the back-substitution.
    """
    nn = len(H)
    d = [0.0] * nn
    e = [0.0] * nn

    norm = 0.0
    for i in range(nn):
        for j in range(max(i - 1, 0), nn):
            norm += abs(H[i][j])

    n = nn - 1
    exshift = 0.0
    p = q = r = s = z = 0.0
    iteration = 0

    while n >= 0:
        # Look for a single small subdiagonal element.
        l = n
        while l > 0:
            s = abs(H[l - 1][l - 1]) + abs(H[l][l])
            if s == 0.0:
                s = norm
            if abs(H[l][l - 1]) < EPS * s:
                break
            l -= 1

        if l == n:
            # One root.
            H[n][n] += exshift
            d[n] = H[n][n]
            e[n] = 0.0
            n -= 1
            iteration = 0
        elif l == n - 1:
            # Two roots.
            w = H[n][n - 1] * H[n - 1][n]
            p = (H[n - 1][n - 1] - H[n][n]) / 2.0
            q = p * p + w
            z = math.sqrt(abs(q))
            H[n][n] += exshift
            H[n - 1][n - 1] += exshift
            x = H[n][n]

            if q >= 0:
                z = p + z if p >= 0 else p - z
                d[n - 1] = x + z
                d[n] = d[n - 1]
                if z != 0.0:
                    d[n] = x - w / z
                e[n - 1] = 0.0
                e[n] = 0.0

                # Rotate the real pair into upper triangular form.
                x = H[n][n - 1]
                s = abs(x) + abs(z)
                p = x / s
                q = z / s
                r = math.sqrt(p * p + q * q)
                p /= r
                q /= r
                for j in range(n - 1, nn):
                    z = H[n - 1][j]
                    H[n - 1][j] = q * z + p * H[n][j]
                    H[n][j] = q * H[n][j] - p * z
                for i in range(n + 1):
                    z = H[i][n - 1]
                    H[i][n - 1] = q * z + p * H[i][n]
                    H[i][n] = q * H[i][n] - p * z
                for i in range(nn):
                    z = V[i][n - 1]
                    V[i][n - 1] = q * z + p * V[i][n]
                    V[i][n] = q * V[i][n] - p * z
            else:
                d[n - 1] = x + p
                d[n] = x + p
                e[n - 1] = z
                e[n] = -z

            n -= 2
            iteration = 0
        else:
            if iteration == max_iterations:
                raise NumericalNonConvergenceError(
                    "Francis QR iteration", n, max_iterations
                )

            x = H[n][n]
            y = 0.0
            w = 0.0
            if l < n:
                y = H[n - 1][n - 1]
                w = H[n][n - 1] * H[n - 1][n]

            # Exceptional shifts.
            if iteration == 10:
                exshift += x
                for i in range(n + 1):
                    H[i][i] -= x
                s = abs(H[n][n - 1]) + abs(H[n - 1][n - 2])
                x = y = 0.75 * s
                w = -0.4375 * s * s
            if iteration == 20:
                s = (y - x) / 2.0
                s = s * s + w
                if s > 0:
                    s = math.sqrt(s)
                    if y < x:
                        s = -s
                    s = x - w / ((y - x) / 2.0 + s)
                    for i in range(n + 1):
                        H[i][i] -= s
                    exshift += s
                    x = y = w = 0.964

            iteration += 1

            # Look for two consecutive small subdiagonal elements.
            m = n - 2
            while m >= l:
                z = H[m][m]
                r = x - z
                s = y - z
                p = (r * s - w) / H[m + 1][m] + H[m][m + 1]
                q = H[m + 1][m + 1] - z - r - s
                r = H[m + 2][m + 1]
                s = abs(p) + abs(q) + abs(r)
                p /= s
                q /= s
                r /= s
                if m == l:
                    break
                lhs = abs(H[m][m - 1]) * (abs(q) + abs(r))
                rhs = EPS * (
                    abs(p)
                    * (abs(H[m - 1][m - 1]) + abs(z) + abs(H[m + 1][m + 1]))
                )
                if lhs < rhs:
                    break
                m -= 1

            for i in range(m + 2, n + 1):
                H[i][i - 2] = 0.0
                if i > m + 2:
                    H[i][i - 3] = 0.0

            # Double QR step on rows l..n and columns m..n.
            for k in range(m, n):
                notlast = k != n - 1
                if k != m:
                    p = H[k][k - 1]
                    q = H[k + 1][k - 1]
                    r = H[k + 2][k - 1] if notlast else 0.0
                    x = abs(p) + abs(q) + abs(r)
                    if x == 0.0:
                        continue
                    p /= x
                    q /= x
                    r /= x

                s = math.sqrt(p * p + q * q + r * r)
                if p < 0:
                    s = -s
                if s == 0.0:
                    continue

                if k != m:
                    H[k][k - 1] = -s * x
                elif l != m:
                    H[k][k - 1] = -H[k][k - 1]
                p += s
                x = p / s
                y = q / s
                z = r / s
                q /= p
                r /= p

                for j in range(k, nn):
                    p = H[k][j] + q * H[k + 1][j]
                    if notlast:
                        p += r * H[k + 2][j]
                        H[k + 2][j] -= p * z
                    H[k][j] -= p * x
                    H[k + 1][j] -= p * y

                for i in range(min(n, k + 3) + 1):
                    p = x * H[i][k] + y * H[i][k + 1]
                    if notlast:
                        p += z * H[i][k + 2]
                        H[i][k + 2] -= p * r
                    H[i][k] -= p
                    H[i][k + 1] -= p * q

                for i in range(nn):
                    p = x * V[i][k] + y * V[i][k + 1]
                    if notlast:
                        p += z * V[i][k + 2]
                        V[i][k + 2] -= p * r
                    V[i][k] -= p
                    V[i][k + 1] -= p * q

    return d, e, norm


def _back_substitute(
    H: List[List[float]], d: List[float], e: List[float], norm: float
) -> None:
    """Overwrite the real Schur form ``H`` with the eigenvectors of ``H``.

    Column ``j`` of the upper triangle of the result holds the eigenvector
    of eigenvalue ``j``; a complex pair stores its real part in the first
    column and its imaginary part in the second.
    """
    nn = len(H)
    z = r = s = 0.0

    for n in range(nn - 1, -1, -1):
        p = d[n]
        q = e[n]

        if q == 0.0:
            # Real vector.
            l = n
            H[n][n] = 1.0
            for i in range(n - 1, -1, -1):
                w = H[i][i] - p
                r = 0.0
                for j in range(l, n + 1):
                    r += H[i][j] * H[j][n]
                if e[i] < 0.0:
                    z = w
                    s = r
                    continue

                l = i
                if e[i] == 0.0:
                    if w != 0.0:
                        H[i][n] = -r / w
                    else:
                        H[i][n] = -r / (EPS * norm)
                else:
                    x = H[i][i + 1]
                    y = H[i + 1][i]
                    q = (d[i] - p) * (d[i] - p) + e[i] * e[i]
                    t = (x * s - z * r) / q
                    H[i][n] = t
                    if abs(x) > abs(z):
                        H[i + 1][n] = (-r - w * t) / x
                    else:
                        H[i + 1][n] = (-s - y * t) / z

                # Overflow control.
                t = abs(H[i][n])
                if (EPS * t) * t > 1:
                    for j in range(i, n + 1):
                        H[j][n] /= t

        elif q < 0.0:
            # Complex vector; the last component is imaginary.
            l = n - 1
            if abs(H[n][n - 1]) > abs(H[n - 1][n]):
                H[n - 1][n - 1] = q / H[n][n - 1]
                H[n - 1][n] = -(H[n][n] - p) / H[n][n - 1]
            else:
                H[n - 1][n - 1], H[n - 1][n] = _cdiv(
                    0.0, -H[n - 1][n], H[n - 1][n - 1] - p, q
                )
            H[n][n - 1] = 0.0
            H[n][n] = 1.0

            for i in range(n - 2, -1, -1):
                ra = 0.0
                sa = 0.0
                for j in range(l, n + 1):
                    ra += H[i][j] * H[j][n - 1]
                    sa += H[i][j] * H[j][n]
                w = H[i][i] - p

                if e[i] < 0.0:
                    z = w
                    r = ra
                    s = sa
                    continue

                l = i
                if e[i] == 0.0:
                    H[i][n - 1], H[i][n] = _cdiv(-ra, -sa, w, q)
                else:
                    x = H[i][i + 1]
                    y = H[i + 1][i]
                    vr = (d[i] - p) * (d[i] - p) + e[i] * e[i] - q * q
                    vi = (d[i] - p) * 2.0 * q
                    if vr == 0.0 and vi == 0.0:
                        vr = (
                            EPS
                            * norm
                            * (abs(w) + abs(q) + abs(x) + abs(y) + abs(z))
                        )
                    H[i][n - 1], H[i][n] = _cdiv(
                        x * r - z * ra + q * sa,
                        x * s - z * sa - q * ra,
                        vr,
                        vi,
                    )
                    if abs(x) > abs(z) + abs(q):
                        H[i + 1][n - 1] = (
                            -ra - w * H[i][n - 1] + q * H[i][n]
                        ) / x
                        H[i + 1][n] = (-sa - w * H[i][n] - q * H[i][n - 1]) / x
                    else:
                        H[i + 1][n - 1], H[i + 1][n] = _cdiv(
                            -r - y * H[i][n - 1], -s - y * H[i][n], z, q
                        )

                # Overflow control.
                t = max(abs(H[i][n - 1]), abs(H[i][n]))
                if (EPS * t) * t > 1:
                    for j in range(i, n + 1):
                        H[j][n - 1] /= t
                        H[j][n] /= t


def real_schur_eigenvalue(
    a: Tensor, max_iterations: int
) -> Tuple[Tensor, Tensor, Tensor]:
    r"""Eigenvalues and real eigenvectors of a general float64 matrix.

    The matrix is reduced to upper Hessenberg form, iterated to real Schur
    form :math:`T = Z^T A Z` by Francis double-shift QR steps with
    exceptional shifts after 10 and 20 stagnant sweeps, and the
    eigenvectors of :math:`T` are found by back-substitution and mapped
    back through :math:`Z`.

    Parameters
    ----------
    a : Tensor
        Float64 matrix of shape (n, n). Overwritten.
    max_iterations : int
        Sweeps allowed for each deflation before giving up.

    Returns
    -------
    eigenvalues_real, eigenvalues_imag : Tensor
        Shape (n,). Complex pairs are adjacent with the positive imaginary
        part first.
    eigenvectors : Tensor
        Shape (n, n). For a pair :math:`\lambda \pm i\mu` at columns
        ``j, j + 1`` the eigenvector of :math:`\lambda + i\mu` is
        ``V[:, j] + 1j * V[:, j + 1]``.

    Raises
    ------
    NumericalNonConvergenceError
        If a deflation does not happen within ``max_iterations`` sweeps.
    """
    h, z = reduce_to_hessenberg(a)
    H = h.tolist()
    V = z.tolist()

    d, e, norm = _francis_qr(H, V, max_iterations)

    eigenvalues_real = torch.tensor(d, dtype=torch.float64)
    eigenvalues_imag = torch.tensor(e, dtype=torch.float64)
    schur_vectors = torch.tensor(V, dtype=torch.float64)

    # The zero matrix: every vector is an eigenvector.
    if norm == 0.0:
        return eigenvalues_real, eigenvalues_imag, schur_vectors

    _back_substitute(H, d, e, norm)

    vectors = torch.triu(torch.tensor(H, dtype=torch.float64))
    eigenvectors = schur_vectors @ vectors

    return eigenvalues_real, eigenvalues_imag, eigenvectors
