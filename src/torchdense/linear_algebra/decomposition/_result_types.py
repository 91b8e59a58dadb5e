from typing import NamedTuple

import torch
from torch import Tensor


class LUDecompositionResult(NamedTuple):
    """Result of LU decomposition with partial pivoting, A[pivots] = LU.

    The row permutation is stored as the index vector ``pivots`` rather than
    as a permutation matrix: row ``i`` of ``L @ U`` is row ``pivots[i]`` of
    the input.
    """

    L: Tensor  # (m, k) - Unit lower triangular, k = min(m, n)
    U: Tensor  # (k, n) - Upper triangular
    pivots: Tensor  # (m,) - int64 row permutation
    pivot_sign: int  # +1 or -1, parity of the permutation
    is_nonsingular: bool


class QRDecompositionResult(NamedTuple):
    """Result of Householder QR decomposition A = QR.

    ``Q`` is kept implicitly as the Householder vectors in the columns of
    ``householder``; the explicit factor is formed on request through the
    ``Q`` property.
    """

    householder: Tensor  # (m, n) - Unit-norm reflector vectors, lower trapezoidal
    R: Tensor  # (n, n) - Upper triangular
    is_full_rank: bool

    @property
    def Q(self) -> Tensor:
        """Explicit ``(m, n)`` factor with orthonormal columns."""
        v = self.householder.to(torch.float64)
        m, n = v.shape
        q = torch.eye(m, n, dtype=torch.float64)
        for k in range(n - 1, -1, -1):
            w = v[k:, k]
            q[k:, :] -= 2.0 * torch.outer(w, w @ q[k:, :])
        return q.to(self.householder.dtype)


class CholeskyDecompositionResult(NamedTuple):
    """Result of Cholesky decomposition A = LL^T.

    When ``is_spd`` is False, ``L`` is the partial factor computed before
    the first non-positive pivot (later rows are zero) and must not be
    trusted as a factorization of the input.
    """

    L: Tensor  # (n, n) - Lower triangular
    is_spd: bool


class HessenbergResult(NamedTuple):
    """Result of Hessenberg decomposition A = QHQ^T.

    H is upper Hessenberg (zeros below the first subdiagonal) and Q is
    orthogonal.
    """

    H: Tensor
    Q: Tensor


class EigenvalueDecompositionResult(NamedTuple):
    """Result of real eigenvalue decomposition A V = V D.

    For symmetric input ``D`` is diagonal and ``V`` is orthogonal, so
    A = V D V^T. Otherwise ``D`` is block diagonal: a complex pair
    :math:`\\lambda \\pm i\\mu` occupies the 2x2 block
    ``[[lambda, mu], [-mu, lambda]]`` and the matching columns of ``V``
    hold the real and imaginary parts of the eigenvector.
    """

    V: Tensor  # (n, n) - Eigenvectors (real Schur vectors back-substituted)
    D: Tensor  # (n, n) - Diagonal or 2x2 block diagonal
    eigenvalues_real: Tensor  # (n,)
    eigenvalues_imag: Tensor  # (n,)
    is_symmetric: bool


class SingularValueDecompositionResult(NamedTuple):
    """Result of singular value decomposition A = U S V^T for rows >= cols.

    Singular values are sorted in descending order.
    """

    S: Tensor  # (n, n) - Diagonal matrix of singular values
    U: Tensor  # (m, n) - Left singular vectors
    V: Tensor  # (n, n) - Right singular vectors
    singular_values: Tensor  # (n,)
