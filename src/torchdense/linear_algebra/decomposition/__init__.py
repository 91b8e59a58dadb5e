"""Dense matrix decompositions.

Every decomposition copies its input into a float64 working buffer, never
modifies the caller's data, and returns a named tuple of fresh tensors in the
input's floating dtype.

Functions
---------
lu_decomposition
    Computes the LU decomposition A[pivots] = LU with partial row pivoting.
    Never fails on singular input; the result reports ``is_nonsingular``.

qr_decomposition
    Computes the Householder QR decomposition A = QR for rows >= cols. The
    orthogonal factor is kept as reflector vectors and formed on request.

cholesky_decomposition
    Computes the Cholesky decomposition A = LL^T and reports whether the
    input is symmetric positive definite.

hessenberg
    Computes the Hessenberg decomposition A = QHQ^T where Q is orthogonal
    and H is upper Hessenberg (zeros below the first subdiagonal).

eigenvalue_decomposition
    Computes real V and D with AV = VD. Symmetric input gives an orthogonal
    V and diagonal D; other input gives a block diagonal D holding complex
    conjugate pairs as 2x2 blocks.

singular_value_decomposition
    Computes the singular value decomposition A = USV^T for rows >= cols
    with singular values in descending order.

Result Types
------------
LUDecompositionResult
    Named tuple with L, U, pivots, pivot_sign, is_nonsingular.

QRDecompositionResult
    Named tuple with householder, R, is_full_rank and a Q property.

CholeskyDecompositionResult
    Named tuple with L, is_spd.

HessenbergResult
    Named tuple with H, Q.

EigenvalueDecompositionResult
    Named tuple with V, D, eigenvalues_real, eigenvalues_imag, is_symmetric.

SingularValueDecompositionResult
    Named tuple with S, U, V, singular_values.
"""

from torchdense.linear_algebra.decomposition._cholesky_decomposition import (
    cholesky_decomposition,
)
from torchdense.linear_algebra.decomposition._eigenvalue_decomposition import (
    eigenvalue_decomposition,
)
from torchdense.linear_algebra.decomposition._hessenberg import hessenberg
from torchdense.linear_algebra.decomposition._lu_decomposition import (
    lu_decomposition,
)
from torchdense.linear_algebra.decomposition._qr_decomposition import (
    qr_decomposition,
)
from torchdense.linear_algebra.decomposition._result_types import (
    CholeskyDecompositionResult,
    EigenvalueDecompositionResult,
    HessenbergResult,
    LUDecompositionResult,
    QRDecompositionResult,
    SingularValueDecompositionResult,
)
from torchdense.linear_algebra.decomposition._singular_value_decomposition import (
    singular_value_decomposition,
)

__all__ = [
    "CholeskyDecompositionResult",
    "EigenvalueDecompositionResult",
    "HessenbergResult",
    "LUDecompositionResult",
    "QRDecompositionResult",
    "SingularValueDecompositionResult",
    "cholesky_decomposition",
    "eigenvalue_decomposition",
    "hessenberg",
    "lu_decomposition",
    "qr_decomposition",
    "singular_value_decomposition",
]
