"""Linear system solvers.

Functions
---------
forward_substitution, back_substitution
    Solve lower and upper triangular systems.

lu_solve
    Solves a square system from its LU decomposition. Raises
    ``SingularMatrixError`` for singular matrices.

qr_solve
    Least squares solution from the QR decomposition. Raises
    ``SingularMatrixError`` for rank deficient matrices.

cholesky_solve
    Solves a symmetric positive definite system from its Cholesky
    decomposition.

solve
    Solves AX = B by LU (square), QR least squares (tall) or the
    minimum-norm pseudo-inverse solution (wide). Singular systems fall back
    to the pseudo-inverse with a ``SingularMatrixWarning``.

solve_transpose
    Solves XA = B.

inverse
    Inverse of A as the solution of AX = I, with the same fallback as
    ``solve``.

pseudo_inverse
    Moore-Penrose pseudo-inverse through the singular value decomposition.
"""

from torchdense.linear_algebra.solve._cholesky_solve import cholesky_solve
from torchdense.linear_algebra.solve._inverse import inverse
from torchdense.linear_algebra.solve._lu_solve import lu_solve
from torchdense.linear_algebra.solve._pseudo_inverse import pseudo_inverse
from torchdense.linear_algebra.solve._qr_solve import qr_solve
from torchdense.linear_algebra.solve._solve import solve, solve_transpose
from torchdense.linear_algebra.solve._triangular import (
    back_substitution,
    forward_substitution,
)

__all__ = [
    "back_substitution",
    "cholesky_solve",
    "forward_substitution",
    "inverse",
    "lu_solve",
    "pseudo_inverse",
    "qr_solve",
    "solve",
    "solve_transpose",
]
