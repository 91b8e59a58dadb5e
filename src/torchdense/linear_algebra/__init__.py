"""Dense real linear algebra.

Submodules
----------
decomposition
    LU, QR, Cholesky, Hessenberg, eigenvalue and singular value
    decompositions.
solve
    Triangular, LU, QR and Cholesky solvers, the general ``solve`` with its
    pseudo-inverse fallback, ``inverse`` and ``pseudo_inverse``.

Functions
---------
determinant
    Determinant of a square matrix from its LU decomposition.
trace
    Sum of the main diagonal.
rank
    Number of singular values above tolerance.
condition_number
    Ratio of the largest to the smallest singular value.
is_nonsingular
    Whether the LU decomposition finds no zero pivot.
is_symmetric_positive_definite
    Whether the Cholesky decomposition succeeds.
"""

from torchdense.linear_algebra import decomposition, solve
from torchdense.linear_algebra._condition_number import condition_number
from torchdense.linear_algebra._determinant import determinant
from torchdense.linear_algebra._matrix_properties import (
    is_nonsingular,
    is_symmetric_positive_definite,
)
from torchdense.linear_algebra._rank import rank
from torchdense.linear_algebra._trace import trace

__all__ = [
    "condition_number",
    "decomposition",
    "determinant",
    "is_nonsingular",
    "is_symmetric_positive_definite",
    "rank",
    "solve",
    "trace",
]
