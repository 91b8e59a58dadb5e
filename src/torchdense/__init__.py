"""torchdense: dense real matrix decompositions and Fourier transforms."""

from . import linear_algebra, matrix, transform
from ._exceptions import (
    DimensionMismatchError,
    DivideByZeroError,
    InternalInvariantViolation,
    InvalidArgumentError,
    MatrixIndexError,
    NumericalNonConvergenceError,
    SingularMatrixError,
    SingularMatrixWarning,
    TorchDenseError,
)
from .matrix import DenseMatrix

__all__ = [
    "DenseMatrix",
    "DimensionMismatchError",
    "DivideByZeroError",
    "InternalInvariantViolation",
    "InvalidArgumentError",
    "MatrixIndexError",
    "NumericalNonConvergenceError",
    "SingularMatrixError",
    "SingularMatrixWarning",
    "TorchDenseError",
    "linear_algebra",
    "matrix",
    "transform",
]

__version__ = "0.1.0"
