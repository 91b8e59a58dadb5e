"""Exceptions and warnings raised by torchdense."""


class TorchDenseError(Exception):
    """Base exception for all torchdense errors."""

    pass


class InvalidArgumentError(TorchDenseError, ValueError):
    """Raised when an input is malformed.

    This occurs when:
    - Data is not a 2D real matrix or has an empty dimension
    - A square matrix is required and the input is not square
    - A decomposition requires ``rows >= cols`` and the input is wide
    - A row or column selector is out of range
    - Paired Fourier transform operands differ in shape
    """

    pass


class DimensionMismatchError(TorchDenseError, ValueError):
    """Raised when two operands have incompatible shapes.

    This occurs in element-wise operations, matrix products and solves whose
    right-hand side does not have as many rows as the system matrix.
    """

    pass


class MatrixIndexError(TorchDenseError, IndexError):
    """Raised when an element is accessed outside ``[0, dim)``."""

    pass


class DivideByZeroError(TorchDenseError, ZeroDivisionError):
    """Raised when an element-wise division meets an exact zero divisor."""

    pass


class SingularMatrixError(TorchDenseError, ArithmeticError):
    """Raised by the strict solvers when the system cannot be solved.

    ``lu_solve`` raises it for singular matrices, ``qr_solve`` for rank
    deficient ones and ``cholesky_solve`` for matrices that are not
    symmetric positive definite. The high-level ``solve`` and ``inverse``
    never raise it; they fall back to the pseudo-inverse instead.
    """

    pass


class NumericalNonConvergenceError(TorchDenseError, ArithmeticError):
    """Raised when an iterative solver exhausts its iteration budget."""

    def __init__(self, algorithm: str, index: int, max_iterations: int):
        self.algorithm = algorithm
        self.index = index
        self.max_iterations = max_iterations
        super().__init__(
            f"{algorithm} did not converge for index {index} within "
            f"max_iterations={max_iterations}"
        )


class InternalInvariantViolation(AssertionError):
    """Raised when torchdense detects a bug in its own computation.

    This is never caused by caller input and is deliberately not a
    ``TorchDenseError``.
    """

    pass


class SingularMatrixWarning(RuntimeWarning):
    """Warns that a solve fell back to the pseudo-inverse path."""

    pass
