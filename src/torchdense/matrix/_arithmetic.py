"""Element-wise arithmetic and matrix products."""

import torch
from torch import Tensor

from torchdense._exceptions import DimensionMismatchError, DivideByZeroError
from torchdense.matrix._conversion import MatrixLike, as_float64, result_dtype


def _operands(
    name: str, a: MatrixLike, b: MatrixLike
) -> tuple[Tensor, Tensor, torch.dtype]:
    x = as_float64(a, name=f"{name}: a")
    y = as_float64(b, name=f"{name}: b")
    if x.shape != y.shape:
        raise DimensionMismatchError(
            f"{name}: a and b must have the same shape, got "
            f"{tuple(x.shape)} and {tuple(y.shape)}"
        )
    return x, y, torch.promote_types(result_dtype(a), result_dtype(b))


def add(a: MatrixLike, b: MatrixLike) -> Tensor:
    """Element-wise sum ``a + b``."""
    x, y, dtype = _operands("add", a, b)
    return (x + y).to(dtype)


def subtract(a: MatrixLike, b: MatrixLike) -> Tensor:
    """Element-wise difference ``a - b``."""
    x, y, dtype = _operands("subtract", a, b)
    return (x - y).to(dtype)


def dot_product(a: MatrixLike, b: MatrixLike) -> Tensor:
    """Element-wise (Hadamard) product ``a * b``."""
    x, y, dtype = _operands("dot_product", a, b)
    return (x * y).to(dtype)


def dot_division(a: MatrixLike, b: MatrixLike) -> Tensor:
    """Element-wise quotient ``a / b``.

    Raises
    ------
    DivideByZeroError
        If any element of ``b`` is exactly zero.
    """
    x, y, dtype = _operands("dot_division", a, b)
    if torch.any(y == 0):
        raise DivideByZeroError("dot_division: b contains a zero element")
    return (x / y).to(dtype)


def dot_inverse(a: MatrixLike) -> Tensor:
    """Element-wise reciprocal ``1 / a``.

    Raises
    ------
    DivideByZeroError
        If any element of ``a`` is exactly zero.
    """
    x = as_float64(a, name="dot_inverse: a")
    if torch.any(x == 0):
        raise DivideByZeroError("dot_inverse: a contains a zero element")
    return (1.0 / x).to(result_dtype(a))


def cross_product(a: MatrixLike, b: MatrixLike) -> Tensor:
    """Matrix product ``a @ b``.

    Raises
    ------
    DimensionMismatchError
        If the column count of ``a`` differs from the row count of ``b``.
    """
    x = as_float64(a, name="cross_product: a")
    y = as_float64(b, name="cross_product: b")
    if x.shape[1] != y.shape[0]:
        raise DimensionMismatchError(
            f"cross_product: a has {x.shape[1]} columns but b has "
            f"{y.shape[0]} rows"
        )
    dtype = torch.promote_types(result_dtype(a), result_dtype(b))
    return (x @ y).to(dtype)


def inner_product(a: MatrixLike, b: MatrixLike) -> float:
    """Sum of the element-wise product of two equally shaped matrices."""
    x, y, _ = _operands("inner_product", a, b)
    return torch.sum(x * y).item()
