"""Plane rotations applied to pairs of columns."""

from torch import Tensor


def rotate_columns(x: Tensor, j: int, k: int, c: float, s: float) -> None:
    """In place ``(x[:, j], x[:, k]) <- (c x_j + s x_k, -s x_j + c x_k)``."""
    xj = x[:, j].clone()
    xk = x[:, k].clone()
    x[:, j] = c * xj + s * xk
    x[:, k] = c * xk - s * xj
