import torch

from torchdense.matrix._conversion import MatrixLike, as_float64


def norm(a: MatrixLike) -> float:
    """Frobenius norm, the square root of the sum of squared elements."""
    return torch.sqrt(torch.sum(as_float64(a, name="norm: a") ** 2)).item()
