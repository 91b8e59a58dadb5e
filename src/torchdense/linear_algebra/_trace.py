import torch

from torchdense.matrix import MatrixLike, as_float64


def trace(a: MatrixLike) -> float:
    """Sum of the main diagonal.

    Rectangular matrices are accepted; the diagonal has ``min(m, n)``
    entries.
    """
    x = as_float64(a, name="trace: a")

    return torch.diagonal(x).sum().item()
