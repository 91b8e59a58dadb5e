"""Householder reflectors shared by the QR, Hessenberg, tridiagonal and
bidiagonal reductions."""

from typing import Optional, Tuple

import torch
from torch import Tensor


def householder_vector(x: Tensor) -> Tuple[Optional[Tensor], float]:
    r"""Reflector mapping ``x`` onto a multiple of the first unit vector.

    Returns a unit vector :math:`v` and the scalar :math:`\alpha` such that

    .. math::

        (I - 2 v v^T) x = \alpha e_1, \qquad |\alpha| = \|x\|_2.

    The sign of :math:`\alpha` is opposite to :math:`x_0` so that forming
    :math:`x - \alpha e_1` never cancels.

    Parameters
    ----------
    x : Tensor
        1D float64 tensor.

    Returns
    -------
    v : Tensor or None
        Unit reflector vector, or ``None`` when ``x`` is zero and no
        reflection is needed.
    alpha : float
        First entry of the reflected vector.
    """
    norm = torch.linalg.vector_norm(x).item()
    if norm == 0.0:
        return None, 0.0

    alpha = -norm if x[0].item() >= 0.0 else norm
    v = x.clone()
    v[0] -= alpha
    return v / torch.linalg.vector_norm(v), alpha


def reflect_rows(a: Tensor, v: Tensor, start: int) -> None:
    """In place ``a[start:, :] = (I - 2 v v^T) a[start:, :]``."""
    block = a[start:, :]
    block -= 2.0 * torch.outer(v, v @ block)


def reflect_columns(a: Tensor, v: Tensor, start: int) -> None:
    """In place ``a[:, start:] = a[:, start:] (I - 2 v v^T)``."""
    block = a[:, start:]
    block -= 2.0 * torch.outer(block @ v, v)
