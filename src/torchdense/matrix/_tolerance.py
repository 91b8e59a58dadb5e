"""Tolerance policy shared by the singularity, rank and symmetry checks."""

import torch
from torch import Tensor

# Unit roundoff of IEEE double precision, 2 ** -52.
EPS = torch.finfo(torch.float64).eps


def default_tolerance(a: Tensor) -> float:
    r"""Default absolute tolerance for treating an entry of ``a`` as zero.

    .. math::

        \text{tol} = \max(m, n) \cdot \varepsilon \cdot \max_{ij} |a_{ij}|

    with :math:`\varepsilon = 2^{-52}`. A zero matrix gets ``0.0``, so only
    exact zeros count as zero there.

    Parameters
    ----------
    a : Tensor
        Matrix of shape ``(m, n)``.

    Returns
    -------
    float
        Non-negative tolerance.
    """
    m, n = a.shape
    if a.numel() == 0:
        return 0.0
    return max(m, n) * EPS * torch.max(torch.abs(a)).item()
