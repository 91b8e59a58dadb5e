import math

from torchdense.linear_algebra._singular_values import singular_values
from torchdense.matrix import MatrixLike, as_float64


def condition_number(a: MatrixLike) -> float:
    r"""
    Two-norm condition number :math:`\sigma_{\max} / \sigma_{\min}`.

    Returns ``inf`` when the smallest singular value is exactly zero.
    """
    x = as_float64(a, name="condition_number: a")
    s = singular_values(x)

    s_max = s[0].item()
    s_min = s[-1].item()
    if s_min == 0.0:
        return math.inf

    return s_max / s_min
