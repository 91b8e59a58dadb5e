from torch import Tensor

from torchdense.linear_algebra.decomposition import (
    singular_value_decomposition,
)


def singular_values(x: Tensor) -> Tensor:
    """Descending singular values of a float64 matrix of any shape."""
    if x.shape[0] < x.shape[1]:
        x = x.T.contiguous()

    return singular_value_decomposition(x).singular_values
