"""Dense real matrices and element-wise matrix tools.

Classes
-------
DenseMatrix
    Mutable ``rows x cols`` grid of real numbers with bounds-checked
    element access. Construction copies its input.

Conversion
----------
as_float64
    Validate a matrix-like input and return an independent float64 copy.
result_dtype
    Floating dtype results are returned in for a given input.
to_dense_matrix
    Wrap a 2D real tensor in a ``DenseMatrix``.

Functions
---------
add, subtract, dot_product, dot_division, dot_inverse
    Element-wise arithmetic on equally shaped matrices.
cross_product
    Matrix product.
inner_product
    Sum of the element-wise product.
transpose, flip_rows, flip_columns, swap_rows, swap_columns
    Row and column rearrangements.
is_equal, is_symmetric
    Exact and tolerance-based comparisons.
norm
    Frobenius norm.
random_matrix, uniform_matrix
    Constructors.
default_tolerance
    Tolerance used to decide whether an entry counts as zero.
"""

from torchdense.matrix._arithmetic import (
    add,
    cross_product,
    dot_division,
    dot_inverse,
    dot_product,
    inner_product,
    subtract,
)
from torchdense.matrix._comparison import is_equal, is_symmetric
from torchdense.matrix._construction import random_matrix, uniform_matrix
from torchdense.matrix._conversion import (
    MatrixLike,
    as_float64,
    result_dtype,
    to_dense_matrix,
)
from torchdense.matrix._dense_matrix import DenseMatrix
from torchdense.matrix._norm import norm
from torchdense.matrix._rearrangement import (
    flip_columns,
    flip_rows,
    swap_columns,
    swap_rows,
    transpose,
)
from torchdense.matrix._tolerance import default_tolerance

__all__ = [
    "DenseMatrix",
    "MatrixLike",
    "add",
    "as_float64",
    "cross_product",
    "default_tolerance",
    "dot_division",
    "dot_inverse",
    "dot_product",
    "flip_columns",
    "flip_rows",
    "inner_product",
    "is_equal",
    "is_symmetric",
    "norm",
    "random_matrix",
    "result_dtype",
    "subtract",
    "swap_columns",
    "swap_rows",
    "to_dense_matrix",
    "transpose",
    "uniform_matrix",
]
