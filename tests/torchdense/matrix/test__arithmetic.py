"""Tests for element-wise arithmetic and matrix products."""

import pytest
import torch

from torchdense import DimensionMismatchError, DivideByZeroError
from torchdense.matrix import (
    DenseMatrix,
    add,
    cross_product,
    dot_division,
    dot_inverse,
    dot_product,
    inner_product,
    subtract,
)


class TestElementWise:
    """Tests for add, subtract, dot_product, dot_division, dot_inverse."""

    def test_add_subtract(self):
        """Test element-wise sum and difference."""
        a = torch.tensor([[1.0, 2.0], [3.0, 4.0]], dtype=torch.float64)
        b = torch.tensor([[0.5, 0.5], [1.0, -1.0]], dtype=torch.float64)

        torch.testing.assert_close(add(a, b), a + b)
        torch.testing.assert_close(subtract(a, b), a - b)

    def test_dot_product_and_division(self):
        """Test Hadamard product and quotient."""
        a = torch.tensor([[2.0, 4.0]], dtype=torch.float64)
        b = torch.tensor([[4.0, 8.0]], dtype=torch.float64)

        torch.testing.assert_close(
            dot_product(a, b), torch.tensor([[8.0, 32.0]], dtype=torch.float64)
        )
        torch.testing.assert_close(
            dot_division(a, b), torch.tensor([[0.5, 0.5]], dtype=torch.float64)
        )

    def test_dot_inverse(self):
        """Test element-wise reciprocal."""
        a = torch.tensor([[2.0, -4.0]], dtype=torch.float64)

        torch.testing.assert_close(
            dot_inverse(a), torch.tensor([[0.5, -0.25]], dtype=torch.float64)
        )

    def test_division_by_zero_raises(self):
        """Test that an exact zero divisor raises DivideByZeroError."""
        a = torch.ones(2, 2)
        b = torch.tensor([[1.0, 0.0], [1.0, 1.0]])

        with pytest.raises(DivideByZeroError):
            dot_division(a, b)
        with pytest.raises(DivideByZeroError):
            dot_inverse(b)
        with pytest.raises(ZeroDivisionError):
            dot_inverse(b)

    def test_shape_mismatch_raises(self):
        """Test that unequal shapes raise DimensionMismatchError."""
        with pytest.raises(DimensionMismatchError, match="same shape"):
            add(torch.ones(2, 2), torch.ones(2, 3))
        with pytest.raises(ValueError):
            dot_product(torch.ones(1, 2), torch.ones(2, 1))

    def test_dense_matrix_operands(self):
        """Test DenseMatrix inputs keep their dtype."""
        a = DenseMatrix([[1.0, 2.0]], dtype=torch.float64)
        b = DenseMatrix([[3.0, 4.0]], dtype=torch.float64)

        result = add(a, b)

        assert isinstance(result, torch.Tensor)
        assert result.dtype == torch.float64
        torch.testing.assert_close(
            result, torch.tensor([[4.0, 6.0]], dtype=torch.float64)
        )

    def test_inputs_not_modified(self):
        """Test that operands are left untouched."""
        a = torch.ones(2, 2)
        b = torch.full((2, 2), 2.0)
        subtract(a, b)

        assert torch.equal(a, torch.ones(2, 2))
        assert torch.equal(b, torch.full((2, 2), 2.0))


class TestProducts:
    """Tests for cross_product and inner_product."""

    def test_cross_product_matches_matmul(self):
        """Test the matrix product against torch.matmul."""
        torch.manual_seed(0)
        a = torch.randn(3, 4, dtype=torch.float64)
        b = torch.randn(4, 2, dtype=torch.float64)

        torch.testing.assert_close(cross_product(a, b), a @ b)

    def test_cross_product_inner_dimension_mismatch(self):
        """Test that incompatible inner dimensions raise."""
        with pytest.raises(DimensionMismatchError, match="columns"):
            cross_product(torch.ones(2, 3), torch.ones(2, 3))

    def test_inner_product(self):
        """Test sum of the element-wise product."""
        a = torch.tensor([[1.0, 2.0], [3.0, 4.0]])
        b = torch.tensor([[1.0, 0.0], [0.0, 1.0]])

        assert inner_product(a, b) == 5.0
