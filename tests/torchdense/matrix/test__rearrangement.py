"""Tests for row and column rearrangements."""

import pytest
import torch

from torchdense import InvalidArgumentError
from torchdense.matrix import (
    flip_columns,
    flip_rows,
    swap_columns,
    swap_rows,
    transpose,
)


@pytest.fixture
def a():
    return torch.tensor([[1.0, 2.0, 3.0], [4.0, 5.0, 6.0]], dtype=torch.float64)


class TestRearrangement:
    """Tests for transpose, flips and swaps."""

    def test_transpose(self, a):
        """Test transpose against Tensor.T."""
        torch.testing.assert_close(transpose(a), a.T)

    def test_transpose_twice_is_identity(self, a):
        """Test that transposing twice returns the original."""
        torch.testing.assert_close(transpose(transpose(a)), a)

    def test_flip_rows(self, a):
        """Test upside-down flip."""
        torch.testing.assert_close(flip_rows(a), a.flip(0))

    def test_flip_columns(self, a):
        """Test left-right flip."""
        torch.testing.assert_close(flip_columns(a), a.flip(1))

    def test_swap_rows(self, a):
        """Test row exchange returns a new tensor."""
        result = swap_rows(a, 0, 1)

        torch.testing.assert_close(result, a[[1, 0]])
        assert a[0, 0] == 1.0

    def test_swap_columns(self, a):
        """Test column exchange."""
        torch.testing.assert_close(swap_columns(a, 0, 2), a[:, [2, 1, 0]])

    def test_swap_same_index(self, a):
        """Test swapping an index with itself is a copy."""
        torch.testing.assert_close(swap_rows(a, 1, 1), a)

    def test_bad_selectors_raise(self, a):
        """Test out-of-range row and column selectors."""
        with pytest.raises(InvalidArgumentError, match="row 2"):
            swap_rows(a, 0, 2)
        with pytest.raises(InvalidArgumentError, match="column -1"):
            swap_columns(a, -1, 0)
