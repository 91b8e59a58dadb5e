"""Tests for Cholesky decomposition."""

import math

import pytest
import scipy.linalg
import torch

from torchdense import InvalidArgumentError
from torchdense.linear_algebra.decomposition import (
    CholeskyDecompositionResult,
    cholesky_decomposition,
)


def random_spd(n: int, seed: int) -> torch.Tensor:
    torch.manual_seed(seed)
    b = torch.randn(n, n, dtype=torch.float64)
    return b @ b.T + n * torch.eye(n, dtype=torch.float64)


class TestCholeskyDecomposition:
    """Tests for cholesky_decomposition."""

    def test_two_by_two(self):
        """Test [[4, 2], [2, 3]] gives L = [[2, 0], [1, sqrt(2)]]."""
        a = torch.tensor([[4.0, 2.0], [2.0, 3.0]], dtype=torch.float64)

        result = cholesky_decomposition(a)

        assert isinstance(result, CholeskyDecompositionResult)
        assert result.is_spd
        expected = torch.tensor(
            [[2.0, 0.0], [1.0, math.sqrt(2.0)]], dtype=torch.float64
        )
        torch.testing.assert_close(result.L, expected)

    def test_reconstruction(self):
        """Test A = L @ L^T."""
        a = random_spd(6, 0)

        L = cholesky_decomposition(a).L

        torch.testing.assert_close(L @ L.T, a, rtol=1e-10, atol=1e-10)
        assert torch.all(torch.triu(L, diagonal=1) == 0)

    def test_matches_scipy(self):
        """Test against scipy.linalg.cholesky(lower=True)."""
        a = random_spd(5, 1)

        expected = scipy.linalg.cholesky(a.numpy(), lower=True)

        torch.testing.assert_close(
            cholesky_decomposition(a).L,
            torch.from_numpy(expected),
            rtol=1e-10,
            atol=1e-10,
        )

    def test_indefinite(self):
        """Test a symmetric indefinite matrix stops at the first bad pivot."""
        a = torch.tensor(
            [[4.0, 2.0, 0.0], [2.0, 1.0, 0.0], [0.0, 0.0, 1.0]],
            dtype=torch.float64,
        )

        result = cholesky_decomposition(a)

        assert not result.is_spd
        torch.testing.assert_close(
            result.L[0], torch.tensor([2.0, 0.0, 0.0], dtype=torch.float64)
        )
        assert torch.all(result.L[1:] == 0)

    def test_negative_definite(self):
        """Test a negative first pivot leaves L all zero."""
        result = cholesky_decomposition([[-1.0, 0.0], [0.0, -1.0]])

        assert not result.is_spd
        assert torch.all(result.L == 0)

    def test_non_symmetric(self):
        """Test a non-symmetric matrix is not reported SPD."""
        a = torch.tensor([[4.0, 1.0], [2.0, 3.0]], dtype=torch.float64)

        result = cholesky_decomposition(a)

        assert not result.is_spd
        assert torch.all(torch.isfinite(result.L))

    def test_one_by_one(self):
        """Test the 1x1 case."""
        result = cholesky_decomposition([[9.0]])

        assert result.is_spd
        assert result.L.item() == 3.0

    def test_non_square_raises(self):
        """Test rectangular input raises."""
        with pytest.raises(InvalidArgumentError, match="square"):
            cholesky_decomposition(torch.ones(2, 3))
