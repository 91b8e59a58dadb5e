"""Tests for real eigenvalue decomposition."""

import numpy
import pytest
import scipy.linalg
import torch

from torchdense import InvalidArgumentError, NumericalNonConvergenceError
from torchdense.linear_algebra.decomposition import (
    EigenvalueDecompositionResult,
    eigenvalue_decomposition,
)


def sorted_complex(values) -> numpy.ndarray:
    values = numpy.asarray(values, dtype=numpy.complex128)
    return values[numpy.lexsort((values.imag, values.real))]


class TestSymmetricEigenvalueDecomposition:
    """Tests for the symmetric (tridiagonal QL) path."""

    def test_swap_matrix(self):
        """Test [[0, 1], [1, 0]] has eigenvalues -1 and 1."""
        a = torch.tensor([[0.0, 1.0], [1.0, 0.0]], dtype=torch.float64)

        result = eigenvalue_decomposition(a)

        assert isinstance(result, EigenvalueDecompositionResult)
        assert result.is_symmetric
        torch.testing.assert_close(
            result.eigenvalues_real,
            torch.tensor([-1.0, 1.0], dtype=torch.float64),
        )
        assert torch.all(result.eigenvalues_imag == 0)

    def test_reconstruction(self):
        """Test A = V D V^T with orthogonal V."""
        torch.manual_seed(42)
        b = torch.randn(6, 6, dtype=torch.float64)
        a = b + b.T

        result = eigenvalue_decomposition(a)

        torch.testing.assert_close(
            result.V @ result.D @ result.V.T, a, rtol=1e-10, atol=1e-10
        )
        torch.testing.assert_close(
            result.V.T @ result.V,
            torch.eye(6, dtype=torch.float64),
            rtol=1e-10,
            atol=1e-10,
        )

    def test_ascending_and_matches_scipy(self):
        """Test eigenvalues are ascending and agree with scipy.linalg.eigh."""
        torch.manual_seed(7)
        b = torch.randn(8, 8, dtype=torch.float64)
        a = b @ b.T - 2.0 * torch.eye(8, dtype=torch.float64)

        result = eigenvalue_decomposition(a)

        expected = scipy.linalg.eigh(a.numpy(), eigvals_only=True)
        torch.testing.assert_close(
            result.eigenvalues_real,
            torch.from_numpy(expected),
            rtol=1e-10,
            atol=1e-10,
        )
        assert torch.all(result.eigenvalues_real[1:] >= result.eigenvalues_real[:-1])

    def test_diagonal_matrix(self):
        """Test a diagonal matrix returns its sorted diagonal."""
        a = torch.diag(torch.tensor([3.0, -1.0, 2.0], dtype=torch.float64))

        result = eigenvalue_decomposition(a)

        torch.testing.assert_close(
            result.eigenvalues_real,
            torch.tensor([-1.0, 2.0, 3.0], dtype=torch.float64),
        )

    def test_repeated_eigenvalues(self):
        """Test the identity has an orthogonal eigenbasis."""
        result = eigenvalue_decomposition(torch.eye(4, dtype=torch.float64))

        torch.testing.assert_close(
            result.eigenvalues_real, torch.ones(4, dtype=torch.float64)
        )
        torch.testing.assert_close(
            result.V.T @ result.V, torch.eye(4, dtype=torch.float64)
        )

    def test_one_by_one(self):
        """Test the 1x1 case."""
        result = eigenvalue_decomposition([[2.5]])

        assert result.is_symmetric
        assert result.eigenvalues_real.item() == 2.5
        assert result.V.item() == 1.0


class TestNonSymmetricEigenvalueDecomposition:
    """Tests for the Hessenberg / real Schur path."""

    def test_rotation_matrix(self):
        """Test [[0, 1], [-1, 0]] has eigenvalues +i and -i."""
        a = torch.tensor([[0.0, 1.0], [-1.0, 0.0]], dtype=torch.float64)

        result = eigenvalue_decomposition(a)

        assert not result.is_symmetric
        torch.testing.assert_close(
            result.eigenvalues_real, torch.zeros(2, dtype=torch.float64)
        )
        torch.testing.assert_close(
            result.eigenvalues_imag,
            torch.tensor([1.0, -1.0], dtype=torch.float64),
        )
        torch.testing.assert_close(
            result.D, torch.tensor([[0.0, 1.0], [-1.0, 0.0]], dtype=torch.float64)
        )

    @pytest.mark.parametrize("seed", [0, 1, 2, 3])
    def test_av_equals_vd(self, seed):
        """Test A V = V D for random general matrices."""
        torch.manual_seed(seed)
        a = torch.randn(7, 7, dtype=torch.float64)

        result = eigenvalue_decomposition(a)

        torch.testing.assert_close(
            a @ result.V, result.V @ result.D, rtol=1e-8, atol=1e-8
        )

    def test_matches_scipy_eigenvalues(self):
        """Test eigenvalues against scipy.linalg.eigvals."""
        torch.manual_seed(21)
        a = torch.randn(9, 9, dtype=torch.float64)

        result = eigenvalue_decomposition(a)

        actual = sorted_complex(
            result.eigenvalues_real.numpy() + 1j * result.eigenvalues_imag.numpy()
        )
        expected = sorted_complex(scipy.linalg.eigvals(a.numpy()))
        numpy.testing.assert_allclose(actual, expected, rtol=1e-9, atol=1e-9)

    def test_complex_eigenvectors(self):
        """Test paired columns form complex eigenvectors."""
        torch.manual_seed(4)
        a = torch.randn(6, 6, dtype=torch.float64)

        result = eigenvalue_decomposition(a)
        imag = result.eigenvalues_imag

        for j in range(5):
            if imag[j] > 0:
                lam = complex(result.eigenvalues_real[j].item(), imag[j].item())
                v = torch.complex(result.V[:, j], result.V[:, j + 1])
                torch.testing.assert_close(
                    a.to(torch.complex128) @ v, lam * v, rtol=1e-8, atol=1e-8
                )

    def test_block_structure_of_d(self):
        """Test D is zero outside its diagonal and 2x2 blocks."""
        torch.manual_seed(8)
        a = torch.randn(6, 6, dtype=torch.float64)

        D = eigenvalue_decomposition(a).D

        assert torch.all(torch.triu(D, diagonal=2) == 0)
        assert torch.all(torch.tril(D, diagonal=-2) == 0)

    def test_upper_triangular(self):
        """Test eigenvalues of a triangular matrix are its diagonal."""
        a = torch.tensor(
            [[1.0, 2.0, 3.0], [0.0, 4.0, 5.0], [0.0, 0.0, 6.0]],
            dtype=torch.float64,
        )

        result = eigenvalue_decomposition(a)

        assert sorted(result.eigenvalues_real.tolist()) == pytest.approx(
            [1.0, 4.0, 6.0]
        )
        torch.testing.assert_close(
            a @ result.V, result.V @ result.D, rtol=1e-10, atol=1e-10
        )

    def test_zero_matrix(self):
        """Test the zero matrix is handled by the symmetric path."""
        result = eigenvalue_decomposition(torch.zeros(3, 3, dtype=torch.float64))

        assert torch.all(result.eigenvalues_real == 0)


class TestEigenvalueDecompositionErrors:
    """Tests for argument validation and iteration limits."""

    def test_non_square_raises(self):
        """Test rectangular input raises."""
        with pytest.raises(InvalidArgumentError, match="square"):
            eigenvalue_decomposition(torch.ones(2, 3))

    def test_max_iterations_validated(self):
        """Test a non-positive iteration budget raises."""
        with pytest.raises(InvalidArgumentError, match="max_iterations"):
            eigenvalue_decomposition(torch.eye(2), max_iterations=0)

    def test_non_convergence(self):
        """Test that a budget of one sweep is not enough for a random matrix."""
        torch.manual_seed(0)
        a = torch.randn(10, 10, dtype=torch.float64)

        with pytest.raises(NumericalNonConvergenceError) as info:
            eigenvalue_decomposition(a, max_iterations=1)

        assert info.value.max_iterations == 1
        assert isinstance(info.value, ArithmeticError)

    def test_symmetry_tolerance(self):
        """Test tol decides which path a nearly symmetric matrix takes."""
        a = torch.tensor([[2.0, 1.0], [1.0 + 1e-9, 3.0]], dtype=torch.float64)

        assert not eigenvalue_decomposition(a).is_symmetric
        assert eigenvalue_decomposition(a, tol=1e-6).is_symmetric
