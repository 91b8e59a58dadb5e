"""Tests for fourier_transform_1d, fourier_transform_2d and their inverses."""

import numpy
import pytest
import torch

from torchdense import InvalidArgumentError
from torchdense.matrix import DenseMatrix
from torchdense.transform import (
    SplitComplex,
    fourier_transform_1d,
    fourier_transform_2d,
    inverse_fourier_transform_1d,
    inverse_fourier_transform_1d_complex,
    inverse_fourier_transform_2d,
    inverse_fourier_transform_2d_complex,
)


class TestFourierTransform1D:
    """Tests for fourier_transform_1d."""

    def test_basic_real_input(self):
        """Test a real sequence against torch.fft.fft."""
        x = torch.tensor([1.0, 2.0, 3.0, 4.0], dtype=torch.float64)

        spectrum = fourier_transform_1d(x)

        assert isinstance(spectrum, SplitComplex)
        torch.testing.assert_close(spectrum.to_complex(), torch.fft.fft(x))

    @pytest.mark.parametrize("n", [5, 16, 30, 53])
    def test_matches_numpy(self, n):
        """Test lengths on every path against numpy.fft.fft."""
        torch.manual_seed(n)
        x = torch.randn(n, dtype=torch.float64)

        expected = torch.from_numpy(numpy.fft.fft(x.numpy()))

        torch.testing.assert_close(
            fourier_transform_1d(x).to_complex(), expected, rtol=1e-9, atol=1e-9
        )

    def test_complex_input(self):
        """Test a complex sequence."""
        torch.manual_seed(0)
        x = torch.randn(12, dtype=torch.complex128)

        torch.testing.assert_close(
            fourier_transform_1d(x).to_complex(),
            torch.fft.fft(x),
            rtol=1e-10,
            atol=1e-10,
        )

    def test_zero_padding(self):
        """Test n > length pads with zeros."""
        torch.manual_seed(1)
        x = torch.randn(5, dtype=torch.float64)

        spectrum = fourier_transform_1d(x, n=8)

        assert spectrum.shape == (8,)
        torch.testing.assert_close(
            spectrum.to_complex(), torch.fft.fft(x, n=8), rtol=1e-10, atol=1e-10
        )

    def test_n_too_small_raises(self):
        """Test n smaller than the sequence raises."""
        with pytest.raises(InvalidArgumentError, match="n must be >="):
            fourier_transform_1d(torch.ones(8), n=4)

    def test_dtype_preserved(self):
        """Test float32 input gives float32 parts."""
        spectrum = fourier_transform_1d(torch.ones(6))

        assert spectrum.real_part.dtype == torch.float32
        assert spectrum.imaginary_part.dtype == torch.float32

    def test_empty_raises(self):
        """Test an empty sequence raises."""
        with pytest.raises(InvalidArgumentError, match="empty"):
            fourier_transform_1d(torch.ones(0))

    def test_wrong_dimension_raises(self):
        """Test a matrix is rejected."""
        with pytest.raises(InvalidArgumentError, match="1D"):
            fourier_transform_1d(torch.ones(2, 2))

    def test_non_finite_raises(self):
        """Test NaN input raises."""
        with pytest.raises(InvalidArgumentError, match="NaN"):
            fourier_transform_1d(torch.tensor([1.0, float("nan")]))


class TestInverseFourierTransform1D:
    """Tests for the 1D inverse transforms."""

    @pytest.mark.parametrize("n", [1, 7, 16, 21])
    def test_round_trip(self, n):
        """Test inverse(forward(x)) = x for real x."""
        torch.manual_seed(n)
        x = torch.randn(n, dtype=torch.float64)

        torch.testing.assert_close(
            inverse_fourier_transform_1d(fourier_transform_1d(x)),
            x,
            rtol=1e-10,
            atol=1e-10,
        )

    def test_complex_round_trip(self):
        """Test the complex inverse recovers a complex sequence."""
        torch.manual_seed(2)
        x = torch.randn(10, dtype=torch.complex128)

        result = inverse_fourier_transform_1d_complex(fourier_transform_1d(x))

        torch.testing.assert_close(result.to_complex(), x, rtol=1e-10, atol=1e-10)

    def test_accepts_complex_tensor(self):
        """Test a complex tensor spectrum is accepted."""
        spectrum = torch.fft.fft(torch.arange(6, dtype=torch.float64))

        torch.testing.assert_close(
            inverse_fourier_transform_1d(spectrum),
            torch.arange(6, dtype=torch.float64),
            rtol=1e-10,
            atol=1e-10,
        )


class TestFourierTransform2D:
    """Tests for fourier_transform_2d."""

    def test_constant_matrix(self):
        """Test a constant matrix has all its energy at DC."""
        x = torch.full((4, 6), 3.0, dtype=torch.float64)

        spectrum = fourier_transform_2d(x).to_complex()

        assert spectrum[0, 0].real.item() == pytest.approx(72.0)
        spectrum[0, 0] = 0.0
        torch.testing.assert_close(
            spectrum,
            torch.zeros(4, 6, dtype=torch.complex128),
            rtol=0,
            atol=1e-12,
        )

    @pytest.mark.parametrize("shape", [(8, 8), (3, 10), (7, 1), (5, 41)])
    def test_matches_numpy(self, shape):
        """Test against numpy.fft.fft2."""
        torch.manual_seed(3)
        x = torch.randn(*shape, dtype=torch.float64)

        expected = torch.from_numpy(numpy.fft.fft2(x.numpy()))

        torch.testing.assert_close(
            fourier_transform_2d(x).to_complex(), expected, rtol=1e-9, atol=1e-9
        )

    @pytest.mark.parametrize("shape", [(8, 6), (5, 7), (1, 4)])
    def test_hermitian_symmetry(self, shape):
        """Test F((-u) mod m, (-v) mod n) = conj(F(u, v)) for real input."""
        torch.manual_seed(6)
        x = torch.randn(*shape, dtype=torch.float64)

        spectrum = fourier_transform_2d(x).to_complex()

        m, n = shape
        rows = (-torch.arange(m)) % m
        cols = (-torch.arange(n)) % n
        mirrored = spectrum[rows][:, cols]

        torch.testing.assert_close(
            mirrored, torch.conj_physical(spectrum), rtol=1e-10, atol=1e-10
        )
        # DC and, for even sizes, the Nyquist row and column are real.
        assert abs(spectrum[0, 0].imag.item()) < 1e-10
        if m % 2 == 0:
            assert spectrum[m // 2, 0].imag.abs().item() < 1e-10
        if n % 2 == 0:
            assert spectrum[0, n // 2].imag.abs().item() < 1e-10

    def test_dense_matrix_input(self):
        """Test a DenseMatrix is accepted."""
        m = DenseMatrix([[1.0, 2.0], [3.0, 4.0]], dtype=torch.float64)

        spectrum = fourier_transform_2d(m)

        torch.testing.assert_close(
            spectrum.real_part,
            torch.tensor([[10.0, -2.0], [-4.0, 0.0]], dtype=torch.float64),
        )

    def test_wrong_dimension_raises(self):
        """Test a vector is rejected."""
        with pytest.raises(InvalidArgumentError, match="2D"):
            fourier_transform_2d(torch.ones(4))


class TestInverseFourierTransform2D:
    """Tests for the 2D inverse transforms."""

    @pytest.mark.parametrize("shape", [(4, 4), (6, 9), (1, 13)])
    def test_round_trip(self, shape):
        """Test inverse(forward(x)) = x."""
        torch.manual_seed(4)
        x = torch.randn(*shape, dtype=torch.float64)

        torch.testing.assert_close(
            inverse_fourier_transform_2d(fourier_transform_2d(x)),
            x,
            rtol=1e-10,
            atol=1e-10,
        )

    def test_complex_matches_numpy(self):
        """Test the complex inverse against numpy.fft.ifft2."""
        torch.manual_seed(5)
        spectrum = torch.randn(6, 10, dtype=torch.complex128)

        expected = torch.from_numpy(numpy.fft.ifft2(spectrum.numpy()))

        torch.testing.assert_close(
            inverse_fourier_transform_2d_complex(spectrum).to_complex(),
            expected,
            rtol=1e-10,
            atol=1e-10,
        )
