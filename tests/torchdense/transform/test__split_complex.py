"""Tests for SplitComplex and centre_spectrum."""

import math

import numpy
import pytest
import torch

from torchdense import InvalidArgumentError
from torchdense.transform import SplitComplex, centre_spectrum, split_complex


class TestSplitComplex:
    """Tests for SplitComplex."""

    def test_from_complex(self):
        """Test split_complex separates the parts."""
        z = torch.tensor([1.0 + 2.0j, -3.0 - 4.0j], dtype=torch.complex128)

        s = split_complex(z)

        torch.testing.assert_close(
            s.real_part, torch.tensor([1.0, -3.0], dtype=torch.float64)
        )
        torch.testing.assert_close(
            s.imaginary_part, torch.tensor([2.0, -4.0], dtype=torch.float64)
        )
        torch.testing.assert_close(s.to_complex(), z)

    def test_from_real(self):
        """Test a real tensor gets a zero imaginary part."""
        s = split_complex(torch.ones(2, 3))

        assert s.batch_size == torch.Size([2, 3])
        assert torch.all(s.imaginary_part == 0)

    def test_dtype(self):
        """Test the dtype argument."""
        s = split_complex(torch.ones(3, dtype=torch.complex128), dtype=torch.float32)

        assert s.real_part.dtype == torch.float32

    def test_conjugated(self):
        """Test conjugation negates only the imaginary part."""
        s = split_complex(torch.tensor([1.0 + 1.0j], dtype=torch.complex128))

        c = s.conjugated()

        assert c.real_part.item() == 1.0
        assert c.imaginary_part.item() == -1.0
        assert s.imaginary_part.item() == 1.0

    def test_magnitude_and_phase(self):
        """Test modulus and argument."""
        s = split_complex(torch.tensor([3.0 + 4.0j, -1.0 + 0.0j]))

        torch.testing.assert_close(s.magnitude(), torch.tensor([5.0, 1.0]))
        assert s.phase()[1].item() == pytest.approx(math.pi)

    def test_indexing(self):
        """Test indexing applies to both parts."""
        s = split_complex(torch.arange(6, dtype=torch.float64).reshape(2, 3) * 1j)

        row = s[1]

        assert isinstance(row, SplitComplex)
        torch.testing.assert_close(
            row.imaginary_part, torch.tensor([3.0, 4.0, 5.0], dtype=torch.float64)
        )

    def test_non_tensor_raises(self):
        """Test a list is rejected."""
        with pytest.raises(InvalidArgumentError):
            split_complex([1.0, 2.0])


class TestCentreSpectrum:
    """Tests for centre_spectrum."""

    @pytest.mark.parametrize("shape", [(4, 6), (5, 7), (1, 4), (3, 1)])
    def test_matches_numpy_fftshift_2d(self, shape):
        """Test against numpy.fft.fftshift for even and odd sizes."""
        x = torch.arange(shape[0] * shape[1], dtype=torch.float64).reshape(shape)

        torch.testing.assert_close(
            centre_spectrum(x), torch.from_numpy(numpy.fft.fftshift(x.numpy()))
        )

    @pytest.mark.parametrize("n", [1, 8, 9])
    def test_matches_numpy_fftshift_1d(self, n):
        """Test 1D spectra."""
        x = torch.arange(n, dtype=torch.float64)

        torch.testing.assert_close(
            centre_spectrum(x), torch.from_numpy(numpy.fft.fftshift(x.numpy()))
        )

    def test_dc_moves_to_centre(self):
        """Test the DC term lands at (m // 2, n // 2)."""
        x = torch.zeros(5, 6)
        x[0, 0] = 1.0

        centred = centre_spectrum(x)

        assert centred[2, 3].item() == 1.0

    def test_split_complex(self):
        """Test both parts of a SplitComplex are shifted."""
        z = torch.arange(12, dtype=torch.float64).reshape(3, 4)
        s = split_complex(torch.complex(z, -z))

        centred = centre_spectrum(s)

        assert isinstance(centred, SplitComplex)
        expected = torch.from_numpy(numpy.fft.fftshift(z.numpy()))
        torch.testing.assert_close(centred.real_part, expected)
        torch.testing.assert_close(centred.imaginary_part, -expected)

    def test_three_dimensional_raises(self):
        """Test 3D input raises."""
        with pytest.raises(InvalidArgumentError, match="1D or 2D"):
            centre_spectrum(torch.zeros(2, 2, 2))
