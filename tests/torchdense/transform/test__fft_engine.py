"""Tests for the any-length FFT engine."""

import numpy
import pytest
import torch

from torchdense.transform._fft_engine import (
    DIRECT_DFT_MAX_PRIME,
    fft,
    fft2,
    ifft,
    ifft2,
)


def random_complex(*shape) -> torch.Tensor:
    return torch.complex(
        torch.randn(*shape, dtype=torch.float64),
        torch.randn(*shape, dtype=torch.float64),
    )


class TestFFT:
    """Tests for fft against torch.fft.fft."""

    @pytest.mark.parametrize("n", [1, 2, 4, 8, 64, 1024])
    def test_power_of_two(self, n):
        """Test the radix-2 path."""
        torch.manual_seed(n)
        x = random_complex(n)

        torch.testing.assert_close(fft(x), torch.fft.fft(x), rtol=1e-10, atol=1e-10)

    @pytest.mark.parametrize("n", [6, 12, 15, 45, 100, 243])
    def test_composite(self, n):
        """Test the mixed-radix path."""
        torch.manual_seed(n)
        x = random_complex(n)

        torch.testing.assert_close(fft(x), torch.fft.fft(x), rtol=1e-10, atol=1e-10)

    @pytest.mark.parametrize("n", [3, 5, 7, 13, 31])
    def test_small_prime(self, n):
        """Test the direct DFT path."""
        assert n <= DIRECT_DFT_MAX_PRIME
        torch.manual_seed(n)
        x = random_complex(n)

        torch.testing.assert_close(fft(x), torch.fft.fft(x), rtol=1e-10, atol=1e-10)

    @pytest.mark.parametrize("n", [37, 101, 257])
    def test_large_prime(self, n):
        """Test the Bluestein path."""
        assert n > DIRECT_DFT_MAX_PRIME
        torch.manual_seed(n)
        x = random_complex(n)

        torch.testing.assert_close(fft(x), torch.fft.fft(x), rtol=1e-9, atol=1e-9)

    def test_composite_with_large_prime_factor(self):
        """Test a length whose cofactor takes the Bluestein path."""
        torch.manual_seed(0)
        x = random_complex(2 * 37)

        torch.testing.assert_close(fft(x), torch.fft.fft(x), rtol=1e-9, atol=1e-9)

    def test_batched(self):
        """Test leading dimensions are transformed independently."""
        torch.manual_seed(1)
        x = random_complex(3, 4, 10)

        torch.testing.assert_close(fft(x), torch.fft.fft(x), rtol=1e-10, atol=1e-10)

    def test_impulse(self):
        """Test the transform of a unit impulse is all ones."""
        x = torch.zeros(9, dtype=torch.complex128)
        x[0] = 1.0

        torch.testing.assert_close(fft(x), torch.ones(9, dtype=torch.complex128))

    def test_input_unchanged(self):
        """Test the input tensor is not modified."""
        torch.manual_seed(2)
        x = random_complex(16)
        original = x.clone()

        fft(x)

        torch.testing.assert_close(x, original, rtol=0, atol=0)


class TestInverseFFT:
    """Tests for ifft."""

    @pytest.mark.parametrize("n", [1, 8, 12, 17, 41])
    def test_round_trip(self, n):
        """Test ifft(fft(x)) = x."""
        torch.manual_seed(n)
        x = random_complex(n)

        torch.testing.assert_close(ifft(fft(x)), x, rtol=1e-10, atol=1e-10)

    def test_matches_torch(self):
        """Test against torch.fft.ifft."""
        torch.manual_seed(3)
        x = random_complex(2, 18)

        torch.testing.assert_close(
            ifft(x), torch.fft.ifft(x), rtol=1e-10, atol=1e-10
        )


class TestFFT2:
    """Tests for fft2 and ifft2."""

    @pytest.mark.parametrize("shape", [(4, 8), (3, 5), (6, 37), (1, 7)])
    def test_matches_numpy(self, shape):
        """Test against numpy.fft.fft2."""
        torch.manual_seed(4)
        x = random_complex(*shape)

        expected = torch.from_numpy(numpy.fft.fft2(x.numpy()))

        torch.testing.assert_close(fft2(x), expected, rtol=1e-9, atol=1e-9)

    def test_round_trip(self):
        """Test ifft2(fft2(x)) = x."""
        torch.manual_seed(5)
        x = random_complex(5, 12)

        torch.testing.assert_close(ifft2(fft2(x)), x, rtol=1e-10, atol=1e-10)
