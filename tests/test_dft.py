"""
Unit tests for the reference DFT.

Run:
    pytest tests/test_dft.py -v
"""

import numpy as np
import pytest
from scipy.fft import fft as scipy_fft

from dsp_fft import (
    ComplexArray,
    InvalidArgumentError,
    dft,
    dft_real,
    dft_real_half,
    dft_real_spectrum,
    idft_real_spectrum,
)
from dsp_fft.dft import dft_real_single, dft_single


class TestReferenceDft:

    def test_matches_scipy(self):
        rng = np.random.default_rng(0)
        for n in (1, 2, 5, 8, 13, 30):
            z = rng.standard_normal(n) + 1j * rng.standard_normal(n)
            np.testing.assert_allclose(dft(ComplexArray.from_complex(z), True).to_numpy(),
                                       scipy_fft(z), atol=1e-10)

    def test_inverse_direction(self):
        z = np.array([1 + 1j, 2 - 1j, 0.5j])
        y = dft(ComplexArray.from_complex(z), False).to_numpy()
        np.testing.assert_allclose(y, np.conj(scipy_fft(np.conj(z))), atol=1e-12)

    def test_single_frequency(self):
        x = [1, 3, 4, 3, 1, 2]
        assert dft_real_single(x, 0) == pytest.approx(14)
        assert dft_real_single(x, 3) == pytest.approx(-2)
        a = ComplexArray.from_real(x)
        assert dft_single(a, 1, True) == pytest.approx(complex(-2, -3.464102), abs=1e-6)

    def test_fractional_frequency(self):
        # non-integer frequencies are evaluated directly
        x = np.cos(np.arange(8))
        f = 1.5
        expected = np.sum(x * np.exp(-2j * np.pi * f * np.arange(8) / 8))
        assert dft_real_single(x, f) == pytest.approx(expected)

    def test_real_variants(self):
        x = [-1, 3, 2, 8, 3]
        full = dft_real(x)
        half = dft_real_half(x)
        assert len(full) == 5
        assert len(half) == 3
        np.testing.assert_allclose(half.to_numpy(), full.to_numpy()[:3])

    def test_spectrum_lengths(self):
        assert len(dft_real_spectrum([1, 2, 3, 4], False)) == 2
        assert len(dft_real_spectrum([1, 2, 3, 4], True)) == 3
        assert len(dft_real_spectrum([1, 2, 3], True)) == 2

    def test_spectrum_resynthesis(self):
        x = [1, 3, 4, 3, 1, 2]
        y = idft_real_spectrum(dft_real_spectrum(x, True), len(x))
        np.testing.assert_allclose(y, x, atol=1e-12)

    def test_empty_rejected(self):
        with pytest.raises(InvalidArgumentError):
            dft_real_spectrum([])
        with pytest.raises(InvalidArgumentError):
            dft_real_single([], 0)
