"""
Unit tests for the real-signal FFT functions.

Run:
    pytest tests/test_real.py -v
"""

import numpy as np
import pytest
from scipy.fft import rfft as scipy_rfft

from dsp_fft import (
    ComplexArray,
    FftEngine,
    InvalidArgumentError,
    dft_real_half,
    dft_real_spectrum,
    fft_real,
    fft_real_half,
    fft_real_spectrum,
    fft_shift,
    idft_real_spectrum,
    ifft_real_half,
    ifft_real_half_opt,
    ifft_real_half_simple,
)


def rnd(rng, n, max_value):
    return (rng.random(n) - 0.5) * 2 * max_value


def random_spectrum(rng, n_bins, max_value=1.0):
    return ComplexArray._wrap(rnd(rng, n_bins, max_value), rnd(rng, n_bins, max_value))


def assert_fuzzy_equal(a, b, eps):
    assert len(a) == len(b), f"Array sizes are not equal: {len(a)} != {len(b)}"
    np.testing.assert_allclose(a.re, b.re, rtol=eps, atol=eps)
    np.testing.assert_allclose(a.im, b.im, rtol=eps, atol=eps)


class TestFftReal:

    def test_known_result(self):
        c = fft_real([1, 3, 4, 3, 1, 2])
        expected = ComplexArray.from_complex([
            14 + 0j,
            -2 - 3.464102j,
            -1 + 1.732051j,
            -2 + 0j,
            -1 - 1.732051j,
            -2 + 3.464102j])
        assert_fuzzy_equal(c, expected, 1e-6)

    def test_upper_half_is_conjugate(self):
        x = rnd(np.random.default_rng(0), 9, 10)
        c = fft_real(x).to_numpy()
        np.testing.assert_allclose(c[1:], np.conj(c[1:][::-1]), atol=1e-10)


class TestFftRealHalf:
    """Half-size packed transform."""

    def test_equals_lower_half_of_full_fft(self):
        rng = np.random.default_rng(1)
        for n in range(2, 130, 2):
            x = rnd(rng, n, 1e4)
            half = fft_real_half(x)
            full = fft_real(x)
            assert_fuzzy_equal(half, full.subarray(0, n // 2), 1e-9)

    def test_against_reference_random(self):
        rng = np.random.default_rng(2)
        for _ in range(2000):
            n = 2 * int(rng.integers(1, 11))
            x = rnd(rng, n, 1e4)
            assert_fuzzy_equal(fft_real_half(x), dft_real_half(x), 1e-9)

    def test_nyquist(self):
        rng = np.random.default_rng(3)
        for n in (2, 6, 8, 20):
            x = rnd(rng, n, 10)
            half = fft_real_half(x, include_nyquist=True)
            assert len(half) == n // 2 + 1
            assert half[n // 2] == pytest.approx(complex(np.sum(x[0::2]) - np.sum(x[1::2])))

    def test_against_scipy(self):
        x = np.random.default_rng(4).standard_normal(1024)
        X_ours = fft_real_half(x, include_nyquist=True).to_numpy()
        X_scipy = scipy_rfft(x)
        assert len(X_ours) == len(x) // 2 + 1
        assert np.abs(X_ours - X_scipy).max() < 1e-10

    def test_does_not_modify_input(self):
        x = np.arange(8, dtype=np.float64)
        fft_real_half(x)
        np.testing.assert_array_equal(x, np.arange(8))

    def test_short_inputs(self):
        assert len(fft_real_half([])) == 0
        assert list(fft_real_half([3.5])) == [3.5 + 0j]

    def test_odd_length_rejected(self):
        with pytest.raises(InvalidArgumentError):
            fft_real_half([1, 2, 3])


class TestFftRealSpectrum:
    """Normalized lower half spectrum."""

    def test_known_signals(self):
        for x in ([1, 3, 4, 3, 1, 2], [-1, 3, 2, 8, 3]):
            assert_fuzzy_equal(fft_real_spectrum(x, True), dft_real_spectrum(x, True), 1e-9)

    def test_lengths(self):
        assert len(fft_real_spectrum([1, 2, 3, 4, 5, 6])) == 3
        assert len(fft_real_spectrum([1, 2, 3, 4, 5, 6], True)) == 4
        assert len(fft_real_spectrum([1, 2, 3, 4, 5])) == 3
        assert len(fft_real_spectrum([1, 2, 3, 4, 5], True)) == 3
        assert len(fft_real_spectrum([7])) == 1

    def test_normalization(self):
        # DC and Nyquist are scaled by 1/N, the rest by 2/N
        n = 16
        t = np.arange(n)
        x = 0.5 + 3 * np.cos(2 * np.pi * 2 * t / n + 0.25) + 1.5 * np.cos(np.pi * t)
        spectrum = fft_real_spectrum(x, include_nyquist=True)
        assert spectrum[0].real == pytest.approx(0.5)
        assert spectrum.get_abs(2) == pytest.approx(3)
        assert spectrum.get_arg(2) == pytest.approx(0.25)
        assert spectrum[n // 2].real == pytest.approx(1.5)

    def test_resynthesis(self):
        """Sum of amplitude * cos(phase + wt) reproduces the signal."""
        rng = np.random.default_rng(5)
        for n in range(1, 65):
            x = rnd(rng, n, 10)
            spectrum = fft_real_spectrum(x, include_nyquist=True)
            y = idft_real_spectrum(spectrum, n)
            np.testing.assert_allclose(y, x, rtol=1e-9, atol=1e-9, err_msg=f"N={n}")

    def test_fuzz_against_reference(self):
        """10^5 random signals of length 1..20."""
        rng = np.random.default_rng(6)
        engine = FftEngine()
        for i in range(100000):
            n = int(rng.integers(1, 21))
            x = rnd(rng, n, 1e4)
            include_nyquist = bool(rng.random() < 0.5)
            b1 = fft_real_spectrum(x, include_nyquist, engine=engine)
            b2 = dft_real_spectrum(x, include_nyquist)
            assert_fuzzy_equal(b1, b2, 1e-9)

    def test_empty_rejected(self):
        with pytest.raises(InvalidArgumentError):
            fft_real_spectrum([])


class TestInverseRealFft:
    """ifft_real_half_simple, ifft_real_half_opt and ifft_real_half."""

    @pytest.mark.parametrize("include_nyquist", [False, True])
    def test_simple_and_opt_agree_with_reference(self, include_nyquist):
        rng = np.random.default_rng(7)
        for length in range(2, 80, 2):
            n_bins = length // 2 + (1 if include_nyquist else 0)
            spectrum = random_spectrum(rng, n_bins)
            expected = idft_real_spectrum(spectrum, length)
            y_simple = ifft_real_half_simple(spectrum, length, include_nyquist)
            y_opt = ifft_real_half_opt(spectrum, length, include_nyquist)
            np.testing.assert_allclose(y_simple, y_opt, rtol=1e-9, atol=1e-9, err_msg=f"len={length}")
            np.testing.assert_allclose(y_opt, expected, rtol=1e-9, atol=1e-9, err_msg=f"len={length}")

    def test_simple_odd_lengths(self):
        rng = np.random.default_rng(8)
        for length in range(1, 60, 2):
            spectrum = random_spectrum(rng, (length + 1) // 2)
            expected = idft_real_spectrum(spectrum, length)
            np.testing.assert_allclose(ifft_real_half_simple(spectrum, length), expected,
                                       rtol=1e-9, atol=1e-9)

    def test_round_trip(self):
        rng = np.random.default_rng(9)
        for n in range(1, 50):
            x = rnd(rng, n, 100)
            spectrum = fft_real_spectrum(x, include_nyquist=True)
            np.testing.assert_allclose(ifft_real_half(spectrum, n, True), x, rtol=1e-9, atol=1e-9)

    def test_nyquist_ignored_when_not_requested(self):
        x = [1.0, -1.0, 1.0, -1.0]
        spectrum = fft_real_spectrum(x, include_nyquist=True)
        np.testing.assert_allclose(ifft_real_half_opt(spectrum, 4, False), [0, 0, 0, 0], atol=1e-12)
        np.testing.assert_allclose(ifft_real_half_simple(spectrum, 4, False), [0, 0, 0, 0], atol=1e-12)
        np.testing.assert_allclose(ifft_real_half_opt(spectrum, 4, True), x, atol=1e-12)

    def test_missing_bins_are_zero(self):
        rng = np.random.default_rng(10)
        spectrum = random_spectrum(rng, 3)
        padded = ComplexArray(9)
        padded.re[:3] = spectrum.re
        padded.im[:3] = spectrum.im
        for length in (16, 17):
            np.testing.assert_allclose(ifft_real_half(spectrum, length, True),
                                       ifft_real_half(padded, length, True), atol=1e-12)

    def test_extra_bins_are_ignored(self):
        rng = np.random.default_rng(11)
        spectrum = random_spectrum(rng, 20)
        for length in (8, 9):
            n_bins = length // 2 + 1
            np.testing.assert_allclose(ifft_real_half(spectrum, length, True),
                                       ifft_real_half(spectrum.slice(0, n_bins), length, True),
                                       atol=1e-12)

    def test_degenerate_lengths(self):
        spectrum = ComplexArray.from_complex([1 + 0j, 2 + 0j])
        assert len(ifft_real_half_simple(ComplexArray(0), 4)) == 0
        assert len(ifft_real_half_simple(spectrum, 0)) == 0
        assert len(ifft_real_half_opt(spectrum, 0)) == 0
        assert len(ifft_real_half(spectrum, 0)) == 0
        np.testing.assert_allclose(ifft_real_half(spectrum, 1), [1.0])

    def test_opt_odd_length_rejected(self):
        with pytest.raises(InvalidArgumentError):
            ifft_real_half_opt(ComplexArray(3), 5)


class TestFftShift:

    def test_odd_length(self):
        x = ComplexArray.from_real([0, 1, 2, 3, 4])
        np.testing.assert_array_equal(fft_shift(x).re, [3, 4, 0, 1, 2])

    def test_even_length(self):
        x = ComplexArray.from_complex([0, 1j, 2, 3j])
        assert list(fft_shift(x)) == [2, 3j, 0, 1j]

    def test_returns_copy(self):
        x = ComplexArray.from_real([1, 2])
        y = fft_shift(x)
        assert not y.is_view
        y.set(0, 9)
        assert x[0] == 1
        assert not fft_shift(ComplexArray.from_real([1, 2, 3])).is_view
        assert len(fft_shift(ComplexArray(0))) == 0
