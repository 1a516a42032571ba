"""
Discrete Fourier transform (DFT), reference implementation.

Direct O(n^2) evaluation of the DFT sums. Slow but simple; the test suite
uses it to verify the output of the fast algorithms in this package.
"""

from typing import Sequence

import numpy as np

from .complex_array import ComplexArray
from .errors import InvalidArgumentError


def dft_real_single(x: Sequence[float], relative_frequency: float) -> complex:
    """
    Compute the DFT of a real signal for a single frequency.

    Parameters
    ----------
    x : sequence of float
        Input samples. Must not be empty.
    relative_frequency : float
        Number of oscillations within *x*. The absolute frequency is
        ``relative_frequency * sample_rate / len(x)``.

    Returns
    -------
    complex
        Unnormalized amplitude and phase of the frequency component. Multiply
        by ``1 / len(x)`` for DC and ``2 / len(x)`` otherwise to normalize.
    """
    samples = np.asarray(x, dtype=np.float64)
    n = len(samples)
    if n == 0:
        raise InvalidArgumentError("Input array must not be empty")
    # (f * p) mod n keeps the angles small and accurate
    t = (relative_frequency * np.arange(n)) % n
    return complex(np.sum(samples * np.exp(-2j * np.pi / n * t)))


def dft_single(x: ComplexArray, relative_frequency: float, direction: bool) -> complex:
    """Compute the DFT of a complex array for a single frequency."""
    n = len(x)
    if n == 0:
        raise InvalidArgumentError("Input array must not be empty")
    sign = -1 if direction else 1
    t = (relative_frequency * np.arange(n)) % n
    return complex(np.sum(x.to_numpy() * np.exp(sign * 2j * np.pi / n * t)))


def dft_real(x: Sequence[float]) -> ComplexArray:
    """Full DFT of a real signal. Same size as the input."""
    n = len(x)
    return ComplexArray.from_complex([dft_real_single(x, f) for f in range(n)])


def dft_real_half(x: Sequence[float]) -> ComplexArray:
    """Lower half DFT of a real signal, ``ceil(len(x) / 2)`` bins."""
    n = (len(x) + 1) // 2
    return ComplexArray.from_complex([dft_real_single(x, f) for f in range(n)])


def dft(x: ComplexArray, direction: bool) -> ComplexArray:
    """
    DFT of a complex array.

    ``direction`` is ``True`` for the forward DFT and ``False`` for the
    inverse. The result is not normalized.
    """
    n = len(x)
    return ComplexArray.from_complex([dft_single(x, f, direction) for f in range(n)])


def dft_real_spectrum(x: Sequence[float], include_nyquist: bool = False) -> ComplexArray:
    """
    Normalized lower half spectrum of a real signal.

    Same output layout and normalization as
    :func:`dsp_fft.real.fft_real_spectrum`.
    """
    n = len(x)
    if n == 0:
        raise InvalidArgumentError("Input array must not be empty")
    m = n // 2 + 1 if (n % 2 == 0 and include_nyquist) else (n + 1) // 2
    a = ComplexArray(m)
    for f in range(m):
        r = 1 / n if (f == 0 or 2 * f == n) else 2 / n
        a.set(f, dft_real_single(x, f) * r)
    return a


def idft_real_spectrum(x: ComplexArray, length: int) -> np.ndarray:
    """
    Re-synthesize a real signal as the sum of the sinusoids in *x*.

    Inverse of :func:`dft_real_spectrum` with ``include_nyquist=True``.
    """
    out = np.zeros(length, dtype=np.float64)
    p = np.arange(length)
    for f in range(len(x)):
        t = (f * p) % length
        out += x.get_abs(f) * np.cos(x.get_arg(f) + 2 * np.pi / length * t)
    return out
