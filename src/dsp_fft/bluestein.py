"""
Bluestein's chirp-z FFT for arbitrary lengths.

The length-n DFT is rewritten as a circular convolution with a chirp
sequence. The convolution is computed with power-of-2 FFTs of size m >= 2n - 2,
which is large enough that the circular wrap-around never overlaps the
n output samples.
"""

import logging
from typing import Callable

import numpy as np
from numba import jit

from .complex_array import ComplexArray
from .errors import InvalidArgumentError
from .utils.mathutils import get_next_power_of_2

logger = logging.getLogger(__name__)

Transform = Callable[[ComplexArray, bool], ComplexArray]


@jit(nopython=True, cache=True)
def _mul_conj_chirp(re: np.ndarray, im: np.ndarray,
                    c_re: np.ndarray, c_im: np.ndarray,
                    out_re: np.ndarray, out_im: np.ndarray, n: int) -> None:
    """out[k] = x[k] * conj(chirp[k]) for k < n."""
    for k in range(n):
        out_re[k] = re[k] * c_re[k] + im[k] * c_im[k]
        out_im[k] = im[k] * c_re[k] - re[k] * c_im[k]


def create_sine_of_square_table(table_length: int, wave_length: int) -> ComplexArray:
    """
    Build the chirp table ``exp(i * pi * k^2 / (wave_length / 2))``.

    ``k*k`` is reduced modulo *wave_length* as an integer before it is scaled
    to an angle, so large ``k^2`` values don't lose precision.
    """
    w = 2 * np.pi / wave_length
    k = np.arange(table_length, dtype=np.int64)
    t = (k * k) % wave_length * w
    return ComplexArray._wrap(np.cos(t), np.sin(t))


def convolve(a1: ComplexArray, a2: ComplexArray, transform: Transform) -> ComplexArray:
    """
    Circular convolution of two equal-length arrays via their spectra.

    Parameters
    ----------
    a1, a2 : ComplexArray
        Input arrays of equal length.
    transform : callable
        ``transform(x, direction)`` computing an unnormalized FFT.

    Returns
    -------
    ComplexArray
        The circular convolution, scaled by ``1 / len(a1)``.
    """
    n = len(a1)
    if len(a2) != n:
        raise InvalidArgumentError(f"Array lengths are not equal: {n} != {len(a2)}")
    a3 = transform(a1, True)
    a4 = transform(a2, True)
    a3.mul_by_array(a4)
    a5 = transform(a3, False)
    a5.mul_all_by_real(1 / n)                 # scaling after inverse FFT
    return a5


def fft_bluestein(x: ComplexArray, transform: Transform) -> ComplexArray:
    """
    Compute the forward FFT of *x* with Bluestein's algorithm.

    Parameters
    ----------
    x : ComplexArray
        Input values, any length >= 1.
    transform : callable
        ``transform(x, direction)`` used for the power-of-2 convolution FFTs.

    Returns
    -------
    ComplexArray
        Unnormalized transform, same length as *x*.
    """
    n = len(x)
    if n == 0:
        return ComplexArray(0)
    # minimum space needed: [0 1 2 ... n-2 n-1 n-2 ... 2 1] = 2n - 2
    m = get_next_power_of_2(2 * n - 3)
    logger.debug(f"Bluestein FFT n={n} via convolution size m={m}")
    chirp = create_sine_of_square_table(n, 2 * n)

    a1 = ComplexArray(m)
    _mul_conj_chirp(x.re, x.im, chirp.re, chirp.im, a1.re, a1.im, n)

    a2 = ComplexArray(m)
    a2.re[:n] = chirp.re
    a2.im[:n] = chirp.im
    a2.re[m - n + 1:] = chirp.re[:0:-1]       # mirror: a2[m - k] = chirp[k], k = 1..n-1
    a2.im[m - n + 1:] = chirp.im[:0:-1]

    a3 = convolve(a1, a2, transform)
    a4 = ComplexArray(n)
    _mul_conj_chirp(a3.re, a3.im, chirp.re, chirp.im, a4.re, a4.im, n)
    return a4
