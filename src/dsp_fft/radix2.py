"""
Iterative Cooley-Tukey radix-2 FFT (Numba JIT).

The transform runs in two steps:
1. Bit-reversal copy of the input into a fresh buffer
2. In-place butterfly passes using the cached twiddle table

The result is never normalized; scaling by 1/n is up to the caller.
"""

import numpy as np
from numba import jit

from .complex_array import ComplexArray
from .errors import InvalidArgumentError
from .twiddle import TwiddleFactorCache
from .utils.mathutils import is_power_of_2


@jit(nopython=True, cache=True)
def increment_bit_reversed(i: int, n: int) -> int:
    """
    Increment *i* as if its bits were stored in reverse order.

    *n* must be a power of 2. The carry runs from the top bit downwards,
    so no division or modulo is needed.
    """
    m = n >> 1
    a = i
    while a & m:
        a -= m
        m >>= 1
    return a | m


@jit(nopython=True, cache=True)
def _copy_bit_reversed(re: np.ndarray, im: np.ndarray,
                       out_re: np.ndarray, out_im: np.ndarray) -> None:
    n = len(re)
    i1 = 0
    for i2 in range(n):
        out_re[i2] = re[i1]
        out_im[i2] = im[i1]
        i1 = increment_bit_reversed(i1, n)


@jit(nopython=True, cache=True)
def _apply_butterflies(re: np.ndarray, im: np.ndarray,
                       w_re: np.ndarray, w_im: np.ndarray) -> None:
    n = len(re)
    m_max = 1
    while m_max < n:
        step = m_max * 2
        w_step = n // step
        for m in range(m_max):
            wr = w_re[m * w_step]
            wi = w_im[m * w_step]
            for i in range(m, n, step):
                j = i + m_max
                t_re = re[j] * wr - im[j] * wi        # t = a[j] * w
                t_im = re[j] * wi + im[j] * wr
                re[j] = re[i] - t_re                  # a[j] = a[i] - t
                im[j] = im[i] - t_im
                re[i] += t_re                         # a[i] = a[i] + t
                im[i] += t_im
        m_max = step


def copy_bit_reversed(x: ComplexArray) -> ComplexArray:
    """Return a copy of *x* in bit-reversed index order. ``len(x)`` must be a power of 2."""
    a = ComplexArray(len(x))
    _copy_bit_reversed(x.re, x.im, a.re, a.im)
    return a


def fft_radix2(x: ComplexArray, cache: TwiddleFactorCache) -> ComplexArray:
    """
    Compute the forward FFT of *x* with the radix-2 Cooley-Tukey algorithm.

    Parameters
    ----------
    x : ComplexArray
        Input values. The length must be a power of 2.
    cache : TwiddleFactorCache
        Source of the twiddle table for ``len(x)``.

    Returns
    -------
    ComplexArray
        Unnormalized transform, same length as *x*.
    """
    n = len(x)
    if not is_power_of_2(n):
        raise InvalidArgumentError(f"Radix-2 FFT requires a power-of-2 length, got {n}")
    if n == 1:
        return x.slice()
    w_re, w_im = cache.get_table(n)
    a = copy_bit_reversed(x)
    _apply_butterflies(a.re, a.im, w_re, w_im)
    return a
