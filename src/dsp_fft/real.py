"""
FFT functions for real-valued signals.

The optimized paths pack a length-2n real signal into n complex values
(even samples in the real channel, odd samples in the imaginary channel),
run a complex FFT of half the size and separate the two interleaved spectra
with the even/odd decomposition identity.

Spectra returned by :func:`fft_real_spectrum` are normalized so that

    x[t] = sum_f |c[f]| * cos(arg(c[f]) + 2*pi*f*t / N)

i.e. DC and Nyquist are scaled by 1/N and all other bins by 2/N.
"""

from typing import Optional, Sequence

import numpy as np
from numba import jit

from .complex_array import ComplexArray
from .errors import InvalidArgumentError
from .fft import FftEngine, get_default_engine


@jit(nopython=True, cache=True)
def _unpack_half_spectrum(z_re: np.ndarray, z_im: np.ndarray,
                          out_re: np.ndarray, out_im: np.ndarray, n: int) -> None:
    # Separates the spectra of the even and odd samples and recombines them.
    w = np.pi / n                                       # wave length is 2 * n
    for i in range(1, n):
        s_re = np.sin(i * w)
        s_im = np.cos(i * w)
        p_re = (1 - s_re) / 2
        q_re = (1 + s_re) / 2
        q_im = -s_im / 2
        t1_re = z_re[i] * p_re - z_im[i] * q_im        # z[i] * ((1 - s) / 2, -c / 2)
        t1_im = z_re[i] * q_im + z_im[i] * p_re
        t2_re = z_re[n - i] * q_re - z_im[n - i] * q_im  # z[n - i] * ((1 + s) / 2, -c / 2)
        t2_im = z_re[n - i] * q_im + z_im[n - i] * q_re
        out_re[i] = t1_re + t2_re
        out_im[i] = t1_im - t2_im


@jit(nopython=True, cache=True)
def _pack_half_spectrum(x_re: np.ndarray, x_im: np.ndarray,
                        out_re: np.ndarray, out_im: np.ndarray, n: int) -> None:
    # Inverse of _unpack_half_spectrum, up to a factor of n.
    w = np.pi / n
    for i in range(1, n):
        s_re = np.sin(i * w)
        s_im = np.cos(i * w)
        p_re = (1 - s_re) / 2
        q_re = (1 + s_re) / 2
        q_im = s_im / 2
        t1_re = x_re[i] * p_re - x_im[i] * q_im        # x[i] * ((1 - s) / 2, c / 2)
        t1_im = x_re[i] * q_im + x_im[i] * p_re
        t2_re = x_re[n - i] * q_re - x_im[n - i] * q_im  # x[n - i] * ((1 + s) / 2, c / 2)
        t2_im = x_re[n - i] * q_im + x_im[n - i] * q_re
        out_re[i] = t1_re + t2_re
        out_im[i] = t1_im - t2_im


def _padded(x: ComplexArray, length: int) -> ComplexArray:
    # Missing values are zero, extra values are dropped.
    a = ComplexArray(length)
    k = min(len(x), length)
    a.re[:k] = x.re[:k]
    a.im[:k] = x.im[:k]
    return a


def fft_real(x: Sequence[float], engine: Optional[FftEngine] = None) -> ComplexArray:
    """
    Compute the full FFT of a real signal.

    Not optimized for real input; any length is accepted. The upper half of
    the result holds the complex conjugates of the lower half.
    """
    engine = engine or get_default_engine()
    return engine.fft(ComplexArray.from_real(x))


def fft_real_half(x: Sequence[float], include_nyquist: bool = False,
                  engine: Optional[FftEngine] = None) -> ComplexArray:
    """
    Compute the lower half of the FFT of a real signal.

    The complex FFT only runs on half the input size.

    Parameters
    ----------
    x : sequence of float
        Input samples. The length must be even.
    include_nyquist : bool
        If ``True``, the Nyquist component (relative frequency ``len(x) / 2``)
        is appended to the output.
    engine : FftEngine, optional
        Engine for the complex FFT.

    Returns
    -------
    ComplexArray
        ``len(x) / 2`` bins, or one more with *include_nyquist*. Unnormalized.
    """
    samples = np.asarray(x, dtype=np.float64)
    m = len(samples)
    if m <= 1:
        return ComplexArray.from_real(samples)
    if m % 2 != 0:
        raise InvalidArgumentError(f"Input array size is not even: {m}")
    engine = engine or get_default_engine()
    n = m // 2
    a1 = ComplexArray._wrap(samples[0::2].copy(), samples[1::2].copy())
    a2 = engine.fft(a1)                                 # complex FFT with half the array size
    a3 = ComplexArray(n + (1 if include_nyquist else 0))
    a3.re[0] = a2.re[0] + a2.im[0]
    if include_nyquist:
        a3.re[n] = a2.re[0] - a2.im[0]
    _unpack_half_spectrum(a2.re, a2.im, a3.re, a3.im, n)
    return a3


def fft_real_spectrum(x: Sequence[float], include_nyquist: bool = False,
                      engine: Optional[FftEngine] = None) -> ComplexArray:
    """
    Compute the normalized complex spectrum of a real signal.

    Even lengths take the half-size fast path; odd lengths use a full
    complex FFT truncated to the lower half.

    Parameters
    ----------
    x : sequence of float
        Input samples. Must not be empty.
    include_nyquist : bool
        If ``True`` and ``len(x)`` is even, the bin for relative frequency
        ``len(x) / 2`` is included. It allows exact re-synthesis, but it is
        an artifact: its phase is always 0 and it does not represent the
        amplitude of that frequency.
    engine : FftEngine, optional
        Engine for the complex FFT.

    Returns
    -------
    ComplexArray
        The normalized lower half spectrum.
    """
    samples = np.asarray(x, dtype=np.float64)
    n = len(samples)
    if n == 0:
        raise InvalidArgumentError("Input array must not be empty")
    if n % 2 == 0:
        a = fft_real_half(samples, include_nyquist, engine)
    else:
        a = fft_real(samples, engine).slice(0, n // 2 + 1)
    scale = np.full(len(a), 2 / n)
    scale[0] = 1 / n
    if n % 2 == 0 and len(a) > n // 2:
        scale[n // 2] = 1 / n
    a.re *= scale
    a.im *= scale
    return a


def fft_shift(x: ComplexArray) -> ComplexArray:
    """
    Shift the zero-frequency component to the center of the spectrum.

    The array is rotated right by ``len(x) // 2``.
    """
    d = len(x) // 2
    return ComplexArray._wrap(np.roll(x.re, d, axis=0), np.roll(x.im, d, axis=0))


def _full_spectrum_from_half(x: ComplexArray, length: int, include_nyquist: bool) -> ComplexArray:
    # Only the mirrored conjugates are stored; the real part of the inverse
    # transform is the same as with both halves, because the input bins are
    # already doubled by the 2/N normalization.
    x2 = ComplexArray(length)
    ComplexArray.copy1(x, 0, x2, 0)                    # DC
    if include_nyquist and length % 2 == 0 and len(x) > length // 2:
        ComplexArray.copy1(x, length // 2, x2, length // 2)
    n2 = min(len(x) - 1, (length - 1) // 2)            # number of complex conjugates
    if n2 > 0:
        x2.re[length - n2:] = x.re[n2:0:-1]
        x2.im[length - n2:] = -x.im[n2:0:-1]
    return x2


def ifft_real_half_simple(x: ComplexArray, length: int, include_nyquist: bool = False,
                          engine: Optional[FftEngine] = None) -> np.ndarray:
    """
    Inverse of :func:`fft_real_spectrum`, general version.

    Not optimized for real signals; *length* may be odd.

    Parameters
    ----------
    x : ComplexArray
        Normalized lower half spectrum. Extra bins are ignored, missing bins
        are treated as zero.
    length : int
        Output signal length.
    include_nyquist : bool
        If ``True`` and *length* is even, ``x[length // 2]`` is used.
    engine : FftEngine, optional
        Engine for the complex FFT.

    Returns
    -------
    np.ndarray
        The real signal, float64.
    """
    if len(x) == 0 or length <= 0:
        return np.zeros(0, dtype=np.float64)
    engine = engine or get_default_engine()
    x2 = _full_spectrum_from_half(x, length, include_nyquist)
    a = engine.fft(x2, False)
    return a.re


def ifft_real_half_opt(x: ComplexArray, length: int, include_nyquist: bool = False,
                       engine: Optional[FftEngine] = None) -> np.ndarray:
    """
    Inverse of :func:`fft_real_spectrum`, optimized version.

    The inverse complex FFT only runs on half the output size, mirroring
    :func:`fft_real_half`.

    Parameters
    ----------
    x : ComplexArray
        Normalized lower half spectrum. Extra bins are ignored, missing bins
        are treated as zero.
    length : int
        Output signal length. Must be even.
    include_nyquist : bool
        If ``True``, ``x[length // 2]`` is used.
    engine : FftEngine, optional
        Engine for the complex FFT.

    Returns
    -------
    np.ndarray
        The real signal, float64.
    """
    if length <= 0:
        return np.zeros(0, dtype=np.float64)
    if length % 2 != 0:
        raise InvalidArgumentError(f"Output length is not even: {length}")
    engine = engine or get_default_engine()
    n = length // 2
    xp = _padded(x, n + 1)
    a1 = ComplexArray(n)
    a1.re[0] = xp.re[0]                                 # x.im[0] has no effect on the result
    a1.im[0] = xp.re[0]
    if include_nyquist:
        a1.re[0] += xp.re[n]
        a1.im[0] -= xp.re[n]
    _pack_half_spectrum(xp.re, xp.im, a1.re, a1.im, n)
    a2 = engine.fft(a1, False)                          # complex inverse FFT with half the array size
    out = np.empty(2 * n, dtype=np.float64)
    out[0::2] = a2.re
    out[1::2] = a2.im
    return out


def ifft_real_half(x: ComplexArray, length: int, include_nyquist: bool = False,
                   engine: Optional[FftEngine] = None) -> np.ndarray:
    """
    Inverse of :func:`fft_real_spectrum`.

    Even *length* takes the optimized path, odd *length* the general one.
    """
    if length % 2 == 0:
        return ifft_real_half_opt(x, length, include_nyquist, engine)
    return ifft_real_half_simple(x, length, include_nyquist, engine)
