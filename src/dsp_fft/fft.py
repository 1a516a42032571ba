"""
FFT dispatcher.

Selects the transform strategy by length:
    - n <= 1: identity (copy)
    - n is a power of 2: radix-2 Cooley-Tukey
    - otherwise: Bluestein

The inverse transform has no code path of its own. It swaps the real and
imaginary channels, runs the forward transform and swaps the result back,
which equals conj(fft(conj(x))). No function here normalizes by 1/n.
"""

import logging
from typing import Optional

from .bluestein import fft_bluestein
from .complex_array import ComplexArray
from .radix2 import fft_radix2
from .twiddle import TwiddleFactorCache
from .utils.mathutils import is_power_of_2

logger = logging.getLogger(__name__)


def swap_re_im(a: ComplexArray) -> ComplexArray:
    """Return a view of *a* with the real and imaginary channels exchanged."""
    return ComplexArray._wrap(a.im, a.re, view=True)


class FftEngine:
    """
    Complex FFT of arbitrary length.

    Each engine owns a :class:`TwiddleFactorCache`. Engines may share a cache
    by passing the same instance.

    Parameters
    ----------
    cache : TwiddleFactorCache, optional
        Twiddle table store. A new one is created if omitted.
    """

    def __init__(self, cache: Optional[TwiddleFactorCache] = None):
        self.cache = cache if cache is not None else TwiddleFactorCache()

    @classmethod
    def from_config(cls, config) -> 'FftEngine':
        """
        Create an engine from an :class:`~dsp_fft.config.EngineConfig`.

        Twiddle tables for ``config.preload_sizes`` are built up front; with
        ``config.jit_warmup`` both strategies run once so the Numba kernels
        are compiled before the first real call.
        """
        engine = cls()
        engine.cache.preload(config.preload_sizes)
        if config.jit_warmup:
            engine.warmup()
        logger.info(f"FFT engine ready, twiddle sizes={engine.cache.sizes()}")
        return engine

    def warmup(self) -> None:
        """Run both strategies and both directions on tiny inputs."""
        for n in (4, 3):
            x = ComplexArray(n)
            self.fft(self.fft(x, True), False)

    def fft(self, x: ComplexArray, direction: bool = True) -> ComplexArray:
        """
        Compute the FFT of an array of complex numbers.

        Parameters
        ----------
        x : ComplexArray
            Input values, any length. Powers of 2 are fastest.
        direction : bool
            ``True`` for the forward FFT, ``False`` for the inverse FFT.

        Returns
        -------
        ComplexArray
            The transform without normalization, same length as *x*.
        """
        n = len(x)
        if n <= 1:
            return x.slice()
        x2 = x if direction else swap_re_im(x)
        if is_power_of_2(n):
            x3 = fft_radix2(x2, self.cache)
        else:
            x3 = fft_bluestein(x2, self.fft)
        if direction:
            return x3
        return ComplexArray._wrap(x3.im, x3.re)          # x3 is not referenced elsewhere

    __call__ = fft


_default_engine = FftEngine()


def get_default_engine() -> FftEngine:
    """Return the process-wide engine used by the module-level functions."""
    return _default_engine


def fft(x: ComplexArray, direction: bool = True, engine: Optional[FftEngine] = None) -> ComplexArray:
    """
    Compute the FFT of an array of complex numbers.

    Depending on the application, the output values must be normalized.

    Parameters
    ----------
    x : ComplexArray
        Input values, any length.
    direction : bool
        ``True`` for the forward FFT, ``False`` for the inverse FFT.
    engine : FftEngine, optional
        Engine to use. Defaults to :func:`get_default_engine`.

    Returns
    -------
    ComplexArray
        The transform without normalization, same length as *x*.

    Examples
    --------
    >>> x = ComplexArray.from_complex([1, 2, 3, 4, 5])
    >>> X = fft(x)
    >>> y = fft(X, False)
    >>> y.mul_all_by_real(1 / len(y))   # y is x again
    """
    return (engine or _default_engine).fft(x, direction)
