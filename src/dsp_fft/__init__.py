"""
dsp_fft - Arbitrary-length FFT engine

Hand-written discrete Fourier transforms for complex and real signals of any
length, with Numba-compiled inner loops.

Modules:
    - complex_array: split real/imaginary complex array
    - twiddle: cached twiddle tables for radix-2 transforms
    - radix2: iterative Cooley-Tukey FFT (power-of-2 lengths)
    - bluestein: chirp-z FFT (all other lengths)
    - fft: strategy dispatcher and inverse transform
    - real: fast paths for real signals, fft_shift
    - dft: O(n^2) reference DFT
"""

from .errors import DspError, InvalidArgumentError, ConfigError
from .complex_array import ComplexArray, as_complex_array
from .twiddle import TwiddleFactorCache
from .fft import FftEngine, fft, get_default_engine, swap_re_im
from .real import (
    fft_real,
    fft_real_half,
    fft_real_spectrum,
    fft_shift,
    ifft_real_half,
    ifft_real_half_simple,
    ifft_real_half_opt,
)
from .dft import dft, dft_real, dft_real_half, dft_real_spectrum, idft_real_spectrum
from .config import Config, load_config
from .utils.mathutils import is_power_of_2, get_next_power_of_2

__all__ = [
    # Errors
    'DspError',
    'InvalidArgumentError',
    'ConfigError',
    # Data types
    'ComplexArray',
    'as_complex_array',
    'TwiddleFactorCache',
    # Complex FFT
    'FftEngine',
    'fft',
    'get_default_engine',
    'swap_re_im',
    # Real signal FFT
    'fft_real',
    'fft_real_half',
    'fft_real_spectrum',
    'fft_shift',
    'ifft_real_half',
    'ifft_real_half_simple',
    'ifft_real_half_opt',
    # Reference DFT
    'dft',
    'dft_real',
    'dft_real_half',
    'dft_real_spectrum',
    'idft_real_spectrum',
    # Configuration
    'Config',
    'load_config',
    # Helpers
    'is_power_of_2',
    'get_next_power_of_2',
]

__version__ = '1.0.0'
