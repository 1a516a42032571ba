"""
Exception types raised by the FFT engine.
"""


class DspError(Exception):
    """Base class for all dsp_fft errors."""


class InvalidArgumentError(DspError, ValueError):
    """
    A precondition on an argument was violated.

    Raised for odd lengths where an even length is required, empty signals
    passed to spectrum functions, and length mismatches between sequences
    that are combined elementwise.
    """


class ConfigError(DspError):
    """Malformed configuration file or section."""
