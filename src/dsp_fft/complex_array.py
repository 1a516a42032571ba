"""
Complex array stored as two parallel float64 arrays.

The split real/imaginary layout lets the Numba kernels in this package work
on plain float64 buffers and keeps the inner loops free of allocations.
"""

import math
from typing import Iterator, Optional, Sequence, Union

import numpy as np
from numba import jit

from .errors import InvalidArgumentError

_EMPTY = np.empty(0, dtype=np.float64)


@jit(nopython=True, cache=True)
def _mul_by_array_kernel(re: np.ndarray, im: np.ndarray,
                         re2: np.ndarray, im2: np.ndarray) -> None:
    """In-place elementwise complex multiply: (re, im) *= (re2, im2)."""
    for i in range(len(re)):
        r = re[i] * re2[i] - im[i] * im2[i]
        im[i] = re[i] * im2[i] + im[i] * re2[i]
        re[i] = r


class ComplexArray:
    """
    A fixed-length array of complex numbers.

    Two ownership modes exist:

    - owned copy: ``re`` and ``im`` have their own storage (every constructor,
      :meth:`slice`, :meth:`copy`)
    - view: ``re`` and ``im`` alias a parent array over an index range
      (:meth:`subarray`); writes through the view change the parent

    Parameters
    ----------
    length : int
        Number of elements. All elements are initialized to zero.
    """

    __slots__ = ('re', 'im', '_view')

    def __init__(self, length: int = 0):
        if length < 0:
            raise InvalidArgumentError(f"Negative array length {length}")
        if length:
            self.re = np.zeros(length, dtype=np.float64)
            self.im = np.zeros(length, dtype=np.float64)
        else:
            self.re = _EMPTY
            self.im = _EMPTY
        self._view = False

    @classmethod
    def _wrap(cls, re: np.ndarray, im: np.ndarray, view: bool = False) -> 'ComplexArray':
        # Takes ownership of the given buffers without copying; with view=True
        # they belong to another array.
        a = cls.__new__(cls)
        a.re = re
        a.im = im
        a._view = view
        return a

    # --- Constructors ------------------------------------------------------

    @classmethod
    def from_real(cls, samples: Sequence[float]) -> 'ComplexArray':
        """Create an array from real values. The imaginary parts are zero."""
        re = np.array(samples, dtype=np.float64)
        if re.ndim != 1:
            raise InvalidArgumentError(f"Expected a 1-D array of samples, got shape {re.shape}")
        return cls._wrap(re, np.zeros(len(re), dtype=np.float64))

    @classmethod
    def from_complex(cls, values) -> 'ComplexArray':
        """
        Create an array from complex numbers.

        *values* may be a sequence of Python ``complex`` values, a complex
        ndarray, or a sequence of ``(re, im)`` pairs.
        """
        a = np.asarray(values)
        if a.ndim == 2 and a.shape[1] == 2 and not np.iscomplexobj(a):
            return cls._wrap(a[:, 0].astype(np.float64), a[:, 1].astype(np.float64))
        if a.ndim != 1:
            raise InvalidArgumentError(f"Expected a 1-D array of complex values, got shape {a.shape}")
        a = a.astype(np.complex128)
        return cls._wrap(a.real.copy(), a.imag.copy())

    @classmethod
    def from_polar(cls, abs_array: Sequence[float], arg_array: Sequence[float]) -> 'ComplexArray':
        """Create an array from magnitudes and phase angles (radians)."""
        r = np.asarray(abs_array, dtype=np.float64)
        phi = np.asarray(arg_array, dtype=np.float64)
        if len(r) != len(phi):
            raise InvalidArgumentError(
                f"Polar arrays differ in length: {len(r)} != {len(phi)}")
        return cls._wrap(r * np.cos(phi), r * np.sin(phi))

    def to_numpy(self) -> np.ndarray:
        """Return the values as a new complex128 ndarray."""
        out = np.empty(len(self.re), dtype=np.complex128)
        out.real = self.re
        out.imag = self.im
        return out

    # --- Copies and views --------------------------------------------------

    def slice(self, begin: Optional[int] = None, end: Optional[int] = None) -> 'ComplexArray':
        """Return an independent copy of the range ``[begin, end)``."""
        return ComplexArray._wrap(self.re[begin:end].copy(), self.im[begin:end].copy())

    def subarray(self, begin: int, end: int) -> 'ComplexArray':
        """Return a view of the range ``[begin, end)`` sharing this array's storage."""
        return ComplexArray._wrap(self.re[begin:end], self.im[begin:end], view=True)

    def copy(self) -> 'ComplexArray':
        return self.slice()

    @property
    def is_view(self) -> bool:
        """``True`` if this array aliases the storage of another array."""
        return self._view

    @staticmethod
    def copy1(src: 'ComplexArray', i1: int, dst: 'ComplexArray', i2: int) -> None:
        """Copy element ``src[i1]`` to ``dst[i2]``."""
        dst.re[i2] = src.re[i1]
        dst.im[i2] = src.im[i1]

    # --- Element access ----------------------------------------------------

    def __len__(self) -> int:
        return len(self.re)

    def __getitem__(self, i: int) -> complex:
        return complex(self.re[i], self.im[i])

    def __iter__(self) -> Iterator[complex]:
        for i in range(len(self.re)):
            yield complex(self.re[i], self.im[i])

    def __repr__(self) -> str:
        items = ", ".join(f"({r}, {i})" for r, i in zip(self.re.tolist(), self.im.tolist()))
        return f"[{items}]"

    def get(self, i: int) -> complex:
        return complex(self.re[i], self.im[i])

    def set(self, i: int, c: complex) -> None:
        self.re[i] = c.real
        self.im[i] = c.imag

    def set_re_im(self, i: int, re: float, im: float) -> None:
        self.re[i] = re
        self.im[i] = im

    def set_polar(self, i: int, abs_value: float, arg: float) -> None:
        self.re[i] = abs_value * math.cos(arg)
        self.im[i] = abs_value * math.sin(arg)

    def get_abs(self, i: int) -> float:
        return math.hypot(self.re[i], self.im[i])

    def get_arg(self, i: int) -> float:
        return math.atan2(self.im[i], self.re[i])

    def get_abs_array(self) -> np.ndarray:
        return np.hypot(self.re, self.im)

    def get_arg_array(self) -> np.ndarray:
        return np.arctan2(self.im, self.re)

    # --- Single value operations -------------------------------------------

    def add_real_to(self, i: int, x: float) -> None:
        self.re[i] += x

    def add_to(self, i: int, c: complex) -> None:
        self.re[i] += c.real
        self.im[i] += c.imag

    def sub_real_from(self, i: int, x: float) -> None:
        self.re[i] -= x

    def sub_from(self, i: int, c: complex) -> None:
        self.re[i] -= c.real
        self.im[i] -= c.imag

    def mul_by_real(self, i: int, x: float) -> None:
        self.re[i] *= x
        self.im[i] *= x

    def mul_by(self, i: int, c: complex) -> None:
        self.set_mul(i, self.re[i], self.im[i], c.real, c.imag)

    def div_by_real(self, i: int, x: float) -> None:
        self.re[i] /= x
        self.im[i] /= x

    def div_by(self, i: int, c: complex) -> None:
        self.set_div(i, self.re[i], self.im[i], c.real, c.imag)

    # --- Multi value operations --------------------------------------------

    def mul_all_by_real(self, x: float) -> None:
        """Multiply every element by the real scalar *x*, in place."""
        self.re *= x
        self.im *= x

    def mul_by_array(self, other: 'ComplexArray') -> None:
        """Elementwise complex multiply by *other*, in place."""
        if len(other) != len(self):
            raise InvalidArgumentError(
                f"Array lengths are not equal: {len(self)} != {len(other)}")
        _mul_by_array_kernel(self.re, self.im, other.re, other.im)

    # --- Low-level primitives ----------------------------------------------

    def set_mul(self, i: int, re1: float, im1: float, re2: float, im2: float) -> None:
        """Set element *i* to ``(re1, im1) * (re2, im2)``."""
        self.re[i] = re1 * re2 - im1 * im2
        self.im[i] = re1 * im2 + im1 * re2

    def set_div(self, i: int, re1: float, im1: float, re2: float, im2: float) -> None:
        """Set element *i* to ``(re1, im1) / (re2, im2)``."""
        m = re2 * re2 + im2 * im2
        self.re[i] = (re1 * re2 + im1 * im2) / m
        self.im[i] = (im1 * re2 - re1 * im2) / m


ComplexLike = Union[ComplexArray, Sequence[complex], np.ndarray]


def as_complex_array(x: ComplexLike) -> ComplexArray:
    """Return *x* unchanged if it is a :class:`ComplexArray`, otherwise convert it."""
    if isinstance(x, ComplexArray):
        return x
    return ComplexArray.from_complex(x)
