"""
Twiddle factor cache for the radix-2 transform.

Tables are built once per power-of-two size and kept for the lifetime of the
cache. Entries are never evicted or modified, so a table handed out to a
caller stays valid forever.
"""

import logging
import threading
from typing import Dict, Iterable, List, Tuple

import numpy as np

from .errors import InvalidArgumentError
from .utils.mathutils import floor_log2, is_power_of_2

logger = logging.getLogger(__name__)

TwiddleTable = Tuple[np.ndarray, np.ndarray]


def create_sine_table(table_length: int, wave_length: int, rotational_direction: bool = True) -> TwiddleTable:
    """
    Sample the unit circle at multiples of ``2*pi / wave_length``.

    Parameters
    ----------
    table_length : int
        Number of samples.
    wave_length : int
        Number of samples per full turn.
    rotational_direction : bool
        ``True`` for ``exp(+i*t)``, ``False`` for ``exp(-i*t)``.

    Returns
    -------
    tuple of np.ndarray
        ``(re, im)`` arrays of length *table_length*.
    """
    w = 2 * np.pi / wave_length
    t = np.arange(table_length) * w
    re = np.cos(t)
    im = np.sin(t) if rotational_direction else -np.sin(t)
    return re, im


class TwiddleFactorCache:
    """
    Append-only, thread-safe store of radix-2 twiddle tables.

    The table for size ``n`` holds ``n / 2`` entries ``exp(-2*pi*i*k / n)``.
    The same table serves the inverse transform, which the engine realizes by
    swapping the real and imaginary channels.
    """

    def __init__(self):
        self._tables: Dict[int, TwiddleTable] = {}
        self._lock = threading.Lock()

    def get_table(self, n: int) -> TwiddleTable:
        """
        Return the twiddle table for transform size *n*.

        Parameters
        ----------
        n : int
            Transform size. Must be a power of two.

        Returns
        -------
        tuple of np.ndarray
            Read-only ``(re, im)`` arrays of length ``n // 2``.
        """
        if not is_power_of_2(n):
            raise InvalidArgumentError(f"Twiddle table size {n} is not a power of 2")
        key = floor_log2(n)
        table = self._tables.get(key)
        if table is not None:
            return table
        with self._lock:
            table = self._tables.get(key)
            if table is None:
                re, im = create_sine_table(n // 2, n, rotational_direction=False)
                re.flags.writeable = False
                im.flags.writeable = False
                table = (re, im)
                self._tables[key] = table
                logger.debug(f"Built twiddle table for n={n} ({len(self._tables)} cached)")
        return table

    def preload(self, sizes: Iterable[int]) -> None:
        """Build the tables for all *sizes* eagerly."""
        for n in sizes:
            self.get_table(n)

    def sizes(self) -> List[int]:
        """Return the transform sizes that have a cached table, ascending."""
        return [1 << key for key in sorted(self._tables)]

    def __len__(self) -> int:
        return len(self._tables)

    def __contains__(self, n: int) -> bool:
        return is_power_of_2(n) and floor_log2(n) in self._tables
