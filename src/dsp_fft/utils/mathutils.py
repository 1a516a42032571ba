"""
Integer helpers for power-of-two sizes.
"""


def is_power_of_2(n: int) -> bool:
    """Return ``True`` if *n* is a positive power of two."""
    return n >= 1 and (n & (n - 1)) == 0


def get_next_power_of_2(x: int) -> int:
    """Return the lowest power of two that is strictly greater than *x*."""
    n = 1
    while n <= x:
        n <<= 1
    return n


def floor_log2(n: int) -> int:
    """Return ``floor(log2(n))`` for a positive integer *n*."""
    if n < 1:
        raise ValueError(f"Argument is not a positive integer: {n}")
    return n.bit_length() - 1
