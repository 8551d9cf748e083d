"""Integer helpers shared by the rational core."""
from __future__ import annotations

import enum
import numbers
from typing import Any, Callable, NamedTuple, Optional


class Pair(NamedTuple):
    """Two values that are combined in a single step."""

    first: Any
    second: Any

    def fold(self, func: Callable[[Any, Any], Any]) -> Any:
        return func(self.first, self.second)


class LogicalSignum(enum.IntEnum):
    """Sign class of a value where every zero representation is ``ZERO``."""

    NEG = -1
    ZERO = 0
    POS = 1


def ensure_int(value: Any, *, name: str) -> int:
    """Convert *value* to ``int`` when it represents an integer."""
    if isinstance(value, numbers.Integral):
        return int(value)
    raise TypeError(f"{name} must be an integer, got {type(value)!r}")


def ensure_uint(value: Any, *, name: str) -> int:
    """Like :func:`ensure_int`, additionally rejecting negative values."""
    value = ensure_int(value, name=name)
    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {value}")
    return value


def trailing_zeros(value: int) -> Optional[int]:
    """Return the number of trailing zero bits of *value*, ``None`` for zero."""
    if value == 0:
        return None
    return (value & -value).bit_length() - 1


def gcd(n: int, m: int) -> int:
    """Greatest common divisor of two non-negative integers.

    Binary GCD: only subtraction, shifts and parity tests are used.
    ``gcd(0, m) == m`` and ``gcd(n, 0) == n``.
    """
    n = ensure_uint(n, name="n")
    m = ensure_uint(m, name="m")

    # n = 2**i * u and m = 2**j * v with u, v odd; gcd(n, m) = 2**min(i, j) * gcd(u, v)
    i = trailing_zeros(n)
    if i is None:
        return m
    j = trailing_zeros(m)
    if j is None:
        return n
    n >>= i
    m >>= j
    k = min(i, j)

    while True:
        # n and m are both odd here
        if n > m:
            n, m = m, n
        m -= n
        j = trailing_zeros(m)
        if j is None:
            return n << k
        m >>= j


__all__ = ["Pair", "LogicalSignum", "ensure_int", "ensure_uint", "trailing_zeros", "gcd"]
