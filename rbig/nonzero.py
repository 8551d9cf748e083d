"""Unsigned integer wrapper that can never hold zero."""
from __future__ import annotations

import functools
from typing import Any, Optional

from .util import ensure_int, ensure_uint


@functools.total_ordering
class NonZeroUInt:
    """An arbitrary-size unsigned integer that is guaranteed to be non-zero.

    Every public way of producing a :class:`NonZeroUInt` either checks the
    value or preserves non-zero-ness by arithmetic necessity, so a denominator
    held in one can be divided by without a zero check. Instances are
    immutable.
    """

    __slots__ = ("_value",)

    def __init__(self, value: int) -> None:
        value = ensure_uint(value, name="value")
        if value == 0:
            raise ZeroDivisionError("NonZeroUInt value must be non-zero")
        self._value = value

    # ------------------------------------------------------------------
    # Constructors
    @classmethod
    def one(cls) -> "NonZeroUInt":
        return cls._new_unchecked(1)

    @classmethod
    def new(cls, value: int) -> Optional["NonZeroUInt"]:
        """Return a wrapper around *value*, or ``None`` when it is zero."""
        value = ensure_uint(value, name="value")
        if value == 0:
            return None
        return cls._new_unchecked(value)

    @classmethod
    def _new_unchecked(cls, value: int) -> "NonZeroUInt":
        # Precondition: value > 0. Callers outside this module must have
        # established it themselves (the reciprocal of a non-zero numerator).
        instance = cls.__new__(cls)
        instance._value = value
        return instance

    # ------------------------------------------------------------------
    # Access
    def get(self) -> int:
        return self._value

    def __int__(self) -> int:
        return self._value

    def __repr__(self) -> str:
        return f"NonZeroUInt({self._value})"

    # ------------------------------------------------------------------
    # Arithmetic that cannot produce zero
    def __mul__(self, other: Any) -> "NonZeroUInt":
        if not isinstance(other, NonZeroUInt):
            return NotImplemented
        # product of two non-zero values is non-zero
        return NonZeroUInt._new_unchecked(self._value * other._value)

    def __add__(self, other: Any) -> "NonZeroUInt":
        if not isinstance(other, NonZeroUInt):
            return NotImplemented
        # sum of two positive values is positive
        return NonZeroUInt._new_unchecked(self._value + other._value)

    def __floordiv__(self, divisor: Any) -> "NonZeroUInt":
        """Divide by a non-zero *divisor* of the wrapped value."""
        if isinstance(divisor, NonZeroUInt):
            divisor = divisor._value
        divisor = ensure_uint(divisor, name="divisor")
        # an exact divisor of a non-zero value leaves a non-zero quotient
        return NonZeroUInt._new_unchecked(self._value // divisor)

    def pow(self, exp: int) -> "NonZeroUInt":
        exp = ensure_uint(exp, name="exp")
        return NonZeroUInt._new_unchecked(self._value ** exp)

    __pow__ = pow

    # ------------------------------------------------------------------
    # Comparisons
    def __eq__(self, other: Any) -> bool:
        if isinstance(other, NonZeroUInt):
            return self._value == other._value
        return NotImplemented

    def __lt__(self, other: Any) -> bool:
        if isinstance(other, NonZeroUInt):
            return self._value < other._value
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._value)


__all__ = ["NonZeroUInt"]
