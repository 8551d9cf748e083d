"""Sign of a rational value."""
from __future__ import annotations

import enum
import functools
from typing import Any

from .util import ensure_int, ensure_uint


@functools.total_ordering
class Sign(enum.Enum):
    """``NEGATIVE`` or ``POSITIVE``; ordered ``NEGATIVE < POSITIVE``.

    Zero values still carry a sign, which is ignored by comparisons.
    """

    NEGATIVE = -1
    POSITIVE = 1

    @classmethod
    def positive_if(cls, condition: bool) -> "Sign":
        return cls.POSITIVE if condition else cls.NEGATIVE

    @classmethod
    def of(cls, value: int) -> "Sign":
        """Sign of an integer; zero counts as positive."""
        return cls.positive_if(ensure_int(value, name="value") >= 0)

    def is_positive(self) -> bool:
        return self is Sign.POSITIVE

    def pow(self, exp: int) -> "Sign":
        exp = ensure_uint(exp, name="exp")
        if self is Sign.POSITIVE:
            return self
        return Sign.positive_if(exp % 2 == 0)

    def apply(self, value: int) -> int:
        """Return *value* multiplied by this sign."""
        return value if self is Sign.POSITIVE else -value

    def __neg__(self) -> "Sign":
        return Sign.NEGATIVE if self is Sign.POSITIVE else Sign.POSITIVE

    def __mul__(self, other: Any) -> "Sign":
        if not isinstance(other, Sign):
            return NotImplemented
        return Sign.positive_if(self is other)

    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, Sign):
            return NotImplemented
        return self.value < other.value

    def __repr__(self) -> str:
        return f"Sign.{self.name}"


__all__ = ["Sign"]
