"""Arbitrary-size rational numbers."""

from .arrays import as_rational_array, zeros, zeros_like
from .nonzero import NonZeroUInt
from .rational import DEFAULT_ROUNDING, Rational, rationalize
from .rounding import (
    Ceil,
    Floor,
    RoundingDirection,
    RoundingDirectionDecider,
    TowardNearest,
    TowardNearestEven,
    TowardNearestOdd,
    TowardsNegativeInfinity,
    TowardsPositiveInfinity,
)
from .sign import Sign
from .util import gcd

__all__ = [
    "Rational",
    "rationalize",
    "NonZeroUInt",
    "Sign",
    "gcd",
    "RoundingDirection",
    "RoundingDirectionDecider",
    "Floor",
    "Ceil",
    "TowardsNegativeInfinity",
    "TowardsPositiveInfinity",
    "TowardNearest",
    "TowardNearestEven",
    "TowardNearestOdd",
    "DEFAULT_ROUNDING",
    "as_rational_array",
    "zeros",
    "zeros_like",
]
