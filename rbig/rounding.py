"""Rounding-direction strategies for :class:`rbig.Rational`.

A decider looks at the value being rounded and answers whether its magnitude
should be rounded towards or away from zero. :meth:`Rational.round` and
:meth:`Rational.round_abs` accept any object with a ``decide`` method.
"""
from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:  # pragma: no cover - imported for annotations only
    from .rational import Rational


class RoundingDirection(enum.Enum):
    TOWARDS_ZERO = "towards_zero"
    AWAY_FROM_ZERO = "away_from_zero"

    def decide(self, to_round: "Rational") -> "RoundingDirection":
        """A literal direction always decides for itself."""
        return self


@runtime_checkable
class RoundingDirectionDecider(Protocol):
    def decide(self, to_round: "Rational") -> RoundingDirection:
        ...


@dataclass(frozen=True)
class Floor:
    """Round towards negative infinity."""

    def decide(self, to_round: "Rational") -> RoundingDirection:
        if to_round.is_negative():
            return RoundingDirection.AWAY_FROM_ZERO
        return RoundingDirection.TOWARDS_ZERO


TowardsNegativeInfinity = Floor


@dataclass(frozen=True)
class Ceil:
    """Round towards positive infinity."""

    def decide(self, to_round: "Rational") -> RoundingDirection:
        if to_round.is_positive():
            return RoundingDirection.AWAY_FROM_ZERO
        return RoundingDirection.TOWARDS_ZERO


TowardsPositiveInfinity = Ceil


@dataclass(frozen=True)
class TowardNearestEven:
    """Pick the even neighbour; the usual tie breaker for bankers' rounding."""

    def decide(self, to_round: "Rational") -> RoundingDirection:
        if to_round.round_abs(RoundingDirection.TOWARDS_ZERO) % 2 == 0:
            return RoundingDirection.TOWARDS_ZERO
        return RoundingDirection.AWAY_FROM_ZERO


@dataclass(frozen=True)
class TowardNearestOdd:
    """Pick the odd neighbour."""

    def decide(self, to_round: "Rational") -> RoundingDirection:
        if to_round.round_abs(RoundingDirection.TOWARDS_ZERO) % 2 == 1:
            return RoundingDirection.TOWARDS_ZERO
        return RoundingDirection.AWAY_FROM_ZERO


@dataclass(frozen=True)
class TowardNearest:
    """Round to the nearest integer, consulting ``tie_breaker`` for halves."""

    tie_breaker: RoundingDirectionDecider = TowardNearestEven()

    def decide(self, to_round: "Rational") -> RoundingDirection:
        abs_fract = abs(to_round.fract())
        # 2a <=> b is equivalent to a/b <=> 1/2
        doubled = abs_fract.numer * 2
        half_way = abs_fract.denom.get()
        if doubled > half_way:
            return RoundingDirection.AWAY_FROM_ZERO
        if doubled < half_way:
            return RoundingDirection.TOWARDS_ZERO
        return self.tie_breaker.decide(to_round)


DEFAULT_TIE_BREAKER: RoundingDirectionDecider = TowardNearestEven()


__all__ = [
    "RoundingDirection",
    "RoundingDirectionDecider",
    "Floor",
    "TowardsNegativeInfinity",
    "Ceil",
    "TowardsPositiveInfinity",
    "TowardNearest",
    "TowardNearestEven",
    "TowardNearestOdd",
    "DEFAULT_TIE_BREAKER",
]
