"""Arbitrary-size rational numbers with NumPy interoperability."""
from __future__ import annotations

import logging
import math
import numbers
import operator
from fractions import Fraction
from typing import Any, Callable, Optional, Union

try:  # NumPy is optional but recommended for array workflows.
    import numpy as np  # type: ignore
except ModuleNotFoundError:  # pragma: no cover - optional dependency may be absent.
    np = None  # type: ignore

from .nonzero import NonZeroUInt
from .rounding import (
    DEFAULT_TIE_BREAKER,
    Ceil,
    Floor,
    RoundingDirection,
    RoundingDirectionDecider,
    TowardNearest,
)
from .sign import Sign
from .util import LogicalSignum, Pair, ensure_int, ensure_uint, gcd

_logger = logging.getLogger(__name__)

NumberLike = Union["Rational", Fraction, numbers.Real]

DEFAULT_ROUNDING: RoundingDirectionDecider = TowardNearest(DEFAULT_TIE_BREAKER)


def _three_way(a: int, b: int) -> int:
    return (a > b) - (a < b)


def _reflected(op: Callable[["Rational", "Rational"], Any]):
    return lambda a, b: op(b, a)


class Rational:
    """An exact rational number ``sign * numer / denom``.

    ``numer`` is a non-negative ``int`` and ``denom`` a :class:`NonZeroUInt`.
    Values are not kept in lowest terms: arithmetic returns unreduced results
    and :meth:`reduce` / :meth:`reduced` must be called explicitly. Zero has
    many representations (``+0/d`` and ``-0/d`` for every ``d``) which all
    compare and hash equal.

    The in-place operators (``+=``, ``-=``, ``*=``, ``/=``) as well as
    :meth:`reduce`, :meth:`negate` and :meth:`set_zero` mutate the value; a
    value shared between readers must not be mutated while shared.
    """

    __slots__ = ("_sign", "_numer", "_denom")
    __array_priority__ = 1000.0  # Prefer Rational semantics in NumPy expressions.

    def __init__(
        self,
        sign: Sign = Sign.POSITIVE,
        numer: Union[int, numbers.Integral] = 0,
        denom: Optional[NonZeroUInt] = None,
    ) -> None:
        if not isinstance(sign, Sign):
            raise TypeError(f"sign must be a Sign, got {type(sign)!r}")
        numer = ensure_uint(numer, name="numer")
        if denom is None:
            denom = NonZeroUInt.one()
        elif not isinstance(denom, NonZeroUInt):
            raise TypeError(f"denom must be a NonZeroUInt, got {type(denom)!r}")

        self._sign = sign
        self._numer = numer
        self._denom = denom

    @classmethod
    def _new(cls, sign: Sign, numer: int, denom: NonZeroUInt) -> "Rational":
        instance = cls.__new__(cls)
        instance._sign = sign
        instance._numer = numer
        instance._denom = denom
        return instance

    # ------------------------------------------------------------------
    # Constructors
    @classmethod
    def from_numer_denom(
        cls, numer: Union[int, numbers.Integral], denom: Union[int, numbers.Integral]
    ) -> Optional["Rational"]:
        """Build a value from a signed numerator and denominator.

        Returns ``None`` when ``denom`` is zero.
        """
        numer = ensure_int(numer, name="numer")
        denom = ensure_int(denom, name="denom")
        nonzero_denom = NonZeroUInt.new(abs(denom))
        if nonzero_denom is None:
            _logger.debug("rejected zero denominator for numerator %d", numer)
            return None
        sign = Sign.positive_if((numer >= 0) == (denom >= 0))
        return cls._new(sign, abs(numer), nonzero_denom)

    @classmethod
    def from_numer_unsigned_denom(
        cls, numer: Union[int, numbers.Integral], denom: NonZeroUInt
    ) -> "Rational":
        """Build a value from a signed numerator and a non-zero denominator."""
        numer = ensure_int(numer, name="numer")
        if not isinstance(denom, NonZeroUInt):
            raise TypeError(f"denom must be a NonZeroUInt, got {type(denom)!r}")
        return cls._new(Sign.of(numer), abs(numer), denom)

    @classmethod
    def from_uint(cls, value: Union[int, numbers.Integral]) -> "Rational":
        return cls._new(Sign.POSITIVE, ensure_uint(value, name="value"), NonZeroUInt.one())

    @classmethod
    def from_int(cls, value: Union[int, numbers.Integral]) -> "Rational":
        value = ensure_int(value, name="value")
        return cls._new(Sign.of(value), abs(value), NonZeroUInt.one())

    @classmethod
    def from_fraction(cls, value: Fraction) -> "Rational":
        """Create a :class:`Rational` from :class:`fractions.Fraction`."""
        return cls.from_numer_unsigned_denom(value.numerator, NonZeroUInt(value.denominator))

    @classmethod
    def from_float(cls, value: float) -> "Rational":
        """Return the exact value of the binary float *value*."""
        if isinstance(value, bool):  # bool is a subclass of int; treat explicitly.
            return cls.from_int(value)
        value = float(value)
        if not math.isfinite(value):
            raise ValueError("cannot convert NaN or infinity to Rational")
        numer, denom = value.as_integer_ratio()
        return cls.from_numer_unsigned_denom(numer, NonZeroUInt(denom))

    @classmethod
    def rationalize(cls, value: NumberLike) -> "Rational":
        """Coerce a numeric-like value into a new :class:`Rational`."""
        if isinstance(value, Rational):
            return value.copy()
        return cls._coerce_scalar(value)

    @classmethod
    def zero(cls) -> "Rational":
        return cls._new(Sign.POSITIVE, 0, NonZeroUInt.one())

    @classmethod
    def one(cls) -> "Rational":
        return cls._new(Sign.POSITIVE, 1, NonZeroUInt.one())

    # ------------------------------------------------------------------
    # Properties and helpers
    @property
    def sign(self) -> Sign:
        return self._sign

    @property
    def numer(self) -> int:
        return self._numer

    @property
    def denom(self) -> NonZeroUInt:
        return self._denom

    def copy(self) -> "Rational":
        return Rational._new(self._sign, self._numer, self._denom)

    __copy__ = copy

    def __deepcopy__(self, memo: Any) -> "Rational":
        return self.copy()

    def as_fraction(self) -> Fraction:
        """Return a :class:`Fraction` with the same value."""
        return Fraction(self._sign.apply(self._numer), self._denom.get())

    def _cross_mul_abs(self, other: "Rational") -> Pair:
        return Pair(self._numer * other._denom.get(), other._numer * self._denom.get())

    def _cross_mul_signed(self, other: "Rational") -> Pair:
        return Pair(
            self._sign.apply(self._numer * other._denom.get()),
            other._sign.apply(other._numer * self._denom.get()),
        )

    def _logical_signum(self) -> LogicalSignum:
        if self._numer == 0:
            return LogicalSignum.ZERO
        if self._sign.is_positive():
            return LogicalSignum.POS
        return LogicalSignum.NEG

    # ------------------------------------------------------------------
    # Predicates
    def is_zero(self) -> bool:
        return self._numer == 0

    def is_positive(self) -> bool:
        return self._numer != 0 and self._sign.is_positive()

    def is_negative(self) -> bool:
        return self._numer != 0 and not self._sign.is_positive()

    def is_one(self) -> bool:
        return self._sign.is_positive() and self._numer == self._denom.get()

    def is_int(self) -> bool:
        return self._numer % self._denom.get() == 0

    def is_uint(self) -> bool:
        return self.is_int() and not self.is_negative()

    # ------------------------------------------------------------------
    # Integer extraction
    def try_into_int(self) -> Union[int, "Rational"]:
        """Return the value as ``int``, or ``self`` unchanged if it is not an integer."""
        if self.is_int():
            return self._sign.apply(self.reduced()._numer)
        return self

    def try_to_int(self) -> Optional[int]:
        if self.is_int():
            return self._sign.apply(self.reduced()._numer)
        return None

    def try_into_uint(self) -> Union[int, "Rational"]:
        """Return the value as a non-negative ``int``, or ``self`` unchanged."""
        if self.is_uint():
            return self.reduced()._numer
        return self

    def try_to_uint(self) -> Optional[int]:
        if self.is_uint():
            return self.reduced()._numer
        return None

    # ------------------------------------------------------------------
    # Reduction and reciprocal
    def reduce(self) -> None:
        """Divide numerator and denominator by their greatest common divisor."""
        divisor = gcd(self._numer, self._denom.get())
        self._numer //= divisor
        self._denom = self._denom // divisor

    def reduced(self) -> "Rational":
        """Like :meth:`reduce`, but returns the result instead of modifying ``self``."""
        result = self.copy()
        result.reduce()
        return result

    def _unchecked_recip(self) -> "Rational":
        # Precondition: self._numer != 0, otherwise the new denominator is zero.
        return Rational._new(
            self._sign, self._denom.get(), NonZeroUInt._new_unchecked(self._numer)
        )

    def checked_recip(self) -> Optional["Rational"]:
        """Return the reciprocal, or ``None`` if the value is zero."""
        if self._numer == 0:
            _logger.debug("checked reciprocal of zero")
            return None
        return self._unchecked_recip()

    def recip(self) -> "Rational":
        """Return the reciprocal; raises :class:`ZeroDivisionError` for zero."""
        if self._numer == 0:
            raise ZeroDivisionError("tried to take the reciprocal of zero")
        return self._unchecked_recip()

    # ------------------------------------------------------------------
    # Sign, magnitude and powers
    def signum(self) -> "Rational":
        """Return ``0`` for zero, otherwise ``+1`` or ``-1`` matching ``self.sign``."""
        if self.is_zero():
            return Rational.zero()
        return Rational._new(self._sign, 1, NonZeroUInt.one())

    def negate(self) -> None:
        self._sign = -self._sign

    def set_zero(self) -> None:
        self._numer = 0

    def unsigned_pow(self, exp: Union[int, numbers.Integral]) -> "Rational":
        exp = ensure_uint(exp, name="exp")
        return Rational._new(self._sign.pow(exp), self._numer ** exp, self._denom.pow(exp))

    def signed_pow(self, exp: Union[int, numbers.Integral]) -> "Rational":
        exp = ensure_int(exp, name="exp")
        result = self.unsigned_pow(abs(exp))
        if exp >= 0:
            return result
        return result.recip()

    # ------------------------------------------------------------------
    # Rounding
    def abs_floor(self) -> int:
        """Round the absolute value towards zero."""
        return self._numer // self._denom.get()

    def abs_ceil(self) -> int:
        """Round the absolute value away from zero."""
        if self._numer == 0:
            return 0
        return (self._numer - 1) // self._denom.get() + 1

    @staticmethod
    def _decide(decider: RoundingDirectionDecider, value: "Rational") -> RoundingDirection:
        if not isinstance(decider, RoundingDirectionDecider):
            raise TypeError(f"{type(decider)!r} is not a rounding direction decider")
        return decider.decide(value)

    def round_abs(self, decider: Optional[RoundingDirectionDecider] = None) -> int:
        """Round the absolute value of ``self`` to a non-negative integer."""
        if decider is None:
            decider = DEFAULT_ROUNDING
        magnitude = abs(self)
        if self._decide(decider, magnitude) is RoundingDirection.AWAY_FROM_ZERO:
            return magnitude.abs_ceil()
        return magnitude.abs_floor()

    def round(self, decider: Optional[RoundingDirectionDecider] = None) -> int:
        """Round ``self`` to an integer in the direction chosen by *decider*."""
        if decider is None:
            decider = DEFAULT_ROUNDING
        if self._decide(decider, self) is RoundingDirection.AWAY_FROM_ZERO:
            magnitude = self.abs_ceil()
        else:
            magnitude = self.abs_floor()
        return self._sign.apply(magnitude)

    def trunc(self) -> "Rational":
        """Integer part, rounded towards zero."""
        return Rational.from_int(self.round(RoundingDirection.TOWARDS_ZERO))

    def fract(self) -> "Rational":
        """Fractional part; ``self == self.trunc() + self.fract()``."""
        return Rational._new(self._sign, self._numer % self._denom.get(), self._denom)

    # ------------------------------------------------------------------
    # Numeric protocol
    def __float__(self) -> float:
        return self._sign.apply(self._numer) / self._denom.get()

    def __int__(self) -> int:
        return self.round(RoundingDirection.TOWARDS_ZERO)

    __trunc__ = __int__

    def __floor__(self) -> int:
        return self.round(Floor())

    def __ceil__(self) -> int:
        return self.round(Ceil())

    def __round__(self, ndigits: Optional[int] = None) -> Union[int, "Rational"]:
        if ndigits is None:
            return self.round(DEFAULT_ROUNDING)
        shift = 10 ** abs(ndigits)
        if ndigits > 0:
            return Rational.from_int((self * shift).round(DEFAULT_ROUNDING)) / shift
        return Rational.from_int((self / shift).round(DEFAULT_ROUNDING)) * shift

    def __bool__(self) -> bool:
        return self._numer != 0

    # ------------------------------------------------------------------
    # Representation
    def __repr__(self) -> str:
        return f"Rational({self._sign!r}, {self._numer}, {self._denom!r})"

    # ------------------------------------------------------------------
    # Internal helpers
    @staticmethod
    def _coerce_scalar(value: Any) -> "Rational":
        if isinstance(value, Rational):
            return value
        if isinstance(value, numbers.Integral):
            return Rational.from_int(value)
        if isinstance(value, Fraction):
            return Rational.from_fraction(value)
        if np is not None and isinstance(value, np.generic):  # NumPy scalars
            return Rational._coerce_scalar(value.item())
        if isinstance(value, numbers.Real):
            return Rational.from_float(float(value))
        raise TypeError(f"Cannot interpret {type(value)!r} as Rational")

    def _binary_operation(self, other: Any, op):
        if np is not None and isinstance(other, np.ndarray):
            vectorised = np.vectorize(
                lambda x: op(self, self._coerce_scalar(x)),
                otypes=[object],
            )
            return vectorised(other)
        try:
            other_rat = self._coerce_scalar(other)
        except TypeError:
            return NotImplemented
        return op(self, other_rat)

    def _coerce_power(self, value: Any) -> int:
        if isinstance(value, numbers.Integral):
            return int(value)
        if isinstance(value, Rational):
            result = value.try_to_int()
            if result is None:
                raise ValueError("Exponent must be an integer")
            return result
        if np is not None and isinstance(value, np.generic):
            return self._coerce_power(value.item())
        if isinstance(value, numbers.Real):
            if not float(value).is_integer():
                raise ValueError("Exponent must be an integer")
            return int(value)
        raise TypeError("Unsupported exponent type")

    # ------------------------------------------------------------------
    # Arithmetic operators
    @staticmethod
    def _add(a: "Rational", b: "Rational") -> "Rational":
        denom = a._denom * b._denom
        numer = a._cross_mul_signed(b).fold(operator.add)
        return Rational.from_numer_unsigned_denom(numer, denom)

    @staticmethod
    def _sub(a: "Rational", b: "Rational") -> "Rational":
        denom = a._denom * b._denom
        numer = a._cross_mul_signed(b).fold(operator.sub)
        return Rational.from_numer_unsigned_denom(numer, denom)

    @staticmethod
    def _mul(a: "Rational", b: "Rational") -> "Rational":
        return Rational._new(a._sign * b._sign, a._numer * b._numer, a._denom * b._denom)

    @staticmethod
    def _truediv(a: "Rational", b: "Rational") -> "Rational":
        return Rational._mul(a, b.recip())

    def __add__(self, other: Any) -> Any:
        return self._binary_operation(other, Rational._add)

    def __radd__(self, other: Any) -> Any:
        return self._binary_operation(other, _reflected(Rational._add))

    def __sub__(self, other: Any) -> Any:
        return self._binary_operation(other, Rational._sub)

    def __rsub__(self, other: Any) -> Any:
        return self._binary_operation(other, _reflected(Rational._sub))

    def __mul__(self, other: Any) -> Any:
        return self._binary_operation(other, Rational._mul)

    def __rmul__(self, other: Any) -> Any:
        return self._binary_operation(other, _reflected(Rational._mul))

    def __truediv__(self, other: Any) -> Any:
        return self._binary_operation(other, Rational._truediv)

    def __rtruediv__(self, other: Any) -> Any:
        return self._binary_operation(other, _reflected(Rational._truediv))

    def __pow__(self, exponent: Any) -> Any:
        if np is not None and isinstance(exponent, np.ndarray):
            vectorised = np.vectorize(lambda x: self.__pow__(x), otypes=[object])
            return vectorised(exponent)
        return self.signed_pow(self._coerce_power(exponent))

    def __iadd__(self, other: Any) -> Any:
        if np is not None and isinstance(other, np.ndarray):
            return NotImplemented
        try:
            other = self._coerce_scalar(other)
        except TypeError:
            return NotImplemented
        # delta is other's numerator over the common denominator self.denom * other.denom
        delta = other._numer * self._denom.get()
        self._numer *= other._denom.get()
        self._denom = self._denom * other._denom
        if (other._sign * self._sign).is_positive():
            self._numer += delta
        elif self._numer >= delta:
            self._numer -= delta
        else:
            self._sign = -self._sign
            self._numer = delta - self._numer
        return self

    def __isub__(self, other: Any) -> Any:
        if np is not None and isinstance(other, np.ndarray):
            return NotImplemented
        try:
            other = self._coerce_scalar(other)
        except TypeError:
            return NotImplemented
        return self.__iadd__(-other)

    def __imul__(self, other: Any) -> Any:
        if np is not None and isinstance(other, np.ndarray):
            return NotImplemented
        try:
            other = self._coerce_scalar(other)
        except TypeError:
            return NotImplemented
        self._sign = self._sign * other._sign
        self._numer *= other._numer
        self._denom = self._denom * other._denom
        return self

    def __itruediv__(self, other: Any) -> Any:
        if np is not None and isinstance(other, np.ndarray):
            return NotImplemented
        try:
            other = self._coerce_scalar(other)
        except TypeError:
            return NotImplemented
        return self.__imul__(other.recip())

    def __neg__(self) -> "Rational":
        return Rational._new(-self._sign, self._numer, self._denom)

    def __pos__(self) -> "Rational":
        return self.copy()

    def __abs__(self) -> "Rational":
        return Rational._new(Sign.POSITIVE, self._numer, self._denom)

    # ------------------------------------------------------------------
    # Comparisons
    def _cmp(self, other: "Rational") -> int:
        order = _three_way(self._logical_signum(), other._logical_signum())
        if order != 0 or self._numer == 0:
            return order
        # same non-zero sign class: the signed cross products order the values
        return self._cross_mul_signed(other).fold(_three_way)

    @staticmethod
    def _non_finite_float(value: Any) -> Optional[float]:
        if isinstance(value, float) or (np is not None and isinstance(value, np.floating)):
            value = float(value)
            if not math.isfinite(value):
                return value
        return None

    def _compare(self, other: Any, op) -> bool:
        non_finite = self._non_finite_float(other)
        if non_finite is not None:
            # every finite value sits where 0.0 does relative to NaN and the infinities
            return op(0.0, non_finite)
        try:
            other_rat = self._coerce_scalar(other)
        except TypeError:
            return NotImplemented
        return op(self._cmp(other_rat), 0)

    def __eq__(self, other: Any) -> bool:
        if self._non_finite_float(other) is not None:
            return False
        try:
            other_rat = self._coerce_scalar(other)
        except TypeError:
            return NotImplemented
        if self._numer == 0 and other_rat._numer == 0:
            return True
        return self._sign is other_rat._sign and self._cross_mul_abs(other_rat).fold(
            operator.eq
        )

    def __lt__(self, other: Any) -> bool:
        return self._compare(other, operator.lt)

    def __le__(self, other: Any) -> bool:
        return self._compare(other, operator.le)

    def __gt__(self, other: Any) -> bool:
        return self._compare(other, operator.gt)

    def __ge__(self, other: Any) -> bool:
        return self._compare(other, operator.ge)

    def __hash__(self) -> int:
        reduced = self.reduced()
        sign = Sign.POSITIVE if reduced._numer == 0 else reduced._sign
        # Hashing through Fraction keeps equal ints and Fractions in the same bucket.
        return hash(Fraction(sign.apply(reduced._numer), reduced._denom.get()))

    # ------------------------------------------------------------------
    # NumPy interoperability
    if np is not None:
        _UFUNC_DISPATCH = {
            np.add: operator.add,
            np.subtract: operator.sub,
            np.multiply: operator.mul,
            np.divide: operator.truediv,
            np.true_divide: operator.truediv,
            np.negative: operator.neg,
            np.positive: operator.pos,
            np.absolute: abs,
            np.power: operator.pow,
            np.floor: math.floor,
            np.ceil: math.ceil,
            np.trunc: math.trunc,
        }
    else:  # pragma: no cover - executed when NumPy unavailable
        _UFUNC_DISPATCH = {}

    def __array_ufunc__(self, ufunc, method, *inputs, **kwargs):
        if np is None:  # pragma: no cover - NumPy calls this only when installed
            return NotImplemented
        if method != "__call__":
            return NotImplemented
        if kwargs.get("out") is not None:
            raise NotImplementedError("`out` argument is not supported for Rational ufuncs")
        op = self._UFUNC_DISPATCH.get(ufunc)
        if op is None:
            _logger.debug("unsupported ufunc %s for Rational", ufunc.__name__)
            return NotImplemented

        coerced = []
        has_array = False
        for value in inputs:
            if isinstance(value, Rational):
                coerced.append(value)
            elif isinstance(value, np.ndarray):
                vectorised = np.vectorize(self._coerce_scalar, otypes=[object])
                coerced.append(vectorised(value))
                has_array = True
            else:
                coerced.append(self._coerce_scalar(value))
        if has_array:
            vectorised = np.vectorize(lambda *args: op(*args), otypes=[object])
            return vectorised(*coerced)
        return op(*coerced)


def rationalize(value: NumberLike) -> Rational:
    """Public helper to convert *value* into :class:`Rational`."""

    return Rational.rationalize(value)


__all__ = ["Rational", "rationalize", "DEFAULT_ROUNDING"]
