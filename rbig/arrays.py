"""NumPy object-array helpers for :class:`rbig.Rational`."""
from __future__ import annotations

from typing import Any

try:  # NumPy is optional but recommended for array workflows.
    import numpy as np  # type: ignore
except ModuleNotFoundError:  # pragma: no cover - optional dependency may be absent.
    np = None  # type: ignore

from .rational import Rational


def as_rational_array(values: Any, *, copy: bool = True) -> "np.ndarray":
    """Return a ``numpy.ndarray`` of :class:`Rational` values.

    ``values`` can be any iterable containing numeric-like entries or an existing
    NumPy array. When ``copy`` is ``False`` and ``values`` is already a NumPy
    array with ``dtype=object`` holding only :class:`Rational` entries, the
    original array is returned; otherwise every element is a new :class:`Rational`.
    """

    if np is None:
        raise RuntimeError("NumPy is required to construct Rational arrays")

    if isinstance(values, np.ndarray):
        if values.dtype == object and all(isinstance(item, Rational) for item in values.flat):
            if not copy:
                return values
            if values.size == 0:
                return values.copy()
            # copy the elements too, not just the array
            return np.vectorize(Rational.copy, otypes=[object])(values)
        if values.size == 0:
            return values.astype(object)
        vectorised = np.vectorize(Rational.rationalize, otypes=[object])
        return vectorised(values)

    if isinstance(values, (list, tuple)):
        coerced = np.empty(len(values), dtype=object)
        for index, item in enumerate(values):
            coerced[index] = Rational.rationalize(item)
        return coerced

    return as_rational_array(list(values), copy=copy)


def zeros(length: int) -> "np.ndarray":
    """Return a one-dimensional array of length ``length`` filled with zeros."""

    if length < 0:
        raise ValueError("length must be non-negative")
    return as_rational_array([Rational.zero() for _ in range(length)], copy=False)


def zeros_like(values: Any) -> "np.ndarray":
    """Return a zero-filled array that matches the shape of ``values``."""

    array = as_rational_array(values, copy=False)
    result = np.empty(array.shape, dtype=object)
    for index in np.ndindex(array.shape):
        result[index] = Rational.zero()
    return result


__all__ = ["as_rational_array", "zeros", "zeros_like"]
