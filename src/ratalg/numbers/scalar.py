"""Scalar arithmetic over ``RationalNumber | float``.

Each operator has exactly one dispatch function. Operands are promoted to
RationalNumber when the mode is exact or when either operand is already
rational; only float-with-float in decimal mode stays in floating point.
"""
from __future__ import annotations

import math
from typing import Union

from ratalg.errors import DivisionByZero, EntryError
from ratalg.numbers.mode import DEFAULT_MODE, NumericMode
from ratalg.numbers.rational import ONE, ZERO, RationalNumber

Scalar = Union[RationalNumber, float]


def to_rational(value: Scalar | int, mode: NumericMode = DEFAULT_MODE) -> RationalNumber:
    if isinstance(value, RationalNumber):
        return value
    if isinstance(value, bool):
        raise EntryError("booleans are not numeric entries.")
    if isinstance(value, int):
        return RationalNumber(value)
    if isinstance(value, float):
        return RationalNumber.from_float(value, mode.precision, mode.max_iterations)
    raise EntryError(f"unsupported scalar type {type(value).__name__}")


def to_float(value: Scalar | int) -> float:
    if isinstance(value, RationalNumber):
        return value.to_float()
    return float(value)


def coerce(value: object, mode: NumericMode = DEFAULT_MODE) -> Scalar:
    """Turn a raw entry (int, float, str, RationalNumber) into a mode scalar."""
    if isinstance(value, bool):
        raise EntryError("booleans are not numeric entries.")
    if isinstance(value, str):
        value = RationalNumber.from_string(value)
    elif isinstance(value, float) and not math.isfinite(value):
        raise EntryError(f"non-finite entry {value!r}")
    elif not isinstance(value, (int, float, RationalNumber)):
        raise EntryError(f"unsupported entry type {type(value).__name__}: {value!r}")

    if mode.exact:
        return to_rational(value, mode)
    return to_float(value)


def zero(mode: NumericMode = DEFAULT_MODE) -> Scalar:
    return ZERO if mode.exact else 0.0


def one(mode: NumericMode = DEFAULT_MODE) -> Scalar:
    return ONE if mode.exact else 1.0


def _promote(a: Scalar, b: Scalar, mode: NumericMode) -> tuple[Scalar, Scalar]:
    if mode.exact or isinstance(a, RationalNumber) or isinstance(b, RationalNumber):
        return to_rational(a, mode), to_rational(b, mode)
    return float(a), float(b)


def add(a: Scalar, b: Scalar, mode: NumericMode = DEFAULT_MODE) -> Scalar:
    a, b = _promote(a, b, mode)
    if isinstance(a, RationalNumber):
        return a.add(b)
    return a + b


def subtract(a: Scalar, b: Scalar, mode: NumericMode = DEFAULT_MODE) -> Scalar:
    a, b = _promote(a, b, mode)
    if isinstance(a, RationalNumber):
        return a.subtract(b)
    return a - b


def multiply(a: Scalar, b: Scalar, mode: NumericMode = DEFAULT_MODE) -> Scalar:
    a, b = _promote(a, b, mode)
    if isinstance(a, RationalNumber):
        return a.multiply(b)
    return a * b


def divide(a: Scalar, b: Scalar, mode: NumericMode = DEFAULT_MODE) -> Scalar:
    a, b = _promote(a, b, mode)
    if isinstance(a, RationalNumber):
        return a.divide(b)
    if b == 0.0:
        raise DivisionByZero(f"division of {a!r} by zero")
    return a / b


def negate(a: Scalar) -> Scalar:
    if isinstance(a, RationalNumber):
        return a.negate()
    return -a


def absolute(a: Scalar) -> Scalar:
    if isinstance(a, RationalNumber):
        return a.absolute()
    return abs(a)


def magnitude(a: Scalar) -> float:
    return abs(to_float(a))


def larger_magnitude(a: Scalar, b: Scalar) -> bool:
    """|a| > |b|, compared exactly when both are rational."""
    if isinstance(a, RationalNumber) and isinstance(b, RationalNumber):
        return a.absolute() > b.absolute()
    return magnitude(a) > magnitude(b)


def square_root(a: Scalar) -> float:
    value = to_float(a)
    if value < 0:
        raise EntryError(f"square root of negative value {a}")
    return math.sqrt(value)


def is_zero(a: Scalar, mode: NumericMode = DEFAULT_MODE) -> bool:
    """Exact test for rationals, tolerance test for floats."""
    if isinstance(a, RationalNumber):
        return a.numerator == 0
    return abs(a) < mode.zero_tolerance


def is_negative(a: Scalar, mode: NumericMode = DEFAULT_MODE) -> bool:
    if isinstance(a, RationalNumber):
        return a.numerator < 0
    return a < 0 and not is_zero(a, mode)


def equals(a: Scalar, b: Scalar, mode: NumericMode = DEFAULT_MODE) -> bool:
    if isinstance(a, RationalNumber) and isinstance(b, RationalNumber):
        return a == b
    return abs(to_float(a) - to_float(b)) < mode.zero_tolerance
