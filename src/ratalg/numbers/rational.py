"""Exact fractions with a reduction invariant.

``RationalNumber`` wraps ``fractions.Fraction``, which keeps the value fully
reduced with a positive denominator (zero is ``0/1``). The wrapper adds the
string and bounded continued-fraction constructors, typed errors, and an
explicit add/subtract/multiply/divide API.
"""
from __future__ import annotations

import math
import re
from fractions import Fraction
from math import gcd

from ratalg.errors import DivisionByZero, EntryError


_FRACTION_RE = re.compile(r"^\s*([+-]?\d+)\s*/\s*([+-]?\d+)\s*$")
_DECIMAL_RE = re.compile(r"^\s*([+-]?)(\d*)(?:\.(\d*))?(?:[eE]([+-]?\d+))?\s*$")


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


class RationalNumber:
    """Immutable reduced fraction ``numerator/denominator``."""

    __slots__ = ("_fraction",)

    def __init__(self, numerator: int | str | Fraction = 0, denominator: int = 1):
        if isinstance(numerator, Fraction) and denominator == 1:
            self._fraction = numerator
            return
        if isinstance(numerator, str):
            parsed = RationalNumber.from_string(numerator)
            numerator, denominator = parsed.numerator, parsed.denominator * denominator
        if not _is_int(numerator):
            raise EntryError(f"numerator must be an int, got {type(numerator).__name__}")
        if not _is_int(denominator):
            raise EntryError(f"denominator must be an int, got {type(denominator).__name__}")
        if denominator == 0:
            raise DivisionByZero(f"zero denominator in {numerator}/0")
        self._fraction = Fraction(numerator, denominator)

    # ------------------------------------------------------------------
    # Constructors
    # ------------------------------------------------------------------

    @classmethod
    def from_string(cls, text: str) -> RationalNumber:
        """Parse ``"p/q"``, ``"n"`` or a decimal like ``"-1.25e2"`` exactly."""
        m = _FRACTION_RE.match(text)
        if m:
            return cls(int(m.group(1)), int(m.group(2)))

        m = _DECIMAL_RE.match(text)
        if not m or not (m.group(2) or m.group(3)):
            raise EntryError(f"cannot parse {text!r} as a rational number")
        sign, whole, frac, exp = m.groups()
        frac = frac or ""
        digits = int((whole or "0") + frac)
        if sign == "-":
            digits = -digits
        power = int(exp or 0) - len(frac)
        if power >= 0:
            return cls(digits * 10 ** power, 1)
        return cls(digits, 10 ** (-power))

    @classmethod
    def from_float(
        cls,
        value: float,
        precision: int = 10,
        max_iterations: int = 20,
    ) -> RationalNumber:
        """Best small-denominator approximation via continued fractions.

        The expansion stops once the fractional remainder falls below
        ``10**-precision`` or after ``max_iterations`` terms.
        """
        if not math.isfinite(value):
            raise EntryError(f"cannot represent {value!r} as a rational number")
        if float(value).is_integer():
            return cls(int(value), 1)

        x = abs(value)
        a = math.floor(x)
        # convergents h/k, seeded with h_{-1}/k_{-1} = 1/0
        h_prev, h = 1, a
        k_prev, k = 0, 1
        remainder = x - a
        tolerance = 10.0 ** (-precision)

        iterations = 0
        while remainder > tolerance and iterations < max_iterations:
            reciprocal = 1.0 / remainder
            a = math.floor(reciprocal)
            h_prev, h = h, a * h + h_prev
            k_prev, k = k, a * k + k_prev
            remainder = reciprocal - a
            iterations += 1

        if value < 0:
            h = -h
        return cls(h, k)

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    @property
    def numerator(self) -> int:
        return self._fraction.numerator

    @property
    def denominator(self) -> int:
        return self._fraction.denominator

    def as_fraction(self) -> Fraction:
        return self._fraction

    def is_integer(self) -> bool:
        return self._fraction.denominator == 1

    def to_float(self) -> float:
        try:
            return float(self._fraction)
        except OverflowError:
            raise EntryError(f"{self} is too large to represent as a float") from None

    # ------------------------------------------------------------------
    # Arithmetic
    # ------------------------------------------------------------------

    @staticmethod
    def _operand(other: object) -> Fraction:
        if isinstance(other, RationalNumber):
            return other._fraction
        if _is_int(other):
            return Fraction(other)
        raise EntryError(f"unsupported operand type {type(other).__name__}")

    def add(self, other: RationalNumber | int) -> RationalNumber:
        return RationalNumber(self._fraction + self._operand(other))

    def subtract(self, other: RationalNumber | int) -> RationalNumber:
        return RationalNumber(self._fraction - self._operand(other))

    def multiply(self, other: RationalNumber | int) -> RationalNumber:
        return RationalNumber(self._fraction * self._operand(other))

    def divide(self, other: RationalNumber | int) -> RationalNumber:
        o = self._operand(other)
        if o == 0:
            raise DivisionByZero(f"division of {self} by zero")
        return RationalNumber(self._fraction / o)

    def negate(self) -> RationalNumber:
        return RationalNumber(-self._fraction)

    def absolute(self) -> RationalNumber:
        return RationalNumber(abs(self._fraction))

    def __add__(self, other):
        if isinstance(other, float):
            return NotImplemented
        return self.add(other)

    __radd__ = __add__

    def __sub__(self, other):
        if isinstance(other, float):
            return NotImplemented
        return self.subtract(other)

    def __rsub__(self, other):
        if isinstance(other, float):
            return NotImplemented
        return RationalNumber(self._operand(other)).subtract(self)

    def __mul__(self, other):
        if isinstance(other, float):
            return NotImplemented
        return self.multiply(other)

    __rmul__ = __mul__

    def __truediv__(self, other):
        if isinstance(other, float):
            return NotImplemented
        return self.divide(other)

    def __rtruediv__(self, other):
        if isinstance(other, float):
            return NotImplemented
        return RationalNumber(self._operand(other)).divide(self)

    def __neg__(self) -> RationalNumber:
        return self.negate()

    def __pos__(self) -> RationalNumber:
        return self

    def __abs__(self) -> RationalNumber:
        return self.absolute()

    # ------------------------------------------------------------------
    # Comparison
    # ------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if isinstance(other, RationalNumber):
            return self._fraction == other._fraction
        if _is_int(other) or isinstance(other, (float, Fraction)):
            return self._fraction == other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._fraction)

    def __lt__(self, other: object) -> bool:
        if isinstance(other, RationalNumber):
            return self._fraction < other._fraction
        if _is_int(other):
            return self._fraction < other
        return NotImplemented

    def __le__(self, other: object) -> bool:
        if isinstance(other, RationalNumber):
            return self._fraction <= other._fraction
        if _is_int(other):
            return self._fraction <= other
        return NotImplemented

    def __gt__(self, other: object) -> bool:
        if isinstance(other, RationalNumber):
            return self._fraction > other._fraction
        if _is_int(other):
            return self._fraction > other
        return NotImplemented

    def __ge__(self, other: object) -> bool:
        if isinstance(other, RationalNumber):
            return self._fraction >= other._fraction
        if _is_int(other):
            return self._fraction >= other
        return NotImplemented

    def __bool__(self) -> bool:
        return self._fraction != 0

    def __float__(self) -> float:
        return self.to_float()

    # ------------------------------------------------------------------
    # Text
    # ------------------------------------------------------------------

    def __str__(self) -> str:
        if self.denominator == 1:
            return str(self.numerator)
        return f"{self.numerator}/{self.denominator}"

    def __repr__(self) -> str:
        return f"RationalNumber({self.numerator}, {self.denominator})"

    def format_mixed(self) -> str:
        """Mixed-number text, e.g. ``-7/2`` -> ``"-3 1/2"``."""
        whole, rest = divmod(abs(self.numerator), self.denominator)
        sign = "-" if self.numerator < 0 else ""
        if rest == 0:
            return f"{sign}{whole}"
        if whole == 0:
            return f"{sign}{rest}/{self.denominator}"
        return f"{sign}{whole} {rest}/{self.denominator}"


ZERO = RationalNumber(0)
ONE = RationalNumber(1)

__all__ = ["RationalNumber", "ZERO", "ONE", "gcd"]
