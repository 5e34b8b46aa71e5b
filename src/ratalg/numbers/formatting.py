from __future__ import annotations

import math
from typing import Sequence

from ratalg.numbers.mode import DEFAULT_MODE, NumericMode
from ratalg.numbers.rational import RationalNumber
from ratalg.numbers.scalar import Scalar, to_float, to_rational


def _decimal_text(value: float, precision: int) -> str:
    text = f"{value:.{precision}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    if text in ("-0", ""):
        text = "0"
    return text


def _rational_decimal_text(value: RationalNumber, precision: int) -> str:
    """Exact fixed-point text, rounded half away from zero; never goes through float."""
    n, d = abs(value.numerator), value.denominator
    scaled = (2 * n * 10 ** precision + d) // (2 * d)
    whole, frac = divmod(scaled, 10 ** precision)
    text = str(whole)
    if precision > 0:
        digits = str(frac).rjust(precision, "0").rstrip("0")
        if digits:
            text = f"{text}.{digits}"
    if value.numerator < 0 and text != "0":
        text = "-" + text
    return text


def _round_half_up(value: Scalar) -> int:
    if isinstance(value, RationalNumber):
        return (2 * value.numerator + value.denominator) // (2 * value.denominator)
    return math.floor(value + 0.5)


def format_scalar(value: Scalar | int, mode: NumericMode = DEFAULT_MODE) -> str:
    """Render one scalar as text according to ``mode.format_type``."""
    if mode.format_type == "integer":
        return str(_round_half_up(value))
    if mode.format_type == "decimal":
        if isinstance(value, RationalNumber):
            return _rational_decimal_text(value, mode.precision)
        return _decimal_text(to_float(value), mode.precision)

    r = to_rational(value, mode)
    if abs(r.numerator) > mode.display_limit or r.denominator > mode.display_limit:
        return _rational_decimal_text(r, mode.precision)
    return str(r)


def format_vector(vector: Sequence[Scalar], mode: NumericMode = DEFAULT_MODE) -> list[str]:
    return [format_scalar(v, mode) for v in vector]


def format_matrix(matrix: Sequence[Sequence[Scalar]], mode: NumericMode = DEFAULT_MODE) -> list[list[str]]:
    return [format_vector(row, mode) for row in matrix]


def vector_text(vector: Sequence[Scalar], mode: NumericMode = DEFAULT_MODE) -> str:
    """Inline text ``(a, b, c)`` used in trace descriptions."""
    return "(" + ", ".join(format_vector(vector, mode)) + ")"
