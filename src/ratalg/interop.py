"""
Conversion of ratalg values to SymPy objects.

Rationals map to ``sympy.Rational`` and floats to ``sympy.Float``, so exact
results stay exact on the SymPy side. Useful for cross-checking results or
typesetting them with ``sympy.latex``.
"""
from __future__ import annotations

from typing import Sequence

import sympy

from ratalg.numbers.mode import DEFAULT_MODE, NumericMode
from ratalg.numbers.rational import RationalNumber
from ratalg.numbers.scalar import coerce


def to_sympy_rational(value: object, mode: NumericMode = DEFAULT_MODE) -> sympy.Expr:
    x = coerce(value, mode)
    if isinstance(x, RationalNumber):
        return sympy.Rational(x.numerator, x.denominator)
    return sympy.Float(x)


def to_sympy_matrix(matrix: Sequence[Sequence[object]], mode: NumericMode = DEFAULT_MODE) -> sympy.Matrix:
    return sympy.Matrix([[to_sympy_rational(x, mode) for x in row] for row in matrix])


def to_sympy_poly(
    coefficients: Sequence[object],
    mode: NumericMode = DEFAULT_MODE,
    *,
    variable: str = "x",
) -> sympy.Poly:
    """Polynomial from coefficients ordered highest degree first."""
    x = sympy.Symbol(variable)
    return sympy.Poly([to_sympy_rational(c, mode) for c in coefficients], x)
