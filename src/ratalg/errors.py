"""Typed failures raised by the algebra routines.

Every error carries an optional ``steps`` attribute. The engine facade fills it
with the partial trace recorded before the failure; plain function calls leave
it empty.
"""
from __future__ import annotations


class AlgebraError(Exception):
    """Base class for every failure raised by ratalg."""

    def __init__(self, message: str = "", *, steps: tuple = ()):
        super().__init__(message)
        self.steps = tuple(steps)


class ShapeError(AlgebraError, ValueError):
    """Ragged rows, non-square input, or mismatched dimensions."""


class OrderLimitExceeded(ShapeError):
    """Matrix order too large for the principal-minor expansion."""


class EmptyInput(AlgebraError, ValueError):
    """Empty matrix, vector, or vector family."""


class DivisionByZero(AlgebraError, ZeroDivisionError):
    """Rational division by zero or a zero denominator."""


class NotInvertible(AlgebraError, ArithmeticError):
    """Singular matrix met during inversion."""


class ZeroVector(AlgebraError, ValueError):
    """Normalization of a vector whose norm is numerically zero."""


class EntryError(AlgebraError, ValueError):
    """Entry that cannot be turned into a scalar, or a bad mode setting."""
