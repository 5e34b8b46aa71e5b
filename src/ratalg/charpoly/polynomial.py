"""
Characteristic polynomial via sums of principal minors.

For an n x n matrix A,

    det(xI - A) = sum_{r=0..n} (-1)^r * E_r(A) * x^(n-r)

where E_r(A) is the sum of all r x r principal minors of A (E_0 = 1,
E_1 = trace, E_n = det). Each minor is evaluated with the elimination
determinant, so the cost grows with C(n, r); orders above the mode's
max_order are refused.
"""
from __future__ import annotations

import logging
from typing import Sequence

from ratalg.errors import OrderLimitExceeded, ShapeError
from ratalg.numbers import scalar as S
from ratalg.numbers.formatting import format_scalar
from ratalg.numbers.mode import DEFAULT_MODE, NumericMode
from ratalg.numbers.scalar import Scalar
from ratalg.matrix.determinant import determinant
from ratalg.matrix.shape import coerce_matrix, validate_matrix
from ratalg.results import CharacteristicPolynomialResult
from ratalg.trace import TraceRecorder
from ratalg.charpoly.subsets import count_subsets, index_subsets, principal_minor

logger = logging.getLogger(__name__)


def principal_minors_sum(
    matrix: Sequence[Sequence[object]],
    r: int,
    mode: NumericMode = DEFAULT_MODE,
    trace: TraceRecorder | None = None,
) -> Scalar:
    """E_r: the sum of the determinants of all r x r principal minors."""
    n, _ = validate_matrix(matrix, square=True)
    if r < 0 or r > n:
        raise ShapeError(f"minor size r={r} must lie in 0..{n}")
    if r == 0:
        return S.one(mode)

    M = coerce_matrix(matrix, mode)
    total = S.zero(mode)
    for indices in index_subsets(n, r):
        minor = principal_minor(M, indices)
        total = S.add(total, determinant(minor, mode), mode)

    if trace is not None:
        trace.record(
            f"Sum of the {count_subsets(n, r)} principal minors of order {r}: "
            f"{format_scalar(total, mode)}"
        )
    return total


def characteristic_polynomial(
    matrix: Sequence[Sequence[object]],
    mode: NumericMode = DEFAULT_MODE,
    trace: TraceRecorder | None = None,
) -> CharacteristicPolynomialResult:
    n, _ = validate_matrix(matrix, square=True)
    if n > mode.max_order:
        raise OrderLimitExceeded(
            f"characteristic polynomial supports order <= {mode.max_order}, got n={n}"
        )
    if trace is None:
        trace = TraceRecorder()

    M = coerce_matrix(matrix, mode)
    trace.record(f"Characteristic polynomial det(xI - A) of a matrix of order {n}", M)
    logger.debug("characteristic_polynomial: n=%d, format=%s", n, mode.format_type)

    if n == 2:
        tr = S.add(M[0][0], M[1][1], mode)
        det = S.subtract(
            S.multiply(M[0][0], M[1][1], mode),
            S.multiply(M[0][1], M[1][0], mode),
            mode,
        )
        trace.record(f"Trace of A = {format_scalar(tr, mode)}")
        trace.record(f"Determinant of A = {format_scalar(det, mode)}")
        coefficients = [S.one(mode), S.negate(tr), det]
    else:
        coefficients = []
        for r in range(n + 1):
            e_r = principal_minors_sum(M, r, mode, trace if r > 0 else None)
            coefficients.append(e_r if r % 2 == 0 else S.negate(e_r))

    text = format_polynomial(coefficients, mode)
    trace.record(f"p(x) = {text}")
    return CharacteristicPolynomialResult(
        coefficients=tuple(coefficients),
        polynomial=text,
        steps=trace.steps,
        mode=mode,
    )


def format_polynomial(
    coefficients: Sequence[Scalar],
    mode: NumericMode = DEFAULT_MODE,
    *,
    variable: str = "x",
) -> str:
    """Plain-text polynomial from coefficients ordered highest degree first.

    Coefficients [1, -5, 6] render as "x^2 - 5x + 6".
    """
    degree = len(coefficients) - 1
    terms: list[str] = []
    for i, c in enumerate(coefficients):
        if S.is_zero(c, mode):
            continue
        d = degree - i
        negative = S.is_negative(c, mode)
        magnitude = S.absolute(c)

        if d == 0:
            body = format_scalar(magnitude, mode)
        else:
            power = variable if d == 1 else f"{variable}^{d}"
            if S.equals(magnitude, S.one(mode), mode):
                body = power
            else:
                body = format_scalar(magnitude, mode) + power

        if not terms:
            terms.append(f"-{body}" if negative else body)
        else:
            terms.append(f"- {body}" if negative else f"+ {body}")

    return " ".join(terms) if terms else "0"
