from __future__ import annotations

import logging
from typing import Sequence

from ratalg.numbers import scalar as S
from ratalg.numbers.formatting import format_scalar
from ratalg.numbers.mode import DEFAULT_MODE, NumericMode
from ratalg.numbers.scalar import Scalar
from ratalg.matrix.shape import coerce_matrix, validate_matrix
from ratalg.trace import TraceRecorder

logger = logging.getLogger(__name__)


def select_pivot_row(M: Sequence[Sequence[Scalar]], col: int, start: int, stop: int) -> int:
    """Row in start..stop-1 with the largest |M[row][col]| (first one wins ties)."""
    best = start
    for r in range(start + 1, stop):
        if S.larger_magnitude(M[r][col], M[best][col]):
            best = r
    return best


def determinant(
    matrix: Sequence[Sequence[object]],
    mode: NumericMode = DEFAULT_MODE,
    trace: TraceRecorder | None = None,
) -> Scalar:
    """Determinant by Gaussian elimination with partial pivoting.

    The matrix is reduced to upper-triangular form on a private copy; the
    result is the product of the diagonal times (-1)**swaps. A zero pivot
    short-circuits to zero.
    """
    n, _ = validate_matrix(matrix, square=True)
    if trace is None:
        trace = TraceRecorder()

    M = coerce_matrix(matrix, mode)
    logger.debug("determinant: %dx%d, format=%s", n, n, mode.format_type)

    if n == 1:
        trace.record(f"The determinant of a 1x1 matrix is its only entry: {format_scalar(M[0][0], mode)}", M)
        return M[0][0]

    trace.record(f"Initial matrix of order {n}", M)

    swaps = 0
    for i in range(n):
        p = select_pivot_row(M, i, i, n)
        if p != i:
            M[i], M[p] = M[p], M[i]
            swaps += 1
            trace.record(f"Swap row {i + 1} and row {p + 1}", M)

        pivot = M[i][i]
        if S.is_zero(pivot, mode):
            trace.record(
                f"Pivot at row {i + 1}, column {i + 1} is 0, so the determinant is 0", M
            )
            logger.debug("determinant: zero pivot in column %d", i)
            return S.zero(mode)

        for r in range(i + 1, n):
            factor = S.divide(M[r][i], pivot, mode)
            for c in range(i, n):
                M[r][c] = S.subtract(M[r][c], S.multiply(factor, M[i][c], mode), mode)
            trace.record(f"Row {r + 1} minus {format_scalar(factor, mode)} times row {i + 1}", M)

    result = S.one(mode)
    for i in range(n):
        result = S.multiply(result, M[i][i], mode)
    if swaps % 2 == 1:
        result = S.negate(result)

    trace.record(
        f"Determinant = product of the diagonal times (-1)^{swaps} = {format_scalar(result, mode)}"
    )
    logger.debug("determinant: %s after %d swaps", result, swaps)
    return result
