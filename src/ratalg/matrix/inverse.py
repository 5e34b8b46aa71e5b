from __future__ import annotations

import logging
from typing import Sequence

from ratalg.errors import NotInvertible
from ratalg.numbers import scalar as S
from ratalg.numbers.formatting import format_scalar
from ratalg.numbers.mode import DEFAULT_MODE, NumericMode
from ratalg.matrix.determinant import select_pivot_row
from ratalg.matrix.shape import Matrix, coerce_matrix, validate_matrix
from ratalg.trace import TraceRecorder

logger = logging.getLogger(__name__)


def inverse(
    matrix: Sequence[Sequence[object]],
    mode: NumericMode = DEFAULT_MODE,
    trace: TraceRecorder | None = None,
) -> Matrix:
    """Inverse via Gauss-Jordan elimination on the augmented matrix [A | I].

    Raises NotInvertible as soon as a pivot column has no usable pivot.
    """
    n, _ = validate_matrix(matrix, square=True)
    if trace is None:
        trace = TraceRecorder()
    width = 2 * n

    A = coerce_matrix(matrix, mode)
    aug = [A[i] + [S.one(mode) if j == i else S.zero(mode) for j in range(n)] for i in range(n)]
    trace.record("Build the augmented matrix [A | I]", aug)
    logger.debug("inverse: %dx%d, format=%s", n, n, mode.format_type)

    for i in range(n):
        p = select_pivot_row(aug, i, i, n)
        if p != i:
            aug[i], aug[p] = aug[p], aug[i]
            trace.record(f"Swap row {i + 1} and row {p + 1}", aug)

        pivot = aug[i][i]
        if S.is_zero(pivot, mode):
            trace.record(f"No non-zero pivot in column {i + 1}; the matrix is singular")
            raise NotInvertible(f"matrix is singular (no pivot in column {i + 1}).")

        aug[i] = [S.divide(v, pivot, mode) for v in aug[i]]
        trace.record(f"Divide row {i + 1} by the pivot {format_scalar(pivot, mode)}", aug)

        for r in range(n):
            if r == i:
                continue
            factor = aug[r][i]
            if S.is_zero(factor, mode):
                continue
            for c in range(width):
                aug[r][c] = S.subtract(aug[r][c], S.multiply(factor, aug[i][c], mode), mode)
            trace.record(f"Row {r + 1} minus {format_scalar(factor, mode)} times row {i + 1}", aug)

    result = [row[n:] for row in aug]
    trace.record("The right half is the inverse matrix", result)
    return result
