from __future__ import annotations

import logging
from typing import Sequence

from ratalg.numbers import scalar as S
from ratalg.numbers.formatting import format_scalar
from ratalg.numbers.mode import DEFAULT_MODE, NumericMode
from ratalg.numbers.scalar import Scalar
from ratalg.matrix.determinant import select_pivot_row
from ratalg.matrix.shape import Matrix, coerce_matrix, validate_matrix
from ratalg.trace import TraceRecorder

logger = logging.getLogger(__name__)


def reduce_to_row_echelon(
    matrix: Sequence[Sequence[object]],
    mode: NumericMode = DEFAULT_MODE,
    trace: TraceRecorder | None = None,
) -> tuple[Matrix, list[int], int]:
    """Reduced row echelon form in the mode's arithmetic.

    Returns (rref_matrix, pivot_columns, rank).
    A column with no non-zero entry in the untried rows is skipped without
    advancing the pivot row.
    """
    n_rows, n_cols = validate_matrix(matrix)
    if trace is None:
        trace = TraceRecorder()
    Mf = coerce_matrix(matrix, mode)
    pivot_cols: list[int] = []
    rp = 0

    for col in range(n_cols):
        if rp == n_rows:
            break

        # Find pivot
        piv = None
        for r in range(rp, n_rows):
            if not S.is_zero(Mf[r][col], mode):
                piv = r
                break
        if piv is None:
            continue

        # Swap pivot row into position
        if piv != rp:
            Mf[rp], Mf[piv] = Mf[piv], Mf[rp]
            trace.record(f"Swap row {rp + 1} and row {piv + 1}", Mf)
        pivot_cols.append(col)

        # Scale pivot row
        scale = Mf[rp][col]
        if scale != S.one(mode):
            Mf[rp] = [S.divide(v, scale, mode) for v in Mf[rp]]
            trace.record(f"Divide row {rp + 1} by {format_scalar(scale, mode)}", Mf)

        # Eliminate column in all other rows
        for r in range(n_rows):
            if r != rp and not S.is_zero(Mf[r][col], mode):
                factor = Mf[r][col]
                Mf[r] = [
                    S.subtract(Mf[r][c], S.multiply(factor, Mf[rp][c], mode), mode)
                    for c in range(n_cols)
                ]
                trace.record(f"Row {r + 1} minus {format_scalar(factor, mode)} times row {rp + 1}", Mf)

        rp += 1

    logger.debug("rref: %dx%d, pivots %s", n_rows, n_cols, pivot_cols)
    return Mf, pivot_cols, len(pivot_cols)


def row_echelon_form(
    matrix: Sequence[Sequence[object]],
    mode: NumericMode = DEFAULT_MODE,
    trace: TraceRecorder | None = None,
) -> Matrix:
    """Forward Gaussian elimination with partial pivoting (not reduced)."""
    n_rows, n_cols = validate_matrix(matrix)
    if trace is None:
        trace = TraceRecorder()
    M = coerce_matrix(matrix, mode)

    row = 0
    for col in range(n_cols):
        if row == n_rows:
            break
        p = select_pivot_row(M, col, row, n_rows)
        if S.is_zero(M[p][col], mode):
            continue
        if p != row:
            M[row], M[p] = M[p], M[row]
            trace.record(f"Swap row {row + 1} and row {p + 1}", M)
        pivot = M[row][col]
        for r in range(row + 1, n_rows):
            if S.is_zero(M[r][col], mode):
                continue
            factor = S.divide(M[r][col], pivot, mode)
            for c in range(col, n_cols):
                M[r][c] = S.subtract(M[r][c], S.multiply(factor, M[row][c], mode), mode)
            trace.record(f"Row {r + 1} minus {format_scalar(factor, mode)} times row {row + 1}", M)
        row += 1

    return M


def is_zero_row(row: Sequence[Scalar], mode: NumericMode = DEFAULT_MODE) -> bool:
    return all(S.is_zero(v, mode) for v in row)


def calculate_rank(rref: Sequence[Sequence[Scalar]], mode: NumericMode = DEFAULT_MODE) -> int:
    """Number of rows of an echelon matrix that are not all zero."""
    return sum(1 for row in rref if not is_zero_row(row, mode))


def leading_column(row: Sequence[Scalar], mode: NumericMode = DEFAULT_MODE) -> int | None:
    for j, v in enumerate(row):
        if not S.is_zero(v, mode):
            return j
    return None


def find_pivot_columns(rref: Sequence[Sequence[Scalar]], mode: NumericMode = DEFAULT_MODE) -> list[int]:
    """Leading column of each non-zero row, in increasing order."""
    pivots: list[int] = []
    for row in rref:
        j = leading_column(row, mode)
        if j is not None and (not pivots or j > pivots[-1]):
            pivots.append(j)
    return pivots


def matrix_rank(
    matrix: Sequence[Sequence[object]],
    mode: NumericMode = DEFAULT_MODE,
    trace: TraceRecorder | None = None,
) -> int:
    """Rank of a matrix via reduction to RREF."""
    rref, _, _ = reduce_to_row_echelon(matrix, mode, trace)
    rank = calculate_rank(rref, mode)
    if trace is not None:
        trace.record(f"The rank of the matrix is {rank}", rref)
    return rank
