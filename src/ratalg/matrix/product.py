from __future__ import annotations

from typing import Sequence

from ratalg.errors import ShapeError
from ratalg.numbers import scalar as S
from ratalg.numbers.mode import DEFAULT_MODE, NumericMode
from ratalg.matrix.shape import Matrix, coerce_matrix, validate_matrix
from ratalg.trace import TraceRecorder


def multiply_matrices(
    A: Sequence[Sequence[object]],
    B: Sequence[Sequence[object]],
    mode: NumericMode = DEFAULT_MODE,
    trace: TraceRecorder | None = None,
) -> Matrix:
    """Matrix product A B in the mode's arithmetic."""
    rows_a, cols_a = validate_matrix(A, name="first matrix")
    rows_b, cols_b = validate_matrix(B, name="second matrix")
    if cols_a != rows_b:
        raise ShapeError(
            f"cannot multiply {rows_a}x{cols_a} by {rows_b}x{cols_b}: "
            "columns of the first must equal rows of the second."
        )
    if trace is None:
        trace = TraceRecorder()

    Ma = coerce_matrix(A, mode)
    Mb = coerce_matrix(B, mode)
    trace.record("First matrix A", Ma)
    trace.record("Second matrix B", Mb)

    result = []
    for i in range(rows_a):
        row = []
        for j in range(cols_b):
            acc = S.zero(mode)
            for k in range(cols_a):
                acc = S.add(acc, S.multiply(Ma[i][k], Mb[k][j], mode), mode)
            row.append(acc)
        result.append(row)

    trace.record(f"Product A B ({rows_a}x{cols_b})", result)
    return result


def matrices_equal(
    A: Sequence[Sequence[object]],
    B: Sequence[Sequence[object]],
    mode: NumericMode = DEFAULT_MODE,
) -> bool:
    """Entrywise equality after coercion (tolerance-based for floats)."""
    if validate_matrix(A) != validate_matrix(B):
        return False
    Ma = coerce_matrix(A, mode)
    Mb = coerce_matrix(B, mode)
    return all(
        S.equals(x, y, mode)
        for ra, rb in zip(Ma, Mb)
        for x, y in zip(ra, rb)
    )
