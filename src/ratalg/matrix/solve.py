from __future__ import annotations

import logging
from typing import Sequence

from ratalg.errors import ShapeError
from ratalg.numbers import scalar as S
from ratalg.numbers.formatting import vector_text
from ratalg.numbers.mode import DEFAULT_MODE, NumericMode
from ratalg.numbers.scalar import Scalar
from ratalg.matrix.echelon import (
    calculate_rank,
    find_pivot_columns,
    leading_column,
    reduce_to_row_echelon,
    row_echelon_form,
)
from ratalg.matrix.shape import coerce_matrix, coerce_vector, validate_matrix, validate_vector
from ratalg.results import SolveResult, freeze_rows
from ratalg.trace import TraceRecorder

logger = logging.getLogger(__name__)


def _pivot_rows(rref: Sequence[Sequence[Scalar]], n: int, mode: NumericMode) -> dict[int, int]:
    """Map pivot column -> row for the coefficient block of an RREF [A|b]."""
    pivots: dict[int, int] = {}
    for i, row in enumerate(rref):
        j = leading_column(row[:n], mode)
        if j is not None:
            pivots[j] = i
    return pivots


def extract_solution(rref: Sequence[Sequence[Scalar]], mode: NumericMode = DEFAULT_MODE) -> list[Scalar]:
    """Unique solution of an RREF augmented matrix with n unit pivots."""
    n = len(rref[0]) - 1
    solution = [S.zero(mode)] * n
    for col, row in _pivot_rows(rref, n, mode).items():
        solution[col] = rref[row][n]
    return solution


def particular_solution_and_basis(
    rref: Sequence[Sequence[Scalar]],
    mode: NumericMode = DEFAULT_MODE,
) -> tuple[list[Scalar], list[list[Scalar]], list[int]]:
    """Particular solution (free variables = 0) and null-space basis.

    Returns (particular, basis, free_columns); one basis vector per free
    column, with that free variable set to 1.
    """
    n = len(rref[0]) - 1
    pivots = _pivot_rows(rref, n, mode)
    free = [j for j in range(n) if j not in pivots]

    particular = [S.zero(mode)] * n
    for col, row in pivots.items():
        particular[col] = rref[row][n]

    basis: list[list[Scalar]] = []
    for f in free:
        vec = [S.zero(mode)] * n
        vec[f] = S.one(mode)
        for col, row in pivots.items():
            vec[col] = S.negate(rref[row][f])
        basis.append(vec)
    return particular, basis, free


def solve_equations(
    A: Sequence[Sequence[object]],
    b: Sequence[object],
    mode: NumericMode = DEFAULT_MODE,
    trace: TraceRecorder | None = None,
) -> SolveResult:
    """Solve A x = b and classify the system as unique, inconsistent or infinite."""
    m, n = validate_matrix(A, name="coefficient matrix")
    validate_vector(b, name="constant vector")
    if len(b) != m:
        raise ShapeError(
            f"coefficient matrix has {m} rows but the constant vector has {len(b)} entries."
        )
    if trace is None:
        trace = TraceRecorder()

    coeffs = coerce_matrix(A, mode)
    consts = coerce_vector(b, mode)
    trace.record("Coefficient matrix A", coeffs)
    trace.record_vector("Constant vector b", consts)

    augmented = [coeffs[i] + [consts[i]] for i in range(m)]
    trace.record("Build the augmented matrix [A|b]", augmented)
    logger.debug("solve: %d equations, %d unknowns", m, n)

    echelon = row_echelon_form(augmented, mode, trace)
    trace.record("Matrix after Gaussian elimination", echelon)

    rref, _, _ = reduce_to_row_echelon(echelon, mode, trace)
    trace.record("Reduced row echelon form", rref)

    rank_a = calculate_rank([row[:n] for row in rref], mode)
    rank_aug = calculate_rank(rref, mode)
    trace.record(f"rank(A) = {rank_a}")
    trace.record(f"rank([A|b]) = {rank_aug}")

    if rank_a < rank_aug:
        trace.record("rank(A) < rank([A|b]): the system has no solution")
        logger.debug("solve: inconsistent (%d < %d)", rank_a, rank_aug)
        return SolveResult(
            kind="inconsistent",
            rank_a=rank_a,
            rank_augmented=rank_aug,
            n_unknowns=n,
            steps=trace.steps,
            mode=mode,
        )

    if rank_a == n:
        solution = extract_solution(rref, mode)
        trace.record(f"rank(A) = rank([A|b]) = {n}: unique solution x = {vector_text(solution, mode)}")
        return SolveResult(
            kind="unique",
            rank_a=rank_a,
            rank_augmented=rank_aug,
            n_unknowns=n,
            solution=tuple(solution),
            steps=trace.steps,
            mode=mode,
        )

    particular, basis, free = particular_solution_and_basis(rref, mode)
    pivot_cols = find_pivot_columns([row[:n] for row in rref], mode)
    trace.record(
        f"Pivot columns {[c + 1 for c in pivot_cols]}, free variables "
        f"{', '.join(f'x{f + 1}' for f in free)}"
    )
    trace.record_vector(f"Particular solution {vector_text(particular, mode)}", particular)
    for f, vec in zip(free, basis):
        trace.record_vector(f"Basis vector for x{f + 1} = 1: {vector_text(vec, mode)}", vec)
    trace.record(f"Infinitely many solutions; the solution space has dimension {n - rank_a}")
    logger.debug("solve: infinite, dimension %d", n - rank_a)
    return SolveResult(
        kind="infinite",
        rank_a=rank_a,
        rank_augmented=rank_aug,
        n_unknowns=n,
        particular_solution=tuple(particular),
        basis=freeze_rows(basis),
        free_columns=tuple(free),
        steps=trace.steps,
        mode=mode,
    )
