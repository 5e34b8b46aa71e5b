from __future__ import annotations

import logging
from typing import Sequence

from ratalg.numbers.formatting import format_scalar
from ratalg.numbers.mode import DEFAULT_MODE, NumericMode
from ratalg.matrix.echelon import reduce_to_row_echelon
from ratalg.matrix.shape import coerce_matrix, validate_vector_family
from ratalg.results import VectorAnalysisResult, freeze_rows
from ratalg.trace import TraceRecorder

logger = logging.getLogger(__name__)


def analyze_vectors(
    vectors: Sequence[Sequence[object]],
    mode: NumericMode = DEFAULT_MODE,
    trace: TraceRecorder | None = None,
) -> VectorAnalysisResult:
    """Rank and linear (in)dependence of a vector family.

    The vectors become the columns of a matrix which is reduced to RREF.
    Pivot columns give a maximal independent subfamily; each non-pivot
    column of the RREF holds the coefficients expressing that vector in it.
    """
    count, dim = validate_vector_family(vectors)
    if trace is None:
        trace = TraceRecorder()

    family = coerce_matrix(vectors, mode)
    trace.record("Input vectors", family)

    columns = [[family[j][i] for j in range(count)] for i in range(dim)]
    trace.record("Arrange the vectors as the columns of a matrix", columns)

    rref, pivots, rank = reduce_to_row_echelon(columns, mode, trace)
    trace.record("Reduced row echelon form", rref)
    trace.record(f"The rank of the vector family is {rank}")

    independent = rank == count
    relations = []
    for j in range(count):
        if j in pivots:
            continue
        coeffs = tuple(rref[k][j] for k in range(rank))
        terms = " + ".join(
            f"{format_scalar(c, mode)}*v{pivots[k] + 1}" for k, c in enumerate(coeffs)
        )
        trace.record(f"v{j + 1} = {terms or '0'}")
        relations.append((j, coeffs))

    if independent:
        trace.record("The vectors are linearly independent")
    else:
        trace.record(
            "The vectors are linearly dependent; a maximal independent subfamily is "
            + ", ".join(f"v{p + 1}" for p in pivots)
        )
    logger.debug("analyze_vectors: %d vectors of dimension %d, rank %d", count, dim, rank)

    return VectorAnalysisResult(
        rank=rank,
        is_linearly_independent=independent,
        pivot_indices=tuple(pivots),
        basis=freeze_rows(family[p] for p in pivots),
        relations=tuple(relations),
        steps=trace.steps,
        mode=mode,
    )
