from __future__ import annotations

import logging
from typing import Sequence

from ratalg.numbers import scalar as S
from ratalg.numbers.formatting import format_scalar, vector_text
from ratalg.numbers.mode import DEFAULT_MODE, NumericMode
from ratalg.matrix.shape import coerce_matrix, validate_vector_family
from ratalg.results import OrthogonalizationResult, freeze_rows
from ratalg.trace import TraceRecorder
from ratalg.vector.analysis import analyze_vectors
from ratalg.vector.ops import dot_product, normalize_vector, scalar_multiply, subtract_vectors

logger = logging.getLogger(__name__)


def gram_schmidt(
    vectors: Sequence[Sequence[object]],
    mode: NumericMode = DEFAULT_MODE,
    trace: TraceRecorder | None = None,
) -> OrthogonalizationResult:
    """Gram-Schmidt orthogonalization followed by normalization.

    A linearly dependent family is reported with is_linearly_independent=False
    and no output vectors. Orthogonal vectors keep the mode's scalar type;
    orthonormal vectors are floats.
    """
    count, _ = validate_vector_family(vectors)
    if trace is None:
        trace = TraceRecorder()

    analysis = analyze_vectors(vectors, mode, trace)
    if not analysis.is_linearly_independent:
        trace.record("The vectors are linearly dependent, so Gram-Schmidt cannot be applied")
        return OrthogonalizationResult(
            is_linearly_independent=False,
            rank=analysis.rank,
            steps=trace.steps,
            mode=mode,
        )

    family = coerce_matrix(vectors, mode)
    orthogonal: list[list] = []
    orthonormal: list[list[float]] = []

    for i in range(count):
        u = list(family[i])
        terms = [f"u{i + 1} = v{i + 1}"]
        for j in range(i):
            w = orthogonal[j]
            denom = dot_product(w, w, mode)
            if S.is_zero(denom, mode):
                continue
            coeff = S.divide(dot_product(u, w, mode), denom, mode)
            projection = scalar_multiply(w, coeff, mode)
            u = subtract_vectors(u, projection, mode)
            terms.append(f"{format_scalar(coeff, mode)}*u{j + 1}")

            trace.record_vector(
                f"Projection of v{i + 1} onto u{j + 1}: {format_scalar(coeff, mode)} * u{j + 1}",
                projection,
            )
            trace.record_vector(f"After subtracting the projection, u{i + 1} = {vector_text(u, mode)}", u)

        orthogonal.append(u)
        trace.record_vector(f"{' - '.join(terms)} = {vector_text(u, mode)}", u)

        e = normalize_vector(u, mode)
        orthonormal.append(e)
        trace.record_vector(f"e{i + 1} = u{i + 1} / ||u{i + 1}|| = {vector_text(e, mode)}", e)

    logger.debug("gram_schmidt: orthogonalized %d vectors", count)
    return OrthogonalizationResult(
        is_linearly_independent=True,
        rank=analysis.rank,
        orthogonal=freeze_rows(orthogonal),
        orthonormal=freeze_rows(orthonormal),
        steps=trace.steps,
        mode=mode,
    )
