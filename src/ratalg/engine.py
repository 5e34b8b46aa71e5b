"""
MatrixEngine: one entry point holding an immutable NumericMode.

Each operation runs the underlying algorithm with a fresh TraceRecorder and
wraps the outcome in a result record. When an algorithm fails, the steps
recorded up to the failure are attached to the exception as ``exc.steps``
before it propagates.
"""
from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Iterator, Sequence

from ratalg.errors import AlgebraError
from ratalg.numbers.formatting import format_matrix, format_scalar, format_vector
from ratalg.numbers.mode import NumericMode
from ratalg.numbers.scalar import Scalar
from ratalg.matrix.determinant import determinant
from ratalg.matrix.echelon import reduce_to_row_echelon
from ratalg.matrix.inverse import inverse
from ratalg.matrix.product import multiply_matrices
from ratalg.matrix.shape import coerce_matrix, validate_matrix
from ratalg.matrix.solve import solve_equations
from ratalg.results import (
    CharacteristicPolynomialResult,
    DeterminantResult,
    InverseResult,
    OrthogonalizationResult,
    ProductResult,
    RankResult,
    SolveResult,
    VectorAnalysisResult,
    freeze_rows,
)
from ratalg.trace import TraceRecorder
from ratalg.charpoly.polynomial import characteristic_polynomial
from ratalg.vector import ops
from ratalg.vector.analysis import analyze_vectors
from ratalg.vector.orthogonalize import gram_schmidt

logger = logging.getLogger(__name__)


@contextmanager
def _traced(operation: str) -> Iterator[TraceRecorder]:
    trace = TraceRecorder()
    try:
        yield trace
    except AlgebraError as exc:
        exc.steps = trace.steps
        logger.debug("%s failed after %d steps: %s", operation, len(trace), exc)
        raise


class MatrixEngine:
    """
    Facade over the algorithms, bound to one NumericMode.

    >>> engine = MatrixEngine(format_type="rational")
    >>> engine.determinant([[1, 2], [3, 4]]).as_dict()["result"]
    '-2'
    """

    def __init__(
        self,
        mode: NumericMode | None = None,
        *,
        format_type: str | None = None,
        precision: int | None = None,
    ):
        if mode is None:
            mode = NumericMode.from_env()
        changes = {}
        if format_type is not None:
            changes["format_type"] = format_type
        if precision is not None:
            changes["precision"] = precision
        self._mode = mode.replace(**changes) if changes else mode

    @property
    def mode(self) -> NumericMode:
        return self._mode

    def with_mode(self, **changes) -> MatrixEngine:
        """New engine whose mode differs by *changes*; this one is untouched."""
        return MatrixEngine(self._mode.replace(**changes))

    def __repr__(self) -> str:
        return f"MatrixEngine({self._mode!r})"

    # ------------------------------------------------------------------
    # Matrix operations
    # ------------------------------------------------------------------

    def determinant(self, matrix: Sequence[Sequence[object]]) -> DeterminantResult:
        with _traced("determinant") as trace:
            value = determinant(matrix, self._mode, trace)
        return DeterminantResult(value=value, steps=trace.steps, mode=self._mode)

    def inverse(self, matrix: Sequence[Sequence[object]]) -> InverseResult:
        with _traced("inverse") as trace:
            inv = inverse(matrix, self._mode, trace)
        return InverseResult(inverse=freeze_rows(inv), steps=trace.steps, mode=self._mode)

    def rank(self, matrix: Sequence[Sequence[object]]) -> RankResult:
        with _traced("rank") as trace:
            validate_matrix(matrix)
            trace.record("Input matrix", coerce_matrix(matrix, self._mode))
            rref, pivots, rank = reduce_to_row_echelon(matrix, self._mode, trace)
            trace.record(f"The rank of the matrix is {rank}", rref)
        return RankResult(
            rank=rank,
            rref=freeze_rows(rref),
            pivot_columns=tuple(pivots),
            steps=trace.steps,
            mode=self._mode,
        )

    def solve_equations(
        self,
        coefficients: Sequence[Sequence[object]],
        constants: Sequence[object],
    ) -> SolveResult:
        with _traced("solve_equations") as trace:
            return solve_equations(coefficients, constants, self._mode, trace)

    def characteristic_polynomial(self, matrix: Sequence[Sequence[object]]) -> CharacteristicPolynomialResult:
        with _traced("characteristic_polynomial") as trace:
            return characteristic_polynomial(matrix, self._mode, trace)

    def multiply(
        self,
        A: Sequence[Sequence[object]],
        B: Sequence[Sequence[object]],
    ) -> ProductResult:
        with _traced("multiply") as trace:
            product = multiply_matrices(A, B, self._mode, trace)
        return ProductResult(product=freeze_rows(product), steps=trace.steps, mode=self._mode)

    # ------------------------------------------------------------------
    # Vector operations
    # ------------------------------------------------------------------

    def analyze_vectors(self, vectors: Sequence[Sequence[object]]) -> VectorAnalysisResult:
        with _traced("analyze_vectors") as trace:
            return analyze_vectors(vectors, self._mode, trace)

    def gram_schmidt(self, vectors: Sequence[Sequence[object]]) -> OrthogonalizationResult:
        with _traced("gram_schmidt") as trace:
            return gram_schmidt(vectors, self._mode, trace)

    def dot_product(self, v1: Sequence[object], v2: Sequence[object]) -> Scalar:
        return ops.dot_product(v1, v2, self._mode)

    def add_vectors(self, v1: Sequence[object], v2: Sequence[object]) -> list[Scalar]:
        return ops.add_vectors(v1, v2, self._mode)

    def subtract_vectors(self, v1: Sequence[object], v2: Sequence[object]) -> list[Scalar]:
        return ops.subtract_vectors(v1, v2, self._mode)

    def scalar_multiply(self, vector: Sequence[object], factor: object) -> list[Scalar]:
        return ops.scalar_multiply(vector, factor, self._mode)

    def vector_norm(self, vector: Sequence[object]) -> float:
        return ops.vector_norm(vector, self._mode)

    def normalize_vector(self, vector: Sequence[object]) -> list[float]:
        return ops.normalize_vector(vector, self._mode)

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def format(self, value) -> str | list:
        """Render a scalar, vector or matrix through the engine's mode."""
        if isinstance(value, (list, tuple)):
            if value and isinstance(value[0], (list, tuple)):
                return format_matrix(value, self._mode)
            return format_vector(value, self._mode)
        return format_scalar(value, self._mode)
