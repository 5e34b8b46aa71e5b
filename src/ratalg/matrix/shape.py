from __future__ import annotations

from typing import Sequence

from ratalg.errors import EmptyInput, ShapeError
from ratalg.numbers.mode import DEFAULT_MODE, NumericMode
from ratalg.numbers.scalar import Scalar, coerce, one, zero

Matrix = list[list[Scalar]]
Vector = list[Scalar]


def validate_matrix(
    matrix: Sequence[Sequence[object]],
    *,
    square: bool = False,
    name: str = "matrix",
) -> tuple[int, int]:
    """Check that *matrix* is a non-empty rectangular table.

    Returns (n_rows, n_cols).
    Raises EmptyInput for an empty matrix or empty first row,
    ShapeError for ragged rows or (with square=True) a non-square matrix.
    """
    if matrix is None or len(matrix) == 0:
        raise EmptyInput(f"{name} must not be empty.")
    n_cols = len(matrix[0])
    if n_cols == 0:
        raise EmptyInput(f"{name} rows must not be empty.")
    for i, row in enumerate(matrix):
        if len(row) != n_cols:
            raise ShapeError(
                f"{name} is ragged: row {i} has {len(row)} entries, expected {n_cols}."
            )
    n_rows = len(matrix)
    if square and n_rows != n_cols:
        raise ShapeError(f"{name} must be square; got {n_rows}x{n_cols}.")
    return n_rows, n_cols


def validate_vector(vector: Sequence[object], *, name: str = "vector") -> int:
    if vector is None or len(vector) == 0:
        raise EmptyInput(f"{name} must not be empty.")
    return len(vector)


def validate_same_length(v1: Sequence[object], v2: Sequence[object]) -> int:
    n = validate_vector(v1, name="first vector")
    validate_vector(v2, name="second vector")
    if len(v2) != n:
        raise ShapeError(f"vector lengths differ: {n} vs {len(v2)}.")
    return n


def validate_vector_family(vectors: Sequence[Sequence[object]]) -> tuple[int, int]:
    """Returns (count, dimension); every vector must share one dimension."""
    if vectors is None or len(vectors) == 0:
        raise EmptyInput("vector family must not be empty.")
    dim = validate_vector(vectors[0], name="vector 1")
    for i, v in enumerate(vectors):
        if len(v) != dim:
            raise ShapeError(
                f"all vectors must have dimension {dim}; vector {i + 1} has {len(v)}."
            )
    return len(vectors), dim


def coerce_vector(vector: Sequence[object], mode: NumericMode = DEFAULT_MODE) -> Vector:
    return [coerce(v, mode) for v in vector]


def coerce_matrix(matrix: Sequence[Sequence[object]], mode: NumericMode = DEFAULT_MODE) -> Matrix:
    """Fresh working copy of *matrix* with every entry coerced to a mode scalar."""
    return [coerce_vector(row, mode) for row in matrix]


def identity_matrix(n: int, mode: NumericMode = DEFAULT_MODE) -> Matrix:
    if n <= 0:
        raise EmptyInput("identity order must be positive.")
    return [[one(mode) if i == j else zero(mode) for j in range(n)] for i in range(n)]


def transpose(matrix: Sequence[Sequence[Scalar]]) -> Matrix:
    n_rows, n_cols = validate_matrix(matrix)
    return [[matrix[i][j] for i in range(n_rows)] for j in range(n_cols)]
