from __future__ import annotations

import math
from typing import Sequence

from ratalg.errors import EntryError, ZeroVector
from ratalg.numbers import scalar as S
from ratalg.numbers.mode import DEFAULT_MODE, NumericMode
from ratalg.numbers.scalar import Scalar
from ratalg.matrix.shape import Vector, coerce_vector, validate_same_length, validate_vector


def dot_product(
    v1: Sequence[object],
    v2: Sequence[object],
    mode: NumericMode = DEFAULT_MODE,
) -> Scalar:
    validate_same_length(v1, v2)
    a = coerce_vector(v1, mode)
    b = coerce_vector(v2, mode)
    total = S.zero(mode)
    for x, y in zip(a, b):
        total = S.add(total, S.multiply(x, y, mode), mode)
    return total


def add_vectors(v1: Sequence[object], v2: Sequence[object], mode: NumericMode = DEFAULT_MODE) -> Vector:
    validate_same_length(v1, v2)
    return [S.add(x, y, mode) for x, y in zip(coerce_vector(v1, mode), coerce_vector(v2, mode))]


def subtract_vectors(v1: Sequence[object], v2: Sequence[object], mode: NumericMode = DEFAULT_MODE) -> Vector:
    validate_same_length(v1, v2)
    return [S.subtract(x, y, mode) for x, y in zip(coerce_vector(v1, mode), coerce_vector(v2, mode))]


def scalar_multiply(vector: Sequence[object], factor: object, mode: NumericMode = DEFAULT_MODE) -> Vector:
    validate_vector(vector)
    c = S.coerce(factor, mode)
    return [S.multiply(c, x, mode) for x in coerce_vector(vector, mode)]


def vector_norm(vector: Sequence[object], mode: NumericMode = DEFAULT_MODE) -> float:
    """Euclidean norm; always a float since square roots are rarely rational.

    All-float input is summed directly in floating point.
    """
    validate_vector(vector)
    if all(isinstance(x, float) for x in vector):
        if not all(math.isfinite(x) for x in vector):
            raise EntryError(f"vector has a non-finite entry: {list(vector)!r}")
        return math.sqrt(sum(x * x for x in vector))
    v = coerce_vector(vector, mode)
    total = S.zero(mode)
    for x in v:
        total = S.add(total, S.multiply(x, x, mode), mode)
    return S.square_root(total)


def normalize_vector(vector: Sequence[object], mode: NumericMode = DEFAULT_MODE) -> list[float]:
    """Unit vector in the direction of *vector*, as floats.

    Raises ZeroVector when the norm is below the mode's zero tolerance.
    """
    norm = vector_norm(vector, mode)
    if abs(norm) < mode.zero_tolerance:
        raise ZeroVector("cannot normalize a zero vector.")
    return [(x if isinstance(x, float) else S.to_float(S.coerce(x, mode))) / norm for x in vector]
