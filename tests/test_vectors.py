"""Tests for ratalg.vector: basic operations, family analysis, Gram-Schmidt."""
import math

import pytest

from ratalg.errors import EmptyInput, EntryError, ShapeError, ZeroVector
from ratalg.numbers.mode import NumericMode
from ratalg.numbers.rational import RationalNumber
from ratalg.vector.ops import (
    add_vectors,
    dot_product,
    normalize_vector,
    scalar_multiply,
    subtract_vectors,
    vector_norm,
)
from ratalg.vector.analysis import analyze_vectors
from ratalg.vector.orthogonalize import gram_schmidt
from ratalg.trace import TraceRecorder

R = RationalNumber
DECIMAL = NumericMode(format_type="decimal")


# --- basic operations ---

def test_dot_product():
    assert dot_product([1, 2, 3], [4, 5, 6]) == R(32)
    assert dot_product(["1/2", 1], [2, "1/3"]) == R(4, 3)


def test_dot_product_length_mismatch():
    with pytest.raises(ShapeError):
        dot_product([1, 2], [1, 2, 3])


def test_dot_product_empty():
    with pytest.raises(EmptyInput):
        dot_product([], [])


def test_add_and_subtract():
    assert add_vectors([1, 2], ["1/2", -2]) == [R(3, 2), R(0)]
    assert subtract_vectors([1, 2], [1, 3]) == [R(0), R(-1)]


def test_scalar_multiply():
    assert scalar_multiply([2, 4], "1/2") == [R(1), R(2)]


def test_vector_norm():
    assert vector_norm([3, 4]) == 5.0
    assert vector_norm([R(1, 2), R(1, 2)]) == pytest.approx(math.sqrt(0.5))


def test_vector_norm_float_path():
    assert vector_norm([3.0, 4.0], DECIMAL) == 5.0


@pytest.mark.parametrize("bad", [math.nan, math.inf, -math.inf])
def test_vector_norm_rejects_non_finite(bad):
    with pytest.raises(EntryError):
        vector_norm([bad, 1.0], DECIMAL)
    with pytest.raises(EntryError):
        normalize_vector([1.0, bad], DECIMAL)


def test_normalize_vector_returns_floats():
    e = normalize_vector([3, 4])
    assert all(isinstance(x, float) for x in e)
    assert e == pytest.approx([0.6, 0.8])


def test_normalize_zero_vector():
    with pytest.raises(ZeroVector):
        normalize_vector([0, 0, 0])


def test_normalize_tiny_float_vector():
    with pytest.raises(ZeroVector):
        normalize_vector([1e-12, 0.0], DECIMAL)


# --- analyze_vectors ---

def test_analyze_independent():
    result = analyze_vectors([[1, 0, 0], [0, 1, 0], [0, 0, 1]])
    assert result.rank == 3
    assert result.is_linearly_independent
    assert result.pivot_indices == (0, 1, 2)
    assert result.relations == ()


def test_analyze_dependent_relation():
    result = analyze_vectors([[1, 2], [2, 4]])
    assert result.rank == 1
    assert not result.is_linearly_independent
    assert result.pivot_indices == (0,)
    assert result.basis == ((R(1), R(2)),)
    assert result.relations == ((1, (R(2),)),)


def test_analyze_relation_reconstructs_vector():
    vectors = [[1, 0, 1], [0, 1, 1], [2, 3, 5], [1, 1, 0]]
    result = analyze_vectors(vectors)
    assert result.rank == 3
    assert result.pivot_indices == (0, 1, 3)
    (j, coeffs), = result.relations
    assert j == 2
    rebuilt = [sum((c * result.basis[k][i] for k, c in enumerate(coeffs)), R(0)) for i in range(3)]
    assert rebuilt == [R(2), R(3), R(5)]


def test_analyze_more_vectors_than_dimension():
    result = analyze_vectors([[1, 2], [3, 4], [5, 6]])
    assert result.rank == 2
    assert not result.is_linearly_independent


def test_analyze_ragged_family():
    with pytest.raises(ShapeError):
        analyze_vectors([[1, 2], [3]])


def test_analyze_empty_family():
    with pytest.raises(EmptyInput):
        analyze_vectors([])


def test_analyze_as_dict():
    d = analyze_vectors([[1, 2], [2, 4]]).as_dict()
    assert d["isLinearlyIndependent"] is False
    assert d["pivotColumns"] == [1]
    assert d["relation"] == [{"vector": 2, "coefficients": ["2"]}]


# --- Gram-Schmidt ---

def test_gram_schmidt_2d():
    result = gram_schmidt([[3, 1], [2, 2]])
    assert result.is_linearly_independent
    u1, u2 = result.orthogonal
    assert u1 == (R(3), R(1))
    assert u2 == (R(-2, 5), R(6, 5))
    assert u1[0] * u2[0] + u1[1] * u2[1] == 0


def test_gram_schmidt_orthonormal():
    vectors = [[1, 1, 0], [1, 0, 1], [0, 1, 1]]
    result = gram_schmidt(vectors)
    E = result.orthonormal
    assert len(E) == 3
    for i in range(3):
        assert all(isinstance(x, float) for x in E[i])
        for j in range(3):
            dot = sum(a * b for a, b in zip(E[i], E[j]))
            assert dot == pytest.approx(1.0 if i == j else 0.0, abs=1e-9)


def test_gram_schmidt_orthogonal_vectors_exact():
    result = gram_schmidt([[1, 1, 0], [1, 0, 1], [0, 1, 1]])
    U = result.orthogonal
    for i in range(3):
        for j in range(i):
            assert dot_product(U[i], U[j]) == R(0)


def test_gram_schmidt_dependent_returns_early():
    trace = TraceRecorder()
    result = gram_schmidt([[1, 2], [2, 4]], trace=trace)
    assert not result.is_linearly_independent
    assert result.rank == 1
    assert result.orthogonal == ()
    assert result.orthonormal == ()
    assert "linearly dependent" in trace.steps[-1].description


def test_gram_schmidt_decimal_mode():
    result = gram_schmidt([[1.0, 0.0], [1.0, 1.0]], DECIMAL)
    assert result.orthogonal[1] == pytest.approx((0.0, 1.0))
    assert result.orthonormal[0] == pytest.approx((1.0, 0.0))


def test_gram_schmidt_records_projections():
    result = gram_schmidt([[3, 1], [2, 2]])
    descriptions = [s.description for s in result.steps]
    assert "Projection of v2 onto u1: 4/5 * u1" in descriptions
    assert any(d.startswith("e2 = u2 / ||u2||") for d in descriptions)
