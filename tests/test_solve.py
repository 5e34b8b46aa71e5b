"""Tests for ratalg.matrix.solve."""
import pytest

from ratalg.errors import EmptyInput, ShapeError
from ratalg.numbers.mode import NumericMode
from ratalg.numbers.rational import RationalNumber
from ratalg.matrix.product import multiply_matrices
from ratalg.matrix.solve import extract_solution, particular_solution_and_basis, solve_equations
from ratalg.trace import TraceRecorder

R = RationalNumber
DECIMAL = NumericMode(format_type="decimal")


def _apply(A, x):
    return [row[0] for row in multiply_matrices(A, [[v] for v in x])]


# --- classification ---

def test_unique_solution():
    result = solve_equations([[1, 2], [3, 4]], [5, 11])
    assert result.kind == "unique"
    assert result.solution == (R(1), R(2))
    assert result.rank_a == result.rank_augmented == 2
    assert result.dimension == 0


def test_inconsistent_system():
    result = solve_equations([[1, 2], [2, 4]], [5, 11])
    assert result.kind == "inconsistent"
    assert result.rank_a == 1
    assert result.rank_augmented == 2
    assert result.solution is None
    assert not result.is_consistent


def test_infinite_solutions():
    result = solve_equations([[1, 2], [2, 4]], [5, 10])
    assert result.kind == "infinite"
    assert result.rank_a == result.rank_augmented == 1
    assert result.dimension == 1
    assert result.particular_solution == (R(5), R(0))
    assert result.basis == ((R(-2), R(1)),)
    assert result.free_columns == (1,)


def test_rank_relationships_hold():
    systems = [
        ([[1, 2], [3, 4]], [5, 11]),
        ([[1, 2], [2, 4]], [5, 11]),
        ([[1, 2], [2, 4]], [5, 10]),
        ([[1, 1, 1]], [3]),
        ([[1, 0], [0, 1], [1, 1]], [1, 2, 3]),
        ([[1, 0], [0, 1], [1, 1]], [1, 2, 4]),
    ]
    for A, b in systems:
        r = solve_equations(A, b)
        assert r.rank_a <= r.rank_augmented <= r.rank_a + 1
        n = len(A[0])
        if r.kind == "unique":
            assert r.rank_a == r.rank_augmented == n
        elif r.kind == "inconsistent":
            assert r.rank_a < r.rank_augmented
        else:
            assert r.rank_a == r.rank_augmented < n


def test_unique_solution_satisfies_system():
    A = [[2, 1, -1], [-3, -1, 2], [-2, 1, 2]]
    b = [8, -11, -3]
    result = solve_equations(A, b)
    assert result.solution == (R(2), R(3), R(-1))
    assert _apply(A, result.solution) == [R(8), R(-11), R(-3)]


def test_overdetermined_consistent():
    result = solve_equations([[1, 0], [0, 1], [1, 1]], [1, 2, 3])
    assert result.kind == "unique"
    assert result.solution == (R(1), R(2))


def test_underdetermined_basis_in_null_space():
    A = [[1, 1, 1], [0, 1, 2]]
    result = solve_equations(A, [6, 5])
    assert result.kind == "infinite"
    assert result.dimension == 1
    assert _apply(A, result.particular_solution) == [R(6), R(5)]
    for vec in result.basis:
        assert _apply(A, vec) == [R(0), R(0)]


def test_rational_coefficients():
    result = solve_equations([["1/2", "1/3"], ["1/4", "1"]], ["7/6", "9/4"])
    assert result.kind == "unique"
    assert result.solution == (R(1), R(2))


def test_decimal_mode_solution():
    result = solve_equations([[2.0, 1.0], [1.0, 3.0]], [3.0, 5.0], DECIMAL)
    assert result.kind == "unique"
    assert result.solution[0] == pytest.approx(0.8)
    assert result.solution[1] == pytest.approx(1.4)


# --- helpers ---

def test_extract_solution():
    rref = [[R(1), R(0), R(3)], [R(0), R(1), R(-1)]]
    assert extract_solution(rref) == [R(3), R(-1)]


def test_particular_solution_and_basis_two_free():
    rref = [[R(1), R(2), R(3), R(4)]]
    particular, basis, free = particular_solution_and_basis(rref)
    assert particular == [R(4), R(0), R(0)]
    assert free == [1, 2]
    assert basis == [[R(-2), R(1), R(0)], [R(-3), R(0), R(1)]]


# --- errors ---

def test_mismatched_constant_count():
    with pytest.raises(ShapeError):
        solve_equations([[1, 2], [3, 4]], [1, 2, 3])


def test_empty_system():
    with pytest.raises(EmptyInput):
        solve_equations([], [])


def test_ragged_coefficients():
    with pytest.raises(ShapeError):
        solve_equations([[1, 2], [3]], [1, 2])


# --- trace ---

def test_trace_records_pipeline():
    trace = TraceRecorder()
    result = solve_equations([[1, 2], [2, 4]], [5, 11], trace=trace)
    descriptions = [s.description for s in result.steps]
    assert descriptions[0] == "Coefficient matrix A"
    assert "Build the augmented matrix [A|b]" in descriptions
    assert "Reduced row echelon form" in descriptions
    assert "rank(A) = 1" in descriptions
    assert "rank([A|b]) = 2" in descriptions
    assert result.steps == trace.steps


def test_as_dict_renders_through_mode():
    d = solve_equations([[1, 2], [2, 4]], [5, 10]).as_dict()
    assert d["type"] == "infinite"
    assert d["particularSolution"] == ["5", "0"]
    assert d["basis"] == [["-2", "1"]]
    assert d["dimension"] == 1
