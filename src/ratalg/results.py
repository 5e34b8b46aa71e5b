"""Result records returned by the top-level operations.

Every record keeps raw scalars (RationalNumber or float) together with the
trace steps and the mode it was computed under. ``as_dict`` renders all
numbers through that mode, producing JSON-ready data for a presentation layer.
"""
from __future__ import annotations

from dataclasses import dataclass, field

from ratalg.numbers.formatting import format_matrix, format_scalar, format_vector
from ratalg.numbers.mode import DEFAULT_MODE, NumericMode
from ratalg.numbers.scalar import Scalar
from ratalg.trace import TraceStep

Row = tuple[Scalar, ...]
Rows = tuple[Row, ...]

SOLUTION_KINDS = ("unique", "inconsistent", "infinite")


def steps_as_dicts(steps: tuple[TraceStep, ...], mode: NumericMode) -> list[dict]:
    return [
        {
            "description": s.description,
            "matrix": None if s.matrix is None else format_matrix(s.matrix, mode),
        }
        for s in steps
    ]


def freeze_rows(rows) -> Rows:
    return tuple(tuple(r) for r in rows)


@dataclass(frozen=True)
class DeterminantResult:
    value: Scalar
    steps: tuple[TraceStep, ...] = ()
    mode: NumericMode = field(default=DEFAULT_MODE, repr=False, compare=False)

    def as_dict(self) -> dict:
        return {
            "result": format_scalar(self.value, self.mode),
            "steps": steps_as_dicts(self.steps, self.mode),
        }


@dataclass(frozen=True)
class InverseResult:
    inverse: Rows
    steps: tuple[TraceStep, ...] = ()
    mode: NumericMode = field(default=DEFAULT_MODE, repr=False, compare=False)

    def as_dict(self) -> dict:
        return {
            "isInvertible": True,
            "inverse": format_matrix(self.inverse, self.mode),
            "steps": steps_as_dicts(self.steps, self.mode),
        }


@dataclass(frozen=True)
class ProductResult:
    product: Rows
    steps: tuple[TraceStep, ...] = ()
    mode: NumericMode = field(default=DEFAULT_MODE, repr=False, compare=False)

    def as_dict(self) -> dict:
        return {
            "result": format_matrix(self.product, self.mode),
            "steps": steps_as_dicts(self.steps, self.mode),
        }


@dataclass(frozen=True)
class RankResult:
    rank: int
    rref: Rows
    pivot_columns: tuple[int, ...]
    steps: tuple[TraceStep, ...] = ()
    mode: NumericMode = field(default=DEFAULT_MODE, repr=False, compare=False)

    def as_dict(self) -> dict:
        return {
            "rank": self.rank,
            "rref": format_matrix(self.rref, self.mode),
            "pivotColumns": list(self.pivot_columns),
            "steps": steps_as_dicts(self.steps, self.mode),
        }


@dataclass(frozen=True)
class SolveResult:
    """
    Classification and solution of A x = b.

    kind: "unique" | "inconsistent" | "infinite"
    solution:            the unique solution (kind == "unique").
    particular_solution: free variables set to 0 (kind == "infinite").
    basis:               one null-space vector per free variable.
    """

    kind: str
    rank_a: int
    rank_augmented: int
    n_unknowns: int
    solution: Row | None = None
    particular_solution: Row | None = None
    basis: Rows = ()
    free_columns: tuple[int, ...] = ()
    steps: tuple[TraceStep, ...] = ()
    mode: NumericMode = field(default=DEFAULT_MODE, repr=False, compare=False)

    @property
    def is_consistent(self) -> bool:
        return self.kind != "inconsistent"

    @property
    def dimension(self) -> int:
        """Dimension of the solution space (0 for unique or no solution)."""
        if self.kind != "infinite":
            return 0
        return self.n_unknowns - self.rank_a

    def as_dict(self) -> dict:
        return {
            "type": self.kind,
            "rankA": self.rank_a,
            "rankAugmented": self.rank_augmented,
            "dimension": self.dimension,
            "solution": None if self.solution is None else format_vector(self.solution, self.mode),
            "particularSolution": (
                None if self.particular_solution is None
                else format_vector(self.particular_solution, self.mode)
            ),
            "basis": format_matrix(self.basis, self.mode),
            "steps": steps_as_dicts(self.steps, self.mode),
        }


@dataclass(frozen=True)
class CharacteristicPolynomialResult:
    """coefficients run from x^n down to x^0; coefficients[0] == 1."""

    coefficients: Row
    polynomial: str
    steps: tuple[TraceStep, ...] = ()
    mode: NumericMode = field(default=DEFAULT_MODE, repr=False, compare=False)

    @property
    def degree(self) -> int:
        return len(self.coefficients) - 1

    def as_dict(self) -> dict:
        return {
            "polynomial": self.polynomial,
            "coefficients": format_vector(self.coefficients, self.mode),
            "steps": steps_as_dicts(self.steps, self.mode),
        }


@dataclass(frozen=True)
class VectorAnalysisResult:
    """
    Linear (in)dependence of a vector family.

    pivot_indices: 0-based indices of the vectors forming a maximal
                   independent subfamily.
    relations:     for every other vector, (index, coefficients) with
                   vector[index] == sum(c * basis[k]).
    """

    rank: int
    is_linearly_independent: bool
    pivot_indices: tuple[int, ...]
    basis: Rows
    relations: tuple[tuple[int, Row], ...] = ()
    steps: tuple[TraceStep, ...] = ()
    mode: NumericMode = field(default=DEFAULT_MODE, repr=False, compare=False)

    def as_dict(self) -> dict:
        return {
            "rank": self.rank,
            "isLinearlyIndependent": self.is_linearly_independent,
            "pivotColumns": [i + 1 for i in self.pivot_indices],
            "basis": format_matrix(self.basis, self.mode),
            "relation": [
                {"vector": i + 1, "coefficients": format_vector(c, self.mode)}
                for i, c in self.relations
            ],
            "steps": steps_as_dicts(self.steps, self.mode),
        }


@dataclass(frozen=True)
class OrthogonalizationResult:
    """Gram-Schmidt output; orthonormal vectors are always floats."""

    is_linearly_independent: bool
    rank: int
    orthogonal: Rows = ()
    orthonormal: Rows = ()
    steps: tuple[TraceStep, ...] = ()
    mode: NumericMode = field(default=DEFAULT_MODE, repr=False, compare=False)

    def as_dict(self) -> dict:
        return {
            "isLinearlyIndependent": self.is_linearly_independent,
            "rank": self.rank,
            "orthogonalVectors": format_matrix(self.orthogonal, self.mode),
            "orthonormalVectors": format_matrix(self.orthonormal, self.mode),
            "steps": steps_as_dicts(self.steps, self.mode),
        }


__all__ = [
    "SOLUTION_KINDS",
    "DeterminantResult",
    "InverseResult",
    "ProductResult",
    "RankResult",
    "SolveResult",
    "CharacteristicPolynomialResult",
    "VectorAnalysisResult",
    "OrthogonalizationResult",
    "steps_as_dicts",
    "freeze_rows",
]
