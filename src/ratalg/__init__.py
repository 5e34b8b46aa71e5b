"""
ratalg: exact-rational linear algebra with step-by-step traces.

Determinants, inverses, rank, linear systems, characteristic polynomials,
vector-family analysis and Gram-Schmidt over RationalNumber (or floats in
decimal mode).
"""

import logging

from .errors import (
    AlgebraError,
    ShapeError,
    OrderLimitExceeded,
    EmptyInput,
    DivisionByZero,
    NotInvertible,
    ZeroVector,
    EntryError,
)
from .numbers import (
    RationalNumber,
    NumericMode,
    DEFAULT_MODE,
    FORMAT_TYPES,
    Scalar,
    format_scalar,
    format_vector,
    format_matrix,
)
from .trace import TraceStep, TraceRecorder
from .results import (
    DeterminantResult,
    InverseResult,
    ProductResult,
    RankResult,
    SolveResult,
    CharacteristicPolynomialResult,
    VectorAnalysisResult,
    OrthogonalizationResult,
)

# Algorithms
from .matrix import (
    determinant,
    inverse,
    reduce_to_row_echelon,
    row_echelon_form,
    matrix_rank,
    solve_equations,
    multiply_matrices,
    identity_matrix,
    transpose,
)
from .vector import (
    dot_product,
    add_vectors,
    subtract_vectors,
    scalar_multiply,
    vector_norm,
    normalize_vector,
    analyze_vectors,
    gram_schmidt,
)
from .charpoly import (
    index_subsets,
    principal_minors_sum,
    characteristic_polynomial,
    format_polynomial,
)

# Facade
from .engine import MatrixEngine

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Errors
    "AlgebraError",
    "ShapeError",
    "OrderLimitExceeded",
    "EmptyInput",
    "DivisionByZero",
    "NotInvertible",
    "ZeroVector",
    "EntryError",
    # Numbers
    "RationalNumber",
    "NumericMode",
    "DEFAULT_MODE",
    "FORMAT_TYPES",
    "Scalar",
    "format_scalar",
    "format_vector",
    "format_matrix",
    # Trace and results
    "TraceStep",
    "TraceRecorder",
    "DeterminantResult",
    "InverseResult",
    "ProductResult",
    "RankResult",
    "SolveResult",
    "CharacteristicPolynomialResult",
    "VectorAnalysisResult",
    "OrthogonalizationResult",
    # Matrix
    "determinant",
    "inverse",
    "reduce_to_row_echelon",
    "row_echelon_form",
    "matrix_rank",
    "solve_equations",
    "multiply_matrices",
    "identity_matrix",
    "transpose",
    # Vector
    "dot_product",
    "add_vectors",
    "subtract_vectors",
    "scalar_multiply",
    "vector_norm",
    "normalize_vector",
    "analyze_vectors",
    "gram_schmidt",
    # Characteristic polynomial
    "index_subsets",
    "principal_minors_sum",
    "characteristic_polynomial",
    "format_polynomial",
    # Facade
    "MatrixEngine",
]
