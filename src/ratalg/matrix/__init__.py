from .shape import (
    Matrix,
    Vector,
    validate_matrix,
    coerce_matrix,
    identity_matrix,
    transpose,
)
from .determinant import determinant
from .inverse import inverse
from .echelon import (
    reduce_to_row_echelon,
    row_echelon_form,
    calculate_rank,
    find_pivot_columns,
    matrix_rank,
)
from .solve import solve_equations
from .product import multiply_matrices, matrices_equal

__all__ = [
    "Matrix",
    "Vector",
    "validate_matrix",
    "coerce_matrix",
    "identity_matrix",
    "transpose",
    "determinant",
    "inverse",
    "reduce_to_row_echelon",
    "row_echelon_form",
    "calculate_rank",
    "find_pivot_columns",
    "matrix_rank",
    "solve_equations",
    "multiply_matrices",
    "matrices_equal",
]
