from .subsets import index_subsets, count_subsets, principal_minor
from .polynomial import principal_minors_sum, characteristic_polynomial, format_polynomial

__all__ = [
    "index_subsets",
    "count_subsets",
    "principal_minor",
    "principal_minors_sum",
    "characteristic_polynomial",
    "format_polynomial",
]
