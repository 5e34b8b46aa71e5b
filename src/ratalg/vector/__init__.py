from .ops import (
    dot_product,
    add_vectors,
    subtract_vectors,
    scalar_multiply,
    vector_norm,
    normalize_vector,
)
from .analysis import analyze_vectors
from .orthogonalize import gram_schmidt

__all__ = [
    "dot_product",
    "add_vectors",
    "subtract_vectors",
    "scalar_multiply",
    "vector_norm",
    "normalize_vector",
    "analyze_vectors",
    "gram_schmidt",
]
