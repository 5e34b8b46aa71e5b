from .rational import RationalNumber, gcd
from .mode import NumericMode, DEFAULT_MODE, FORMAT_TYPES
from .scalar import Scalar, coerce, to_float, to_rational, is_zero
from .formatting import format_scalar, format_vector, format_matrix

__all__ = [
    "RationalNumber",
    "gcd",
    "NumericMode",
    "DEFAULT_MODE",
    "FORMAT_TYPES",
    "Scalar",
    "coerce",
    "to_float",
    "to_rational",
    "is_zero",
    "format_scalar",
    "format_vector",
    "format_matrix",
]
