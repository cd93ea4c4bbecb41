"""polyfactor: polynomial factorization by Durand-Kerner iteration."""

from . import complex_number, polynomial, root_finding
from .complex_number import (
    Complex,
    PolarComplex,
    complex_exp,
    complex_pow,
    complex_pow_real,
    norm,
)
from .polynomial import (
    LinearFactor,
    compress_factors,
    polynomial_add,
    polynomial_evaluate,
    polynomial_multiply,
    polynomial_subtract,
)
from .root_finding import (
    ConvergenceWarning,
    InvalidDegreeError,
    durand_kerner,
    factorize,
    factorize_with_info,
    polynomial_roots,
)

__all__ = [
    "complex_number",
    "polynomial",
    "root_finding",
    "Complex",
    "ConvergenceWarning",
    "InvalidDegreeError",
    "LinearFactor",
    "PolarComplex",
    "complex_exp",
    "complex_pow",
    "complex_pow_real",
    "compress_factors",
    "durand_kerner",
    "factorize",
    "factorize_with_info",
    "norm",
    "polynomial_add",
    "polynomial_evaluate",
    "polynomial_multiply",
    "polynomial_roots",
    "polynomial_subtract",
]

__version__ = "0.1.0"
