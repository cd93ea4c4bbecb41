from ._coefficients import (
    as_coefficients,
    coefficients_from_tensor,
    coefficients_to_tensor,
)
from ._compress_factors import compress_factors
from ._degree_error import DegreeError
from ._linear_factor import LinearFactor
from ._polynomial_add import polynomial_add
from ._polynomial_degree import polynomial_degree
from ._polynomial_error import PolynomialError
from ._polynomial_evaluate import polynomial_evaluate
from ._polynomial_multiply import polynomial_multiply
from ._polynomial_negate import polynomial_negate
from ._polynomial_scale import polynomial_scale
from ._polynomial_subtract import polynomial_subtract
from ._polynomial_trim import polynomial_trim

__all__ = [
    "DegreeError",
    "LinearFactor",
    "PolynomialError",
    "as_coefficients",
    "coefficients_from_tensor",
    "coefficients_to_tensor",
    "compress_factors",
    "polynomial_add",
    "polynomial_degree",
    "polynomial_evaluate",
    "polynomial_multiply",
    "polynomial_negate",
    "polynomial_scale",
    "polynomial_subtract",
    "polynomial_trim",
]
