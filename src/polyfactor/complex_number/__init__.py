from ._complex import Complex
from ._complex_exp import complex_exp
from ._complex_pow import complex_pow, complex_pow_real
from ._norm import norm
from ._polar_complex import (
    PolarComplex,
    cartesian_to_polar,
    polar_to_cartesian,
)

__all__ = [
    "Complex",
    "PolarComplex",
    "cartesian_to_polar",
    "complex_exp",
    "complex_pow",
    "complex_pow_real",
    "norm",
    "polar_to_cartesian",
]
