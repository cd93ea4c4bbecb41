"""Hypothesis strategies for polyfactor testing."""

from ._complex_values import complex_values, nonzero_complex_values
from ._linear_factors import well_separated_factors
from ._real_numbers import real_numbers

__all__ = [
    "complex_values",
    "nonzero_complex_values",
    "real_numbers",
    "well_separated_factors",
]
