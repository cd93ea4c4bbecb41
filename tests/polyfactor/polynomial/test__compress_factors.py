import hypothesis
import numpy as np
import pytest
from numpy.polynomial import polynomial as npp

from polyfactor.complex_number import Complex
from polyfactor.polynomial import LinearFactor, compress_factors
from polyfactor.testing.strategies import well_separated_factors


class TestCompressFactors:
    """Tests for compress_factors."""

    def test_quadratic(self):
        """(x - 3)(x + 2) = x^2 - x - 6."""
        assert compress_factors([(1, -3), (1, 2)]) == [-6, -1, 1]

    def test_accepts_linear_factors(self):
        factors = [LinearFactor(1.0, Complex(-3.0)), LinearFactor(1.0, Complex(2.0))]
        assert compress_factors(factors) == [-6, -1, 1]

    def test_empty_product(self):
        assert compress_factors([]) == [1]

    def test_single_factor(self):
        assert compress_factors([(2, 5)]) == [5, 2]

    def test_extreme_powers(self):
        """Constant term multiplies roots, leading term multiplies scales."""
        result = compress_factors([(2, 1), (3, -2), (0.5, 4)])
        assert result[0] == Complex(-8.0)
        assert result[-1] == Complex(3.0)

    def test_quartic_elementary_symmetric(self):
        """Every pair of roots contributes to the x^2 coefficient."""
        # (x + 1)(x + 2)(x + 3)(x + 4)
        result = compress_factors([(1, 1), (1, 2), (1, 3), (1, 4)])
        assert result == [24, 50, 35, 10, 1]

    def test_complex_roots(self):
        # (x - (1 + i))(x - (1 - i)) = x^2 - 2x + 2
        result = compress_factors([(1, Complex(-1, -1)), (1, Complex(-1, 1))])
        assert result == [2, -2, 1]

    def test_matches_numpy_from_roots(self):
        zeros = [0.5 + 1j, -2.0, 1.5 - 0.25j, 3j, -1 - 1j]
        result = compress_factors([(1, -z) for z in zeros])
        np.testing.assert_allclose(
            np.array([complex(c) for c in result]),
            npp.polyfromroots(zeros),
            atol=1e-12,
        )

    @hypothesis.given(factors=well_separated_factors(min_size=1, max_size=6))
    def test_length(self, factors):
        assert len(compress_factors(factors)) == len(factors) + 1

    @hypothesis.given(factors=well_separated_factors(max_size=5))
    def test_leading_coefficient_is_product_of_scales(self, factors):
        product = 1.0
        for factor in factors:
            product *= factor.scale
        leading = compress_factors(factors)[-1]
        assert leading.real == pytest.approx(product)
        assert leading.imag == 0.0
