import math

import hypothesis
import pytest

from polyfactor.complex_number import (
    Complex,
    PolarComplex,
    cartesian_to_polar,
    polar_to_cartesian,
)
from polyfactor.testing.strategies import complex_values


class TestPolarComplexConversion:
    """Tests for conversion between polar and Cartesian forms."""

    def test_to_cartesian(self):
        z = PolarComplex(2.0, math.pi / 2).to_cartesian()
        assert z.real == pytest.approx(0.0, abs=1e-15)
        assert z.imag == pytest.approx(2.0)

    def test_real_and_imag_properties(self):
        p = PolarComplex(2.0, math.pi / 3)
        assert p.real == pytest.approx(1.0)
        assert p.imag == pytest.approx(math.sqrt(3.0))

    def test_from_cartesian(self):
        assert PolarComplex.from_cartesian(Complex(0.0, -3.0)) == PolarComplex(
            3.0, -math.pi / 2
        )

    def test_helpers(self):
        assert polar_to_cartesian(1.0, 0.0) == Complex(1.0, 0.0)
        assert cartesian_to_polar(Complex(-2.0, 0.0)) == PolarComplex(
            2.0, math.pi
        )

    @hypothesis.given(z=complex_values())
    def test_round_trip(self, z):
        back = cartesian_to_polar(z).to_cartesian()
        assert back.real == pytest.approx(z.real, abs=1e-12)
        assert back.imag == pytest.approx(z.imag, abs=1e-12)


class TestPolarComplexArithmetic:
    """Tests for PolarComplex operators."""

    def test_multiply_adds_arguments(self):
        result = PolarComplex(2.0, 1.0) * PolarComplex(3.0, 0.5)
        assert result == PolarComplex(6.0, 1.5)

    def test_multiply_wraps_argument(self):
        result = PolarComplex(1.0, 3.0) * PolarComplex(1.0, 1.0)
        assert result.argument == pytest.approx(4.0 - 2 * math.pi)

    def test_multiply_by_negative_scalar(self):
        assert PolarComplex(2.0, 0.0) * -1 == PolarComplex(2.0, math.pi)
        assert 3 * PolarComplex(2.0, 0.5) == PolarComplex(6.0, 0.5)

    def test_negate(self):
        assert -PolarComplex(1.0, 0.0) == PolarComplex(1.0, math.pi)

    def test_divide_subtracts_arguments(self):
        result = PolarComplex(6.0, 1.5) / PolarComplex(3.0, 0.5)
        assert result == PolarComplex(2.0, 1.0)

    def test_divide_by_scalar(self):
        assert PolarComplex(6.0, 1.0) / 2 == PolarComplex(3.0, 1.0)
        assert 1 / PolarComplex(2.0, 0.5) == PolarComplex(0.5, -0.5)

    def test_divide_by_zero_raises(self):
        with pytest.raises(ZeroDivisionError):
            PolarComplex(1.0, 0.0) / PolarComplex(0.0, 0.0)

    def test_add_goes_through_cartesian(self):
        result = PolarComplex(1.0, 0.0) + PolarComplex(1.0, math.pi / 2)
        assert result.magnitude == pytest.approx(math.sqrt(2.0))
        assert result.argument == pytest.approx(math.pi / 4)

    def test_subtract(self):
        result = PolarComplex(1.0, 0.0) - PolarComplex(1.0, 0.0)
        assert result.magnitude == 0.0
        assert (5 - PolarComplex(2.0, 0.0)).magnitude == pytest.approx(3.0)

    def test_pow_real(self):
        assert PolarComplex(2.0, 0.25).pow_real(2) == PolarComplex(4.0, 0.5)

    def test_conjugate(self):
        assert PolarComplex(2.0, 0.5).conjugate() == PolarComplex(2.0, -0.5)

    def test_agrees_with_cartesian_multiplication(self):
        a = Complex(1.0, 2.0)
        b = Complex(-3.0, 0.5)
        polar = (cartesian_to_polar(a) * cartesian_to_polar(b)).to_cartesian()
        cartesian = a * b
        assert polar.real == pytest.approx(cartesian.real)
        assert polar.imag == pytest.approx(cartesian.imag)
