import math

import pytest

from polyfactor.complex_number import Complex
from polyfactor.polynomial import as_coefficients
from polyfactor.root_finding import (
    initial_guesses,
    separate_collisions,
    shift_guess,
)


class TestInitialGuesses:
    """Tests for circle seeding."""

    def test_count_equals_degree(self):
        guesses = initial_guesses(as_coefficients([-16, 0, 0, 0, 4]))
        assert len(guesses) == 4

    def test_radius_and_offset(self):
        """4x^4 - 16 seeds on radius sqrt(2), first guess at pi/8."""
        guesses = initial_guesses(as_coefficients([-16, 0, 0, 0, 4]))

        for guess in guesses:
            assert guess.absolute() == pytest.approx(math.sqrt(2.0))

        assert guesses[0].argument() == pytest.approx(math.pi / 8)
        assert guesses[1].argument() == pytest.approx(math.pi / 8 + math.pi / 2)

    def test_evenly_spaced(self):
        guesses = initial_guesses(as_coefficients([1, 2, 3, 4, 5, 6]))
        for a, b in zip(guesses, guesses[1:]):
            ratio = b / a
            assert ratio.argument() == pytest.approx(2 * math.pi / 5)

    def test_snaps_tiny_real_part(self):
        """Degree one seeds on the imaginary axis exactly."""
        guesses = initial_guesses(as_coefficients([1, 1]))
        assert guesses == [Complex(0.0, 1.0)]

    def test_snaps_cubic_seed(self):
        guesses = initial_guesses(as_coefficients([1, 0, 0, 1]))
        assert guesses[2].real == 0.0
        assert guesses[2].imag == pytest.approx(-1.0)

    def test_uses_lowest_nonzero_coefficient(self):
        """Radius uses the first non-zero coefficient when c_0 is zero."""
        guesses = initial_guesses(as_coefficients([0, 0, 8, 1]))
        for guess in guesses:
            assert guess.absolute() == pytest.approx(2.0)

    def test_deterministic(self):
        coefficients = as_coefficients([3, -1, 0.5, 2])
        assert initial_guesses(coefficients) == initial_guesses(coefficients)


class TestSeparateCollisions:
    """Tests for separate_collisions."""

    def test_distinct_guesses_unchanged(self):
        guesses = [Complex(0.0), Complex(1.0), Complex(0.0, 1.0)]
        assert separate_collisions(guesses) == guesses

    def test_later_duplicates_shifted(self):
        p = Complex(1e-8, 1e-8)
        guesses = [Complex(0.0)] * 3

        result = separate_collisions(guesses, perturbation=p)

        assert result == [Complex(0.0), p, p + p]

    def test_large_duplicates_separated(self):
        """A fixed 1e-8 shift would vanish in rounding at 1e9."""
        guesses = [Complex(1e9, 1e9)] * 2

        result = separate_collisions(guesses)

        assert result[0] == guesses[0]
        assert (result[1] - result[0]).absolute() >= 1e-10

    def test_input_not_modified(self):
        guesses = [Complex(1.0), Complex(1.0)]
        separate_collisions(guesses)
        assert guesses == [Complex(1.0), Complex(1.0)]

    def test_result_clears_proximity_limit(self):
        limit = 1e-10
        guesses = [Complex(2.0), Complex(2.0 + 1e-12), Complex(2.0, 5e-11)]

        result = separate_collisions(guesses, proximity_limit=limit)

        for i, a in enumerate(result):
            for b in result[i + 1 :]:
                assert (a - b).absolute() >= limit

    def test_perturbation_too_small(self):
        with pytest.raises(ValueError, match="perturbation"):
            separate_collisions(
                [Complex(0.0)],
                proximity_limit=1e-10,
                perturbation=Complex(1e-11),
            )


class TestShiftGuess:
    """Tests for shift_guess."""

    def test_small_guess_moves_by_perturbation(self):
        p = Complex(1e-8, 1e-8)
        assert shift_guess(Complex(0.5, -0.5), p) == Complex(0.5, -0.5) + p

    def test_large_guess_moves_relative_to_magnitude(self):
        p = Complex(1e-8, 1e-8)
        guess = Complex(3e9, 4e9)

        shifted = shift_guess(guess, p)

        assert shifted != guess
        assert (shifted - guess).absolute() == pytest.approx(
            5e9 * p.absolute()
        )
