from polyfactor.complex_number import Complex, complex_pow_real

from ._coefficients import Coefficients, as_coefficients


def polynomial_evaluate(x, coefficients: Coefficients) -> Complex:
    """Evaluate a polynomial at a complex point.

    .. math::

        p(x) = \\sum_i c_i x^i

    Each power is taken with :func:`~polyfactor.complex_number.complex_pow_real`.
    Zero coefficients are skipped; they contribute nothing to the sum.

    Parameters
    ----------
    x : Complex or number
        Evaluation point.
    coefficients : sequence of numbers
        Ascending coefficients.

    Returns
    -------
    Complex
        ``p(x)``. An empty coefficient vector evaluates to zero.

    Examples
    --------
    >>> value = polynomial_evaluate(Complex(3.0), [-6, -1, 1])  # (x - 3)(x + 2)
    >>> value.absolute() < 1e-12
    True
    """
    x = Complex.from_number(x)

    total = Complex(0.0)
    for power, c in enumerate(as_coefficients(coefficients)):
        if c == 0:
            continue

        if power == 0:
            total = total + c
        else:
            total = total + c * complex_pow_real(x, power)

    return total
