"""Principal-branch powers of complex values."""

import math

from ._complex import Complex
from ._complex_exp import complex_exp


def complex_pow(base: Complex, exponent: Complex) -> Complex:
    """Raise a complex base to a complex exponent.

    Uses the principal branch of the logarithm:

    .. math::

        z^w = \\exp\\big((\\ln|z| + i \\arg z) \\cdot w\\big)

    Parameters
    ----------
    base : Complex
        Base ``z``.
    exponent : Complex
        Exponent ``w``.

    Returns
    -------
    Complex
        ``z ** w``.

    Raises
    ------
    ZeroDivisionError
        If ``base`` is zero and ``exponent`` has a non-positive real part
        (other than an exponent of exactly zero).

    Examples
    --------
    >>> complex_pow(Complex(0.0, 1.0), Complex(2.0))  # i^2
    Complex(real=-1.0, imag=1.2246467991473532e-16)
    """
    if base.real == 0.0 and base.imag == 0.0:
        if exponent.real == 0.0 and exponent.imag == 0.0:
            return Complex(1.0, 0.0)
        if exponent.real > 0.0:
            return Complex(0.0, 0.0)
        raise ZeroDivisionError(
            "complex_pow: zero base with non-positive exponent"
        )

    log_abs = math.log(base.absolute())
    arg = base.argument()

    # (ln r + i theta) * (c + i d)
    return complex_exp(
        Complex(
            log_abs * exponent.real - exponent.imag * arg,
            log_abs * exponent.imag + exponent.real * arg,
        )
    )


def complex_pow_real(base: Complex, exponent: float) -> Complex:
    """Raise a complex base to a real exponent (de Moivre form).

    .. math::

        z^n = |z|^n (\\cos n\\theta + i \\sin n\\theta)

    Equivalent to :func:`complex_pow` with a real exponent.

    Parameters
    ----------
    base : Complex
        Base ``z``.
    exponent : float
        Real exponent ``n``.

    Returns
    -------
    Complex
        ``z ** n``. ``0 ** 0`` is ``1``.

    Raises
    ------
    ZeroDivisionError
        If ``base`` is zero and ``exponent`` is negative.
    """
    return complex_pow(base, Complex(exponent, 0.0))
