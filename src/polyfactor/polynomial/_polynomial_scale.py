from typing import List

from polyfactor.complex_number import Complex

from ._coefficients import Coefficients, as_coefficients


def polynomial_scale(p: Coefficients, c) -> List[Complex]:
    """Multiply every coefficient by the scalar ``c``.

    Parameters
    ----------
    p : sequence of numbers
        Ascending coefficients.
    c : Complex or number
        Scalar factor.

    Returns
    -------
    list of Complex
        Scaled coefficients, same length as ``p``.
    """
    c = Complex.from_number(c)
    return [a * c for a in as_coefficients(p)]
