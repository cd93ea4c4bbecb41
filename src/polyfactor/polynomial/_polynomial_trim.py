from typing import List

from polyfactor.complex_number import Complex, norm

from ._coefficients import Coefficients, as_coefficients


def polynomial_trim(p: Coefficients, tol: float = 0.0) -> List[Complex]:
    """Remove trailing near-zero coefficients.

    Parameters
    ----------
    p : sequence of numbers
        Ascending coefficients.
    tol : float
        Coefficients with magnitude ``<= tol`` count as zero.

    Returns
    -------
    list of Complex
        Trimmed coefficients with at least one entry.
    """
    coefficients = as_coefficients(p)

    while len(coefficients) > 1 and norm(coefficients[-1]) <= tol:
        coefficients.pop()

    if not coefficients:
        return [Complex(0.0)]

    return coefficients
