from itertools import zip_longest
from typing import List

from polyfactor.complex_number import Complex

from ._coefficients import Coefficients, as_coefficients


def polynomial_subtract(p: Coefficients, q: Coefficients) -> List[Complex]:
    """Subtract two coefficient vectors.

    Missing high-order terms of the shorter operand count as zero, so
    surplus terms of ``q`` appear negated in the result.

    Parameters
    ----------
    p, q : sequence of numbers
        Ascending coefficients.

    Returns
    -------
    list of Complex
        Difference ``p - q`` of length ``max(len(p), len(q))``.
    """
    zero = Complex(0.0)
    return [
        a - b
        for a, b in zip_longest(
            as_coefficients(p), as_coefficients(q), fillvalue=zero
        )
    ]
