from itertools import zip_longest
from typing import List

from polyfactor.complex_number import Complex

from ._coefficients import Coefficients, as_coefficients


def polynomial_add(p: Coefficients, q: Coefficients) -> List[Complex]:
    """Add two coefficient vectors.

    Missing high-order terms of the shorter operand count as zero.

    Parameters
    ----------
    p, q : sequence of numbers
        Ascending coefficients.

    Returns
    -------
    list of Complex
        Sum ``p + q`` of length ``max(len(p), len(q))``.

    Examples
    --------
    >>> polynomial_add([1, 2], [3, 4, 5])
    [Complex(real=4.0, imag=0.0), Complex(real=6.0, imag=0.0), Complex(real=5.0, imag=0.0)]
    """
    zero = Complex(0.0)
    return [
        a + b
        for a, b in zip_longest(
            as_coefficients(p), as_coefficients(q), fillvalue=zero
        )
    ]
