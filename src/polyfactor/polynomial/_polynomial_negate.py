from typing import List

from polyfactor.complex_number import Complex

from ._coefficients import Coefficients, as_coefficients


def polynomial_negate(p: Coefficients) -> List[Complex]:
    """Negate every coefficient."""
    return [-c for c in as_coefficients(p)]
