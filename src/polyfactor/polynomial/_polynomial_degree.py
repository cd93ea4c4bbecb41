from polyfactor.complex_number import norm

from ._coefficients import Coefficients, as_coefficients
from ._degree_error import DegreeError


def polynomial_degree(p: Coefficients) -> int:
    """Return the actual degree of a coefficient vector.

    Unlike ``len(p) - 1``, zero high-order coefficients are ignored.

    Raises
    ------
    DegreeError
        If ``p`` is empty or every coefficient is zero (the zero
        polynomial has no degree).

    Examples
    --------
    >>> polynomial_degree([1, 2, 0, 0])
    1
    """
    coefficients = as_coefficients(p)

    for power in range(len(coefficients) - 1, -1, -1):
        if norm(coefficients[power]) != 0.0:
            return power

    raise DegreeError(
        "polynomial_degree: degree of the zero polynomial is undefined"
    )
