from typing import List

from polyfactor.complex_number import Complex

from ._coefficients import Coefficients, as_coefficients


def polynomial_multiply(p: Coefficients, q: Coefficients) -> List[Complex]:
    """Multiply two coefficient vectors.

    Computes the full convolution

    .. math::

        r_k = \\sum_{i + j = k} p_i q_j

    Parameters
    ----------
    p, q : sequence of numbers
        Ascending coefficients.

    Returns
    -------
    list of Complex
        Product ``p * q`` of length ``len(p) + len(q) - 1``, or an empty
        list when either operand is empty.

    Examples
    --------
    >>> polynomial_multiply([-3, 1], [2, 1])  # (x - 3)(x + 2)
    [Complex(real=-6.0, imag=0.0), Complex(real=-1.0, imag=0.0), Complex(real=1.0, imag=0.0)]
    """
    p = as_coefficients(p)
    q = as_coefficients(q)

    if not p or not q:
        return []

    result = [Complex(0.0)] * (len(p) + len(q) - 1)
    for i, a in enumerate(p):
        for j, b in enumerate(q):
            result[i + j] = result[i + j] + a * b

    return result
