from typing import Iterable, List, Tuple, Union

from polyfactor.complex_number import Complex

from ._linear_factor import LinearFactor
from ._polynomial_multiply import polynomial_multiply


def compress_factors(
    factors: Iterable[Union[LinearFactor, Tuple[float, object]]],
) -> List[Complex]:
    """Expand a product of linear factors into ascending coefficients.

    Computes the coefficients of

    .. math::

        \\prod_k (s_k x + r_k)

    The constant term is the product of every ``r_k``, the leading term
    the product of every ``s_k``, and the coefficient of ``x^p`` in
    between is the elementary symmetric sum over every choice of ``p``
    factors contributing their scale while the others contribute their
    root.

    Parameters
    ----------
    factors : iterable of LinearFactor or (scale, root) pairs
        Factors ``scale * x + root``.

    Returns
    -------
    list of Complex
        ``N + 1`` coefficients for ``N`` factors. No factors gives the
        empty product ``[1]``.

    Examples
    --------
    >>> compress_factors([(1, -3), (1, 2)])  # (x - 3)(x + 2) = x^2 - x - 6
    [Complex(real=-6.0, imag=0.0), Complex(real=-1.0, imag=0.0), Complex(real=1.0, imag=0.0)]

    Notes
    -----
    The expansion multiplies the running coefficient vector by one factor
    at a time, so every elementary symmetric term is produced exactly once
    in ``O(N^2)`` operations.
    """
    coefficients = [Complex(1.0)]

    for factor in factors:
        factor = LinearFactor.coerce(factor)
        coefficients = polynomial_multiply(coefficients, factor.coefficients())

    return coefficients
