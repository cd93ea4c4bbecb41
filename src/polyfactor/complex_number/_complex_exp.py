import math

from ._complex import Complex


def complex_exp(z: Complex) -> Complex:
    """Complex exponential.

    .. math::

        e^{a + ib} = e^a (\\cos b + i \\sin b)

    Parameters
    ----------
    z : Complex
        Exponent.

    Returns
    -------
    Complex
        ``e ** z``. A real part too large for ``math.exp`` yields an
        infinite magnitude instead of raising.

    Examples
    --------
    >>> complex_exp(Complex(0.0, math.pi))
    Complex(real=-1.0, imag=1.2246467991473532e-16)
    """
    try:
        scale = math.exp(z.real)
    except OverflowError:
        scale = math.inf

    return Complex(scale * math.cos(z.imag), scale * math.sin(z.imag))
