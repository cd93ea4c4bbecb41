"""Magnitude capability shared by every numeric type."""

import functools
from numbers import Real

from torch import Tensor

from ._complex import Complex
from ._polar_complex import PolarComplex


@functools.singledispatch
def norm(value):
    """Return the magnitude of a real or complex value.

    Algorithms that need a distance or a size call ``norm`` rather than
    branching on the numeric type. Additional numeric types plug in with
    ``norm.register``.

    Parameters
    ----------
    value : Real, complex, Complex, PolarComplex or Tensor
        Value to measure.

    Returns
    -------
    float or Tensor
        ``|value|``. Tensors are measured element-wise.

    Raises
    ------
    TypeError
        If no implementation is registered for ``type(value)``.

    Examples
    --------
    >>> norm(-3)
    3.0
    >>> norm(Complex(3.0, 4.0))
    5.0
    """
    raise TypeError(f"norm: unsupported type {type(value).__name__}")


@norm.register(Real)
def _(value) -> float:
    return abs(float(value))


@norm.register(complex)
def _(value: complex) -> float:
    return abs(value)


@norm.register(Complex)
def _(value: Complex) -> float:
    return value.absolute()


@norm.register(PolarComplex)
def _(value: PolarComplex) -> float:
    return abs(value.magnitude)


@norm.register(Tensor)
def _(value: Tensor) -> Tensor:
    return value.abs()
