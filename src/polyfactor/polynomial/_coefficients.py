"""Coercion between coefficient sequences, ``Complex`` lists and tensors."""

from typing import Iterable, List, Sequence, Union

import torch
from torch import Tensor

from polyfactor.complex_number import Complex

Coefficients = Union[Sequence[Union[Complex, complex, float, int]], Tensor]


def as_coefficients(coefficients: Coefficients) -> List[Complex]:
    """Return ``coefficients`` as a new list of :class:`Complex`.

    Parameters
    ----------
    coefficients : sequence of numbers or Tensor
        Ascending coefficients, ``coefficients[i]`` multiplies ``x**i``.
        Plain ``int``, ``float`` and ``complex`` entries are converted.
        A one-dimensional tensor is accepted as well.

    Returns
    -------
    list of Complex
        Coefficient list, independent of the input container.
    """
    if isinstance(coefficients, Tensor):
        return coefficients_from_tensor(coefficients)

    return [Complex.from_number(c) for c in coefficients]


def coefficients_from_tensor(coeffs: Tensor) -> List[Complex]:
    """Convert a one-dimensional coefficient tensor to ``Complex`` values.

    Raises
    ------
    ValueError
        If ``coeffs`` is not one-dimensional.
    """
    if coeffs.dim() != 1:
        raise ValueError(
            f"coefficients_from_tensor: expected a 1-D tensor, "
            f"got shape {tuple(coeffs.shape)}"
        )

    values = coeffs.detach().cpu()
    if values.is_complex():
        return [Complex(c.real, c.imag) for c in values.tolist()]
    return [Complex(float(c)) for c in values.tolist()]


def coefficients_to_tensor(
    coefficients: Iterable[Complex],
    *,
    dtype: torch.dtype = torch.complex128,
    device: Union[torch.device, str, None] = None,
) -> Tensor:
    """Pack ``Complex`` coefficients into a complex tensor of shape (N,).

    Examples
    --------
    >>> coefficients_to_tensor([Complex(-6.0), Complex(-1.0), Complex(1.0)])
    tensor([-6.+0.j, -1.+0.j,  1.+0.j], dtype=torch.complex128)
    """
    values = [complex(Complex.from_number(c)) for c in coefficients]
    return torch.tensor(values, dtype=dtype, device=device)
