"""Batched Durand-Kerner polynomial root finding on tensors."""

import math
import warnings

import torch
from torch import Tensor

from ._convergence import (
    DEFAULT_MAX_ITERATIONS,
    SEED_SNAP_THRESHOLD,
    STALL_WINDOW,
    default_tolerances,
)
from ._exceptions import ConvergenceWarning, InvalidDegreeError
from ._linear_factors import LinearFactors


def _power_sum_eval(coeffs: Tensor, x: Tensor) -> Tensor:
    """Evaluate sum_i c_i x^i.

    Parameters
    ----------
    coeffs : Tensor
        Coefficients shape (B, N) in ascending order.
    x : Tensor
        Evaluation points shape (B, M).

    Returns
    -------
    Tensor
        Values shape (B, M).
    """
    n = coeffs.shape[-1]

    # Powers [1, x, x^2, ..., x^(N-1)] via running product, shape (B, M, N)
    ones = torch.ones_like(x).unsqueeze(-1)
    repeated = x.unsqueeze(-1).expand(*x.shape, n - 1)
    powers = torch.cumprod(torch.cat([ones, repeated], dim=-1), dim=-1)

    return (powers * coeffs.unsqueeze(-2)).sum(dim=-1)


def _get_initial_roots(
    coeffs: Tensor, degree: int, snap_threshold: float
) -> Tensor:
    """Spread initial guesses on a circle, one circle per batch element.

    Parameters
    ----------
    coeffs : Tensor
        Complex coefficients, shape (B, N), non-zero leading entry.
    degree : int
        Polynomial degree N - 1.
    snap_threshold : float
        Coordinates below this magnitude are set to zero.

    Returns
    -------
    Tensor
        Initial guesses, shape (B, degree).
    """
    real_dtype = coeffs.real.dtype
    device = coeffs.device

    # First non-zero coefficient per row (argmax returns the first maximum)
    first = (coeffs != 0).to(torch.int64).argmax(dim=-1, keepdim=True)
    lowest = coeffs.gather(-1, first)
    leading = coeffs[..., -1:]

    radius = (lowest.abs() / leading.abs()) ** (1.0 / degree)

    angles = (
        torch.arange(degree, device=device, dtype=real_dtype)
        * (2 * math.pi / degree)
        + math.pi / (2 * degree)
    )

    real = radius * torch.cos(angles)
    imag = radius * torch.sin(angles)
    real = torch.where(real.abs() < snap_threshold, torch.zeros_like(real), real)
    imag = torch.where(imag.abs() < snap_threshold, torch.zeros_like(imag), imag)

    return torch.complex(real, imag)


def _shift(z: Tensor, perturbation: complex) -> Tensor:
    """Per-guess shift, ``perturbation`` scaled by ``max(1, |z|)``."""
    return perturbation * z.abs().clamp(min=1.0)


def _separate_collisions(
    z: Tensor, proximity: float, perturbation: complex
) -> Tensor:
    """Shift guesses that sit within ``proximity`` of an earlier guess.

    Repeats until no pair collides; each round moves the later member of
    every colliding pair by the scaled ``perturbation``.
    """
    degree = z.shape[-1]
    earlier = torch.ones(
        degree, degree, dtype=torch.bool, device=z.device
    ).tril(diagonal=-1)

    for _ in range(degree):
        distance = (z.unsqueeze(-1) - z.unsqueeze(-2)).abs()
        clash = ((distance < proximity) & earlier).any(dim=-1)
        if not clash.any():
            break
        z = z + clash.to(z.dtype) * _shift(z, perturbation)

    return z


def _kick_stalled(z: Tensor, step: Tensor, perturbation: complex) -> Tensor:
    """Shift, in every row, the guess that moved furthest last pass.

    Real coefficients keep a conjugate pair of guesses conjugate, so it
    can never split into two real roots. One shift breaks the symmetry.
    """
    worst = step.argmax(dim=-1, keepdim=True)
    mask = torch.zeros_like(step, dtype=torch.bool).scatter(-1, worst, True)
    return z + mask.to(z.dtype) * _shift(z, perturbation)


def durand_kerner(
    coeffs: Tensor,
    *,
    maxiter: int = DEFAULT_MAX_ITERATIONS,
    tol: float | None = None,
) -> LinearFactors:
    """Find all roots of batched polynomials using Durand-Kerner iteration.

    Tensor counterpart of :func:`~polyfactor.root_finding.factorize`:
    identical seeding, Weierstrass update and collision handling, applied
    to every polynomial of a batch at once.

    Parameters
    ----------
    coeffs : Tensor
        Polynomial coefficients in ascending order of powers, shape
        (..., N). Represents c_0 + c_1*x + ... + c_{N-1}*x^{N-1}.
        The degree N-1 must be at least 2.
    maxiter : int, default=2**12
        Maximum number of iterations.
    tol : float, optional
        Convergence tolerance on the largest per-root step. Default is
        dtype-appropriate: 1e-9 for float64/complex128, 1e-5 for
        float32/complex64.

    Returns
    -------
    LinearFactors
        Factors with ``scale`` all ones and ``root`` the negated zeros,
        batch size (..., N-1). For float64 input roots are complex128;
        for float32, complex64. Complex input preserves dtype.

    Raises
    ------
    InvalidDegreeError
        If the degree is below 2 or any leading coefficient is zero.

    Warns
    -----
    ConvergenceWarning
        If any polynomial of the batch did not converge within ``maxiter``.

    Examples
    --------
    Roots of x^2 - x - 6 = (x-3)(x+2):

    >>> import torch
    >>> coeffs = torch.tensor([-6.0, -1.0, 1.0], dtype=torch.float64)
    >>> factors = durand_kerner(coeffs)
    >>> sorted(factors.zeros().real.tolist())  # doctest: +ELLIPSIS
    [-2.0..., 3.0...]

    Notes
    -----
    The update is Jacobi-style: the full tensor of new guesses is computed
    from the previous tensor before replacing it. Batch elements that have
    converged are frozen while the rest continue.

    As in :func:`factorize`, every 64 passes without convergence the guess
    that moved furthest in each unconverged row is shifted once, which
    frees conjugate pairs stuck between two real roots.
    """
    if coeffs.is_complex():
        cdtype = coeffs.dtype
    else:
        cdtype = (
            torch.complex128
            if coeffs.dtype == torch.float64
            else torch.complex64
        )

    tolerances = default_tolerances(cdtype)
    if tol is None:
        tol = tolerances["tol"]
    perturbation = complex(
        tolerances["perturbation"], tolerances["perturbation"]
    )

    batch_shape = coeffs.shape[:-1]
    n = coeffs.shape[-1]
    degree = n - 1

    if degree < 2:
        raise InvalidDegreeError(
            f"durand_kerner: polynomial degree must be >= 2, got {degree}"
        )

    c = coeffs.to(cdtype)
    if torch.any(c[..., -1] == 0):
        raise InvalidDegreeError(
            "durand_kerner: leading coefficient must be non-zero"
        )

    batch_size = batch_shape.numel() if len(batch_shape) > 0 else 1
    c_flat = c.reshape(batch_size, n)
    leading = c_flat[..., -1:]

    z = _get_initial_roots(c_flat, degree, SEED_SNAP_THRESHOLD)

    self_mask = torch.eye(degree, dtype=torch.bool, device=c.device)
    converged = torch.zeros(batch_size, dtype=torch.bool, device=c.device)

    step = torch.zeros(batch_size, degree, dtype=z.real.dtype, device=c.device)

    for iteration in range(maxiter):
        active = ~converged
        if not active.any():
            break

        if iteration > 0 and iteration % STALL_WINDOW == 0:
            z = torch.where(
                active.unsqueeze(-1), _kick_stalled(z, step, perturbation), z
            )

        z = torch.where(
            active.unsqueeze(-1),
            _separate_collisions(z, tolerances["proximity"], perturbation),
            z,
        )

        # Product of (z_i - z_j) over j != i; diagonal replaced by 1
        z_diff = (z.unsqueeze(-1) - z.unsqueeze(-2)).masked_fill(self_mask, 1.0)
        denominator = leading * z_diff.prod(dim=-1)

        correction = _power_sum_eval(c_flat, z) / denominator
        z_next = torch.where(
            torch.isfinite(correction),
            z - correction,
            z + _shift(z, perturbation),
        )

        step = (z_next - z).abs()
        z = torch.where(active.unsqueeze(-1), z_next, z)
        converged = converged | (active & (step.amax(dim=-1) < tol))

    if not converged.all():
        warnings.warn(
            f"durand_kerner: {int((~converged).sum())} of {batch_size} "
            f"polynomials did not converge within {maxiter} iterations",
            ConvergenceWarning,
            stacklevel=2,
        )

    roots = z.reshape(*batch_shape, degree)

    return LinearFactors(
        scale=torch.ones(roots.shape, dtype=roots.real.dtype, device=roots.device),
        root=-roots,
        batch_size=roots.shape,
    )
