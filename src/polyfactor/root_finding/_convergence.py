"""Default tolerances and convergence utilities for root finding."""

from typing import List, Sequence

import torch

from polyfactor.complex_number import Complex, norm

DEFAULT_MAX_ITERATIONS = 2**12
"""Iteration budget used when the caller does not pass one."""

DEFAULT_TOLERANCE = 1e-9
"""Largest per-root step at which iteration stops."""

SEED_SNAP_THRESHOLD = 1e-10
"""Initial-guess coordinates smaller than this are set to exactly zero."""

PROXIMITY_LIMIT = 1e-10
"""Guesses closer than this are treated as colliding."""

COLLISION_PERTURBATION = Complex(1e-8, 1e-8)
"""Fixed shift applied to the later of two colliding guesses."""

STALL_WINDOW = 64
"""Passes without convergence after which one guess is kicked."""


def default_tolerances(dtype: torch.dtype) -> dict[str, float]:
    """Return dtype-appropriate default tolerances.

    Parameters
    ----------
    dtype : torch.dtype
        The tensor dtype.

    Returns
    -------
    dict[str, float]
        Dictionary with keys 'tol' (convergence), 'proximity' (collision
        limit) and 'perturbation' (real and imaginary collision shift).
    """
    if dtype in (torch.float16, torch.bfloat16):
        return {"tol": 1e-2, "proximity": 1e-3, "perturbation": 1e-2}
    elif dtype in (torch.float32, torch.complex64):
        return {"tol": 1e-5, "proximity": 1e-6, "perturbation": 1e-4}
    else:  # float64, complex128 and others
        return {
            "tol": DEFAULT_TOLERANCE,
            "proximity": PROXIMITY_LIMIT,
            "perturbation": COLLISION_PERTURBATION.real,
        }


def step_sizes(
    current: Sequence[Complex], following: Sequence[Complex]
) -> List[float]:
    """Distance each guess moved during a pass."""
    return [norm(b - a) for a, b in zip(current, following)]


def max_step(current: Sequence[Complex], following: Sequence[Complex]) -> float:
    """Largest distance any guess moved during a pass.

    Since ``||a| - |b|| <= |a - b|``, this also bounds the change in
    magnitude of every guess.
    """
    return max(step_sizes(current, following))


def check_convergence(
    current: Sequence[Complex], following: Sequence[Complex], tol: float
) -> bool:
    """Return True when no guess moved by ``tol`` or more.

    A non-finite step never counts as converged.
    """
    return all(step < tol for step in step_sizes(current, following))
