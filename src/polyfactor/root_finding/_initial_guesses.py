"""Starting points for simultaneous root iteration."""

import math
from typing import List, Sequence

from polyfactor.complex_number import Complex, norm, polar_to_cartesian

from ._convergence import (
    COLLISION_PERTURBATION,
    PROXIMITY_LIMIT,
    SEED_SNAP_THRESHOLD,
)


def _snap(z: Complex, threshold: float) -> Complex:
    return Complex(
        0.0 if abs(z.real) < threshold else z.real,
        0.0 if abs(z.imag) < threshold else z.imag,
    )


def initial_guesses(
    coefficients: Sequence[Complex],
    *,
    snap_threshold: float = SEED_SNAP_THRESHOLD,
) -> List[Complex]:
    """Spread ``d`` starting guesses evenly around a circle.

    The radius is ``(|c_0| / |c_d|) ** (1 / d)`` where ``c_0`` is the
    lowest-order non-zero coefficient and ``c_d`` the leading one, i.e. the
    geometric mean of the root magnitudes when ``c_0`` is the constant
    term. Guess ``k`` sits at angle ``k * 2pi / d + pi / (2d)``; the half
    step keeps guesses off the positive real axis.

    Parameters
    ----------
    coefficients : sequence of Complex
        Ascending coefficients with a non-zero leading entry, degree ``d``
        of at least one.
    snap_threshold : float
        Coordinates with magnitude below this become exactly zero.

    Returns
    -------
    list of Complex
        ``d`` guesses in seeding order.
    """
    degree = len(coefficients) - 1
    leading = coefficients[degree]
    lowest = next(c for c in coefficients if c != 0)

    radius = (norm(lowest) / norm(leading)) ** (1.0 / degree)
    base_angle = 2.0 * math.pi / degree
    offset = math.pi / (2.0 * degree)

    return [
        _snap(polar_to_cartesian(radius, k * base_angle + offset), snap_threshold)
        for k in range(degree)
    ]


def shift_guess(guess: Complex, perturbation: Complex) -> Complex:
    """Move ``guess`` by ``perturbation``, scaled up for large guesses.

    Guesses of magnitude above one move by ``perturbation * |guess|``, so
    the shift stays far above the rounding unit of ``guess`` and always
    changes it.
    """
    return guess + perturbation * max(1.0, norm(guess))


def separate_collisions(
    guesses: Sequence[Complex],
    *,
    proximity_limit: float = PROXIMITY_LIMIT,
    perturbation: Complex = COLLISION_PERTURBATION,
) -> List[Complex]:
    """Move apart guesses that sit on top of each other.

    Guesses are visited in order. A guess within ``proximity_limit`` of an
    earlier (already placed) guess is moved by :func:`shift_guess` until it
    is clear of all of them. Every shift points the same way and is longer
    than twice the limit, so each placed guess is passed at most once. The
    result is deterministic and the input is not modified.

    Parameters
    ----------
    guesses : sequence of Complex
        Current guesses.
    proximity_limit : float
        Distance below which two guesses collide.
    perturbation : Complex
        Shift applied to a colliding guess. Its magnitude must exceed
        ``2 * proximity_limit`` so that every shift clears at least one
        neighbour.

    Returns
    -------
    list of Complex
        Separated guesses, same order and length.

    Raises
    ------
    ValueError
        If ``perturbation`` is too small for ``proximity_limit``.
    """
    if norm(perturbation) <= 2.0 * proximity_limit:
        raise ValueError(
            "separate_collisions: perturbation magnitude must exceed twice "
            f"the proximity limit ({proximity_limit})"
        )

    separated: List[Complex] = []
    for guess in guesses:
        while any(
            norm(guess - placed) < proximity_limit for placed in separated
        ):
            guess = shift_guess(guess, perturbation)
        separated.append(guess)

    return separated
