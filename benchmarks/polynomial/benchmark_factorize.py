"""Benchmark polynomial factorization.

Compares the scalar ``factorize`` (pure Python Complex arithmetic) with
the batched tensor ``durand_kerner`` across polynomial degrees, and
measures how the batched variant amortizes over many polynomials.
"""

import time
import warnings

import torch

from polyfactor.root_finding import (
    ConvergenceWarning,
    durand_kerner,
    factorize,
)


def _random_monic(degree: int, batch: int = 1) -> torch.Tensor:
    coeffs = torch.randn(batch, degree + 1, dtype=torch.float64)
    coeffs[..., -1] = 1.0
    return coeffs


def _time(fn, n_iterations: int) -> float:
    # Warmup
    fn()

    start = time.perf_counter()
    for _ in range(n_iterations):
        fn()

    elapsed = time.perf_counter() - start
    return elapsed / n_iterations * 1000  # ms


def benchmark_factorize(degree: int, n_iterations: int = 5) -> float:
    """Average scalar factorization time in milliseconds."""
    coefficients = _random_monic(degree)[0].tolist()
    return _time(lambda: factorize(coefficients), n_iterations)


def benchmark_durand_kerner(
    degree: int, batch: int = 1, n_iterations: int = 5
) -> float:
    """Average batched factorization time in milliseconds."""
    coeffs = _random_monic(degree, batch)
    return _time(lambda: durand_kerner(coeffs), n_iterations)


def main():
    """Run factorization benchmarks across degrees."""
    torch.manual_seed(0)
    warnings.simplefilter("ignore", ConvergenceWarning)

    degrees = [4, 8, 16, 32, 64]

    print("Polynomial Factorization Benchmark")
    print("=" * 70)
    print(
        f"{'Degree':>8} {'Scalar (ms)':>16} {'Tensor (ms)':>16} "
        f"{'Tensor x256 (ms)':>18}"
    )
    print("-" * 70)

    for degree in degrees:
        ms_scalar = benchmark_factorize(degree)
        ms_tensor = benchmark_durand_kerner(degree)
        ms_batch = benchmark_durand_kerner(degree, batch=256)

        print(
            f"{degree:>8} {ms_scalar:>16.3f} {ms_tensor:>16.3f} "
            f"{ms_batch:>18.3f}"
        )

    print("=" * 70)


if __name__ == "__main__":
    main()
