"""Command line estimate of the volume of the unit hypersphere."""

from __future__ import annotations

import argparse
import random
from collections.abc import Sequence

from hypervolume.estimator import Estimate, monte_carlo_volume, parallel_monte_carlo_volume
from hypervolume.geometry import cube_bounds, hypersphere_volume, unit_hypersphere

DEFAULT_DIMENSION = 3
DEFAULT_SAMPLES = 100_000_000


def format_estimate(estimate: Estimate) -> str:
    """The final-results report for an estimate."""
    return "\n".join(
        [
            "Risultati finali:",
            f"Punti totali: {estimate.n_samples}",
            f"Punti dentro la figura: {estimate.inside}",
            f"Rapporto: {estimate.ratio:.6f}",
            f"Volume stimato: {estimate.volume:.6f}",
        ]
    )


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="hypervolume",
        description="Estimate the volume of the k-dimensional unit hypersphere.",
    )
    parser.add_argument("k", type=int, nargs="?", default=DEFAULT_DIMENSION,
                        help="number of dimensions (default: 3)")
    parser.add_argument("--samples", type=int, default=DEFAULT_SAMPLES,
                        help="number of random points")
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    parser.add_argument("--workers", type=int, default=None,
                        help="share the samples between this many processes")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the estimate and print the report."""
    parser = _parser()
    args = parser.parse_args(argv)
    k = args.k
    try:
        bounds = cube_bounds(k)
    except ValueError as error:
        parser.error(str(error))
    if args.samples <= 0:
        parser.error("the number of samples must be positive")
    if args.workers is not None and args.workers < 1:
        parser.error("the number of workers must be positive")

    print(f"=== METODO MONTE CARLO PER VOLUMI {k}-DIMENSIONALI ===\n")
    print(f"ESEMPIO: Ipersfera {k}D (raggio = 1)")
    exact = hypersphere_volume(k)
    print(f"Volume teorico: {exact:.6f}")

    box = bounds[0].width() ** k
    print("Inizio simulazione Monte Carlo...")
    print(f"Dimensioni: {k}")
    print(f"Campioni: {args.samples}")
    print(f"Volume ipercubo: {box:.6f}\n")

    if args.workers is None:
        estimate = monte_carlo_volume(bounds, args.samples, unit_hypersphere,
                                      random.Random(args.seed))
    else:
        estimate = parallel_monte_carlo_volume(bounds, args.samples, unit_hypersphere,
                                               args.workers, args.seed)

    print()
    print(format_estimate(estimate))
    print(f"Errore relativo: {abs(estimate.volume - exact) / exact * 100:.2f}%")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())