"""Monte Carlo estimation of the volume of a shape inside a box."""

from __future__ import annotations

import os
import random
import time
from collections.abc import Callable, Iterable, Iterator, Sequence
from concurrent.futures import ProcessPoolExecutor
from dataclasses import dataclass

from hypervolume.geometry import Bounds, hypercube_volume

Shape = Callable[[Sequence[float]], bool]

DEFAULT_SAMPLE_SIZES = (1000, 10000, 100000, 1000000)


@dataclass(frozen=True)
class Estimate:
    """Outcome of a Monte Carlo run."""

    dimension: int
    n_samples: int
    inside: int
    box_volume: float

    @property
    def ratio(self) -> float:
        """Fraction of the samples that fell inside the shape."""
        return self.inside / self.n_samples

    @property
    def volume(self) -> float:
        """Estimated volume of the shape."""
        return self.box_volume * self.ratio


def random_point(bounds: Sequence[Bounds], rng: random.Random) -> tuple[float, ...]:
    """A point drawn uniformly from the box described by ``bounds``."""
    return tuple(b.min + b.width() * rng.random() for b in bounds)


def count_inside(
    bounds: Sequence[Bounds], n_samples: int, shape: Shape, seed: int | None = None
) -> int:
    """Number of ``n_samples`` random points of the box that ``shape`` accepts."""
    rng = random.Random(seed)
    return sum(1 for _ in range(n_samples) if shape(random_point(bounds, rng)))


def _check_samples(n_samples: int) -> None:
    if n_samples <= 0:
        raise ValueError(f"number of samples must be positive, got {n_samples}")


def monte_carlo_volume(
    bounds: Sequence[Bounds],
    n_samples: int,
    shape: Shape,
    rng: random.Random | None = None,
) -> Estimate:
    """Estimate the volume of ``shape`` by sampling the box ``bounds``."""
    _check_samples(n_samples)
    bounds = tuple(bounds)
    rng = rng if rng is not None else random.Random()
    inside = sum(1 for _ in range(n_samples) if shape(random_point(bounds, rng)))
    return Estimate(len(bounds), n_samples, inside, hypercube_volume(bounds))


def parallel_monte_carlo_volume(
    bounds: Sequence[Bounds],
    n_samples: int,
    shape: Shape,
    workers: int | None = None,
    seed: int | None = None,
) -> Estimate:
    """Estimate a volume by sharing the samples out between worker processes.

    Each worker draws from its own generator, seeded with ``seed`` plus its
    index, and the counts are summed. ``shape`` must be picklable when more
    than one worker is used.
    """
    _check_samples(n_samples)
    workers = workers if workers is not None else (os.cpu_count() or 1)
    if workers < 1:
        raise ValueError(f"number of workers must be positive, got {workers}")
    bounds = tuple(bounds)
    base_seed = seed if seed is not None else time.time_ns()

    share, extra = divmod(n_samples, workers)
    shares = [share + (1 if index < extra else 0) for index in range(workers)]
    jobs = [(n, base_seed + index) for index, n in enumerate(shares) if n > 0]

    if len(jobs) == 1:
        inside = count_inside(bounds, jobs[0][0], shape, jobs[0][1])
    else:
        with ProcessPoolExecutor(max_workers=len(jobs)) as pool:
            futures = [
                pool.submit(count_inside, bounds, n, shape, job_seed)
                for n, job_seed in jobs
            ]
            inside = sum(future.result() for future in futures)
    return Estimate(len(bounds), n_samples, inside, hypercube_volume(bounds))


def convergence(
    bounds: Sequence[Bounds],
    shape: Shape,
    sample_sizes: Iterable[int] = DEFAULT_SAMPLE_SIZES,
    rng: random.Random | None = None,
) -> Iterator[Estimate]:
    """Yield one estimate for each sample size, sharing one generator."""
    rng = rng if rng is not None else random.Random()
    for n_samples in sample_sizes:
        yield monte_carlo_volume(bounds, n_samples, shape, rng)