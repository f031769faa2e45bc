# hypervolume

Estimate the volume of shapes in any number of dimensions by Monte Carlo
sampling: draw random points inside an axis-aligned bounding box, count how
many fall inside the shape, and scale the box's volume by that fraction.

## Installation

```
pip install .
```

For the tests:

```
pip install ".[test]"
pytest
```

## Command line

```
hypervolume                          # unit hypersphere in 3 dimensions
hypervolume 5                        # unit hypersphere in 5 dimensions
hypervolume 4 --samples 1000000 --seed 7
hypervolume 3 --samples 1000000 --workers 4
```

The command samples the box `[-2, 2]^k` and prints the theoretical volume of
the unit `k`-sphere, the box volume, the sampling results (total points,
points inside, ratio, estimated volume) and the relative error of the
estimate. The report labels are in Italian.

Arguments:

- `k` — number of dimensions, default 3; must be at least 1.
- `--samples N` — number of random points, default 100,000,000; must be
  positive.
- `--seed S` — seed for the random generator; without it each run differs.
- `--workers W` — share the samples between `W` processes, each seeded with
  the seed plus its index.

With the default sample count a run takes a long time in pure Python; pass a
smaller `--samples` for a quick estimate.

## Library

```python
import random

from hypervolume.geometry import cube_bounds, unit_hypersphere, hypersphere_volume
from hypervolume.estimator import (
    monte_carlo_volume,
    parallel_monte_carlo_volume,
    convergence,
)

bounds = cube_bounds(3, -2.0, 2.0)

estimate = monte_carlo_volume(bounds, 1_000_000, unit_hypersphere, random.Random(42))
print(estimate.volume, "vs", hypersphere_volume(3, 1.0))

# Spread the work over several processes, each with its own seed.
estimate = parallel_monte_carlo_volume(bounds, 1_000_000, unit_hypersphere, workers=4, seed=1)

# Watch the estimate settle as the sample count grows.
for result in convergence(bounds, unit_hypersphere, [1_000, 10_000, 100_000], random.Random(0)):
    print(result.n_samples, result.volume)
```

### `hypervolume.geometry`

- `Bounds(min, max)` — the interval of one coordinate; `width()` gives its
  length.
- `cube_bounds(k, low=-2.0, high=2.0)` — bounds of a `k`-dimensional cube;
  raises `ValueError` for `k < 1`.
- `hypercube_volume(bounds)` — product of the widths.
- `is_inside_hypersphere(point, radius)` and `unit_hypersphere(point)` —
  membership tests for hyperspheres centred at the origin.
- `hypersphere_volume(k, radius=1.0)` — exact volume; raises `ValueError`
  for negative `k`.

### `hypervolume.estimator`

- `monte_carlo_volume(bounds, n_samples, shape, rng=None)` — one estimate
  drawn from `rng` (a fresh `random.Random` if omitted).
- `parallel_monte_carlo_volume(bounds, n_samples, shape, workers=None, seed=None)`
  — shares the samples between processes (by default one per CPU) and sums
  the counts. With more than one worker, `shape` must be picklable, so use a
  function defined at module level.
- `convergence(bounds, shape, sample_sizes=(1000, 10000, 100000, 1000000), rng=None)`
  — yields one estimate per sample size, all drawn from the same generator.
- `count_inside(bounds, n_samples, shape, seed=None)` and
  `random_point(bounds, rng)` — the building blocks of the above.

A non-positive sample count or worker count raises `ValueError`.

A shape is any callable that takes a sequence of coordinates and returns
whether the point lies inside it.

`Estimate` records `dimension`, `n_samples`, `inside` (the number of hits)
and `box_volume`, and gives the hit `ratio` and the estimated `volume`.

## Limits

The command only estimates the unit hypersphere; other shapes are reached
through the library by passing your own membership function.