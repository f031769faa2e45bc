"""Boxes, hyperspheres and the volumes used by the Monte Carlo estimator."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class Bounds:
    """The closed interval one coordinate of a sampling box may take."""

    min: float
    max: float

    def width(self) -> float:
        """Length of the interval."""
        return self.max - self.min


def cube_bounds(k: int, low: float = -2.0, high: float = 2.0) -> tuple[Bounds, ...]:
    """Bounds of a k-dimensional cube whose every side spans ``[low, high]``."""
    if k < 1:
        raise ValueError(f"dimension must be at least 1, got {k}")
    return tuple(Bounds(low, high) for _ in range(k))


def hypercube_volume(bounds: Iterable[Bounds]) -> float:
    """Volume of the box described by ``bounds``."""
    return math.prod((b.width() for b in bounds), start=1.0)


def is_inside_hypersphere(point: Sequence[float], radius: float) -> bool:
    """True if ``point`` lies in the hypersphere of ``radius`` centred at the origin."""
    return sum(x * x for x in point) <= radius * radius


def unit_hypersphere(point: Sequence[float]) -> bool:
    """Membership test for the hypersphere of radius 1 centred at the origin."""
    return is_inside_hypersphere(point, 1.0)


def hypersphere_volume(k: int, radius: float = 1.0) -> float:
    """Exact volume of a k-dimensional hypersphere."""
    if k < 0:
        raise ValueError(f"dimension must not be negative, got {k}")
    return math.pi ** (k / 2.0) / math.gamma(k / 2.0 + 1.0) * radius**k