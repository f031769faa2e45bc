import math

import pytest

from hypervolume.geometry import (
    Bounds,
    cube_bounds,
    hypercube_volume,
    hypersphere_volume,
    is_inside_hypersphere,
    unit_hypersphere,
)


def test_bounds_width():
    assert Bounds(-2.0, 2.0).width() == pytest.approx(4.0)


def test_cube_bounds_defaults():
    bounds = cube_bounds(3)
    assert len(bounds) == 3
    assert all(b == Bounds(-2.0, 2.0) for b in bounds)


def test_cube_bounds_custom_range():
    bounds = cube_bounds(2, 0.0, 1.0)
    assert bounds == (Bounds(0.0, 1.0), Bounds(0.0, 1.0))


@pytest.mark.parametrize("k", [0, -1])
def test_cube_bounds_rejects_bad_dimension(k):
    with pytest.raises(ValueError):
        cube_bounds(k)


def test_hypercube_volume_is_product_of_widths():
    bounds = [Bounds(0.0, 2.0), Bounds(-1.0, 2.0), Bounds(1.0, 1.5)]
    widths = [b.width() for b in bounds]
    assert hypercube_volume(bounds) == pytest.approx(widths[0] * widths[1] * widths[2])


def test_hypercube_volume_unit_cube():
    assert hypercube_volume(cube_bounds(5, 0.0, 1.0)) == pytest.approx(1.0)


def test_hypercube_volume_empty_is_one():
    assert hypercube_volume([]) == 1.0


def test_point_on_sphere_surface_is_inside():
    assert is_inside_hypersphere((1.0, 0.0, 0.0), 1.0) is True


def test_point_outside_sphere():
    assert is_inside_hypersphere((1.0, 1.0, 0.0), 1.0) is False


def test_radius_scales_membership():
    assert is_inside_hypersphere((1.0, 1.0), 2.0) is True
    assert is_inside_hypersphere((2.0, 1.0), 2.0) is False


def test_unit_hypersphere_matches_radius_one():
    for point in [(0.5, 0.5), (0.9, 0.5), (0.0, 0.0, 1.0), (0.7, 0.7, 0.2)]:
        assert unit_hypersphere(point) == is_inside_hypersphere(point, 1.0)


def test_hypersphere_volume_two_dimensions_is_pi():
    assert hypersphere_volume(2) == pytest.approx(math.pi)


def test_hypersphere_volume_three_dimensions():
    assert hypersphere_volume(3) == pytest.approx(4.0 / 3.0 * math.pi)


def test_hypersphere_volume_scales_with_radius_power():
    for k in range(1, 7):
        assert hypersphere_volume(k, 2.0) == pytest.approx(hypersphere_volume(k) * 2.0**k)


def test_hypersphere_volume_fits_inside_cube():
    for k in range(1, 10):
        assert hypersphere_volume(k) <= hypercube_volume(cube_bounds(k, -1.0, 1.0))


def test_hypersphere_volume_rejects_negative_dimension():
    with pytest.raises(ValueError):
        hypersphere_volume(-1)