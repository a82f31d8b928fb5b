import math

import pytest

from flyconomy.geodesy import EARTH_RADIUS, SCALE_FACTOR, vincenty_distance, wgs84_to_xyz


def test_frankfurt_paris_distance():
    distance_km = vincenty_distance(50.033333, 8.570556, 49.012798, 2.55) / 1000.0
    assert abs(distance_km - 450.0) < 1.0


def test_distance_is_symmetric():
    there = vincenty_distance(37.7749, -122.4194, 34.0522, -118.2437)
    back = vincenty_distance(34.0522, -118.2437, 37.7749, -122.4194)
    assert there == pytest.approx(back, rel=1e-9)


def test_same_point_distance_is_zero():
    assert vincenty_distance(50.0, 8.0, 50.0, 8.0) == 0.0


def test_distance_satisfies_triangle_inequality():
    ab = vincenty_distance(50.0, 8.0, 49.0, 2.5)
    bc = vincenty_distance(49.0, 2.5, 40.6, -73.8)
    ac = vincenty_distance(50.0, 8.0, 40.6, -73.8)
    assert ac <= ab + bc


def test_origin_on_equator_maps_to_semi_major_axis():
    x, y, z = wgs84_to_xyz(0.0, 0.0, 0.0)
    assert x == pytest.approx(EARTH_RADIUS)
    assert y == pytest.approx(0.0, abs=1e-6)
    assert z == pytest.approx(0.0, abs=1e-6)


@pytest.mark.parametrize("lon", [-170.0, -45.0, 0.0, 30.0, 120.0])
def test_equator_points_lie_on_semi_major_circle(lon):
    point = wgs84_to_xyz(0.0, lon, 0.0)
    assert math.hypot(*point) == pytest.approx(EARTH_RADIUS)
    assert point[1] == pytest.approx(0.0, abs=1e-6)


def test_altitude_extends_radius_at_equator():
    point = wgs84_to_xyz(0.0, 10.0, 1000.0)
    assert math.hypot(*point) == pytest.approx(EARTH_RADIUS + 1000.0)


def test_north_pole_is_up_and_shorter():
    x, y, z = wgs84_to_xyz(90.0, 0.0, 0.0)
    assert abs(x) < 1e-6
    assert 0 < y < EARTH_RADIUS


def test_scaled_equator_point_lies_on_unit_sphere():
    point = wgs84_to_xyz(0.0, 45.0, 0.0)
    scaled = [coordinate * SCALE_FACTOR for coordinate in point]
    assert math.hypot(*scaled) == pytest.approx(1.0)