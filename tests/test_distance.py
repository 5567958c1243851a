import math

import pytest

from src.geo.distance import distance_km, distance_meters, distance_between, deg2rad, rad2deg
from src.models.geo import GeoCoordinate

NTU = (1.346479, 103.683478)
ORCHARD = (1.304833, 103.831833)


def test_identical_points_are_zero():
    for lat, lon in [(0.0, 0.0), (1.346479, 103.683478), (-33.8688, 151.2093), (90.0, 0.0), (-90.0, 180.0)]:
        assert distance_km(lat, lon, lat, lon) == 0.0
        assert distance_meters(lat, lon, lat, lon) == 0.0


def test_meters_is_thousand_times_km():
    pairs = [(NTU, ORCHARD), ((51.5074, -0.1278), (40.7128, -74.0060)), ((10.0, 20.0), (-10.0, -160.0))]
    for (lat1, lon1), (lat2, lon2) in pairs:
        assert distance_meters(lat1, lon1, lat2, lon2) == pytest.approx(1000 * distance_km(lat1, lon1, lat2, lon2))


def test_symmetric():
    assert distance_km(*NTU, *ORCHARD) == pytest.approx(distance_km(*ORCHARD, *NTU))
    assert distance_km(48.8566, 2.3522, -33.8688, 151.2093) == pytest.approx(distance_km(-33.8688, 151.2093, 48.8566, 2.3522))


def test_singapore_points_are_nearby():
    distance = distance_km(1.304833, 103.831833, 1.346479, 103.683478)
    assert 0 < distance < 20
    assert distance == pytest.approx(17.13, abs=0.05)


def test_antipodal_points_use_formula_half_circumference():
    expected = 180 * 60 * 1.1515 * 1609.344 / 1000
    assert distance_km(0.0, 0.0, 0.0, 180.0) == pytest.approx(expected)
    assert distance_km(45.0, 30.0, -45.0, -150.0) == pytest.approx(expected)


def test_rounding_overshoot_does_not_raise():
    # Nearly identical points push the cosine term past 1.0 in floating point
    for lat, lon in [(1.3, 103.8), (89.9999999, 0.0), (-45.123456789, 170.987654321)]:
        value = distance_km(lat, lon, lat, lon + 1e-12)
        assert isinstance(value, float)
        assert not math.isnan(value)


def test_degree_radian_helpers():
    assert deg2rad(180.0) == pytest.approx(math.pi)
    assert rad2deg(math.pi / 2) == pytest.approx(90.0)


def test_distance_between_coordinates():
    a = GeoCoordinate(latitude=NTU[0], longitude=NTU[1])
    b = GeoCoordinate(latitude=ORCHARD[0], longitude=ORCHARD[1])
    assert distance_between(a, b) == pytest.approx(distance_km(*NTU, *ORCHARD))
    assert distance_between(a, b, unit="m") == pytest.approx(distance_meters(*NTU, *ORCHARD))
    with pytest.raises(ValueError):
        distance_between(a, b, unit="miles")
