import math

import pytest

from latlong.core.dms import NumericDegrees, TextDegrees
from latlong.core.navigation import (
    MEAN_RADIUS_KM,
    bearing_rhumb,
    destination_point_rhumb,
    distance_haversine,
    distance_rhumb,
)
from latlong.core.point import LatLong

ONE_DEGREE_KM = MEAN_RADIUS_KM * math.pi / 180


def test_rhumb_distance_along_equator_uses_cosine_fallback():
    d = distance_rhumb(LatLong.from_degrees(0, 0), LatLong.from_degrees(0, 1))
    assert d == pytest.approx(ONE_DEGREE_KM)


def test_rhumb_distance_along_parallel():
    # Due east at 60N: the departure shrinks by cos(60) = 0.5.
    d = distance_rhumb(LatLong.from_degrees(60, 0), LatLong.from_degrees(60, 10))
    assert d == pytest.approx(10 * ONE_DEGREE_KM * 0.5)


def test_rhumb_distance_along_meridian():
    d = distance_rhumb(LatLong.from_degrees(10, 5), LatLong.from_degrees(30, 5))
    assert d == pytest.approx(20 * ONE_DEGREE_KM)


def test_rhumb_distance_takes_short_way_across_antimeridian():
    d = distance_rhumb(LatLong.from_degrees(0, 179), LatLong.from_degrees(0, -179))
    assert d == pytest.approx(2 * ONE_DEGREE_KM)


def test_rhumb_is_never_shorter_than_great_circle():
    a = LatLong.from_degrees(51.5, -0.12)
    b = LatLong.from_degrees(40.7, -74.0)
    assert distance_rhumb(a, b) >= distance_haversine(a, b, radius_km=MEAN_RADIUS_KM)


def test_rhumb_bearing_cardinal_directions():
    origin = LatLong.from_degrees(0, 0)
    assert bearing_rhumb(origin, LatLong.from_degrees(0, 1)) == pytest.approx(math.pi / 2)
    assert bearing_rhumb(origin, LatLong.from_degrees(1, 0)) == pytest.approx(0.0)
    assert bearing_rhumb(origin, LatLong.from_degrees(0, -1)) == pytest.approx(-math.pi / 2)


def test_rhumb_bearing_across_antimeridian_goes_east():
    b = bearing_rhumb(LatLong.from_degrees(0, 179), LatLong.from_degrees(0, -179))
    assert b == pytest.approx(math.pi / 2)
    b = bearing_rhumb(LatLong.from_degrees(0, -179), LatLong.from_degrees(0, 179))
    assert b == pytest.approx(-math.pi / 2)


def test_rhumb_destination_matches_distance_and_bearing():
    origin = LatLong.from_degrees(50.0, -5.0)
    dest = destination_point_rhumb(origin, NumericDegrees(60), 500.0)
    assert dest is not None
    assert distance_rhumb(origin, dest) == pytest.approx(500.0, rel=1e-9)
    assert bearing_rhumb(origin, dest) == pytest.approx(math.radians(60), abs=1e-9)


def test_rhumb_destination_accepts_text_bearing():
    origin = LatLong.from_degrees(50.0, -5.0)
    numeric = destination_point_rhumb(origin, NumericDegrees(60.5), 200.0)
    text = destination_point_rhumb(origin, TextDegrees("60 30"), 200.0)
    assert numeric is not None and text is not None
    assert text.lat == pytest.approx(numeric.lat)
    assert text.lon == pytest.approx(numeric.lon)


def test_rhumb_destination_wraps_longitude():
    dest = destination_point_rhumb(LatLong.from_degrees(0, 179), NumericDegrees(90), 2 * ONE_DEGREE_KM)
    assert dest is not None
    assert dest.lon_deg == pytest.approx(-179.0)
    assert -math.pi < dest.lon <= math.pi


def test_rhumb_destination_reflects_past_the_pole():
    # 20 degrees due north from 80N overshoots the pole by 10 degrees.
    dest = destination_point_rhumb(LatLong.from_degrees(80, 0), NumericDegrees(0), 20 * ONE_DEGREE_KM)
    assert dest is not None
    assert abs(dest.lat) <= math.pi / 2
    assert dest.lat_deg == pytest.approx(80.0)
    assert -math.pi < dest.lon <= math.pi

    dest = destination_point_rhumb(LatLong.from_degrees(-85, 10), NumericDegrees(180), 10 * ONE_DEGREE_KM)
    assert dest is not None
    assert abs(dest.lat) <= math.pi / 2
    assert dest.lat_deg == pytest.approx(-85.0)


@pytest.mark.parametrize("start_lon", [-179.9, -90.0, 0.0, 90.0, 179.9])
@pytest.mark.parametrize("bearing", [45, 90, 135, 225, 270, 315])
def test_rhumb_destination_longitude_always_normalized(start_lon, bearing):
    dest = destination_point_rhumb(LatLong.from_degrees(30, start_lon), NumericDegrees(bearing), 3000.0)
    assert dest is not None
    assert -math.pi < dest.lon <= math.pi
    assert abs(dest.lat) <= math.pi / 2


def test_rhumb_destination_invalid_origin_is_none():
    assert destination_point_rhumb(LatLong.parse("12.34Q", "0"), NumericDegrees(90), 10) is None


def test_rhumb_destination_folds_large_pole_overshoot():
    # Five radians due north from the equator: past the north pole and beyond the south one.
    dest = destination_point_rhumb(LatLong.from_degrees(0, 0), NumericDegrees(0), 5 * MEAN_RADIUS_KM)
    assert dest is not None
    assert abs(dest.lat) <= math.pi / 2
    assert dest.lat == pytest.approx(5 - 2 * math.pi)

    dest = destination_point_rhumb(LatLong.from_degrees(0, 0), NumericDegrees(180), 4 * MEAN_RADIUS_KM)
    assert dest is not None
    assert abs(dest.lat) <= math.pi / 2
