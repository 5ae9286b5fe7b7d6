"""
Spherical navigation: great-circle and rhumb-line formulas.

Every function is pure and works on `LatLong` points (radians). Distances are in
kilometres against a mean Earth radius.

Error model:
- Invalid input (NaN coordinates) or degenerate geometry produces NaN, never an exception.
- Functions that build a point return `None` instead of a point with NaN fields.

Two radius constants are in use, as in the formulas this module was built from:
the Haversine distance uses 6378.137 km, everything else 6371 km. Pass `radius_km`
(or set `earth` in settings) to pick one radius for everything.

References: Ed Williams' Aviation Formulary; R. W. Sinnott, "Virtues of the
Haversine", Sky and Telescope 68(2), 1984.
"""

from __future__ import annotations

import logging
import math

from latlong.core.dms import Degrees, bearing_radians
from latlong.core.point import LatLong

logger = logging.getLogger(__name__)

HAVERSINE_RADIUS_KM = 6378.137
MEAN_RADIUS_KM = 6371.0

_TWO_PI = 2 * math.pi
# Below this the midpoint vector sum has no direction (antipodal inputs).
_DEGENERATE_NORM = 1e-12


def _acos(x: float) -> float:
    return math.acos(x) if -1.0 <= x <= 1.0 else math.nan


def _asin(x: float) -> float:
    return math.asin(x) if -1.0 <= x <= 1.0 else math.nan


def _sqrt(x: float) -> float:
    return math.sqrt(x) if x >= 0 else math.nan


def _wrap_longitude(lon: float) -> float:
    """Normalize a longitude into (-pi, pi]."""
    wrapped = math.pi - (math.pi - lon) % _TWO_PI
    # A tiny negative remainder can round up to 2*pi.
    return wrapped if wrapped > -math.pi else wrapped + _TWO_PI


def _point_or_none(lat: float, lon: float, *, what: str) -> LatLong | None:
    point = LatLong(lat, lon)
    if not point.is_finite():
        logger.debug("%s is undefined (lat=%s lon=%s)", what, lat, lon)
        return None
    return point


def _can_travel(origin: LatLong, brng: float, d: float) -> bool:
    if origin.is_finite() and math.isfinite(brng) and math.isfinite(d):
        return True
    logger.debug("Cannot travel from %s on bearing=%s angular distance=%s", origin, brng, d)
    return False


def _stretched_lat_delta(lat1: float, lat2: float) -> float:
    """Difference of Mercator-stretched latitudes, ln(tan(pi/4 + lat2/2) / tan(pi/4 + lat1/2)).

    Follows IEEE semantics where `math` would raise: x/0 is infinite, log(0) is -inf,
    log of a negative ratio is NaN.
    """
    top = math.tan(lat2 / 2 + math.pi / 4)
    bottom = math.tan(lat1 / 2 + math.pi / 4)
    if bottom == 0:
        if top == 0 or math.isnan(top):
            return math.nan
        ratio = math.copysign(math.inf, top)
    else:
        ratio = top / bottom
    if math.isnan(ratio) or ratio < 0:
        return math.nan
    if ratio == 0:
        return -math.inf
    return math.log(ratio)


def _rhumb_q(dlat: float, dphi: float, lat1: float) -> float:
    # dlat/dphi, falling back to cos(lat1) on E-W lines where the ratio is 0/0.
    q = dlat / dphi if dphi != 0 else math.nan
    if not math.isfinite(q):
        q = math.cos(lat1)
    return q


def distance_haversine(p1: LatLong, p2: LatLong, *, radius_km: float = HAVERSINE_RADIUS_KM) -> float:
    """Great-circle distance in km using the Haversine formula."""
    dlat = p2.lat - p1.lat
    dlon = p2.lon - p1.lon

    a = math.sin(dlat / 2) ** 2 + math.cos(p1.lat) * math.cos(p2.lat) * math.sin(dlon / 2) ** 2
    c = 2 * math.atan2(_sqrt(a), _sqrt(1 - a))
    return radius_km * c


def distance_cosine_law(p1: LatLong, p2: LatLong, *, radius_km: float = MEAN_RADIUS_KM) -> float:
    """Great-circle distance in km using the spherical law of cosines.

    Ill-conditioned for points a few metres apart; rounding can push the cosine
    above 1, which yields NaN.
    """
    cos_c = math.sin(p1.lat) * math.sin(p2.lat) + math.cos(p1.lat) * math.cos(p2.lat) * math.cos(
        p2.lon - p1.lon
    )
    return _acos(cos_c) * radius_km


def initial_bearing(p1: LatLong, p2: LatLong) -> float:
    """Initial great-circle bearing from p1 to p2, in radians clockwise from north (-pi..pi)."""
    dlon = p2.lon - p1.lon
    y = math.sin(dlon) * math.cos(p2.lat)
    x = math.cos(p1.lat) * math.sin(p2.lat) - math.sin(p1.lat) * math.cos(p2.lat) * math.cos(dlon)
    return math.atan2(y, x)


def along_track_distance(
    point: LatLong,
    origin: LatLong,
    direction: float,
    *,
    radius_km: float = HAVERSINE_RADIUS_KM,
) -> float:
    """Distance of `point` along the vector from `origin` heading `direction` (radians).

    Planar projection of a spherical distance: only meaningful over short ranges.
    The angle is taken from the bearing of `point` back to `origin`, so a point lying
    ahead of the origin on `direction` comes out negative.
    """
    dist = distance_haversine(origin, point, radius_km=radius_km)
    brng = initial_bearing(point, origin)
    return dist * math.cos(brng - direction)


def midpoint(p1: LatLong, p2: LatLong) -> LatLong | None:
    """Midpoint of the great-circle segment between p1 and p2.

    Returns None when the midpoint is undefined (antipodal points or NaN input).
    """
    dlon = p2.lon - p1.lon
    bx = math.cos(p2.lat) * math.cos(dlon)
    by = math.cos(p2.lat) * math.sin(dlon)
    x = math.cos(p1.lat) + bx
    z = math.sin(p1.lat) + math.sin(p2.lat)

    if math.sqrt(x * x + by * by + z * z) < _DEGENERATE_NORM:
        logger.debug("Midpoint of antipodal points %s and %s is undefined", p1, p2)
        return None

    lat3 = math.atan2(z, math.sqrt(x * x + by * by))
    lon3 = p1.lon + math.atan2(by, x)
    return _point_or_none(lat3, lon3, what="Midpoint")


def destination_point(
    origin: LatLong,
    bearing: Degrees,
    distance_km: float,
    *,
    radius_km: float = MEAN_RADIUS_KM,
) -> LatLong | None:
    """Point reached from `origin` after `distance_km` on initial `bearing` (degrees)."""
    d = float(distance_km) / radius_km
    brng = bearing_radians(bearing)
    if not _can_travel(origin, brng, d):
        return None

    lat2 = _asin(math.sin(origin.lat) * math.cos(d) + math.cos(origin.lat) * math.sin(d) * math.cos(brng))
    lon2 = origin.lon + math.atan2(
        math.sin(brng) * math.sin(d) * math.cos(origin.lat),
        math.cos(d) - math.sin(origin.lat) * math.sin(lat2),
    )
    return _point_or_none(lat2, _wrap_longitude(lon2), what="Destination point")


def final_bearing(
    origin: LatLong,
    bearing: Degrees,
    distance_km: float,
    *,
    radius_km: float = MEAN_RADIUS_KM,
) -> float:
    """Bearing on arrival after travelling `distance_km` from `origin` on initial `bearing`."""
    dest = destination_point(origin, bearing, distance_km, radius_km=radius_km)
    if dest is None:
        return math.nan
    # Reverse bearing from the destination back to the origin, turned around.
    return (initial_bearing(dest, origin) + math.pi) % _TWO_PI


def distance_rhumb(p1: LatLong, p2: LatLong, *, radius_km: float = MEAN_RADIUS_KM) -> float:
    """Rhumb-line (constant bearing) distance in km."""
    dlat = p2.lat - p1.lat
    dlon = abs(p2.lon - p1.lon)
    dphi = _stretched_lat_delta(p1.lat, p2.lat)
    q = _rhumb_q(dlat, dphi, p1.lat)
    # Over 180 degrees of longitude, take the shorter line across the antimeridian.
    if dlon > math.pi:
        dlon = _TWO_PI - dlon
    return math.sqrt(dlat * dlat + q * q * dlon * dlon) * radius_km


def bearing_rhumb(p1: LatLong, p2: LatLong) -> float:
    """Constant rhumb-line bearing from p1 to p2, in radians."""
    dlon = p2.lon - p1.lon
    dphi = _stretched_lat_delta(p1.lat, p2.lat)
    if abs(dlon) > math.pi:
        dlon = -(_TWO_PI - dlon) if dlon > 0 else _TWO_PI + dlon
    return math.atan2(dlon, dphi)


def destination_point_rhumb(
    origin: LatLong,
    bearing: Degrees,
    distance_km: float,
    *,
    radius_km: float = MEAN_RADIUS_KM,
) -> LatLong | None:
    """Point reached from `origin` after `distance_km` along a rhumb line on `bearing` (degrees)."""
    d = float(distance_km) / radius_km
    brng = bearing_radians(bearing)
    if not _can_travel(origin, brng, d):
        return None

    lat2 = origin.lat + d * math.cos(brng)
    dphi = _stretched_lat_delta(origin.lat, lat2)
    q = _rhumb_q(lat2 - origin.lat, dphi, origin.lat)
    dlon = d * math.sin(brng) / q if q != 0 else math.nan
    # Past a pole: fold into [-pi, pi) first, then reflect back onto the near side.
    lat2 = (lat2 + math.pi) % _TWO_PI - math.pi
    if abs(lat2) > math.pi / 2:
        lat2 = math.pi - lat2 if lat2 > 0 else -math.pi - lat2
    return _point_or_none(lat2, _wrap_longitude(origin.lon + dlon), what="Rhumb destination point")
