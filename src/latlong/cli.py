"""
latlong CLI entrypoint.

Quick distance/bearing/position calculations from the shell. Coordinates accept signed
decimal degrees or d/m/s text with a compass letter (`51°28'39"N`, `0002741W`).
All arithmetic is delegated to `latlong.core.navigation`.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Any

from pydantic import BaseModel

from latlong.config.settings import Settings, get_settings
from latlong.core.dms import as_degrees, bearing_radians, format_bearing, format_signed_dms, to_precision
from latlong.core.logging import configure_logging
from latlong.core.navigation import (
    along_track_distance,
    bearing_rhumb,
    destination_point,
    destination_point_rhumb,
    distance_cosine_law,
    distance_haversine,
    distance_rhumb,
    final_bearing,
    initial_bearing,
    midpoint,
)
from latlong.core.point import LatLong
from latlong.domain.models import (
    AlongTrackResult,
    BearingResult,
    DistanceResult,
    PointResult,
)

logger = logging.getLogger(__name__)


def _point(lat: str, lon: str) -> LatLong:
    """Build a point from CLI text, resolving each value into the tagged degree input once."""
    point = LatLong.from_input(as_degrees(lat), as_degrees(lon))
    if not point.is_finite():
        logger.warning("Could not parse coordinate %r, %r", lat, lon)
    return point


def _print_json(model: BaseModel) -> None:
    print(json.dumps(model.model_dump(mode="json"), ensure_ascii=False, indent=2))


def _undefined(what: str) -> int:
    print(f"{what} is undefined for these inputs", file=sys.stderr)
    return 1


def _format_km(km: float, settings: Settings) -> str:
    return f"{to_precision(km, settings.display.significant_figures)} km"


def _cmd_distance(args: argparse.Namespace) -> int:
    settings = get_settings()
    p1 = _point(args.lat1, args.lon1)
    p2 = _point(args.lat2, args.lon2)

    if args.method == "haversine":
        radius = settings.earth.haversine_radius_km
        km = distance_haversine(p1, p2, radius_km=radius)
    elif args.method == "cosine":
        radius = settings.earth.mean_radius_km
        km = distance_cosine_law(p1, p2, radius_km=radius)
    else:
        radius = settings.earth.mean_radius_km
        km = distance_rhumb(p1, p2, radius_km=radius)

    result = DistanceResult.from_km(args.method, km, radius)
    if args.json:
        _print_json(result)
    if result.km is None:
        return _undefined("Distance")
    if not args.json:
        print(_format_km(km, settings))
    return 0


def _cmd_bearing(args: argparse.Namespace) -> int:
    p1 = _point(args.lat1, args.lon1)
    p2 = _point(args.lat2, args.lon2)
    if args.rhumb:
        result = BearingResult.from_radians("rhumb", bearing_rhumb(p1, p2))
    else:
        result = BearingResult.from_radians("initial", initial_bearing(p1, p2))

    if args.json:
        _print_json(result)
    if result.radians is None:
        return _undefined("Bearing")
    if not args.json:
        print(f"{result.compass} ({result.radians:.6f} rad)")
    return 0


def _cmd_midpoint(args: argparse.Namespace) -> int:
    result = PointResult.from_point("midpoint", midpoint(_point(args.lat1, args.lon1), _point(args.lat2, args.lon2)))
    if args.json:
        _print_json(result)
    if result.point is None:
        return _undefined("Midpoint")
    if not args.json:
        print(f"{result.point.latitude}, {result.point.longitude}")
    return 0


def _cmd_destination(args: argparse.Namespace) -> int:
    settings = get_settings()
    origin = _point(args.lat, args.lon)
    bearing = as_degrees(args.bearing)
    radius = settings.earth.mean_radius_km

    if args.rhumb:
        dest = destination_point_rhumb(origin, bearing, args.distance_km, radius_km=radius)
        result = PointResult.from_point("rhumb_destination", dest)
    else:
        dest = destination_point(origin, bearing, args.distance_km, radius_km=radius)
        arrival = BearingResult.from_radians(
            "final", final_bearing(origin, bearing, args.distance_km, radius_km=radius)
        )
        result = PointResult.from_point("destination", dest, final_bearing=arrival)

    if args.json:
        _print_json(result)
    if result.point is None:
        return _undefined("Destination")
    if not args.json:
        print(f"{result.point.latitude}, {result.point.longitude}")
        if result.final_bearing is not None and result.final_bearing.compass is not None:
            print(f"final bearing: {result.final_bearing.compass}")
    return 0


def _cmd_along_track(args: argparse.Namespace) -> int:
    settings = get_settings()
    point = _point(args.lat, args.lon)
    origin = _point(args.origin_lat, args.origin_lon)
    direction = as_degrees(args.direction)
    radius = settings.earth.haversine_radius_km

    km = along_track_distance(point, origin, bearing_radians(direction), radius_km=radius)
    result = AlongTrackResult.from_km(km, radius)
    if args.json:
        _print_json(result)
    if result.km is None:
        return _undefined("Along-track distance")
    if not args.json:
        print(_format_km(km, settings))
    return 0


def _cmd_dms(args: argparse.Namespace) -> int:
    if args.bearing:
        print(format_bearing(args.radians))
    else:
        print(format_signed_dms(args.radians))
    return 0


def _add_pair(p: argparse.ArgumentParser) -> None:
    p.add_argument("lat1", help="Latitude of the first point (e.g. 51.4775 or 51°28'39\"N)")
    p.add_argument("lon1", help="Longitude of the first point (e.g. -0.4614 or 0002741W)")
    p.add_argument("lat2", help="Latitude of the second point")
    p.add_argument("lon2", help="Longitude of the second point")
    p.add_argument("--json", action="store_true", help="Output machine-readable JSON")


def build_parser() -> argparse.ArgumentParser:
    """Build the argparse parser for the latlong CLI."""
    parser = argparse.ArgumentParser(prog="latlong")
    parser.add_argument("--log-level", default=None, help="Override LATLONG_LOG_LEVEL / settings")
    sub = parser.add_subparsers(dest="command", required=True)

    dist = sub.add_parser("distance", help="Distance in km between two points.")
    _add_pair(dist)
    dist.add_argument("--method", choices=["haversine", "cosine", "rhumb"], default="haversine")
    dist.set_defaults(func=_cmd_distance)

    brg = sub.add_parser("bearing", help="Initial great-circle (or rhumb-line) bearing from point 1 to point 2.")
    _add_pair(brg)
    brg.add_argument("--rhumb", action="store_true", help="Constant (rhumb-line) bearing instead")
    brg.set_defaults(func=_cmd_bearing)

    mid = sub.add_parser("midpoint", help="Great-circle midpoint of two points.")
    _add_pair(mid)
    mid.set_defaults(func=_cmd_midpoint)

    dst = sub.add_parser("destination", help="Destination from a start point, bearing and distance.")
    dst.add_argument("lat")
    dst.add_argument("lon")
    dst.add_argument("bearing", help="Degrees clockwise from north (e.g. 45 or 45°30')")
    dst.add_argument("distance_km", type=float)
    dst.add_argument("--rhumb", action="store_true", help="Travel on a constant bearing")
    dst.add_argument("--json", action="store_true", help="Output machine-readable JSON")
    dst.set_defaults(func=_cmd_destination)

    at = sub.add_parser(
        "along-track",
        help="Distance of a point along a heading from an origin (planar; short range only).",
    )
    at.add_argument("lat")
    at.add_argument("lon")
    at.add_argument("origin_lat")
    at.add_argument("origin_lon")
    at.add_argument("direction", help="Heading from the origin in degrees")
    at.add_argument("--json", action="store_true", help="Output machine-readable JSON")
    at.set_defaults(func=_cmd_along_track)

    dms = sub.add_parser("dms", help="Format radians as degrees/minutes/seconds.")
    dms.add_argument("radians", type=float)
    dms.add_argument("--bearing", action="store_true", help="Normalize into 0°..360° first")
    dms.set_defaults(func=_cmd_dms)
    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint callable used by `python -m latlong.cli`."""
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level)
    func: Any = getattr(args, "func")
    return int(func(args))


if __name__ == "__main__":
    raise SystemExit(main())
