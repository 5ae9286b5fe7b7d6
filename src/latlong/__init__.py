"""Spherical-Earth point arithmetic: distances, bearings, midpoints, destinations, DMS text."""

from latlong.core.dms import (
    Degrees,
    NumericDegrees,
    TextDegrees,
    as_degrees,
    format_bearing,
    format_dms,
    format_latitude,
    format_longitude,
    format_signed_dms,
    parse_bearing,
    parse_coordinate,
    to_precision,
)
from latlong.core.navigation import (
    HAVERSINE_RADIUS_KM,
    MEAN_RADIUS_KM,
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

__all__ = [
    "LatLong",
    "Degrees",
    "NumericDegrees",
    "TextDegrees",
    "as_degrees",
    "parse_coordinate",
    "parse_bearing",
    "format_dms",
    "format_signed_dms",
    "format_bearing",
    "format_latitude",
    "format_longitude",
    "to_precision",
    "HAVERSINE_RADIUS_KM",
    "MEAN_RADIUS_KM",
    "distance_haversine",
    "distance_cosine_law",
    "distance_rhumb",
    "initial_bearing",
    "final_bearing",
    "bearing_rhumb",
    "midpoint",
    "destination_point",
    "destination_point_rhumb",
    "along_track_distance",
]
