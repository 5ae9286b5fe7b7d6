"""
Coordinate model.

`LatLong` is an immutable point on a spherical Earth. Angles are stored in radians
because every navigation formula works in radians; degree input is converted once
at construction.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from latlong.core.dms import (
    Degrees,
    NumericDegrees,
    TextDegrees,
    coordinate_radians,
    format_latitude,
    format_longitude,
)


@dataclass(frozen=True)
class LatLong:
    """A latitude/longitude pair in radians (lat 0 = equator, lon east positive)."""

    lat: float
    lon: float

    @classmethod
    def from_input(cls, lat: Degrees, lon: Degrees) -> "LatLong":
        """Build a point from two degree inputs (numeric or d/m/s text)."""
        return cls(coordinate_radians(lat), coordinate_radians(lon))

    @classmethod
    def from_degrees(cls, lat: float, lon: float) -> "LatLong":
        return cls.from_input(NumericDegrees(lat), NumericDegrees(lon))

    @classmethod
    def parse(cls, lat: str, lon: str) -> "LatLong":
        """Parse text coordinates, e.g. `LatLong.parse("512839N", "0002741W")`."""
        return cls.from_input(TextDegrees(lat), TextDegrees(lon))

    @property
    def lat_deg(self) -> float:
        return math.degrees(self.lat)

    @property
    def lon_deg(self) -> float:
        return math.degrees(self.lon)

    def is_finite(self) -> bool:
        return math.isfinite(self.lat) and math.isfinite(self.lon)

    def latitude(self) -> str:
        """Latitude as degrees, minutes, seconds, e.g. `51°28′38″N`."""
        return format_latitude(self.lat)

    def longitude(self) -> str:
        """Longitude as degrees, minutes, seconds, e.g. `000°27′41″W`."""
        return format_longitude(self.lon)

    def __str__(self) -> str:
        return f"{self.latitude()}, {self.longitude()}"
