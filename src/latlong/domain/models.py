"""
Result views (Pydantic).

The navigation layer returns bare floats and `LatLong | None`. These models are the
machine-readable shape the CLI prints with `--json`: each value in radians, decimal
degrees and d/m/s text, with `None` standing in for an undefined result.
"""

from __future__ import annotations

import math
from typing import Literal

from pydantic import BaseModel

from latlong.core.dms import format_bearing
from latlong.core.point import LatLong


def _finite_or_none(value: float) -> float | None:
    return value if math.isfinite(value) else None


class PointView(BaseModel):
    """A point rendered for output."""

    lat_deg: float
    lon_deg: float
    lat_rad: float
    lon_rad: float
    latitude: str
    longitude: str

    @classmethod
    def from_point(cls, point: LatLong) -> "PointView":
        return cls(
            lat_deg=point.lat_deg,
            lon_deg=point.lon_deg,
            lat_rad=point.lat,
            lon_rad=point.lon,
            latitude=point.latitude(),
            longitude=point.longitude(),
        )


class DistanceResult(BaseModel):
    method: Literal["haversine", "cosine", "rhumb"]
    km: float | None
    radius_km: float

    @classmethod
    def from_km(cls, method: Literal["haversine", "cosine", "rhumb"], km: float, radius_km: float) -> "DistanceResult":
        return cls(method=method, km=_finite_or_none(km), radius_km=radius_km)


class BearingResult(BaseModel):
    method: Literal["initial", "final", "rhumb"]
    radians: float | None
    compass: str | None

    @classmethod
    def from_radians(cls, method: Literal["initial", "final", "rhumb"], value: float) -> "BearingResult":
        if not math.isfinite(value):
            return cls(method=method, radians=None, compass=None)
        return cls(method=method, radians=value, compass=format_bearing(value))


class PointResult(BaseModel):
    kind: Literal["midpoint", "destination", "rhumb_destination"]
    point: PointView | None
    final_bearing: BearingResult | None = None

    @classmethod
    def from_point(
        cls,
        kind: Literal["midpoint", "destination", "rhumb_destination"],
        point: LatLong | None,
        *,
        final_bearing: BearingResult | None = None,
    ) -> "PointResult":
        view = PointView.from_point(point) if point is not None else None
        return cls(kind=kind, point=view, final_bearing=final_bearing)


class AlongTrackResult(BaseModel):
    km: float | None
    radius_km: float

    @classmethod
    def from_km(cls, km: float, radius_km: float) -> "AlongTrackResult":
        return cls(km=_finite_or_none(km), radius_km=radius_km)
