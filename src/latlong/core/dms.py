"""
Degree notation codec.

Human-entered coordinates come in many shapes: signed decimal degrees, `51°28'39"N`,
`51:28:39N`, or the fixed-width `0512839N`. This module turns them into radians and
formats radians back into degree/minute/second strings.

Failure model:
- Parsers never raise on malformed text; they return NaN and let callers test for it.
- Formatters accept NaN and render it rather than crashing.
"""

from __future__ import annotations

import logging
import math
import re
from dataclasses import dataclass

logger = logging.getLogger(__name__)

DEGREE = "°"
PRIME = "′"
DOUBLE_PRIME = "″"

# Whitespace, colon, comma and the degree/minute/second glyphs (both ASCII and typographic).
_SEPARATORS = re.compile(r"[\s:,°º′'″\"]")
_FLOAT_PREFIX = re.compile(r"\s*[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")
_COMPASS = "NSEW"

_HALF_ARC_SECOND_DEG = 1 / 7200


@dataclass(frozen=True)
class NumericDegrees:
    """Signed decimal degrees supplied as a number."""

    value: float


@dataclass(frozen=True)
class TextDegrees:
    """Degrees supplied as text (decimal or d/m/s notation)."""

    text: str


Degrees = NumericDegrees | TextDegrees


def as_degrees(value: float | str | Degrees) -> Degrees:
    """Resolve a raw CLI/API value into the tagged degree variant (done once, at the boundary)."""
    if isinstance(value, (NumericDegrees, TextDegrees)):
        return value
    if isinstance(value, str):
        return TextDegrees(value)
    return NumericDegrees(float(value))


def _number(text: str) -> float:
    # Whole-string numeric conversion; blank counts as zero, garbage as NaN.
    s = text.strip()
    if not s:
        return 0.0
    if "_" in s:
        # float() accepts digit grouping underscores; degree text never does.
        return math.nan
    token = s.lstrip("+-")
    if token[:1].isalpha() and token != "Infinity":
        # float() also takes "inf", "nan" and "infinity" in any case.
        return math.nan
    try:
        return float(s)
    except ValueError:
        return math.nan


def _float_prefix(text: str) -> float:
    m = _FLOAT_PREFIX.match(text)
    if not m:
        return math.nan
    return float(m.group(0))


def _dms_parts_to_degrees(parts: list[str]) -> float:
    if len(parts) == 3:
        return _number(parts[0]) + _number(parts[1]) / 60 + _number(parts[2]) / 3600
    return _number(parts[0]) + _number(parts[1]) / 60


def parse_coordinate(text: str) -> float:
    """Parse a latitude/longitude string into radians.

    Accepts signed decimal degrees, or degrees/minutes/seconds suffixed by a compass
    letter (N/S/E/W), e.g. `51°28'39"N`, `51 28N`, `0002741W`. Seconds and minutes may
    be omitted. Minimal validation is done: anything unreadable yields NaN.
    """
    decimal = _number(text)
    if not math.isnan(decimal):
        return math.radians(decimal)

    s = text.rstrip()
    direction = s[-1:].upper()
    if not direction or direction not in _COMPASS:
        logger.debug("Coordinate %r has no compass direction suffix", text)
        return math.nan
    body = s[:-1]

    parts = _SEPARATORS.split(body)
    if parts[-1] == "":
        parts.pop()

    if len(parts) in (2, 3):
        deg = _dms_parts_to_degrees(parts)
    elif len(parts) == 1:
        # Unseparated dddmmss; N/S degrees only need two digits.
        if direction in "NS":
            body = "0" + body
        deg = _number(body[0:3]) + _number(body[3:5]) / 60 + _number(body[5:]) / 3600
    else:
        logger.debug("Coordinate %r split into %d parts; expected 1-3", text, len(parts))
        return math.nan

    if direction in "WS":
        deg = -deg
    return math.radians(deg)


def parse_bearing(text: str) -> float:
    """Parse a bearing (0-360 degrees, no compass suffix) into radians.

    Accepts d/m/s, d/m or decimal degrees. Unlike `parse_coordinate` there is no
    hemisphere letter and no sign flip.
    """
    parts = _SEPARATORS.split(text)
    if len(parts) in (2, 3):
        deg = _dms_parts_to_degrees(parts)
    else:
        deg = _float_prefix(text)
    if math.isnan(deg):
        logger.debug("Bearing %r is not a number", text)
    return math.radians(deg)


def coordinate_radians(value: Degrees) -> float:
    if isinstance(value, NumericDegrees):
        return math.radians(value.value)
    return parse_coordinate(value.text)


def bearing_radians(value: Degrees) -> float:
    if isinstance(value, NumericDegrees):
        return math.radians(value.value)
    return parse_bearing(value.text)


def format_dms(rad: float) -> str:
    """Render |rad| as zero-padded `DDD°MM′SS″` with no sign or compass letter."""
    if not math.isfinite(rad):
        return f"NaN{DEGREE}NaN{PRIME}NaN{DOUBLE_PRIME}"
    d = abs(math.degrees(rad)) + _HALF_ARC_SECOND_DEG
    deg = math.floor(d)
    minutes = math.floor((d - deg) * 60)
    seconds = math.floor((d - deg - minutes / 60) * 3600)
    return f"{deg:03d}{DEGREE}{minutes:02d}{PRIME}{seconds:02d}{DOUBLE_PRIME}"


def format_signed_dms(rad: float) -> str:
    """Radians to signed d/m/s, e.g. -0.1 rad -> `-005°43′46″`."""
    return ("-" if rad < 0 else "") + format_dms(rad)


def format_bearing(rad: float) -> str:
    """Radians to a compass bearing in 0°..360° rather than +/-."""
    return format_signed_dms(rad % (2 * math.pi))


def format_latitude(rad: float) -> str:
    return format_dms(rad)[1:] + ("S" if rad < 0 else "N")


def format_longitude(rad: float) -> str:
    return format_dms(rad) + ("E" if rad > 0 else "W")


def to_precision(value: float, figures: int) -> float:
    """Round to `figures` significant figures, keeping plain (non-exponential) floats.

    Used for display only (e.g. 4 significant figures for a Haversine distance).
    """
    if value == 0 or not math.isfinite(value):
        return value
    scale = math.ceil(math.log10(abs(value)))
    mult = 10.0 ** (figures - scale)
    return math.floor(value * mult + 0.5) / mult
