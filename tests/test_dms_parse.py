import math

import pytest

from latlong.core.dms import (
    NumericDegrees,
    TextDegrees,
    as_degrees,
    bearing_radians,
    coordinate_radians,
    parse_bearing,
    parse_coordinate,
)

GREENWICH_LAT_DEG = 51 + 28 / 60 + 39 / 3600


def test_parse_coordinate_separated_and_unseparated_forms_agree():
    separated = parse_coordinate("51°28'39\"N")
    unseparated = parse_coordinate("512839N")
    assert separated == pytest.approx(math.radians(GREENWICH_LAT_DEG))
    assert unseparated == pytest.approx(separated)


def test_parse_coordinate_other_separators():
    expected = math.radians(GREENWICH_LAT_DEG)
    assert parse_coordinate("51:28:39N") == pytest.approx(expected)
    assert parse_coordinate("51,28,39n") == pytest.approx(expected)
    assert parse_coordinate("51º28′39″N") == pytest.approx(expected)
    assert parse_coordinate("51 28 39N  ") == pytest.approx(expected)


def test_parse_coordinate_degrees_and_minutes_only():
    assert parse_coordinate("51°28'N") == pytest.approx(math.radians(51 + 28 / 60))


def test_parse_coordinate_south_and_west_are_negative():
    assert parse_coordinate("51°28'39\"S") == pytest.approx(-math.radians(GREENWICH_LAT_DEG))
    # Longitudes keep three degree digits without padding.
    assert parse_coordinate("0002741W") == pytest.approx(-math.radians(27 / 60 + 41 / 3600))
    assert parse_coordinate("1234530E") == pytest.approx(math.radians(123 + 45 / 60 + 30 / 3600))


def test_parse_coordinate_accepts_signed_decimal_text():
    assert parse_coordinate("53.123") == pytest.approx(math.radians(53.123))
    assert parse_coordinate("-1.987") == pytest.approx(math.radians(-1.987))


def test_parse_coordinate_invalid_compass_letter_is_nan():
    assert math.isnan(parse_coordinate("12.34Q"))
    assert math.isnan(parse_coordinate("51°28'39\""))


def test_parse_coordinate_too_many_parts_is_nan():
    assert math.isnan(parse_coordinate("1:2:3:4N"))


def test_parse_coordinate_non_numeric_part_is_nan():
    assert math.isnan(parse_coordinate("ab:cdN"))


def test_parse_bearing_forms():
    assert parse_bearing("90") == pytest.approx(math.pi / 2)
    assert parse_bearing("45 30") == pytest.approx(math.radians(45.5))
    assert parse_bearing("45°30'") == pytest.approx(math.radians(45.5))
    assert parse_bearing("45:30:36") == pytest.approx(math.radians(45.51))
    assert parse_bearing("270.5deg") == pytest.approx(math.radians(270.5))


def test_parse_bearing_has_no_compass_semantics():
    # No sign flip and no suffix consumption: "W" is just trailing garbage.
    assert parse_bearing("90W") == pytest.approx(math.pi / 2)
    assert math.isnan(parse_bearing("north"))


def test_as_degrees_resolves_variant_once():
    assert as_degrees(12.5) == NumericDegrees(12.5)
    assert as_degrees(3) == NumericDegrees(3.0)
    assert as_degrees("512839N") == TextDegrees("512839N")
    variant = TextDegrees("10")
    assert as_degrees(variant) is variant


def test_variant_dispatch():
    assert coordinate_radians(NumericDegrees(-45)) == pytest.approx(-math.pi / 4)
    assert coordinate_radians(TextDegrees("45°0'0\"S")) == pytest.approx(-math.pi / 4)
    assert bearing_radians(NumericDegrees(180)) == pytest.approx(math.pi)
    assert bearing_radians(TextDegrees("180")) == pytest.approx(math.pi)


@pytest.mark.parametrize("text", ["inf", "-inf", "infinity", "+infinity", "INF", "nan"])
def test_parse_coordinate_rejects_float_special_words(text):
    assert math.isnan(parse_coordinate(text))


def test_parse_coordinate_exact_infinity_spelling_stays_numeric():
    assert parse_coordinate("-Infinity") == -math.inf
