"""
Property-based tests for coordinate conversion using Hypothesis.

Properties Verified:
1. DD/DDM Round-Trip: decimal degrees -> Coordinate -> DD or DDM fields is
   lossless up to float rounding
2. DMS Truncation Bound: reading back through whole seconds loses at most
   one arc second
3. Format Symmetry: convert A -> B -> A recovers the original signed value
4. Compact String Round-Trip: from_string(to_string(c)) == c
5. Hemisphere Sign Convention: negative values map to South/West
"""

import pytest
from hypothesis import example, given, strategies as st
from hypothesis.strategies import composite

from geocaching_toolkit.coordinate_converter import CoordinateConverter, signed_decimal_degrees
from geocaching_toolkit.coordinates import AngularFormat, Coordinate, Direction

ARC_SECOND = 1.0 / 3600.0

latitudes = st.floats(min_value=-90.0, max_value=90.0, allow_nan=False, allow_infinity=False)
longitudes = st.floats(min_value=-180.0, max_value=180.0, allow_nan=False, allow_infinity=False)
formats = st.sampled_from(list(AngularFormat))


@composite
def axis_value(draw) -> tuple[float, bool]:
    """Signed decimal degrees together with the axis it belongs to."""
    is_latitude = draw(st.booleans())
    value = draw(latitudes if is_latitude else longitudes)
    return value, is_latitude


@composite
def compact_coordinates(draw) -> Coordinate:
    """Arbitrary coordinates with non-negative integer fields."""
    magnitudes = st.floats(min_value=0.0, max_value=1e6, allow_nan=False, allow_infinity=False)
    return Coordinate(
        direction=draw(st.sampled_from(list(Direction))),
        degrees=draw(st.integers(min_value=0, max_value=180)),
        minutes=draw(st.integers(min_value=0, max_value=59)),
        seconds=draw(st.integers(min_value=0, max_value=59)),
        decimal_degrees=draw(magnitudes),
        decimal_minutes=draw(magnitudes),
    )


@given(axis_value(), st.sampled_from([AngularFormat.DD, AngularFormat.DDM]))
def test_dd_and_ddm_round_trip(value_and_axis, fmt: AngularFormat) -> None:
    """Property: signed degrees survive DD and DDM representations."""
    value, is_latitude = value_and_axis
    coordinate = Coordinate.from_decimal_degrees(value, is_latitude)

    assert signed_decimal_degrees(coordinate, fmt) == pytest.approx(value, abs=1e-9)


@given(axis_value())
def test_dms_round_trip_within_one_second(value_and_axis) -> None:
    """Property: whole-second truncation costs at most one arc second."""
    value, is_latitude = value_and_axis
    coordinate = Coordinate.from_decimal_degrees(value, is_latitude)

    assert abs(coordinate.to_decimal_degrees() - value) <= ARC_SECOND + 1e-9


@given(axis_value())
def test_fields_stay_in_canonical_ranges(value_and_axis) -> None:
    """Property: truncated minutes and seconds stay within 0-59."""
    value, is_latitude = value_and_axis
    coordinate = Coordinate.from_decimal_degrees(value, is_latitude)

    assert 0 <= coordinate.minutes <= 59
    assert 0 <= coordinate.seconds <= 59
    assert coordinate.decimal_degrees >= 0
    assert coordinate.decimal_minutes >= 0


@given(axis_value())
def test_sign_convention(value_and_axis) -> None:
    """Property: negative values are South/West, everything else North/East."""
    value, is_latitude = value_and_axis
    coordinate = Coordinate.from_decimal_degrees(value, is_latitude)

    assert coordinate.direction.is_latitude_axis is is_latitude
    assert coordinate.direction.is_negative is (value < 0)


@given(latitudes, longitudes, formats, formats)
@example(1.890625, 0.0, AngularFormat.DMS, AngularFormat.DMS)
@example(1.8905555555555556, 21.008333333333333, AngularFormat.DD, AngularFormat.DMS)
def test_format_symmetry(lat: float, lon: float, via: AngularFormat, back: AngularFormat) -> None:
    """Property: DD -> X -> Y recovers DD, within one arc second through DMS."""
    converter = CoordinateConverter()
    lat_c = Coordinate.from_decimal_degrees(lat, is_latitude=True)
    lon_c = Coordinate.from_decimal_degrees(lon, is_latitude=False)

    mid_lat, mid_lon = converter.convert(lat_c, lon_c, AngularFormat.DD, via)
    out_lat, out_lon = converter.convert(mid_lat, mid_lon, via, back)

    tolerance = ARC_SECOND + 1e-9 if AngularFormat.DMS in (via, back) else 1e-9
    assert signed_decimal_degrees(out_lat, back) == pytest.approx(lat, abs=tolerance)
    assert signed_decimal_degrees(out_lon, back) == pytest.approx(lon, abs=tolerance)


@given(compact_coordinates())
def test_compact_string_round_trip(coordinate: Coordinate) -> None:
    """Property: the compact encoding round-trips exactly."""
    text = coordinate.to_string()

    assert Coordinate.from_string(text, coordinate.direction) == coordinate
