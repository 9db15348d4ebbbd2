"""Unit tests for geocaching_toolkit.coordinates module."""

import pytest

from geocaching_toolkit.coordinates import AngularFormat, Coordinate, Direction, split_arc_seconds


class TestDirection:
    """Tests for the Direction enum."""

    @pytest.mark.parametrize(
        "direction,is_latitude,is_negative",
        [
            (Direction.NORTH, True, False),
            (Direction.SOUTH, True, True),
            (Direction.EAST, False, False),
            (Direction.WEST, False, True),
        ],
        ids=["north", "south", "east", "west"],
    )
    def test_axis_and_sign(self, direction: Direction, is_latitude: bool, is_negative: bool) -> None:
        assert direction.is_latitude_axis is is_latitude
        assert direction.is_negative is is_negative

    @pytest.mark.parametrize(
        "negative,is_latitude,expected",
        [
            (False, True, Direction.NORTH),
            (True, True, Direction.SOUTH),
            (False, False, Direction.EAST),
            (True, False, Direction.WEST),
        ],
    )
    def test_for_sign(self, negative: bool, is_latitude: bool, expected: Direction) -> None:
        assert Direction.for_sign(negative, is_latitude) is expected

    def test_codes(self) -> None:
        assert [d.value for d in Direction] == ["N", "S", "E", "W"]


class TestAngularFormat:
    """Tests for the AngularFormat enum."""

    @pytest.mark.parametrize(
        "fmt,field_count",
        [(AngularFormat.DD, 1), (AngularFormat.DDM, 2), (AngularFormat.DMS, 3)],
        ids=["dd", "ddm", "dms"],
    )
    def test_field_count(self, fmt: AngularFormat, field_count: int) -> None:
        assert fmt.field_count == field_count

    def test_display_name(self) -> None:
        assert AngularFormat.DDM.display_name == "DDM (Degrees Decimal Minutes)"

    @pytest.mark.parametrize("text", ["ddm", "DDM", " Ddm "])
    def test_parse(self, text: str) -> None:
        assert AngularFormat.parse(text) is AngularFormat.DDM

    def test_parse_invalid(self) -> None:
        with pytest.raises(ValueError, match="Must be one of: DD, DDM, DMS"):
            AngularFormat.parse("UTM")


class TestCoordinateDecimalDegrees:
    """Tests for signed decimal degree conversion."""

    def test_defaults(self) -> None:
        assert Coordinate.zero(is_latitude=True) == Coordinate(direction=Direction.NORTH)
        assert Coordinate.zero(is_latitude=False).direction is Direction.EAST

    @pytest.mark.parametrize(
        "coordinate,expected",
        [
            (Coordinate(Direction.NORTH, 40, 30, 0), 40.5),
            (Coordinate(Direction.SOUTH, 33, 30, 0), -33.5),
            (Coordinate(Direction.WEST, 74, 15, 36), -74.26),
            (Coordinate(Direction.EAST, 0, 0, 0), 0.0),
        ],
        ids=["north", "south", "west-with-seconds", "zero"],
    )
    def test_to_decimal_degrees(self, coordinate: Coordinate, expected: float) -> None:
        assert coordinate.to_decimal_degrees() == pytest.approx(expected, abs=1e-12)

    def test_from_decimal_degrees_south(self) -> None:
        coordinate = Coordinate.from_decimal_degrees(-33.5, is_latitude=True)

        assert coordinate == Coordinate(
            direction=Direction.SOUTH,
            degrees=33,
            minutes=30,
            seconds=0,
            decimal_degrees=33.5,
            decimal_minutes=30.0,
        )

    def test_from_decimal_degrees_truncates_seconds(self) -> None:
        coordinate = Coordinate.from_decimal_degrees(40.7128, is_latitude=True)

        assert coordinate.direction is Direction.NORTH
        assert (coordinate.degrees, coordinate.minutes, coordinate.seconds) == (40, 42, 46)
        assert coordinate.decimal_minutes == pytest.approx(42.768)
        assert coordinate.decimal_degrees == 40.7128

    def test_from_decimal_degrees_longitude(self) -> None:
        coordinate = Coordinate.from_decimal_degrees(-74.25, is_latitude=False)

        assert coordinate.direction is Direction.WEST
        assert (coordinate.degrees, coordinate.minutes, coordinate.seconds) == (74, 15, 0)

    @pytest.mark.parametrize(
        "dms",
        [(1, 53, 26), (21, 0, 30), (52, 13, 27), (179, 59, 59), (0, 0, 1)],
        ids=["1-53-26", "21-00-30", "52-13-27", "max-longitude", "one-second"],
    )
    def test_whole_seconds_survive_decimal_form(self, dms: tuple) -> None:
        degrees, minutes, seconds = dms
        value = degrees + minutes / 60.0 + seconds / 3600.0

        coordinate = Coordinate.from_decimal_degrees(value, is_latitude=False)

        assert (coordinate.degrees, coordinate.minutes, coordinate.seconds) == dms
        assert coordinate.decimal_degrees == value

    def test_noise_below_whole_degree_carries(self) -> None:
        coordinate = Coordinate.from_decimal_degrees(52.99999999999999, is_latitude=True)

        assert (coordinate.degrees, coordinate.minutes, coordinate.seconds) == (53, 0, 0)
        assert coordinate.decimal_minutes == 0.0

    @pytest.mark.parametrize("value", [0.0, -0.0])
    @pytest.mark.parametrize("is_latitude,expected", [(True, Direction.NORTH), (False, Direction.EAST)])
    def test_zero_is_positive(self, value: float, is_latitude: bool, expected: Direction) -> None:
        assert Coordinate.from_decimal_degrees(value, is_latitude).direction is expected


class TestCoordinateCompactString:
    """Tests for the compact comma-separated encoding."""

    def test_to_string(self) -> None:
        coordinate = Coordinate(Direction.NORTH, 52, 13, 27, 52.22427, 13.456)

        assert coordinate.to_string() == "N,52,13,27,52.22427,13.456"

    def test_from_string(self) -> None:
        coordinate = Coordinate.from_string("W,74,15,0,74.25,15.0", Direction.EAST)

        assert coordinate == Coordinate(Direction.WEST, 74, 15, 0, 74.25, 15.0)

    def test_from_string_accepts_integer_decimals(self) -> None:
        coordinate = Coordinate.from_string("S,1,2,3,4,5")

        assert coordinate == Coordinate(Direction.SOUTH, 1, 2, 3, 4.0, 5.0)

    def test_round_trip(self) -> None:
        coordinate = Coordinate.from_decimal_degrees(-12.3456789, is_latitude=False)

        assert Coordinate.from_string(coordinate.to_string(), coordinate.direction) == coordinate

    @pytest.mark.parametrize(
        "text",
        [
            "",
            "N,1,2,3,4.0",
            "N,1,2,3,4.0,5.0,6",
            "X,1,2,3,4.0,5.0",
            "n,1,2,3,4.0,5.0",
            "N,1.5,2,3,4.0,5.0",
            "N,1,2,3,abc,5.0",
            "N, 1,2,3,4.0,5.0",
            "N,,2,3,4.0,5.0",
            "N,1,2,3,4.0,nan",
        ],
        ids=[
            "empty",
            "too-few",
            "too-many",
            "bad-direction",
            "lowercase-direction",
            "float-degrees",
            "text-decimal",
            "whitespace",
            "empty-field",
            "nan",
        ],
    )
    def test_from_string_rejects(self, text: str) -> None:
        assert Coordinate.from_string(text) is None

    def test_from_string_rejects_other_axis(self) -> None:
        assert Coordinate.from_string("E,1,2,3,4.0,5.0", Direction.NORTH) is None
        assert Coordinate.from_string("S,1,2,3,4.0,5.0", Direction.WEST) is None


@pytest.mark.parametrize(
    "total_seconds,expected",
    [
        (6805.999999999999, (1, 53, 26)),
        (6806.25, (1, 53, 26)),
        (75630.0, (21, 0, 30)),
        (59.9, (0, 0, 59)),
        (0.0, (0, 0, 0)),
    ],
    ids=["float-noise", "fraction-truncated", "exact", "below-minute", "zero"],
)
def test_split_arc_seconds(total_seconds: float, expected: tuple) -> None:
    assert split_arc_seconds(total_seconds) == expected
