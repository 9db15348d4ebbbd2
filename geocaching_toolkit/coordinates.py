"""
Coordinate value type for one geographic axis.

A ``Coordinate`` carries the same angle in three notations at once:

    - Decimal degrees:            ``decimal_degrees``
    - Degrees, decimal minutes:   ``degrees`` + ``decimal_minutes``
    - Degrees, minutes, seconds:  ``degrees`` + ``minutes`` + ``seconds``

All magnitudes are non-negative; the sign lives in ``direction``
(South and West are negative).

Compact string form:
    "<dir>,<degrees>,<minutes>,<seconds>,<decimal_degrees>,<decimal_minutes>"

    >>> Coordinate.from_decimal_degrees(-33.5, is_latitude=True).to_string()
    'S,33,30,0,33.5,30.0'
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from enum import Enum

from geocaching_toolkit.types import (
    DecimalDegrees,
    DecimalMinutes,
    Degrees,
    Minutes,
    Seconds,
)

logger = logging.getLogger(__name__)

COMPACT_FIELD_COUNT = 6

TRUNCATION_EPSILON = 1e-9
"""Arc seconds of float noise absorbed before truncating to whole seconds."""

_INT_PATTERN = re.compile(r"[+-]?\d+")
_FLOAT_PATTERN = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")


class Direction(Enum):
    """Hemisphere of a coordinate axis, stored as its single-letter code."""

    NORTH = "N"
    SOUTH = "S"
    EAST = "E"
    WEST = "W"

    @property
    def is_latitude_axis(self) -> bool:
        """True for North/South."""
        return self in (Direction.NORTH, Direction.SOUTH)

    @property
    def is_negative(self) -> bool:
        """True for South/West, the hemispheres with negative signed degrees."""
        return self in (Direction.SOUTH, Direction.WEST)

    @classmethod
    def for_sign(cls, negative: bool, is_latitude: bool) -> Direction:
        """Pick the hemisphere for a signed value on the given axis."""
        if is_latitude:
            return cls.SOUTH if negative else cls.NORTH
        return cls.WEST if negative else cls.EAST

    @classmethod
    def default_for(cls, is_latitude: bool) -> Direction:
        return cls.NORTH if is_latitude else cls.EAST


class AngularFormat(Enum):
    """Angular notations supported for input and output."""

    DD = "DD"
    """Decimal degrees, one input field."""

    DDM = "DDM"
    """Degrees and decimal minutes, two input fields."""

    DMS = "DMS"
    """Degrees, minutes and seconds, three input fields."""

    @property
    def field_count(self) -> int:
        return {AngularFormat.DD: 1, AngularFormat.DDM: 2, AngularFormat.DMS: 3}[self]

    @property
    def display_name(self) -> str:
        return {
            AngularFormat.DD: "DD (Decimal Degrees)",
            AngularFormat.DDM: "DDM (Degrees Decimal Minutes)",
            AngularFormat.DMS: "DMS (Degrees Minutes Seconds)",
        }[self]

    @property
    def input_label(self) -> str:
        """Hint shown next to the input fields of this format."""
        return {
            AngularFormat.DD: "Decimal degrees",
            AngularFormat.DDM: "Degrees° Minutes.mm'",
            AngularFormat.DMS: "Degrees° Minutes' Seconds\"",
        }[self]

    @classmethod
    def parse(cls, value: str) -> AngularFormat:
        """Parse a format code (case-insensitive).

        Raises:
            ValueError: If value is not one of DD, DDM, DMS
        """
        try:
            return cls(value.strip().upper())
        except ValueError:
            valid = [f.value for f in cls]
            raise ValueError(
                f"Invalid angular format '{value}'. "
                f"Must be one of: {', '.join(valid)}"
            ) from None


def split_arc_seconds(total_seconds: float) -> tuple[Degrees, Minutes, Seconds]:
    """
    Truncate an arc-second count to whole degrees, minutes and seconds.

    ``TRUNCATION_EPSILON`` is added first, so a count that float arithmetic
    left just below a whole second (26 -> 25.99999999999) keeps that second.

    Example:
        >>> split_arc_seconds(6805.999999999999)
        (1, 53, 26)
    """
    whole = int(total_seconds + TRUNCATION_EPSILON)
    degrees, remainder = divmod(whole, 3600)
    minutes, seconds = divmod(remainder, 60)
    return Degrees(degrees), Minutes(minutes), Seconds(seconds)


@dataclass
class Coordinate:
    """One axis (latitude or longitude) of a geographic position.

    Attributes:
        direction: Hemisphere, carries the sign.
        degrees: Whole degrees, >= 0.
        minutes: Whole minutes, 0-59.
        seconds: Whole seconds, 0-59.
        decimal_degrees: Unsigned fractional-degree magnitude.
        decimal_minutes: Unsigned minutes plus fractional minutes.

    Callers keep ``minutes`` and ``seconds`` in their canonical ranges; no
    normalisation is done here.
    """

    direction: Direction = Direction.NORTH
    degrees: Degrees = Degrees(0)
    minutes: Minutes = Minutes(0)
    seconds: Seconds = Seconds(0)
    decimal_degrees: DecimalDegrees = DecimalDegrees(0.0)
    decimal_minutes: DecimalMinutes = DecimalMinutes(0.0)

    @classmethod
    def zero(cls, is_latitude: bool) -> Coordinate:
        """Session-start value: all zero, North or East."""
        return cls(direction=Direction.default_for(is_latitude))

    def to_decimal_degrees(self) -> DecimalDegrees:
        """Signed decimal degrees from the degrees/minutes/seconds fields."""
        value = self.degrees + self.minutes / 60.0 + self.seconds / 3600.0
        return DecimalDegrees(-value if self.direction.is_negative else value)

    @classmethod
    def from_decimal_degrees(cls, value: float, is_latitude: bool) -> Coordinate:
        """Build a fully populated coordinate from signed decimal degrees.

        Degrees, minutes and seconds are truncated from the whole arc-second
        count, so sub-second precision survives only in ``decimal_degrees``
        and ``decimal_minutes``. A value a hair below a whole second (as
        1°53'26" comes back from its decimal form) counts as that second.
        Zero maps to North/East.
        """
        magnitude = abs(value)
        degrees, minutes, seconds = split_arc_seconds(magnitude * 3600.0)
        # degrees may have been rounded up past magnitude by the guard
        decimal_minutes = max((magnitude - degrees) * 60.0, 0.0)

        return cls(
            direction=Direction.for_sign(value < 0, is_latitude),
            degrees=degrees,
            minutes=minutes,
            seconds=seconds,
            decimal_degrees=DecimalDegrees(magnitude),
            decimal_minutes=DecimalMinutes(decimal_minutes),
        )

    def to_string(self) -> str:
        """Encode as the compact comma-separated form."""
        return (
            f"{self.direction.value},{self.degrees},{self.minutes},{self.seconds},"
            f"{self.decimal_degrees!r},{self.decimal_minutes!r}"
        )

    @classmethod
    def from_string(cls, text: str, direction: Direction | None = None) -> Coordinate | None:
        """Decode the compact form produced by ``to_string``.

        Args:
            text: Compact coordinate string.
            direction: Optional direction of the axis being loaded. When given,
                a string whose direction code belongs to the other axis is
                rejected.

        Returns:
            Coordinate, or None if the text is malformed in any way.
        """
        parts = text.split(",")
        if len(parts) != COMPACT_FIELD_COUNT:
            logger.warning(f"Rejected coordinate string {text!r}: expected 6 fields, got {len(parts)}")
            return None

        dir_code, *int_fields = parts[:4]
        float_fields = parts[4:]

        try:
            parsed_direction = Direction(dir_code)
        except ValueError:
            logger.warning(f"Rejected coordinate string {text!r}: unknown direction {dir_code!r}")
            return None

        if direction is not None and direction.is_latitude_axis != parsed_direction.is_latitude_axis:
            axis = "latitude" if direction.is_latitude_axis else "longitude"
            logger.warning(
                f"Rejected coordinate string {text!r}: direction {dir_code} "
                f"does not belong to the {axis} axis"
            )
            return None

        if not all(_INT_PATTERN.fullmatch(field) for field in int_fields) or not all(
            _FLOAT_PATTERN.fullmatch(field) for field in float_fields
        ):
            logger.warning(f"Rejected coordinate string {text!r}: non-numeric field")
            return None

        degrees, minutes, seconds = (int(field) for field in int_fields)
        decimal_degrees, decimal_minutes = (float(field) for field in float_fields)

        return cls(
            direction=parsed_direction,
            degrees=degrees,
            minutes=minutes,
            seconds=seconds,
            decimal_degrees=decimal_degrees,
            decimal_minutes=decimal_minutes,
        )
