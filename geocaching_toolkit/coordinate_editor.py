"""
Editing a coordinate in one notation while keeping the others consistent.

A coordinate is always edited through exactly one notation at a time. Each
edit type below holds only the fields of its notation; ``to_coordinate()``
derives the other two representations from them, so the three views of a
``Coordinate`` never drift apart.

    >>> EditingDDM(Direction.NORTH, degrees=52, decimal_minutes=13.5).to_coordinate()
    Coordinate(direction=<Direction.NORTH: 'N'>, degrees=52, minutes=13, seconds=30,
               decimal_degrees=52.225, decimal_minutes=13.5)

``CoordinateSession`` is the caller-side loop around the converter: it owns
the edited pair, the input/output notations and the converted pair, and
recomputes the converted pair after every mutation.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import Any, ClassVar, Union

from geocaching_toolkit.coordinate_converter import (
    CoordinateConverter,
    MapService,
    get_coordinate_converter,
)
from geocaching_toolkit.coordinates import (
    TRUNCATION_EPSILON,
    AngularFormat,
    Coordinate,
    Direction,
)
from geocaching_toolkit.types import (
    DecimalDegrees,
    DecimalMinutes,
    Degrees,
    Minutes,
    Seconds,
)

logger = logging.getLogger(__name__)

MAX_LATITUDE_DEGREES = 90
MAX_LONGITUDE_DEGREES = 180

_DIRECTION_LETTERS = "NSEW"
_FIELD_SEPARATORS = re.compile(r"[\s°'\"]+")


@dataclass(frozen=True)
class EditingDD:
    """Decimal degrees are authoritative."""

    format: ClassVar[AngularFormat] = AngularFormat.DD

    direction: Direction
    decimal_degrees: DecimalDegrees

    def to_coordinate(self) -> Coordinate:
        coordinate = Coordinate.from_decimal_degrees(
            abs(self.decimal_degrees), is_latitude=self.direction.is_latitude_axis
        )
        coordinate.direction = self.direction
        return coordinate


@dataclass(frozen=True)
class EditingDDM:
    """Degrees and decimal minutes are authoritative."""

    format: ClassVar[AngularFormat] = AngularFormat.DDM

    direction: Direction
    degrees: Degrees
    decimal_minutes: DecimalMinutes

    def to_coordinate(self) -> Coordinate:
        total_seconds = int(self.decimal_minutes * 60.0 + TRUNCATION_EPSILON)
        if self.decimal_minutes < 60.0:
            # never round up into a 60th minute
            total_seconds = min(total_seconds, 3599)
        minutes, seconds = divmod(total_seconds, 60)
        return Coordinate(
            direction=self.direction,
            degrees=self.degrees,
            minutes=Minutes(minutes),
            seconds=Seconds(seconds),
            decimal_degrees=DecimalDegrees(self.degrees + self.decimal_minutes / 60.0),
            decimal_minutes=self.decimal_minutes,
        )


@dataclass(frozen=True)
class EditingDMS:
    """Degrees, minutes and seconds are authoritative."""

    format: ClassVar[AngularFormat] = AngularFormat.DMS

    direction: Direction
    degrees: Degrees
    minutes: Minutes
    seconds: Seconds

    def to_coordinate(self) -> Coordinate:
        decimal_minutes = DecimalMinutes(self.minutes + self.seconds / 60.0)
        return Coordinate(
            direction=self.direction,
            degrees=self.degrees,
            minutes=self.minutes,
            seconds=self.seconds,
            decimal_degrees=DecimalDegrees(self.degrees + decimal_minutes / 60.0),
            decimal_minutes=decimal_minutes,
        )


CoordinateEdit = Union[EditingDD, EditingDDM, EditingDMS]


def edit_from_coordinate(coordinate: Coordinate, fmt: AngularFormat) -> CoordinateEdit:
    """Extract the fields of ``fmt`` from a coordinate as an edit."""
    if fmt is AngularFormat.DD:
        return EditingDD(coordinate.direction, coordinate.decimal_degrees)
    if fmt is AngularFormat.DDM:
        return EditingDDM(coordinate.direction, coordinate.degrees, coordinate.decimal_minutes)
    return EditingDMS(coordinate.direction, coordinate.degrees, coordinate.minutes, coordinate.seconds)


def _split_direction(text: str, is_latitude: bool) -> tuple[Direction, str]:
    """Strip a leading/trailing hemisphere letter or a leading minus sign."""
    body = text.strip()
    letter = None
    if body[:1].upper() in _DIRECTION_LETTERS:
        letter, body = body[0].upper(), body[1:]
    elif body[-1:].upper() in _DIRECTION_LETTERS:
        letter, body = body[-1].upper(), body[:-1]

    if letter is None:
        negative = body.startswith("-")
        if negative or body.startswith("+"):
            body = body[1:]
        return Direction.for_sign(negative, is_latitude), body

    direction = Direction(letter)
    if direction.is_latitude_axis != is_latitude:
        axis = "latitude" if is_latitude else "longitude"
        raise ValueError(f"Direction {letter} is not valid for {axis}")
    return direction, body


def _parse_int(value: str, name: str) -> int:
    if not (value.isascii() and value.isdigit()):
        raise ValueError(f"{name} must be a whole non-negative number, got '{value}'")
    return int(value)


def _parse_float(value: str, name: str) -> float:
    try:
        number = float(value.replace(",", "."))
    except ValueError:
        raise ValueError(f"{name} must be a number, got '{value}'") from None
    if not number >= 0:
        raise ValueError(f"{name} must be non-negative, got '{value}'")
    return number


def parse_edit(text: str, fmt: AngularFormat, is_latitude: bool) -> CoordinateEdit:
    """
    Parse one axis typed by a user in the given notation.

    Supports formats like:
    - DD:  "N 52.22427", "-33.5", "21.00833E"
    - DDM: "N 52 13.456", "S 33° 30.000'"
    - DMS: "E 021° 00' 30\"", "W 74 0 21"

    Args:
        text: Axis text
        fmt: Notation the text is written in
        is_latitude: True for the latitude axis

    Returns:
        Edit for ``fmt`` with values in canonical ranges

    Raises:
        ValueError: If the text is malformed or out of range
    """
    if not text or not text.strip():
        raise ValueError("Coordinate text is empty")

    direction, body = _split_direction(text, is_latitude)
    fields = [f for f in _FIELD_SEPARATORS.split(body) if f]
    if len(fields) != fmt.field_count:
        raise ValueError(
            f"{fmt.value} expects {fmt.field_count} numeric field(s), "
            f"got {len(fields)} in '{text}'"
        )

    if fmt is AngularFormat.DD:
        edit: CoordinateEdit = EditingDD(direction, _parse_float(fields[0], "Degrees"))
        magnitude = edit.decimal_degrees
    elif fmt is AngularFormat.DDM:
        decimal_minutes = _parse_float(fields[1], "Minutes")
        if decimal_minutes >= 60:
            raise ValueError(f"Minutes must be below 60, got {decimal_minutes}")
        edit = EditingDDM(direction, _parse_int(fields[0], "Degrees"), decimal_minutes)
        magnitude = edit.degrees + decimal_minutes / 60.0
    else:
        degrees, minutes, seconds = (
            _parse_int(value, name)
            for value, name in zip(fields, ("Degrees", "Minutes", "Seconds"))
        )
        if minutes >= 60 or seconds >= 60:
            raise ValueError(f"Minutes and seconds must be below 60, got {minutes}' {seconds}\"")
        edit = EditingDMS(direction, degrees, minutes, seconds)
        magnitude = degrees + minutes / 60.0 + seconds / 3600.0

    limit = MAX_LATITUDE_DEGREES if is_latitude else MAX_LONGITUDE_DEGREES
    if magnitude > limit:
        axis = "Latitude" if is_latitude else "Longitude"
        raise ValueError(f"{axis} must be within [0, {limit}] degrees. Got {magnitude}")

    return edit


@dataclass
class CoordinateSession:
    """
    Edited latitude/longitude pair plus its converted counterpart.

    Every mutator recomputes ``converted_latitude``/``converted_longitude``
    immediately. Recomputation has no side effects beyond those two fields,
    so it is safe to call on every keystroke.

    Attributes:
        from_format: Notation the user edits in (default DDM).
        to_format: Notation results are shown in (default DD).
        latitude: Edited latitude, authoritative in ``from_format``.
        longitude: Edited longitude, authoritative in ``from_format``.
    """

    from_format: AngularFormat = AngularFormat.DDM
    to_format: AngularFormat = AngularFormat.DD
    latitude: Coordinate = field(default_factory=lambda: Coordinate.zero(is_latitude=True))
    longitude: Coordinate = field(default_factory=lambda: Coordinate.zero(is_latitude=False))
    converter: CoordinateConverter = field(
        default_factory=get_coordinate_converter, repr=False, compare=False
    )
    converted_latitude: Coordinate = field(init=False)
    converted_longitude: Coordinate = field(init=False)

    def __post_init__(self) -> None:
        self.recompute()

    def recompute(self) -> None:
        """Regenerate the converted pair from the edited pair."""
        self.converted_latitude, self.converted_longitude = self.converter.convert(
            self.latitude, self.longitude, self.from_format, self.to_format
        )

    def _check_edit(self, edit: CoordinateEdit, is_latitude: bool) -> None:
        if edit.format is not self.from_format:
            raise ValueError(
                f"Edit in {edit.format.value} does not match input format {self.from_format.value}"
            )
        if edit.direction.is_latitude_axis != is_latitude:
            axis = "latitude" if is_latitude else "longitude"
            raise ValueError(f"Direction {edit.direction.value} is not valid for {axis}")

    def edit_latitude(self, edit: CoordinateEdit) -> None:
        """Replace the latitude with an edit in the input format.

        Raises:
            ValueError: If the edit's notation or axis does not fit
        """
        self._check_edit(edit, is_latitude=True)
        self.latitude = edit.to_coordinate()
        self.recompute()

    def edit_longitude(self, edit: CoordinateEdit) -> None:
        """Replace the longitude with an edit in the input format.

        Raises:
            ValueError: If the edit's notation or axis does not fit
        """
        self._check_edit(edit, is_latitude=False)
        self.longitude = edit.to_coordinate()
        self.recompute()

    def set_formats(self, from_format: AngularFormat | None = None,
                    to_format: AngularFormat | None = None) -> None:
        if from_format is not None:
            self.from_format = from_format
        if to_format is not None:
            self.to_format = to_format
        self.recompute()

    def reset(self) -> None:
        """Back to zero, North/East."""
        self.latitude = Coordinate.zero(is_latitude=True)
        self.longitude = Coordinate.zero(is_latitude=False)
        self.recompute()

    def formatted(self) -> str:
        return self.converter.format_coordinates(
            self.converted_latitude, self.converted_longitude, self.to_format
        )

    def map_url(self, service: MapService) -> str | None:
        return self.converter.map_url(
            self.converted_latitude, self.converted_longitude, self.to_format, service
        )

    def snapshot(self) -> dict[str, str]:
        """Session state as plain strings (compact coordinates + format codes)."""
        return {
            "latitude": self.latitude.to_string(),
            "longitude": self.longitude.to_string(),
            "from_format": self.from_format.value,
            "to_format": self.to_format.value,
        }

    def restore(self, data: dict[str, Any]) -> None:
        """
        Apply a ``snapshot()`` dictionary.

        Entries that are missing or fail to parse leave the current value in
        place; the rest are applied.
        """
        for key, axis_direction in (("latitude", Direction.NORTH), ("longitude", Direction.EAST)):
            if key not in data:
                continue
            coordinate = Coordinate.from_string(str(data[key]), axis_direction)
            if coordinate is not None:
                setattr(self, key, coordinate)

        for key in ("from_format", "to_format"):
            if key not in data:
                continue
            try:
                setattr(self, key, AngularFormat.parse(str(data[key])))
            except ValueError as e:
                logger.warning(f"Ignoring saved {key}: {e}")

        self.recompute()
