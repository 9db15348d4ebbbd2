#!/usr/bin/env python3
"""
Conversion between angular coordinate notations.

This module converts a latitude/longitude pair between three notations:

1. DD  - Decimal Degrees               (N 52.22427°)
2. DDM - Degrees and Decimal Minutes   (N 52° 13.456')
3. DMS - Degrees, Minutes and Seconds  (N 52° 13' 27")

Every conversion goes through signed decimal degrees, the canonical
interchange value (negative for South/West). The source format decides
which fields of the incoming ``Coordinate`` are read:

    - DD:  decimal_degrees
    - DDM: degrees + decimal_minutes / 60
    - DMS: degrees + minutes / 60 + seconds / 3600

The target coordinate is always rebuilt from scratch, so all of its fields
are mutually consistent regardless of the source format.

Precision Notes:
    - DD and DDM round trips are lossless up to float rounding
    - DMS truncates to whole seconds (error <= 1/3600 degree)
    - Minutes >= 60 are not re-normalised; keeping fields in range is
      the caller's job
"""

import logging
from enum import Enum
from typing import Optional, Tuple
from urllib.parse import urlsplit

from geocaching_toolkit.coordinates import AngularFormat, Coordinate
from geocaching_toolkit.types import DecimalDegrees

logger = logging.getLogger(__name__)

APPLE_MAPS_URL = "http://maps.apple.com/?q={lat},{lon}"
GOOGLE_MAPS_URL = "https://www.google.com/maps/search/?api=1&query={lat},{lon}"


class MapService(Enum):
    """Map services a coordinate pair can be linked to."""

    APPLE = "apple"
    GOOGLE = "google"

    @property
    def url_template(self) -> str:
        return APPLE_MAPS_URL if self is MapService.APPLE else GOOGLE_MAPS_URL

    @classmethod
    def parse(cls, value: str) -> 'MapService':
        """Parse a service name (case-insensitive).

        Raises:
            ValueError: If value is not a known service
        """
        try:
            return cls(value.strip().lower())
        except ValueError:
            valid = [s.value for s in cls]
            raise ValueError(
                f"Invalid map service '{value}'. "
                f"Must be one of: {', '.join(valid)}"
            ) from None


def signed_decimal_degrees(coordinate: Coordinate, fmt: AngularFormat) -> DecimalDegrees:
    """
    Read a coordinate as signed decimal degrees using the fields of ``fmt``.

    Args:
        coordinate: Coordinate whose ``fmt`` fields are authoritative
        fmt: Notation the coordinate was entered in

    Returns:
        Signed decimal degrees (negative for South/West). A zero magnitude
        is returned as positive zero.
    """
    if fmt is AngularFormat.DD:
        magnitude = coordinate.decimal_degrees
    elif fmt is AngularFormat.DDM:
        magnitude = coordinate.degrees + coordinate.decimal_minutes / 60.0
    else:
        magnitude = coordinate.degrees + coordinate.minutes / 60.0 + coordinate.seconds / 3600.0

    if coordinate.direction.is_negative and magnitude:
        return DecimalDegrees(-float(magnitude))
    return DecimalDegrees(float(magnitude))


class CoordinateConverter:
    """
    Stateless converter for latitude/longitude pairs.

    Usage:
        >>> converter = CoordinateConverter()
        >>> lat = Coordinate(Direction.NORTH, degrees=52, decimal_minutes=13.456)
        >>> lon = Coordinate(Direction.EAST, degrees=21, decimal_minutes=0.5)
        >>> lat_dd, lon_dd = converter.convert(lat, lon, AngularFormat.DDM, AngularFormat.DD)
        >>> converter.format_coordinates(lat_dd, lon_dd, AngularFormat.DD)
        'N 52.22427°, E 21.00833°'
    """

    def convert(self, latitude: Coordinate, longitude: Coordinate,
                from_format: AngularFormat,
                to_format: AngularFormat) -> Tuple[Coordinate, Coordinate]:
        """
        Convert a latitude/longitude pair from one notation to another.

        Args:
            latitude: Latitude in ``from_format``
            longitude: Longitude in ``from_format``
            from_format: Notation whose fields are read
            to_format: Notation requested by the caller

        Returns:
            Tuple of fresh (latitude, longitude) coordinates. Every field of
            the result is populated, so the result is valid in any notation;
            ``to_format`` only names which fields the caller will display.
        """
        lat_dd = signed_decimal_degrees(latitude, from_format)
        lon_dd = signed_decimal_degrees(longitude, from_format)

        logger.debug(
            f"Converting {from_format.value} -> {to_format.value}: "
            f"({lat_dd}, {lon_dd})"
        )

        return (
            Coordinate.from_decimal_degrees(lat_dd, is_latitude=True),
            Coordinate.from_decimal_degrees(lon_dd, is_latitude=False),
        )

    def format_coordinates(self, latitude: Coordinate, longitude: Coordinate,
                           fmt: AngularFormat) -> str:
        """
        Render a latitude/longitude pair for display.

        Latitude degrees are zero-padded to 2 digits and longitude degrees to
        3 digits in the DDM and DMS notations.

        Args:
            latitude: Latitude coordinate
            longitude: Longitude coordinate
            fmt: Notation to render

        Returns:
            Display string, e.g. ``N 52° 13.456', E 021° 00.500'``
        """
        lat_dir = latitude.direction.value
        lon_dir = longitude.direction.value

        if fmt is AngularFormat.DD:
            return "%s %.5f°, %s %.5f°" % (
                lat_dir, latitude.decimal_degrees,
                lon_dir, longitude.decimal_degrees,
            )
        if fmt is AngularFormat.DDM:
            return "%s %02d° %.3f', %s %03d° %.3f'" % (
                lat_dir, latitude.degrees, latitude.decimal_minutes,
                lon_dir, longitude.degrees, longitude.decimal_minutes,
            )
        return "%s %02d° %02d' %02d\", %s %03d° %02d' %02d\"" % (
            lat_dir, latitude.degrees, latitude.minutes, latitude.seconds,
            lon_dir, longitude.degrees, longitude.minutes, longitude.seconds,
        )

    def map_url(self, latitude: Coordinate, longitude: Coordinate,
                fmt: AngularFormat, service: MapService) -> Optional[str]:
        """
        Build a map deep link for a latitude/longitude pair.

        Args:
            latitude: Latitude coordinate
            longitude: Longitude coordinate
            fmt: Notation whose fields are authoritative
            service: Target map service

        Returns:
            URL string with signed decimal degrees in full float precision,
            or None if the URL cannot be built.
        """
        lat_dd = signed_decimal_degrees(latitude, fmt)
        lon_dd = signed_decimal_degrees(longitude, fmt)
        url = service.url_template.format(lat=repr(lat_dd), lon=repr(lon_dd))

        try:
            parts = urlsplit(url)
        except ValueError as e:
            logger.warning(f"Could not build {service.value} map URL: {e}")
            return None

        if not parts.scheme or not parts.netloc:
            logger.warning(f"Could not build {service.value} map URL from {url!r}")
            return None

        return url


# Global converter instance for convenient access
_global_converter: Optional[CoordinateConverter] = None


def get_coordinate_converter() -> CoordinateConverter:
    """
    Get or create the shared coordinate converter.

    Returns:
        CoordinateConverter instance
    """
    global _global_converter
    if _global_converter is None:
        _global_converter = CoordinateConverter()
    return _global_converter
