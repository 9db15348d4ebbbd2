"""
Geocaching Toolkit Package.

Pure helpers for geocaching puzzle caches:
    - Coordinate conversion between DD, DDM and DMS notations
    - Map links and display strings for coordinate pairs
    - Letter-code decoding for compass bearings, distances and number locks

Example Usage:
    >>> from geocaching_toolkit import (
    ...     AngularFormat,
    ...     CoordinateSession,
    ...     parse_edit,
    ... )
    >>>
    >>> session = CoordinateSession(from_format=AngularFormat.DDM, to_format=AngularFormat.DD)
    >>> session.edit_latitude(parse_edit("N 52 13.456", AngularFormat.DDM, is_latitude=True))
    >>> session.edit_longitude(parse_edit("E 21 0.5", AngularFormat.DDM, is_latitude=False))
    >>> session.formatted()
    'N 52.22427°, E 21.00833°'
    >>>
    >>> from geocaching_toolkit import CompassInputs
    >>> compass = CompassInputs.from_letters(azimuth="ABC", distance="ABC")
    >>> compass.reading({"A": "1", "B": "2", "C": "3"})
    CompassReading(azimuth=123, distance=321, azimuth_text='123', distance_text='321')

Available Classes:
    Coordinates:
        - Coordinate: One axis in all three notations
        - Direction, AngularFormat: Hemisphere and notation enums
        - CoordinateConverter, MapService: Conversion, display and map links
        - EditingDD, EditingDDM, EditingDMS: Edits in a single notation
        - CoordinateSession: Edited pair with live conversion

    Letter codes:
        - Alphabet: English and Polish letter sets
        - LetterSlots: Single-letter input row with focus handling
        - CompassInputs, CompassReading: Azimuth and distance decoding
        - LockInputs: Number lock code

    Configuration:
        - ToolkitSettings, get_default_settings
"""

from geocaching_toolkit.coordinates import AngularFormat, Coordinate, Direction
from geocaching_toolkit.coordinate_converter import (
    CoordinateConverter,
    MapService,
    get_coordinate_converter,
    signed_decimal_degrees,
)
from geocaching_toolkit.coordinate_editor import (
    CoordinateEdit,
    CoordinateSession,
    EditingDD,
    EditingDDM,
    EditingDMS,
    edit_from_coordinate,
    parse_edit,
)

from geocaching_toolkit.alphabets import Alphabet, LetterNumberTable, normalize_table
from geocaching_toolkit.letter_code import (
    BLANK,
    CompassReading,
    decode_azimuth,
    decode_distance,
    lock_code,
    resolve_slot,
)
from geocaching_toolkit.letter_slots import LetterSlots
from geocaching_toolkit.compass import CompassInputs
from geocaching_toolkit.lock import LockInputs

from geocaching_toolkit.settings import ToolkitSettings, get_default_settings

# Define public API
__all__ = [
    # Coordinates
    'AngularFormat',
    'Coordinate',
    'Direction',
    'CoordinateConverter',
    'MapService',
    'get_coordinate_converter',
    'signed_decimal_degrees',
    'CoordinateEdit',
    'CoordinateSession',
    'EditingDD',
    'EditingDDM',
    'EditingDMS',
    'edit_from_coordinate',
    'parse_edit',

    # Letter codes
    'Alphabet',
    'LetterNumberTable',
    'normalize_table',
    'BLANK',
    'CompassReading',
    'decode_azimuth',
    'decode_distance',
    'lock_code',
    'resolve_slot',
    'LetterSlots',
    'CompassInputs',
    'LockInputs',

    # Configuration
    'ToolkitSettings',
    'get_default_settings',
]

# Package metadata
__version__ = '0.1.0'
__description__ = 'Coordinate conversion and letter-code decoding for geocaching puzzles'
