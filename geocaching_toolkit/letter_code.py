"""
Decoding letter slots into numeric codes.

Puzzle caches hide numbers behind letters: the solver fills a table mapping
each letter to a digit and then types letters into a fixed row of slots.
Each slot resolves to its digit text or to the blank marker ``_``; the
resolved slots are concatenated into a *code string*.

Three codes are built from it:

    - Azimuth (3 slots, hundreds/tens/units, value taken mod 360)
    - Distance (3 slots read in reverse order, plain integer)
    - Lock (N slots, display only)

Codes are always displayed as-is (blanks included); the numeric value is
None while the code cannot be resolved.

Example:
    >>> table = {"A": "1", "B": "2", "C": "3"}
    >>> decode_azimuth(["", "B", "C"], table)
    23
    >>> distance_code(["A", "B", "C"], table)
    '321'
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Mapping, Sequence

from geocaching_toolkit.alphabets import Alphabet
from geocaching_toolkit.types import Degrees

logger = logging.getLogger(__name__)

BLANK = "_"
AZIMUTH_MODULUS = 360
AZIMUTH_SLOTS = 3
DISTANCE_SLOTS = 3


def resolve_slot(letter: str, table: Mapping[str, str],
                 alphabet: Alphabet | None = None) -> str:
    """
    Resolve one slot to its digit text or the blank marker.

    Args:
        letter: Slot content, empty or a single letter
        table: Letter -> digit text mapping
        alphabet: When given, letters outside it resolve to blank

    Returns:
        Mapped digit text, or ``BLANK`` for an empty slot, an unmapped
        letter or an empty mapping
    """
    if not letter:
        return BLANK
    upper = letter.upper()
    if alphabet is not None and upper not in alphabet:
        return BLANK
    return table.get(upper) or BLANK


def resolve_slots(slots: Sequence[str], table: Mapping[str, str],
                  alphabet: Alphabet | None = None) -> list[str]:
    """Resolve every slot in order."""
    return [resolve_slot(letter, table, alphabet) for letter in slots]


def azimuth_code(slots: Sequence[str], table: Mapping[str, str],
                 alphabet: Alphabet | None = None) -> str:
    return "".join(resolve_slots(slots, table, alphabet))


def _digit(token: str) -> int | None:
    """Single ASCII digit value, else None."""
    if len(token) == 1 and "0" <= token <= "9":
        return int(token)
    return None


def decode_azimuth(slots: Sequence[str], table: Mapping[str, str],
                   alphabet: Alphabet | None = None) -> Degrees | None:
    """
    Decode three slots (hundreds, tens, units) into a bearing.

    Resolvable blank patterns:
        ``__d`` -> d
        ``_dd`` -> 10*d1 + d2
        ``ddd`` -> 100*d0 + 10*d1 + d2
    all taken mod 360. Any other pattern (``___``, ``d_d``, ``_d_``, ...)
    is not resolvable yet and yields None, as does a slot whose mapping is
    not a single digit.

    Returns:
        Azimuth in [0, 359], or None
    """
    if len(slots) != AZIMUTH_SLOTS:
        raise ValueError(f"Azimuth needs {AZIMUTH_SLOTS} slots, got {len(slots)}")

    tokens = resolve_slots(slots, table, alphabet)
    blanks = [token == BLANK for token in tokens]

    if blanks == [True, True, False]:
        used = tokens[2:]
    elif blanks == [True, False, False]:
        used = tokens[1:]
    elif blanks == [False, False, False]:
        used = tokens
    else:
        logger.debug(f"Azimuth code {''.join(tokens)!r} not resolvable")
        return None

    value = 0
    for token in used:
        digit = _digit(token)
        if digit is None:
            logger.debug(f"Azimuth slot maps to {token!r}, not a single digit")
            return None
        value = value * 10 + digit

    return Degrees(value % AZIMUTH_MODULUS)


def distance_code(slots: Sequence[str], table: Mapping[str, str],
                  alphabet: Alphabet | None = None) -> str:
    """Code string for distance: slots resolved from the last to the first."""
    return "".join(resolve_slots(list(reversed(slots)), table, alphabet))


def decode_distance(slots: Sequence[str], table: Mapping[str, str],
                    alphabet: Alphabet | None = None) -> int | None:
    """
    Decode distance slots into a plain integer.

    The last slot becomes the most significant digit. Leading zeros are
    allowed; there is no modulus or upper bound.

    Returns:
        Distance, or None if any slot is blank or a mapping is not numeric
    """
    tokens = resolve_slots(list(reversed(slots)), table, alphabet)
    if BLANK in tokens:
        return None
    code = "".join(tokens)
    if not (code.isascii() and code.isdigit()):
        logger.debug(f"Distance code {code!r} is not numeric")
        return None
    return int(code)


def lock_code(slots: Sequence[str], table: Mapping[str, str],
              alphabet: Alphabet | None = None) -> str:
    """Lock code string, slots in natural order, blanks kept."""
    return "".join(resolve_slots(slots, table, alphabet))


def copyable_code(code: str) -> str | None:
    """
    Strip blank markers from a code.

    Returns:
        The digits only, or None if nothing is left (not ready to copy)
    """
    cleaned = code.replace(BLANK, "")
    return cleaned or None


@dataclass(frozen=True)
class CompassReading:
    """Decoded azimuth and distance with their display codes.

    Attributes:
        azimuth: Bearing in degrees [0, 359], None while unresolved.
        distance: Distance value, None while any slot is unresolved.
        azimuth_text: Azimuth code string as displayed.
        distance_text: Distance code string as displayed.
    """

    azimuth: Degrees | None
    distance: int | None
    azimuth_text: str
    distance_text: str

    def needle_angle(self, device_heading: float) -> float | None:
        """Rotation of the bearing needle relative to the device heading.

        Returns:
            ``(azimuth - device_heading) mod 360``, or None without an azimuth
        """
        if self.azimuth is None:
            return None
        return (self.azimuth - device_heading) % 360.0


def read_compass(azimuth_slots: Sequence[str], distance_slots: Sequence[str],
                 table: Mapping[str, str],
                 alphabet: Alphabet | None = None) -> CompassReading:
    """Decode both compass rows in one pass."""
    reading = CompassReading(
        azimuth=decode_azimuth(azimuth_slots, table, alphabet),
        distance=decode_distance(distance_slots, table, alphabet),
        azimuth_text=azimuth_code(azimuth_slots, table, alphabet),
        distance_text=distance_code(distance_slots, table, alphabet),
    )
    logger.debug(f"Compass reading: {reading}")
    return reading
