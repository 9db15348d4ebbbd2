"""Compass inputs: a letter row for the azimuth and one for the distance."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Mapping

from geocaching_toolkit.alphabets import Alphabet
from geocaching_toolkit.letter_code import (
    AZIMUTH_SLOTS,
    DISTANCE_SLOTS,
    CompassReading,
    read_compass,
)
from geocaching_toolkit.letter_slots import LetterSlots


@dataclass
class CompassInputs:
    """
    Letter slots behind a compass bearing.

    The azimuth row is typed left to right (hundreds first). The distance row
    is typed right to left, so its last slot holds the most significant digit.
    """

    azimuth: LetterSlots = field(default_factory=lambda: LetterSlots(AZIMUTH_SLOTS))
    distance: LetterSlots = field(
        default_factory=lambda: LetterSlots(DISTANCE_SLOTS, reverse=True)
    )

    @classmethod
    def from_letters(cls, azimuth: str = "", distance: str = "") -> CompassInputs:
        """Build from letter strings in slot index order (spaces for empty slots)."""
        return cls(
            azimuth=LetterSlots.from_text(azimuth, AZIMUTH_SLOTS),
            distance=LetterSlots.from_text(distance, DISTANCE_SLOTS, reverse=True),
        )

    def reading(self, table: Mapping[str, str],
                alphabet: Alphabet | None = None) -> CompassReading:
        """Decode the current slots; safe to call after every keystroke."""
        return read_compass(self.azimuth.slots, self.distance.slots, table, alphabet)

    def clear(self) -> None:
        self.azimuth.clear()
        self.distance.clear()
