"""Number lock decoding from letter slots."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Mapping

from geocaching_toolkit.alphabets import Alphabet
from geocaching_toolkit.letter_code import copyable_code, lock_code
from geocaching_toolkit.letter_slots import LetterSlots

logger = logging.getLogger(__name__)

MIN_LOCK_DIGITS = 3
MAX_LOCK_DIGITS = 10
DEFAULT_LOCK_DIGITS = 5


def validate_lock_digits(lock_digits: int) -> int:
    """
    Raises:
        ValueError: If lock_digits is outside [MIN_LOCK_DIGITS, MAX_LOCK_DIGITS]
    """
    if not isinstance(lock_digits, int) or isinstance(lock_digits, bool):
        raise ValueError(f"lock_digits must be an integer, got {type(lock_digits).__name__}")
    if not MIN_LOCK_DIGITS <= lock_digits <= MAX_LOCK_DIGITS:
        raise ValueError(
            f"lock_digits must be within [{MIN_LOCK_DIGITS}, {MAX_LOCK_DIGITS}]. "
            f"Got {lock_digits}"
        )
    return lock_digits


@dataclass
class LockInputs:
    """Letter slots of a number lock, one per dial."""

    slots: LetterSlots = field(default_factory=lambda: LetterSlots(DEFAULT_LOCK_DIGITS))

    def __post_init__(self) -> None:
        validate_lock_digits(self.slots.size)

    @classmethod
    def from_letters(cls, letters: str, lock_digits: int = DEFAULT_LOCK_DIGITS) -> LockInputs:
        validate_lock_digits(lock_digits)
        return cls(slots=LetterSlots.from_text(letters, lock_digits))

    @property
    def lock_digits(self) -> int:
        return self.slots.size

    def set_lock_digits(self, lock_digits: int) -> None:
        """Resize the lock, keeping the letters already entered."""
        validate_lock_digits(lock_digits)
        if lock_digits != self.slots.size:
            logger.debug(f"Resizing lock from {self.slots.size} to {lock_digits} digits")
            self.slots.resize(lock_digits)

    def code(self, table: Mapping[str, str], alphabet: Alphabet | None = None) -> str:
        """Display code with ``_`` for unresolved dials."""
        return lock_code(self.slots.slots, table, alphabet)

    def copy_value(self, table: Mapping[str, str],
                   alphabet: Alphabet | None = None) -> str | None:
        """Digits to put on the clipboard, or None when nothing is resolved."""
        return copyable_code(self.code(table, alphabet))

    def clear(self) -> None:
        self.slots.clear()
