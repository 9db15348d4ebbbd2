"""Fixed-size rows of single-letter input slots with focus tracking."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

logger = logging.getLogger(__name__)


def filter_letter(text: str) -> str:
    """Upper-case ``text``, keep letters only and return the first one (or "")."""
    letters = [char for char in text.upper() if char.isalpha()]
    return letters[0] if letters else ""


@dataclass
class LetterSlots:
    """
    A row of slots, each holding zero or one upper-case letter.

    Filling an empty slot moves focus to the next slot in entry order:
    upwards for a forward row, downwards for a reversed row (distance is
    typed right to left). Filling the final slot in entry order clears
    focus; clearing a slot never moves it.

    Attributes:
        size: Number of slots.
        reverse: Entry order runs from the last index to index 0.
        slots: Slot contents, "" for empty.
        focused_index: Slot that receives the next letter, or None.
    """

    size: int
    reverse: bool = False
    slots: list[str] = field(default_factory=list)
    focused_index: int | None = None

    def __post_init__(self) -> None:
        if self.size < 1:
            raise ValueError(f"A slot row needs at least one slot, got {self.size}")
        self.slots = self._fit(self.slots, self.size)

    @staticmethod
    def _fit(letters: list[str], size: int) -> list[str]:
        fitted = [filter_letter(letter) for letter in letters[:size]]
        return fitted + [""] * (size - len(fitted))

    @classmethod
    def from_text(cls, text: str, size: int, reverse: bool = False) -> LetterSlots:
        """Fill slots left to right from a stored letter string.

        Letters beyond ``size`` are dropped with a warning.
        """
        dropped = [letter for letter in map(filter_letter, text[size:]) if letter]
        if dropped:
            logger.warning(
                f"Dropping {''.join(dropped)!r}: only {size} slot(s) available for {text!r}"
            )
        return cls(size=size, reverse=reverse, slots=list(text))

    def to_text(self) -> str:
        """Stored form; empty slots become spaces so positions survive."""
        return "".join(letter or " " for letter in self.slots)

    @property
    def first_index(self) -> int:
        """Index where entry starts."""
        return self.size - 1 if self.reverse else 0

    def is_empty(self) -> bool:
        return not any(self.slots)

    def enter(self, index: int, text: str) -> None:
        """
        Type ``text`` into slot ``index``.

        Raises:
            IndexError: If index is outside the row
        """
        if not 0 <= index < self.size:
            raise IndexError(f"Slot index {index} out of range for {self.size} slots")

        letter = filter_letter(text)
        was_empty = not self.slots[index]
        self.slots[index] = letter

        if letter and was_empty:
            self.focused_index = self._next_index(index)

    def _next_index(self, index: int) -> int | None:
        following = index - 1 if self.reverse else index + 1
        return following if 0 <= following < self.size else None

    def focus(self, index: int | None) -> None:
        if index is not None and not 0 <= index < self.size:
            raise IndexError(f"Slot index {index} out of range for {self.size} slots")
        self.focused_index = index

    def clear(self) -> None:
        self.slots = [""] * self.size
        self.focused_index = None

    def resize(self, size: int) -> None:
        """Change the slot count, keeping the leading letters."""
        if size < 1:
            raise ValueError(f"A slot row needs at least one slot, got {size}")
        self.slots = self._fit(self.slots, size)
        self.size = size
        self.focused_index = None
