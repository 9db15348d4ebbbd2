"""Alphabets available for letter-to-number tables."""

from __future__ import annotations

import logging
from enum import Enum
from typing import Mapping

logger = logging.getLogger(__name__)

ENGLISH_LETTERS = tuple("ABCDEFGHIJKLMNOPQRSTUVWXYZ")
POLISH_LETTERS = tuple("AĄBCĆDEĘFGHIJKLŁMNŃOÓPQRSŚTUVWXYZŹŻ")

LetterNumberTable = dict[str, str]
"""Upper-case letter -> digit text (usually a single digit, may be empty)."""


class Alphabet(Enum):
    """Letter sets a puzzle table can be keyed by."""

    ENGLISH = "english"
    POLISH = "polish"

    @property
    def letters(self) -> tuple[str, ...]:
        return POLISH_LETTERS if self is Alphabet.POLISH else ENGLISH_LETTERS

    def __contains__(self, letter: object) -> bool:
        return letter in self.letters

    @classmethod
    def parse(cls, value: str) -> Alphabet:
        """Parse an alphabet name (case-insensitive).

        Raises:
            ValueError: If value is not a known alphabet
        """
        try:
            return cls(value.strip().lower())
        except ValueError:
            valid = [a.value for a in cls]
            raise ValueError(
                f"Invalid alphabet '{value}'. Must be one of: {', '.join(valid)}"
            ) from None


def normalize_table(mapping: Mapping[str, object], alphabet: Alphabet) -> LetterNumberTable:
    """
    Clean a user-supplied letter-number mapping.

    Keys are upper-cased and values stripped; keys that are not a single
    letter of ``alphabet`` are dropped with a warning. ``None`` values become
    empty strings.

    Args:
        mapping: Raw mapping, e.g. loaded from YAML
        alphabet: Active alphabet

    Returns:
        New table with valid keys only
    """
    table: LetterNumberTable = {}
    for key, value in mapping.items():
        letter = str(key).strip().upper()
        if letter not in alphabet:
            logger.warning(f"Dropping '{key}' from letter table: not a letter of the {alphabet.value} alphabet")
            continue
        table[letter] = "" if value is None else str(value).strip()
    return table
