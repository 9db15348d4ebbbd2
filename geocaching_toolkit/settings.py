"""
Toolkit settings: default notations, map service, lock size and letter table.

Settings are stored as YAML under a top-level ``geocaching`` section:

    geocaching:
      input_format: DDM
      output_format: DD
      map_service: google
      lock_digits: 5
      alphabet: english
      letter_numbers:
        A: "1"
        B: "2"
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Union
import logging

import yaml

from geocaching_toolkit.alphabets import Alphabet, LetterNumberTable, normalize_table
from geocaching_toolkit.coordinate_converter import MapService
from geocaching_toolkit.coordinates import AngularFormat
from geocaching_toolkit.lock import DEFAULT_LOCK_DIGITS, validate_lock_digits

logger = logging.getLogger(__name__)

SETTINGS_SECTION = 'geocaching'


@dataclass
class ToolkitSettings:
    """User settings for the toolkit.

    Attributes:
        input_format: Notation coordinates are typed in
        output_format: Notation converted coordinates are shown in
        map_service: Service used for map links
        lock_digits: Number of dials on the lock (3-10)
        alphabet: Alphabet the letter table is keyed by
        letter_numbers: Letter -> digit text table
    """
    input_format: AngularFormat = AngularFormat.DDM
    output_format: AngularFormat = AngularFormat.DD
    map_service: MapService = MapService.GOOGLE
    lock_digits: int = DEFAULT_LOCK_DIGITS
    alphabet: Alphabet = Alphabet.ENGLISH
    letter_numbers: LetterNumberTable = field(default_factory=dict)

    @classmethod
    def from_yaml(cls, path: Union[str, Path]) -> 'ToolkitSettings':
        """Load settings from a YAML file.

        Args:
            path: Path to YAML settings file

        Returns:
            ToolkitSettings instance loaded from file

        Raises:
            FileNotFoundError: If the settings file does not exist
            ValueError: If the file is malformed or contains invalid values

        Example:
            >>> settings = ToolkitSettings.from_yaml('geocaching.yaml')
            >>> print(settings.lock_digits)
            5
        """
        settings_path = Path(path)

        if not settings_path.exists():
            raise FileNotFoundError(
                f"Settings file not found: {path}\n"
                f"Create one with 'geo config init {path}' or use get_default_settings()"
            )

        try:
            with open(settings_path, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ValueError(f"Failed to parse YAML settings file: {e}") from e

        if not data:
            raise ValueError(
                f"Settings file is empty: {path}\n"
                f"Expected a '{SETTINGS_SECTION}' section"
            )

        if not isinstance(data, dict) or SETTINGS_SECTION not in data:
            raise ValueError(
                f"Settings file missing '{SETTINGS_SECTION}' section: {path}\n"
                f"Expected structure: {SETTINGS_SECTION}:\n  input_format: ...\n  ..."
            )

        logger.debug(f"Loaded settings from {settings_path}")
        return cls.from_dict(data[SETTINGS_SECTION] or {})

    @classmethod
    def from_dict(cls, config: Dict[str, Any]) -> 'ToolkitSettings':
        """Create settings from a dictionary.

        Missing keys keep their defaults.

        Args:
            config: Dictionary with any of the keys 'input_format',
                'output_format', 'map_service', 'lock_digits', 'alphabet'
                and 'letter_numbers'

        Returns:
            ToolkitSettings instance

        Raises:
            ValueError: If a value is invalid
        """
        if not isinstance(config, dict):
            raise ValueError(f"Settings must be a dictionary, got {type(config)}")

        settings = cls()

        if 'input_format' in config:
            settings.input_format = AngularFormat.parse(str(config['input_format']))
        if 'output_format' in config:
            settings.output_format = AngularFormat.parse(str(config['output_format']))
        if 'map_service' in config:
            settings.map_service = MapService.parse(str(config['map_service']))
        if 'lock_digits' in config:
            settings.lock_digits = validate_lock_digits(config['lock_digits'])
        if 'alphabet' in config:
            settings.alphabet = Alphabet.parse(str(config['alphabet']))

        letter_numbers = config.get('letter_numbers') or {}
        if not isinstance(letter_numbers, dict):
            raise ValueError(
                f"'letter_numbers' must be a mapping, got {type(letter_numbers)}"
            )
        settings.letter_numbers = normalize_table(letter_numbers, settings.alphabet)

        return settings

    def to_dict(self) -> Dict[str, Any]:
        """Convert settings to a dictionary suitable for YAML serialization."""
        return {
            'input_format': self.input_format.value,
            'output_format': self.output_format.value,
            'map_service': self.map_service.value,
            'lock_digits': self.lock_digits,
            'alphabet': self.alphabet.value,
            'letter_numbers': dict(self.letter_numbers),
        }

    def save_to_yaml(self, path: Union[str, Path]) -> None:
        """Save settings to a YAML file.

        Args:
            path: Destination path; parent directories are created

        Raises:
            IOError: If the file cannot be written
        """
        settings_path = Path(path)
        settings_path.parent.mkdir(parents=True, exist_ok=True)

        output = {SETTINGS_SECTION: self.to_dict()}

        try:
            with open(settings_path, 'w', encoding='utf-8') as f:
                yaml.safe_dump(output, f, default_flow_style=False, sort_keys=False,
                               allow_unicode=True)
        except IOError as e:
            raise IOError(f"Failed to write settings file: {e}") from e


def get_default_settings() -> ToolkitSettings:
    """Return the out-of-the-box settings.

    Returns:
        ToolkitSettings with DDM input, DD output, Google maps, a 5-digit
        lock, the English alphabet and an empty letter table
    """
    return ToolkitSettings()
