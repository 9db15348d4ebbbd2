"""
Unit type annotations for angular quantities.

These NewType aliases document which angular unit a number carries. They are
erased at runtime and only help static checkers catch mixed-up units, e.g.
passing decimal minutes where whole degrees are expected.

Usage Example:
    >>> from geocaching_toolkit.types import Degrees, DecimalDegrees
    >>>
    >>> def bearing_to(azimuth: Degrees) -> DecimalDegrees:
    ...     pass
"""

from typing import NewType

Degrees = NewType('Degrees', int)
"""Whole degrees of arc (e.g., the integer part of a latitude, an azimuth)"""

Minutes = NewType('Minutes', int)
"""Whole minutes of arc, canonical range 0-59"""

Seconds = NewType('Seconds', int)
"""Whole seconds of arc, canonical range 0-59"""

DecimalDegrees = NewType('DecimalDegrees', float)
"""Fractional degrees (magnitude or signed, see the function signature)"""

DecimalMinutes = NewType('DecimalMinutes', float)
"""Minutes plus fractional minutes of arc"""
