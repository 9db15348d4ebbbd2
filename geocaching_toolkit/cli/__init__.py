"""CLI module for the geocaching toolkit.

Provides the `geo` command-line interface for coordinate conversion,
compass decoding and lock codes.
"""

from geocaching_toolkit.cli.main import app

__all__ = ["app"]
