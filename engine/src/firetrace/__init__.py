"""Scanline fire perimeter growth from elliptical wavelets."""

from firetrace.exceptions import InvalidGeometry, SpreadModelMissing
from firetrace.types import BurnStatus

__version__ = "0.1.0"

__all__ = ["BurnStatus", "InvalidGeometry", "SpreadModelMissing", "__version__"]
