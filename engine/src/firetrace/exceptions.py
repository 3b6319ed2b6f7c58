"""Exceptions raised by firetrace."""

from __future__ import annotations


class InvalidGeometry(ValueError):
    """A fire ellipse was given a non-positive length or width."""


class SpreadModelMissing(RuntimeError):
    """Fire behavior was requested from a landscape with no spread model."""
