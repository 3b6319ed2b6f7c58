"""Planar rotation and compass-bearing helpers.

Fire headings are compass azimuths (degrees clockwise from north) while
rotations are geometric (counter-clockwise from the positive x axis, east).
"""

from __future__ import annotations

import math


def caz2rot(degrees: float) -> float:
    """Convert a compass azimuth into a geometric rotation (degrees)."""
    return (450.0 - degrees) % 360.0


def rot2caz(degrees: float) -> float:
    """Convert a geometric rotation into a compass azimuth (degrees)."""
    return (450.0 - degrees) % 360.0


def azimuth_of(x: float, y: float) -> float:
    """Compass azimuth (degrees clockwise from north) from the origin to (x, y)."""
    return (math.degrees(math.atan2(x, y)) + 360.0) % 360.0


def rotate_point(
    px: float, py: float, cx: float, cy: float, radians: float
) -> tuple[float, float]:
    """Rotate (px, py) counter-clockwise about (cx, cy)."""
    cos_r = math.cos(radians)
    sin_r = math.sin(radians)
    x = cos_r * (px - cx) - sin_r * (py - cy) + cx
    y = sin_r * (px - cx) + cos_r * (py - cy) + cy
    return x, y


def distance(x1: float, y1: float, x2: float, y2: float) -> float:
    return math.hypot(x2 - x1, y2 - y1)
