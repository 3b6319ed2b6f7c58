"""Wavelet rasterization onto horizontal and vertical scanlines.

A wavelet is one fire ellipse's worth of spread over a single time step.
It is represented by the chords cut from the ellipse by regularly spaced
scanlines: each scan line is moved into the ellipse's local frame
(translate by -center, rotate by -rotation), intersected with the
unrotated ellipse, and the crossings are moved back into the ignition
frame. Chord coordinates are relative to the ignition point at [0, 0].
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field

from firetrace.geometry.ellipse import FireEllipse
from firetrace.geometry.intersection import ellipse_line_intersection
from firetrace.geometry.trig import rotate_point
from firetrace.types import Chord

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FireWavelet:
    """Scanline chords of a fire ellipse.

    Attributes:
        ellipse: The rasterized fire ellipse
        spacing: Distance between adjacent scanlines
        h_chords: Horizontal chords, north to south (pos is y)
        v_chords: Vertical chords, west to east (pos is x)
    """

    ellipse: FireEllipse
    spacing: float
    h_chords: list[Chord] = field(default_factory=list)
    v_chords: list[Chord] = field(default_factory=list)


def scan_line(
    ellipse: FireEllipse, p1x: float, p1y: float, p2x: float, p2y: float
) -> list[tuple[float, float]]:
    """Intersect the (infinite) line through two points with a fire ellipse.

    Returns:
        Zero, one or two crossing points in ignition-frame coordinates.
    """
    cx, cy = ellipse.center
    rot = ellipse.rotation
    t1x, t1y = rotate_point(p1x - cx, p1y - cy, 0.0, 0.0, -rot)
    t2x, t2y = rotate_point(p2x - cx, p2y - cy, 0.0, 0.0, -rot)
    points = []
    for x, y in ellipse_line_intersection(ellipse.a, ellipse.b, t1x, t1y, t2x, t2y):
        x, y = rotate_point(x, y, 0.0, 0.0, rot)
        points.append((x + cx, y + cy))
    return points


def _scan_count(ellipse: FireEllipse, spacing: float) -> int:
    return math.ceil(ellipse.length / spacing) + 1


def scan_horizontal(ellipse: FireEllipse, spacing: float) -> list[Chord]:
    """Horizontal chords from north (positive y) to south."""
    lines = _scan_count(ellipse, spacing)
    x = spacing * lines
    chords = []
    for line in range(lines, -lines - 1, -1):
        y = line * spacing
        points = scan_line(ellipse, -x, y, x, y)
        if not points:
            continue
        # A tangent line still yields a zero-width chord
        (x1, _), (x2, _) = points[0], points[-1]
        chords.append(Chord(pos=y, begins=x1, ends=x2))
    return chords


def scan_vertical(ellipse: FireEllipse, spacing: float) -> list[Chord]:
    """Vertical chords from west (negative x) to east."""
    lines = _scan_count(ellipse, spacing)
    y = spacing * lines
    chords = []
    for line in range(-lines, lines + 1):
        x = line * spacing
        points = scan_line(ellipse, x, y, x, -y)
        if not points:
            continue
        (_, y1), (_, y2) = points[0], points[-1]
        chords.append(Chord(pos=x, begins=y1, ends=y2))
    return chords


def rasterize_wavelet(ellipse: FireEllipse, spacing: float = 1.0) -> FireWavelet:
    """Rasterize a fire ellipse into horizontal and vertical scanline chords.

    Args:
        ellipse: Fire ellipse with its ignition point at the origin
        spacing: Scanline spacing (world units, > 0)

    Returns:
        FireWavelet holding one chord per scanline crossed by the ellipse
    """
    if spacing <= 0:
        raise ValueError(f"scanline spacing must be positive, got {spacing}")
    wavelet = FireWavelet(
        ellipse=ellipse,
        spacing=spacing,
        h_chords=scan_horizontal(ellipse, spacing),
        v_chords=scan_vertical(ellipse, spacing),
    )
    logger.debug(
        "Rasterized %r at spacing %s: %d horizontal, %d vertical chords",
        ellipse,
        spacing,
        len(wavelet.h_chords),
        len(wavelet.v_chords),
    )
    return wavelet
