"""Intersection of an axis-aligned ellipse and a straight line."""

from __future__ import annotations

import math


def ellipse_line_intersection(
    a: float,
    b: float,
    x1: float,
    y1: float,
    x2: float,
    y2: float,
    segment_only: bool = False,
) -> list[tuple[float, float]]:
    """Find the points where a line crosses an unrotated, origin-centered ellipse.

    The line P(u) = P1 + u * (P2 - P1) is substituted into
    (x/a)^2 + (y/b)^2 = 1, giving A*u^2 + B*u + C = 0.

    Args:
        a: Ellipse semi-axis along x
        b: Ellipse semi-axis along y
        x1, y1: First point on the line
        x2, y2: Second point on the line
        segment_only: If True, drop points outside the P1-P2 segment

    Returns:
        Zero, one (tangent) or two (x, y) points. Two points are ordered by
        ascending x. An empty ellipse or a zero-length line has no points.
    """
    if a <= 0 or b <= 0 or (x1 == x2 and y1 == y2):
        return []

    dx = x2 - x1
    dy = y2 - y1
    A = dx * dx / a / a + dy * dy / b / b
    B = 2.0 * x1 * dx / a / a + 2.0 * y1 * dy / b / b
    C = x1 * x1 / a / a + y1 * y1 / b / b - 1.0

    discriminant = B * B - 4.0 * A * C
    if discriminant == 0:
        roots = [-B / 2.0 / A]
    elif discriminant > 0:
        d = math.sqrt(discriminant)
        roots = [(-B + d) / 2.0 / A, (-B - d) / 2.0 / A]
    else:
        roots = []

    points = [
        (x1 + dx * u, y1 + dy * u)
        for u in roots
        if not segment_only or 0.0 <= u <= 1.0
    ]
    if len(points) == 2 and points[0][0] > points[1][0]:
        points.reverse()
    return points
