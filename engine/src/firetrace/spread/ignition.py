"""Fire arrival time template for a single fire ellipse."""

from __future__ import annotations

import math

from firetrace.geometry.ellipse import FireEllipse


class IgnitionTemplate:
    """Fire arrival times on a grid around an ellipse's ignition point.

    The grid bounds the head and back points with one extra cell on every
    side. Columns and rows are integer offsets (in units of `spacing`) from
    the ignition point; rows increase northward.
    """

    def __init__(self, ellipse: FireEllipse, spacing: float = 1.0):
        if spacing <= 0:
            raise ValueError(f"template spacing must be positive, got {spacing}")
        self.ellipse = ellipse
        self.spacing = spacing
        (hx, hy), (bx, by) = ellipse.head, ellipse.back
        self.left = math.floor(min(hx, bx) / spacing) - 1
        self.right = math.ceil(max(hx, bx) / spacing) + 1
        self.top = math.ceil(max(hy, by) / spacing) + 1
        self.bottom = math.floor(min(hy, by) / spacing) - 1
        # [row][col], row 0 is the top
        self._times = [
            [
                ellipse.beta_time_to_point(col * spacing, row * spacing)
                for col in range(self.left, self.right + 1)
            ]
            for row in range(self.top, self.bottom - 1, -1)
        ]

    @property
    def cols(self) -> int:
        return self.right - self.left + 1

    @property
    def rows(self) -> int:
        return self.top - self.bottom + 1

    def contains(self, col: int, row: int) -> bool:
        return self.left <= col <= self.right and self.bottom <= row <= self.top

    def time_at(self, col: int, row: int) -> float:
        """Arrival time at grid offset (col, row) from the ignition point."""
        if not self.contains(col, row):
            raise IndexError(f"({col}, {row}) is outside the ignition template")
        return self._times[self.top - row][col - self.left]

    def ignited_by(self, time: float) -> list[tuple[int, int]]:
        """Grid offsets the fire reaches at or before `time`."""
        return [
            (col, row)
            for row in range(self.top, self.bottom - 1, -1)
            for col in range(self.left, self.right + 1)
            if self.time_at(col, row) <= time
        ]
