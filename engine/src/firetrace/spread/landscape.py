"""Scanline landscape for fire perimeter growth.

The landscape is a rectangle [0, width] x [0, height] covered by two sets
of regularly spaced scanlines: horizontal rows at y = 0, s, 2s, ... and
vertical columns at x = 0, s, 2s, .... Each scanline is an IntervalLine
that starts out Unburned and ends with an Edge sentinel.

Growth step:
    behavior = landscape.fire_behavior_at(x, y, t)
    ellipse  = FireEllipse(behavior.length, behavior.width, behavior.heading)
    wavelet  = rasterize_wavelet(ellipse, landscape.spacing)
    fronts   = landscape.apply_wavelet(x, y, wavelet)

`spread_from()` runs the whole step for one ignition point.
"""

from __future__ import annotations

import logging
import math

from firetrace.config import LandscapeConfig, SiteDefaults
from firetrace.exceptions import SpreadModelMissing
from firetrace.geometry.ellipse import FireEllipse
from firetrace.mesh.interval import IntervalLine
from firetrace.spread.behavior import FireBehaviorProvider, SpreadModel
from firetrace.spread.wavelet import FireWavelet, rasterize_wavelet
from firetrace.types import BurnStatus, Chord, FireBehavior, SiteConditions

logger = logging.getLogger(__name__)


class ScanlineArray:
    """Regularly spaced parallel scanlines between two world positions.

    Attributes:
        start: World position of the first scanline
        stop: World position bounding the last scanline
        spacing: Absolute distance between adjacent scanlines
        extent: Length of every scanline (from 0)
    """

    def __init__(self, start: float, stop: float, spacing: float, extent: float):
        self.start = start
        self.stop = stop
        self.spacing = abs(spacing)
        self.step = self.spacing if start <= stop else -self.spacing
        self.extent = extent
        count = math.floor(abs(stop - start) / self.spacing + 1e-9) + 1
        self._lines = [
            IntervalLine.filled(start + idx * self.step, 0.0, extent) for idx in range(count)
        ]

    def __len__(self) -> int:
        return len(self._lines)

    def __getitem__(self, idx: int) -> IntervalLine:
        return self._lines[idx]

    @property
    def lines(self) -> list[IntervalLine]:
        return self._lines

    def idx_at(self, pos: float) -> int:
        """Index of the scanline nearest `pos`, clamped to the array."""
        idx = (pos - self.start) / self.step
        idx = max(0.0, min(len(self._lines) - 1.0, idx))
        return math.floor(idx + 0.5)

    def line_at(self, pos: float) -> IntervalLine:
        return self._lines[self.idx_at(pos)]

    def covers(self, pos: float) -> bool:
        """True if `pos` is within half a spacing of some scanline."""
        lo, hi = sorted((self.start, self._lines[-1].pos))
        half = self.spacing / 2.0
        return lo - half <= pos <= hi + half


class Landscape:
    """Horizontal and vertical scanlines recording where fire has burned.

    Attributes:
        config: Validated landscape configuration
        provider: Memoized fire behavior source (None without a spread model)
    """

    def __init__(
        self,
        width: float,
        height: float,
        spacing: float = 1.0,
        time_res: float = 1.0,
        spread_model: SpreadModel | None = None,
        site: SiteDefaults | None = None,
    ):
        """Initialize landscape.

        Args:
            width: Extent along x (world units)
            height: Extent along y (world units)
            spacing: Distance between adjacent scanlines
            time_res: Simulation time step, used to size fire ellipses
            spread_model: External surface fire model (None = geometry only)
            site: Uniform site inputs (None = SiteDefaults())

        Raises:
            pydantic.ValidationError: if any extent, spacing or time step
                is not positive.
        """
        self.config = LandscapeConfig(
            width=width,
            height=height,
            spacing=spacing,
            time_res=time_res,
            site=site if site is not None else SiteDefaults(),
        )
        self.provider = FireBehaviorProvider(spread_model) if spread_model is not None else None
        self._site = self.config.site.to_conditions()
        self._hlines = ScanlineArray(0.0, height, spacing, width)
        self._vlines = ScanlineArray(0.0, width, spacing, height)
        logger.info(
            "Created landscape %.1f x %.1f, spacing=%s: %d rows, %d columns",
            width,
            height,
            spacing,
            len(self._hlines),
            len(self._vlines),
        )

    @classmethod
    def from_config(
        cls, config: LandscapeConfig, spread_model: SpreadModel | None = None
    ) -> Landscape:
        return cls(
            config.width,
            config.height,
            config.spacing,
            config.time_res,
            spread_model=spread_model,
            site=config.site,
        )

    @property
    def width(self) -> float:
        return self.config.width

    @property
    def height(self) -> float:
        return self.config.height

    @property
    def spacing(self) -> float:
        return self.config.spacing

    @property
    def time_res(self) -> float:
        return self.config.time_res

    @property
    def hlines(self) -> list[IntervalLine]:
        return self._hlines.lines

    @property
    def vlines(self) -> list[IntervalLine]:
        return self._vlines.lines

    def hline(self, idx: int) -> IntervalLine:
        return self._hlines[idx]

    def vline(self, idx: int) -> IntervalLine:
        return self._vlines[idx]

    def row(self, y: float) -> int:
        """Index of the horizontal scanline nearest `y`."""
        return self._hlines.idx_at(y)

    def col(self, x: float) -> int:
        """Index of the vertical scanline nearest `x`."""
        return self._vlines.idx_at(x)

    def status_at(self, x: float, y: float) -> BurnStatus | None:
        """Burn status at (x, y) read from the nearest row."""
        return self.hline(self.row(y)).value_at(x)

    def update_scanline_with_fire(
        self, begins: float, ends: float, scanline: IntervalLine
    ) -> IntervalLine:
        """Burn the Unburned portions of [begins, ends] on `scanline`.

        Segments with any other status are left as they are.

        Returns:
            The updated scanline.
        """
        lo, hi = min(begins, ends), max(begins, ends)
        unburned = [
            s for s in scanline.segments_between(lo, hi) if s.status is BurnStatus.UNBURNED
        ]
        for segment in unburned:
            scanline.overlay(max(lo, segment.begins), min(hi, segment.ends), BurnStatus.BURNED)
        return scanline

    def scanline_fire_fronts(self, scanline: IntervalLine) -> list[float]:
        return scanline.scanline_fire_fronts()

    def _burn_chords(
        self, chords: list[Chord], lines: ScanlineArray, dpos: float, dalong: float
    ) -> dict[int, IntervalLine]:
        changed: dict[int, IntervalLine] = {}
        for chord in chords:
            world = chord.translated(dpos, dalong)
            if not lines.covers(world.pos):
                continue
            idx = lines.idx_at(world.pos)
            line = lines[idx]
            before = line.segments
            self.update_scanline_with_fire(world.begins, world.ends, line)
            if line.segments != before:
                changed[idx] = line
        return changed

    def apply_wavelet(self, x: float, y: float, wavelet: FireWavelet) -> list[tuple[float, float]]:
        """Burn a wavelet ignited at (x, y) into the scanlines.

        Returns:
            World (x, y) fire front points of every scanline whose status
            changed: rows first (north to south), then columns (west to east).
        """
        rows = self._burn_chords(wavelet.h_chords, self._hlines, y, x)
        cols = self._burn_chords(wavelet.v_chords, self._vlines, x, y)
        fronts = [
            (front, line.pos) for line in rows.values() for front in line.scanline_fire_fronts()
        ]
        fronts.extend(
            (line.pos, front) for line in cols.values() for front in line.scanline_fire_fronts()
        )
        logger.debug(
            "Wavelet at (%.2f, %.2f) changed %d rows and %d columns, %d fronts",
            x,
            y,
            len(rows),
            len(cols),
            len(fronts),
        )
        return fronts

    def site_conditions(self, x: float, y: float, time: float = 0.0) -> SiteConditions:
        """Site inputs at a place and time; uniform unless overridden."""
        return self._site

    def fire_behavior_at(self, x: float, y: float, time: float = 0.0) -> FireBehavior:
        """Fire behavior at (x, y), with ellipse size for one time step.

        Raises:
            SpreadModelMissing: if the landscape was built without a spread model.
        """
        if self.provider is None:
            raise SpreadModelMissing("landscape has no spread model for fire behavior")
        conditions = self.site_conditions(x, y, time)
        return self.provider.fire_behavior(conditions).over(self.time_res)

    def spread_from(self, x: float, y: float, time: float = 0.0) -> list[tuple[float, float]]:
        """Grow fire from (x, y) over one time step and return the new fronts."""
        behavior = self.fire_behavior_at(x, y, time)
        if behavior.length <= 0.0 or behavior.width <= 0.0:
            return []  # No spread
        ellipse = FireEllipse(behavior.length, behavior.width, behavior.heading, self.time_res)
        return self.apply_wavelet(x, y, rasterize_wavelet(ellipse, self.spacing))

    def burned_area(self) -> float:
        """Burned area estimated from the rows."""
        return sum(line.burned_length() for line in self.hlines) * self.spacing
