"""Shared dataclasses and type definitions for firetrace."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum


class BurnStatus(str, Enum):
    """Burn status of a scanline interval."""

    UNBURNED = "unburned"
    BURNING = "burning"
    BURNED = "burned"
    EDGE = "edge"  # scanline extent sentinel
    UNBURNABLE = "unburnable"  # immutable boundary

    @property
    def is_sentinel(self) -> bool:
        return self in (BurnStatus.EDGE, BurnStatus.UNBURNABLE)

    @property
    def is_burnt(self) -> bool:
        """True for statuses that count as fire on the landscape."""
        return self in (BurnStatus.BURNING, BurnStatus.BURNED)


@dataclass(frozen=True)
class Chord:
    """One scanline crossing of a wavelet ellipse.

    For horizontal chords `pos` is the y coordinate and begins/ends are x
    coordinates; vertical chords swap the roles.
    """

    pos: float
    begins: float
    ends: float

    def __post_init__(self) -> None:
        if self.begins > self.ends:
            lo, hi = self.ends, self.begins
            object.__setattr__(self, "begins", lo)
            object.__setattr__(self, "ends", hi)

    @property
    def length(self) -> float:
        return self.ends - self.begins

    def translated(self, dpos: float, dalong: float) -> Chord:
        """Shift the chord by dpos across and dalong along the scanline."""
        return Chord(self.pos + dpos, self.begins + dalong, self.ends + dalong)


@dataclass(frozen=True)
class SiteConditions:
    """Fuel, moisture, terrain and wind inputs for one landscape location."""

    fuel_model: str
    cured_herb: float  # fraction
    dead_1h: float  # fraction
    dead_10h: float
    dead_100h: float
    live_herb: float
    live_stem: float
    slope: float  # rise / reach ratio
    aspect: float  # degrees clockwise from north
    wind_speed: float  # midflame, ft/min
    wind_from: float  # degrees clockwise from north

    def cache_key(self) -> str:
        """Key identifying conditions that yield identical fire behavior."""
        return "|".join(
            [
                self.fuel_model,
                f"{self.cured_herb:.3f}",
                f"{self.dead_1h:.2f}",
                f"{self.dead_10h:.2f}",
                f"{self.dead_100h:.2f}",
                f"{self.live_herb:.2f}",
                f"{self.live_stem:.2f}",
                f"{self.slope:.2f}",
                f"{self.aspect:.0f}",
                f"{self.wind_from:.0f}",
                f"{self.wind_speed:.0f}",
            ]
        )


@dataclass(frozen=True)
class SurfaceSpread:
    """Output of an external surface fire spread model."""

    head_ros: float  # distance per unit time
    heading: float  # degrees clockwise from north
    lwr: float | None = None  # length-to-width ratio; estimated from wind if None


@dataclass(frozen=True)
class FireBehavior:
    """Fire ellipse behavior at a location."""

    key: str
    lwr: float
    head_ros: float
    back_ros: float
    flank_ros: float
    heading: float  # degrees clockwise from north
    length: float = 0.0  # ellipse length over one time step
    width: float = 0.0  # ellipse width over one time step

    def over(self, time_step: float) -> FireBehavior:
        """Return a copy with ellipse length and width for `time_step`."""
        return replace(
            self,
            length=time_step * (self.head_ros + self.back_ros),
            width=time_step * 2.0 * self.flank_ros,
        )
