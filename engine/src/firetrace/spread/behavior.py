"""Memoized fire behavior lookups.

Surface fire physics is supplied by an external spread model: any callable
taking SiteConditions and returning SurfaceSpread (head spread rate and
heading, optionally the ellipse length-to-width ratio). The provider turns
that into full fire ellipse behavior and caches it, since many landscape
cells share identical fuel, moisture, wind and slope conditions.
"""

from __future__ import annotations

import logging
from typing import Callable

from firetrace.geometry.ellipse import (
    calculate_back_ros,
    calculate_flank_ros,
    calculate_length_to_breadth_ratio,
)
from firetrace.types import FireBehavior, SiteConditions, SurfaceSpread

logger = logging.getLogger(__name__)

SpreadModel = Callable[[SiteConditions], SurfaceSpread]

KMH_PER_FT_MIN = 0.018288


class FireBehaviorProvider:
    """Fire ellipse behavior for site conditions, cached by condition key."""

    def __init__(self, spread_model: SpreadModel):
        self.spread_model = spread_model
        self._cache: dict[str, FireBehavior] = {}

    @property
    def cache_size(self) -> int:
        return len(self._cache)

    def clear_cache(self) -> None:
        self._cache.clear()

    def fire_behavior(self, conditions: SiteConditions) -> FireBehavior:
        """Return fire behavior for `conditions`, running the model at most once per key."""
        key = conditions.cache_key()
        cached = self._cache.get(key)
        if cached is not None:
            return cached

        spread = self.spread_model(conditions)
        lwr = spread.lwr
        if lwr is None:
            lwr = calculate_length_to_breadth_ratio(conditions.wind_speed * KMH_PER_FT_MIN)
        lwr = max(lwr, 1.0)

        behavior = FireBehavior(
            key=key,
            lwr=lwr,
            head_ros=spread.head_ros,
            back_ros=calculate_back_ros(spread.head_ros, lwr),
            flank_ros=calculate_flank_ros(spread.head_ros, lwr),
            heading=spread.heading % 360.0,
        )
        logger.debug("Fire behavior for %s: head_ros=%.3f lwr=%.3f", key, behavior.head_ros, lwr)
        self._cache[key] = behavior
        return behavior
