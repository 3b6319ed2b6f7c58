"""Pydantic models for landscape configuration."""

from __future__ import annotations

from pydantic import BaseModel, Field

from firetrace.types import SiteConditions


class SiteDefaults(BaseModel):
    """Uniform site inputs used where a landscape has no spatial data."""

    fuel_model: str = Field(default="124", description="Fuel model catalog key")
    cured_herb: float = Field(default=0.778, ge=0, le=1, description="Cured herb fraction")
    dead_1h: float = Field(default=0.05, ge=0, description="Dead 1-h fuel moisture (fraction)")
    dead_10h: float = Field(default=0.07, ge=0, description="Dead 10-h fuel moisture (fraction)")
    dead_100h: float = Field(default=0.09, ge=0, description="Dead 100-h fuel moisture (fraction)")
    live_herb: float = Field(default=0.5, ge=0, description="Live herb fuel moisture (fraction)")
    live_stem: float = Field(default=1.5, ge=0, description="Live stem fuel moisture (fraction)")
    slope: float = Field(default=0.25, ge=0, description="Slope steepness (rise / reach)")
    aspect: float = Field(
        default=135.0, ge=0, lt=360, description="Slope aspect (degrees clockwise from north)"
    )
    wind_speed: float = Field(default=880.0, ge=0, description="Midflame wind speed (ft/min)")
    wind_from: float = Field(
        default=315.0, ge=0, lt=360, description="Wind source direction (degrees from north)"
    )

    def to_conditions(self) -> SiteConditions:
        return SiteConditions(
            fuel_model=self.fuel_model,
            cured_herb=self.cured_herb,
            dead_1h=self.dead_1h,
            dead_10h=self.dead_10h,
            dead_100h=self.dead_100h,
            live_herb=self.live_herb,
            live_stem=self.live_stem,
            slope=self.slope,
            aspect=self.aspect,
            wind_speed=self.wind_speed,
            wind_from=self.wind_from,
        )


class LandscapeConfig(BaseModel):
    """Extent and resolution of a scanline landscape."""

    width: float = Field(..., gt=0, description="Landscape width (world units)")
    height: float = Field(..., gt=0, description="Landscape height (world units)")
    spacing: float = Field(default=1.0, gt=0, description="Distance between adjacent scanlines")
    time_res: float = Field(default=1.0, gt=0, description="Simulation time step")
    site: SiteDefaults = Field(default_factory=SiteDefaults)
