from __future__ import annotations
from dataclasses import dataclass, fields, replace
from typing import Any, Dict


@dataclass(frozen=True)
class LocationConfig:
    """Observer site. West longitudes and west time zones are negative."""
    tz_offset: int   # hours from UTC, e.g. -8 for Pacific Standard Time
    lat: float       # degrees north
    lon: float       # degrees east

    def tweak(self, **changes: Any) -> "LocationConfig":
        return replace(self, **changes)


@dataclass(frozen=True)
class SolarSnapshot:
    """
    Every quantity derived for one (location, instant) pair.

    Angles are degrees, durations minutes, instants seconds since 1970-01-01 in
    the location's wall-clock frame. The ``*_time`` fields are the float instants
    truncated to whole seconds.
    """
    location: LocationConfig
    instant: int

    # time decomposition
    time_frac_day: float
    unix_days: int
    jd: float
    jc: float

    # orbital geometry
    mean_lon_deg: float
    mean_anom_deg: float
    eccentricity: float
    eq_center_deg: float
    true_lon_deg: float
    true_anom_deg: float
    radius_au: float
    app_lon_deg: float
    mean_obliq_deg: float
    obliq_corr_deg: float

    # equatorial coordinates
    ra_deg: float
    dec_deg: float
    var_y: float
    eot_min: float

    # daily events
    ha_sunrise_deg: float
    noon_frac: float
    noon_days: float
    noon_time: int
    sunrise_frac: float
    sunrise_s: float
    sunrise_time: int
    sunset_frac: float
    sunset_s: float
    sunset_time: int
    daylight_min: float

    # instantaneous position
    true_solar_time_min: float
    hour_angle_deg: float
    zenith_deg: float
    elevation_deg: float
    refraction_deg: float
    elevation_corr_deg: float
    azimuth_deg: float

    def as_dict(self) -> Dict[str, float]:
        """Numeric fields in pipeline order (location and instant excluded)."""
        return {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if f.name not in ("location", "instant")
        }
