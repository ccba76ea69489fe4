from __future__ import annotations
from typing import Optional

from ..reference import astro_args as aa
from ..reference import solar
from .time import split_instant, time_frac_day
from .types import LocationConfig, SolarSnapshot


def compute_snapshot(location: LocationConfig, instant: int) -> SolarSnapshot:
    """
    Run the full solar pipeline for one site and one instant.

    ``instant`` is seconds since 1970-01-01 read on the site's wall clock:
    its calendar day and time of day are the local ones, and the zone offset
    refers it back to GMT. Raises DomainError for polar day/night.
    """
    instant = int(instant)
    tz, lat, lon = location.tz_offset, location.lat, location.lon

    # time decomposition
    frac = time_frac_day(instant)
    unix_days, _ = split_instant(instant)
    jd = aa.julian_day(unix_days, frac, tz)
    T = aa.T_centuries(jd)

    # orbit
    sm = aa.solar_mean_elements(T)
    coords = solar.solar_longitude(T, sm)
    eps0 = aa.mean_obliquity_deg(T)
    eps = aa.obliquity_correction_deg(T, eps0)

    # equatorial
    ra = solar.right_ascension_deg(coords.L_app_deg, eps)
    dec = solar.solar_declination_deg(coords.L_app_deg, eps)
    y = solar.var_y(eps)
    eot = solar.equation_of_time_minutes(sm, y)

    # daily events
    has = solar.sunrise_hour_angle_deg(lat, dec)
    noon_frac = solar.solar_noon_frac(lon, eot)
    noon_days = solar.day_frac_to_days(unix_days, noon_frac, tz)
    rise_frac, set_frac = solar.sunrise_sunset_frac(noon_frac, has)
    sunrise_s = solar.day_frac_to_days(unix_days, rise_frac, tz) * 86400.0
    sunset_s = solar.day_frac_to_days(unix_days, set_frac, tz) * 86400.0

    # position
    tst = solar.true_solar_time_minutes(frac, eot, lon, tz)
    ha = solar.hour_angle_deg(tst)
    sza = solar.zenith_angle_deg(lat, dec, ha)
    sea = 90.0 - sza
    aar = solar.refraction_deg(sea)
    saa = solar.azimuth_deg(lat, dec, sza, ha)

    return SolarSnapshot(
        location=location,
        instant=instant,
        time_frac_day=frac,
        unix_days=unix_days,
        jd=jd,
        jc=T,
        mean_lon_deg=sm.L0_deg,
        mean_anom_deg=sm.M_deg,
        eccentricity=sm.e,
        eq_center_deg=coords.eq_center_deg,
        true_lon_deg=coords.L_true_deg,
        true_anom_deg=coords.M_true_deg,
        radius_au=coords.radius_au,
        app_lon_deg=coords.L_app_deg,
        mean_obliq_deg=eps0,
        obliq_corr_deg=eps,
        ra_deg=ra,
        dec_deg=dec,
        var_y=y,
        eot_min=eot,
        ha_sunrise_deg=has,
        noon_frac=noon_frac,
        noon_days=noon_days,
        noon_time=int(noon_days * 86400.0),
        sunrise_frac=rise_frac,
        sunrise_s=sunrise_s,
        sunrise_time=int(sunrise_s),
        sunset_frac=set_frac,
        sunset_s=sunset_s,
        sunset_time=int(sunset_s),
        daylight_min=solar.daylight_minutes(has),
        true_solar_time_min=tst,
        hour_angle_deg=ha,
        zenith_deg=sza,
        elevation_deg=sea,
        refraction_deg=aar,
        elevation_corr_deg=sea + aar,
        azimuth_deg=saa,
    )


class SolarPositionEngine:
    """
    Holds one observer site and remembers the last snapshot it produced.

    The projection helpers (``elevation()``, ``sunrise_instant()``, ...) read
    that snapshot; they never recompute. Not locked: use one engine per thread.
    """

    def __init__(self, location: Optional[LocationConfig] = None):
        self._location = location
        self._last: Optional[SolarSnapshot] = None

    @property
    def location(self) -> Optional[LocationConfig]:
        return self._location

    @property
    def last(self) -> Optional[SolarSnapshot]:
        return self._last

    def configure(self, tz_offset: int, lat: float, lon: float) -> None:
        """Replace the site. Values are not checked; see LocationConfig."""
        self._location = LocationConfig(tz_offset=int(tz_offset), lat=float(lat), lon=float(lon))
        self._last = None

    def compute(self, instant: int) -> SolarSnapshot:
        if self._location is None:
            raise RuntimeError("Engine not configured; call configure(tz_offset, lat, lon) first")
        last = self._last
        if last is not None and last.instant == int(instant) and last.location == self._location:
            return last
        self._last = compute_snapshot(self._location, instant)
        return self._last

    def _require_last(self) -> SolarSnapshot:
        if self._last is None:
            raise RuntimeError("No snapshot computed yet; call compute(instant) first")
        return self._last

    # --- projections over the last snapshot ---

    def elevation(self) -> float:
        """Refraction-corrected elevation (degrees)."""
        return self._require_last().elevation_corr_deg

    def azimuth(self) -> float:
        return self._require_last().azimuth_deg

    def zenith(self) -> float:
        return self._require_last().zenith_deg

    def sunrise_instant(self) -> int:
        return self._require_last().sunrise_time

    def sunset_instant(self) -> int:
        return self._require_last().sunset_time

    def solar_noon_instant(self) -> int:
        return self._require_last().noon_time

    def daylight_minutes(self) -> float:
        return self._require_last().daylight_min
