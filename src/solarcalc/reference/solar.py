# reference/solar.py
"""
Low-accuracy solar model of the NOAA solar calculator spreadsheet
(Meeus, Astronomical Algorithms, ch. 25 and 28).

Each function is one stage of the pipeline assembled in
``solarcalc.core.engine``. Good to about a minute of time for 1901-2099 and
latitudes within +/-72 degrees.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from ..core.errors import DomainError
from . import astro_args as aa

SUNRISE_ZENITH_DEG = 90.833  # geometric horizon + refraction + solar semi-diameter

# acos arguments may overshoot [-1, 1] by this much from rounding alone
ACOS_SLACK = 1e-9


@dataclass(frozen=True)
class SolarCoordinates:
    """Ecliptic solar coordinates (degrees) and distance (AU)."""
    eq_center_deg: float
    L_true_deg: float
    M_true_deg: float
    L_app_deg: float
    radius_au: float


def solar_longitude(T: float, sm: aa.SolarMean) -> SolarCoordinates:
    """True and apparent solar longitude from the mean elements."""
    M_rad = math.radians(sm.M_deg)

    # Equation of Center
    C_sun = (
        math.sin(M_rad) * (1.914602 - T * (0.004817 + 0.000014 * T))
        + math.sin(2.0 * M_rad) * (0.019993 - 0.000101 * T)
        + math.sin(3.0 * M_rad) * 0.000289
    )

    L_true = sm.L0_deg + C_sun
    M_true = sm.M_deg + C_sun

    R = (1.000001018 * (1.0 - sm.e * sm.e)) / (1.0 + sm.e * aa.cos_deg(M_true))

    # aberration and leading nutation term
    L_app = L_true - 0.00569 - 0.00478 * aa.sin_deg(aa.node_deg(T))

    return SolarCoordinates(
        eq_center_deg=C_sun,
        L_true_deg=L_true,
        M_true_deg=M_true,
        L_app_deg=L_app,
        radius_au=R,
    )


def right_ascension_deg(L_app_deg: float, eps_deg: float) -> float:
    """Apparent right ascension in (-180, 180]."""
    # atan2 keeps the quadrant
    y = aa.cos_deg(eps_deg) * aa.sin_deg(L_app_deg)
    x = aa.cos_deg(L_app_deg)
    return math.degrees(math.atan2(y, x))


def solar_declination_deg(L_app_deg: float, eps_deg: float) -> float:
    sin_delta = aa.sin_deg(eps_deg) * aa.sin_deg(L_app_deg)
    return math.degrees(math.asin(sin_delta))


def var_y(eps_deg: float) -> float:
    t = aa.tan_deg(eps_deg / 2.0)
    return t * t


def equation_of_time_minutes(sm: aa.SolarMean, y: float) -> float:
    """
    Equation of Time (apparent minus mean solar time) in minutes,
    Meeus (28.3).
    """
    L0 = math.radians(sm.L0_deg)
    M = math.radians(sm.M_deg)
    e = sm.e
    E = (
        y * math.sin(2.0 * L0)
        - 2.0 * e * math.sin(M)
        + 4.0 * e * y * math.sin(M) * math.cos(2.0 * L0)
        - 0.5 * y * y * math.sin(4.0 * L0)
        - 1.25 * e * e * math.sin(2.0 * M)
    )
    return 4.0 * math.degrees(E)


def _acos_deg(x: float, step: str) -> float:
    """acos in degrees; rounding overshoot is clamped, anything larger is a DomainError."""
    if math.isnan(x) or x < -1.0 - ACOS_SLACK or x > 1.0 + ACOS_SLACK:
        raise DomainError(step, x)
    return math.degrees(math.acos(min(1.0, max(-1.0, x))))


# ------------------------------------------------------------
# Daily events
# ------------------------------------------------------------

def sunrise_hour_angle_deg(lat_deg: float, dec_deg: float, zenith_deg: float = SUNRISE_ZENITH_DEG) -> float:
    """
    Hour angle of sunrise/sunset (degrees).

    Raises DomainError when the sun stays above (argument < -1) or below
    (argument > 1) the horizon for the whole day.
    """
    cos_H0 = (
        aa.cos_deg(zenith_deg) / (aa.cos_deg(lat_deg) * aa.cos_deg(dec_deg))
        - aa.tan_deg(lat_deg) * aa.tan_deg(dec_deg)
    )
    if cos_H0 > 1.0:
        raise DomainError("sunrise hour angle", cos_H0, "polar night: the sun does not rise")
    if cos_H0 < -1.0:
        raise DomainError("sunrise hour angle", cos_H0, "polar day: the sun does not set")
    return math.degrees(math.acos(cos_H0))


def solar_noon_frac(lon_deg: float, eot_min: float) -> float:
    """Solar noon as a fraction of the GMT day."""
    return (720.0 - 4.0 * lon_deg - eot_min) / 1440.0


def day_frac_to_days(unix_days: int, frac: float, tz_offset: int) -> float:
    """GMT day fraction on ``unix_days`` -> days since 1970-01-01 in the local frame."""
    return unix_days + frac + tz_offset / 24.0


def sunrise_sunset_frac(noon_frac: float, ha_sunrise_deg: float) -> tuple[float, float]:
    """Sunrise and sunset as fractions of the GMT day (4 minutes per degree)."""
    half = ha_sunrise_deg * 4.0 / 1440.0
    return noon_frac - half, noon_frac + half


def daylight_minutes(ha_sunrise_deg: float) -> float:
    return 8.0 * ha_sunrise_deg


# ------------------------------------------------------------
# Instantaneous position
# ------------------------------------------------------------

def true_solar_time_minutes(time_frac_day: float, eot_min: float, lon_deg: float, tz_offset: int) -> float:
    """True solar time in minutes, wrapped to [0,1440)."""
    tst = time_frac_day * 1440.0 + eot_min + 4.0 * lon_deg - 60.0 * tz_offset
    return aa.wrap_minutes(tst)


def hour_angle_deg(tst_min: float) -> float:
    """Hour angle (degrees), negative in the morning."""
    if tst_min / 4.0 < 0:
        return tst_min / 4.0 + 180.0
    return tst_min / 4.0 - 180.0


def zenith_angle_deg(lat_deg: float, dec_deg: float, ha_deg: float) -> float:
    """
    Solar zenith angle (degrees).

    The cosine is bounded by construction, so any overshoot is rounding and is
    clamped rather than reported.
    """
    cos_z = (
        aa.sin_deg(lat_deg) * aa.sin_deg(dec_deg)
        + aa.cos_deg(lat_deg) * aa.cos_deg(dec_deg) * aa.cos_deg(ha_deg)
    )
    return math.degrees(math.acos(min(1.0, max(-1.0, cos_z))))


def refraction_deg(elev_deg: float) -> float:
    """
    Approximate atmospheric refraction (degrees) for a geometric elevation.

    Piecewise in arcseconds:
      elev > 85            : 0
      5 < elev <= 85       : 58.1/t - 0.07/t^3 + 0.000086/t^5,  t = tan(elev)
      -0.575 < elev <= 5   : 1735 - 518.2 h + 103.4 h^2 - 12.79 h^3 + 0.711 h^4
      elev <= -0.575       : -20.772/tan(elev)
    """
    if elev_deg > 85.0:
        arcsec = 0.0
    elif elev_deg > 5.0:
        t = aa.tan_deg(elev_deg)
        arcsec = 58.1 / t - 0.07 / (t ** 3) + 0.000086 / (t ** 5)
    elif elev_deg > -0.575:
        h = elev_deg
        arcsec = 1735.0 + h * (-518.2 + h * (103.4 + h * (-12.79 + h * 0.711)))
    else:
        arcsec = -20.772 / aa.tan_deg(elev_deg)
    return aa.arcsec_to_deg(arcsec)


def azimuth_deg(lat_deg: float, dec_deg: float, zenith_deg: float, ha_deg: float) -> float:
    """
    Solar azimuth, degrees clockwise from north in [0,360).

    Undefined with the sun at the zenith or the observer at a pole; those raise
    DomainError.
    """
    den = aa.cos_deg(lat_deg) * aa.sin_deg(zenith_deg)
    num = aa.sin_deg(lat_deg) * aa.cos_deg(zenith_deg) - aa.sin_deg(dec_deg)
    if den == 0.0:
        raise DomainError("azimuth", math.copysign(math.inf, num) if num else math.nan,
                          "sun at zenith or observer at a pole")
    A = _acos_deg(num / den, "azimuth")
    if ha_deg > 0:
        return aa.wrap_deg(A + 180.0)
    return aa.wrap_deg(540.0 - A)
