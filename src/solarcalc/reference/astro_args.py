# reference/astro_args.py
from __future__ import annotations

import math
from dataclasses import dataclass


# ------------------------------------------------------------
# Units & helpers
# ------------------------------------------------------------

def floor_mod(x: float, m: float) -> float:
    """
    Mathematical modulo: result has the sign of ``m``.

    Written out as x - m*floor(x/m) rather than math.fmod, which keeps the
    sign of ``x``.
    """
    r = x - m * math.floor(x / m)
    # tiny negative x rounds up to exactly m
    return 0.0 if r == m else r

def wrap_deg(x_deg: float) -> float:
    """Wrap degrees to [0,360)."""
    return floor_mod(x_deg, 360.0)

def wrap_minutes(x_min: float) -> float:
    """Wrap minutes of day to [0,1440)."""
    return floor_mod(x_min, 1440.0)

def arcsec_to_deg(arcsec: float) -> float:
    return arcsec / 3600.0

def sin_deg(x_deg: float) -> float:
    return math.sin(math.radians(x_deg))

def cos_deg(x_deg: float) -> float:
    return math.cos(math.radians(x_deg))

def tan_deg(x_deg: float) -> float:
    return math.tan(math.radians(x_deg))


# ------------------------------------------------------------
# Time variable
# ------------------------------------------------------------

J2000 = 2451545.0       # JD at J2000.0
JD_UNIX_EPOCH = 2440587.5  # JD at 1970-01-01 00:00


def julian_day(unix_days: int, time_frac_day: float, tz_offset: int) -> float:
    """
    JD of a wall-clock moment, referred back to Greenwich.

    The wall-clock date/time is taken as if it were GMT, then shifted by the
    zone offset (zones west of GMT are negative, so they move forward).
    """
    jd = JD_UNIX_EPOCH + unix_days
    jd = jd + time_frac_day
    return jd - tz_offset / 24.0


def T_centuries(jd: float) -> float:
    """Julian centuries from J2000.0."""
    return (jd - J2000) / 36525.0


# ------------------------------------------------------------
# Sun mean elements (NOAA spreadsheet / Meeus ch. 25, low accuracy)
# ------------------------------------------------------------

@dataclass(frozen=True)
class SolarMean:
    L0_deg: float  # geometric mean longitude, wrapped to [0,360)
    M_deg: float   # geometric mean anomaly, not wrapped
    e: float       # eccentricity of Earth orbit


def solar_mean_elements(T: float) -> SolarMean:
    """
    Geometric mean longitude L0, mean anomaly M and orbital eccentricity e:

      L0 = 280.46646 + 36000.76983 T + 0.0003032 T^2
      M  = 357.52911 + 35999.05029 T - 0.0001537 T^2
      e  = 0.016708634 - 0.000042037 T - 0.0000001267 T^2

    M is left unreduced; only its sines and cosines are ever used.
    """
    L0 = 280.46646 + T * (36000.76983 + T * 0.0003032)
    M = 357.52911 + T * (35999.05029 - 0.0001537 * T)
    e = 0.016708634 - T * (0.000042037 + 0.0000001267 * T)
    return SolarMean(L0_deg=wrap_deg(L0), M_deg=M, e=e)


def node_deg(T: float) -> float:
    """Low-accuracy longitude of the Moon's ascending node, Omega (degrees)."""
    return 125.04 - 1934.136 * T


# ------------------------------------------------------------
# Obliquity of the ecliptic
# ------------------------------------------------------------

def mean_obliquity_deg(T: float) -> float:
    """
    Mean obliquity of the ecliptic (degrees), IAU 1980 cubic:
        eps = 23°26'21.448" - 46.8150"T - 0.00059"T^2 + 0.001813"T^3
    evaluated in the nested arcsecond form.
    """
    seconds = 21.448 - T * (46.815 + T * (0.00059 - T * 0.001813))
    return 23.0 + (26.0 + seconds / 60.0) / 60.0


def obliquity_correction_deg(T: float, eps0_deg: float) -> float:
    """Obliquity corrected for the leading nutation term (degrees)."""
    return eps0_deg + 0.00256 * cos_deg(node_deg(T))
