# tests/test_solar.py

import math

import pytest

from solarcalc.core.errors import DomainError
from solarcalc.reference import astro_args as aa
from solarcalc.reference import solar

# --- Meeus, Astronomical Algorithms (2nd Ed), Examples 25.a and 28.b ---
# 1992 October 13, 0h TD (JD 2448908.5)
# Targets:
# C = -1.89732, true longitude = 199.90988, R = 0.99766 AU
# apparent longitude = 199.90895, alpha = -161.61917, delta = -7.78507
# E = 13.71 min (low-accuracy formula 28.3)

@pytest.fixture
def meeus_1992():
    T = aa.T_centuries(2448908.5)
    sm = aa.solar_mean_elements(T)
    eps = aa.obliquity_correction_deg(T, aa.mean_obliquity_deg(T))
    return T, sm, eps

def test_meeus_solar_longitude(meeus_1992):
    T, sm, _ = meeus_1992
    coords = solar.solar_longitude(T, sm)

    assert coords.eq_center_deg == pytest.approx(-1.89732, abs=1e-5)
    assert coords.L_true_deg == pytest.approx(199.90988, abs=1e-4)
    assert coords.radius_au == pytest.approx(0.99766, abs=1e-5)
    assert coords.L_app_deg == pytest.approx(199.90895, abs=1e-4)
    assert coords.M_true_deg == pytest.approx(sm.M_deg + coords.eq_center_deg)

def test_meeus_equatorial(meeus_1992):
    T, sm, eps = meeus_1992
    L_app = solar.solar_longitude(T, sm).L_app_deg

    assert solar.right_ascension_deg(L_app, eps) == pytest.approx(-161.61917, abs=1e-4)
    assert solar.solar_declination_deg(L_app, eps) == pytest.approx(-7.78507, abs=1e-4)

def test_meeus_equation_of_time(meeus_1992):
    _, sm, eps = meeus_1992
    y = solar.var_y(eps)
    assert y == pytest.approx(0.0430372, abs=1e-7)
    # 13m 42.7s
    assert solar.equation_of_time_minutes(sm, y) == pytest.approx(13.711, abs=1e-3)

# ------------------------------------------------------------
# Sunrise hour angle and its domain
# ------------------------------------------------------------

def test_sunrise_hour_angle_equator_equinox():
    # only the 0.833 deg depression is left
    assert solar.sunrise_hour_angle_deg(0.0, 0.0) == pytest.approx(90.833, abs=1e-9)
    assert solar.daylight_minutes(90.833) == pytest.approx(726.664)

def test_sunrise_hour_angle_polar_night():
    with pytest.raises(DomainError) as exc:
        solar.sunrise_hour_angle_deg(70.0, -23.44)
    assert exc.value.step == "sunrise hour angle"
    assert exc.value.value > 1.0
    assert "polar night" in str(exc.value)

def test_sunrise_hour_angle_polar_day():
    with pytest.raises(DomainError) as exc:
        solar.sunrise_hour_angle_deg(-70.0, -23.44)
    assert exc.value.value < -1.0
    assert "polar day" in str(exc.value)

def test_domain_error_is_value_error():
    with pytest.raises(ValueError):
        solar.sunrise_hour_angle_deg(80.0, 20.0)

def test_sunrise_sunset_symmetric_about_noon():
    rise, set_ = solar.sunrise_sunset_frac(0.5, 90.0)
    assert rise == pytest.approx(0.25)
    assert set_ == pytest.approx(0.75)

def test_solar_noon_greenwich():
    assert solar.solar_noon_frac(0.0, 0.0) == 0.5
    # 15 deg west -> one hour later in GMT
    assert solar.solar_noon_frac(-15.0, 0.0) == pytest.approx(13.0 / 24.0)

def test_day_frac_to_days_applies_zone():
    assert solar.day_frac_to_days(10, 0.5, -8) == pytest.approx(10.5 - 8.0 / 24.0)

# ------------------------------------------------------------
# True solar time and hour angle
# ------------------------------------------------------------

@pytest.mark.parametrize("frac,eot,lon,tz", [
    (0.0, -16.0, -180.0, 14),
    (0.99, 16.0, 180.0, -12),
    (0.5, 0.0, 0.0, 0),
    (0.1, 3.0, -121.9, -8),
])
def test_true_solar_time_range(frac, eot, lon, tz):
    tst = solar.true_solar_time_minutes(frac, eot, lon, tz)
    assert 0.0 <= tst < 1440.0

def test_hour_angle():
    assert solar.hour_angle_deg(720.0) == 0.0
    assert solar.hour_angle_deg(0.0) == -180.0
    assert solar.hour_angle_deg(1080.0) == 90.0
    assert -180.0 <= solar.hour_angle_deg(1439.999) < 180.0

# ------------------------------------------------------------
# Zenith, refraction, azimuth
# ------------------------------------------------------------

def test_zenith_overhead_is_clamped():
    z = solar.zenith_angle_deg(23.44, 23.44, 0.0)
    assert not math.isnan(z)
    assert z == pytest.approx(0.0, abs=1e-5)

def test_zenith_equator_equinox():
    assert solar.zenith_angle_deg(0.0, 0.0, 45.0) == pytest.approx(45.0)

def test_refraction_branch_values():
    assert solar.refraction_deg(90.0) == 0.0
    assert solar.refraction_deg(85.0001) == 0.0
    # 85 is inside the cotangent branch
    assert solar.refraction_deg(85.0) == pytest.approx(5.083044 / 3600.0, abs=1e-9)
    # 5 is inside the quartic branch
    assert solar.refraction_deg(5.0) == pytest.approx(574.625 / 3600.0, abs=1e-9)
    assert solar.refraction_deg(0.0) == pytest.approx(1735.0 / 3600.0)
    # -0.575 is inside the low-sun branch
    assert solar.refraction_deg(-0.575) == pytest.approx(2069.753003 / 3600.0, abs=1e-9)
    assert solar.refraction_deg(-10.0) == pytest.approx(117.803866 / 3600.0, abs=1e-9)

@pytest.mark.parametrize("boundary,arcsec_tol", [(85.0, 6.0), (5.0, 2.0), (-0.575, 0.5)])
def test_refraction_continuous_at_boundaries(boundary, arcsec_tol):
    eps = 1e-7
    below = solar.refraction_deg(boundary - eps)
    above = solar.refraction_deg(boundary + eps)
    assert abs(above - below) * 3600.0 < arcsec_tol

def test_azimuth_equator_morning_and_afternoon():
    # equinox, equator: the sun climbs due east and sets due west
    assert solar.azimuth_deg(0.0, 0.0, 45.0, -45.0) == pytest.approx(90.0)
    assert solar.azimuth_deg(0.0, 0.0, 45.0, 45.0) == pytest.approx(270.0)

def test_azimuth_noon_winter_is_south():
    z = solar.zenith_angle_deg(40.0, -20.0, 0.0)
    assert solar.azimuth_deg(40.0, -20.0, z, 0.0) == pytest.approx(180.0, abs=1e-4)

def test_azimuth_at_zenith_raises():
    with pytest.raises(DomainError) as exc:
        solar.azimuth_deg(10.0, 10.0, 0.0, 0.0)
    assert exc.value.step == "azimuth"

def test_acos_slack_is_clamped_and_overshoot_raises():
    assert solar._acos_deg(1.0 + 1e-12, "t") == 0.0
    assert solar._acos_deg(-1.0 - 1e-12, "t") == 180.0
    with pytest.raises(DomainError):
        solar._acos_deg(1.001, "t")
    with pytest.raises(DomainError):
        solar._acos_deg(float("nan"), "t")
