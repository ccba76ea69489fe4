# tests/test_astro_args.py

import math

import pytest
from solarcalc.reference import astro_args as aa


def test_meeus_example_25a_solar_mean_elements():
    """
    Test against Jean Meeus, Astronomical Algorithms (2nd Ed), Example 25.a.
    Date: 1992 October 13, 0h TD.
    JD: 2448908.5
    """
    jd = 2448908.5
    T = aa.T_centuries(jd)

    assert T == pytest.approx(-0.072183436, abs=1e-9)

    sm = aa.solar_mean_elements(T)

    assert sm.L0_deg == pytest.approx(201.80720, abs=1e-5)
    # mean anomaly is kept unreduced
    assert sm.M_deg == pytest.approx(-2241.00603, abs=1e-5)
    assert aa.wrap_deg(sm.M_deg) == pytest.approx(278.99397, abs=1e-5)
    assert sm.e == pytest.approx(0.016711668, abs=1e-9)

def test_meeus_example_25a_obliquity():
    T = aa.T_centuries(2448908.5)
    eps0 = aa.mean_obliquity_deg(T)
    assert eps0 == pytest.approx(23.44023, abs=1e-5)
    assert aa.obliquity_correction_deg(T, eps0) == pytest.approx(23.43999, abs=1e-5)

def test_meeus_example_22a_mean_obliquity():
    """
    Meeus Example 22.a, 1987 April 10, 0h TD: eps0 = 23°26'27.407".
    """
    T = aa.T_centuries(2446895.5)
    target_eps0 = 23.0 + 26.0 / 60.0 + 27.407 / 3600.0
    assert aa.mean_obliquity_deg(T) == pytest.approx(target_eps0, abs=1e-6)

def test_floor_mod_sign_follows_divisor():
    assert aa.floor_mod(-30.0, 360.0) == pytest.approx(330.0)
    assert aa.floor_mod(725.0, 360.0) == pytest.approx(5.0)
    assert aa.floor_mod(-1.0, 1440.0) == pytest.approx(1439.0)
    # fmod keeps the sign of the dividend; floor_mod must not
    assert math.fmod(-30.0, 360.0) == -30.0

@pytest.mark.parametrize("x", [-1e6, -720.0, -360.0, -0.5, -1e-15, 0.0, 359.999, 360.0, 1e6 + 0.25])
def test_wrap_deg_range(x):
    w = aa.wrap_deg(x)
    assert 0.0 <= w < 360.0

@pytest.mark.parametrize("x", [-1e-14, -1440.0, 0.0, 1439.5])
def test_wrap_minutes_range(x):
    assert 0.0 <= aa.wrap_minutes(x) < 1440.0

def test_julian_day_unix_epoch_and_offset():
    assert aa.julian_day(0, 0.0, 0) == 2440587.5
    # midnight on a UTC-8 wall clock is 08:00 GMT
    assert aa.julian_day(0, 0.0, -8) == pytest.approx(2440587.5 + 8.0 / 24.0)
    assert aa.julian_day(10957, 0.5, 0) == pytest.approx(aa.J2000)
    assert aa.T_centuries(aa.J2000) == 0.0
