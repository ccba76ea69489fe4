# tests/test_api.py

import pytest
from datetime import datetime, timezone

import solarcalc
from solarcalc import api

SITE = dict(tz_offset=-8, lat=36.62, lon=-121.9)

def test_snapshot_at_naive_is_wall_clock():
    a = api.snapshot_at(datetime(2012, 11, 4, 12, 0), **SITE)
    b = api.snapshot(1352030400, **SITE)
    assert a == b

def test_snapshot_at_aware_utc():
    a = api.snapshot_at(datetime(2012, 11, 4, 20, 0, tzinfo=timezone.utc), **SITE)
    assert a.instant == 1352030400

def test_sun_position():
    elev, az = api.sun_position(1352030400, **SITE)
    assert elev == pytest.approx(37.67737961, abs=1e-6)
    assert az == pytest.approx(182.69166843, abs=1e-6)

def test_sun_events():
    ev = api.sun_events(1352030400, **SITE)
    assert ev["sunrise"] == datetime(2012, 11, 4, 6, 34, 55)
    assert ev["solar_noon"] == datetime(2012, 11, 4, 11, 51, 8)
    assert ev["sunset"] == datetime(2012, 11, 4, 17, 7, 22)
    assert ev["daylight_min"] == pytest.approx(632.4537, abs=1e-3)

def test_explain():
    info = api.explain(1352030400, **SITE)
    assert info["location"] == {"tz_offset": -8, "lat": 36.62, "lon": -121.9}
    assert info["local_time"] == "2012-11-04T12:00:00"
    assert info["unix_days"] == 15648
    assert "azimuth_deg" in info

def test_public_surface():
    for name in solarcalc.__all__:
        assert hasattr(solarcalc, name)
