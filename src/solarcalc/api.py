from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, Tuple

from .core.engine import compute_snapshot
from .core.time import instant_to_local_datetime, local_epoch_seconds
from .core.types import LocationConfig, SolarSnapshot


def snapshot(instant: int, *, tz_offset: int, lat: float, lon: float) -> SolarSnapshot:
    """Snapshot for wall-clock epoch seconds at the given site."""
    return compute_snapshot(LocationConfig(tz_offset=tz_offset, lat=lat, lon=lon), instant)

def snapshot_at(dt: datetime, *, tz_offset: int, lat: float, lon: float) -> SolarSnapshot:
    """
    Snapshot for a datetime. Naive datetimes are read as the site's wall clock,
    aware ones are converted through the fixed ``tz_offset``.
    """
    return snapshot(local_epoch_seconds(dt, tz_offset), tz_offset=tz_offset, lat=lat, lon=lon)

def explain(instant: int, *, tz_offset: int, lat: float, lon: float) -> Dict[str, Any]:
    snap = snapshot(instant, tz_offset=tz_offset, lat=lat, lon=lon)
    out: Dict[str, Any] = {
        "location": {"tz_offset": tz_offset, "lat": lat, "lon": lon},
        "instant": snap.instant,
        "local_time": instant_to_local_datetime(snap.instant).isoformat(),
    }
    out.update(snap.as_dict())
    return out

def sun_position(instant: int, *, tz_offset: int, lat: float, lon: float) -> Tuple[float, float]:
    """(refraction-corrected elevation, azimuth) in degrees."""
    snap = snapshot(instant, tz_offset=tz_offset, lat=lat, lon=lon)
    return snap.elevation_corr_deg, snap.azimuth_deg

def sun_events(instant: int, *, tz_offset: int, lat: float, lon: float) -> Dict[str, Any]:
    """Sunrise, solar noon and sunset (naive local datetimes) plus day length in minutes."""
    snap = snapshot(instant, tz_offset=tz_offset, lat=lat, lon=lon)
    return {
        "sunrise": instant_to_local_datetime(snap.sunrise_time),
        "solar_noon": instant_to_local_datetime(snap.noon_time),
        "sunset": instant_to_local_datetime(snap.sunset_time),
        "daylight_min": snap.daylight_min,
    }
