#ephemeris/skyfield_sun.py
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Tuple

from solarcalc.ephemeris import require_ephemeris

_UNIX_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def wall_clock_to_utc(instant: int, tz_offset: int) -> datetime:
    """Wall-clock epoch seconds at a fixed-offset site -> aware UTC datetime."""
    return _UNIX_EPOCH + timedelta(seconds=int(instant) - tz_offset * 3600)


@dataclass
class SkyfieldSun:
    """
    Geometric (unrefracted) topocentric sun position from a JPL ephemeris.

    Requires optional deps:
      pip install "solarcalc[ephemeris]"
    The ephemeris file (default de421.bsp) is downloaded on first use.
    """
    ts: object
    eph: object

    @classmethod
    def load(cls, bsp: str = "de421.bsp", directory: str = ".") -> "SkyfieldSun":
        require_ephemeris()
        from skyfield.api import Loader  # type: ignore

        loader = Loader(directory)
        return cls(ts=loader.timescale(), eph=loader(bsp))

    def alt_az(self, dt_utc: datetime, lat: float, lon: float) -> Tuple[float, float]:
        """(altitude, azimuth) in degrees for an aware datetime."""
        from skyfield.api import wgs84  # type: ignore

        t = self.ts.from_datetime(dt_utc)
        site = self.eph["earth"] + wgs84.latlon(lat, lon)
        alt, az, _ = site.at(t).observe(self.eph["sun"]).apparent().altaz()
        return alt.degrees, az.degrees
