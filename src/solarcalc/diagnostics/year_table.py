from __future__ import annotations

import argparse
from datetime import date, timedelta
from typing import List, Optional

from solarcalc.core.engine import compute_snapshot
from solarcalc.core.errors import DomainError
from solarcalc.core.time import JDN_UNIX_EPOCH, instant_to_local_datetime, to_jdn
from solarcalc.core.types import LocationConfig


def hhmm(t: int) -> str:
    return instant_to_local_datetime(t).strftime("%H:%M")


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(
        description="Print sunrise / solar noon / sunset / day length through a year."
    )
    p.add_argument("--year", type=int, default=2012)
    p.add_argument("--lat", type=float, default=36.62)
    p.add_argument("--lon", type=float, default=-121.904)
    p.add_argument("--tz", type=int, default=-8)
    p.add_argument("--step-days", type=int, default=7)
    args = p.parse_args(argv)

    if args.step_days <= 0:
        raise SystemExit("--step-days must be positive")

    loc = LocationConfig(tz_offset=args.tz, lat=args.lat, lon=args.lon)

    print(f"{'Date':<10}  {'Rise':>5}  {'Noon':>5}  {'Set':>5}  {'Day (min)':>9}  {'Max elev':>8}")
    d = date(args.year, 1, 1)
    end = date(args.year + 1, 1, 1)
    while d < end:
        # local noon keeps the event times on the same calendar day
        t = (to_jdn(d) - JDN_UNIX_EPOCH) * 86400 + 12 * 3600
        try:
            noon = compute_snapshot(loc, t)
            # solar noon can fall on the other side of a polar-day boundary
            at_noon = compute_snapshot(loc, noon.noon_time)
        except DomainError:
            print(f"{d.isoformat():<10}  {'-- no sunrise/sunset --':>38}")
            d += timedelta(days=args.step_days)
            continue
        print(
            f"{d.isoformat():<10}  {hhmm(noon.sunrise_time):>5}  {hhmm(noon.noon_time):>5}  "
            f"{hhmm(noon.sunset_time):>5}  {noon.daylight_min:9.1f}  {at_noon.elevation_corr_deg:8.2f}"
        )
        d += timedelta(days=args.step_days)

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
