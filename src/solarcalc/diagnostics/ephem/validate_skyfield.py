#!/usr/bin/env python3
from __future__ import annotations

import argparse
from datetime import date
from typing import List, Optional

from solarcalc.core.engine import compute_snapshot
from solarcalc.core.errors import DomainError
from solarcalc.core.time import JDN_UNIX_EPOCH, to_jdn
from solarcalc.core.types import LocationConfig
from solarcalc.ephemeris.skyfield_sun import SkyfieldSun, wall_clock_to_utc


def _need_numpy():
    try:
        import numpy as np
        return np
    except ImportError as e:
        raise RuntimeError('Need numpy. Install: pip install "solarcalc[diagnostics]"') from e


def _need_matplotlib():
    try:
        import matplotlib.pyplot as plt
        return plt
    except ImportError as e:
        raise RuntimeError('Need matplotlib. Install: pip install "solarcalc[diagnostics]"') from e


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Validate the analytic sun position against a JPL ephemeris (skyfield).")
    p.add_argument("--year", type=int, default=2012)
    p.add_argument("--lat", type=float, default=36.62)
    p.add_argument("--lon", type=float, default=-121.904)
    p.add_argument("--tz", type=int, default=-8)
    p.add_argument("--step-hours", type=float, default=37.0, help="sampling step (odd values sweep the clock)")
    p.add_argument("--bsp", default="de421.bsp")
    p.add_argument("--out-png", default="", help="optional residual plot")
    args = p.parse_args(argv)

    np = _need_numpy()

    print(f"Loading {args.bsp} ...")
    sky = SkyfieldSun.load(args.bsp)
    loc = LocationConfig(tz_offset=args.tz, lat=args.lat, lon=args.lon)

    t0 = (to_jdn(date(args.year, 1, 1)) - JDN_UNIX_EPOCH) * 86400
    t1 = (to_jdn(date(args.year + 1, 1, 1)) - JDN_UNIX_EPOCH) * 86400
    instants = np.arange(t0, t1, int(args.step_hours * 3600))

    days, d_elev, d_azim = [], [], []
    skipped = 0
    for t in instants:
        t = int(t)
        try:
            snap = compute_snapshot(loc, t)
        except DomainError:
            skipped += 1
            continue
        alt, az = sky.alt_az(wall_clock_to_utc(t, args.tz), args.lat, args.lon)
        days.append((t - t0) / 86400.0)
        d_elev.append((snap.elevation_deg - alt) * 60.0)
        d_azim.append(((snap.azimuth_deg - az + 180.0) % 360.0 - 180.0) * 60.0)

    if not d_elev:
        print(f"No comparable instants ({skipped} skipped on polar days)")
        return 1

    d_elev = np.asarray(d_elev)
    d_azim = np.asarray(d_azim)

    print(f"Compared {len(d_elev)} instants ({skipped} skipped on polar days)")
    print(f"  elevation residual (arcmin): mean {d_elev.mean():+.3f}  rms {np.sqrt((d_elev ** 2).mean()):.3f}  max {np.abs(d_elev).max():.3f}")
    print(f"  azimuth residual   (arcmin): mean {d_azim.mean():+.3f}  rms {np.sqrt((d_azim ** 2).mean()):.3f}  max {np.abs(d_azim).max():.3f}")

    if args.out_png:
        plt = _need_matplotlib()
        fig, axs = plt.subplots(2, 1, figsize=(12, 8), sharex=True)
        axs[0].scatter(days, d_elev, s=2, color="orange")
        axs[0].set_ylabel("Elevation error (arcmin)")
        axs[0].grid(True, alpha=0.3)
        axs[1].scatter(days, d_azim, s=2, color="blue")
        axs[1].set_ylabel("Azimuth error (arcmin)")
        axs[1].set_xlabel(f"Day of {args.year}")
        axs[1].grid(True, alpha=0.3)
        plt.suptitle("Analytic model - skyfield (geometric)", fontsize=14)
        plt.tight_layout()
        plt.savefig(args.out_png, dpi=150)
        print(f"Plot saved to {args.out_png}")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
