#!/usr/bin/env python3
from __future__ import annotations

import argparse
from datetime import date
from typing import List, Optional

from solarcalc.core.engine import compute_snapshot
from solarcalc.core.errors import DomainError
from solarcalc.core.time import JDN_UNIX_EPOCH, to_jdn
from solarcalc.core.types import LocationConfig


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


def sample_day(np, loc: LocationConfig, d: date, step_min: int):
    """Return (hours, elevation_corr, azimuth) arrays for one local day."""
    t0 = (to_jdn(d) - JDN_UNIX_EPOCH) * 86400
    offsets = np.arange(0, 86400, step_min * 60)
    elev = np.empty(len(offsets))
    azim = np.empty(len(offsets))
    for i, dt in enumerate(offsets):
        snap = compute_snapshot(loc, t0 + int(dt))
        elev[i] = snap.elevation_corr_deg
        azim[i] = snap.azimuth_deg
    return offsets / 3600.0, elev, azim


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Plot the sun's elevation and azimuth through one local day.")
    p.add_argument("--date", default="2012-11-04", help="local date YYYY-MM-DD")
    p.add_argument("--lat", type=float, default=36.62)
    p.add_argument("--lon", type=float, default=-121.904)
    p.add_argument("--tz", type=int, default=-8)
    p.add_argument("--step-min", type=int, default=10, help="sampling step in minutes")
    p.add_argument("--out-png", default="day_path.png")
    args = p.parse_args(argv)

    if args.step_min <= 0:
        raise SystemExit("--step-min must be positive")

    np = _need_numpy()
    plt = _need_matplotlib()

    y, m, d = map(int, args.date.split("-"))
    loc = LocationConfig(tz_offset=args.tz, lat=args.lat, lon=args.lon)

    try:
        hours, elev, azim = sample_day(np, loc, date(y, m, d), args.step_min)
    except DomainError as e:
        print(f"Cannot trace {args.date}: {e}")
        return 1

    i_max = int(np.argmax(elev))
    print(f"Sampled {len(hours)} points on {args.date}")
    print(f"  max elevation {elev[i_max]:.3f} deg at {hours[i_max]:.2f} h (azimuth {azim[i_max]:.2f} deg)")

    fig, axs = plt.subplots(2, 1, figsize=(10, 8), sharex=True)

    axs[0].plot(hours, elev, color="orange")
    axs[0].axhline(0.0, color="gray", lw=0.8)
    axs[0].set_ylabel("Elevation (deg)")
    axs[0].grid(True, alpha=0.3)

    axs[1].plot(hours, azim, color="blue")
    axs[1].set_ylabel("Azimuth (deg from N)")
    axs[1].set_xlabel(f"Local time (h, UTC{args.tz:+d})")
    axs[1].grid(True, alpha=0.3)

    plt.suptitle(f"Sun path {args.date} at lat {args.lat:.3f}, lon {args.lon:.3f}", fontsize=14)
    plt.tight_layout()
    plt.savefig(args.out_png, dpi=150)
    print(f"Plot saved to {args.out_png}")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
