from __future__ import annotations

import argparse
from datetime import date
import sys
import re
import importlib
import inspect


_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")
_TIME_RE = re.compile(r"^\d{1,2}:\d{2}(:\d{2})?$")

# Monterey, California (Pacific Standard Time)
DEFAULT_LAT = 36.62
DEFAULT_LON = -121.904
DEFAULT_TZ = -8


def _parse_ymd(s: str) -> date:
    if not _DATE_RE.match(s):
        raise argparse.ArgumentTypeError(f"expected YYYY-MM-DD, got {s!r}")
    y, m, d = map(int, s.split("-"))
    return date(y, m, d)


def _parse_hms(s: str) -> int:
    """HH:MM[:SS] -> seconds after midnight."""
    if not _TIME_RE.match(s):
        raise argparse.ArgumentTypeError(f"expected HH:MM[:SS], got {s!r}")
    parts = [int(x) for x in s.split(":")] + [0]
    h, m, sec = parts[0], parts[1], parts[2]
    if h > 23 or m > 59 or sec > 59:
        raise argparse.ArgumentTypeError(f"time out of range: {s!r}")
    return h * 3600 + m * 60 + sec


def _run_module_main(modpath: str, argv: list[str]) -> int:
    """
    Import module and run its main().

    Supports:
      - main(argv: list[str] | None = None) -> int|None
      - main() -> int|None
    """
    mod = importlib.import_module(modpath)
    if not hasattr(mod, "main"):
        raise SystemExit(f"Module {modpath} has no main()")
    fn = getattr(mod, "main")

    sig = inspect.signature(fn)
    if len(sig.parameters) == 0:
        rv = fn()
    else:
        rv = fn(argv)
    return int(rv or 0)


def _site_parser(prog: str, description: str) -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog=prog, description=description)
    p.add_argument("date", type=_parse_ymd, help="Local calendar date, YYYY-MM-DD")
    p.add_argument("--time", type=_parse_hms, default=12 * 3600, help="Local clock time HH:MM[:SS] (default 12:00)")
    p.add_argument("--lat", type=float, default=DEFAULT_LAT, help="Observer latitude in degrees (positive North)")
    p.add_argument("--lon", type=float, default=DEFAULT_LON, help="Observer longitude in degrees (positive East)")
    p.add_argument("--tz", type=int, default=DEFAULT_TZ, help="Fixed UTC offset in hours (west negative)")
    return p


def _instant(args: argparse.Namespace) -> int:
    from solarcalc.core.time import JDN_UNIX_EPOCH, to_jdn
    return (to_jdn(args.date) - JDN_UNIX_EPOCH) * 86400 + args.time


def fmt_clock(t: int) -> str:
    from solarcalc.core.time import instant_to_local_datetime
    return instant_to_local_datetime(t).strftime("%Y-%m-%d %H:%M:%S")


def cmd_solar(argv: list[str]) -> int:
    from solarcalc.core.engine import SolarPositionEngine
    from solarcalc.core.errors import DomainError

    p = _site_parser("solarcalc solar", "Sun position and sunrise/noon/sunset for a site and local time.")
    args = p.parse_args(argv)

    engine = SolarPositionEngine()
    engine.configure(args.tz, args.lat, args.lon)
    t = _instant(args)

    print("Time Input:")
    print(f"  Local time = {fmt_clock(t)} (UTC{args.tz:+d})")
    print(f"  Site       = lat {args.lat:.4f}, lon {args.lon:.4f}")
    print()

    try:
        snap = engine.compute(t)
    except DomainError as e:
        print(f"  Sun does not rise or set: {e}")
        return 1

    print(f"Julian Day = {snap.jd:.6f}")
    print()
    print("Solar Position (degrees):")
    print(f"  Declination                  = {snap.dec_deg:.6f}")
    print(f"  Zenith                       = {snap.zenith_deg:.6f}")
    print(f"  Elevation                    = {snap.elevation_deg:.6f}")
    print(f"  Elevation (refraction corr.) = {engine.elevation():.6f}")
    print(f"  Azimuth                      = {engine.azimuth():.6f}")
    print()
    print("Equation of Time:")
    print(f"  EOT (minutes) = {snap.eot_min:.4f}")
    print()
    print("Sunrise & Sunset (90.833 deg zenith):")
    print(f"  Sunrise    : {fmt_clock(engine.sunrise_instant())}")
    print(f"  Solar noon : {fmt_clock(engine.solar_noon_instant())}")
    print(f"  Sunset     : {fmt_clock(engine.sunset_instant())}")
    print(f"  Daylight   : {engine.daylight_minutes():.2f} min")

    return 0


def cmd_explain(argv: list[str]) -> int:
    from solarcalc import api
    from solarcalc.core.errors import DomainError

    p = _site_parser("solarcalc explain", "Print every intermediate quantity of the solar pipeline.")
    args = p.parse_args(argv)

    try:
        info = api.explain(_instant(args), tz_offset=args.tz, lat=args.lat, lon=args.lon)
    except DomainError as e:
        print(f"Domain error: {e}")
        return 1

    loc = info.pop("location")
    print(f"location   = tz {loc['tz_offset']:+d}, lat {loc['lat']}, lon {loc['lon']}")
    for k, v in info.items():
        if isinstance(v, float):
            print(f"{k:<20} = {v:.10f}")
        else:
            print(f"{k:<20} = {v}")
    return 0


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    # Shorthand: `solarcalc YYYY-MM-DD ...`
    if argv and _DATE_RE.match(argv[0]):
        return cmd_solar(argv)

    p = argparse.ArgumentParser(prog="solarcalc", description="NOAA-style solar position calculator CLI.")
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("solar", help="Sun position and daily events for a site and local time.")
    sub.add_parser("explain", help="Print every intermediate quantity of the solar pipeline.")

    # diagnostics (no ephemeris)
    p_diag = sub.add_parser("diag", help="Diagnostics tools (no ephemeris required)")
    p_diag.add_argument(
        "tool",
        choices=["day-path", "year-table"],
        help="Which diagnostic to run",
    )

    # ephem diagnostics
    p_ephem = sub.add_parser("ephem", help="Ephemeris-based diagnostics")
    p_ephem.add_argument(
        "tool",
        choices=["validate"],
        help="Which ephemeris diagnostic to run",
    )

    args, rest = p.parse_known_args(argv)

    if args.cmd == "solar":
        return cmd_solar(rest)

    if args.cmd == "explain":
        return cmd_explain(rest)

    if args.cmd == "diag":
        tool_map = {
            "day-path": "solarcalc.diagnostics.day_path",
            "year-table": "solarcalc.diagnostics.year_table",
        }
        return _run_module_main(tool_map[args.tool], rest)

    if args.cmd == "ephem":
        tool_map = {
            "validate": "solarcalc.diagnostics.ephem.validate_skyfield",
        }
        return _run_module_main(tool_map[args.tool], rest)

    raise RuntimeError("unreachable")


if __name__ == "__main__":
    raise SystemExit(main())
