from __future__ import annotations

import argparse
import importlib
import inspect
import json
import logging
import sys


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


def cmd_moon(argv: list[str]) -> int:
    from rashi.core.errors import InvalidInputError
    from rashi.reference import astro_args as aa
    from rashi.reference import time_scales as ts
    from rashi.api import moon_longitude_jd
    from rashi.signs import classify, normalize_longitude

    p = argparse.ArgumentParser(prog="rashi moon", description="Moon longitude and Rashi for a UTC instant.")
    p.add_argument("instant", help="ISO 8601 UTC instant, e.g. 2000-01-01T12:00:00Z")
    p.add_argument("--json", action="store_true", help="print a JSON object")
    args = p.parse_args(argv)

    try:
        jd = ts.instant_to_jd(args.instant)
    except InvalidInputError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    T = ts.T_centuries(jd)
    me = aa.mean_elements(T)
    res = moon_longitude_jd(jd)
    sign = classify(res.sidereal_deg)

    if args.json:
        print(json.dumps({
            "jd": jd,
            "T": T,
            "tropicalLongitude": res.tropical_deg,
            "ayanamsa": res.ayanamsa_deg,
            "siderealLongitude": res.sidereal_deg,
            "rashi": {"index": sign.index, "english": sign.english, "sanskrit": sign.sanskrit},
        }))
        return 0

    print(f"JD_UTC = {jd:.6f}")
    print(f"T (Julian centuries from J2000.0) = {T:.12f}")
    print()
    print("Moon (degrees)")
    print(f"  mean longitude L0   = {me.L0_deg:.6f}")
    print(f"  tropical longitude  = {res.tropical_deg:.6f}")
    print(f"  Lahiri ayanamsa     = {res.ayanamsa_deg:.6f}")
    print(f"  sidereal longitude  = {res.sidereal_deg:.6f}  ({normalize_longitude(res.sidereal_deg):.6f} wrapped)")
    print()
    print(f"Rashi: {sign.label}")
    return 0


def cmd_local(argv: list[str]) -> int:
    from rashi.core.errors import InvalidInputError, ResolutionError, ResolverUnavailableError
    from rashi.core.types import BirthDetails
    from rashi.resolve import TimeResolver, utc_offset, parse_local
    from rashi.api import moon_rashi

    p = argparse.ArgumentParser(prog="rashi local", description="Resolve local birth time and place, then compute the Moon Rashi.")
    p.add_argument("--date", required=True, help="YYYY-MM-DD")
    p.add_argument("--time", required=True, help="HH:MM or HH:MM:SS (24h)")
    p.add_argument("--city", required=True)
    p.add_argument("--state", default="")
    p.add_argument("--country", default="")
    p.add_argument("--user-agent", default="rashi", help="geocoder user agent")
    args = p.parse_args(argv)

    details = BirthDetails(args.date, args.time, args.city, args.state, args.country)
    try:
        resolved = TimeResolver(user_agent=args.user_agent).resolve(details)
    except ResolutionError as e:
        print(str(e), file=sys.stderr)
        return 2
    except ResolverUnavailableError as e:
        print(f"error: {e} (try again later)", file=sys.stderr)
        return 3
    except InvalidInputError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    sign = moon_rashi(resolved.utc)
    offset = utc_offset(parse_local(args.date, args.time), resolved.zone)
    print(f"Place : {details.place} ({resolved.latitude:.4f}, {resolved.longitude:.4f})")
    print(f"Zone  : {resolved.zone} (UTC offset {offset})")
    print(f"UTC   : {resolved.utc.isoformat()}")
    print(f"Rashi : {sign.label}")
    return 0


def cmd_signs(argv: list[str]) -> int:
    from rashi.signs import RASHIS
    from rashi.insights import recommend_bracelet

    p = argparse.ArgumentParser(prog="rashi signs", description="Print the sign table and bracelet catalog.")
    p.parse_args(argv)

    for s in RASHIS:
        b = recommend_bracelet(s)
        print(f"{s.index:2d}  {s.start_deg:5.1f}-{s.end_deg:5.1f}  {s.label:24s} {', '.join(b.crystals)}")
    return 0


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    p = argparse.ArgumentParser(prog="rashi", description="Moon Rashi toolkit CLI.")
    p.add_argument("-v", "--verbose", action="store_true", help="log debug output to stderr")
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("moon", help="Moon longitude and Rashi for a UTC instant")
    sub.add_parser("local", help="Moon Rashi from local date/time and place")
    sub.add_parser("signs", help="Print the sign table and bracelets")

    # ephem diagnostics
    p_ephem = sub.add_parser("ephem", help="Ephemeris-based diagnostics")
    p_ephem.add_argument("tool", choices=["validate-ref"], help="Which ephemeris diagnostic to run")

    args, rest = p.parse_known_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    if args.cmd == "moon":
        return cmd_moon(rest)

    if args.cmd == "local":
        return cmd_local(rest)

    if args.cmd == "signs":
        return cmd_signs(rest)

    if args.cmd == "ephem":
        tool_map = {
            "validate-ref": "rashi.diagnostics.validate_reference",
        }
        return _run_module_main(tool_map[args.tool], rest)

    raise RuntimeError("unreachable")


if __name__ == "__main__":
    raise SystemExit(main())
