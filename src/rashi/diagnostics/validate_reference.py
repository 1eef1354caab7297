#!/usr/bin/env python3
from __future__ import annotations

import argparse
from typing import List, Optional

from rashi.api import moon_longitude_jd
from rashi.reference import astro_args as aa
from rashi.reference import time_scales as ts
from rashi.reference.ayanamsa import lahiri_ayanamsa_deg
from rashi.signs import rashi_index
from rashi.ephemeris.skyfield_moon import DE_FILE, SkyfieldMoon


def _need_numpy():
    try:
        import numpy as np
        return np
    except ImportError as e:
        raise RuntimeError('Need numpy. Install: pip install "rashi[diagnostics]"') from e


def _need_matplotlib():
    try:
        import matplotlib.pyplot as plt
        return plt
    except ImportError as e:
        raise RuntimeError('Need matplotlib. Install: pip install "rashi[diagnostics]"') from e


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Validate the six-term lunar model against a JPL ephemeris.")
    p.add_argument("--year-start", type=int, default=1900)
    p.add_argument("--year-end", type=int, default=2050)
    p.add_argument("--step-days", type=float, default=7.3)
    p.add_argument("--de-file", default=DE_FILE)
    p.add_argument("--out-png", default=None, help="write a residual plot here (needs matplotlib)")
    args = p.parse_args(argv)

    np = _need_numpy()

    print(f"Loading {args.de_file} ...")
    ref = SkyfieldMoon.load(args.de_file)

    jd_start = ts.J2000 + (args.year_start - 2000) * 365.25
    jd_end = ts.J2000 + (args.year_end - 2000) * 365.25
    if jd_start >= jd_end:
        raise ValueError("--year-start must be before --year-end")

    jds = np.arange(jd_start, jd_end, args.step_days)
    years = 2000 + (jds - ts.J2000) / 365.25
    print(f"Validating {len(jds)} points from {years[0]:.1f} to {years[-1]:.1f}...")

    ref_trop = ref.longitudes_deg(jds)

    err = np.empty(len(jds))
    agree = 0
    for i, jd in enumerate(jds):
        res = moon_longitude_jd(float(jd))
        err[i] = aa.wrap180(res.tropical_deg - float(ref_trop[i]))

        T = ts.T_centuries(float(jd))
        ref_sid = float(ref_trop[i]) - lahiri_ayanamsa_deg(T)
        if rashi_index(res.sidereal_deg) == rashi_index(ref_sid):
            agree += 1

    abs_err = np.abs(err)
    print()
    print("Tropical longitude residual (model - ephemeris), degrees")
    print(f"  mean   = {float(np.mean(err)):+.4f}")
    print(f"  rms    = {float(np.sqrt(np.mean(err * err))):.4f}")
    print(f"  p99    = {float(np.percentile(abs_err, 99)):.4f}")
    print(f"  max    = {float(np.max(abs_err)):.4f}  at {ts.jd_to_datetime_utc(float(jds[int(np.argmax(abs_err))])).isoformat()}")
    print()
    print(f"Rashi agreement: {agree}/{len(jds)} = {100.0 * agree / len(jds):.2f}%")

    if args.out_png:
        plt = _need_matplotlib()
        fig, ax = plt.subplots(1, 1, figsize=(12, 5))
        ax.scatter(years, err, s=1, alpha=0.5, color="blue")
        ax.set_title("Moon Tropical Longitude Error (six-term model - ephemeris)")
        ax.set_ylabel("Error (deg)")
        ax.set_xlabel("Year")
        ax.grid(True, alpha=0.3)
        plt.tight_layout()
        plt.savefig(args.out_png, dpi=200)
        print(f"Plot saved to {args.out_png}")

    return 0

if __name__ == "__main__":
    raise SystemExit(main())
