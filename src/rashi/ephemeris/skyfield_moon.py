#ephemeris/skyfield_moon.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Sequence

from . import require_ephemeris
from ..reference.time_scales import jd_to_datetime_utc

DE_FILE = "de421.bsp"


@dataclass
class SkyfieldMoon:
    """
    Geocentric apparent ecliptic longitude of the Moon (equinox of date)
    from a JPL DE kernel through skyfield.
    """
    ts: Any
    eph: Any

    @classmethod
    def load(cls, de_file: str = DE_FILE) -> "SkyfieldMoon":
        require_ephemeris()
        from skyfield.api import load
        return cls(ts=load.timescale(), eph=load(de_file))

    def longitudes_deg(self, jd_utc: Sequence[float]):
        """Vectorised over an array of JD(UTC); returns a numpy array in [0,360)."""
        import numpy as np
        from skyfield.framelib import ecliptic_frame

        t = self.ts.from_datetimes([jd_to_datetime_utc(float(jd)) for jd in np.asarray(jd_utc, dtype=float)])
        earth, moon = self.eph["earth"], self.eph["moon"]
        apparent = earth.at(t).observe(moon).apparent()
        _lat, lon, _dist = apparent.frame_latlon(ecliptic_frame)
        return lon.degrees % 360.0

    def longitude_deg(self, jd_utc: float) -> float:
        return float(self.longitudes_deg([jd_utc])[0])
