from __future__ import annotations

import logging
from typing import Optional, TYPE_CHECKING

from .core.types import BirthDetails, LongitudeResult, RashiSign
from .reference import astro_args as aa
from .reference import lunar
from .reference.ayanamsa import sidereal_longitude
from .reference.time_scales import Instant, T_centuries, instant_to_jd, require_finite
from .signs import classify

if TYPE_CHECKING:
    from .resolve import TimeResolver

log = logging.getLogger(__name__)

_default_resolver: Optional["TimeResolver"] = None


def moon_longitude_jd(jd: float) -> LongitudeResult:
    """JD (UTC) -> tropical/ayanamsa/sidereal Moon longitude."""
    jd = require_finite(jd, "JD")
    T = T_centuries(jd)
    me = aa.mean_elements(T)
    # polynomials overflow for JD far outside any calendar range
    for v in (me.L0_deg, me.D_deg, me.M_deg, me.Mp_deg, me.F_deg):
        require_finite(v, f"mean element at JD {jd!r}")
    trop = lunar.tropical_longitude(me)
    res = sidereal_longitude(trop, T)
    require_finite(res.sidereal_deg, f"sidereal longitude at JD {jd!r}")
    log.debug("jd=%.6f T=%.12f L0=%.6f trop=%.6f ayan=%.6f sid=%.6f",
              jd, T, me.L0_deg, res.tropical_deg, res.ayanamsa_deg, res.sidereal_deg)
    return res


def moon_longitude(instant: Instant) -> LongitudeResult:
    return moon_longitude_jd(instant_to_jd(instant))


def moon_rashi_jd(jd: float) -> RashiSign:
    return classify(moon_longitude_jd(jd).sidereal_deg)


def moon_rashi(instant: Instant) -> RashiSign:
    """
    Moon Rashi for a UTC birth instant (aware datetime or ISO 8601 string with offset).
    """
    return moon_rashi_jd(instant_to_jd(instant))


def moon_rashi_local(details: BirthDetails, *, resolver: Optional["TimeResolver"] = None) -> RashiSign:
    """
    Moon Rashi for a local birth date/time and place.

    The place is resolved to an IANA zone and the local time converted to UTC
    by `resolver` (a shared default TimeResolver when omitted). ResolutionError
    propagates unchanged.
    """
    global _default_resolver
    if resolver is None:
        if _default_resolver is None:
            from .resolve import TimeResolver
            _default_resolver = TimeResolver()
        resolver = _default_resolver
    resolved = resolver.resolve(details)
    return moon_rashi(resolved.utc)
