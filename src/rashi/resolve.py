"""
rashi.resolve

Local birth date/time + place name -> UTC instant.

Place -> coordinates goes through a geocoder (geopy's Nominatim by default),
coordinates -> IANA zone through timezonefinder, and the historical UTC
offset (including DST) for that date comes from the tz database via zoneinfo.
Given the same geocoder answer the conversion is a pure function.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from functools import lru_cache
from typing import Any, Tuple
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from geopy.exc import GeopyError
from geopy.geocoders import Nominatim
from timezonefinder import TimezoneFinder

from .core.errors import InvalidInputError, ResolutionError, ResolverUnavailableError
from .core.types import BirthDetails

log = logging.getLogger(__name__)

_TIME_FORMATS = ("%H:%M:%S", "%H:%M")

PLACE_CACHE_SIZE = 1024


@dataclass(frozen=True)
class _Place:
    # equality and hash on the normalised key only
    key: str
    text: str = field(compare=False)

    @classmethod
    def of(cls, place: str) -> "_Place":
        return cls(key=" ".join(place.split()).lower(), text=place)


@dataclass(frozen=True)
class ResolvedInstant:
    utc: datetime
    zone: str
    latitude: float
    longitude: float


def parse_local(date_str: str, time_str: str) -> datetime:
    """'YYYY-MM-DD' + 'HH:MM[:SS]' -> naive local datetime."""
    try:
        d = datetime.strptime(date_str.strip(), "%Y-%m-%d").date()
    except (AttributeError, ValueError) as e:
        raise InvalidInputError(f"bad birth date {date_str!r}, expected YYYY-MM-DD") from e
    for fmt in _TIME_FORMATS:
        try:
            t = datetime.strptime(time_str.strip(), fmt).time()
            break
        except (AttributeError, ValueError):
            continue
    else:
        raise InvalidInputError(f"bad birth time {time_str!r}, expected HH:MM or HH:MM:SS")
    return datetime.combine(d, t)


def to_utc(local: datetime, zone_name: str) -> datetime:
    """
    Naive local civil time in `zone_name` -> aware UTC datetime.

    Times repeated by a DST fall-back resolve to the first occurrence, times
    skipped by a spring-forward are read with the pre-transition offset
    (both are fold=0 in zoneinfo).
    """
    if local.tzinfo is not None:
        return local.astimezone(timezone.utc)
    try:
        tz = ZoneInfo(zone_name)
    except (ZoneInfoNotFoundError, ValueError) as e:
        raise ResolutionError(f"unknown timezone {zone_name!r}") from e

    first = local.replace(tzinfo=tz, fold=0)
    second = local.replace(tzinfo=tz, fold=1)
    if first.utcoffset() != second.utcoffset():
        back = first.astimezone(timezone.utc).astimezone(tz).replace(tzinfo=None)
        if back != local:
            log.warning("%s does not exist in %s (DST gap); using offset %s",
                        local.isoformat(), zone_name, first.utcoffset())
        else:
            log.warning("%s is ambiguous in %s (DST overlap); using first occurrence",
                        local.isoformat(), zone_name)
    return first.astimezone(timezone.utc)


class TimeResolver:
    """
    BirthDetails -> ResolvedInstant.

    geocoder: object with geocode(query) -> location with .latitude/.longitude, or None
    tz_finder: object with timezone_at(lng=..., lat=...) -> IANA name or None
    cache_size: number of resolved places kept (least recently used evicted)
    """

    def __init__(self, geocoder: Any = None, tz_finder: Any = None, *,
                 user_agent: str = "rashi", timeout: float = 10.0,
                 cache_size: int = PLACE_CACHE_SIZE):
        self._geocoder = geocoder
        self._tz_finder = tz_finder
        self._user_agent = user_agent
        self._timeout = timeout
        self._lookup = lru_cache(maxsize=cache_size)(self._lookup_uncached)

    @property
    def geocoder(self) -> Any:
        if self._geocoder is None:
            self._geocoder = Nominatim(user_agent=self._user_agent, timeout=self._timeout)
        return self._geocoder

    @property
    def tz_finder(self) -> Any:
        if self._tz_finder is None:
            self._tz_finder = TimezoneFinder()
        return self._tz_finder

    def locate(self, place: str) -> Tuple[float, float, str]:
        """place -> (lat, lon, IANA zone). Cached per resolver; failures are not cached."""
        p = _Place.of(place)
        if not p.key:
            raise ResolutionError(place=place)
        return self._lookup(p)

    def cache_info(self):
        return self._lookup.cache_info()

    def _lookup_uncached(self, p: _Place) -> Tuple[float, float, str]:
        place = p.text
        try:
            loc = self.geocoder.geocode(place)
        except GeopyError as e:
            log.warning("geocoder failed for %r: %s", place, e)
            raise ResolverUnavailableError(f"time resolution failed: geocoder error for {place!r}",
                                           place=place) from e
        if loc is None:
            raise ResolutionError(place=place)

        lat, lon = float(loc.latitude), float(loc.longitude)
        zone = self.tz_finder.timezone_at(lng=lon, lat=lat)
        if not zone:
            raise ResolutionError(place=place)

        log.debug("resolved %r -> (%.4f, %.4f) %s", place, lat, lon, zone)
        return lat, lon, zone

    def resolve(self, details: BirthDetails) -> ResolvedInstant:
        local = parse_local(details.date, details.time)
        lat, lon, zone = self.locate(details.place)
        utc = to_utc(local, zone)
        return ResolvedInstant(utc=utc, zone=zone, latitude=lat, longitude=lon)


def utc_offset(local: datetime, zone_name: str) -> timedelta:
    """UTC offset in force at a local civil time."""
    return local - to_utc(local, zone_name).replace(tzinfo=None)
