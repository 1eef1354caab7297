from __future__ import annotations

from datetime import datetime, timedelta, timezone
import math
from typing import Union

from ..core.errors import InvalidInputError


Instant = Union[datetime, str]


# ============================================================
# Input checks
# ============================================================

def require_finite(x: float, what: str = "value") -> float:
    """
    Reject NaN / +-inf before a number enters the pipeline.
    Returns x as float.
    """
    try:
        y = float(x)
    except (TypeError, ValueError) as e:
        raise InvalidInputError(f"{what} must be a real number, got {x!r}") from e
    if not math.isfinite(y):
        raise InvalidInputError(f"{what} must be finite, got {y!r}")
    return y


def parse_utc_instant(value: Instant) -> datetime:
    """
    Normalise a birth instant to a timezone-aware UTC datetime.

    Accepts:
      - aware datetime (any offset; converted to UTC)
      - ISO 8601 string with explicit offset or trailing 'Z',
        e.g. "2000-01-01T12:00:00Z", "1990-05-17T03:15:00.250+05:30"

    Naive datetimes and offset-less strings are ambiguous and rejected.
    """
    if isinstance(value, datetime):
        dt = value
    elif isinstance(value, str):
        s = value.strip()
        # fromisoformat() only learned 'Z' in 3.11
        if s.endswith(("Z", "z")):
            s = s[:-1] + "+00:00"
        try:
            dt = datetime.fromisoformat(s)
        except ValueError as e:
            raise InvalidInputError(f"not an ISO 8601 instant: {value!r}") from e
    else:
        raise InvalidInputError(f"expected datetime or ISO 8601 string, got {type(value).__name__}")

    if dt.tzinfo is None or dt.utcoffset() is None:
        raise InvalidInputError(f"instant must carry a UTC offset: {value!r}")
    return dt.astimezone(timezone.utc)


# ============================================================
# datetime(UTC) <-> JD(UTC)
# ============================================================

_JD_UNIX_EPOCH = 2440587.5  # JD at 1970-01-01 00:00:00 UTC


def datetime_utc_to_jd(dt: datetime) -> float:
    """
    datetime -> JD (UTC). Requires timezone-aware datetime.

      JD = (seconds since Unix epoch) / 86400 + 2440587.5
    """
    if dt.tzinfo is None:
        raise InvalidInputError("datetime must be timezone-aware (UTC)")
    dt_utc = dt.astimezone(timezone.utc)
    t = dt_utc.timestamp()  # seconds since Unix epoch
    return _JD_UNIX_EPOCH + t / 86400.0


def instant_to_jd(value: Instant) -> float:
    """Birth instant (datetime or ISO string) -> JD (UTC)."""
    return datetime_utc_to_jd(parse_utc_instant(value))


def jd_to_datetime_utc(jd: float) -> datetime:
    """
    JD (UTC) -> timezone-aware datetime in UTC.
    """
    t = (require_finite(jd, "JD") - _JD_UNIX_EPOCH) * 86400.0
    # valid for negative t (before 1970) too
    return datetime(1970, 1, 1, tzinfo=timezone.utc) + timedelta(seconds=t)


# ============================================================
# Julian centuries from J2000.0
# ============================================================

J2000 = 2451545.0  # 2000-01-01T12:00:00


def T_centuries(jd: float) -> float:
    """
    T = (JD - 2451545.0) / 36525
    Julian centuries from J2000.0.
    """
    return (jd - J2000) / 36525.0


def jd_from_T(T: float) -> float:
    """
    JD = 2451545.0 + 36525*T
    """
    return J2000 + 36525.0 * T
