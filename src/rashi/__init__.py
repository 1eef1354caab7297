"""rashi public API.

Keep this surface small: users should mostly interact with functions re-exported here.
"""

from .api import (
    moon_longitude,
    moon_longitude_jd,
    moon_rashi,
    moon_rashi_jd,
    moon_rashi_local,
)
from .core.errors import (
    RashiError,
    InvalidInputError,
    ResolutionError,
    ResolverUnavailableError,
    InsightUnavailableError,
)
from .core.types import BirthDetails, LongitudeResult, RashiSign
from .signs import RASHIS, classify, sign_by_name

__all__ = [
    "moon_longitude",
    "moon_longitude_jd",
    "moon_rashi",
    "moon_rashi_jd",
    "moon_rashi_local",
    "RashiError",
    "InvalidInputError",
    "ResolutionError",
    "ResolverUnavailableError",
    "InsightUnavailableError",
    "BirthDetails",
    "LongitudeResult",
    "RashiSign",
    "RASHIS",
    "classify",
    "sign_by_name",
]
