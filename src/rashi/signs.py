"""The twelve sidereal signs (Rashis) and the longitude -> sign classifier."""

from __future__ import annotations

import math
from typing import Dict, Tuple

from .core.types import RashiSign
from .reference.astro_args import wrap_deg
from .reference.time_scales import require_finite

SIGN_SPAN = 30.0

RASHIS: Tuple[RashiSign, ...] = tuple(
    RashiSign(i, en, sa)
    for i, (en, sa) in enumerate([
        ("Aries", "Mesha"),
        ("Taurus", "Vrishabha"),
        ("Gemini", "Mithuna"),
        ("Cancer", "Karka"),
        ("Leo", "Simha"),
        ("Virgo", "Kanya"),
        ("Libra", "Tula"),
        ("Scorpio", "Vrischika"),
        ("Sagittarius", "Dhanu"),
        ("Capricorn", "Makara"),
        ("Aquarius", "Kumbha"),
        ("Pisces", "Meena"),
    ])
)

# common spellings seen in catalogs and user input
_ALIASES = {
    "mithun": 2,
    "makar": 9,
    "meen": 11,
    "vrishchika": 7,
}


def _build_name_index() -> Dict[str, int]:
    idx: Dict[str, int] = dict(_ALIASES)
    for s in RASHIS:
        for key in (s.english, s.sanskrit, s.label):
            idx[key.lower()] = s.index
    return idx

_BY_NAME = _build_name_index()


def normalize_longitude(lon_deg: float) -> float:
    """Any finite longitude -> [0, 360)."""
    return wrap_deg(require_finite(lon_deg, "sidereal longitude"))


def rashi_index(lon_deg: float) -> int:
    """
    Sector index 0..11 of a sidereal longitude.
    Exact multiples of 30 belong to the later sign.
    """
    k = int(math.floor(normalize_longitude(lon_deg) / SIGN_SPAN))
    return min(max(k, 0), 11)


def classify(lon_deg: float) -> RashiSign:
    """Sidereal longitude (any finite real) -> RashiSign."""
    return RASHIS[rashi_index(lon_deg)]


def sign_by_name(name: str) -> RashiSign:
    """Look up a sign by English name, Sanskrit name or label ("Leo (Simha)")."""
    key = " ".join(name.split()).lower()
    if key not in _BY_NAME:
        raise KeyError(f"Unknown rashi '{name}'")
    return RASHIS[_BY_NAME[key]]
