from __future__ import annotations
from dataclasses import dataclass
from typing import Tuple

@dataclass(frozen=True)
class MeanElements:
    """Mean lunar/solar arguments in degrees, unwrapped (may exceed 360)."""
    L0_deg: float   # Moon mean longitude
    D_deg: float    # mean elongation Moon-Sun
    M_deg: float    # Sun mean anomaly
    Mp_deg: float   # Moon mean anomaly
    F_deg: float    # Moon argument of latitude

@dataclass(frozen=True)
class LongitudeResult:
    """Moon longitudes in degrees, unnormalized."""
    tropical_deg: float
    ayanamsa_deg: float
    sidereal_deg: float

@dataclass(frozen=True)
class RashiSign:
    index: int
    english: str
    sanskrit: str

    @property
    def label(self) -> str:
        return f"{self.english} ({self.sanskrit})"

    @property
    def start_deg(self) -> float:
        return 30.0 * self.index

    @property
    def end_deg(self) -> float:
        return 30.0 * (self.index + 1)

@dataclass(frozen=True)
class BirthDetails:
    """Birth form input: local civil date/time and place strings."""
    date: str      # YYYY-MM-DD
    time: str      # HH:MM or HH:MM:SS, 24h
    city: str
    state: str = ""
    country: str = ""

    @property
    def place(self) -> str:
        return ", ".join(p.strip() for p in (self.city, self.state, self.country) if p and p.strip())

@dataclass(frozen=True)
class Bracelet:
    name: str
    crystals: Tuple[str, ...]

@dataclass(frozen=True)
class RashiInsights:
    summary: str
    strengths: Tuple[str, ...]
    challenges: Tuple[str, ...]
    recommended_bracelet: Bracelet
