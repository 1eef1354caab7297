from __future__ import annotations

from ..core.types import LongitudeResult


# Lahiri ayanamsa, quadratic in T (Julian centuries from J2000.0):
#   ayanamsa = 23.85449 + 1.397193 T + 0.000122 T^2
LAHIRI_COEFFS = (23.85449, 1.397193, 0.000122)


def lahiri_ayanamsa_deg(T: float) -> float:
    c0, c1, c2 = LAHIRI_COEFFS
    return c0 + c1 * T + c2 * (T * T)


def sidereal_longitude(tropical_deg: float, T: float) -> LongitudeResult:
    """
    Tropical -> sidereal (Lahiri). No wrapping: the result may be negative
    or exceed 360.
    """
    ayan = lahiri_ayanamsa_deg(T)
    return LongitudeResult(
        tropical_deg=tropical_deg,
        ayanamsa_deg=ayan,
        sidereal_deg=tropical_deg - ayan,
    )
