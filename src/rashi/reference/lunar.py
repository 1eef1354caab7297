# reference/lunar.py

from __future__ import annotations

import math

from ..core.types import MeanElements


# (d, m, m', f, amplitude in degrees)
# The six largest periodic terms of the lunar longitude. Sign boundaries are
# checked against this truncation, so do not extend the table here.
LUNAR_LON_TERMS = (
    (0, 0, 1, 0, 6.288774),    # equation of the centre
    (2, 0, -1, 0, 1.274027),   # evection
    (2, 0, 0, 0, 0.658314),    # variation
    (0, 0, 2, 0, 0.213618),
    (0, 1, 0, 0, -0.185116),   # annual equation
    (0, 0, 0, 2, -0.114332),   # reduction to the ecliptic
)


def longitude_correction(me: MeanElements) -> float:
    """
    Sum of the periodic terms (degrees) to add to the mean longitude L0.
    """
    D_rad = math.radians(me.D_deg)
    M_rad = math.radians(me.M_deg)
    Mp_rad = math.radians(me.Mp_deg)
    F_rad = math.radians(me.F_deg)

    lon_sum = 0.0
    for d, m, mp, f, amp in LUNAR_LON_TERMS:
        arg = d * D_rad + m * M_rad + mp * Mp_rad + f * F_rad
        lon_sum += amp * math.sin(arg)
    return lon_sum


def tropical_longitude(me: MeanElements) -> float:
    """Moon tropical ecliptic longitude in degrees (unwrapped)."""
    return me.L0_deg + longitude_correction(me)
