from __future__ import annotations

from math import fmod

from ..core.types import MeanElements
from .time_scales import T_centuries


# ------------------------------------------------------------
# Angle helpers
# ------------------------------------------------------------

def wrap_deg(x_deg: float) -> float:
    """Wrap degrees to [0,360)."""
    # avoid slow % for huge values; fmod is fine
    y = fmod(x_deg, 360.0)
    if y < 0:
        y += 360.0
    # tiny negatives round up to exactly 360.0
    if y >= 360.0:
        y = 0.0
    return y

def wrap180(deg: float) -> float:
    """Wraps an angle in degrees to the range [-180.0, 180.0)."""
    return (deg + 180.0) % 360.0 - 180.0


# ------------------------------------------------------------
# Mean elements (Meeus / ELP-2000/82; degrees)
# ------------------------------------------------------------

def mean_elements(T: float) -> MeanElements:
    """
    Mean lunar and solar arguments in degrees, T in Julian centuries from J2000.0.

    Coefficients match the standard Meeus/ELP-style polynomials (to T^3):
      L0 = 218.3164477 + 481267.88123421 T - 0.0015786 T^2 + T^3/538841
      D  = 297.8501921 + 445267.1114034  T - 0.0018819 T^2 + T^3/545868
      M  = 357.5291092 + 35999.0502909  T - 0.0001536 T^2 + T^3/24490000
      M' = 134.9633964 + 477198.8675055 T + 0.0087414 T^2 + T^3/69699
      F  = 93.2720950  + 483202.0175233 T - 0.0036539 T^2 - T^3/3526000

    The angles are NOT wrapped: sin/cos are periodic, and a few centuries
    from J2000 the raw values stay around 1e6 degrees, far inside double
    precision.
    """
    T2 = T * T
    T3 = T2 * T

    L0 = (
        218.3164477
        + 481267.88123421 * T
        - 0.0015786 * T2
        + (T3 / 538841.0)
    )
    D = (
        297.8501921
        + 445267.1114034 * T
        - 0.0018819 * T2
        + (T3 / 545868.0)
    )
    M = (
        357.5291092
        + 35999.0502909 * T
        - 0.0001536 * T2
        + (T3 / 24490000.0)
    )
    Mp = (
        134.9633964
        + 477198.8675055 * T
        + 0.0087414 * T2
        + (T3 / 69699.0)
    )
    F = (
        93.2720950
        + 483202.0175233 * T
        - 0.0036539 * T2
        - (T3 / 3526000.0)
    )

    return MeanElements(L0_deg=L0, D_deg=D, M_deg=M, Mp_deg=Mp, F_deg=F)


def mean_elements_jd(jd: float) -> MeanElements:
    return mean_elements(T_centuries(jd))
