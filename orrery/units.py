"""
Unit conversion collaborator used when normalizing body parameters.
"""
from typing import Callable, NamedTuple

from .constants import KMPAU, TO_RAD, EXAGGERATION_SCALE
from .photometry import estimate_radius


class Units(NamedTuple):
    """
    Conversion constants and estimators supplied to Body construction.

    Attributes:
        au_km: Length of one AU (km)
        to_rad: Radians per degree
        exaggeration_scale: Factor applied to true radius when rendering
        estimate_radius: Radius (km) from absolute magnitude, monotonic in H
    """
    au_km: float = KMPAU
    to_rad: float = TO_RAD
    exaggeration_scale: float = EXAGGERATION_SCALE
    estimate_radius: Callable[[float], float] = estimate_radius


DEFAULT_UNITS = Units()
