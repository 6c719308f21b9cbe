"""
Orbital elements representation for celestial bodies.
"""
from typing import NamedTuple


class OrbitalElements(NamedTuple):
    """
    Keplerian orbital elements of a body at its epoch.

    All angular quantities are in radians.

    Attributes:
        a: Semi-major axis (AU)
        e: Eccentricity (dimensionless, 0 <= e < 1)
        i: Inclination relative to the ecliptic (radians)
        Omega: Longitude of the ascending node (radians)
        omega: Argument of periapsis (radians)
        epoch: Epoch of the elements (MJD)
    """
    a: float  # semi-major axis (AU)
    e: float  # eccentricity
    i: float  # inclination (rad)
    Omega: float  # longitude of ascending node (rad)
    omega: float  # argument of periapsis (rad)
    epoch: float  # epoch (MJD)


class EpochSnapshot(NamedTuple):
    """Element values captured at construction, used to restore initial conditions."""
    a: float  # semi-major axis (AU)
    e: float  # eccentricity
    i: float  # inclination (rad)
    Omega: float  # longitude of ascending node (rad)
