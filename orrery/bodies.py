import csv
import logging
from collections.abc import Mapping
from enum import IntEnum
from pathlib import Path
from typing import Any, Optional

import pydantic
from pydantic import ConfigDict, Field, PrivateAttr

from orrery.constants import (
    DEFAULT_NAME,
    DEFAULT_EPOCH,
    DEFAULT_SEMI_MAJOR_AXIS,
    DEFAULT_ABSOLUTE_MAGNITUDE,
    DEFAULT_ZOOM_RATIO,
    DEFAULT_AXIS_DEC,
    DENSITY_CONSTANT,
    MASS_UNIT,
)
from orrery.orbital_elements import OrbitalElements, EpochSnapshot
from orrery.params import has_data, parse_str, parse_float, parse_angle
from orrery.photometry import phase_integral
from orrery.units import Units, DEFAULT_UNITS

logger = logging.getLogger(__name__)

# Keys understood by Body.from_params
PARAM_KEYS = (
    'name', 'type', 'epoch', 'a', 'e', 'inc', 'w', 'omega', 'thetaDot',
    'ringRadius', 'H', 'axisRA', 'axisDec', 'radius', 'mass', 'zoomRatio',
)


class BodyClass(IntEnum):
    """Body category; also controls which bodies are labeled at launch (0-2)."""
    PLANET = 0
    DWARF_PLANET = 1
    LARGE_MOON_OR_ASTEROID = 2
    SMALL_MOON = 3
    SMALL_BODY = 4


class Body(pydantic.BaseModel):
    """
    Represents a celestial body in the orrery.

    Missing physical parameters are estimated at construction and the derived
    orbit quantities are computed once from the final element set.

    Attributes:
        name: Name of the body (e.g., "Mars")
        label: Display label (defaults to name)
        body_class: Category of the body
        epoch: Epoch of the elements (MJD)
        semi_major_axis: Semi-major axis (AU)
        eccentricity: Eccentricity, 0 <= e < 1
        inclination: Inclination (rad)
        arg_periapsis: Argument of periapsis (rad)
        long_asc_node: Longitude of the ascending node (rad)
        theta_dot: Rotation rate (rad/century)
        axis_ra: Right ascension of the rotation axis (rad)
        axis_dec: Declination of the rotation axis (rad)
        absolute_magnitude: Absolute magnitude H
        radius_km: Physical radius (km), estimated from H if not given
        mass_kg: Mass (kg), estimated from radius if not given
        ring_radius_factor: Ring system radius as a multiple of radius_km
        zoom_ratio: Initial scale of the orrery view
        units: Conversion constants and radius estimator
    """
    model_config = ConfigDict(arbitrary_types_allowed=True)  # Allow Units (NamedTuple with a callable)

    name: str = DEFAULT_NAME
    label: str = ""
    body_class: BodyClass = BodyClass.SMALL_BODY
    epoch: float = DEFAULT_EPOCH

    semi_major_axis: float = Field(DEFAULT_SEMI_MAJOR_AXIS, gt=0.0)
    eccentricity: float = Field(0.0, ge=0.0, lt=1.0)
    inclination: float = 0.0
    arg_periapsis: float = 0.0
    long_asc_node: float = 0.0

    theta_dot: float = 0.0
    axis_ra: float = 0.0
    axis_dec: float = DEFAULT_AXIS_DEC

    absolute_magnitude: float = DEFAULT_ABSOLUTE_MAGNITUDE
    radius_km: Optional[float] = None
    mass_kg: Optional[float] = None
    ring_radius_factor: float = 0.0
    zoom_ratio: float = DEFAULT_ZOOM_RATIO

    units: Units = Field(default=DEFAULT_UNITS, exclude=True, repr=False)

    # Derived quantities, set by rederive()
    orbital_period_centuries: float = 0.0
    mean_orbit_radius: float = 0.0
    periapsis_distance: float = 0.0
    apoapsis_distance: float = 0.0
    exaggerated_render_radius: float = 0.0

    _epoch_snapshot: EpochSnapshot = PrivateAttr()

    def model_post_init(self, __context: Any) -> None:
        if not self.label:
            self.label = self.name

        if self.radius_km is None:
            self.radius_km = float(self.units.estimate_radius(self.absolute_magnitude))
            logger.debug("%s: radius estimated from H=%g as %g km",
                         self.name, self.absolute_magnitude, self.radius_km)

        if self.mass_kg is None:
            # 2.5 g/cm^3 mean density
            self.mass_kg = DENSITY_CONSTANT * self.radius_km**3
            logger.debug("%s: mass estimated from radius as %g kg", self.name, self.mass_kg)

        self.rederive()

        self._epoch_snapshot = EpochSnapshot(
            a=self.semi_major_axis,
            e=self.eccentricity,
            i=self.inclination,
            Omega=self.long_asc_node,
        )

    @classmethod
    def from_params(cls, params: Mapping, units: Units = DEFAULT_UNITS) -> 'Body':
        """
        Create a body from a raw parameter record.

        Angles are given in degrees (rotation rate in degrees per century) and
        stored in radians. The mass is given in units of 10^17 kg. Absent
        fields take their defaults.

        Args:
            params: Mapping with any of the keys in PARAM_KEYS
            units: Conversion constants and radius estimator

        Returns:
            Body with estimated and derived fields populated

        Raises:
            ParameterFormatError: if a present numeric field is not a number

        Examples:
            >>> mars = Body.from_params({'name': 'Mars', 'type': '0', 'a': '1.5237', 'e': '0.0934'})
            >>> print(mars)
            Mars (Planet)
        """
        unknown = set(params) - set(PARAM_KEYS)
        if unknown:
            logger.debug("Ignoring unrecognized parameters: %s", sorted(map(str, unknown)))

        name = parse_str(params, 'name')
        kwargs = {
            'name': name if name is not None else DEFAULT_NAME,
            'body_class': _parse_body_class(params),
            'units': units,
        }

        numeric_fields = {
            'epoch': 'epoch',
            'ringRadius': 'ring_radius_factor',
            'H': 'absolute_magnitude',
            'radius': 'radius_km',
            'zoomRatio': 'zoom_ratio',
        }
        for key, field in numeric_fields.items():
            value = parse_float(params, key)
            if value is not None:
                kwargs[field] = value

        angle_fields = {
            'inc': 'inclination',
            'w': 'arg_periapsis',
            'omega': 'long_asc_node',
            'thetaDot': 'theta_dot',
            'axisRA': 'axis_ra',
            'axisDec': 'axis_dec',
        }
        for key, field in angle_fields.items():
            value = parse_angle(params, key, units.to_rad)
            if value is not None:
                kwargs[field] = value

        a = parse_float(params, 'a')
        if a is not None:
            if a > 0.0:
                kwargs['semi_major_axis'] = a
            else:
                logger.warning("%s: semi-major axis %g is not positive, using %g",
                               kwargs['name'], a, DEFAULT_SEMI_MAJOR_AXIS)

        e = parse_float(params, 'e')
        if e is not None:
            if 0.0 <= e < 1.0:
                kwargs['eccentricity'] = e
            else:
                logger.warning("%s: eccentricity %g outside [0, 1), using 0", kwargs['name'], e)

        mass = parse_float(params, 'mass')
        if mass is not None:
            kwargs['mass_kg'] = mass * MASS_UNIT

        return cls(**kwargs)

    def rederive(self) -> None:
        """Recompute the derived orbit and render quantities from the current elements."""
        a = self.semi_major_axis
        e = self.eccentricity

        self.orbital_period_centuries = a**1.5 / 100.0
        self.mean_orbit_radius = a * (1.0 + e * e / 2.0)
        self.periapsis_distance = a * (1.0 - e)
        self.apoapsis_distance = a * (1.0 + e)
        self.exaggerated_render_radius = self.radius_km / self.units.au_km * self.units.exaggeration_scale

    def reset_to_epoch(self) -> None:
        """Restore the live elements to their values at construction."""
        snapshot = self._epoch_snapshot
        self.semi_major_axis = snapshot.a
        self.eccentricity = snapshot.e
        self.inclination = snapshot.i
        self.long_asc_node = snapshot.Omega

    @property
    def a_start(self) -> float:
        return self._epoch_snapshot.a

    @property
    def e_start(self) -> float:
        return self._epoch_snapshot.e

    @property
    def inc_start(self) -> float:
        return self._epoch_snapshot.i

    @property
    def long_asc_node_start(self) -> float:
        return self._epoch_snapshot.Omega

    @property
    def epoch_snapshot(self) -> EpochSnapshot:
        return self._epoch_snapshot

    @property
    def elements(self) -> OrbitalElements:
        """Current (live) orbital elements"""
        return OrbitalElements(
            a=self.semi_major_axis,
            e=self.eccentricity,
            i=self.inclination,
            Omega=self.long_asc_node,
            omega=self.arg_periapsis,
            epoch=self.epoch,
        )

    @staticmethod
    def phase_integral(alpha: float) -> float:
        """Fraction of reflected light at a scalar phase angle alpha (rad), see orrery.photometry.phase_integral"""
        return float(phase_integral(alpha))

    def is_planet(self) -> bool:
        """Check if this body is a major planet"""
        return self.body_class == BodyClass.PLANET

    def is_small_body(self) -> bool:
        """Check if this body is an asteroid or comet"""
        return self.body_class == BodyClass.SMALL_BODY

    def __repr__(self) -> str:
        return f"Body(name='{self.name}', class={self.body_class.name}, a={self.semi_major_axis})"

    def __str__(self) -> str:
        return f"{self.name} ({self.body_class.name.replace('_', ' ').title()})"


def _parse_body_class(params: Mapping) -> BodyClass:
    code = parse_float(params, 'type')
    if code is None:
        return BodyClass.SMALL_BODY
    if code.is_integer() and int(code) in BodyClass._value2member_map_:
        return BodyClass(int(code))
    logger.warning("Unknown body type %r, using %s", params['type'], BodyClass.SMALL_BODY.name)
    return BodyClass.SMALL_BODY


def load_bodies_data(path: Optional[Path] = None, units: Units = DEFAULT_UNITS) -> dict[str, Body]:
    """
    Load bodies from a CSV catalog of parameter records.

    Column names are the parameter keys of Body.from_params; empty cells count
    as absent.

    Args:
        path: CSV file, defaults to the bundled solar system catalog
        units: Conversion constants and radius estimator

    Returns:
        Dictionary mapping body name to Body object
    """
    if path is None:
        path = Path(__file__).parent / 'data' / 'solar_system.csv'

    bodies = {}
    with open(path, 'r', encoding='utf-8-sig', newline='') as f:
        reader = csv.DictReader(f)
        for row in reader:
            if not any(has_data(row, key) for key in row):
                continue
            body = Body.from_params(row, units=units)
            if body.name in bodies:
                logger.warning("Duplicate body '%s' in %s, keeping the last entry", body.name, path)
            bodies[body.name] = body

    logger.debug("Loaded %d bodies from %s", len(bodies), path)
    return bodies


bodies_data = load_bodies_data()
