# Configure JAX to use double precision (64-bit floats) throughout the package
import jax
jax.config.update("jax_enable_x64", True)

from .orbital_elements import OrbitalElements, EpochSnapshot
from .units import Units, DEFAULT_UNITS
from .errors import ParameterFormatError

from .constants import (
    # Constants
    KMPAU,
    TO_RAD,
    EXAGGERATION_SCALE,
    DENSITY_CONSTANT,
    MASS_UNIT,
    DEFAULT_ALBEDO,
)

from .photometry import (
    # Functions
    estimate_radius,
    phase_integral,
)

from .bodies import (
    # Body class
    Body,
    BodyClass,
    load_bodies_data,
    bodies_data
)

# Length of one AU in km
AU = KMPAU

__all__ = [
    # Constants
    "AU",
    "KMPAU",
    "TO_RAD",
    "EXAGGERATION_SCALE",
    "DENSITY_CONSTANT",
    "MASS_UNIT",
    "DEFAULT_ALBEDO",

    # Named tuples
    "OrbitalElements",
    "EpochSnapshot",
    "Units",
    "DEFAULT_UNITS",

    # Errors
    "ParameterFormatError",

    # Functions
    "estimate_radius",
    "phase_integral",

    # Bodies
    "Body",
    "BodyClass",
    "load_bodies_data",
    "bodies_data"
]
