"""
Physical and display constants for the orrery body model.

This module contains all constants used when normalizing body parameter records.
"""

import numpy as np

# Basic astronomical constants
KMPAU = 149597870.691  # km per AU
TO_RAD = np.pi / 180.0  # radians per degree

# Rendering
EXAGGERATION_SCALE = 1000.0  # render radius exaggeration factor

# Physical estimation
DENSITY_CONSTANT = 8.7523e9  # kg per km^3 radius cubed, calibrated for 2.5 g/cm^3
MASS_UNIT = 1.0e17  # kg per catalog mass unit
DEFAULT_ALBEDO = 0.15  # geometric albedo used for magnitude -> size estimates

# Parameter defaults
DEFAULT_NAME = "Unnamed"
DEFAULT_EPOCH = 51544.5  # MJD (J2000.0)
DEFAULT_SEMI_MAJOR_AXIS = 1.0  # AU
DEFAULT_ABSOLUTE_MAGNITUDE = 10.0
DEFAULT_ZOOM_RATIO = 1000.0
DEFAULT_AXIS_DEC = np.pi / 2  # rad
