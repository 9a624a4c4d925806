"""
Bulk Physical Properties
========================

Mass, radius, density, spin (with tidal locking), axial tilt,
oblateness, magnetic moment and internal heat, per body kind.
"""

from .generator import (
    MOON_MAX_PARENT_MASS_FRACTION,
    PHYSICAL_GENERATORS,
    AsteroidPhysicalGenerator,
    MoonPhysicalGenerator,
    PhysicalGenerator,
    PlanetPhysicalGenerator,
)
from .interior import has_dynamo_potential, magnetic_moment, radiogenic_heat, tidal_heating
from .rotation import oblateness, sample_axial_tilt, tidal_lock_timescale_yr

__all__ = [
    "PhysicalGenerator",
    "PlanetPhysicalGenerator",
    "MoonPhysicalGenerator",
    "AsteroidPhysicalGenerator",
    "PHYSICAL_GENERATORS",
    "MOON_MAX_PARENT_MASS_FRACTION",
    "has_dynamo_potential",
    "magnetic_moment",
    "radiogenic_heat",
    "tidal_heating",
    "oblateness",
    "sample_axial_tilt",
    "tidal_lock_timescale_yr",
]
