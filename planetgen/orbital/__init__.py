"""
Orbital Placement
=================

Semi-major axis, eccentricity, inclination and angular elements for
planets, moons and asteroids, bounded by the parent's Roche limit and
Hill sphere.
"""

from .generator import (
    ORBITAL_GENERATORS,
    AsteroidOrbitalGenerator,
    MoonOrbitalGenerator,
    OrbitalGenerator,
    PlanetOrbitalGenerator,
    moon_orbit_band,
    planet_distance_band_m,
)

__all__ = [
    "OrbitalGenerator",
    "PlanetOrbitalGenerator",
    "MoonOrbitalGenerator",
    "AsteroidOrbitalGenerator",
    "ORBITAL_GENERATORS",
    "moon_orbit_band",
    "planet_distance_band_m",
]
