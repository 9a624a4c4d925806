"""
Surfaces
========

Albedo, surface classification, volcanism, materials, terrain and the
optional hydrosphere / cryosphere of rocky bodies.
"""

from .features import (
    generate_cryosphere,
    generate_hydrosphere,
    generate_terrain,
    has_liquid_water,
    subsurface_ocean_chance,
)
from .generator import SurfaceGenerator, albedo_band, classify_surface, heat_flux_ratio, volcanism_level
from .materials import ASTEROID_MATERIALS, SURFACE_MATERIALS, sample_materials

__all__ = [
    "SurfaceGenerator",
    "albedo_band",
    "classify_surface",
    "heat_flux_ratio",
    "volcanism_level",
    "generate_terrain",
    "generate_hydrosphere",
    "generate_cryosphere",
    "has_liquid_water",
    "subsurface_ocean_chance",
    "SURFACE_MATERIALS",
    "ASTEROID_MATERIALS",
    "sample_materials",
]
