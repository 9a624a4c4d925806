# planetgen/surface/features.py
"""
Terrain, hydrosphere and cryosphere records.
"""

from __future__ import annotations

import math
from typing import Optional

from planetgen.core.archetypes import OrbitZone, SurfaceType
from planetgen.core.constants import (
    BAR_PA,
    G_EARTH_M_S2,
    WATER_BOIL_K,
    WATER_FREEZE_K,
    WATER_TRIPLE_POINT_PA,
)
from planetgen.core.models import (
    AtmosphereProps,
    CryosphereProps,
    HydrosphereProps,
    PhysicalProps,
    TerrainProps,
)
from planetgen.core.rng import RandomStream


def _clamp01(x: float) -> float:
    return min(max(x, 0.0), 1.0)


# ============================================================
# Terrain (4 draws)
# ============================================================

EARTH_RELIEF_M = 1.0e4
MAX_RELIEF_RADIUS_FRACTION = 0.1
CRATER_SIZE_SCALE_M = 1.0e7


def generate_terrain(
    physical: PhysicalProps,
    volcanism: float,
    atmosphere: Optional[AtmosphereProps],
    rng: RandomStream,
) -> TerrainProps:
    """
    max elevation : ~1/g, capped at 10% of the radius
    craters       : fewer with active resurfacing, more on small bodies
    tectonics     : tracks volcanism
    erosion       : low random base, raised by a thick atmosphere
    """
    g = physical.surface_gravity_m_s2
    relief = EARTH_RELIEF_M * (G_EARTH_M_S2 / g if g > 0.0 else 1.0) * rng.range(0.5, 1.5)
    relief = min(relief, MAX_RELIEF_RADIUS_FRACTION * physical.radius_m)

    size_factor = min(max(1.0 - physical.radius_m / CRATER_SIZE_SCALE_M, 0.1), 1.0)
    craters = _clamp01((1.0 - volcanism) * size_factor * rng.range(0.8, 1.2))
    tectonics = _clamp01(volcanism * rng.range(0.8, 1.2))

    erosion = rng.range(0.0, 0.3)
    if atmosphere is not None:
        erosion += min(0.4, 0.2 * atmosphere.surface_pressure_pa / BAR_PA)

    return TerrainProps(
        max_elevation_m=relief,
        crater_density=craters,
        tectonic_activity=tectonics,
        erosion=_clamp01(erosion),
    )


# ============================================================
# Hydrosphere (0 or 3 draws)
# ============================================================

WATER_RETENTION_ESCAPE_M_S = 4000.0


def has_liquid_water(
    temperature_k: float,
    physical: PhysicalProps,
    atmosphere: Optional[AtmosphereProps],
) -> bool:
    return (
        WATER_FREEZE_K <= temperature_k <= WATER_BOIL_K
        and physical.escape_velocity_m_s > WATER_RETENTION_ESCAPE_M_S
        and atmosphere is not None
        and atmosphere.surface_pressure_pa > WATER_TRIPLE_POINT_PA
    )


def generate_hydrosphere(
    temperature_k: float,
    surface_type: SurfaceType,
    physical: PhysicalProps,
    atmosphere: Optional[AtmosphereProps],
    rng: RandomStream,
) -> Optional[HydrosphereProps]:
    if not has_liquid_water(temperature_k, physical, atmosphere):
        return None
    coverage = rng.range(0.7, 0.98) if surface_type is SurfaceType.OCEANIC else rng.range(0.1, 0.9)
    return HydrosphereProps(
        ocean_coverage=coverage,
        mean_depth_m=rng.range(500.0, 5000.0),
        salinity=rng.range(0.005, 0.05),
    )


# ============================================================
# Cryosphere (0, 3 or 5 draws)
# ============================================================

OCEAN_MIN_RADIUS_M = 5.0e5
MAX_SUBSURFACE_OCEAN_CHANCE = 0.9


def subsurface_ocean_chance(heat_flux_ratio: float, radius_m: float) -> float:
    """Heat-driven, suppressed on bodies too small to stay warm inside."""
    p = (0.1 + 0.5 * math.sqrt(max(heat_flux_ratio, 0.0))) * min(1.0, radius_m / OCEAN_MIN_RADIUS_M)
    return min(max(p, 0.0), MAX_SUBSURFACE_OCEAN_CHANCE)


def generate_cryosphere(
    temperature_k: float,
    zone: OrbitZone,
    physical: PhysicalProps,
    heat_flux_ratio: float,
    volcanism: float,
    rng: RandomStream,
) -> Optional[CryosphereProps]:
    if not (temperature_k < WATER_FREEZE_K or zone is OrbitZone.COLD):
        return None
    caps = rng.range(0.6, 1.0) if temperature_k < 100.0 else rng.range(0.05, 0.5)
    permafrost = rng.range(10.0, 1000.0)
    ocean = rng.chance(subsurface_ocean_chance(heat_flux_ratio, physical.radius_m))
    depth = None
    cryovolcanism = False
    if ocean:
        depth = rng.range(1.0e4, 1.5e5)
        cryovolcanism = rng.chance(0.3 + 0.5 * volcanism)
    return CryosphereProps(
        polar_cap_coverage=caps,
        permafrost_depth_m=permafrost,
        subsurface_ocean=ocean,
        subsurface_ocean_depth_m=depth,
        cryovolcanism=cryovolcanism,
    )


__all__ = [
    "generate_terrain",
    "has_liquid_water",
    "generate_hydrosphere",
    "subsurface_ocean_chance",
    "generate_cryosphere",
]
