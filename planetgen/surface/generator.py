# planetgen/surface/generator.py
"""
Surface Generator
=================

Rocky kinds only (gaseous archetypes get no surface).

    generate(spec, archetype, context, orbital, physical, atmosphere, rng)
        -> SurfaceProps | None

Order: albedo, temperature (no draw), type (roll only in the 273-500 K
window; OCEANIC only where liquid water can exist), volcanism, materials,
terrain, hydrosphere, cryosphere.
"""

from __future__ import annotations

import math
from typing import List, Optional, Tuple

from planetgen.atmosphere.generator import nominal_albedo
from planetgen.core.archetypes import ASTEROID_TABLE, Archetype, OrbitZone, SurfaceType
from planetgen.core.constants import R_EARTH_M, WATER_FREEZE_K
from planetgen.core.context import ParentContext
from planetgen.core.models import AtmosphereProps, OrbitalProps, PhysicalProps, SurfaceProps
from planetgen.core.rng import RandomStream
from planetgen.core.spec import BodySpec
from planetgen.physical.interior import EARTH_HEAT_FLOW_W
from planetgen.surface.features import (
    generate_cryosphere,
    generate_hydrosphere,
    generate_terrain,
    has_liquid_water,
)
from planetgen.surface.materials import ASTEROID_MATERIALS, SURFACE_MATERIALS, sample_materials

ALBEDO_CLAMP = (0.02, 0.95)
SCORCHED_ALBEDO = (0.05, 0.15)
ALBEDO_BANDS = {
    OrbitZone.HOT: (0.10, 0.30),
    OrbitZone.TEMPERATE: (0.20, 0.40),
    OrbitZone.COLD: (0.40, 0.80),
}
SCORCHED_MIN_K = 500.0
ICY_ALBEDO_MAX_K = 150.0

MOLTEN_MIN_K = 700.0
VOLCANIC_MIN_K = 500.0
FROZEN_MAX_K = 100.0

SURFACE_TYPE_ROLLS: dict[OrbitZone, List[Tuple[SurfaceType, float]]] = {
    OrbitZone.HOT: [(SurfaceType.DESERT, 0.6), (SurfaceType.ROCKY, 0.3), (SurfaceType.VOLCANIC, 0.1)],
    OrbitZone.TEMPERATE: [(SurfaceType.TEMPERATE, 0.4), (SurfaceType.OCEANIC, 0.3), (SurfaceType.DESERT, 0.3)],
    OrbitZone.COLD: [(SurfaceType.ROCKY, 0.5), (SurfaceType.ICY, 0.3), (SurfaceType.DESERT, 0.2)],
}

EARTH_HEAT_FLUX_W_M2 = EARTH_HEAT_FLOW_W / (4.0 * math.pi * R_EARTH_M**2)
VOLCANISM_SCALE = 0.4
VOLCANISM_DECAY_GYR = 10.0
VOLCANISM_VARIATION = (0.5, 1.5)


# ============================================================
# Helpers
# ============================================================

def albedo_band(archetype: Archetype, t_nominal_k: float) -> Tuple[float, float]:
    if archetype.asteroid_type is not None:
        return ASTEROID_TABLE[archetype.asteroid_type].albedo
    if t_nominal_k > SCORCHED_MIN_K:
        return SCORCHED_ALBEDO
    if t_nominal_k < ICY_ALBEDO_MAX_K:
        return ALBEDO_BANDS[OrbitZone.COLD]
    return ALBEDO_BANDS[archetype.zone]


def classify_surface(
    temperature_k: float,
    zone: OrbitZone,
    rng: RandomStream,
    liquid_water: bool = True,
) -> SurfaceType:
    """OCEANIC is only offered when the body can hold liquid water."""
    if temperature_k > MOLTEN_MIN_K:
        return SurfaceType.MOLTEN
    if temperature_k > VOLCANIC_MIN_K:
        return SurfaceType.VOLCANIC
    if temperature_k < FROZEN_MAX_K:
        return SurfaceType.FROZEN
    if temperature_k < WATER_FREEZE_K:
        return SurfaceType.ICY if zone is OrbitZone.COLD else SurfaceType.ROCKY
    rolls = SURFACE_TYPE_ROLLS[zone]
    if not liquid_water:
        rolls = [(t, w) for t, w in rolls if t is not SurfaceType.OCEANIC]
    return rng.weighted_choice(rolls)


def heat_flux_ratio(physical: PhysicalProps) -> float:
    """Surface heat flux relative to Earth's."""
    area = 4.0 * math.pi * physical.radius_m**2
    if area <= 0.0:
        return 0.0
    return physical.internal_heat_w / area / EARTH_HEAT_FLUX_W_M2


def volcanism_level(flux_ratio: float, age_gyr: float, rng: RandomStream) -> float:
    base = VOLCANISM_SCALE * math.sqrt(max(flux_ratio, 0.0)) * math.exp(-age_gyr / VOLCANISM_DECAY_GYR)
    return min(max(base * rng.range(*VOLCANISM_VARIATION), 0.0), 1.0)


# ============================================================
# Generator
# ============================================================

class SurfaceGenerator:

    def generate(
        self,
        spec: BodySpec,
        archetype: Archetype,
        context: ParentContext,
        orbital: OrbitalProps,
        physical: PhysicalProps,
        atmosphere: Optional[AtmosphereProps],
        rng: RandomStream,
    ) -> Optional[SurfaceProps]:
        if archetype.is_gaseous:
            return None
        ov = spec.surface

        if ov.albedo is not None:
            albedo = ov.albedo
        else:
            t_nominal = context.body_temperature(nominal_albedo(archetype), orbital.semi_major_axis_m)
            lo, hi = albedo_band(archetype, t_nominal)
            albedo = min(max(rng.range(lo, hi), ALBEDO_CLAMP[0]), ALBEDO_CLAMP[1])

        if ov.temperature_k is not None:
            temperature = ov.temperature_k
        else:
            greenhouse = atmosphere.greenhouse_factor if atmosphere is not None else 1.0
            temperature = context.body_temperature(albedo, orbital.semi_major_axis_m) * greenhouse

        if ov.surface_type is not None:
            surface_type = ov.surface_type
        else:
            liquid = has_liquid_water(temperature, physical, atmosphere)
            surface_type = classify_surface(temperature, archetype.zone, rng, liquid)

        flux_ratio = heat_flux_ratio(physical)
        volcanism = ov.volcanism if ov.volcanism is not None else volcanism_level(flux_ratio, context.age_gyr, rng)

        if archetype.asteroid_type is not None:
            materials = sample_materials(ASTEROID_MATERIALS[archetype.asteroid_type], rng)
        else:
            materials = sample_materials(SURFACE_MATERIALS[surface_type], rng)

        terrain = generate_terrain(physical, volcanism, atmosphere, rng)
        hydrosphere = generate_hydrosphere(temperature, surface_type, physical, atmosphere, rng)
        cryosphere = generate_cryosphere(temperature, archetype.zone, physical, flux_ratio, volcanism, rng)

        return SurfaceProps(
            temperature_k=temperature,
            albedo=albedo,
            surface_type=surface_type,
            volcanism=volcanism,
            materials=materials,
            terrain=terrain,
            hydrosphere=hydrosphere,
            cryosphere=cryosphere,
        )


__all__ = [
    "SurfaceGenerator",
    "albedo_band",
    "classify_surface",
    "heat_flux_ratio",
    "volcanism_level",
]
