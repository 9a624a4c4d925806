# planetgen/atmosphere/generator.py
"""
Atmosphere Generator
====================

    generate(spec, archetype, context, orbital, physical, rng) -> AtmosphereProps | None

1. Presence
   - pinned `has_atmosphere` wins outright (no draws),
   - asteroids never generate one unpinned,
   - otherwise the Jeans retention test at the nominal equilibrium
     temperature, then (rocky only) a presence roll by size category.
2. Template roll (temperate rocky bodies only), per-gas fractions.
3. Surface pressure from the template range.
4. Greenhouse factor (one variation draw), clamped to [1, 3].
5. Scale height kT / (m g) at T_eq * greenhouse.
"""

from __future__ import annotations

import math
from typing import Mapping, Optional

from planetgen.atmosphere.composition import (
    mean_molecular_weight,
    pick_template,
    sample_mix,
)
from planetgen.atmosphere.retention import retains_atmosphere
from planetgen.core.archetypes import Archetype, BodyKind, SizeCategory
from planetgen.core.constants import AMU_KG, BAR_PA, K_B
from planetgen.core.context import ParentContext
from planetgen.core.models import AtmosphereProps, OrbitalProps, PhysicalProps
from planetgen.core.rng import RandomStream
from planetgen.core.spec import BodySpec

PRESENCE_CHANCE = {
    SizeCategory.DWARF: 0.10,
    SizeCategory.SUB_TERRESTRIAL: 0.40,
    SizeCategory.TERRESTRIAL: 0.75,
    SizeCategory.SUPER_EARTH: 0.95,
}

NOMINAL_ALBEDO_ROCKY = 0.30
NOMINAL_ALBEDO_GASEOUS = 0.34

GREENHOUSE_RANGE = (1.0, 3.0)
GREENHOUSE_VARIATION = (0.9, 1.1)
CO2_COEFF = 0.25
CH4_POTENCY = 25.0
H2O_COEFF = 0.1


def nominal_albedo(archetype: Archetype) -> float:
    return NOMINAL_ALBEDO_GASEOUS if archetype.is_gaseous else NOMINAL_ALBEDO_ROCKY


def greenhouse_factor(composition: Mapping[str, float], surface_pressure_pa: float, rng: RandomStream) -> float:
    """
    1 + CO2 (log, pressure-amplified) + CH4 (linear, 25x CO2) + H2O (modest),
    times u[0.9, 1.1], clamped to [1, 3]. One draw.
    """
    p_bar = max(surface_pressure_pa, 0.0) / BAR_PA
    co2 = CO2_COEFF * math.log1p(10.0 * composition.get("CO2", 0.0) * p_bar)
    ch4 = CH4_POTENCY * CO2_COEFF * composition.get("CH4", 0.0) * p_bar
    h2o = H2O_COEFF * min(100.0 * composition.get("H2O", 0.0) * p_bar, 1.0)
    factor = (1.0 + co2 + ch4 + h2o) * rng.range(*GREENHOUSE_VARIATION)
    lo, hi = GREENHOUSE_RANGE
    return min(max(factor, lo), hi)


def scale_height(temperature_k: float, mean_molecular_weight_amu: float, gravity_m_s2: float) -> float:
    if gravity_m_s2 <= 0.0 or mean_molecular_weight_amu <= 0.0:
        return 0.0
    return K_B * temperature_k / (mean_molecular_weight_amu * AMU_KG * gravity_m_s2)


class AtmosphereGenerator:

    def generate(
        self,
        spec: BodySpec,
        archetype: Archetype,
        context: ParentContext,
        orbital: OrbitalProps,
        physical: PhysicalProps,
        rng: RandomStream,
    ) -> Optional[AtmosphereProps]:
        t_eq = context.body_temperature(nominal_albedo(archetype), orbital.semi_major_axis_m)
        if not self._present(spec, archetype, physical, t_eq, rng):
            return None

        ov = spec.atmosphere
        size = archetype.size_category or SizeCategory.DWARF
        template = pick_template(size, archetype.zone, t_eq, rng)
        if ov.composition is not None:
            composition = dict(ov.composition)
            classification = "custom"
        else:
            composition = sample_mix(template, rng)
            classification = template.name

        if ov.surface_pressure_pa is not None:
            pressure = ov.surface_pressure_pa
        else:
            pressure = rng.range(*template.pressure_bar) * BAR_PA

        if ov.greenhouse_factor is not None:
            greenhouse = ov.greenhouse_factor
        else:
            greenhouse = greenhouse_factor(composition, pressure, rng)

        mmw = mean_molecular_weight(composition)
        return AtmosphereProps(
            surface_pressure_pa=pressure,
            scale_height_m=scale_height(t_eq * greenhouse, mmw, physical.surface_gravity_m_s2),
            composition=composition,
            greenhouse_factor=greenhouse,
            mean_molecular_weight_amu=mmw,
            classification=classification,
        )

    @staticmethod
    def _present(spec, archetype, physical, t_eq, rng) -> bool:
        if spec.has_atmosphere is not None:
            return spec.has_atmosphere
        if archetype.kind is BodyKind.ASTEROID:
            return False
        if not retains_atmosphere(physical.escape_velocity_m_s, t_eq, archetype.size_category):
            return False
        if archetype.is_gaseous:
            return True
        return rng.chance(PRESENCE_CHANCE[archetype.size_category])


__all__ = [
    "AtmosphereGenerator",
    "PRESENCE_CHANCE",
    "greenhouse_factor",
    "scale_height",
    "nominal_albedo",
]
