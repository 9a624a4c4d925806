# planetgen/rings/generator.py
"""
Ring System Generator
=====================

Planets only.

    generate(spec, archetype, context, orbital, physical, rng, config)
        -> RingSystemProps | None

Order: presence roll (by planet mass), bounds (no draw), complexity
roll, band count, gap placement, per-band optical depth / particle
size / composition, mass factor, inclination offset.

Mass is extrapolated from Saturn's main rings:
    M = (M_ref / (A_ref * tau_ref)) * A * mean(tau) * (2.5 if rocky) * u_log[0.5, 2]
"""

from __future__ import annotations

import math
from typing import Dict, List, Optional, Tuple

from planetgen.atmosphere.composition import normalize
from planetgen.core.archetypes import (
    RING_COMPLEXITY_WEIGHTS,
    RING_TABLE,
    Archetype,
    BodyKind,
)
from planetgen.core.config import GeneratorConfig
from planetgen.core.constants import AU_M, M_EARTH_KG, hill_radius
from planetgen.core.context import ParentContext
from planetgen.core.models import OrbitalProps, PhysicalProps, RingBand, RingSystemProps
from planetgen.core.rng import RandomStream
from planetgen.core.spec import BodySpec
from planetgen.rings.layout import band_intervals, place_gaps, ring_bounds

# (minimum planet mass [M_earth], chance of rings)
RING_PRESENCE: List[Tuple[float, float]] = [
    (50.0, 0.70),
    (10.0, 0.50),
    (2.0, 0.10),
    (0.3, 0.03),
    (0.0, 0.01),
]

ICE_LINE_AU = 2.7

ICY_RING_MIX = (("water_ice", (0.85, 0.99)), ("silicate", (0.01, 0.10)), ("tholins", (0.0, 0.03)))
ROCKY_RING_MIX = (("silicate", (0.6, 0.9)), ("carbonaceous_dust", (0.1, 0.3)), ("iron_oxide", (0.0, 0.1)))
ICY_PARTICLE_SIZE_M = (0.01, 10.0)
ROCKY_PARTICLE_SIZE_M = (0.001, 1.0)

SATURN_RING_MASS_KG = 1.54e19
SATURN_RING_AREA_M2 = math.pi * ((1.3678e8) ** 2 - (7.45e7) ** 2)
SATURN_RING_OPTICAL_DEPTH = 1.0
ROCKY_MASS_FACTOR = 2.5
MASS_SPREAD = (0.5, 2.0)
INCLINATION_WARP_DEG = (-0.5, 0.5)


def ring_presence_chance(mass_kg: float) -> float:
    m_earth = mass_kg / M_EARTH_KG
    for min_mass, chance in RING_PRESENCE:
        if m_earth >= min_mass:
            return chance
    return RING_PRESENCE[-1][1]


def ice_line_m(luminosity_lsun: float) -> float:
    return ICE_LINE_AU * math.sqrt(max(luminosity_lsun, 0.0)) * AU_M


def band_name(index: int, count: int) -> str:
    """Outermost band is A, moving inward (Saturn convention)."""
    return chr(ord("A") + (count - 1 - index))


def ring_mass(bands: List[RingBand], icy: bool, rng: RandomStream) -> float:
    area = sum(math.pi * (b.outer_radius_m**2 - b.inner_radius_m**2) for b in bands)
    mean_tau = sum(b.optical_depth for b in bands) / len(bands)
    surface_density_ref = SATURN_RING_MASS_KG / (SATURN_RING_AREA_M2 * SATURN_RING_OPTICAL_DEPTH)
    mass = surface_density_ref * area * mean_tau
    if not icy:
        mass *= ROCKY_MASS_FACTOR
    return mass * rng.log_range(*MASS_SPREAD)


class RingSystemGenerator:

    def generate(
        self,
        spec: BodySpec,
        archetype: Archetype,
        context: ParentContext,
        orbital: OrbitalProps,
        physical: PhysicalProps,
        rng: RandomStream,
        config: GeneratorConfig,
    ) -> Optional[RingSystemProps]:
        if archetype.kind is not BodyKind.PLANET:
            return None
        if spec.has_rings is False:
            return None
        if spec.has_rings is None and not rng.chance(ring_presence_chance(physical.mass_kg)):
            return None

        hill = hill_radius(orbital.semi_major_axis_m, orbital.eccentricity, physical.mass_kg, context.mass_kg)
        bounds = ring_bounds(physical.radius_m, physical.density_kg_m3, hill)
        if bounds is None:
            return None
        inner, outer = bounds

        ov = spec.rings
        complexity = spec.ring_complexity
        if complexity is None:
            complexity = rng.weighted_choice(RING_COMPLEXITY_WEIGHTS)
        table = RING_TABLE[complexity]
        count = ov.band_count if ov.band_count is not None else rng.int_range(*table.band_count)

        gaps = place_gaps(count - 1, inner, outer, rng, config.gap_placement_attempts)
        intervals = band_intervals(inner, outer, gaps)

        icy = orbital.semi_major_axis_m > ice_line_m(context.luminosity_lsun)
        mix = ICY_RING_MIX if icy else ROCKY_RING_MIX
        size_range = ICY_PARTICLE_SIZE_M if icy else ROCKY_PARTICLE_SIZE_M

        bands: List[RingBand] = []
        for i, (lo, hi) in enumerate(intervals):
            tau = rng.range(*table.optical_depth)
            particle = rng.log_range(*size_range)
            composition: Dict[str, float] = normalize({k: rng.range(a, b) for k, (a, b) in mix})
            bands.append(
                RingBand(
                    name=band_name(i, len(intervals)),
                    inner_radius_m=lo,
                    outer_radius_m=hi,
                    optical_depth=tau,
                    composition=composition,
                    particle_size_m=particle,
                )
            )

        mass = ov.mass_kg if ov.mass_kg is not None else ring_mass(bands, icy, rng)
        if ov.inclination_deg is not None:
            inclination = ov.inclination_deg
        else:
            inclination = min(max(physical.axial_tilt_deg + rng.range(*INCLINATION_WARP_DEG), 0.0), 180.0)

        return RingSystemProps(
            bands=tuple(bands),
            mass_kg=mass,
            inclination_deg=inclination,
            complexity=complexity,
            icy=icy,
        )


__all__ = [
    "RingSystemGenerator",
    "RING_PRESENCE",
    "ring_presence_chance",
    "ice_line_m",
    "band_name",
    "ring_mass",
]
