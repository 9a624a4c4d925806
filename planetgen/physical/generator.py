# planetgen/physical/generator.py
"""
Physical Property Generators
============================

    generate(spec, archetype, context, orbital, rng, config) -> PhysicalProps

Steps (each skipped when the BodySpec pins it):
1. mass          : archetype table (moons capped at 10% of the parent)
2. radius        : from mass and a sampled density (sphere inversion)
3. tidal lock    : closed-form timescale vs. system age (no draw)
4. rotation      : orbital period when locked, else mass-banded + retro roll
5. axial tilt    : [0, 10] deg when locked, else four-tier roll
6. oblateness    : fluid formula scaled by rigidity (no draw)
7. magnetic field: threshold, dead-dynamo roll, scale
8. internal heat : radiogenic decay (+ tidal term for moons), no draw
"""

from __future__ import annotations

from planetgen.core.archetypes import (
    ASTEROID_LARGE_MASS_KG,
    ASTEROID_SMALL_MASS_KG,
    SIZE_TABLE,
    Archetype,
    BodyKind,
)
from planetgen.core.config import GeneratorConfig
from planetgen.core.constants import density_from_mass_radius, radius_from_mass_density
from planetgen.core.context import ParentContext
from planetgen.core.models import OrbitalProps, PhysicalProps
from planetgen.core.rng import RandomStream
from planetgen.core.spec import BodySpec
from planetgen.physical.interior import magnetic_moment, radiogenic_heat, tidal_heating
from planetgen.physical.rotation import (
    ASTEROID_ROTATION_H,
    RIGIDITY_FLUID,
    RIGIDITY_ROCKY,
    oblateness,
    rotation_band_h,
    sample_axial_tilt,
    sample_rotation_period,
    tidal_lock_timescale_yr,
)

MOON_MAX_PARENT_MASS_FRACTION = 0.1


class PhysicalGenerator:
    """Shared pipeline; subclasses supply mass, rotation band and heat."""

    kind: BodyKind
    retrograde_chance = 0.05

    def generate(
        self,
        spec: BodySpec,
        archetype: Archetype,
        context: ParentContext,
        orbital: OrbitalProps,
        rng: RandomStream,
        config: GeneratorConfig,
    ) -> PhysicalProps:
        ov = spec.physical

        mass = ov.mass_kg if ov.mass_kg is not None else self._sample_mass(spec, archetype, context, rng)

        if ov.radius_m is not None:
            radius = ov.radius_m
            density = density_from_mass_radius(mass, radius)
        else:
            density = rng.range(*archetype.density_range)
            radius = radius_from_mass_density(mass, density)

        tau_yr = tidal_lock_timescale_yr(
            orbital.semi_major_axis_m, mass, radius, context.mass_kg, config.tidal_lock_ref_yr
        )
        locked = context.age_yr > tau_yr

        if ov.rotation_period_s is not None:
            rotation = ov.rotation_period_s
        elif locked:
            rotation = orbital.orbital_period_s
        else:
            rotation = sample_rotation_period(self._rotation_band(mass), self.retrograde_chance, rng)

        tilt = ov.axial_tilt_deg if ov.axial_tilt_deg is not None else sample_axial_tilt(locked, rng)

        rigidity = RIGIDITY_FLUID if archetype.is_gaseous else RIGIDITY_ROCKY
        flattening = ov.oblateness if ov.oblateness is not None else oblateness(rotation, radius, mass, rigidity)

        if ov.magnetic_moment_a_m2 is not None:
            moment = ov.magnetic_moment_a_m2
        else:
            moment = magnetic_moment(mass, rotation, self._dead_dynamo_chance(config), rng)

        # tidal_heating_w is always a part of internal_heat_w, pinned or not
        tidal = self._tidal_heat(context, orbital, radius)
        if ov.internal_heat_w is not None:
            heat = ov.internal_heat_w
            tidal = min(tidal, max(heat, 0.0))
        else:
            heat = radiogenic_heat(mass, context.age_gyr) + tidal

        return PhysicalProps(
            mass_kg=mass,
            radius_m=radius,
            density_kg_m3=density,
            rotation_period_s=rotation,
            axial_tilt_deg=tilt,
            oblateness=flattening,
            magnetic_moment_a_m2=moment,
            internal_heat_w=heat,
            tidal_heating_w=tidal,
            tidally_locked=locked,
        )

    # --------------------
    # Kind hooks
    # --------------------
    def _sample_mass(self, spec, archetype, context, rng) -> float:
        return rng.log_range(*SIZE_TABLE[archetype.size_category].mass_kg)

    def _rotation_band(self, mass_kg: float):
        return rotation_band_h(mass_kg)

    def _dead_dynamo_chance(self, config: GeneratorConfig) -> float:
        return config.dead_dynamo_planet

    def _tidal_heat(self, context, orbital, radius_m) -> float:
        return 0.0


class PlanetPhysicalGenerator(PhysicalGenerator):
    kind = BodyKind.PLANET


class MoonPhysicalGenerator(PhysicalGenerator):
    kind = BodyKind.MOON

    def _sample_mass(self, spec, archetype, context, rng) -> float:
        mass = super()._sample_mass(spec, archetype, context, rng)
        return min(mass, MOON_MAX_PARENT_MASS_FRACTION * context.mass_kg)

    def _dead_dynamo_chance(self, config: GeneratorConfig) -> float:
        return config.dead_dynamo_moon

    def _tidal_heat(self, context, orbital, radius_m) -> float:
        return tidal_heating(context.mass_kg, radius_m, orbital.eccentricity, orbital.semi_major_axis_m)


class AsteroidPhysicalGenerator(PhysicalGenerator):
    kind = BodyKind.ASTEROID
    retrograde_chance = 0.3

    def _sample_mass(self, spec, archetype, context, rng) -> float:
        band = ASTEROID_LARGE_MASS_KG if spec.is_large else ASTEROID_SMALL_MASS_KG
        return rng.log_range(*band)

    def _rotation_band(self, mass_kg: float):
        return ASTEROID_ROTATION_H


PHYSICAL_GENERATORS = {
    BodyKind.PLANET: PlanetPhysicalGenerator(),
    BodyKind.MOON: MoonPhysicalGenerator(),
    BodyKind.ASTEROID: AsteroidPhysicalGenerator(),
}


__all__ = [
    "PhysicalGenerator",
    "PlanetPhysicalGenerator",
    "MoonPhysicalGenerator",
    "AsteroidPhysicalGenerator",
    "PHYSICAL_GENERATORS",
    "MOON_MAX_PARENT_MASS_FRACTION",
]
