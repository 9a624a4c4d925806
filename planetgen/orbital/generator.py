# planetgen/orbital/generator.py
"""
Orbital Property Generators
===========================

One generator per body kind, all with the same call shape:

    generate(spec, archetype, context, rng) -> OrbitalProps

Placement rules
---------------
- Planets   : zone distance table scaled by sqrt(L); zone eccentricity;
              near-coplanar inclination (u^2 * 5 deg).
- Moons     : log-uniform inside [max(1.5 Roche, 2 R_p), f * R_Hill]
              with f = 0.5 (regular) or 0.7 (captured).
- Asteroids : log-uniform inside the fixed belt; Rayleigh-like
              eccentricity / inclination.

Draw order: a, e, i, node, periapsis, mean anomaly. A pinned override
skips its draw.
"""

from __future__ import annotations

import logging
import math
from typing import Tuple

from planetgen.core.archetypes import (
    ASTEROID_BELT_AU,
    ZONE_TABLE,
    Archetype,
    BodyKind,
)
from planetgen.core.constants import AU_M, orbital_period
from planetgen.core.context import ParentContext
from planetgen.core.errors import PreconditionError
from planetgen.core.models import OrbitalProps
from planetgen.core.rng import RandomStream
from planetgen.core.spec import BodySpec, OrbitalOverrides

logger = logging.getLogger(__name__)

PLANET_MAX_INCLINATION_DEG = 5.0
MOON_REGULAR_HILL_FRACTION = 0.5
MOON_CAPTURED_HILL_FRACTION = 0.7
MOON_ROCHE_FACTOR = 1.5
MOON_PARENT_RADII = 2.0
MOON_FALLBACK_RADII = (2.0, 3.0)
MOON_REGULAR_MAX_ECC = 0.1
MOON_CAPTURED_ECC = (0.1, 0.5)
MOON_REGULAR_MAX_INC_DEG = 5.0
MOON_CAPTURED_MAX_INC_DEG = 180.0
ASTEROID_MAX_ECC = 0.3
ASTEROID_MAX_INC_DEG = 20.0


# ============================================================
# Helpers
# ============================================================

def _pinned_or(value, draw):
    """Override wins; otherwise call `draw()` (which consumes the stream)."""
    return value if value is not None else draw()


def moon_orbit_band(context: ParentContext, moon_density_kg_m3: float, captured: bool) -> Tuple[float, float]:
    """
    Valid semi-major axis band for a moon [m].

    inner = max(1.5 * Roche(rho_moon), 2 * R_parent)
    outer = R_Hill * (0.7 if captured else 0.5)

    A collapsed band (inner >= outer) falls back to [2, 3] parent radii.
    """
    inner = max(MOON_ROCHE_FACTOR * context.roche_limit_m(moon_density_kg_m3), MOON_PARENT_RADII * context.radius_m)
    fraction = MOON_CAPTURED_HILL_FRACTION if captured else MOON_REGULAR_HILL_FRACTION
    outer = context.hill_radius_m() * fraction
    if not inner < outer:
        lo, hi = MOON_FALLBACK_RADII
        logger.debug(
            "%s: moon band collapsed (inner=%.3e m, outer=%.3e m); using %.0f-%.0f parent radii",
            context.name, inner, outer, lo, hi,
        )
        return lo * context.radius_m, hi * context.radius_m
    return inner, outer


def planet_distance_band_m(zone_distance_au: Tuple[float, float], luminosity_lsun: float) -> Tuple[float, float]:
    """Zone distance band scaled by sqrt(L) [m]."""
    scale = math.sqrt(max(luminosity_lsun, 0.0)) or 1.0
    lo, hi = zone_distance_au
    return lo * scale * AU_M, hi * scale * AU_M


# ============================================================
# Generators
# ============================================================

class OrbitalGenerator:
    """Shared angle handling; subclasses place a, e, i."""

    kind: BodyKind

    def generate(
        self,
        spec: BodySpec,
        archetype: Archetype,
        context: ParentContext,
        rng: RandomStream,
    ) -> OrbitalProps:
        ov = spec.orbital
        a, e, i = self._shape(spec, archetype, context, rng)
        node, peri, mean = self._angles(ov, rng)
        return OrbitalProps(
            semi_major_axis_m=a,
            eccentricity=e,
            inclination_deg=i,
            longitude_ascending_node_deg=node,
            argument_periapsis_deg=peri,
            mean_anomaly_deg=mean,
            orbital_period_s=orbital_period(a, context.mass_kg),
        )

    def _shape(self, spec, archetype, context, rng) -> Tuple[float, float, float]:
        raise NotImplementedError

    @staticmethod
    def _angles(ov: OrbitalOverrides, rng: RandomStream) -> Tuple[float, float, float]:
        node = _pinned_or(ov.longitude_ascending_node_deg, lambda: rng.range(0.0, 360.0))
        peri = _pinned_or(ov.argument_periapsis_deg, lambda: rng.range(0.0, 360.0))
        mean = _pinned_or(ov.mean_anomaly_deg, lambda: rng.range(0.0, 360.0))
        return node, peri, mean


class PlanetOrbitalGenerator(OrbitalGenerator):
    kind = BodyKind.PLANET

    def _shape(self, spec, archetype, context, rng):
        ov = spec.orbital
        zone = ZONE_TABLE[archetype.zone]
        lo, hi = planet_distance_band_m(zone.distance_au, context.luminosity_lsun)
        a = _pinned_or(ov.semi_major_axis_m, lambda: rng.log_range(lo, hi))
        e = _pinned_or(ov.eccentricity, lambda: rng.range(*zone.eccentricity))
        i = _pinned_or(ov.inclination_deg, lambda: rng.squared() * PLANET_MAX_INCLINATION_DEG)
        return a, e, i


class MoonOrbitalGenerator(OrbitalGenerator):
    kind = BodyKind.MOON

    def _shape(self, spec, archetype, context, rng):
        if context.is_star or context.star_mass_kg is None:
            raise PreconditionError(f"moon around {context.name!r} needs a planet parent with orbit and star mass.")
        ov = spec.orbital
        lo, hi = moon_orbit_band(context, archetype.nominal_density_kg_m3, spec.captured)
        a = _pinned_or(ov.semi_major_axis_m, lambda: rng.log_range(lo, hi))
        if spec.captured:
            e = _pinned_or(ov.eccentricity, lambda: rng.range(*MOON_CAPTURED_ECC))
            i = _pinned_or(ov.inclination_deg, lambda: rng.range(0.0, MOON_CAPTURED_MAX_INC_DEG))
        else:
            e = _pinned_or(ov.eccentricity, lambda: rng.squared() * MOON_REGULAR_MAX_ECC)
            i = _pinned_or(ov.inclination_deg, lambda: rng.range(0.0, MOON_REGULAR_MAX_INC_DEG))
        return a, e, i


class AsteroidOrbitalGenerator(OrbitalGenerator):
    kind = BodyKind.ASTEROID

    def _shape(self, spec, archetype, context, rng):
        ov = spec.orbital
        lo, hi = ASTEROID_BELT_AU
        a = _pinned_or(ov.semi_major_axis_m, lambda: rng.log_range(lo * AU_M, hi * AU_M))
        e = _pinned_or(ov.eccentricity, lambda: rng.squared() * ASTEROID_MAX_ECC)
        i = _pinned_or(ov.inclination_deg, lambda: rng.squared() * ASTEROID_MAX_INC_DEG)
        return a, e, i


ORBITAL_GENERATORS = {
    BodyKind.PLANET: PlanetOrbitalGenerator(),
    BodyKind.MOON: MoonOrbitalGenerator(),
    BodyKind.ASTEROID: AsteroidOrbitalGenerator(),
}


__all__ = [
    "OrbitalGenerator",
    "PlanetOrbitalGenerator",
    "MoonOrbitalGenerator",
    "AsteroidOrbitalGenerator",
    "ORBITAL_GENERATORS",
    "moon_orbit_band",
    "planet_distance_band_m",
]
