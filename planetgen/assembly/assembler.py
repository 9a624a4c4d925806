# planetgen/assembly/assembler.py
"""
Body Assembler
==============

Runs the fixed pipeline for one body:

    archetype -> orbital -> physical -> atmosphere -> surface / rings
              -> identity + provenance -> CelestialBody

High-level API:
    BodyAssembler(config).generate(spec, context, rng=None) -> CelestialBody | None

If no stream is passed, one is seeded from `spec.seed`. The stream
position at entry is recorded in the provenance so the body can be
replayed exactly (`replay`, `verify`).

Precondition failures (e.g. a moon asked for around a star) are logged
and reported as None; callers must check for it.
"""

from __future__ import annotations

import dataclasses
import logging
from typing import Optional

from planetgen.atmosphere.generator import AtmosphereGenerator
from planetgen.core.archetypes import (
    ASTEROID_BELT_AU,
    ASTEROID_TYPE_WEIGHTS,
    GIANT_MOON_SIZE_WEIGHTS,
    PLANET_SIZE_WEIGHTS,
    ROCKY_MOON_SIZE_WEIGHTS,
    ZONE_WEIGHTS,
    Archetype,
    BodyKind,
    zone_for_temperature,
)
from planetgen.core.config import GeneratorConfig, default_generator_config
from planetgen.core.constants import AU_M
from planetgen.core.context import ParentContext
from planetgen.core.errors import PreconditionError
from planetgen.core.models import CelestialBody, Provenance
from planetgen.core.naming import body_id, generate_name
from planetgen.core.rng import RandomStream
from planetgen.core.spec import BodySpec
from planetgen.orbital.generator import ORBITAL_GENERATORS
from planetgen.physical.generator import PHYSICAL_GENERATORS
from planetgen.rings.generator import RingSystemGenerator
from planetgen.surface.generator import SurfaceGenerator

logger = logging.getLogger(__name__)

ZONE_PROBE_ALBEDO = 0.3


# ============================================================
# Archetype selection
# ============================================================

def select_archetype(spec: BodySpec, context: ParentContext, rng: RandomStream) -> Archetype:
    """
    planet   : size roll, zone roll
    moon     : size roll (weights by parent type); zone from the parent's T_eq
    asteroid : type roll; zone from T_eq at mid-belt
    Pinned categories skip their roll.
    """
    if spec.kind is BodyKind.PLANET:
        size = spec.size_category or rng.weighted_choice(PLANET_SIZE_WEIGHTS)
        zone = spec.zone or rng.weighted_choice(ZONE_WEIGHTS)
        return Archetype(kind=spec.kind, zone=zone, size_category=size)

    if spec.kind is BodyKind.MOON:
        if context.is_star:
            raise PreconditionError(f"moon requested around star {context.name!r}; a planet parent is required.")
        if context.star_mass_kg is None:
            raise PreconditionError(f"parent {context.name!r} is missing the star mass.")
        weights = GIANT_MOON_SIZE_WEIGHTS if context.is_gaseous else ROCKY_MOON_SIZE_WEIGHTS
        size = spec.size_category or rng.weighted_choice(weights)
        zone = spec.zone or zone_for_temperature(context.equilibrium_temperature(ZONE_PROBE_ALBEDO))
        return Archetype(kind=spec.kind, zone=zone, size_category=size)

    asteroid_type = spec.asteroid_type or rng.weighted_choice(ASTEROID_TYPE_WEIGHTS)
    if spec.zone is not None:
        zone = spec.zone
    else:
        mid_belt_m = 0.5 * (ASTEROID_BELT_AU[0] + ASTEROID_BELT_AU[1]) * AU_M
        zone = zone_for_temperature(context.body_temperature(ZONE_PROBE_ALBEDO, mid_belt_m))
    return Archetype(kind=spec.kind, zone=zone, asteroid_type=asteroid_type)


# ============================================================
# Assembler
# ============================================================

class BodyAssembler:
    """
    Kind-agnostic orchestrator over one generator per stage.

    Stage generators hold no state between calls, so one assembler can
    serve any number of bodies (and threads), each with its own stream.
    """

    def __init__(
        self,
        config: Optional[GeneratorConfig] = None,
        orbital=None,
        physical=None,
        atmosphere: Optional[AtmosphereGenerator] = None,
        surface: Optional[SurfaceGenerator] = None,
        rings: Optional[RingSystemGenerator] = None,
    ):
        self.config = config or default_generator_config()
        self.orbital = orbital or ORBITAL_GENERATORS
        self.physical = physical or PHYSICAL_GENERATORS
        self.atmosphere = atmosphere or AtmosphereGenerator()
        self.surface = surface or SurfaceGenerator()
        self.rings = rings or RingSystemGenerator()

    def generate(
        self,
        spec: BodySpec,
        context: ParentContext,
        rng: Optional[RandomStream] = None,
    ) -> Optional[CelestialBody]:
        if rng is None:
            rng = RandomStream(spec.seed)
        try:
            return self._assemble(spec, context, rng)
        except PreconditionError as exc:
            logger.warning("cannot generate %s (seed=%d): %s", spec.kind.value, spec.seed, exc)
            return None

    def _assemble(self, spec: BodySpec, context: ParentContext, rng: RandomStream) -> CelestialBody:
        start = rng.position

        archetype = select_archetype(spec, context, rng)
        orbital = self.orbital[spec.kind].generate(spec, archetype, context, rng)
        physical = self.physical[spec.kind].generate(spec, archetype, context, orbital, rng, self.config)
        atmosphere = self.atmosphere.generate(spec, archetype, context, orbital, physical, rng)
        surface = self.surface.generate(spec, archetype, context, orbital, physical, atmosphere, rng)
        rings = self.rings.generate(spec, archetype, context, orbital, physical, rng, self.config)

        name = spec.name_hint or generate_name(spec.kind, rng)
        provenance = Provenance(
            seed=rng.seed,
            stream_position=start,
            generator_version=self.config.generator_version,
            schema_version=self.config.schema_version,
            spec=spec.to_dict(),
            timestamp=self.config.clock(),
        )
        logger.debug("generated %s %r (seed=%d, draws=%d)", spec.kind.value, name, rng.seed, rng.position - start)

        return CelestialBody(
            id=body_id(spec.kind, rng.seed, start),
            name=name,
            kind=spec.kind,
            physical=physical,
            provenance=provenance,
            size_category=archetype.size_category,
            zone=archetype.zone,
            asteroid_type=archetype.asteroid_type,
            orbital=orbital,
            atmosphere=atmosphere,
            surface=surface,
            rings=rings,
        )


# ============================================================
# Convenience entry points
# ============================================================

def _generate_kind(kind: BodyKind, spec, context, rng, config) -> Optional[CelestialBody]:
    if spec.kind is not kind:
        raise ValueError(f"expected a {kind.value} spec, got {spec.kind.value}.")
    return BodyAssembler(config).generate(spec, context, rng)


def generate_planet(spec, context, rng=None, config=None) -> Optional[CelestialBody]:
    return _generate_kind(BodyKind.PLANET, spec, context, rng, config)


def generate_moon(spec, context, rng=None, config=None) -> Optional[CelestialBody]:
    return _generate_kind(BodyKind.MOON, spec, context, rng, config)


def generate_asteroid(spec, context, rng=None, config=None) -> Optional[CelestialBody]:
    return _generate_kind(BodyKind.ASTEROID, spec, context, rng, config)


# ============================================================
# Replay / verification
# ============================================================

def replay(
    provenance: Provenance,
    context: ParentContext,
    config: Optional[GeneratorConfig] = None,
) -> Optional[CelestialBody]:
    """Regenerate a body from its provenance and the same parent context."""
    assembler = BodyAssembler(config)
    if provenance.generator_version != assembler.config.generator_version:
        logger.warning(
            "replaying a body from generator %s with %s; output may differ",
            provenance.generator_version, assembler.config.generator_version,
        )
    spec = BodySpec.from_dict(provenance.spec)
    rng = RandomStream.positioned(provenance.seed, provenance.stream_position)
    return assembler.generate(spec, context, rng)


def verify(body: CelestialBody, context: ParentContext, config: Optional[GeneratorConfig] = None) -> bool:
    """
    True when replaying `body` reproduces it. The orbital parent reference
    is set after generation, so it is carried over before comparing.
    """
    again = replay(body.provenance, context, config)
    if again is None:
        return False
    if again.orbital is not None and body.orbital is not None:
        again = dataclasses.replace(
            again, orbital=dataclasses.replace(again.orbital, parent_id=body.orbital.parent_id)
        )
    return again == body


__all__ = [
    "BodyAssembler",
    "select_archetype",
    "generate_planet",
    "generate_moon",
    "generate_asteroid",
    "replay",
    "verify",
]
