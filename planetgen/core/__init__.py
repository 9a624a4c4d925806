"""
Core Types & Helpers
====================

Shared by every pipeline stage:
- constants / reference bodies (astropy-derived SI floats)
- RandomStream (seeded, positioned, explicit handle)
- archetype categories and their numeric tables
- ParentContext, BodySpec + overrides, body records
- GeneratorConfig, naming, errors
"""

from .archetypes import (
    Archetype,
    AsteroidType,
    BodyKind,
    OrbitZone,
    RingComplexity,
    SizeCategory,
    SurfaceType,
    nominal_density,
)
from .config import GeneratorConfig, default_generator_config
from .context import ParentContext, context_from_body, planet_context, star_context
from .errors import PlanetgenError, PreconditionError
from .models import (
    AtmosphereProps,
    CelestialBody,
    CryosphereProps,
    HydrosphereProps,
    OrbitalProps,
    PhysicalProps,
    Provenance,
    RingBand,
    RingSystemProps,
    SurfaceProps,
    TerrainProps,
)
from .rng import RandomStream, derive_seed
from .spec import (
    AtmosphereOverrides,
    BodySpec,
    OrbitalOverrides,
    PhysicalOverrides,
    RingOverrides,
    SurfaceOverrides,
    asteroid_spec,
    moon_spec,
    planet_spec,
)

__all__ = [
    # archetypes
    "Archetype",
    "AsteroidType",
    "BodyKind",
    "OrbitZone",
    "RingComplexity",
    "SizeCategory",
    "SurfaceType",
    "nominal_density",
    # config / errors
    "GeneratorConfig",
    "default_generator_config",
    "PlanetgenError",
    "PreconditionError",
    # context
    "ParentContext",
    "star_context",
    "planet_context",
    "context_from_body",
    # records
    "OrbitalProps",
    "PhysicalProps",
    "AtmosphereProps",
    "TerrainProps",
    "HydrosphereProps",
    "CryosphereProps",
    "SurfaceProps",
    "RingBand",
    "RingSystemProps",
    "Provenance",
    "CelestialBody",
    # stream
    "RandomStream",
    "derive_seed",
    # body specs
    "BodySpec",
    "OrbitalOverrides",
    "PhysicalOverrides",
    "AtmosphereOverrides",
    "SurfaceOverrides",
    "RingOverrides",
    "planet_spec",
    "moon_spec",
    "asteroid_spec",
]
