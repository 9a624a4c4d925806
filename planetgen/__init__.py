"""
Planetgen
=========

Seeded, reproducible procedural generation of planets, moons and
asteroids with physically plausible properties.

Subpackages:
- planetgen.core       : constants, random stream, archetypes, context, records
- planetgen.orbital    : orbital placement (Roche / Hill bounded)
- planetgen.physical   : mass, radius, spin, tidal locking, field, heat
- planetgen.atmosphere : Jeans retention, composition, pressure, greenhouse
- planetgen.surface    : albedo, temperature, surface type, features
- planetgen.rings      : ring bands, resonance gaps, ring mass
- planetgen.assembly   : body assembler, replay, population generation
"""

__all__ = [
    "core",
    "orbital",
    "physical",
    "atmosphere",
    "surface",
    "rings",
    "assembly",
]

__version__ = "0.1.0"
