"""
Body Assembly
=============

Archetype selection, the stage pipeline, identity and provenance for
single bodies, plus replay/verification and population generation.
"""

from .assembler import (
    BodyAssembler,
    generate_asteroid,
    generate_moon,
    generate_planet,
    replay,
    select_archetype,
    verify,
)
from .population import FRAME_COLUMNS, generate_population, population_frame

__all__ = [
    "BodyAssembler",
    "select_archetype",
    "generate_planet",
    "generate_moon",
    "generate_asteroid",
    "replay",
    "verify",
    "generate_population",
    "population_frame",
    "FRAME_COLUMNS",
]
