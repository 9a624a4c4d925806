# planetgen/assembly/population.py
"""
Population Generation
=====================

Many bodies from one master seed. Body `i` gets its own stream seeded
with derive_seed(master_seed, i), so inserting or dropping a spec never
changes the bodies generated for the others.

`population_frame` summarises generated bodies as a pandas DataFrame,
one row per body, for quick inspection and export.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence, Union

import pandas as pd

from planetgen.assembly.assembler import BodyAssembler
from planetgen.core.config import GeneratorConfig
from planetgen.core.constants import AU_M, BAR_PA, M_EARTH_KG, R_EARTH_M, SECONDS_PER_HOUR
from planetgen.core.context import ParentContext
from planetgen.core.models import CelestialBody
from planetgen.core.rng import RandomStream, derive_seed
from planetgen.core.spec import BodySpec

logger = logging.getLogger(__name__)

FRAME_COLUMNS = [
    "id", "name", "kind", "size_category", "zone", "asteroid_type",
    "mass_earth", "radius_earth", "density_kg_m3",
    "semi_major_axis_au", "eccentricity", "inclination_deg",
    "rotation_period_h", "tidally_locked", "axial_tilt_deg",
    "surface_pressure_bar", "atmosphere", "surface_temperature_k", "surface_type",
    "ring_bands", "seed",
]


def generate_population(
    specs: Sequence[BodySpec],
    context: Union[ParentContext, Sequence[ParentContext]],
    master_seed: int,
    config: Optional[GeneratorConfig] = None,
) -> List[CelestialBody]:
    """
    One body per spec, each on its own derived stream. `context` is either
    shared by all specs or given per spec. Bodies whose preconditions fail
    are logged by the assembler and left out.
    """
    if isinstance(context, ParentContext):
        contexts = [context] * len(specs)
    else:
        contexts = list(context)
        if len(contexts) != len(specs):
            raise ValueError("need one parent context per spec.")

    assembler = BodyAssembler(config)
    bodies: List[CelestialBody] = []
    for index, (spec, ctx) in enumerate(zip(specs, contexts)):
        rng = RandomStream(derive_seed(master_seed, index))
        body = assembler.generate(spec, ctx, rng)
        if body is not None:
            bodies.append(body)

    skipped = len(specs) - len(bodies)
    if skipped:
        logger.info("population %d: %d of %d specs produced no body", master_seed, skipped, len(specs))
    return bodies


def _row(body: CelestialBody) -> dict:
    phys = body.physical
    orb = body.orbital
    atm = body.atmosphere
    surf = body.surface
    return {
        "id": body.id,
        "name": body.name,
        "kind": body.kind.value,
        "size_category": body.size_category.value if body.size_category else None,
        "zone": body.zone.value if body.zone else None,
        "asteroid_type": body.asteroid_type.value if body.asteroid_type else None,
        "mass_earth": phys.mass_kg / M_EARTH_KG,
        "radius_earth": phys.radius_m / R_EARTH_M,
        "density_kg_m3": phys.density_kg_m3,
        "semi_major_axis_au": orb.semi_major_axis_m / AU_M if orb else None,
        "eccentricity": orb.eccentricity if orb else None,
        "inclination_deg": orb.inclination_deg if orb else None,
        "rotation_period_h": phys.rotation_period_s / SECONDS_PER_HOUR,
        "tidally_locked": phys.tidally_locked,
        "axial_tilt_deg": phys.axial_tilt_deg,
        "surface_pressure_bar": atm.surface_pressure_pa / BAR_PA if atm else 0.0,
        "atmosphere": atm.classification if atm else None,
        "surface_temperature_k": surf.temperature_k if surf else None,
        "surface_type": surf.surface_type.value if surf else None,
        "ring_bands": len(body.rings.bands) if body.rings else 0,
        "seed": body.provenance.seed,
    }


def population_frame(bodies: Sequence[CelestialBody]) -> pd.DataFrame:
    """Summary table, one row per body, in input order."""
    return pd.DataFrame([_row(b) for b in bodies], columns=FRAME_COLUMNS)


__all__ = ["generate_population", "population_frame", "FRAME_COLUMNS"]
